"""
ipquery - client library for the ipquery.io IP lookup service.

This package looks up geolocation, network and risk metadata for single
IP addresses or batches of them, and discovers the caller's own public
IP address.
"""

from .client import query_ip, query_bulk, query_own_ip
from .exceptions import IPQueryError, NetworkError, DecodeError
from .models import ISPInfo, LocationInfo, RiskInfo, IPInfo

__version__ = "0.1.0"
__author__ = "ipquery"
__license__ = "MIT"

__all__ = [
    "query_ip",
    "query_bulk",
    "query_own_ip",
    "IPQueryError",
    "NetworkError",
    "DecodeError",
    "ISPInfo",
    "LocationInfo",
    "RiskInfo",
    "IPInfo",
]
