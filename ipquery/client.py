"""
Blocking ipquery.io client.

Each operation appends the IP address (or comma-joined addresses) to the
base endpoint, issues exactly one GET with requests, and decodes the body.
Status codes are not checked: a body that does not decode surfaces as
DecodeError whatever the status was.
"""

import time
import logging
from typing import Iterable, List, Optional

import requests

from .config import config
from .debug import debug_api_call, debug_logger
from .exceptions import NetworkError
from .models import IPInfo, decode_ip_info, decode_ip_info_list

logger = logging.getLogger(__name__)


def _get(url: str) -> requests.Response:
    """
    Issue a GET request and translate transport failures.

    Args:
        url: Fully built request URL

    Returns:
        The response, whatever its status

    Raises:
        NetworkError: If the request could not be sent or no response arrived
    """
    debug_logger.log_request('GET', url)
    start_time = time.time()

    try:
        response = requests.get(url, timeout=config.get_request_timeout())
    except requests.exceptions.RequestException as e:
        logger.debug(f"GET {url} failed: {e}")
        raise NetworkError(url, f"{type(e).__name__}: {e}") from e

    debug_logger.log_response(url, response.status_code, len(response.content), time.time() - start_time)
    return response


@debug_api_call
def query_ip(ip: str, endpoint: Optional[str] = None) -> IPInfo:
    """
    Look up a single IP address.

    Args:
        ip: The address to look up, sent as given
        endpoint: Base endpoint; the configured default when omitted

    Returns:
        Decoded lookup result

    Raises:
        NetworkError: If the request fails
        DecodeError: If the body is not a valid IPInfo object
    """
    url = f"{config.resolve_endpoint(endpoint)}{ip}"
    response = _get(url)
    return decode_ip_info(response.content, url=url, status_code=response.status_code)


@debug_api_call
def query_bulk(ips: Iterable[str], endpoint: Optional[str] = None) -> List[IPInfo]:
    """
    Look up several IP addresses in one request.

    An empty sequence is not rejected; the bare endpoint is requested.

    Args:
        ips: Addresses to look up, comma-joined into the request path
        endpoint: Base endpoint; the configured default when omitted

    Returns:
        Decoded lookup results in the order the service returned them

    Raises:
        NetworkError: If the request fails
        DecodeError: If the body is not an array of valid IPInfo objects
    """
    url = f"{config.resolve_endpoint(endpoint)}{','.join(ips)}"
    response = _get(url)
    return decode_ip_info_list(response.content, url=url, status_code=response.status_code)


@debug_api_call
def query_own_ip(endpoint: Optional[str] = None) -> str:
    """
    Discover the caller's public IP address.

    Args:
        endpoint: Base endpoint; the configured default when omitted

    Returns:
        The response body text, verbatim

    Raises:
        NetworkError: If the request fails
    """
    response = _get(config.resolve_endpoint(endpoint))
    return response.text
