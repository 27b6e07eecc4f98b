"""
Typed records for ipquery.io responses.

The service answers a lookup with a JSON object describing the queried
address: its network (ISP), location and risk assessment. Any of these
groups, and any field inside them, may be missing or null. Only the echoed
``ip`` is guaranteed.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .exceptions import DecodeError


class _Record(BaseModel):
    """Immutable record with strict JSON types; unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, strict=True, extra='ignore')


class ISPInfo(_Record):
    """Information about the network operator owning an address."""

    asn: Optional[str] = None
    org: Optional[str] = None
    isp: Optional[str] = None


class LocationInfo(_Record):
    """Geographical location of an address."""

    country: Optional[str] = None
    country_code: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    localtime: Optional[str] = None


class RiskInfo(_Record):
    """Anonymization flags and risk assessment of an address."""

    is_mobile: Optional[bool] = None
    is_vpn: Optional[bool] = None
    is_tor: Optional[bool] = None
    is_proxy: Optional[bool] = None
    is_datacenter: Optional[bool] = None
    risk_score: Optional[int] = Field(default=None, ge=0, le=100)


class IPInfo(_Record):
    """Full lookup result for one address."""

    ip: str
    isp: Optional[ISPInfo] = None
    location: Optional[LocationInfo] = None
    risk: Optional[RiskInfo] = None


_IP_INFO_LIST = TypeAdapter(List[IPInfo])


def _describe(error: ValidationError) -> str:
    """Condense a pydantic validation error into a one-line reason."""
    parts = []
    for item in error.errors()[:3]:
        location = '.'.join(str(part) for part in item['loc']) or '<root>'
        parts.append(f"{location}: {item['msg']}")
    if error.error_count() > 3:
        parts.append(f"... (+{error.error_count() - 3} more)")
    return '; '.join(parts)


def decode_ip_info(payload: Union[str, bytes], url: Optional[str] = None,
                   status_code: Optional[int] = None) -> IPInfo:
    """
    Decode a single-address response body.

    Args:
        payload: Raw JSON body
        url: URL the body was fetched from, for error context
        status_code: HTTP status of the response, for error context

    Returns:
        The decoded IPInfo record

    Raises:
        DecodeError: If the body is not valid JSON or does not match IPInfo
    """
    try:
        return IPInfo.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(_describe(e), body=payload, url=url, status_code=status_code) from e


def decode_ip_info_list(payload: Union[str, bytes], url: Optional[str] = None,
                        status_code: Optional[int] = None) -> List[IPInfo]:
    """
    Decode a bulk response body.

    A single malformed element fails the whole body; partially decoded
    lists are never returned.

    Args:
        payload: Raw JSON body, expected to be an array of IPInfo objects
        url: URL the body was fetched from, for error context
        status_code: HTTP status of the response, for error context

    Returns:
        Decoded records in response order

    Raises:
        DecodeError: If the body is not valid JSON or any element does not
            match IPInfo
    """
    try:
        return _IP_INFO_LIST.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(_describe(e), body=payload, url=url, status_code=status_code) from e
