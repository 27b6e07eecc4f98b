"""
Asynchronous ipquery.io client.

Coroutine counterparts of the blocking operations in ipquery.client, built
on httpx. Requests, decoding and errors follow the same rules. Calls share
no state, so any number of them may run concurrently; cancelling a call
aborts its in-flight request.
"""

import time
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, List, Optional

import httpx

from .config import config
from .debug import debug_api_call, debug_logger
from .exceptions import NetworkError
from .models import IPInfo, decode_ip_info, decode_ip_info_list

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _client_for_call(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or one that lives for this call only."""
    if client is not None:
        yield client
        return

    async with httpx.AsyncClient(timeout=config.get_request_timeout()) as own_client:
        yield own_client


async def _get(url: str, client: Optional[httpx.AsyncClient]) -> httpx.Response:
    """
    Issue a GET request and translate transport failures.

    Args:
        url: Fully built request URL
        client: Client to send through; a fresh one when None

    Returns:
        The fully read response, whatever its status

    Raises:
        NetworkError: If the request could not be sent or no response arrived
    """
    debug_logger.log_request('GET', url)
    start_time = time.time()

    try:
        async with _client_for_call(client) as http:
            response = await http.get(url)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        logger.debug(f"GET {url} failed: {e}")
        raise NetworkError(url, f"{type(e).__name__}: {e}") from e

    debug_logger.log_response(url, response.status_code, len(response.content), time.time() - start_time)
    return response


@debug_api_call
async def query_ip(ip: str, endpoint: Optional[str] = None,
                   client: Optional[httpx.AsyncClient] = None) -> IPInfo:
    """
    Look up a single IP address.

    Args:
        ip: The address to look up, sent as given
        endpoint: Base endpoint; the configured default when omitted
        client: httpx client to reuse; a per-call client when omitted

    Returns:
        Decoded lookup result

    Raises:
        NetworkError: If the request fails
        DecodeError: If the body is not a valid IPInfo object
    """
    url = f"{config.resolve_endpoint(endpoint)}{ip}"
    response = await _get(url, client)
    return decode_ip_info(response.content, url=url, status_code=response.status_code)


@debug_api_call
async def query_bulk(ips: Iterable[str], endpoint: Optional[str] = None,
                     client: Optional[httpx.AsyncClient] = None) -> List[IPInfo]:
    """
    Look up several IP addresses in one request.

    Args:
        ips: Addresses to look up, comma-joined into the request path
        endpoint: Base endpoint; the configured default when omitted
        client: httpx client to reuse; a per-call client when omitted

    Returns:
        Decoded lookup results in the order the service returned them

    Raises:
        NetworkError: If the request fails
        DecodeError: If the body is not an array of valid IPInfo objects
    """
    url = f"{config.resolve_endpoint(endpoint)}{','.join(ips)}"
    response = await _get(url, client)
    return decode_ip_info_list(response.content, url=url, status_code=response.status_code)


@debug_api_call
async def query_own_ip(endpoint: Optional[str] = None,
                       client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Discover the caller's public IP address.

    Args:
        endpoint: Base endpoint; the configured default when omitted
        client: httpx client to reuse; a per-call client when omitted

    Returns:
        The response body text, verbatim

    Raises:
        NetworkError: If the request fails
    """
    response = await _get(config.resolve_endpoint(endpoint), client)
    return response.text
