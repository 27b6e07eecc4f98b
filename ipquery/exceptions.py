"""Exceptions raised by the ipquery clients.

Every failure surfaces as a subclass of IPQueryError: NetworkError when no
response was received, DecodeError when one was received but its body does
not have the expected shape.
"""

from typing import Optional, Union


class IPQueryError(Exception):
    """Base class for all ipquery errors."""


class NetworkError(IPQueryError):
    """Raised when a request could not be sent or no response was received."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the failed URL.

        Args:
            url: The URL the request was sent to.
            reason: Short description of the transport failure.
        """
        self.url = url
        self.reason = reason
        super().__init__(f'Request to {url} failed: {reason}')


class DecodeError(IPQueryError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, reason: str, body: Union[str, bytes, None] = None,
                 url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        """Initialize the exception with the decode failure and its context.

        Args:
            reason: What was wrong with the body.
            body: The raw response body, kept for diagnostics.
            url: The URL that produced the body, when known.
            status_code: The HTTP status of the response, when known.
        """
        self.reason = reason
        self.body = body
        self.url = url
        self.status_code = status_code

        message = 'Could not decode response'
        if url:
            message += f' from {url}'
        if status_code is not None:
            message += f' (HTTP {status_code})'
        super().__init__(f'{message}: {reason}')
