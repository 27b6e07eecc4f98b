"""
Configuration management for ipquery.

This module resolves the service endpoint, the optional request timeout
and debug settings from environment variables.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.ipquery.io/"


class Config:
    """Environment-backed configuration for the ipquery clients."""

    def __init__(self, prefix: str = "IPQUERY"):
        """
        Initialize configuration.

        Args:
            prefix: Prefix of the environment variables read by this instance
        """
        self.prefix = prefix

    def _env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return os.getenv(f"{self.prefix}_{key.upper()}", default)

    def get_endpoint(self) -> str:
        """
        Get the base endpoint that lookups are appended to.

        Returns:
            IPQUERY_ENDPOINT if set and non-empty, otherwise the public service URL
        """
        endpoint = (self._env('endpoint') or '').strip()
        if not endpoint:
            return DEFAULT_ENDPOINT

        if not endpoint.startswith('https://'):
            logger.warning(f"Non-HTTPS endpoint configured: {endpoint}")
        return endpoint

    def resolve_endpoint(self, endpoint: Optional[str] = None) -> str:
        """
        Pick the endpoint for a single call.

        Args:
            endpoint: Endpoint given by the caller, if any

        Returns:
            The caller's endpoint unchanged, or the configured default
        """
        if endpoint is None:
            return self.get_endpoint()
        return endpoint

    def get_request_timeout(self) -> Optional[float]:
        """
        Get the opt-in request timeout.

        Returns:
            Timeout in seconds, or None when unset or invalid (no timeout)
        """
        raw = self._env('request_timeout')
        if raw is None or not raw.strip():
            return None

        try:
            timeout = float(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid request timeout: {raw!r}")
            return None

        if timeout <= 0:
            logger.warning(f"Ignoring non-positive request timeout: {raw!r}")
            return None
        return timeout

    def is_debug_mode(self) -> bool:
        """
        Check if debug mode is enabled.

        Returns:
            True if debug mode is enabled
        """
        debug_value = (self._env('debug') or 'false').lower()
        return debug_value in ('true', '1', 'yes', 'on')

    def get_debug_level(self) -> str:
        """
        Get debug level for controlling verbosity.

        Returns:
            Debug level: 'off', 'basic', 'detailed', or 'verbose'
        """
        if not self.is_debug_mode():
            return 'off'

        level = (self._env('debug_level') or 'basic').lower()
        if level in ('basic', 'detailed', 'verbose'):
            return level
        return 'basic'


# Global configuration instance
config = Config()
