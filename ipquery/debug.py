"""
Debug utilities for ipquery.

This module traces outgoing requests, responses, decoded results and
failures to stderr when debug mode is enabled.
"""

import sys
import time
import json
import inspect
from typing import Any, Dict, Optional, Callable
from functools import wraps

from pydantic import BaseModel

from .config import config


class DebugLogger:
    """Debug logger for request-level diagnostics."""

    def __init__(self):
        """Initialize debug logger."""
        self.start_time = time.time()
        self.request_count = 0

    def log(self, level: str, message: str, data: Optional[Dict[str, Any]] = None):
        """
        Log debug message with optional data.

        Args:
            level: Debug level ('basic', 'detailed', 'verbose')
            message: Debug message
            data: Optional data to include
        """
        if not config.is_debug_mode():
            return

        current_level = config.get_debug_level()

        level_hierarchy = {'basic': 0, 'detailed': 1, 'verbose': 2}
        if level_hierarchy.get(level, 0) > level_hierarchy.get(current_level, 0):
            return

        timestamp = time.time() - self.start_time
        prefix = f"[DEBUG +{timestamp:.3f}s]"

        print(f"{prefix} {message}", file=sys.stderr)

        if data and current_level in ('detailed', 'verbose'):
            self._print_data(data, current_level)

    def _print_data(self, data: Dict[str, Any], level: str):
        """Print debug data with appropriate formatting."""
        data = {key: _plain(value) for key, value in data.items()}
        if level == 'verbose':
            formatted = json.dumps(data, indent=2, default=str)
            for line in formatted.split('\n'):
                print(f"[DEBUG]   {line}", file=sys.stderr)
        else:
            for key, value in data.items():
                if isinstance(value, dict):
                    print(f"[DEBUG]   {key}: {len(value)} items", file=sys.stderr)
                elif isinstance(value, list):
                    print(f"[DEBUG]   {key}: [{len(value)} items]", file=sys.stderr)
                elif isinstance(value, str) and len(value) > 100:
                    print(f"[DEBUG]   {key}: '{value[:97]}...'", file=sys.stderr)
                else:
                    print(f"[DEBUG]   {key}: {value}", file=sys.stderr)

    def log_request(self, method: str, url: str):
        """Log an outgoing request."""
        self.request_count += 1
        self.log('basic', f"Request #{self.request_count}: {method} {url}")

    def log_response(self, url: str, status_code: int, body_size: int, elapsed: float):
        """Log a received response."""
        self.log('basic', f"Response from {url}: HTTP {status_code}, {body_size} bytes ({elapsed:.3f}s)")

    def log_call(self, operation: str, args: tuple = (), kwargs: Dict[str, Any] = None):
        """Log a client operation call."""
        kwargs = kwargs or {}

        args_str = ", ".join(repr(arg) for arg in args[:2])
        if len(args) > 2:
            args_str += f", ... (+{len(args)-2} more)"

        kwargs_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        call_args = ", ".join(filter(None, [args_str, kwargs_str]))

        self.log('basic', f"Call: {operation}({call_args})")

    def log_result(self, operation: str, result: Any, execution_time: float):
        """Log a client operation result."""
        self.log('basic', f"Result: {operation} -> {self._summarize_result(result)} ({execution_time:.3f}s)")
        self.log('detailed', f"Full result data for {operation}:", {'result': result})

    def log_error(self, operation: str, error: Exception, execution_time: float):
        """Log a client operation error."""
        error_type = type(error).__name__
        error_msg = str(error)[:100]

        self.log('basic', f"Error: {operation} -> {error_type}: {error_msg} ({execution_time:.3f}s)")

    def _summarize_result(self, result: Any) -> str:
        """Create a summary of the result for logging."""
        if result is None:
            return "None"
        elif isinstance(result, BaseModel):
            return f"{type(result).__name__}({getattr(result, 'ip', '')})"
        elif isinstance(result, list):
            return f"list({len(result)} items)"
        elif isinstance(result, str):
            return f"str({len(result)} chars)"
        else:
            return type(result).__name__

    def log_config_info(self):
        """Log current configuration in debug mode."""
        if not config.is_debug_mode():
            return

        debug_info = {
            'debug_level': config.get_debug_level(),
            'endpoint': config.get_endpoint(),
            'request_timeout': config.get_request_timeout(),
        }

        self.log('detailed', "Current configuration:", debug_info)


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def debug_api_call(func: Callable) -> Callable:
    """
    Decorator to add debug logging to client operations.

    Works on plain functions and coroutine functions; the wrapped call is
    left untouched when debug mode is off.
    """
    operation = f"{func.__module__.rsplit('.', 1)[-1]}.{func.__name__}"

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            if not config.is_debug_mode():
                return await func(*args, **kwargs)

            debug_logger.log_call(operation, args, kwargs)
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                debug_logger.log_error(operation, e, time.time() - start_time)
                raise
            debug_logger.log_result(operation, result, time.time() - start_time)
            return result

        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        if not config.is_debug_mode():
            return func(*args, **kwargs)

        debug_logger.log_call(operation, args, kwargs)
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            debug_logger.log_error(operation, e, time.time() - start_time)
            raise
        debug_logger.log_result(operation, result, time.time() - start_time)
        return result

    return wrapper


# Global debug logger instance
debug_logger = DebugLogger()
