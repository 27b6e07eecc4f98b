"""
Tests for debug mode functionality.
"""

import unittest
import os
import sys
from io import StringIO
from unittest.mock import patch, MagicMock

import requests

from ipquery.config import config
from ipquery.client import query_ip
from ipquery.debug import debug_logger, debug_api_call
from ipquery.exceptions import NetworkError
from ipquery.models import IPInfo


class TestDebugConfiguration(unittest.TestCase):
    """Test debug configuration functionality."""

    def test_debug_mode_disabled_by_default(self):
        """Test that debug mode is disabled by default."""
        with patch.dict(os.environ, {}, clear=True):
            self.assertFalse(config.is_debug_mode())
            self.assertEqual(config.get_debug_level(), 'off')

    def test_debug_mode_enabled_by_environment(self):
        """Test debug mode enabled by environment variable."""
        test_cases = [
            ('true', True),
            ('1', True),
            ('yes', True),
            ('on', True),
            ('false', False),
            ('0', False),
            ('no', False),
            ('off', False),
        ]

        for value, expected in test_cases:
            with patch.dict(os.environ, {'IPQUERY_DEBUG': value}):
                self.assertEqual(config.is_debug_mode(), expected)

    def test_debug_levels(self):
        """Test different debug levels."""
        with patch.dict(os.environ, {'IPQUERY_DEBUG': 'true'}):
            self.assertEqual(config.get_debug_level(), 'basic')

            for level in ['basic', 'detailed', 'verbose']:
                with patch.dict(os.environ, {'IPQUERY_DEBUG_LEVEL': level}):
                    self.assertEqual(config.get_debug_level(), level)

            with patch.dict(os.environ, {'IPQUERY_DEBUG_LEVEL': 'invalid'}):
                self.assertEqual(config.get_debug_level(), 'basic')


class TestDebugLogger(unittest.TestCase):
    """Test debug logger functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.original_stderr = sys.stderr
        self.captured_stderr = StringIO()
        sys.stderr = self.captured_stderr

    def tearDown(self):
        """Clean up test fixtures."""
        sys.stderr = self.original_stderr

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'true', 'IPQUERY_DEBUG_LEVEL': 'basic'})
    def test_basic_logging(self):
        """Test basic debug logging."""
        debug_logger.log('basic', 'Test message')

        output = self.captured_stderr.getvalue()
        self.assertIn('[DEBUG', output)
        self.assertIn('Test message', output)

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'false'})
    def test_logging_disabled(self):
        """Test that nothing is written when debug mode is off."""
        debug_logger.log('basic', 'Test message')

        self.assertEqual(self.captured_stderr.getvalue(), '')

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'true', 'IPQUERY_DEBUG_LEVEL': 'basic'})
    def test_level_filtering(self):
        """Test that messages above the current level are dropped."""
        debug_logger.log('detailed', 'Detailed message')
        debug_logger.log('verbose', 'Verbose message')

        self.assertEqual(self.captured_stderr.getvalue(), '')

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'true', 'IPQUERY_DEBUG_LEVEL': 'verbose'})
    def test_verbose_dumps_records(self):
        """Test that verbose mode prints decoded records as JSON."""
        debug_logger.log('verbose', 'Record:', {'result': IPInfo(ip='8.8.8.8')})

        output = self.captured_stderr.getvalue()
        self.assertIn('"ip": "8.8.8.8"', output)
        self.assertIn('"risk": null', output)

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'true', 'IPQUERY_DEBUG_LEVEL': 'detailed'})
    def test_detailed_summarizes_data(self):
        """Test that detailed mode summarizes nested data."""
        debug_logger.log('detailed', 'Summary:', {'result': [IPInfo(ip='8.8.8.8'), IPInfo(ip='1.1.1.1')]})

        self.assertIn('result: [2 items]', self.captured_stderr.getvalue())

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'true', 'IPQUERY_DEBUG_LEVEL': 'basic'})
    @patch('requests.get')
    def test_request_and_result_traced(self, mock_get):
        """Test that a lookup traces its request, response and result."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.content = b'{"ip": "8.8.8.8"}'
        mock_get.return_value = mock_response

        query_ip('8.8.8.8')

        output = self.captured_stderr.getvalue()
        self.assertIn("Call: client.query_ip('8.8.8.8')", output)
        self.assertIn('GET https://api.ipquery.io/8.8.8.8', output)
        self.assertIn('HTTP 200, 17 bytes', output)
        self.assertIn('Result: client.query_ip -> IPInfo(8.8.8.8)', output)

    @patch.dict(os.environ, {'IPQUERY_DEBUG': 'true', 'IPQUERY_DEBUG_LEVEL': 'basic'})
    @patch('requests.get')
    def test_error_traced_and_reraised(self, mock_get):
        """Test that failures are traced and still raised."""
        mock_get.side_effect = requests.exceptions.ConnectionError('refused')

        with self.assertRaises(NetworkError):
            query_ip('8.8.8.8')

        self.assertIn('Error: client.query_ip -> NetworkError', self.captured_stderr.getvalue())


class TestDebugDecorator(unittest.TestCase):
    """Test the debug_api_call decorator."""

    def test_passthrough_when_disabled(self):
        """Test the wrapped function behaves identically with debug off."""
        @debug_api_call
        def operation(value):
            return value * 2

        with patch.dict(os.environ, {'IPQUERY_DEBUG': 'false'}):
            self.assertEqual(operation(21), 42)

    def test_preserves_metadata(self):
        """Test that functools.wraps keeps the original name."""
        self.assertEqual(query_ip.__name__, 'query_ip')
        self.assertIn('Look up a single IP address', query_ip.__doc__)


if __name__ == '__main__':
    unittest.main()
