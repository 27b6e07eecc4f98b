"""
Shared fixtures for the ipquery test suite.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_ipquery_environment(monkeypatch):
    """Run every test without IPQUERY_* settings from the outer environment."""
    for key in list(os.environ):
        if key.startswith('IPQUERY_') and key != 'IPQUERY_LIVE_TESTS':
            monkeypatch.delenv(key, raising=False)
