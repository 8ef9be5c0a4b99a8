# tests/conftest.py
"""Shared fixtures: a requests.Session whose transport is a routing table."""

from unittest.mock import Mock

import pytest
import requests

from seocheck.config import Config
from seocheck.fetcher import PageFetcher


def make_response(text: str = "", status_code: int = 200) -> Mock:
    """Build a mock requests.Response-like object."""
    response = Mock()
    response.text = text
    response.status_code = status_code
    return response


def make_session(routes: dict) -> requests.Session:
    """Create a session that answers from ``routes`` instead of the network.

    Route values are either a response body (str), a ``(body, status)``
    tuple, or an exception instance to raise. Unknown URLs behave like a
    refused connection.
    """
    session = requests.Session()
    calls = []

    def request(method, url, **kwargs):
        calls.append((method, url))
        outcome = routes.get(url)
        if outcome is None:
            raise requests.exceptions.ConnectionError(f"Connection refused: {url}")
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, tuple):
            return make_response(*outcome)
        return make_response(outcome)

    session.request = request
    session.calls = calls
    return session


@pytest.fixture
def routed_fetcher():
    """Factory for a PageFetcher backed by a routing table."""
    def _make(routes: dict, **config_overrides) -> PageFetcher:
        return PageFetcher(Config(**config_overrides), session=make_session(routes))
    return _make
