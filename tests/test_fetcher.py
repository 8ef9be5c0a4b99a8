# tests/test_fetcher.py
"""Tests for the HTTP fetcher."""

from unittest.mock import Mock, patch

import pytest
import requests

from seocheck.config import Config, DEFAULT_USER_AGENT
from seocheck.fetcher import FetchError, PageFetcher


class TestPageFetcher:
    """Test cases for PageFetcher."""

    def test_fetcher_initialization(self):
        """Test fetcher can be initialized with defaults."""
        fetcher = PageFetcher()
        assert fetcher.session.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert fetcher.timeout == 30

    def test_custom_user_agent_and_timeout(self):
        """Test the configured user agent and timeout are applied."""
        fetcher = PageFetcher(Config(user_agent="CustomBot/1.0", timeout=5))
        assert fetcher.session.headers["User-Agent"] == "CustomBot/1.0"
        assert fetcher.timeout == 5

    def test_fetch_returns_body(self, routed_fetcher):
        """Test fetch returns the response body."""
        fetcher = routed_fetcher({"https://example.com": "<html>hi</html>"})
        assert fetcher.fetch("https://example.com") == "<html>hi</html>"

    def test_fetch_ignores_status_code(self, routed_fetcher):
        """Test an HTTP error status still returns the body."""
        fetcher = routed_fetcher({"https://example.com/x": ("missing", 404)})
        assert fetcher.fetch("https://example.com/x") == "missing"

    def test_fetch_passes_timeout_and_redirects(self):
        """Test requests carry the timeout and follow redirects."""
        session = requests.Session()
        session.request = Mock(return_value=Mock(text="ok", status_code=200))
        fetcher = PageFetcher(Config(timeout=7), session=session)

        fetcher.fetch("https://example.com")

        session.request.assert_called_once_with(
            "GET", "https://example.com", timeout=7, allow_redirects=True
        )

    @pytest.mark.parametrize("error, reason", [
        (requests.exceptions.ConnectionError("refused"), "Connection error"),
        (requests.exceptions.Timeout("slow"), "Request timeout after 30s"),
        (requests.exceptions.MissingSchema("no scheme"), "no scheme"),
        (ValueError("bad host"), "Invalid URL"),
    ])
    def test_transport_errors_raise_fetch_error(self, routed_fetcher, error, reason):
        """Test transport failures surface as FetchError."""
        fetcher = routed_fetcher({"https://example.com": error})

        with pytest.raises(FetchError) as exc_info:
            fetcher.fetch("https://example.com")

        assert exc_info.value.url == "https://example.com"
        assert reason in exc_info.value.reason

    def test_head_returns_status(self, routed_fetcher):
        """Test head returns the response status code."""
        fetcher = routed_fetcher({"https://example.com/a": ("", 301)})
        assert fetcher.head("https://example.com/a") == 301
        assert fetcher.session.calls == [("HEAD", "https://example.com/a")]

    def test_head_failure(self, routed_fetcher):
        """Test a failed HEAD raises FetchError."""
        fetcher = routed_fetcher({})
        with pytest.raises(FetchError):
            fetcher.head("https://example.com/gone")

    def test_measure_latency(self, routed_fetcher):
        """Test latency is measured in whole milliseconds."""
        fetcher = routed_fetcher({"https://example.com": "<html></html>"})

        with patch("seocheck.fetcher.time.perf_counter", side_effect=[10.0, 11.5]):
            assert fetcher.measure_latency("https://example.com") == 1500

    def test_measure_latency_failure(self, routed_fetcher):
        """Test a failed latency fetch raises FetchError."""
        fetcher = routed_fetcher({})
        with pytest.raises(FetchError):
            fetcher.measure_latency("https://example.com")

    def test_context_manager_closes_session(self):
        """Test leaving the context closes the session."""
        session = Mock()
        session.headers = {}
        with PageFetcher(session=session) as fetcher:
            assert fetcher.session is session
        session.close.assert_called_once()

    @pytest.mark.integration
    def test_fetch_real_url(self):
        """Test fetching a live page."""
        with PageFetcher() as fetcher:
            assert "Example Domain" in fetcher.fetch("https://example.com")

    @pytest.mark.integration
    def test_fetch_unresolvable_host(self):
        """Test an unresolvable host raises FetchError."""
        with PageFetcher(Config(timeout=10)) as fetcher:
            with pytest.raises(FetchError):
                fetcher.fetch("https://this-domain-does-not-exist-12345.com")
