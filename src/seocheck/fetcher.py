"""HTTP fetcher for the target page and its well-known resources."""

import logging
import time
from typing import Optional

import requests

from seocheck.config import Config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a request fails at the transport level."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class PageFetcher:
    """Issues blocking GET/HEAD requests through a shared session.

    HTTP status codes are never inspected: any response that arrives with
    a readable body counts as a success. Only transport failures (DNS,
    connection, timeout, malformed URL) raise FetchError.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the fetcher.

        Args:
            config: Request settings (user agent, timeout)
            session: Pre-built session, mainly for tests
        """
        self.config = config or Config()
        self.timeout = self.config.timeout
        self.session = session or requests.Session()

        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        })

    def fetch(self, url: str) -> str:
        """GET a URL and return its body as text.

        Args:
            url: The URL to fetch

        Returns:
            Decoded response body

        Raises:
            FetchError: On any transport-level failure
        """
        response = self._request("GET", url)
        return response.text

    def measure_latency(self, url: str) -> int:
        """Time a full GET of a URL.

        The clock covers sending the request and reading the whole body.
        The body itself is discarded.

        Args:
            url: The URL to time

        Returns:
            Elapsed wall-clock time in whole milliseconds

        Raises:
            FetchError: On any transport-level failure
        """
        start_time = time.perf_counter()
        self._request("GET", url)
        elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        logger.debug(f"Loaded {url} in {elapsed_ms}ms")
        return elapsed_ms

    def head(self, url: str) -> int:
        """Send a HEAD request, following redirects.

        Returns:
            The final HTTP status code (informational only)

        Raises:
            FetchError: On any transport-level failure
        """
        response = self._request("HEAD", url)
        return response.status_code

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, url: str) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            return self.session.request(
                method,
                url,
                timeout=self.timeout,
                allow_redirects=True,
            )
        except requests.exceptions.Timeout:
            raise FetchError(url, f"Request timeout after {self.timeout}s")
        except requests.exceptions.ConnectionError as e:
            raise FetchError(url, f"Connection error: {str(e)}")
        except requests.exceptions.RequestException as e:
            raise FetchError(url, str(e))
        except ValueError as e:
            # urllib3 rejects some malformed URLs before requests can wrap them
            raise FetchError(url, f"Invalid URL: {str(e)}")
