"""Broken link detection for the links on a single page."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from seocheck.fetcher import FetchError, PageFetcher
from seocheck.inspectors import parse_document
from seocheck.models import BrokenLink

logger = logging.getLogger(__name__)


def resolve_href(href: str, base_url: str) -> str:
    """Resolve a root-relative href against the base URL.

    Only hrefs starting with ``/`` are rewritten, by plain concatenation.
    Everything else (absolute URLs, ``about``, ``#top``, ``mailto:``) is
    requested as written.
    """
    if href.startswith("/"):
        return f"{base_url}{href}"
    return href


def extract_links(html: str, base_url: str) -> List[Tuple[str, str]]:
    """Collect ``(href, resolved_url)`` pairs for every anchor in document order."""
    soup = parse_document(html)
    if soup is None:
        return []

    return [
        (link["href"], resolve_href(link["href"], base_url))
        for link in soup.find_all("a", href=True)
    ]


class LinkChecker:
    """Sends each link a HEAD request and reports the unreachable ones.

    Only transport failures count as broken; a 404 or 500 response is a
    working link as far as this check is concerned.
    """

    def __init__(self, fetcher: PageFetcher, max_workers: Optional[int] = None):
        """Initialize the checker.

        Args:
            fetcher: Fetcher used for the HEAD requests
            max_workers: Cap on in-flight requests (1 runs sequentially)
        """
        self.fetcher = fetcher
        self.max_workers = max(1, max_workers or fetcher.config.max_link_workers)

    def find_broken_links(self, html: str, base_url: str) -> List[BrokenLink]:
        """Return the broken links on a page, in document order.

        Args:
            html: Page HTML
            base_url: URL the page was fetched from

        Returns:
            BrokenLink entries pairing each original href with its requested URL
        """
        links = extract_links(html, base_url)
        if not links:
            return []

        logger.info(f"Checking {len(links)} links with {self.max_workers} workers")

        # map() yields results in submission order regardless of completion order
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            reachable = list(executor.map(self._is_reachable, [url for _, url in links]))

        return [
            BrokenLink(href=href, url=url)
            for (href, url), ok in zip(links, reachable)
            if not ok
        ]

    def _is_reachable(self, url: str) -> bool:
        try:
            self.fetcher.head(url)
        except FetchError as e:
            logger.debug(f"Broken link {url}: {e.reason}")
            return False
        return True
