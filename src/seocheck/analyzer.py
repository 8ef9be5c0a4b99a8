"""Main site checker that runs every inspection against one URL."""

import logging
from typing import Optional, Union

from seocheck.config import Config, LoadTimeThresholds, default_thresholds
from seocheck.crawlability import check_robots_txt, has_sitemap_xml
from seocheck.fetcher import FetchError, PageFetcher
from seocheck.inspectors import (
    get_canonical,
    has_amp,
    has_google_analytics,
    has_schema_markup,
    has_search_console,
    is_indexable,
    is_responsive,
)
from seocheck.link_checker import LinkChecker
from seocheck.models import ErrorReport, PresenceStatus, SiteReport
from seocheck.performance import classify_load_time

logger = logging.getLogger(__name__)


class WebsiteAnalyzer:
    """Fetches a page once and assembles every signal into a report."""

    def __init__(
        self,
        config: Optional[Config] = None,
        thresholds: Optional[LoadTimeThresholds] = None,
        fetcher: Optional[PageFetcher] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Request and concurrency settings
            thresholds: Load time band boundaries
            fetcher: Pre-built fetcher, mainly for tests
        """
        self.config = config or Config()
        self.thresholds = thresholds or default_thresholds
        self.fetcher = fetcher or PageFetcher(self.config)
        self.link_checker = LinkChecker(self.fetcher, self.config.max_link_workers)

    def analyze(self, url: str) -> Union[SiteReport, ErrorReport]:
        """Run all checks against a URL.

        If the page itself cannot be fetched, nothing else is attempted and
        an ErrorReport is returned.

        Args:
            url: Target URL including scheme, used verbatim

        Returns:
            SiteReport on success, ErrorReport on primary fetch failure
        """
        logger.info(f"Analyzing {url}")

        try:
            html = self.fetcher.fetch(url)
        except FetchError as e:
            logger.warning(f"Failed to fetch {url}: {e.reason}")
            return ErrorReport(url=url)

        report = SiteReport(url=url)
        report.schema_markup = PresenceStatus.from_bool(has_schema_markup(html))
        report.robots_txt = check_robots_txt(self.fetcher, url)
        report.sitemap_xml = PresenceStatus.from_bool(has_sitemap_xml(self.fetcher, url))
        report.canonical = get_canonical(html)
        report.amp = has_amp(html)
        report.responsive = is_responsive(html)
        report.google_analytics = has_google_analytics(html)
        report.search_console = has_search_console(html)
        report.broken_links = self.link_checker.find_broken_links(html, url)
        report.indexable = is_indexable(html)

        try:
            latency = self.fetcher.measure_latency(url)
        except FetchError as e:
            logger.warning(f"Could not measure load time for {url}: {e.reason}")
        else:
            report.load_time = classify_load_time(latency, self.thresholds)

        logger.info(
            f"Finished {url}: {len(report.broken_links)} broken links, "
            f"robots.txt {report.robots_txt.status.value}"
        )
        return report
