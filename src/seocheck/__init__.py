"""Single-page SEO and technical-health checker."""

__version__ = "0.1.0"

from seocheck.analyzer import WebsiteAnalyzer
from seocheck.config import Config, LoadTimeThresholds
from seocheck.fetcher import FetchError, PageFetcher
from seocheck.link_checker import LinkChecker
from seocheck.models import (
    BrokenLink,
    ErrorReport,
    LoadTime,
    LoadTimeGrade,
    LoadTimeResult,
    PresenceStatus,
    RobotsTxtCheck,
    RobotsTxtStatus,
    SearchConsoleStatus,
    SiteReport,
)

__all__ = [
    # Core
    "WebsiteAnalyzer",
    "PageFetcher",
    "FetchError",
    "LinkChecker",
    "Config",
    "LoadTimeThresholds",
    # Models
    "BrokenLink",
    "ErrorReport",
    "LoadTime",
    "LoadTimeGrade",
    "LoadTimeResult",
    "PresenceStatus",
    "RobotsTxtCheck",
    "RobotsTxtStatus",
    "SearchConsoleStatus",
    "SiteReport",
]
