"""
Crawlability checks

Checks the well-known crawler resources next to the target URL:
- robots.txt presence and line-level validation
- sitemap.xml presence
"""

import logging

from seocheck.constants import (
    ROBOTS_TXT_COMMENT_PREFIX,
    ROBOTS_TXT_DIRECTIVES,
    ROBOTS_TXT_PATH,
    SITEMAP_XML_PATH,
)
from seocheck.fetcher import FetchError, PageFetcher
from seocheck.models import RobotsTxtCheck, RobotsTxtStatus

logger = logging.getLogger(__name__)


def is_valid_robots_txt(content: str) -> bool:
    """Validate robots.txt line by line.

    Every line must be blank, a ``#`` comment, or start with one of
    ``User-agent:``, ``Disallow:`` or ``Allow:`` (case-sensitive). A single
    other line, ``Sitemap:`` included, makes the whole file invalid.

    Lines end at ``\\n`` only (a trailing ``\\r`` is dropped); other Unicode
    line separators stay inside the line.
    """
    for line in content.split("\n"):
        line = line.rstrip("\r")
        if line.startswith(ROBOTS_TXT_DIRECTIVES):
            continue
        if not line.strip() or line.startswith(ROBOTS_TXT_COMMENT_PREFIX):
            continue
        logger.debug(f"Unrecognized robots.txt line: {line!r}")
        return False
    return True


def check_robots_txt(fetcher: PageFetcher, url: str) -> RobotsTxtCheck:
    """Fetch ``{url}/robots.txt`` and validate it.

    A transport failure means Not Found, never Invalid.
    """
    robots_url = f"{url}{ROBOTS_TXT_PATH}"
    try:
        content = fetcher.fetch(robots_url)
    except FetchError as e:
        logger.debug(f"robots.txt not reachable: {e}")
        return RobotsTxtCheck(status=RobotsTxtStatus.NOT_FOUND)

    status = RobotsTxtStatus.VALID if is_valid_robots_txt(content) else RobotsTxtStatus.INVALID
    return RobotsTxtCheck(status=status, content=content)


def has_sitemap_xml(fetcher: PageFetcher, url: str) -> bool:
    """True if ``{url}/sitemap.xml`` responds. The status code is ignored."""
    sitemap_url = f"{url}{SITEMAP_XML_PATH}"
    try:
        fetcher.fetch(sitemap_url)
    except FetchError as e:
        logger.debug(f"sitemap.xml not reachable: {e}")
        return False
    return True
