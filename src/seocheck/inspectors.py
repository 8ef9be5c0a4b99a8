"""On-page inspectors.

Each inspector is a pure function over the raw HTML of the target page and
parses it independently. A page that BeautifulSoup refuses to parse is
treated as carrying none of the structural signals.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup

from seocheck.constants import (
    AMP_HTML_ATTRIBUTES,
    AMP_RUNTIME_SCRIPT,
    GOOGLE_ANALYTICS_PATTERN,
    JSON_LD_SCRIPT_TYPE,
    NOINDEX_DIRECTIVE,
    SEARCH_CONSOLE_META_NAME,
)

logger = logging.getLogger(__name__)


def parse_document(html: str) -> Optional[BeautifulSoup]:
    """Parse HTML into a read-only document tree.

    Returns:
        The parsed tree, or None if the parser rejected the markup
    """
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        logger.debug(f"Could not parse HTML: {e}")
        return None


def has_schema_markup(html: str) -> bool:
    """Detect JSON-LD, Microdata or RDFa structured data."""
    soup = parse_document(html)
    if soup is None:
        return False

    # JSON-LD
    for script in soup.find_all("script", attrs={"type": JSON_LD_SCRIPT_TYPE}):
        if script.get_text().strip().startswith("{"):
            return True

    # Microdata
    if soup.find(attrs={"itemscope": True}) is not None:
        return True

    # RDFa
    return soup.find(attrs={"typeof": True}) is not None


def get_canonical(html: str) -> str:
    """Return the href of the first canonical link, or an empty string."""
    soup = parse_document(html)
    if soup is None:
        return ""

    canonical = soup.find("link", attrs={"rel": "canonical"})
    if canonical is None:
        return ""
    return canonical.get("href", "")


def has_amp(html: str) -> bool:
    """Detect Accelerated Mobile Pages markup.

    Any one of these is enough: an ``amphtml`` alternate link, an ``amp``
    or ``⚡`` attribute on ``<html>``, or the AMP runtime script.
    """
    soup = parse_document(html)
    if soup is None:
        return False

    for node in soup.find_all(["link", "html", "script"]):
        if node.name == "link" and "amphtml" in (node.get("rel") or []):
            return True
        if node.name == "html" and any(node.has_attr(a) for a in AMP_HTML_ATTRIBUTES):
            return True
        if node.name == "script" and node.get("src") == AMP_RUNTIME_SCRIPT:
            return True

    return False


def is_responsive(html: str) -> bool:
    """True if the page declares a viewport meta tag."""
    soup = parse_document(html)
    if soup is None:
        return False
    return soup.find("meta", attrs={"name": "viewport"}) is not None


def has_google_analytics(html: str) -> bool:
    """True if a Universal Analytics ID appears anywhere in the raw HTML."""
    return GOOGLE_ANALYTICS_PATTERN.search(html) is not None


def has_search_console(html: str) -> bool:
    """True if a Google Search Console verification tag is present."""
    soup = parse_document(html)
    if soup is None:
        return False
    return soup.find("meta", attrs={"name": SEARCH_CONSOLE_META_NAME}) is not None


def is_indexable(html: str) -> bool:
    """Check the robots meta tag for a noindex directive.

    Pages without a robots meta tag (or without a content attribute on it)
    are indexable.
    """
    soup = parse_document(html)
    if soup is None:
        return True

    robots_meta = soup.find("meta", attrs={"name": "robots"})
    if robots_meta is None:
        return True

    content = (robots_meta.get("content") or "").lower()
    return NOINDEX_DIRECTIVE not in content
