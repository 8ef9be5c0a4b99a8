# src/seocheck/constants.py
"""Centralized constants for the site checker.

Fixed detection strings and the report vocabulary live here. For
user-configurable values, see config.py and LoadTimeThresholds.
"""

import re

# =============================================================================
# Well-known paths
# =============================================================================

ROBOTS_TXT_PATH = "/robots.txt"
SITEMAP_XML_PATH = "/sitemap.xml"


# =============================================================================
# robots.txt
# =============================================================================

# Exact, case-sensitive line prefixes accepted by the validator
ROBOTS_TXT_DIRECTIVES = ("User-agent:", "Disallow:", "Allow:")

ROBOTS_TXT_COMMENT_PREFIX = "#"


# =============================================================================
# HTML markers
# =============================================================================

JSON_LD_SCRIPT_TYPE = "application/ld+json"

AMP_RUNTIME_SCRIPT = "https://cdn.ampproject.org/v0.js"

# Attributes on <html> that mark an AMP document
AMP_HTML_ATTRIBUTES = ("amp", "⚡")

# Legacy Universal Analytics property ID (GA4 "G-" IDs are not matched)
GOOGLE_ANALYTICS_PATTERN = re.compile(r"UA-\d+-\d+")

SEARCH_CONSOLE_META_NAME = "google-site-verification"

NOINDEX_DIRECTIVE = "noindex"


# =============================================================================
# Report keys
# =============================================================================

KEY_SCHEMA_MARKUP = "Schema Markup"
KEY_ROBOTS_TXT = "Robots.txt"
KEY_ROBOTS_TXT_STATUS = "Robots.txt Status"
KEY_SITEMAP_XML = "Sitemap.xml"
KEY_CANONICAL = "Canonical Tags"
KEY_AMP = "AMP"
KEY_RESPONSIVE = "Responsive"
KEY_GOOGLE_ANALYTICS = "Google Analytics"
KEY_SEARCH_CONSOLE = "Search Console"
KEY_SEARCH_CONSOLE_STATUS = "Search Console Status"
KEY_BROKEN_LINKS = "Broken Links"
KEY_BROKEN_LINK_PAGES = "Broken Link Pages"
KEY_INDEX_PAGES = "Index Pages"
KEY_NON_INDEX_PAGES = "Non Index Pages"
KEY_LOAD_TIME_GRADE = "Load Time Grade"
KEY_ERROR = "error"

# The single latency measurement is reported for each of these devices
LOAD_TIME_DEVICES = ("Desktop", "Mobile", "Tablet")


def load_time_key(device: str) -> str:
    """Report key holding the raw load time for a device."""
    return f"{device} Load Time"


def load_time_result_key(device: str) -> str:
    """Report key holding the load time band for a device."""
    return f"{device} Load Time Result"


# =============================================================================
# Output vocabulary
# =============================================================================

NOT_AVAILABLE = "N/A"

FETCH_FAILED_MESSAGE = "Failed to retrieve website content"
