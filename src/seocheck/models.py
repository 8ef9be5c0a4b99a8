"""Data models for site checks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from seocheck.constants import (
    FETCH_FAILED_MESSAGE,
    KEY_AMP,
    KEY_BROKEN_LINK_PAGES,
    KEY_BROKEN_LINKS,
    KEY_CANONICAL,
    KEY_ERROR,
    KEY_GOOGLE_ANALYTICS,
    KEY_INDEX_PAGES,
    KEY_LOAD_TIME_GRADE,
    KEY_NON_INDEX_PAGES,
    KEY_RESPONSIVE,
    KEY_ROBOTS_TXT,
    KEY_ROBOTS_TXT_STATUS,
    KEY_SCHEMA_MARKUP,
    KEY_SEARCH_CONSOLE,
    KEY_SEARCH_CONSOLE_STATUS,
    KEY_SITEMAP_XML,
    LOAD_TIME_DEVICES,
    NOT_AVAILABLE,
    load_time_key,
    load_time_result_key,
)


class PresenceStatus(str, Enum):
    """Whether a resource or markup was found."""
    FOUND = "Found"
    NOT_FOUND = "Not Found"

    @classmethod
    def from_bool(cls, found: bool) -> "PresenceStatus":
        return cls.FOUND if found else cls.NOT_FOUND


class RobotsTxtStatus(str, Enum):
    """Outcome of robots.txt validation."""
    VALID = "Valid"
    INVALID = "Invalid"
    NOT_FOUND = "Not Found"


class SearchConsoleStatus(str, Enum):
    """Search Console verification tag status."""
    PRESENT = "Present"
    ABSENT = "Absent"


class LoadTimeResult(str, Enum):
    """Load time band."""
    GOOD = "Good"
    MODERATE = "Moderate"
    POOR = "Poor"


class LoadTimeGrade(str, Enum):
    """Letter grade matching a load time band."""
    A = "A"
    B = "B"
    C = "C"


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class BrokenLink:
    """A link whose target failed to respond at the transport level."""

    href: str  # As written in the page
    url: str  # Resolved URL that was requested


@dataclass
class RobotsTxtCheck:
    """robots.txt content and validation status."""

    status: RobotsTxtStatus
    content: Optional[str] = None


@dataclass
class LoadTime:
    """A single latency measurement and its band."""

    milliseconds: int
    result: LoadTimeResult
    grade: LoadTimeGrade


@dataclass
class SiteReport:
    """All signals gathered for a single URL."""

    url: str
    schema_markup: PresenceStatus = PresenceStatus.NOT_FOUND
    robots_txt: RobotsTxtCheck = field(
        default_factory=lambda: RobotsTxtCheck(status=RobotsTxtStatus.NOT_FOUND)
    )
    sitemap_xml: PresenceStatus = PresenceStatus.NOT_FOUND
    canonical: str = ""
    amp: bool = False
    responsive: bool = False
    google_analytics: bool = False
    search_console: bool = False
    broken_links: list[BrokenLink] = field(default_factory=list)
    indexable: bool = True
    load_time: Optional[LoadTime] = None  # None when the timed fetch failed

    @property
    def search_console_status(self) -> SearchConsoleStatus:
        if self.search_console:
            return SearchConsoleStatus.PRESENT
        return SearchConsoleStatus.ABSENT

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, list[str]]:
        """Render the report as signal name -> list of string values."""
        robots_content = self.robots_txt.content
        details = {
            KEY_SCHEMA_MARKUP: [self.schema_markup.value],
            KEY_ROBOTS_TXT: [
                robots_content if robots_content is not None
                else PresenceStatus.NOT_FOUND.value
            ],
            KEY_ROBOTS_TXT_STATUS: [self.robots_txt.status.value],
            KEY_SITEMAP_XML: [self.sitemap_xml.value],
            KEY_CANONICAL: [self.canonical],
            KEY_AMP: [_flag(self.amp)],
            KEY_RESPONSIVE: [_flag(self.responsive)],
            KEY_GOOGLE_ANALYTICS: [_flag(self.google_analytics)],
            KEY_SEARCH_CONSOLE: [_flag(self.search_console)],
            KEY_SEARCH_CONSOLE_STATUS: [self.search_console_status.value],
            KEY_BROKEN_LINKS: [link.url for link in self.broken_links],
            KEY_BROKEN_LINK_PAGES: [link.href for link in self.broken_links],
            KEY_INDEX_PAGES: [self.url if self.indexable else ""],
            KEY_NON_INDEX_PAGES: ["" if self.indexable else self.url],
        }

        if self.load_time is not None:
            milliseconds = str(self.load_time.milliseconds)
            result = self.load_time.result.value
            grade = self.load_time.grade.value
        else:
            milliseconds = result = grade = NOT_AVAILABLE

        for device in LOAD_TIME_DEVICES:
            details[load_time_key(device)] = [milliseconds]
        for device in LOAD_TIME_DEVICES:
            details[load_time_result_key(device)] = [result]
        details[KEY_LOAD_TIME_GRADE] = [grade]

        return details


@dataclass
class ErrorReport:
    """Report produced when the target page itself could not be fetched."""

    url: str
    message: str = FETCH_FAILED_MESSAGE

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, list[str]]:
        return {KEY_ERROR: [self.message]}
