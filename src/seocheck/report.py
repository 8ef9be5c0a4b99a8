"""Rendering of reports for the console or a file."""

import json
from typing import Dict, List, Union

from seocheck.models import ErrorReport, SiteReport


def format_values(values: List[str]) -> str:
    """Render a value list in debug style, e.g. ``["Found"]``."""
    return json.dumps(values, ensure_ascii=False)


def format_text_report(report: Union[SiteReport, ErrorReport]) -> str:
    """One ``Key: [values]`` line per signal."""
    return "\n".join(
        f"{key}: {format_values(values)}"
        for key, values in report.to_dict().items()
    )


def format_json_report(report: Union[SiteReport, ErrorReport]) -> str:
    """The report mapping as indented JSON."""
    details: Dict[str, List[str]] = report.to_dict()
    return json.dumps(details, indent=2, ensure_ascii=False)


FORMATTERS = {
    "text": format_text_report,
    "json": format_json_report,
}


def render_report(report: Union[SiteReport, ErrorReport], output: str = "text") -> str:
    """Render a report in the named output format."""
    return FORMATTERS[output](report)
