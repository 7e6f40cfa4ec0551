"""Utility functions for parsing and formatting.

This package includes helpers for date/time checks and ISO 8601
parsing, and for rendering and extracting Markdown issue sections.
"""

from .date_parser import (
    DEFAULT_TIMEZONE,
    check_form_date,
    check_form_time,
    check_iso_timestamp,
    combine_form_date_and_time,
    format_timestamp,
    parse_iso8601,
    resolve_timezone,
)
from .markdown_export import (
    extract_section,
    has_heading_line,
    render_sections,
    split_at_heading,
)

__all__ = [
    "DEFAULT_TIMEZONE",
    "check_form_date",
    "check_form_time",
    "check_iso_timestamp",
    "combine_form_date_and_time",
    "format_timestamp",
    "parse_iso8601",
    "resolve_timezone",
    "extract_section",
    "has_heading_line",
    "render_sections",
    "split_at_heading",
]
