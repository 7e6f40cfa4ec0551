"""MCP tools for validating, rendering and parsing meetups.

Each tool is exposed as a plain Python function to facilitate testing.
An MCP runtime adapter (see `server.py`) registers these with the
FastMCP runtime. The tool functions return Pydantic models.
"""

from .meetups import (
    parse_meetup_issue,
    render_meetup_issue,
    render_meetup_pull_request,
    validate_meetup_form,
)

__all__ = [
    "validate_meetup_form",
    "render_meetup_issue",
    "parse_meetup_issue",
    "render_meetup_pull_request",
]
