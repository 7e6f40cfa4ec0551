"""Markdown section helpers.

Renders and extracts ``### <label>`` sections, the layout used by
GitHub issue forms. Rendering is deterministic, suitable for diffs.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

HEADING_MARKER = "###"

_HEADING_LINE_RE = re.compile(rf"^[ \t]*{re.escape(HEADING_MARKER)}", re.MULTILINE)


def _heading_pattern(label: str) -> str:
    # The heading must be the whole line so "Organizer" never matches
    # "Organizer link".
    return rf"^{re.escape(HEADING_MARKER)} {re.escape(label)}[ \t]*\r?\n"


def render_sections(sections: Sequence[Tuple[str, str]]) -> str:
    """Render labelled sections into Markdown.

    Args:
        sections: ``(label, value)`` pairs in output order.

    Returns:
        Markdown string starting with a newline and ending with the last
        value (no trailing newline).

    Example:
        >>> render_sections([("Title", "Demo"), ("Notes", "Hi")])
        '\\n### Title\\n\\nDemo\\n\\n### Notes\\n\\nHi'
    """
    parts: List[str] = [""]
    for label, value in sections:
        parts.append(f"{HEADING_MARKER} {label}")
        parts.append("")
        parts.append(value)
        parts.append("")
    if len(parts) > 1:
        parts.pop()
    return "\n".join(parts)


def extract_section(body: str, label: str) -> Optional[str]:
    """Return the trimmed text between a heading and the next heading.

    The value ends at the next line starting with ``###`` or at the end
    of the body. Returns None when the heading is absent.
    """
    pattern = re.compile(
        _heading_pattern(label) + rf"(.*?)(?={_HEADING_LINE_RE.pattern}|\Z)",
        re.MULTILINE | re.DOTALL,
    )
    match = pattern.search(body)
    if match is None:
        return None
    return match.group(1).strip()


def split_at_heading(body: str, label: str) -> Tuple[str, Optional[str]]:
    """Split a body at the first heading for ``label``.

    Returns:
        ``(head, rest)`` where ``head`` is the text before the heading and
        ``rest`` is everything after it, trimmed. When the heading is
        absent the whole body is returned as ``head`` and ``rest`` is None.
    """
    match = re.search(_heading_pattern(label), body, re.MULTILINE)
    if match is None:
        return body, None
    return body[: match.start()], body[match.end() :].strip()


def has_heading_line(value: str) -> bool:
    """True when any line of ``value`` would be read as a section heading."""
    return _HEADING_LINE_RE.search(value) is not None
