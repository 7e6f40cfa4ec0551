"""Meetup issue body rendering and parsing.

The issue body is a sequence of ``### <label>`` sections. The rendered
form carries a machine-readable timestamp section; issues filed by
people through the issue template carry ``Date`` and ``Time`` sections
instead. Parsing recognises both and reports which shape it found.

Public API:
    - render_meetup_issue_body
    - parse_meetup_issue_body

Usage example:
    body = render_meetup_issue_body(meetup)
    parsed = parse_meetup_issue_body(body)
    assert parsed.result.output == meetup
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .forms import ParsedMeetup, meetup_from_form_values
from .schemas import Meetup, MeetupShape
from .utils import (
    DEFAULT_TIMEZONE,
    extract_section,
    format_timestamp,
    render_sections,
    split_at_heading,
)
from .utils.date_parser import TimezoneLike

logger = logging.getLogger(__name__)

TITLE_LABEL = "Meetup title"
DATE_LABEL = "Date"
TIME_LABEL = "Time"
# Non-ASCII prefix so the marker never collides with a template heading.
TIMESTAMP_LABEL = "🤖 Timestamp"
LOCATION_LABEL = "Street address"
LOCATION_LINK_LABEL = "Maps link for address"
ORGANIZER_LABEL = "Organizer"
ORGANIZER_LINK_LABEL = "Organizer link"
SIGNUP_LINK_LABEL = "Signup link for meetup"
DESCRIPTION_LABEL = "Description"

# Wire field name -> section label, description excluded.
SECTION_LABELS: Dict[str, str] = {
    "title": TITLE_LABEL,
    "date": DATE_LABEL,
    "time": TIME_LABEL,
    "timestamp": TIMESTAMP_LABEL,
    "location": LOCATION_LABEL,
    "locationLink": LOCATION_LINK_LABEL,
    "organizer": ORGANIZER_LABEL,
    "organizerLink": ORGANIZER_LINK_LABEL,
    "signupLink": SIGNUP_LINK_LABEL,
}


def render_meetup_issue_body(meetup: Meetup) -> str:
    """Render a meetup into the issue body.

    Sections appear in a fixed order with the description last, since
    it is free text that may contain blank lines or headings.
    """

    return render_sections(
        [
            (TITLE_LABEL, meetup.title),
            (TIMESTAMP_LABEL, format_timestamp(meetup.date)),
            (LOCATION_LABEL, meetup.location),
            (LOCATION_LINK_LABEL, meetup.location_link),
            (ORGANIZER_LABEL, meetup.organizer),
            (ORGANIZER_LINK_LABEL, meetup.organizer_link),
            (SIGNUP_LINK_LABEL, meetup.signup_link),
            (DESCRIPTION_LABEL, meetup.description),
        ]
    )


def extract_meetup_issue_values(body: str) -> Dict[str, Optional[str]]:
    """Pull raw section values out of an issue body.

    Each label is searched on its own, so section order does not matter,
    but headings are matched exactly. Everything after the description
    heading belongs to the description, so other labels are only looked
    up before it. Absent sections come back as None; this never raises.
    """

    head, description = split_at_heading(body, DESCRIPTION_LABEL)
    values: Dict[str, Optional[str]] = {
        field: extract_section(head, label) for field, label in SECTION_LABELS.items()
    }
    values["description"] = description
    return values


def infer_issue_shape(values: Dict[str, Optional[str]]) -> MeetupShape:
    """Human when both date and time sections exist, robot otherwise."""

    if values.get("date") is not None and values.get("time") is not None:
        return "human"
    return "robot"


def parse_meetup_issue_body(
    body: str, *, tz: TimezoneLike = DEFAULT_TIMEZONE
) -> ParsedMeetup:
    """Parse an issue body back into a meetup.

    Args:
        body: Issue body text.
        tz: Timezone for human ``Date``/``Time`` sections.

    Returns:
        The inferred shape and the validation result. Missing or
        malformed sections are reported as field errors.
    """

    values = extract_meetup_issue_values(body)
    shape = infer_issue_shape(values)
    logger.debug("Parsing meetup issue body as %s shape", shape)

    if shape == "human":
        values.pop("timestamp", None)
    else:
        values.pop("date", None)
        values.pop("time", None)
    return meetup_from_form_values(values, shape=shape, tz=tz)
