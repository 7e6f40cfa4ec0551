"""Meetup issue package.

Converts meetup submissions into a canonical `Meetup`, renders it as a
tracking issue body and parses issue bodies back into meetups. Two
submission shapes are supported: "human" (separate date and time) and
"robot" (a single ISO 8601 timestamp).

Usage example:
    from meetup_issue import meetup_from_form_values, render_meetup_issue_body
    parsed = meetup_from_form_values(values)
    body = render_meetup_issue_body(parsed.result.unwrap())

Note: The tools can also be served over MCP, see `meetup_issue.server`.
"""

from .errors import FieldError, MeetupValidationError, ValidationResult
from .forms import (
    ParsedMeetup,
    human_form_values_to_meetup,
    meetup_from_form_values,
    robot_form_values_to_meetup,
    validate_human_form_values,
    validate_robot_form_values,
)
from .issue import parse_meetup_issue_body, render_meetup_issue_body
from .meetup import validate_meetup
from .pull_request import render_meetup_pull_request_body
from .schemas import (
    HumanMeetupFormValues,
    Meetup,
    RobotMeetupFormValues,
    SharedMeetupFormValues,
)

__all__ = [
    "__version__",
    "FieldError",
    "HumanMeetupFormValues",
    "Meetup",
    "MeetupValidationError",
    "ParsedMeetup",
    "RobotMeetupFormValues",
    "SharedMeetupFormValues",
    "ValidationResult",
    "human_form_values_to_meetup",
    "meetup_from_form_values",
    "parse_meetup_issue_body",
    "render_meetup_issue_body",
    "render_meetup_pull_request_body",
    "robot_form_values_to_meetup",
    "validate_human_form_values",
    "validate_meetup",
    "validate_robot_form_values",
]

__version__ = "0.1.0"
