"""Meetup tool functions.

These functions implement the meetup surface: validate a form, render
an issue body, parse an issue body and render a pull request body.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import AppConfig
from ..errors import BadRequestError, ValidationResult
from ..forms import ParsedMeetup, meetup_from_form_values
from ..issue import parse_meetup_issue_body, render_meetup_issue_body
from ..pull_request import render_meetup_pull_request_body
from ..schemas import (
    FieldIssue,
    Meetup,
    MeetupResultOutput,
    ParseMeetupIssueInput,
    RenderMeetupIssueInput,
    RenderMeetupIssueOutput,
    RenderPullRequestInput,
    RenderPullRequestOutput,
    ValidateMeetupFormInput,
)

logger = logging.getLogger(__name__)


def _to_wire(meetup: Meetup) -> Dict[str, Any]:
    return meetup.model_dump(mode="json", by_alias=True)


def _to_output(parsed: ParsedMeetup) -> MeetupResultOutput:
    result = parsed.result
    return MeetupResultOutput(
        shape=parsed.shape,
        success=result.success,
        meetup=_to_wire(result.output) if result.output is not None else None,
        issues=[FieldIssue(**payload) for payload in result.issue_payloads()],
    )


def _meetup_from_values(config: AppConfig, values: Dict[str, Any]) -> Meetup:
    if not values:
        raise BadRequestError("'values' is required")
    result: ValidationResult[Meetup] = meetup_from_form_values(
        values, tz=config.timezone
    ).result
    return result.unwrap()


def validate_meetup_form(
    config: AppConfig, params: ValidateMeetupFormInput
) -> MeetupResultOutput:
    """Validate raw form values of either shape."""

    return _to_output(meetup_from_form_values(params.values, tz=config.timezone))


def render_meetup_issue(
    config: AppConfig, params: RenderMeetupIssueInput
) -> RenderMeetupIssueOutput:
    """Render the issue title and body for submitted form values."""

    meetup = _meetup_from_values(config, params.values)
    logger.info("Rendering issue for meetup %r", meetup.title)
    return RenderMeetupIssueOutput(
        title=meetup.title,
        body=render_meetup_issue_body(meetup),
        meetup=_to_wire(meetup),
    )


def parse_meetup_issue(
    config: AppConfig, params: ParseMeetupIssueInput
) -> MeetupResultOutput:
    """Re-derive a meetup from an existing issue body."""

    if not params.body.strip():
        raise BadRequestError("'body' is required")
    return _to_output(parse_meetup_issue_body(params.body, tz=config.timezone))


def render_meetup_pull_request(
    config: AppConfig, params: RenderPullRequestInput
) -> RenderPullRequestOutput:
    """Render the pull request description for a meetup issue."""

    meetup = _meetup_from_values(config, params.values)
    return RenderPullRequestOutput(
        body=render_meetup_pull_request_body(meetup, params.issue_number)
    )
