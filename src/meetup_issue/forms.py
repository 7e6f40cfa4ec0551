"""Meetup form value contracts and the form to meetup transformers.

Two submission shapes are accepted:

- human: ``date`` (``YYYY-MM-DD``) and ``time`` (``HH:MM``) typed by a
  person, interpreted as wall-clock time in a configured timezone.
- robot: a single ISO 8601 ``timestamp`` produced by a program.

Usage example:
    parsed = meetup_from_form_values(request_json, tz="Europe/Oslo")
    if parsed.result.success:
        body = render_meetup_issue_body(parsed.result.output)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import ValidationResult, field_errors_from_validation_error
from .meetup import validate_meetup
from .schemas import (
    HumanMeetupFormValues,
    Meetup,
    MeetupShape,
    RobotMeetupFormValues,
)
from .utils import DEFAULT_TIMEZONE, combine_form_date_and_time
from .utils.date_parser import TimezoneLike

logger = logging.getLogger(__name__)

FormT = TypeVar("FormT", bound=BaseModel)


@dataclass(frozen=True)
class ParsedMeetup:
    """A validation result tagged with the submission shape it was read as."""

    shape: MeetupShape
    result: ValidationResult[Meetup]


def _validate_form(model: Type[FormT], raw: Mapping[str, Any]) -> ValidationResult[FormT]:
    try:
        values = model.model_validate(dict(raw))
    except ValidationError as exc:
        return ValidationResult.fail(field_errors_from_validation_error(exc))
    return ValidationResult.ok(values)


def validate_human_form_values(
    raw: Mapping[str, Any],
) -> ValidationResult[HumanMeetupFormValues]:
    """Validate a human submission, reporting every failing field."""

    return _validate_form(HumanMeetupFormValues, raw)


def validate_robot_form_values(
    raw: Mapping[str, Any],
) -> ValidationResult[RobotMeetupFormValues]:
    """Validate a robot submission, reporting every failing field."""

    return _validate_form(RobotMeetupFormValues, raw)


def human_form_values_to_meetup(
    values: HumanMeetupFormValues, *, tz: TimezoneLike = DEFAULT_TIMEZONE
) -> ValidationResult[Meetup]:
    """Combine ``date`` and ``time`` into a timestamp and build a meetup.

    The value ``{date}T{time}:00`` is read as wall-clock time in ``tz``.

    Raises:
        ValueError: If ``tz`` is not a known timezone. This is a
            configuration error, not a problem with the submitted values.
    """

    date = combine_form_date_and_time(values.date, values.time, tz=tz)
    return validate_meetup({**values.shared_values(), "date": date})


def robot_form_values_to_meetup(values: RobotMeetupFormValues) -> ValidationResult[Meetup]:
    """Use ``timestamp`` as the meetup date unchanged."""

    return validate_meetup({**values.shared_values(), "date": values.timestamp})


def infer_form_shape(raw: Mapping[str, Any]) -> MeetupShape:
    """Classify raw submitted values: robot when a timestamp is given."""

    return "robot" if raw.get("timestamp") is not None else "human"


def human_meetup_from_form_values(
    raw: Mapping[str, Any], *, tz: TimezoneLike = DEFAULT_TIMEZONE
) -> ValidationResult[Meetup]:
    validated = validate_human_form_values(raw)
    if not validated.success:
        return ValidationResult.fail(validated.issues)
    return human_form_values_to_meetup(validated.unwrap(), tz=tz)


def robot_meetup_from_form_values(raw: Mapping[str, Any]) -> ValidationResult[Meetup]:
    validated = validate_robot_form_values(raw)
    if not validated.success:
        return ValidationResult.fail(validated.issues)
    return robot_form_values_to_meetup(validated.unwrap())


def meetup_from_form_values(
    raw: Mapping[str, Any],
    *,
    shape: MeetupShape | None = None,
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> ParsedMeetup:
    """Validate raw form values of either shape and build a meetup.

    Args:
        raw: Values keyed by wire name.
        shape: Force a shape instead of inferring it from the keys.
        tz: Timezone for human date and time values.
    """

    shape = shape or infer_form_shape(raw)
    if shape == "human":
        result = human_meetup_from_form_values(raw, tz=tz)
    else:
        result = robot_meetup_from_form_values(raw)
    if not result.success:
        logger.debug(
            "Rejected %s meetup form: %s", shape, [issue.field for issue in result.issues]
        )
    return ParsedMeetup(shape=shape, result=result)
