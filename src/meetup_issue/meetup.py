"""Canonical meetup contract."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from .errors import ValidationResult, field_errors_from_validation_error
from .schemas import Meetup

logger = logging.getLogger(__name__)


def validate_meetup(raw: Mapping[str, Any]) -> ValidationResult[Meetup]:
    """Validate raw values into a `Meetup`.

    ``date`` must already be an absolute timestamp: an aware datetime or
    an ISO 8601 string with an offset or ``Z``. Keys may be wire names
    (``locationLink``) or attribute names (``location_link``).

    Returns:
        A successful result holding the meetup, or a failed result with
        one `FieldError` per violated rule.
    """

    try:
        meetup = Meetup.model_validate(dict(raw))
    except ValidationError as exc:
        issues = field_errors_from_validation_error(exc)
        logger.debug("Meetup rejected: %s", [issue.field for issue in issues])
        return ValidationResult.fail(issues)
    return ValidationResult.ok(meetup)
