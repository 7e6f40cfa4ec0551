"""Error classes and result helpers for meetup validation.

Defines the structured application exceptions raised by the tool layer,
the per-field error record produced by every contract, and the result
wrapper returned by the validation and parsing functions. Contract
functions never raise for bad input; they return a `ValidationResult`
and only the tool layer turns a failed result into an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypedDict, TypeVar

from pydantic import ValidationError

T = TypeVar("T")


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


class FieldErrorPayload(TypedDict):
    field: str
    rule: str
    message: str
    input: Any


@dataclass
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class BadRequestError(AppError):
    """Raised when a request is invalid or missing required parameters."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_REQUEST", message, details)


class MeetupValidationError(AppError):
    """Raised when meetup values fail validation at the tool boundary.

    Args:
        issues: The field errors collected by the contract.
    """

    def __init__(self, issues: List["FieldError"], message: str = "Invalid meetup") -> None:
        super().__init__(
            "VALIDATION_ERROR",
            message,
            {"issues": [issue.to_payload() for issue in issues]},
        )
        self.issues = list(issues)


@dataclass(frozen=True)
class FieldError:
    """A single validation failure tied to one named field.

    Attributes:
        field: Wire name of the field (e.g. ``locationLink``).
        rule: Rule that was violated, e.g. ``date``, ``url`` or ``missing``.
        message: Human readable reason.
        input: The raw value that was received.
    """

    field: str
    rule: str
    message: str
    input: Any = None

    def to_payload(self) -> FieldErrorPayload:
        value = self.input
        if not isinstance(value, (str, int, float, bool, type(None))):
            value = str(value)
        return {
            "field": self.field,
            "rule": self.rule,
            "message": self.message,
            "input": value,
        }


def field_errors_from_validation_error(error: ValidationError) -> List[FieldError]:
    """Convert a pydantic `ValidationError` into ordered field errors.

    Examples:
        >>> from pydantic import BaseModel
        >>> class M(BaseModel):
        ...     a: int
        >>> try:
        ...     M.model_validate({})
        ... except ValidationError as exc:
        ...     [e.rule for e in field_errors_from_validation_error(exc)]
        ['missing']
    """

    issues: List[FieldError] = []
    for err in error.errors(include_url=False):
        loc = err.get("loc") or ()
        name = ".".join(str(part) for part in loc) if loc else "__root__"
        issues.append(
            FieldError(
                field=name,
                rule=str(err.get("type")),
                message=str(err.get("msg")),
                input=err.get("input"),
            )
        )
    return issues


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Success-with-value or failure-with-reasons.

    Exactly one of `output` and `issues` is meaningful: a successful
    result has an output and no issues, a failed one has at least one
    issue and no output.
    """

    output: Optional[T] = None
    issues: List[FieldError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.output is not None and not self.issues

    @classmethod
    def ok(cls, output: T) -> "ValidationResult[T]":
        return cls(output=output)

    @classmethod
    def fail(cls, issues: List[FieldError]) -> "ValidationResult[T]":
        return cls(output=None, issues=list(issues))

    def unwrap(self) -> T:
        """Return the output or raise `MeetupValidationError`."""
        if not self.success:
            raise MeetupValidationError(self.issues)
        return self.output  # type: ignore[return-value]

    def issue_payloads(self) -> List[FieldErrorPayload]:
        return [issue.to_payload() for issue in self.issues]


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> try:
        ...     raise BadRequestError("Missing body", {"field": "body"})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "BAD_REQUEST"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    if isinstance(error, ValidationError):
        issues = field_errors_from_validation_error(error)
        return {
            "code": "VALIDATION_ERROR",
            "message": "Invalid input",
            "details": {"issues": [issue.to_payload() for issue in issues]},
        }
    # Fallback: wrap generic exceptions
    return {"code": "INTERNAL_ERROR", "message": str(error)}
