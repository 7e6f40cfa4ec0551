"""Pydantic schemas for meetups, form values and tool inputs/outputs.

`Meetup` is the canonical entity. `HumanMeetupFormValues` and
`RobotMeetupFormValues` are the two accepted submission shapes; both
extend `SharedMeetupFormValues`. Wire names are camelCase aliases of the
python attribute names.

Format checks for dates, times and timestamps raise ``ValueError`` in
``meetup_issue.utils.date_parser``; the validators below are where those
exceptions become field errors.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic_core import PydanticCustomError

from .utils import (
    check_form_date,
    check_form_time,
    check_iso_timestamp,
    has_heading_line,
    parse_iso8601,
)

MeetupShape = Literal["human", "robot"]

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise PydanticCustomError(
            "url", "Invalid URL: {reason}", {"reason": exc.errors()[0]["msg"]}
        ) from exc
    return value


def _check_no_heading(value: str) -> str:
    if has_heading_line(value):
        raise PydanticCustomError("heading", "Lines must not start with '###'")
    return value


NonEmptyText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
# Only the description, rendered last, may contain heading-like lines.
SectionText = Annotated[NonEmptyText, AfterValidator(_check_no_heading)]
UrlText = Annotated[
    str,
    StringConstraints(strip_whitespace=True),
    AfterValidator(_check_url),
    AfterValidator(_check_no_heading),
]


class Meetup(BaseModel):
    """Canonical, fully validated meetup.

    Attributes:
        title: Meetup title.
        description: Free text, may span several paragraphs.
        date: Timezone-aware start instant.
        location: Street address.
        location_link: Maps link for the address.
        organizer: Organizer name.
        organizer_link: Link to the organizer.
        signup_link: Signup page for the meetup.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: SectionText
    description: NonEmptyText
    date: AwareDatetime
    location: SectionText
    location_link: UrlText = Field(alias="locationLink")
    organizer: SectionText
    organizer_link: UrlText = Field(alias="organizerLink")
    signup_link: UrlText = Field(alias="signupLink")

    @field_validator("date", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> datetime:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                raise PydanticCustomError(
                    "date", "Timestamp must include a UTC offset or 'Z'"
                )
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("date", "Expected an ISO 8601 timestamp string")
        try:
            check_iso_timestamp(value, require_offset=True)
            return parse_iso8601(value)
        except ValueError as exc:
            raise PydanticCustomError("date", "{reason}", {"reason": str(exc)}) from exc


class SharedMeetupFormValues(BaseModel):
    """Fields shared by the human and robot submission shapes."""

    model_config = ConfigDict(populate_by_name=True)

    title: SectionText
    description: NonEmptyText
    location: SectionText
    location_link: UrlText = Field(alias="locationLink")
    organizer: SectionText
    organizer_link: UrlText = Field(alias="organizerLink")
    signup_link: UrlText = Field(alias="signupLink")

    def shared_values(self) -> Dict[str, str]:
        """Shared fields keyed by wire name."""
        return self.model_dump(by_alias=True, include=set(SharedMeetupFormValues.model_fields))


class HumanMeetupFormValues(SharedMeetupFormValues):
    """Submission typed by a person: separate calendar date and clock time.

    Attributes:
        date: ``YYYY-MM-DD``, must exist on the calendar.
        time: ``HH:MM`` on a 24h clock.
    """

    date: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    time: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        try:
            return check_form_date(value)
        except ValueError:
            raise PydanticCustomError("date", "Invalid date (format YYYY-MM-DD)") from None

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        try:
            return check_form_time(value)
        except ValueError:
            raise PydanticCustomError("time", "Invalid time (format HH:MM)") from None


class RobotMeetupFormValues(SharedMeetupFormValues):
    """Submission generated by a program: one ISO 8601 timestamp."""

    timestamp: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        try:
            return check_iso_timestamp(value)
        except ValueError as exc:
            raise PydanticCustomError("timestamp", "{reason}", {"reason": str(exc)}) from None


# Tool inputs / outputs


class FieldIssue(BaseModel):
    field: str
    rule: str
    message: str
    input: Optional[Any] = None


class MeetupResultOutput(BaseModel):
    """Outcome of validating form values or parsing an issue body."""

    shape: MeetupShape
    success: bool
    meetup: Optional[Dict[str, Any]] = None
    issues: List[FieldIssue] = Field(default_factory=list)


class ValidateMeetupFormInput(BaseModel):
    values: Dict[str, Any] = Field(description="Raw form values keyed by wire name")


class RenderMeetupIssueInput(BaseModel):
    values: Dict[str, Any] = Field(description="Raw form values keyed by wire name")


class RenderMeetupIssueOutput(BaseModel):
    title: str
    body: str
    meetup: Dict[str, Any]


class ParseMeetupIssueInput(BaseModel):
    body: str


class RenderPullRequestInput(BaseModel):
    values: Dict[str, Any] = Field(description="Raw form values keyed by wire name")
    issue_number: int = Field(ge=1)


class RenderPullRequestOutput(BaseModel):
    body: str
