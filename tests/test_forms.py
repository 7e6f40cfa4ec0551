from datetime import datetime, timedelta, timezone

import pytest

from meetup_issue.errors import MeetupValidationError
from meetup_issue.forms import (
    human_form_values_to_meetup,
    infer_form_shape,
    meetup_from_form_values,
    robot_form_values_to_meetup,
    validate_human_form_values,
    validate_robot_form_values,
)


def _fields(result):
    return {issue.field: issue.rule for issue in result.issues}


def test_human_values_pass_through_unchanged(human_values):
    values = validate_human_form_values(human_values).unwrap()

    assert values.date == "2024-03-01"
    assert values.time == "18:30"


def test_invalid_calendar_date_is_a_date_error(human_values):
    result = validate_human_form_values({**human_values, "date": "2023-02-30"})

    assert not result.success
    assert _fields(result) == {"date": "date"}


def test_invalid_clock_time_is_a_time_error(human_values):
    result = validate_human_form_values({**human_values, "time": "25:61"})

    assert _fields(result) == {"time": "time"}


def test_human_errors_are_aggregated(human_values):
    result = validate_human_form_values(
        {**human_values, "locationLink": "not-a-url", "organizer": "", "time": "7pm"}
    )

    assert len(result.issues) >= 2
    assert _fields(result) == {
        "locationLink": "url",
        "organizer": "string_too_short",
        "time": "time",
    }


def test_missing_fields_fail_closed(human_values):
    del human_values["time"]
    human_values["title"] = None

    result = validate_human_form_values(human_values)

    assert _fields(result) == {"title": "string_type", "time": "missing"}


def test_robot_timestamp_is_syntax_checked(robot_values):
    assert validate_robot_form_values(robot_values).success

    result = validate_robot_form_values({**robot_values, "timestamp": "next friday"})
    assert _fields(result) == {"timestamp": "timestamp"}


def test_human_form_to_meetup(human_values):
    values = validate_human_form_values(human_values).unwrap()

    meetup = human_form_values_to_meetup(values).unwrap()

    assert meetup.date == datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc)
    assert meetup.title == "Demo Night"
    assert not hasattr(meetup, "time")


def test_human_form_to_meetup_in_local_timezone(human_values):
    values = validate_human_form_values(human_values).unwrap()

    meetup = human_form_values_to_meetup(values, tz="Europe/Oslo").unwrap()

    assert meetup.date == datetime(2024, 3, 1, 17, 30, tzinfo=timezone.utc)


def test_robot_form_to_meetup(robot_values):
    values = validate_robot_form_values(robot_values).unwrap()

    meetup = robot_form_values_to_meetup(values).unwrap()

    assert meetup.date == datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc)


def test_robot_timestamp_without_offset_fails_on_meetup(robot_values):
    values = validate_robot_form_values(
        {**robot_values, "timestamp": "2024-03-01T18:30:00"}
    ).unwrap()

    result = robot_form_values_to_meetup(values)

    assert _fields(result) == {"date": "date"}
    with pytest.raises(MeetupValidationError) as excinfo:
        result.unwrap()
    assert excinfo.value.code == "VALIDATION_ERROR"
    assert excinfo.value.details["issues"][0]["field"] == "date"


def test_infer_form_shape(human_values, robot_values):
    assert infer_form_shape(human_values) == "human"
    assert infer_form_shape(robot_values) == "robot"
    assert infer_form_shape({}) == "human"


def test_meetup_from_form_values(human_values, robot_values):
    human = meetup_from_form_values(human_values)
    robot = meetup_from_form_values(robot_values)

    assert (human.shape, robot.shape) == ("human", "robot")
    assert human.result.unwrap() == robot.result.unwrap()


def test_meetup_from_form_values_reports_shape_on_failure(robot_values):
    parsed = meetup_from_form_values({**robot_values, "signupLink": "nope"})

    assert parsed.shape == "robot"
    assert not parsed.result.success
    assert _fields(parsed.result) == {"signupLink": "url"}


def test_non_ascii_digits_fail_the_contract(human_values):
    result = validate_human_form_values({**human_values, "date": "２０２４-０３-０１"})

    assert _fields(result) == {"date": "date"}


def test_human_form_in_zone_with_seconds_offset(human_values):
    parsed = meetup_from_form_values(
        {**human_values, "date": "1900-01-01"}, tz="Europe/Amsterdam"
    )

    meetup = parsed.result.unwrap()
    assert meetup.date.utcoffset() == timedelta(minutes=19, seconds=32)


def test_unknown_timezone_is_a_configuration_error(human_values):
    values = validate_human_form_values(human_values).unwrap()

    with pytest.raises(ValueError):
        human_form_values_to_meetup(values, tz="Nowhere/Atlantis")


def test_heading_lines_are_rejected_outside_description(human_values):
    result = validate_human_form_values(
        {
            **human_values,
            "title": "### Launch party",
            "organizer": "Jane\n### Organizer link",
            "description": "Agenda\n\n### Talks",
        }
    )

    assert _fields(result) == {"title": "heading", "organizer": "heading"}
