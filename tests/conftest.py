from datetime import datetime, timezone

import pytest

from meetup_issue.schemas import Meetup


@pytest.fixture(autouse=True)
def _meetup_env(monkeypatch):
    for name in ("MEETUP_TIMEZONE", "MEETUP_LOG_LEVEL", "MEETUP_SERVER_NAME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def shared_values():
    return {
        "title": "Demo Night",
        "description": "Come learn.",
        "location": "123 Main St",
        "locationLink": "https://maps.example/x",
        "organizer": "Jane",
        "organizerLink": "https://example.com/jane",
        "signupLink": "https://example.com/signup",
    }


@pytest.fixture
def human_values(shared_values):
    return {**shared_values, "date": "2024-03-01", "time": "18:30"}


@pytest.fixture
def robot_values(shared_values):
    return {**shared_values, "timestamp": "2024-03-01T18:30:00.000Z"}


@pytest.fixture
def meetup():
    return Meetup(
        title="Demo Night",
        description="Come learn.\n\nBring a laptop.",
        date=datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc),
        location="123 Main St",
        location_link="https://maps.example/x",
        organizer="Jane",
        organizer_link="https://example.com/jane",
        signup_link="https://example.com/signup",
    )
