"""Pull request description for a newly added meetup."""

from __future__ import annotations

from .schemas import Meetup
from .utils import format_timestamp


def render_meetup_pull_request_body(meetup: Meetup, issue_number: int) -> str:
    """Render the pull request body that closes the meetup issue."""

    return (
        "New meetup\n"
        "\n"
        "Date:\n"
        f"{format_timestamp(meetup.date)}\n"
        "\n"
        "Organizer:\n"
        f"[{meetup.organizer}]({meetup.organizer_link})\n"
        "\n"
        "Location:\n"
        f"[{meetup.location}]({meetup.location_link})\n"
        "\n"
        f"Closes #{issue_number}"
    )
