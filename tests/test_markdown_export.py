from meetup_issue.utils import (
    extract_section,
    has_heading_line,
    render_sections,
    split_at_heading,
)

BODY = """
### Organizer link

https://example.com/jane

### Organizer

Jane

### Notes

First paragraph.

### Not a section, just text
"""


def test_render_sections_layout():
    assert render_sections([("Title", "Demo"), ("Notes", "Hi")]) == (
        "\n### Title\n\nDemo\n\n### Notes\n\nHi"
    )


def test_extract_section_matches_whole_heading_line():
    assert extract_section(BODY, "Organizer") == "Jane"
    assert extract_section(BODY, "Organizer link") == "https://example.com/jane"


def test_extract_section_missing_heading_is_none():
    assert extract_section(BODY, "Date") is None
    assert extract_section("### Organizer link\n\nx\n", "Organizer") is None


def test_extract_section_is_case_sensitive():
    assert extract_section(BODY, "organizer") is None


def test_extract_section_empty_value():
    assert extract_section("### Date\n\n### Time\n\n18:30", "Date") == ""


def test_extract_section_runs_to_end_of_body():
    assert extract_section("### Time\n\n18:30\n", "Time") == "18:30"


def test_rest_after_heading_keeps_embedded_headings():
    assert split_at_heading(BODY, "Notes")[1] == (
        "First paragraph.\n\n### Not a section, just text"
    )


def test_has_heading_line():
    assert has_heading_line("### Launch party")
    assert has_heading_line("Launch party\n  ### after")
    assert not has_heading_line("Launch ### party")
    assert not has_heading_line("Launch party")


def test_split_at_heading():
    head, rest = split_at_heading(BODY, "Notes")
    assert "### Organizer\n" in head
    assert rest.startswith("First paragraph.")
    assert split_at_heading(BODY, "Missing") == (BODY, None)
