"""
Pytest configuration and shared fixtures for meeting finder tests.
"""
import pytest

from meeting_finder.find_meeting_query import FindMeetingQuery


@pytest.fixture
def query():
    """A fresh query engine."""
    return FindMeetingQuery()


@pytest.fixture
def events_csv(tmp_path):
    """Write a small events CSV and return its path."""
    path = tmp_path / "events.csv"
    path.write_text(
        "title,start,end,attendees\n"
        "Event 1,08:00,08:30,Person A\n"
        "Event 2,09:00,09:30,Person B\n"
        "Event 3,12:00,13:00,Person A;Person C\n",
        encoding="utf-8",
    )
    return path
