"""
Tests for InMemorySessionRepository.
"""

import time

import pytest

from hyprpreflight.errors import ErrorCode, SessionNotFoundError
from hyprpreflight.validation import InMemorySessionRepository, ValidationSession


@pytest.fixture
def sessions():
    created = []
    for _ in range(3):
        created.append(ValidationSession())
        time.sleep(0.002)
    return created


class TestInMemorySessionRepository:
    """Tests for save and lookups."""

    def test_save_and_find_by_id(self):
        """Should return the saved session by id."""
        repo = InMemorySessionRepository()
        session = ValidationSession()
        repo.save(session)
        assert repo.find_by_id(session.id) is session
        assert len(repo) == 1

    def test_save_replaces_same_id(self):
        """Should keep one entry per session id."""
        repo = InMemorySessionRepository()
        session = ValidationSession()
        repo.save(session)
        repo.save(session)
        assert len(repo) == 1

    def test_find_missing_raises(self):
        """Should raise SessionNotFoundError for an unknown id."""
        with pytest.raises(SessionNotFoundError) as exc_info:
            InMemorySessionRepository().find_by_id("nope")
        assert exc_info.value.code is ErrorCode.SESSION_NOT_FOUND
        assert "nope" in exc_info.value.message

    def test_find_latest(self, sessions):
        """Should return the most recently started session."""
        repo = InMemorySessionRepository()
        for session in sessions:
            repo.save(session)
        assert repo.find_latest() is sessions[-1]

    def test_find_latest_empty(self):
        """Should raise when nothing has been saved."""
        with pytest.raises(SessionNotFoundError):
            InMemorySessionRepository().find_latest()

    def test_list_newest_first_with_limit(self, sessions):
        """Should order by start time descending and honour the limit."""
        repo = InMemorySessionRepository()
        for session in sessions:
            repo.save(session)
        assert repo.list() == list(reversed(sessions))
        assert repo.list(limit=2) == [sessions[2], sessions[1]]
