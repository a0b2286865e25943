"""
Persistence for finished validation sessions.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from hyprpreflight.errors import SessionNotFoundError
from hyprpreflight.validation.session import ValidationSession


class SessionRepository(ABC):
    """Storage contract for validation sessions."""

    @abstractmethod
    def save(self, session: ValidationSession) -> None:
        """Store a session, replacing any earlier one with the same id."""

    @abstractmethod
    def find_by_id(self, session_id: str) -> ValidationSession:
        """
        Raises:
            SessionNotFoundError: If no session has that id.
        """

    @abstractmethod
    def find_latest(self) -> ValidationSession:
        """
        Return the most recently started session.

        Raises:
            SessionNotFoundError: If the repository is empty.
        """

    @abstractmethod
    def list(self, limit: Optional[int] = None) -> List[ValidationSession]:
        """Sessions ordered newest first, at most `limit` of them."""


class InMemorySessionRepository(SessionRepository):
    """Process-local repository, safe to use from several threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, ValidationSession] = {}

    def save(self, session: ValidationSession) -> None:
        with self._lock:
            self._sessions[session.id] = session

    def find_by_id(self, session_id: str) -> ValidationSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def find_latest(self) -> ValidationSession:
        sessions = self.list(limit=1)
        if not sessions:
            raise SessionNotFoundError()
        return sessions[0]

    def list(self, limit: Optional[int] = None) -> List[ValidationSession]:
        with self._lock:
            sessions = list(self._sessions.values())
        sessions.sort(key=lambda s: s.started_at, reverse=True)
        if limit is not None:
            sessions = sessions[:limit]
        return sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
