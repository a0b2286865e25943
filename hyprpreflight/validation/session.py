"""
ValidationSession - the aggregate root for one preflight run.

The session is written by a single producer (the orchestrator) while any
number of observers read it from other threads. Every public method takes
the session lock; derived queries evaluate their predicates inline on the
locked state instead of calling other public methods, since the lock is not
re-entrant.
"""

import threading
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.types import ValidationOutcome, ValidationStatus


def _outcome_for(results) -> ValidationOutcome:
    """Priority order, first match wins. Caller must hold the lock."""
    if any(r.is_blocking() for r in results):
        return ValidationOutcome.BLOCKED
    if any(r.is_warning() for r in results):
        return ValidationOutcome.WARNINGS
    if all(r.status is ValidationStatus.PASS for r in results):
        return ValidationOutcome.SUCCESS
    return ValidationOutcome.PARTIAL_SUCCESS


class ValidationSession:
    """
    Ordered, append-only collection of results with a derived outcome.

    Results keep insertion order (evaluation order). The overall outcome is
    recomputed synchronously on every add_result() and on the first
    complete(); it is never set by callers.
    """

    def __init__(self, session_id: Optional[str] = None):
        self._lock = threading.Lock()
        self._id = session_id or str(uuid.uuid4())
        self._started_at = datetime.now(timezone.utc)
        self._started_mono = time.monotonic()
        self._completed_at: Optional[datetime] = None
        self._completed_mono: Optional[float] = None
        self._results: List[ValidationResult] = []
        self._overall_result = _outcome_for(self._results)

    @property
    def id(self) -> str:
        return self._id

    @property
    def started_at(self) -> datetime:
        with self._lock:
            return self._started_at

    def mark_started(self) -> None:
        """Move the start time to now. Ignored once a result has been added."""
        with self._lock:
            if self._results or self._completed_at is not None:
                return
            self._started_at = datetime.now(timezone.utc)
            self._started_mono = time.monotonic()

    @property
    def completed_at(self) -> Optional[datetime]:
        """When complete() was first called; None while the run is in progress."""
        with self._lock:
            return self._completed_at

    @property
    def is_completed(self) -> bool:
        with self._lock:
            return self._completed_at is not None

    @property
    def overall_result(self) -> ValidationOutcome:
        with self._lock:
            return self._overall_result

    def results(self) -> Tuple[ValidationResult, ...]:
        """Snapshot of the results; later additions are not visible through it."""
        with self._lock:
            return tuple(self._results)

    def add_result(self, result: ValidationResult) -> None:
        with self._lock:
            self._results.append(result)
            self._overall_result = _outcome_for(self._results)

    def complete(self) -> None:
        """Mark the session finished. Only the first call has any effect."""
        with self._lock:
            if self._completed_at is not None:
                return
            self._completed_mono = time.monotonic()
            self._completed_at = self._started_at + timedelta(
                seconds=self._completed_mono - self._started_mono)
            self._overall_result = _outcome_for(self._results)

    def has_blockers(self) -> bool:
        with self._lock:
            return any(r.is_blocking() for r in self._results)

    def has_warnings(self) -> bool:
        with self._lock:
            return any(r.is_warning() for r in self._results)

    def blocking_results(self) -> List[ValidationResult]:
        with self._lock:
            return [r for r in self._results if r.is_blocking()]

    def warning_results(self) -> List[ValidationResult]:
        with self._lock:
            return [r for r in self._results if r.is_warning()]

    def can_proceed(self) -> bool:
        """Installation gating depends on blockers only; warnings never block."""
        with self._lock:
            return not any(r.is_blocking() for r in self._results)

    def duration(self) -> timedelta:
        """
        Elapsed time since start while running, fixed once completed.

        Measured on the monotonic clock so it never goes negative or backwards.
        """
        with self._lock:
            end = self._completed_mono if self._completed_mono is not None else time.monotonic()
            return timedelta(seconds=max(0.0, end - self._started_mono))

    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            results = list(self._results)
            completed_at = self._completed_at
            outcome = self._overall_result
            started_at = self._started_at
            end = self._completed_mono if self._completed_mono is not None else time.monotonic()
            elapsed = end - self._started_mono
        return {
            "id": self._id,
            "started_at": started_at.isoformat(),
            "completed_at": completed_at.isoformat() if completed_at else None,
            "duration_seconds": round(max(0.0, elapsed), 3),
            "overall_result": outcome.value,
            "can_proceed": not any(r.is_blocking() for r in results),
            "results": [r.to_dict() for r in results],
        }

    def __repr__(self) -> str:
        return f"ValidationSession(id={self._id!r}, outcome={self.overall_result.value})"
