"""
Cooperative cancellation for validation runs.

A ValidationContext carries a cancel flag and an optional deadline. It is
passed to every validator and detector; long-running detector calls read
`remaining()` to bound their subprocess or HTTP timeouts, and check
`done` before starting work.

Example:
    >>> ctx = ValidationContext.with_timeout(30)
    >>> runner.run(ctx)            # detectors stop waiting after 30s
    >>> ctx.cancel()               # or stop early from another thread
"""

import threading
import time
from typing import Optional

from hyprpreflight.errors import DetectionCancelledError


class ValidationContext:
    """Cancel flag plus optional monotonic deadline, safe to share between threads."""

    def __init__(self, deadline: Optional[float] = None,
                 _cancelled: Optional[threading.Event] = None):
        # deadline is a time.monotonic() value
        self._deadline = deadline
        self._cancelled = _cancelled if _cancelled is not None else threading.Event()

    @classmethod
    def background(cls) -> "ValidationContext":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, parent: Optional["ValidationContext"] = None) -> "ValidationContext":
        """
        Create a context that expires `seconds` from now.

        When `parent` is given the child shares its cancel flag and never
        outlives the parent's deadline.
        """
        deadline = time.monotonic() + seconds
        if parent is None:
            return cls(deadline=deadline)
        if parent.deadline is not None:
            deadline = min(deadline, parent.deadline)
        return cls(deadline=deadline, _cancelled=parent._cancelled)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired

    def cancel(self) -> None:
        self._cancelled.set()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, 0.0 once passed, None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def bounded_timeout(self, timeout: Optional[float]) -> Optional[float]:
        """Return the smaller of `timeout` and remaining(); None only when both are None."""
        remaining = self.remaining()
        if remaining is None:
            return timeout
        if timeout is None:
            return remaining
        return min(timeout, remaining)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled, expired or `timeout` elapses. Returns done."""
        self._cancelled.wait(self.bounded_timeout(timeout))
        return self.done

    def raise_if_done(self, detector: Optional[str] = None) -> None:
        """Raise DetectionCancelledError when the context is cancelled or expired."""
        if self.done:
            raise DetectionCancelledError(detector=detector, cause=self.reason())

    def reason(self) -> str:
        if self.cancelled:
            return "context cancelled"
        if self.expired:
            return "context deadline exceeded"
        return ""

    def __repr__(self) -> str:
        return f"ValidationContext(cancelled={self.cancelled}, remaining={self.remaining()})"
