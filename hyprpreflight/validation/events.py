"""
Domain events emitted during a validation run.

The event set is closed: DomainEvent is the Union of the five dataclasses
below. Each exposes `event_type` (a stable string identifier) and
`occurred_at`.

Observers register with an EventPublisher:

    publisher = EventPublisher()
    publisher.subscribe(lambda e: print(e.event_type))
    publisher.subscribe(on_blocked, ValidationBlockedEvent.event_type)
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, ClassVar, Dict, List, Optional, Tuple, Union

from hyprpreflight.validation.types import RequirementName, ValidationOutcome


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ValidationStartedEvent:
    """Fires when validation begins."""
    event_type: ClassVar[str] = "validation.started"
    session_id: str
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ValidationCompletedEvent:
    """Fires when all validations have finished."""
    event_type: ClassVar[str] = "validation.completed"
    session_id: str
    outcome: ValidationOutcome
    duration: timedelta
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ValidationBlockedEvent:
    """Fires when blocking failures prevent installation."""
    event_type: ClassVar[str] = "validation.blocked"
    session_id: str
    blocking_count: int
    blocked_reasons: Tuple[str, ...] = ()
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ValidationWarningEvent:
    """Fires when warnings exist but installation can proceed."""
    event_type: ClassVar[str] = "validation.warning"
    session_id: str
    warning_count: int
    warnings: Tuple[str, ...] = ()
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class RequirementFailedEvent:
    """Fires when a specific requirement does not pass."""
    event_type: ClassVar[str] = "requirement.failed"
    session_id: str
    requirement_name: RequirementName
    reason: str
    is_blocking: bool
    occurred_at: datetime = field(default_factory=_utcnow)


DomainEvent = Union[
    ValidationStartedEvent,
    ValidationCompletedEvent,
    ValidationBlockedEvent,
    ValidationWarningEvent,
    RequirementFailedEvent,
]

EVENT_TYPES = tuple(cls.event_type for cls in (
    ValidationStartedEvent,
    ValidationCompletedEvent,
    ValidationBlockedEvent,
    ValidationWarningEvent,
    RequirementFailedEvent,
))

EventHandler = Callable[[DomainEvent], None]


class EventPublisher:
    """
    Synchronous fan-out of domain events to subscribers.

    Handlers run on the publishing thread in subscription order. A handler
    that raises is logged and skipped; it never interrupts the run or the
    remaining handlers.
    """

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._handlers: List[Tuple[Optional[str], EventHandler]] = []

    def subscribe(self, handler: EventHandler, event_type: Optional[str] = None) -> Callable[[], None]:
        """
        Register `handler` for every event, or only for `event_type`.

        Returns:
            A callable that removes the subscription.
        """
        if event_type is not None and event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown event type: {event_type}")
        entry = (event_type, handler)
        with self._lock:
            self._handlers.append(entry)

        def unsubscribe():
            with self._lock:
                if entry in self._handlers:
                    self._handlers.remove(entry)
        return unsubscribe

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            handlers = [h for t, h in self._handlers if t is None or t == event.event_type]
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self.logger.error(f"Event handler failed for {event.event_type}: {e}")


class LoggingEventObserver:
    """Writes every domain event to a logger."""

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)

    def attach(self, publisher: EventPublisher) -> Callable[[], None]:
        return publisher.subscribe(self)

    def __call__(self, event: DomainEvent) -> None:
        if isinstance(event, ValidationStartedEvent):
            self.logger.info(f"Validation session {event.session_id} started")
        elif isinstance(event, RequirementFailedEvent):
            level = logging.ERROR if event.is_blocking else logging.WARNING
            self.logger.log(level, f"Requirement {event.requirement_name.value} failed: {event.reason}")
        elif isinstance(event, ValidationBlockedEvent):
            self.logger.error(f"Installation blocked by {event.blocking_count} issue(s)")
            for reason in event.blocked_reasons:
                self.logger.error(f"  - {reason}")
        elif isinstance(event, ValidationWarningEvent):
            self.logger.warning(f"Validation finished with {event.warning_count} warning(s)")
            for warning in event.warnings:
                self.logger.warning(f"  - {warning}")
        elif isinstance(event, ValidationCompletedEvent):
            self.logger.info(
                f"Validation session {event.session_id} completed: {event.outcome.value} "
                f"in {event.duration.total_seconds():.2f}s"
            )
