"""
Background execution of a preflight run with streamed progress.

The runner is the producer: it executes the validators on one thread and
pushes ProgressUpdates into a bounded ProgressChannel. A front end consumes
the channel on another thread and stops when the channel is closed, which
happens exactly once after the session has been completed.

Example:
    runner = ValidationRunner.default(config)
    runner.start(ctx)
    for update in runner.progress():
        render(update)
    report = PreflightReport.from_session(runner.session())
"""

import collections
import logging
import queue
import threading
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Optional

from hyprpreflight.config import PROGRESS_BUFFER_SIZE, PreflightConfig
from hyprpreflight.context import ValidationContext
from hyprpreflight.errors import ChannelClosedError, RunnerAlreadyStartedError
from hyprpreflight.interfaces.validator import ValidatorInterface
from hyprpreflight.validation.events import EventPublisher
from hyprpreflight.validation.orchestrator import ValidationOrchestrator
from hyprpreflight.validation.repository import SessionRepository
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.session import ValidationSession
from hyprpreflight.validation.types import RequirementName, ValidationStatus
from hyprpreflight.validators import default_validators


@dataclass(frozen=True)
class ProgressUpdate:
    """
    One progress message.

    Attributes:
        requirement_name: The requirement being checked.
        status: None while the check is running, the result status once resolved.
        message: Human-readable status line.
        result: The recorded result, present once resolved.
    """
    requirement_name: RequirementName
    status: Optional[ValidationStatus]
    message: str
    result: Optional[ValidationResult] = None

    @property
    def in_progress(self) -> bool:
        return self.status is None


class ProgressChannel:
    """
    Bounded FIFO of progress updates with an explicit close.

    send() blocks while `capacity` updates are waiting. close() never blocks
    and does not take a slot, so a producer that fills the buffer exactly can
    still close it without a consumer. Consumers see every update sent before
    close(), then iteration stops.
    """

    def __init__(self, capacity: int = PROGRESS_BUFFER_SIZE):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: Deque[ProgressUpdate] = collections.deque()
        self._cond = threading.Condition()
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, update: ProgressUpdate) -> None:
        """
        Raises:
            ChannelClosedError: If the channel is closed, including while waiting for space.
        """
        with self._cond:
            while len(self._items) >= self.capacity and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError()
            self._items.append(update)
            self._cond.notify_all()

    def close(self) -> None:
        """Close the channel. Further calls have no effect."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()

    def receive(self, timeout: Optional[float] = None) -> Optional[ProgressUpdate]:
        """
        Return the next update, or None once the channel is closed and drained.

        Raises:
            queue.Empty: If `timeout` elapses with nothing to receive.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._items or self._closed, timeout=timeout):
                raise queue.Empty()
            if self._items:
                update = self._items.popleft()
                self._cond.notify_all()
                return update
            return None

    def __iter__(self) -> Iterator[ProgressUpdate]:
        while True:
            update = self.receive()
            if update is None:
                return
            yield update

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


class ValidationRunner:
    """
    Owns one session, one progress channel and the orchestrator for a single run.

    A runner runs once. Create a new runner for every run.

    Args:
        validators: Validators in evaluation order.
        buffer_size: Capacity of the progress channel.
        publisher: Optional EventPublisher for domain events.
        logger: Optional logger; defaults to this module's logger.
        repository: Optional SessionRepository the completed session is saved to.
    """

    def __init__(self, validators: Iterable[ValidatorInterface],
                 buffer_size: int = PROGRESS_BUFFER_SIZE,
                 publisher: Optional[EventPublisher] = None,
                 logger=None,
                 repository: Optional[SessionRepository] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.repository = repository
        self._orchestrator = ValidationOrchestrator(validators, publisher=publisher, logger=self.logger)
        self._session = ValidationSession()
        self._channel = ProgressChannel(buffer_size)
        self._lock = threading.Lock()
        self._started = False
        self._current: Optional[ValidatorInterface] = None

    @classmethod
    def default(cls, config: Optional[PreflightConfig] = None,
                publisher: Optional[EventPublisher] = None,
                logger=None,
                repository: Optional[SessionRepository] = None) -> "ValidationRunner":
        """Runner over the five system validators, configured from `config`."""
        config = config or PreflightConfig()
        return cls(
            default_validators(config, logger=logger),
            buffer_size=config.progress_buffer_size,
            publisher=publisher,
            logger=logger,
            repository=repository,
        )

    @property
    def validators(self) -> List[ValidatorInterface]:
        return list(self._orchestrator.validators)

    def session(self) -> ValidationSession:
        return self._session

    def progress(self) -> ProgressChannel:
        return self._channel

    def _claim(self) -> None:
        with self._lock:
            if self._started:
                raise RunnerAlreadyStartedError(self._session.id)
            self._started = True
        self._session.mark_started()

    def run(self, ctx: Optional[ValidationContext] = None) -> None:
        """
        Run every validator on the calling thread.

        The channel is closed when this returns or raises. It blocks on a full
        channel, so a consumer must be draining progress() unless the buffer
        can hold every update (two per validator).

        Raises:
            RunnerAlreadyStartedError: On a second call; the channel is left untouched.
        """
        self._claim()
        self._execute(ctx)

    def start(self, ctx: Optional[ValidationContext] = None) -> threading.Thread:
        """
        Run on a daemon thread and return it.

        Raises:
            RunnerAlreadyStartedError: If the runner has already been started.
        """
        self._claim()
        thread = threading.Thread(
            target=self._execute,
            args=(ctx,),
            name=f"preflight-{self._session.id[:8]}",
            daemon=True,
        )
        thread.start()
        return thread

    def _execute(self, ctx: Optional[ValidationContext]) -> None:
        ctx = ctx or ValidationContext.background()
        try:
            self._orchestrator.execute_validations_with_progress(
                ctx,
                self._on_result,
                session=self._session,
                start_fn=self._on_start,
            )
            if self.repository is not None:
                self.repository.save(self._session)
        finally:
            self._channel.close()
        self.logger.debug(f"Runner finished session {self._session.id}: {self._session.overall_result.value}")

    def _on_start(self, validator: ValidatorInterface) -> None:
        self._current = validator
        self._channel.send(ProgressUpdate(
            requirement_name=validator.requirement_name,
            status=None,
            message=validator.progress_message,
        ))

    def _on_result(self, name: str, result: ValidationResult) -> None:
        message = self._current.summarize(result) if self._current is not None else result.format_message()
        self._channel.send(ProgressUpdate(
            requirement_name=result.requirement_name,
            status=result.status,
            message=message,
            result=result,
        ))
