"""
Runs an ordered list of validators against one session.

Each validator runs exactly once, in the configured order. The loop never
aborts: detector failures arrive as classified results, and a validator that
raises anyway is logged and recorded as a critical failure. The session is
completed after the last validator.
"""

import logging
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional

from hyprpreflight.context import ValidationContext
from hyprpreflight.validation.events import (
    EventPublisher,
    RequirementFailedEvent,
    ValidationBlockedEvent,
    ValidationCompletedEvent,
    ValidationStartedEvent,
    ValidationWarningEvent,
)
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.session import ValidationSession
from hyprpreflight.validation.types import Severity, ValidationOutcome, ValidationStatus

if TYPE_CHECKING:
    from hyprpreflight.interfaces.validator import ValidatorInterface

ProgressFn = Callable[[str, ValidationResult], None]
StartFn = Callable[["ValidatorInterface"], None]


class ValidationOrchestrator:
    """
    Sequential executor for validators.

    Args:
        validators: Validators in evaluation order.
        publisher: Optional EventPublisher receiving domain events.
        logger: Optional logger; defaults to this module's logger.
    """

    def __init__(self, validators: Iterable["ValidatorInterface"],
                 publisher: Optional[EventPublisher] = None, logger=None):
        self.validators: List["ValidatorInterface"] = list(validators)
        self.publisher = publisher
        self.logger = logger or logging.getLogger(__name__)

    def execute_validations(self, ctx: Optional[ValidationContext] = None,
                            session: Optional[ValidationSession] = None) -> ValidationSession:
        """Run every validator and return the completed session."""
        return self.execute_validations_with_progress(ctx, None, session=session)

    def execute_validations_with_progress(self, ctx: Optional[ValidationContext],
                                          progress_fn: Optional[ProgressFn],
                                          session: Optional[ValidationSession] = None,
                                          start_fn: Optional[StartFn] = None) -> ValidationSession:
        """
        Run every validator, reporting each result as it is recorded.

        Args:
            ctx: Cancellation context shared by all validators. A cancelled
                context does not shorten the loop; each validator still
                records a result.
            progress_fn: Called as progress_fn(validator.name, result) right
                after the result is added to the session.
            session: Session to fill; a new one is created when omitted.
            start_fn: Called with the validator before it runs.

        Returns:
            The completed session.
        """
        ctx = ctx or ValidationContext.background()
        session = session if session is not None else ValidationSession()

        self.logger.debug(f"Starting {len(self.validators)} validations for session {session.id}")
        self._publish(ValidationStartedEvent(session_id=session.id))

        for validator in self.validators:
            if start_fn is not None:
                start_fn(validator)

            result = self._run_validator(validator, ctx)
            session.add_result(result)
            self.logger.debug(f"{validator.name}: {result.status.value} ({result.severity.value})")

            if not result.is_passing():
                self._publish(RequirementFailedEvent(
                    session_id=session.id,
                    requirement_name=result.requirement_name,
                    reason=result.guidance.message,
                    is_blocking=result.is_blocking(),
                ))

            if progress_fn is not None:
                progress_fn(validator.name, result)

        session.complete()
        self._publish_completion(session)
        return session

    def _run_validator(self, validator: "ValidatorInterface", ctx: ValidationContext) -> ValidationResult:
        try:
            return validator.validate(ctx)
        except Exception as e:
            self.logger.exception(f"Validator {validator.name} raised unexpectedly: {e}")
            return ValidationResult(
                requirement_name=validator.requirement_name,
                status=ValidationStatus.FAIL,
                severity=Severity.CRITICAL,
                guidance=build_guidance('CHECK_CRASHED', check=validator.name, error=str(e) or type(e).__name__),
            )

    def _publish_completion(self, session: ValidationSession) -> None:
        if self.publisher is None:
            return
        outcome = session.overall_result
        if outcome is ValidationOutcome.BLOCKED:
            blockers = session.blocking_results()
            self._publish(ValidationBlockedEvent(
                session_id=session.id,
                blocking_count=len(blockers),
                blocked_reasons=tuple(r.guidance.message for r in blockers),
            ))
        elif outcome is ValidationOutcome.WARNINGS:
            warnings = session.warning_results()
            self._publish(ValidationWarningEvent(
                session_id=session.id,
                warning_count=len(warnings),
                warnings=tuple(r.guidance.message for r in warnings),
            ))
        self._publish(ValidationCompletedEvent(
            session_id=session.id,
            outcome=outcome,
            duration=session.duration(),
        ))

    def _publish(self, event) -> None:
        if self.publisher is not None:
            self.publisher.publish(event)
