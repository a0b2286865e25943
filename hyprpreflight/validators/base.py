"""
Shared behaviour for validators that wrap a single detector.
"""

import abc
import logging
from typing import Any, Dict

from hyprpreflight.context import ValidationContext
from hyprpreflight.errors import DetectionCancelledError
from hyprpreflight.interfaces.validator import ValidatorInterface
from hyprpreflight.validation.guidance import UserGuidance
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import RequirementValue, ValidationResult
from hyprpreflight.validation.types import Severity, ValidationStatus


class DetectorValidator(ValidatorInterface):
    """
    Runs one detector and classifies its outcome.

    Subclasses set the class attributes below and implement detect() and
    evaluate(). A detector exception, or a context that is already done
    when the check starts, produces a result with failure_status and
    failure_severity instead of propagating.

    Attributes:
        failure_status: Status used when the detector cannot produce a value.
        failure_severity: Severity used when the detector cannot produce a value.
        failure_guidance_key: Guidance template for detector failures.
        failure_summary: Progress line shown for detector failures.
        expected_value: What the requirement asks for.
    """

    failure_status = ValidationStatus.FAIL
    failure_severity = Severity.CRITICAL
    failure_guidance_key = ""
    failure_summary = "Check failed"
    expected_value: RequirementValue = None

    def __init__(self, detector, logger=None):
        self.detector = detector
        self.logger = logger or logging.getLogger(__name__)

    @abc.abstractmethod
    def detect(self, ctx: ValidationContext) -> Any:
        """Call the detector. May raise any exception."""

    @abc.abstractmethod
    def evaluate(self, value: Any) -> ValidationResult:
        """Classify a successfully detected value."""

    def guidance_params(self) -> Dict[str, Any]:
        """Template parameters for the failure guidance."""
        return {}

    def validate(self, ctx: ValidationContext) -> ValidationResult:
        try:
            ctx.raise_if_done(self.name)
            value = self.detect(ctx)
        except DetectionCancelledError as e:
            self.logger.warning(f"{self.name} check interrupted: {e.error.details or e.message}")
            return self.failure(build_guidance('CHECK_INTERRUPTED', check=self.name, why=ctx.reason() or e.message))
        except Exception as e:
            self.logger.warning(f"{self.name} detection failed: {e}")
            return self.failure(build_guidance(self.failure_guidance_key, **self.guidance_params()))
        return self.evaluate(value)

    def failure(self, guidance: UserGuidance, actual_value: RequirementValue = None) -> ValidationResult:
        return ValidationResult(
            requirement_name=self.requirement_name,
            status=self.failure_status,
            severity=self.failure_severity,
            actual_value=actual_value,
            expected_value=self.expected_value,
            guidance=guidance,
        )

    def passed(self, actual_value: RequirementValue) -> ValidationResult:
        return ValidationResult.passed(self.requirement_name, actual_value, self.expected_value)

    def summarize(self, result: ValidationResult) -> str:
        if result.is_passing():
            return f"Detected: {result.actual_value}"
        if result.actual_value is None:
            return self.failure_summary
        return result.guidance.message
