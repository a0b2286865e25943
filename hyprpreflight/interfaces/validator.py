"""
Validator interface definitions for hyprpreflight.

A validator checks exactly one installation requirement. It wraps one
detector and is solely responsible for translating the detector's output,
or its failure, into a classified ValidationResult with guidance.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from hyprpreflight.validation.types import RequirementName

if TYPE_CHECKING:
    from hyprpreflight.context import ValidationContext
    from hyprpreflight.validation.result import ValidationResult


class ValidatorInterface(ABC):
    """Interface for requirement validators.

    Example:
        class DiskSpaceValidator(ValidatorInterface):
            name = "Disk Space"
            requirement_name = RequirementName.DISK_SPACE

            def validate(self, ctx) -> ValidationResult:
                space = self.detector.detect_available_space(ctx, "/")
                ...
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the check."""

    @property
    @abstractmethod
    def requirement_name(self) -> RequirementName:
        """The requirement this validator checks."""

    @abstractmethod
    def validate(self, ctx: "ValidationContext") -> "ValidationResult":
        """Run the check.

        Detector failures, including a cancelled or expired context, are
        returned as classified results; implementations do not raise for
        them.

        Args:
            ctx: Cancellation context for the run.

        Returns:
            The classified ValidationResult.
        """

    @property
    def progress_message(self) -> str:
        """Shown while the check is running."""
        return f"Checking {self.name.lower()}..."

    def summarize(self, result: "ValidationResult") -> str:
        """Short status line for a resolved result, e.g. 'Detected: sid'."""
        if result.is_passing():
            return f"{self.name}: OK"
        return result.guidance.message or f"{self.name}: {result.status.value}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(requirement={self.requirement_name.value})"
