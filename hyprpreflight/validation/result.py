"""
The outcome of a single validation check.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Union

from hyprpreflight.errors import InvalidResultError
from hyprpreflight.validation.guidance import UserGuidance
from hyprpreflight.validation.types import (
    BLOCKING_SEVERITIES,
    WARNING_SEVERITIES,
    RequirementName,
    Severity,
    ValidationStatus,
)

if TYPE_CHECKING:
    from hyprpreflight.environment.models import (
        DebianVersion,
        DiskSpace,
        GPUType,
        InternetConnectivity,
        SourceRepositoryStatus,
    )

# What a check detected or expected. int values are byte counts.
RequirementValue = Union[
    "DebianVersion",
    "GPUType",
    "DiskSpace",
    "InternetConnectivity",
    "SourceRepositoryStatus",
    int,
    str,
    None,
]

STATUS_GLYPHS = {
    ValidationStatus.PASS: "✓",
    ValidationStatus.FAIL: "✗",
    ValidationStatus.WARNING: "⚠",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ValidationResult:
    """
    Immutable record of one requirement check.

    Classification depends only on status and severity:
        blocking = FAIL with CRITICAL or HIGH severity
        warning  = WARNING, or FAIL with MEDIUM or LOW severity
    so a result is never both blocking and a warning.

    Attributes:
        requirement_name: The requirement that was checked.
        status: PASS, FAIL or WARNING.
        severity: Impact level, meaningful when status is FAIL.
        actual_value: What was detected.
        expected_value: What the requirement asks for.
        guidance: Remediation shown to the user.
        id: Unique identifier (uuid4).
        detected_at: When the check resolved (UTC).
    """
    requirement_name: RequirementName
    status: ValidationStatus
    severity: Severity
    actual_value: RequirementValue = None
    expected_value: RequirementValue = None
    guidance: UserGuidance = field(default_factory=UserGuidance)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    detected_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not isinstance(self.requirement_name, RequirementName):
            raise InvalidResultError("Unknown requirement", "requirement_name", self.requirement_name)
        if not isinstance(self.status, ValidationStatus):
            raise InvalidResultError("Unknown validation status", "status", self.status)
        if not isinstance(self.severity, Severity):
            raise InvalidResultError("Unknown severity", "severity", self.severity)
        if self.guidance is None:
            object.__setattr__(self, "guidance", UserGuidance())
        elif not isinstance(self.guidance, UserGuidance):
            raise InvalidResultError("Guidance must be a UserGuidance", "guidance", self.guidance)

    @classmethod
    def passed(cls, requirement_name: RequirementName,
               actual_value: RequirementValue = None,
               expected_value: RequirementValue = None) -> "ValidationResult":
        return cls(requirement_name, ValidationStatus.PASS, Severity.LOW,
                   actual_value, expected_value, UserGuidance())

    def is_blocking(self) -> bool:
        return self.status is ValidationStatus.FAIL and self.severity in BLOCKING_SEVERITIES

    def is_warning(self) -> bool:
        return (self.status is ValidationStatus.WARNING
                or (self.status is ValidationStatus.FAIL and self.severity in WARNING_SEVERITIES))

    def is_passing(self) -> bool:
        return self.status is ValidationStatus.PASS

    def format_message(self) -> str:
        """One-line summary, e.g. '✗ disk_space: Insufficient disk space ...'."""
        glyph = STATUS_GLYPHS.get(self.status, "?")
        if self.status is ValidationStatus.PASS:
            return f"{glyph} {self.requirement_name.value}: Valid"
        return f"{glyph} {self.requirement_name.value}: {self.guidance.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "requirement": self.requirement_name.value,
            "status": self.status.value,
            "severity": self.severity.value,
            "actual": _value_to_str(self.actual_value),
            "expected": _value_to_str(self.expected_value),
            "blocking": self.is_blocking(),
            "warning": self.is_warning(),
            "guidance": self.guidance.to_dict(),
            "detected_at": self.detected_at.isoformat(),
        }


def _value_to_str(value: RequirementValue):
    if value is None or isinstance(value, (int, str)):
        return value
    return str(value)
