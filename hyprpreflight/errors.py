"""
Custom exceptions for hyprpreflight.

This module provides exception classes with user-friendly messaging that
include:
- Clear error descriptions
- Technical details for debugging
- Actionable suggestions for resolution

Detector failures are raised with these types inside the environment
package and converted into classified validation results by the validators;
they never escape the orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """Machine-readable error codes for hyprpreflight errors."""
    # Configuration errors (1xx)
    CONFIG_MISSING_REQUIRED = "E101"
    CONFIG_INVALID_VALUE = "E102"
    CONFIG_FILE_NOT_FOUND = "E103"
    CONFIG_PARSE_ERROR = "E104"

    # Detector errors (2xx)
    DETECTOR_FAILED = "E201"
    DETECTOR_INVALID_DEBIAN_VERSION = "E202"
    DETECTOR_INVALID_GPU = "E203"
    DETECTOR_INVALID_DISK_SPACE = "E204"
    DETECTOR_CANCELLED = "E205"

    # Validation errors (3xx)
    VALIDATION_INVALID_RESULT = "E301"

    # Runner errors (4xx)
    RUNNER_ALREADY_STARTED = "E401"
    RUNNER_CHANNEL_CLOSED = "E402"

    # Repository errors (5xx)
    SESSION_NOT_FOUND = "E501"

    # Internal errors (9xx)
    INTERNAL_ERROR = "E901"


@dataclass
class PreflightError:
    """
    Structured error information.

    Attributes:
        code: Machine-readable error code.
        message: User-facing error message.
        details: Technical details for debugging.
        suggestion: How to fix the issue.
        context: Additional context information.
    """
    code: ErrorCode
    message: str
    details: str = ""
    suggestion: str = ""
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"[{self.code.value}] {self.message}"]
        if self.details:
            lines.append(f"  Details: {self.details}")
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(lines)


class PreflightException(Exception):
    """
    Base exception class for hyprpreflight.

    All custom exceptions inherit from this class and carry a PreflightError.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR,
                 details: str = "", suggestion: str = "", **context):
        self.error = PreflightError(
            code=code,
            message=message,
            details=details,
            suggestion=suggestion,
            context=context,
        )
        super().__init__(str(self.error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def suggestion(self) -> str:
        return self.error.suggestion


class ConfigurationError(PreflightException):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, parameter: str = None,
                 expected: Any = None, actual: Any = None,
                 suggestion: str = None,
                 code: ErrorCode = ErrorCode.CONFIG_INVALID_VALUE):
        details_parts = []
        if parameter:
            details_parts.append(f"Parameter: {parameter}")
        if expected is not None:
            details_parts.append(f"Expected: {expected}")
        if actual is not None:
            details_parts.append(f"Actual: {actual}")

        super().__init__(
            message=message,
            code=code,
            details="; ".join(details_parts),
            suggestion=suggestion or self._default_suggestion(code),
            parameter=parameter,
            expected=expected,
            actual=actual,
        )

    @staticmethod
    def _default_suggestion(code: ErrorCode) -> str:
        suggestions = {
            ErrorCode.CONFIG_MISSING_REQUIRED: "Provide the required setting in the config file or on the command line",
            ErrorCode.CONFIG_INVALID_VALUE: "Check the setting value and correct it",
            ErrorCode.CONFIG_FILE_NOT_FOUND: "Verify the config file path exists",
            ErrorCode.CONFIG_PARSE_ERROR: "Check config file syntax (YAML mapping expected)",
        }
        return suggestions.get(code, "Check the configuration and try again")


class DetectorError(PreflightException):
    """
    Raised by a detector when it cannot produce a value.

    Examples:
        - /etc/os-release missing or without VERSION_CODENAME
        - lspci not installed or reporting no display controller
        - statfs failing on the checked path
    """

    default_code = ErrorCode.DETECTOR_FAILED

    def __init__(self, message: str, detector: str = None,
                 cause: str = None, suggestion: str = None,
                 code: ErrorCode = None):
        code = code or self.default_code
        details_parts = []
        if detector:
            details_parts.append(f"Detector: {detector}")
        if cause:
            details_parts.append(f"Cause: {cause}")

        super().__init__(
            message=message,
            code=code,
            details="; ".join(details_parts),
            suggestion=suggestion or "",
            detector=detector,
            cause=cause,
        )


class InvalidDebianVersionError(DetectorError):
    default_code = ErrorCode.DETECTOR_INVALID_DEBIAN_VERSION

    def __init__(self, message: str = "invalid debian version", **kwargs):
        super().__init__(message, **kwargs)


class InvalidGPUError(DetectorError):
    default_code = ErrorCode.DETECTOR_INVALID_GPU

    def __init__(self, message: str = "invalid gpu configuration", **kwargs):
        super().__init__(message, **kwargs)


class InvalidDiskSpaceError(DetectorError):
    default_code = ErrorCode.DETECTOR_INVALID_DISK_SPACE

    def __init__(self, message: str = "invalid disk space value", **kwargs):
        super().__init__(message, **kwargs)


class DetectionCancelledError(DetectorError):
    """Raised when the validation context was cancelled or its deadline passed."""
    default_code = ErrorCode.DETECTOR_CANCELLED

    def __init__(self, message: str = "detection cancelled", **kwargs):
        super().__init__(message, **kwargs)


class InvalidResultError(PreflightException):
    """Raised when a ValidationResult is built from invalid inputs."""

    def __init__(self, message: str, field_name: str = None, actual: Any = None):
        details = f"Field: {field_name}" if field_name else ""
        if actual is not None:
            details = f"{details}; Actual: {actual!r}" if details else f"Actual: {actual!r}"
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_INVALID_RESULT,
            details=details,
            suggestion="Construct results with the enums from hyprpreflight.validation",
            field_name=field_name,
        )


class RunnerAlreadyStartedError(PreflightException):
    """Raised when run() is called a second time on the same runner."""

    def __init__(self, session_id: Optional[str] = None):
        super().__init__(
            message="Validation runner has already been run",
            code=ErrorCode.RUNNER_ALREADY_STARTED,
            details=f"Session: {session_id}" if session_id else "",
            suggestion="Create a new ValidationRunner for each validation run",
            session_id=session_id,
        )


class ChannelClosedError(PreflightException):
    """Raised when sending on a closed progress channel."""

    def __init__(self):
        super().__init__(
            message="Progress channel is closed",
            code=ErrorCode.RUNNER_CHANNEL_CLOSED,
        )


class SessionNotFoundError(PreflightException):
    """Raised by a session repository when a lookup finds nothing."""

    def __init__(self, session_id: Optional[str] = None):
        message = "validation session not found"
        if session_id:
            message = f"{message}: {session_id}"
        super().__init__(
            message=message,
            code=ErrorCode.SESSION_NOT_FOUND,
            session_id=session_id,
        )
