"""
Debian release requirement: only Sid and Trixie are supported.
"""

from hyprpreflight.config import OS_RELEASE_PATH
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import DebianVersion
from hyprpreflight.interfaces.detector import DebianDetector
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.types import RequirementName, Severity, ValidationStatus
from hyprpreflight.validators.base import DetectorValidator


class DebianVersionValidator(DetectorValidator):
    """Fail/Critical when the release is unknown or not Sid/Trixie."""

    name = "Debian Version"
    requirement_name = RequirementName.DEBIAN_VERSION
    progress_message = "Detecting Debian version..."

    failure_status = ValidationStatus.FAIL
    failure_severity = Severity.CRITICAL
    failure_guidance_key = 'DEBIAN_DETECTION_FAILED'
    failure_summary = "Failed to detect Debian version"
    expected_value = "Debian Sid or Trixie"

    def __init__(self, detector: DebianDetector, os_release_path: str = OS_RELEASE_PATH, logger=None):
        super().__init__(detector, logger=logger)
        self.os_release_path = os_release_path

    def guidance_params(self):
        return {'os_release_path': self.os_release_path}

    def detect(self, ctx: ValidationContext) -> DebianVersion:
        return self.detector.detect_version(ctx)

    def evaluate(self, version: DebianVersion) -> ValidationResult:
        if not version.is_supported():
            return self.failure(build_guidance('DEBIAN_UNSUPPORTED', codename=version.codename),
                                actual_value=version)
        return self.passed(version)

    def summarize(self, result: ValidationResult) -> str:
        if not result.is_passing() and result.actual_value is not None:
            return f"Unsupported version: {result.actual_value}"
        return super().summarize(result)
