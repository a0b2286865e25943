"""
Disk space requirement on the installation filesystem.
"""

from hyprpreflight.config import DEFAULT_CHECK_PATH, MIN_DISK_SPACE_GB
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import GB, DiskSpace
from hyprpreflight.interfaces.detector import DiskSpaceDetector
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.types import RequirementName, Severity, ValidationStatus
from hyprpreflight.validators.base import DetectorValidator


class DiskSpaceValidator(DetectorValidator):
    """
    Fail/High when free space on `path` is below `min_gb` gigabytes.

    The expected value is the minimum as a byte count.
    """

    name = "Disk Space"
    requirement_name = RequirementName.DISK_SPACE
    progress_message = "Checking disk space..."

    failure_status = ValidationStatus.FAIL
    failure_severity = Severity.HIGH
    failure_guidance_key = 'DISK_CHECK_FAILED'
    failure_summary = "Failed to check disk space"

    def __init__(self, detector: DiskSpaceDetector, path: str = DEFAULT_CHECK_PATH,
                 min_gb: float = MIN_DISK_SPACE_GB, logger=None):
        super().__init__(detector, logger=logger)
        self.path = path
        self.min_gb = min_gb
        self.expected_value = int(min_gb * GB)

    def guidance_params(self):
        return {'path': self.path, 'required_gb': self.min_gb}

    def detect(self, ctx: ValidationContext) -> DiskSpace:
        return self.detector.detect_available_space(ctx, self.path)

    def evaluate(self, space: DiskSpace) -> ValidationResult:
        if not space.meets_minimum(self.min_gb):
            guidance = build_guidance('DISK_INSUFFICIENT',
                                      available_gb=space.available_gb, required_gb=float(self.min_gb))
            return self.failure(guidance, actual_value=space)
        return self.passed(space)

    def summarize(self, result: ValidationResult) -> str:
        space = result.actual_value
        if isinstance(space, DiskSpace):
            if result.is_passing():
                return f"{space.available_gb:.2f} GB available"
            return f"Only {space.available_gb:.2f} GB available"
        return super().summarize(result)
