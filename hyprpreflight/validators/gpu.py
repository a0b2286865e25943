"""
GPU requirement: any detected display controller passes.

Hyprland also runs on integrated graphics, so a missing GPU only warns.
"""

from typing import List

from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import GPUType
from hyprpreflight.interfaces.detector import GPUDetector
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.types import RequirementName, Severity, ValidationStatus
from hyprpreflight.validators.base import DetectorValidator


class GPUValidator(DetectorValidator):

    name = "GPU Support"
    requirement_name = RequirementName.GPU_SUPPORT
    progress_message = "Detecting GPU..."

    failure_status = ValidationStatus.WARNING
    failure_severity = Severity.MEDIUM
    failure_guidance_key = 'GPU_NOT_DETECTED'
    failure_summary = "No GPU detected"
    expected_value = "AMD, NVIDIA or Intel GPU"

    def __init__(self, detector: GPUDetector, logger=None):
        super().__init__(detector, logger=logger)

    def detect(self, ctx: ValidationContext) -> List[GPUType]:
        return self.detector.detect_gpus(ctx)

    def evaluate(self, gpus: List[GPUType]) -> ValidationResult:
        if not gpus:
            return self.failure(build_guidance(self.failure_guidance_key))
        primary = gpus[0]
        if primary.requires_proprietary_driver():
            self.logger.info(f"{primary} may need the proprietary NVIDIA driver for Hyprland")
        return self.passed(primary)
