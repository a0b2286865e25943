"""
Internet requirement: at least one Debian endpoint must answer.
"""

from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import InternetConnectivity
from hyprpreflight.interfaces.detector import ConnectivityChecker
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.types import RequirementName, Severity, ValidationStatus
from hyprpreflight.validators.base import DetectorValidator


class ConnectivityValidator(DetectorValidator):

    name = "Internet Connectivity"
    requirement_name = RequirementName.INTERNET
    progress_message = "Testing internet connectivity..."

    failure_status = ValidationStatus.FAIL
    failure_severity = Severity.HIGH
    failure_guidance_key = 'INTERNET_CHECK_FAILED'
    failure_summary = "Failed to check connectivity"
    expected_value = "Reachable Debian repositories"

    def __init__(self, checker: ConnectivityChecker, logger=None):
        super().__init__(checker, logger=logger)

    def detect(self, ctx: ValidationContext) -> InternetConnectivity:
        return self.detector.check_internet_connectivity(ctx)

    def evaluate(self, connectivity: InternetConnectivity) -> ValidationResult:
        if not connectivity.is_connected:
            return self.failure(build_guidance('INTERNET_UNREACHABLE'), actual_value=connectivity)
        return self.passed(connectivity)

    def summarize(self, result: ValidationResult) -> str:
        if isinstance(result.actual_value, InternetConnectivity):
            if result.is_passing():
                return str(result.actual_value)
            return "No internet connection"
        return super().summarize(result)
