"""
Source repository requirement: deb-src entries are recommended, never required.
"""

from hyprpreflight.config import SOURCES_LIST_DIR, SOURCES_LIST_PATH
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import SourceRepositoryStatus
from hyprpreflight.interfaces.detector import SourceRepositoryChecker
from hyprpreflight.validation.guidance_messages import build_guidance
from hyprpreflight.validation.result import ValidationResult
from hyprpreflight.validation.types import RequirementName, Severity, ValidationStatus
from hyprpreflight.validators.base import DetectorValidator


class SourceRepositoryValidator(DetectorValidator):

    name = "Source Repositories"
    requirement_name = RequirementName.SOURCE_REPOS
    progress_message = "Checking source repositories..."

    failure_status = ValidationStatus.WARNING
    failure_severity = Severity.LOW
    failure_guidance_key = 'SOURCES_CHECK_FAILED'
    failure_summary = "Could not check source repos"
    expected_value = "deb-src repositories enabled"

    def __init__(self, checker: SourceRepositoryChecker,
                 sources_list_path: str = SOURCES_LIST_PATH,
                 sources_list_dir: str = SOURCES_LIST_DIR, logger=None):
        super().__init__(checker, logger=logger)
        self.sources_list_path = sources_list_path
        self.sources_list_dir = sources_list_dir

    def guidance_params(self):
        return {'sources_list_path': self.sources_list_path, 'sources_list_dir': self.sources_list_dir}

    def detect(self, ctx: ValidationContext) -> SourceRepositoryStatus:
        return self.detector.check_source_repositories(ctx)

    def evaluate(self, status: SourceRepositoryStatus) -> ValidationResult:
        if not status.is_enabled:
            return self.failure(build_guidance('SOURCES_NOT_CONFIGURED', **self.guidance_params()),
                                actual_value=status)
        return self.passed(status)

    def summarize(self, result: ValidationResult) -> str:
        if isinstance(result.actual_value, SourceRepositoryStatus):
            return "deb-src configured" if result.is_passing() else "deb-src not configured"
        return super().summarize(result)
