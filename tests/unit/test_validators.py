"""
Tests for the five requirement validators.

Tests cover:
- The classification table for detector failure, unmet and met requirements
- Guidance content for common failures
- Cancelled contexts
- Progress summaries
"""

import time

import pytest

from hyprpreflight.config import PreflightConfig
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import GB, DebianVersion, DiskSpace, SourceRepositoryStatus
from hyprpreflight.validation import (
    RequirementName,
    Severity,
    ValidationOrchestrator,
    ValidationOutcome,
    ValidationStatus,
)
from hyprpreflight.validators import (
    ConnectivityValidator,
    DebianVersionValidator,
    DiskSpaceValidator,
    GPUValidator,
    SourceRepositoryValidator,
    default_validators,
)
from tests.fixtures.fake_detectors import (
    AMD_GPU,
    BOOKWORM,
    CONNECTED,
    DEB_SRC_ENABLED,
    DEB_SRC_MISSING,
    DISCONNECTED,
    LOW_SPACE,
    NVIDIA_GPU,
    PLENTY_OF_SPACE,
    TRIXIE,
    FakeConnectivityChecker,
    FakeDebianDetector,
    FakeDiskSpaceDetector,
    FakeGPUDetector,
    FakeSourceRepositoryChecker,
    failing_detector,
    make_validators,
    no_gpu_detector,
)


class TestDebianVersionValidator:
    """Tests for DebianVersionValidator."""

    @pytest.mark.parametrize("codename", ["sid", "trixie", "Trixie"])
    def test_supported_versions_pass(self, ctx, codename):
        """Should pass for Sid and Trixie."""
        validator = DebianVersionValidator(FakeDebianDetector(DebianVersion(codename)))
        result = validator.validate(ctx)
        assert result.status is ValidationStatus.PASS
        assert result.severity is Severity.LOW
        assert result.expected_value == "Debian Sid or Trixie"

    def test_bookworm_is_critical(self, ctx):
        """Should block on Bookworm with upgrade guidance."""
        result = DebianVersionValidator(FakeDebianDetector(BOOKWORM)).validate(ctx)
        assert result.status is ValidationStatus.FAIL
        assert result.severity is Severity.CRITICAL
        assert result.is_blocking()
        assert result.actual_value == BOOKWORM
        assert "Upgrade to Debian Sid or Trixie" in result.guidance.format()

    def test_detector_failure_is_critical(self, ctx, capturing_logger):
        """Should block and point at the os-release file when detection fails."""
        validator = DebianVersionValidator(failing_detector(FakeDebianDetector),
                                           os_release_path="/tmp/os-release", logger=capturing_logger)
        result = validator.validate(ctx)
        assert result.status is ValidationStatus.FAIL
        assert result.severity is Severity.CRITICAL
        assert result.actual_value is None
        assert result.guidance.message == "Unable to detect Debian version"
        assert "/tmp/os-release" in result.guidance.reason
        capturing_logger.assert_logged('warning', "detection failed")

    def test_summaries(self, ctx):
        """Should summarize pass, unsupported and failure differently."""
        ok = DebianVersionValidator(FakeDebianDetector(TRIXIE))
        assert ok.summarize(ok.validate(ctx)) == "Detected: trixie (13)"
        old = DebianVersionValidator(FakeDebianDetector(BOOKWORM))
        assert old.summarize(old.validate(ctx)) == "Unsupported version: bookworm (12)"
        broken = DebianVersionValidator(failing_detector(FakeDebianDetector))
        assert broken.summarize(broken.validate(ctx)) == "Failed to detect Debian version"


class TestGPUValidator:
    """Tests for GPUValidator."""

    def test_any_gpu_passes(self, ctx):
        """Should pass with the first GPU as the detected value."""
        result = GPUValidator(FakeGPUDetector([AMD_GPU, NVIDIA_GPU])).validate(ctx)
        assert result.is_passing()
        assert result.actual_value == AMD_GPU

    def test_nvidia_passes_and_logs(self, ctx, capturing_logger):
        """Should pass NVIDIA and mention the proprietary driver."""
        result = GPUValidator(FakeGPUDetector([NVIDIA_GPU]), logger=capturing_logger).validate(ctx)
        assert result.is_passing()
        capturing_logger.assert_logged('info', "proprietary NVIDIA driver")

    def test_no_gpu_is_medium_warning(self, ctx):
        """Should warn, not block, without a GPU."""
        result = GPUValidator(no_gpu_detector()).validate(ctx)
        assert result.status is ValidationStatus.WARNING
        assert result.severity is Severity.MEDIUM
        assert result.is_warning()
        assert not result.is_blocking()
        assert result.guidance.has_steps()

    def test_empty_gpu_list_is_medium_warning(self, ctx):
        """Should treat an empty detection result like a missing GPU."""
        result = GPUValidator(FakeGPUDetector([])).validate(ctx)
        assert result.status is ValidationStatus.WARNING
        assert result.severity is Severity.MEDIUM
        assert result.guidance.message.startswith("No GPU detected")

    def test_empty_gpu_list_does_not_block(self, ctx):
        """Should let the session proceed with warnings."""
        session = ValidationOrchestrator([GPUValidator(FakeGPUDetector([]))]).execute_validations(ctx)
        assert session.overall_result is ValidationOutcome.WARNINGS
        assert session.can_proceed()

    def test_summary(self, ctx):
        """Should describe the detected GPU."""
        validator = GPUValidator(FakeGPUDetector([AMD_GPU]))
        assert validator.summarize(validator.validate(ctx)) == "Detected: amd Navi 21 Radeon RX 6800"
        missing = GPUValidator(no_gpu_detector())
        assert missing.summarize(missing.validate(ctx)) == "No GPU detected"


class TestDiskSpaceValidator:
    """Tests for DiskSpaceValidator."""

    def test_enough_space_passes(self, ctx):
        """Should pass with the detected space and expected bytes."""
        detector = FakeDiskSpaceDetector(PLENTY_OF_SPACE)
        result = DiskSpaceValidator(detector, path="/home", min_gb=10).validate(ctx)
        assert result.is_passing()
        assert result.actual_value == PLENTY_OF_SPACE
        assert result.expected_value == 10 * GB
        assert detector.paths == ["/home"]

    def test_insufficient_space_is_high(self, ctx):
        """Should block with both sizes in the message."""
        result = DiskSpaceValidator(FakeDiskSpaceDetector(LOW_SPACE)).validate(ctx)
        assert result.status is ValidationStatus.FAIL
        assert result.severity is Severity.HIGH
        assert result.guidance.message == "Insufficient disk space. Found 5.20 GB, need 10.00 GB"

    def test_exact_minimum_passes(self, ctx):
        """Should treat exactly the minimum as enough."""
        space = DiskSpace(available=10 * GB, total=20 * GB)
        assert DiskSpaceValidator(FakeDiskSpaceDetector(space), min_gb=10).validate(ctx).is_passing()

    def test_detector_failure_is_high(self, ctx):
        """Should block when statfs fails."""
        result = DiskSpaceValidator(failing_detector(FakeDiskSpaceDetector), path="/mnt").validate(ctx)
        assert result.status is ValidationStatus.FAIL
        assert result.severity is Severity.HIGH
        assert result.guidance.message == "Unable to check disk space"
        assert "/mnt" in result.guidance.reason

    def test_summaries(self, ctx):
        """Should show available gigabytes."""
        ok = DiskSpaceValidator(FakeDiskSpaceDetector(PLENTY_OF_SPACE))
        assert ok.summarize(ok.validate(ctx)) == "120.00 GB available"
        low = DiskSpaceValidator(FakeDiskSpaceDetector(LOW_SPACE))
        assert low.summarize(low.validate(ctx)) == "Only 5.20 GB available"


class TestConnectivityValidator:
    """Tests for ConnectivityValidator."""

    def test_connected_passes(self, ctx):
        """Should pass when an endpoint answered."""
        result = ConnectivityValidator(FakeConnectivityChecker(CONNECTED)).validate(ctx)
        assert result.is_passing()

    def test_disconnected_is_high(self, ctx):
        """Should block when no endpoint answered."""
        result = ConnectivityValidator(FakeConnectivityChecker(DISCONNECTED)).validate(ctx)
        assert result.status is ValidationStatus.FAIL
        assert result.severity is Severity.HIGH
        assert result.guidance.message.startswith("No internet connection detected")

    def test_checker_failure_is_high(self, ctx):
        """Should block when the checker itself fails."""
        result = ConnectivityValidator(failing_detector(FakeConnectivityChecker)).validate(ctx)
        assert result.is_blocking()
        assert result.guidance.message == "Unable to test internet connectivity"

    def test_summaries(self, ctx):
        """Should show latency or the lack of connection."""
        ok = ConnectivityValidator(FakeConnectivityChecker(CONNECTED))
        assert ok.summarize(ok.validate(ctx)) == "Connected (avg latency: 42ms)"
        down = ConnectivityValidator(FakeConnectivityChecker(DISCONNECTED))
        assert down.summarize(down.validate(ctx)) == "No internet connection"


class TestSourceRepositoryValidator:
    """Tests for SourceRepositoryValidator."""

    def test_deb_src_passes(self, ctx):
        """Should pass with deb-src entries."""
        assert SourceRepositoryValidator(FakeSourceRepositoryChecker(DEB_SRC_ENABLED)).validate(ctx).is_passing()

    def test_missing_deb_src_is_low_warning(self, ctx):
        """Should warn with the sources.list path in the steps."""
        validator = SourceRepositoryValidator(FakeSourceRepositoryChecker(DEB_SRC_MISSING),
                                              sources_list_path="/etc/apt/sources.list")
        result = validator.validate(ctx)
        assert result.status is ValidationStatus.WARNING
        assert result.severity is Severity.LOW
        assert "Edit /etc/apt/sources.list" in result.guidance.actionable_steps
        assert validator.summarize(result) == "deb-src not configured"

    def test_checker_failure_is_low_warning(self, ctx):
        """Should warn, never block, when sources cannot be read."""
        result = SourceRepositoryValidator(failing_detector(FakeSourceRepositoryChecker)).validate(ctx)
        assert result.status is ValidationStatus.WARNING
        assert result.severity is Severity.LOW
        assert not result.is_blocking()

    def test_status_from_lines(self):
        """Should only enable on deb-src lines."""
        assert SourceRepositoryStatus.from_lines(["  deb-src http://x sid main"]).is_enabled
        assert not SourceRepositoryStatus.from_lines(None).is_enabled


class TestCancellation:
    """Tests for validators run with a done context."""

    def test_cancelled_context_skips_detector(self, cancelled_ctx):
        """Should not call the detector and should report an interrupted check."""
        detector = FakeDiskSpaceDetector(PLENTY_OF_SPACE)
        result = DiskSpaceValidator(detector).validate(cancelled_ctx)
        assert detector.calls == 0
        assert result.status is ValidationStatus.FAIL
        assert result.severity is Severity.HIGH
        assert result.guidance.message == "Disk Space check did not complete"
        assert "context cancelled" in result.guidance.reason

    def test_expired_context_keeps_policy_severity(self):
        """Should keep each validator's failure severity for an expired deadline."""
        ctx = ValidationContext.with_timeout(0.001)
        time.sleep(0.01)
        result = GPUValidator(FakeGPUDetector([AMD_GPU])).validate(ctx)
        assert result.status is ValidationStatus.WARNING
        assert result.severity is Severity.MEDIUM
        assert "deadline exceeded" in result.guidance.reason


class TestScenarios:
    """End-to-end classification scenarios over the orchestrator."""

    def run(self, **overrides):
        return ValidationOrchestrator(make_validators(**overrides)).execute_validations()

    def test_all_pass(self):
        """Should succeed with no blockers or warnings."""
        session = self.run()
        assert session.overall_result is ValidationOutcome.SUCCESS
        assert session.can_proceed()
        assert session.blocking_results() == []
        assert session.warning_results() == []

    def test_bookworm_blocks(self):
        """Should block on an unsupported release."""
        session = self.run(debian=FakeDebianDetector(BOOKWORM))
        assert session.overall_result is ValidationOutcome.BLOCKED
        assert not session.can_proceed()
        assert "Upgrade to Debian Sid or Trixie" in session.blocking_results()[0].guidance.format()

    def test_low_disk_blocks(self):
        """Should block with 5.2 GB free."""
        session = self.run(disk=FakeDiskSpaceDetector(LOW_SPACE))
        assert session.overall_result is ValidationOutcome.BLOCKED
        assert [r.requirement_name for r in session.blocking_results()] == [RequirementName.DISK_SPACE]

    def test_no_gpu_warns(self):
        """Should warn but allow proceeding without a GPU."""
        session = self.run(gpu=no_gpu_detector())
        assert session.overall_result is ValidationOutcome.WARNINGS
        assert session.can_proceed()
        assert len(session.warning_results()) == 1


class TestDefaultValidators:
    """Tests for default_validators."""

    def test_order_and_configuration(self):
        """Should build the five validators from config in order."""
        config = PreflightConfig(check_path="/var", min_disk_space_gb=20,
                                 os_release_path="/tmp/os-release")
        validators = default_validators(config)
        assert [v.requirement_name for v in validators] == [
            RequirementName.DEBIAN_VERSION,
            RequirementName.GPU_SUPPORT,
            RequirementName.DISK_SPACE,
            RequirementName.INTERNET,
            RequirementName.SOURCE_REPOS,
        ]
        assert validators[0].detector.os_release_path == "/tmp/os-release"
        assert validators[2].path == "/var"
        assert validators[2].expected_value == 20 * GB
