"""
Shared pytest fixtures for hyprpreflight tests.

These fixtures provide loggers, fake detectors, results and sample system
files so tests never depend on the host's os-release, PCI devices, disks,
network or APT configuration.
"""

from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hyprpreflight.context import ValidationContext
from hyprpreflight.validation import (
    RequirementName,
    Severity,
    UserGuidance,
    ValidationResult,
    ValidationStatus,
)
from tests.fixtures.mock_logger import RecordingLogger
from tests.fixtures.sample_data import (
    OS_RELEASE_BOOKWORM,
    OS_RELEASE_TRIXIE,
    SOURCES_LIST_WITH_DEB_SRC,
    write_sources_tree,
)


LOG_LEVELS = ['debug', 'info', 'warning', 'error', 'critical', 'exception',
              'status', 'verbose', 'result', 'log']


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def trixie_os_release(tmp_path) -> str:
    """Write a Debian Trixie os-release file and return its path."""
    path = tmp_path / "os-release"
    path.write_text(OS_RELEASE_TRIXIE)
    return str(path)


@pytest.fixture
def bookworm_os_release(tmp_path) -> str:
    """Write a Debian Bookworm os-release file and return its path."""
    path = tmp_path / "os-release"
    path.write_text(OS_RELEASE_BOOKWORM)
    return str(path)


@pytest.fixture
def apt_sources(tmp_path):
    """APT layout with deb-src enabled in sources.list."""
    return write_sources_tree(str(tmp_path), sources_list=SOURCES_LIST_WITH_DEB_SRC)


# =============================================================================
# Logger Fixtures
# =============================================================================

@pytest.fixture
def mock_logger():
    """
    Create a mock logger that captures all log calls.

    Usage:
        def test_something(mock_logger):
            some_function(logger=mock_logger)
            mock_logger.warning.assert_called_once()
    """
    logger = MagicMock()
    # Add all log levels as mock methods
    for level in LOG_LEVELS:
        setattr(logger, level, MagicMock())
    return logger


@pytest.fixture
def capturing_logger():
    """
    Create a logger that captures messages by level.

    Usage:
        def test_something(capturing_logger):
            some_function(logger=capturing_logger)
            capturing_logger.assert_logged('warning', 'detection failed')
    """
    return RecordingLogger()


# =============================================================================
# Context Fixtures
# =============================================================================

@pytest.fixture
def ctx() -> ValidationContext:
    """A context that is never cancelled."""
    return ValidationContext.background()


@pytest.fixture
def cancelled_ctx() -> ValidationContext:
    """A context that was cancelled before use."""
    context = ValidationContext.background()
    context.cancel()
    return context


# =============================================================================
# Result Fixtures
# =============================================================================

def make_result(requirement=RequirementName.DISK_SPACE,
                status=ValidationStatus.PASS,
                severity=Severity.LOW,
                message=""):
    guidance = UserGuidance.create(message, steps=["fix it"]) if message else UserGuidance()
    return ValidationResult(requirement, status, severity, guidance=guidance)


@pytest.fixture
def result_factory():
    """
    Factory for ValidationResults.

    Usage:
        def test_something(result_factory):
            blocker = result_factory(status=ValidationStatus.FAIL, severity=Severity.HIGH)
    """
    return make_result


@pytest.fixture
def passing_result():
    return make_result()


@pytest.fixture
def blocking_result():
    return make_result(RequirementName.DEBIAN_VERSION, ValidationStatus.FAIL, Severity.CRITICAL,
                       "Debian bookworm is not supported")


@pytest.fixture
def warning_result():
    return make_result(RequirementName.GPU_SUPPORT, ValidationStatus.WARNING, Severity.MEDIUM,
                       "No GPU detected")


# =============================================================================
# Args Fixtures (Namespace objects for CLI simulation)
# =============================================================================

@pytest.fixture
def check_args() -> Namespace:
    """Args for the check command with every option at its default."""
    return Namespace(
        program='check',
        config_file=None,
        debug=False,
        verbose=False,
        stream_log_level=None,
        progress=False,
        json=False,
        timeout=None,
        path=None,
        min_disk_gb=None,
    )
