"""
Test fixtures package for hyprpreflight tests.

This package provides reusable fake detectors, a recording logger and sample
system data for testing validators, the orchestrator and the runner.
"""

from tests.fixtures.mock_logger import RecordingLogger
from tests.fixtures.fake_detectors import (
    FakeConnectivityChecker,
    FakeDebianDetector,
    FakeDiskSpaceDetector,
    FakeGPUDetector,
    FakeSourceRepositoryChecker,
    failing_detector,
    make_validators,
    no_gpu_detector,
)
from tests.fixtures.sample_data import (
    LSPCI_AMD,
    LSPCI_NO_GPU,
    LSPCI_NVIDIA,
    OS_RELEASE_BOOKWORM,
    OS_RELEASE_SID,
    OS_RELEASE_TRIXIE,
    write_sources_tree,
)

__all__ = [
    # Loggers
    'RecordingLogger',
    # Fake detectors
    'FakeDebianDetector',
    'FakeGPUDetector',
    'FakeDiskSpaceDetector',
    'FakeConnectivityChecker',
    'FakeSourceRepositoryChecker',
    'failing_detector',
    'make_validators',
    'no_gpu_detector',
    # Sample data
    'OS_RELEASE_TRIXIE',
    'OS_RELEASE_SID',
    'OS_RELEASE_BOOKWORM',
    'LSPCI_AMD',
    'LSPCI_NVIDIA',
    'LSPCI_NO_GPU',
    'write_sources_tree',
]
