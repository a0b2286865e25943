"""
Detector interface definitions for hyprpreflight.

Detectors are the external collaborators of the validation core: each
exposes a synchronous call returning a typed value object or raising a
DetectorError. The validators consume these interfaces; the system
implementations live in hyprpreflight.environment.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from hyprpreflight.context import ValidationContext
    from hyprpreflight.environment.models import (
        DebianVersion,
        DiskSpace,
        GPUType,
        InternetConnectivity,
        SourceRepositoryStatus,
    )


class DebianDetector(ABC):
    """Detects the Debian release."""

    @abstractmethod
    def detect_version(self, ctx: "ValidationContext") -> "DebianVersion":
        """Identify the Debian version.

        Raises:
            DetectorError: If the release cannot be determined.
        """

    @abstractmethod
    def is_debian_based(self, ctx: "ValidationContext") -> bool:
        """Check whether the system is Debian or a Debian derivative."""


class GPUDetector(ABC):
    """Detects installed display controllers."""

    @abstractmethod
    def detect_gpus(self, ctx: "ValidationContext") -> List["GPUType"]:
        """Return all detected GPUs, primary first.

        Raises:
            DetectorError: If detection fails or no GPU is found.
        """

    def primary_gpu(self, ctx: "ValidationContext") -> "GPUType":
        return self.detect_gpus(ctx)[0]


class DiskSpaceDetector(ABC):
    """Measures free space on a filesystem."""

    @abstractmethod
    def detect_available_space(self, ctx: "ValidationContext", path: str) -> "DiskSpace":
        """Return available and total bytes for the filesystem holding `path`.

        Raises:
            DetectorError: If the filesystem cannot be queried.
        """


class ConnectivityChecker(ABC):
    """Checks internet reachability."""

    @abstractmethod
    def check_internet_connectivity(self, ctx: "ValidationContext") -> "InternetConnectivity":
        """Probe the configured endpoints.

        Raises:
            DetectorError: If probing itself could not be performed.
        """

    def check_debian_repositories(self, ctx: "ValidationContext") -> bool:
        return self.check_internet_connectivity(ctx).can_reach_debian_repos()


class SourceRepositoryChecker(ABC):
    """Inspects APT source configuration."""

    @abstractmethod
    def check_source_repositories(self, ctx: "ValidationContext") -> "SourceRepositoryStatus":
        """Report whether deb-src entries are configured.

        Raises:
            DetectorError: If the APT configuration cannot be read.
        """
