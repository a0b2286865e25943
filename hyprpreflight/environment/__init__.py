"""
System detectors for hyprpreflight.

This package gathers the raw facts the validators classify:

Key features:
- Debian release detection from os-release (via distro)
- GPU detection from lspci -nn output
- Free space measurement (via psutil)
- Internet reachability with HTTP HEAD probes (via httpx)
- deb-src detection across one-line and deb822 APT sources

Public exports:
    DebianVersion, GPUType, DiskSpace, ConnectivityTest,
    InternetConnectivity, SourceRepositoryStatus: Detected value objects
    DebianVersionDetector: os-release based DebianDetector
    LspciGPUDetector: lspci based GPUDetector
    PsutilDiskSpaceDetector: psutil based DiskSpaceDetector
    HTTPConnectivityChecker: httpx based ConnectivityChecker
    AptSourceRepositoryChecker: sources.list based SourceRepositoryChecker
"""

from hyprpreflight.environment.models import (
    GB,
    MB,
    DEBIAN_SID,
    DEBIAN_TRIXIE,
    DebianVersion,
    GPUType,
    DiskSpace,
    ConnectivityTest,
    InternetConnectivity,
    SourceRepositoryStatus,
)
from hyprpreflight.environment.os_detect import DebianVersionDetector
from hyprpreflight.environment.gpu_detect import LspciGPUDetector, parse_lspci_output
from hyprpreflight.environment.disk_space import PsutilDiskSpaceDetector
from hyprpreflight.environment.connectivity import HTTPConnectivityChecker
from hyprpreflight.environment.source_repos import AptSourceRepositoryChecker

__all__ = [
    # Value objects
    "GB",
    "MB",
    "DEBIAN_SID",
    "DEBIAN_TRIXIE",
    "DebianVersion",
    "GPUType",
    "DiskSpace",
    "ConnectivityTest",
    "InternetConnectivity",
    "SourceRepositoryStatus",
    # Detectors
    "DebianVersionDetector",
    "LspciGPUDetector",
    "parse_lspci_output",
    "PsutilDiskSpaceDetector",
    "HTTPConnectivityChecker",
    "AptSourceRepositoryChecker",
]
