"""
Interface definitions for hyprpreflight.

This package defines the abstract interfaces (contracts) between the
validation core and its collaborators:

Validator Interfaces:
    - ValidatorInterface: One requirement check producing a ValidationResult

Detector Interfaces:
    - DebianDetector: Debian release detection
    - GPUDetector: Display controller detection
    - DiskSpaceDetector: Free space measurement
    - ConnectivityChecker: Internet reachability
    - SourceRepositoryChecker: deb-src configuration
"""

from hyprpreflight.interfaces.validator import ValidatorInterface

from hyprpreflight.interfaces.detector import (
    DebianDetector,
    GPUDetector,
    DiskSpaceDetector,
    ConnectivityChecker,
    SourceRepositoryChecker,
)

__all__ = [
    'ValidatorInterface',
    'DebianDetector',
    'GPUDetector',
    'DiskSpaceDetector',
    'ConnectivityChecker',
    'SourceRepositoryChecker',
]
