"""
Enumerations shared by the validation domain.
"""

from enum import Enum


class ValidationStatus(str, Enum):
    """Outcome of a single validation check."""
    PASS = "pass"
    FAIL = "fail"
    WARNING = "warning"


class Severity(str, Enum):
    """Impact level of a failed check."""
    CRITICAL = "critical"  # Blocks installation
    HIGH = "high"          # Blocks installation
    MEDIUM = "medium"      # Warning only
    LOW = "low"            # Informational


BLOCKING_SEVERITIES = frozenset({Severity.CRITICAL, Severity.HIGH})
WARNING_SEVERITIES = frozenset({Severity.MEDIUM, Severity.LOW})


class ValidationOutcome(str, Enum):
    """Overall result of a session. Always derived, never assigned by callers."""
    SUCCESS = "success"                  # All validations passed
    BLOCKED = "blocked"                  # Blocking failures exist
    WARNINGS = "warnings"                # Warnings exist, can proceed
    PARTIAL_SUCCESS = "partial_success"  # Non-passing results that are neither blocking nor warnings


class RequirementName(str, Enum):
    """Identifier of an independently checkable installation requirement."""
    DEBIAN_VERSION = "debian_version"
    GPU_SUPPORT = "gpu_support"
    DISK_SPACE = "disk_space"
    INTERNET = "internet_connectivity"
    SOURCE_REPOS = "source_repositories"
    DISTRIBUTION = "distribution"

    def __str__(self) -> str:
        return self.value


class GPUVendor(str, Enum):
    AMD = "amd"
    NVIDIA = "nvidia"
    INTEL = "intel"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value
