"""
Value objects produced by the system detectors.

These are the typed members of the actual/expected value union carried by a
ValidationResult. They are immutable and validate their inputs on
construction.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from hyprpreflight.config import SUPPORTED_CODENAMES
from hyprpreflight.errors import InvalidDebianVersionError, InvalidDiskSpaceError, InvalidGPUError
from hyprpreflight.validation.types import GPUVendor

GB = 1024 * 1024 * 1024
MB = 1024 * 1024


@dataclass(frozen=True, eq=False)
class DebianVersion:
    """
    A Debian release identified by codename.

    Attributes:
        codename: Lower-cased release codename ('sid', 'trixie', 'bookworm').
        version_number: Release number or 'unstable' (may be empty).
    """
    codename: str
    version_number: str = ""

    def __post_init__(self):
        codename = (self.codename or "").strip().lower()
        if not codename:
            raise InvalidDebianVersionError(cause="empty codename")
        object.__setattr__(self, "codename", codename)
        object.__setattr__(self, "version_number", (self.version_number or "").strip())

    def is_supported(self) -> bool:
        return self.codename in SUPPORTED_CODENAMES

    def is_sid(self) -> bool:
        return self.codename == "sid"

    def is_trixie(self) -> bool:
        return self.codename == "trixie"

    def is_bookworm(self) -> bool:
        return self.codename == "bookworm"

    def __eq__(self, other) -> bool:
        if not isinstance(other, DebianVersion):
            return NotImplemented
        return self.codename == other.codename

    def __hash__(self) -> int:
        return hash(self.codename)

    def __str__(self) -> str:
        if self.version_number:
            return f"{self.codename} ({self.version_number})"
        return self.codename


DEBIAN_SID = DebianVersion("sid", "unstable")
DEBIAN_TRIXIE = DebianVersion("trixie", "13")


@dataclass(frozen=True)
class GPUType:
    """A display controller reported by lspci."""
    vendor: GPUVendor
    model: str = ""
    pci_id: str = ""

    def __post_init__(self):
        if not self.vendor:
            raise InvalidGPUError(cause="missing vendor")
        if not isinstance(self.vendor, GPUVendor):
            try:
                object.__setattr__(self, "vendor", GPUVendor(str(self.vendor).lower()))
            except ValueError:
                object.__setattr__(self, "vendor", GPUVendor.UNKNOWN)
        object.__setattr__(self, "model", (self.model or "").strip())
        object.__setattr__(self, "pci_id", (self.pci_id or "").strip())

    def is_nvidia(self) -> bool:
        return self.vendor == GPUVendor.NVIDIA

    def is_amd(self) -> bool:
        return self.vendor == GPUVendor.AMD

    def is_intel(self) -> bool:
        return self.vendor == GPUVendor.INTEL

    def requires_proprietary_driver(self) -> bool:
        return self.is_nvidia()

    def __str__(self) -> str:
        if self.model:
            return f"{self.vendor.value} {self.model}"
        return self.vendor.value


@dataclass(frozen=True)
class DiskSpace:
    """Free and total bytes on the filesystem holding `path`."""
    available: int
    total: int
    path: str = "/"

    def __post_init__(self):
        if self.available < 0 or self.total < 0:
            raise InvalidDiskSpaceError(cause="negative byte count")
        if self.available > self.total:
            raise InvalidDiskSpaceError(cause=f"available ({self.available}) exceeds total ({self.total})")
        object.__setattr__(self, "path", (self.path or "").strip() or "/")

    def meets_minimum(self, required_gb: float) -> bool:
        return self.available >= required_gb * GB

    @property
    def available_gb(self) -> float:
        return self.available / GB

    @property
    def total_gb(self) -> float:
        return self.total / GB

    @property
    def usage_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return (self.total - self.available) / self.total * 100

    def __str__(self) -> str:
        return (f"{self.available_gb:.2f} GB available / {self.total_gb:.2f} GB total "
                f"({self.usage_percent:.1f}% used)")


@dataclass(frozen=True)
class ConnectivityTest:
    """Outcome of probing one endpoint. Latency is in seconds."""
    endpoint: str
    success: bool
    latency: float = 0.0
    error_message: str = ""


@dataclass(frozen=True)
class InternetConnectivity:
    is_connected: bool
    tested_endpoints: Tuple[ConnectivityTest, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tested_endpoints", tuple(self.tested_endpoints or ()))

    @property
    def average_latency(self) -> float:
        """Mean latency of successful probes in seconds (0.0 when none succeeded)."""
        latencies = [t.latency for t in self.tested_endpoints if t.success]
        if not latencies:
            return 0.0
        return sum(latencies) / len(latencies)

    def can_reach_debian_repos(self) -> bool:
        for test in self.tested_endpoints:
            host = test.endpoint.split("://", 1)[-1].rstrip("/")
            if host in ("deb.debian.org", "debian.org"):
                return test.success
        return self.is_connected

    def __str__(self) -> str:
        if self.is_connected:
            return f"Connected (avg latency: {self.average_latency * 1000:.0f}ms)"
        return "Not connected"


@dataclass(frozen=True)
class SourceRepositoryStatus:
    is_enabled: bool
    configured_sources: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "configured_sources", tuple(self.configured_sources or ()))

    @classmethod
    def from_lines(cls, lines: Optional[Iterable[str]]) -> "SourceRepositoryStatus":
        status = cls(is_enabled=False, configured_sources=tuple(lines or ()))
        return cls(is_enabled=status.has_deb_src(), configured_sources=status.configured_sources)

    def has_deb_src(self) -> bool:
        return any(source.strip().startswith("deb-src") for source in self.configured_sources)

    def __str__(self) -> str:
        if self.is_enabled:
            return "Source repositories enabled"
        return "Source repositories not enabled"
