"""
Configuration constants and loading for hyprpreflight.

Defaults live as module-level constants. A YAML file may override a subset
of them; the merged values are carried around in a PreflightConfig.
"""

import enum
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

import yaml

from hyprpreflight.errors import ConfigurationError, ErrorCode


# Requirement thresholds
MIN_DISK_SPACE_GB = 10
DEFAULT_CHECK_PATH = "/"

# Detector inputs
OS_RELEASE_PATH = "/etc/os-release"
SOURCES_LIST_PATH = "/etc/apt/sources.list"
SOURCES_LIST_DIR = "/etc/apt/sources.list.d"
LSPCI_BIN = "lspci"
DEFAULT_ENDPOINTS = [
    "https://deb.debian.org",
    "https://debian.org",
    "https://security.debian.org",
]
HTTP_TIMEOUT_SECONDS = 10.0

SUPPORTED_CODENAMES = ("sid", "trixie")

# Runner
PROGRESS_BUFFER_SIZE = 10

# Documentation links used in guidance
DOCS_URL = "https://gohan.sh/docs"
INSTALLATION_DOCS_URL = f"{DOCS_URL}/installation"
DEBIAN_UNSTABLE_URL = "https://wiki.debian.org/DebianUnstable"
TROUBLESHOOTING_DOCS_URL = f"{DOCS_URL}/troubleshooting"
REPOSITORY_DOCS_URL = f"{DOCS_URL}/repository-setup#source-repos"

CONFIG_ENV_VAR = "HYPRPREFLIGHT_CONFIG"


class EXIT_CODE(enum.IntEnum):
    SUCCESS = 0
    BLOCKED = 1
    CONFIG_ERROR = 2
    ERROR = 3
    INTERRUPTED = 130

    def __str__(self):
        return f"{self.name} ({self.value})"


@dataclass
class PreflightConfig:
    """
    Effective configuration for a preflight run.

    Attributes:
        min_disk_space_gb: Minimum free space required on check_path.
        check_path: Filesystem path whose free space is measured.
        os_release_path: os-release file read by the Debian detector.
        sources_list_path: Main APT sources file.
        sources_list_dir: Directory of additional *.list files.
        endpoints: URLs probed by the connectivity checker.
        http_timeout: Per-probe timeout in seconds.
        lspci_bin: lspci executable used for GPU detection.
        progress_buffer_size: Capacity of the progress channel.
        timeout: Optional overall deadline for the run in seconds.
    """
    min_disk_space_gb: int = MIN_DISK_SPACE_GB
    check_path: str = DEFAULT_CHECK_PATH
    os_release_path: str = OS_RELEASE_PATH
    sources_list_path: str = SOURCES_LIST_PATH
    sources_list_dir: str = SOURCES_LIST_DIR
    endpoints: List[str] = field(default_factory=lambda: list(DEFAULT_ENDPOINTS))
    http_timeout: float = HTTP_TIMEOUT_SECONDS
    lspci_bin: str = LSPCI_BIN
    progress_buffer_size: int = PROGRESS_BUFFER_SIZE
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.min_disk_space_gb < 0:
            raise ConfigurationError(
                "Minimum disk space cannot be negative",
                parameter="min_disk_space_gb",
                expected=">= 0",
                actual=self.min_disk_space_gb,
            )
        if self.progress_buffer_size < 1:
            raise ConfigurationError(
                "Progress buffer must hold at least one update",
                parameter="progress_buffer_size",
                expected=">= 1",
                actual=self.progress_buffer_size,
            )
        if not self.endpoints:
            raise ConfigurationError(
                "At least one connectivity endpoint is required",
                parameter="endpoints",
                code=ErrorCode.CONFIG_MISSING_REQUIRED,
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(
                "Timeout must be positive",
                parameter="timeout",
                expected="> 0",
                actual=self.timeout,
            )

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def with_overrides(self, **overrides) -> "PreflightConfig":
        """Return a copy with every non-None override applied."""
        applicable = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(applicable) - set(self.field_names())
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                parameter=sorted(unknown)[0],
                expected=self.field_names(),
            )
        return replace(self, **applicable)


def read_config_file(path: str) -> Dict[str, Any]:
    """
    Read a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed mapping (empty when the file is empty).

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping.
    """
    if not os.path.isfile(path):
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            parameter="config_file",
            actual=path,
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
        )

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse configuration file: {path}",
            parameter="config_file",
            actual=str(e),
            code=ErrorCode.CONFIG_PARSE_ERROR,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}",
            parameter="config_file",
            expected="mapping",
            actual=type(data).__name__,
            code=ErrorCode.CONFIG_PARSE_ERROR,
        )
    return data


def load_config(path: Optional[str] = None, **overrides) -> PreflightConfig:
    """
    Build the effective configuration.

    Precedence, lowest first: built-in defaults, the YAML file at `path`
    (or $HYPRPREFLIGHT_CONFIG when path is None), then keyword overrides
    whose value is not None.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    config = PreflightConfig()
    if path:
        config = config.with_overrides(**read_config_file(path))
    return config.with_overrides(**overrides)
