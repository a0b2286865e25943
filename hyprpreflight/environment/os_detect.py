"""
Debian release detection.

Reads os-release through the `distro` package, pointed at an explicit file so
the detector can be aimed at a fixture in tests.
"""

import logging
import os

import distro

from hyprpreflight.config import OS_RELEASE_PATH
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import DebianVersion
from hyprpreflight.errors import DetectorError, InvalidDebianVersionError
from hyprpreflight.interfaces.detector import DebianDetector


class DebianVersionDetector(DebianDetector):
    """
    Detect the Debian release from an os-release file.

    Attributes:
        os_release_path: File to parse (default /etc/os-release)
    """

    name = "debian-version"

    def __init__(self, os_release_path: str = OS_RELEASE_PATH, logger=None):
        self.os_release_path = os_release_path
        self.logger = logger or logging.getLogger(__name__)

    def _load(self) -> distro.LinuxDistribution:
        if not os.path.isfile(self.os_release_path):
            raise DetectorError(
                f"os-release file not found: {self.os_release_path}",
                detector=self.name,
                cause="missing file",
            )
        return distro.LinuxDistribution(
            include_lsb=False,
            include_uname=False,
            os_release_file=self.os_release_path,
            distro_release_file=os.devnull,
        )

    def detect_version(self, ctx: ValidationContext) -> DebianVersion:
        """
        Identify the Debian version.

        Returns:
            DebianVersion built from VERSION_CODENAME and VERSION_ID

        Raises:
            DetectionCancelledError: If ctx is already done
            DetectorError: If the file is missing or has no codename

        Examples:
            >>> DebianVersionDetector('/etc/os-release').detect_version(ctx)
            DebianVersion(codename='trixie', version_number='13')
        """
        ctx.raise_if_done(self.name)
        info = self._load().os_release_info()
        codename = info.get("version_codename") or info.get("codename") or ""
        version_id = info.get("version_id", "")
        self.logger.debug(f"os-release codename={codename!r} version_id={version_id!r}")

        if not codename.strip():
            raise InvalidDebianVersionError(
                "VERSION_CODENAME missing from os-release",
                detector=self.name,
                cause=self.os_release_path,
            )
        return DebianVersion(codename, version_id)

    def is_debian_based(self, ctx: ValidationContext) -> bool:
        ctx.raise_if_done(self.name)
        try:
            dist = self._load()
        except DetectorError:
            return False
        if dist.id() == "debian":
            return True
        return "debian" in dist.like().split()
