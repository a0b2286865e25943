"""
Free space measurement via psutil.
"""

import logging

import psutil

from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import DiskSpace
from hyprpreflight.errors import DetectorError
from hyprpreflight.interfaces.detector import DiskSpaceDetector


class PsutilDiskSpaceDetector(DiskSpaceDetector):

    name = "disk-space"

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)

    def detect_available_space(self, ctx: ValidationContext, path: str) -> DiskSpace:
        ctx.raise_if_done(self.name)
        path = path or "/"
        try:
            usage = psutil.disk_usage(path)
        except OSError as e:
            raise DetectorError(
                f"Failed to query filesystem statistics for {path}",
                detector=self.name,
                cause=str(e),
            ) from e

        # free is what an unprivileged user can allocate; it never exceeds total
        space = DiskSpace(available=min(usage.free, usage.total), total=usage.total, path=path)
        self.logger.debug(f"{path}: {space}")
        return space
