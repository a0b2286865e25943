"""
Requirement validators for hyprpreflight.

Each validator wraps one detector and applies a fixed classification:

    Requirement            Detector fails   Requirement unmet   Met
    Debian version         Fail/Critical    Fail/Critical       Pass/Low
    GPU support            Warning/Medium   (any GPU passes)    Pass/Low
    Disk space             Fail/High        Fail/High           Pass/Low
    Internet connectivity  Fail/High        Fail/High           Pass/Low
    Source repositories    Warning/Low      Warning/Low         Pass/Low
"""

from typing import List, Optional

from hyprpreflight.config import PreflightConfig
from hyprpreflight.environment import (
    AptSourceRepositoryChecker,
    DebianVersionDetector,
    HTTPConnectivityChecker,
    LspciGPUDetector,
    PsutilDiskSpaceDetector,
)
from hyprpreflight.interfaces.validator import ValidatorInterface
from hyprpreflight.validators.base import DetectorValidator
from hyprpreflight.validators.debian_version import DebianVersionValidator
from hyprpreflight.validators.gpu import GPUValidator
from hyprpreflight.validators.disk_space import DiskSpaceValidator
from hyprpreflight.validators.connectivity import ConnectivityValidator
from hyprpreflight.validators.source_repository import SourceRepositoryValidator


def default_validators(config: Optional[PreflightConfig] = None, logger=None) -> List[ValidatorInterface]:
    """
    Build the five system validators in evaluation order.

    Args:
        config: Effective configuration; defaults are used when omitted.
        logger: Logger shared by the validators and their detectors.
    """
    config = config or PreflightConfig()
    return [
        DebianVersionValidator(
            DebianVersionDetector(config.os_release_path, logger=logger),
            os_release_path=config.os_release_path,
            logger=logger,
        ),
        GPUValidator(LspciGPUDetector(config.lspci_bin, logger=logger), logger=logger),
        DiskSpaceValidator(
            PsutilDiskSpaceDetector(logger=logger),
            path=config.check_path,
            min_gb=config.min_disk_space_gb,
            logger=logger,
        ),
        ConnectivityValidator(
            HTTPConnectivityChecker(config.endpoints, timeout=config.http_timeout, logger=logger),
            logger=logger,
        ),
        SourceRepositoryValidator(
            AptSourceRepositoryChecker(config.sources_list_path, config.sources_list_dir, logger=logger),
            sources_list_path=config.sources_list_path,
            sources_list_dir=config.sources_list_dir,
            logger=logger,
        ),
    ]


__all__ = [
    'DetectorValidator',
    'DebianVersionValidator',
    'GPUValidator',
    'DiskSpaceValidator',
    'ConnectivityValidator',
    'SourceRepositoryValidator',
    'default_validators',
]
