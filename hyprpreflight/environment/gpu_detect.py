"""
GPU detection from `lspci -nn` output.
"""

import logging
import re
import subprocess
from typing import List, Optional

from hyprpreflight.config import LSPCI_BIN
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import GPUType
from hyprpreflight.errors import DetectorError, InvalidGPUError
from hyprpreflight.interfaces.detector import GPUDetector
from hyprpreflight.validation.types import GPUVendor

DISPLAY_CONTROLLER_RE = re.compile(r"(VGA|3D|Display).*controller", re.IGNORECASE)
PCI_ID_RE = re.compile(r"\[([0-9a-fA-F]{4}):([0-9a-fA-F]{4})\]")
TRAILING_PCI_ID_RE = re.compile(r"\s*\[[0-9a-fA-F]{4}:[0-9a-fA-F]{4}\].*$")

# Applied when no overall deadline bounds the call
LSPCI_TIMEOUT_SECONDS = 10

VENDOR_NOISE = {
    GPUVendor.AMD: ("Advanced Micro Devices, Inc.", "ATI Technologies Inc"),
    GPUVendor.NVIDIA: ("NVIDIA",),
    GPUVendor.INTEL: ("Intel",),
}


def detect_vendor(line: str) -> GPUVendor:
    lowered = line.lower()
    if "nvidia" in lowered:
        return GPUVendor.NVIDIA
    if "amd" in lowered or "radeon" in lowered:
        return GPUVendor.AMD
    if "intel" in lowered:
        return GPUVendor.INTEL
    return GPUVendor.UNKNOWN


def extract_model(line: str, vendor: GPUVendor) -> str:
    """
    Strip class, vendor boilerplate and PCI ids from an lspci line.

    Examples:
        >>> extract_model('01:00.0 VGA compatible controller [0300]: NVIDIA Corporation '
        ...               'GA104 [GeForce RTX 3070] [10de:2484] (rev a1)', GPUVendor.NVIDIA)
        'GA104 GeForce RTX 3070'
    """
    parts = line.split(": ", 1)
    if len(parts) < 2:
        return ""
    desc = TRAILING_PCI_ID_RE.sub("", parts[1])
    for noise in VENDOR_NOISE.get(vendor, ()):
        desc = desc.replace(noise, "")
    desc = desc.replace("Corporation", "").replace("[", "").replace("]", "")
    return " ".join(desc.split())


def parse_lspci_output(output: str) -> List[GPUType]:
    """Return one GPUType per display controller line, in lspci order."""
    gpus = []
    for line in output.splitlines():
        if not DISPLAY_CONTROLLER_RE.search(line):
            continue
        match = PCI_ID_RE.search(line)
        pci_id = f"{match.group(1)}:{match.group(2)}" if match else ""
        vendor = detect_vendor(line)
        gpus.append(GPUType(vendor, extract_model(line, vendor), pci_id))
    return gpus


class LspciGPUDetector(GPUDetector):
    """Detect display controllers by running lspci."""

    name = "gpu"

    def __init__(self, lspci_bin: str = LSPCI_BIN, logger=None):
        self.lspci_bin = lspci_bin
        self.logger = logger or logging.getLogger(__name__)

    def _run_lspci(self, timeout: Optional[float]) -> str:
        cmd = [self.lspci_bin, "-nn"]
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        except FileNotFoundError as e:
            raise DetectorError(
                f"{self.lspci_bin} not found",
                detector=self.name,
                cause=str(e),
                suggestion="Install pciutils: sudo apt install pciutils",
            ) from e
        except subprocess.TimeoutExpired as e:
            raise DetectorError(
                f"{self.lspci_bin} timed out after {timeout}s",
                detector=self.name,
                cause="timeout",
            ) from e

        if result.returncode != 0:
            raise DetectorError(
                f"{self.lspci_bin} failed with exit code {result.returncode}",
                detector=self.name,
                cause=result.stderr.strip(),
            )
        return result.stdout

    def detect_gpus(self, ctx: ValidationContext) -> List[GPUType]:
        ctx.raise_if_done(self.name)
        output = self._run_lspci(ctx.bounded_timeout(LSPCI_TIMEOUT_SECONDS))
        gpus = parse_lspci_output(output)
        if not gpus:
            raise InvalidGPUError(
                "no display controller found",
                detector=self.name,
                cause="lspci reported no VGA, 3D or Display controller",
            )
        self.logger.debug(f"Detected GPUs: {', '.join(str(g) for g in gpus)}")
        return gpus
