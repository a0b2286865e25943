"""
APT source configuration inspection.

One-line entries are read from sources.list and sources.list.d/*.list.
deb822 files (sources.list.d/*.sources) are folded into the same one-line
form, one entry per listed type, so `deb-src` detection works for both.
"""

import logging
import os
from typing import List

from hyprpreflight.config import SOURCES_LIST_DIR, SOURCES_LIST_PATH
from hyprpreflight.context import ValidationContext
from hyprpreflight.environment.models import SourceRepositoryStatus
from hyprpreflight.errors import DetectorError
from hyprpreflight.interfaces.detector import SourceRepositoryChecker


def parse_one_line_sources(content: str) -> List[str]:
    """Keep non-comment lines starting with 'deb' (deb and deb-src)."""
    sources = []
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if trimmed.startswith("deb"):
            sources.append(trimmed)
    return sources


def parse_deb822_sources(content: str) -> List[str]:
    """
    Convert deb822 stanzas into one-line entries.

    Examples:
        >>> parse_deb822_sources('Types: deb deb-src\\nURIs: https://deb.debian.org/debian\\n'
        ...                      'Suites: trixie\\nComponents: main\\n')
        ['deb https://deb.debian.org/debian trixie main', 'deb-src https://deb.debian.org/debian trixie main']
    """
    sources = []
    for stanza in content.split("\n\n"):
        fields = {}
        for line in stanza.splitlines():
            if line.strip().startswith("#") or ":" not in line:
                continue
            key, _, value = line.partition(":")
            fields[key.strip().lower()] = value.strip()
        if fields.get("enabled", "yes").lower() == "no":
            continue
        rest = " ".join(v for v in (fields.get("uris", ""), fields.get("suites", ""),
                                    fields.get("components", "")) if v)
        for source_type in fields.get("types", "").split():
            sources.append(f"{source_type} {rest}".strip())
    return sources


class AptSourceRepositoryChecker(SourceRepositoryChecker):
    """
    Read APT sources and report whether deb-src entries exist.

    Unreadable individual files are skipped; only a system with neither the
    main file nor the directory is treated as a detection failure.
    """

    name = "source-repositories"

    def __init__(self, sources_list_path: str = SOURCES_LIST_PATH,
                 sources_list_dir: str = SOURCES_LIST_DIR, logger=None):
        self.sources_list_path = sources_list_path
        self.sources_list_dir = sources_list_dir
        self.logger = logger or logging.getLogger(__name__)

    def _read(self, path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            self.logger.debug(f"Skipping {path}: {e}")
            return ""

    def _sources_from_dir(self) -> List[str]:
        sources = []
        for entry in sorted(os.listdir(self.sources_list_dir)):
            path = os.path.join(self.sources_list_dir, entry)
            if not os.path.isfile(path):
                continue
            if entry.endswith(".list"):
                sources.extend(parse_one_line_sources(self._read(path)))
            elif entry.endswith(".sources"):
                sources.extend(parse_deb822_sources(self._read(path)))
        return sources

    def check_source_repositories(self, ctx: ValidationContext) -> SourceRepositoryStatus:
        ctx.raise_if_done(self.name)
        has_file = os.path.isfile(self.sources_list_path)
        has_dir = os.path.isdir(self.sources_list_dir)
        if not has_file and not has_dir:
            raise DetectorError(
                "No APT source configuration found",
                detector=self.name,
                cause=f"{self.sources_list_path} and {self.sources_list_dir} are both missing",
            )

        sources = []
        if has_file:
            sources.extend(parse_one_line_sources(self._read(self.sources_list_path)))
        if has_dir:
            try:
                sources.extend(self._sources_from_dir())
            except OSError as e:
                raise DetectorError(
                    f"Failed to list {self.sources_list_dir}",
                    detector=self.name,
                    cause=str(e),
                ) from e

        status = SourceRepositoryStatus.from_lines(sources)
        self.logger.debug(f"{len(sources)} APT source entries, deb-src enabled: {status.is_enabled}")
        return status
