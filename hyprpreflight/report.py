"""
Summary of a finished preflight session.

A PreflightReport is a read-only view built once from a completed session:
per-check rows, pass/warning/failure counts, the overall message and the
process exit code. It renders as plain text, as a rich table, or as JSON.
"""

import json
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Tuple

from rich.console import Console
from rich.table import Table

from hyprpreflight.config import EXIT_CODE
from hyprpreflight.validation.result import STATUS_GLYPHS, ValidationResult
from hyprpreflight.validation.session import ValidationSession
from hyprpreflight.validation.types import RequirementName, ValidationOutcome, ValidationStatus

REQUIREMENT_DISPLAY_NAMES = {
    RequirementName.DEBIAN_VERSION: "Debian Version",
    RequirementName.GPU_SUPPORT: "GPU Support",
    RequirementName.DISK_SPACE: "Disk Space",
    RequirementName.INTERNET: "Internet Connectivity",
    RequirementName.SOURCE_REPOS: "Source Repositories",
    RequirementName.DISTRIBUTION: "Distribution",
}

STATUS_STYLES = {
    ValidationStatus.PASS: "green",
    ValidationStatus.WARNING: "yellow",
    ValidationStatus.FAIL: "red",
}

RULE_WIDTH = 60


def display_name(requirement: RequirementName) -> str:
    return REQUIREMENT_DISPLAY_NAMES.get(requirement, requirement.value)


def overall_message(outcome: ValidationOutcome, blocking_count: int) -> str:
    if outcome is ValidationOutcome.BLOCKED:
        return (f"Preflight checks failed. {blocking_count} critical issue(s) must be "
                f"resolved before installation.")
    if outcome is ValidationOutcome.WARNINGS:
        return "Preflight checks passed with warnings. Installation can proceed."
    if outcome is ValidationOutcome.SUCCESS:
        return "All preflight checks passed! Ready to install."
    return "Preflight checks finished with mixed results. Installation can proceed."


@dataclass(frozen=True)
class PreflightReport:
    """
    Attributes:
        session_id: Id of the summarized session.
        outcome: The session's overall outcome.
        can_proceed: False when any result is blocking.
        duration: Session duration.
        results: Results in evaluation order.
        passed: Number of passing results.
        warnings: Number of non-passing, non-blocking results.
        failed: Number of blocking results.
    """
    session_id: str
    outcome: ValidationOutcome
    can_proceed: bool
    duration: timedelta
    results: Tuple[ValidationResult, ...]
    passed: int
    warnings: int
    failed: int

    @classmethod
    def from_session(cls, session: ValidationSession) -> "PreflightReport":
        results = session.results()
        passed = sum(1 for r in results if r.is_passing())
        failed = sum(1 for r in results if r.is_blocking())
        return cls(
            session_id=session.id,
            outcome=session.overall_result,
            can_proceed=not failed,
            duration=session.duration(),
            results=results,
            passed=passed,
            warnings=len(results) - passed - failed,
            failed=failed,
        )

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def message(self) -> str:
        return overall_message(self.outcome, self.failed)

    @property
    def exit_code(self) -> EXIT_CODE:
        return EXIT_CODE.SUCCESS if self.can_proceed else EXIT_CODE.BLOCKED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "outcome": self.outcome.value,
            "can_proceed": self.can_proceed,
            "message": self.message,
            "duration_seconds": round(self.duration.total_seconds(), 3),
            "total": self.total,
            "passed": self.passed,
            "warnings": self.warnings,
            "failed": self.failed,
            "results": [r.to_dict() for r in self.results],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def render_text(self, failures_only: bool = False) -> str:
        """
        Plain-text summary.

        Args:
            failures_only: Omit passing checks from the detail section, for
                use after live progress has already shown them.
        """
        lines = [
            "═" * RULE_WIDTH,
            "  PREFLIGHT CHECK RESULTS",
            "═" * RULE_WIDTH,
            "",
            f"Total Checks:    {self.total}",
            f"Passed:          {self.passed} ✓",
        ]
        if self.warnings:
            lines.append(f"Warnings:        {self.warnings} ⚠")
        if self.failed:
            lines.append(f"Failed:          {self.failed} ✗")

        for result in self.results:
            if failures_only and result.is_passing():
                continue
            lines.append("")
            lines.append(f"{STATUS_GLYPHS[result.status]} {display_name(result.requirement_name)}")
            if result.actual_value is not None:
                lines.append(f"   Detected: {result.actual_value}")
            if not result.is_passing() and not result.guidance.is_empty():
                lines.extend(f"   {line}" if line else "" for line in result.guidance.format().splitlines())

        lines.append("")
        lines.append("─" * RULE_WIDTH)
        if self.can_proceed:
            glyph = "⚠" if self.warnings else "✓"
            lines.append(f"{glyph}  {self.message}")
        else:
            lines.append(f"✗  {self.message}")
            lines.append("")
            lines.append("Please resolve the blocking issues above before attempting installation.")
        lines.append("─" * RULE_WIDTH)
        return "\n".join(lines) + "\n"

    def render(self, console: Console) -> None:
        """Print the summary as a rich table followed by guidance for non-passing checks."""
        table = Table(title="Preflight Check Results", title_justify="left")
        table.add_column("", width=2)
        table.add_column("Check")
        table.add_column("Detected")
        table.add_column("Severity")

        for result in self.results:
            style = STATUS_STYLES[result.status]
            table.add_row(
                f"[{style}]{STATUS_GLYPHS[result.status]}[/{style}]",
                display_name(result.requirement_name),
                str(result.actual_value) if result.actual_value is not None else "-",
                "" if result.is_passing() else result.severity.value,
            )
        console.print(table)

        for result in self.results:
            if result.is_passing() or result.guidance.is_empty():
                continue
            style = STATUS_STYLES[result.status]
            console.print(f"\n[bold {style}]{STATUS_GLYPHS[result.status]} "
                          f"{display_name(result.requirement_name)}[/bold {style}]")
            console.print(result.guidance.format(), highlight=False, markup=False)

        style = "red" if not self.can_proceed else ("yellow" if self.warnings else "green")
        console.print(f"[bold {style}]{self.message}[/bold {style}]")
