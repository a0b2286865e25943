"""
User-facing remediation text attached to validation results.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class UserGuidance:
    """
    Actionable information for a failed or degraded check.

    Guidance is purely descriptive: it never affects how a result is
    classified.

    Attributes:
        message: Main guidance message.
        reason: Why the check did not pass (may be empty).
        actionable_steps: Ordered steps that resolve the issue (may be empty, never None).
        documentation_url: Link to relevant documentation (may be empty).
    """
    message: str = ""
    reason: str = ""
    actionable_steps: Tuple[str, ...] = field(default_factory=tuple)
    documentation_url: str = ""

    def __post_init__(self):
        # Accept any iterable of steps but store an immutable tuple
        steps = self.actionable_steps
        object.__setattr__(self, "actionable_steps", tuple(steps) if steps is not None else ())
        object.__setattr__(self, "message", self.message or "")
        object.__setattr__(self, "reason", self.reason or "")
        object.__setattr__(self, "documentation_url", self.documentation_url or "")

    @classmethod
    def create(cls, message: str, reason: str = "",
               steps: Optional[Iterable[str]] = None,
               documentation_url: str = "") -> "UserGuidance":
        return cls(message=message, reason=reason,
                   actionable_steps=tuple(steps or ()),
                   documentation_url=documentation_url)

    @classmethod
    def empty(cls) -> "UserGuidance":
        return cls()

    def has_steps(self) -> bool:
        return len(self.actionable_steps) > 0

    def is_empty(self) -> bool:
        return not (self.message or self.reason or self.actionable_steps or self.documentation_url)

    def format(self) -> str:
        """
        Render the guidance as plain text.

        Sections without content are omitted entirely:

            Insufficient disk space

            Reason: At least 10 GB is required

            How to fix:
              1. sudo apt clean

            Learn more: https://...
        """
        parts = [f"{self.message}\n"]

        if self.reason:
            parts.append(f"\nReason: {self.reason}\n")

        if self.has_steps():
            parts.append("\nHow to fix:\n")
            for i, step in enumerate(self.actionable_steps, start=1):
                parts.append(f"  {i}. {step}\n")

        if self.documentation_url:
            parts.append(f"\nLearn more: {self.documentation_url}\n")

        return "".join(parts)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "reason": self.reason,
            "actionable_steps": list(self.actionable_steps),
            "documentation_url": self.documentation_url,
        }
