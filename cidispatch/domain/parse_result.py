"""Domain model for the result of parsing a PR comment for /ci commands."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseResult:
    """Targets selected by the /ci commands found in one comment.

    ``targets`` holds each known target once, in the order it first
    appeared. A comment without any known target is not a CI command.
    """

    targets: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Whether the comment selected at least one known target."""
        return len(self.targets) > 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "isValid": self.is_valid,
            "targets": list(self.targets),
        }
