"""Domain models for workflow dispatch requests and their outcomes.

A dispatch takes one CI target plus a DispatchContext and ends in exactly
one DispatchOutcome: DispatchSuccess or DispatchFailure. Failures are
values, not exceptions, so callers can report every target's result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class DispatchContext:
    """Where and how to run a dispatched workflow.

    Borrowed read-only by the dispatcher for the duration of one call.
    """

    owner: str
    repo: str
    ref: str
    pr_number: int
    token: str = field(repr=False)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_repository(
        cls,
        repository: str,
        ref: str,
        pr_number: int,
        token: str,
    ) -> DispatchContext:
        """Build a context from an ``owner/repo`` string.

        Raises:
            ValueError: If repository is not in owner/repo format
        """
        owner, sep, repo = repository.partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ValueError(f"Repository must be in owner/repo format: {repository}")
        return cls(owner=owner, repo=repo, ref=ref, pr_number=pr_number, token=token)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def repository(self) -> str:
        """Repository in owner/repo format."""
        return f"{self.owner}/{self.repo}"

    def workflow_inputs(self) -> dict[str, str]:
        """Inputs passed to the dispatched workflow."""
        return {"pr_number": str(self.pr_number)}


class FailureReason(Enum):
    """Why a dispatch did not start a workflow."""

    UNKNOWN_TARGET = "unknown_target"
    REMOTE_CALL_ERROR = "remote_call_error"


@dataclass(frozen=True)
class DispatchSuccess:
    """The remote API accepted the workflow dispatch.

    ``dispatch_id`` is a local correlation token, not the GitHub run id;
    the dispatch endpoint does not return one.
    """

    target: str
    workflow_name: str
    dispatch_id: int

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "target": self.target,
            "success": True,
            "workflowName": self.workflow_name,
            "dispatchId": self.dispatch_id,
        }


@dataclass(frozen=True)
class DispatchFailure:
    """The dispatch was rejected locally or failed remotely."""

    target: str
    reason: FailureReason
    message: str

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "target": self.target,
            "success": False,
            "reason": self.reason.value,
            "error": self.message,
        }


DispatchOutcome = Union[DispatchSuccess, DispatchFailure]
