"""GitHub comment service.

Core service that posts the result of a /ci command back to the pull
request. Results go into a single comment tagged with a hidden
``<!-- identifier -->`` marker, which later runs update in place instead of
adding a new comment each time.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from cidispatch.domain.dispatch import DispatchFailure, DispatchOutcome, DispatchSuccess
from cidispatch.infrastructure.github.runner import GhCommandRunner

DEFAULT_COMMENT_IDENTIFIER = "ci-dispatch-result"


def marker_for(identifier: str) -> str:
    """Hidden HTML marker that tags a comment as owned by ``identifier``."""
    return f"<!-- {identifier} -->"


@dataclass
class GitHubCommentService:
    """Service for managing GitHub PR comments.

    Core service with single responsibility: GitHub comment operations.
    Uses GhCommandRunner for actual API calls (dependency injection).
    """

    repo: str
    gh: GhCommandRunner

    # ============================================================
    # Public API - Comment Operations
    # ============================================================

    def post_comment(self, pr_number: int, body: str) -> bool:
        """Post a new comment to a PR.

        Args:
            pr_number: PR number to comment on
            body: Comment body (markdown supported)

        Returns:
            True if comment was posted successfully
        """
        endpoint = f"repos/{self.repo}/issues/{pr_number}/comments"
        success, _ = self.gh.api_post(endpoint, {"body": body})

        if success:
            print(f"Posted comment to PR #{pr_number}")
        return success

    def replace_comment(self, comment_id: int, body: str) -> bool:
        """Replace (edit) an existing issue comment.

        Args:
            comment_id: ID of the comment to replace
            body: New comment body

        Returns:
            True if comment was replaced successfully
        """
        endpoint = f"repos/{self.repo}/issues/comments/{comment_id}"
        success, _ = self.gh.api_patch(endpoint, {"body": body})

        if success:
            print(f"Updated comment {comment_id}")
        return success

    def find_marker_comment(self, pr_number: int, identifier: str) -> int | None:
        """Find the id of the PR comment tagged with ``identifier``.

        Args:
            pr_number: PR number to search
            identifier: Marker identifier

        Returns:
            Comment id, or None if no tagged comment exists or the lookup failed
        """
        endpoint = f"repos/{self.repo}/issues/{pr_number}/comments"
        success, comments = self.gh.api_get_paginated(endpoint)
        if not success:
            print(f"Error fetching comments: {comments}", file=sys.stderr)
            return None

        marker = marker_for(identifier)
        for comment in comments:
            if marker in (comment.get("body") or ""):
                return comment.get("id")
        return None

    # ============================================================
    # Public API - Composite Operations
    # ============================================================

    def upsert_comment(self, pr_number: int, identifier: str, body: str) -> bool:
        """Update the tagged comment if it exists, otherwise create it.

        If updating fails, falls back to posting a new tagged comment.

        Args:
            pr_number: PR number
            identifier: Marker identifier appended to the body
            body: Comment body without the marker

        Returns:
            True if a comment was updated or created
        """
        full_body = f"{body}\n\n{marker_for(identifier)}"

        comment_id = self.find_marker_comment(pr_number, identifier)
        if comment_id is not None:
            print(f"Updating existing comment with ID: {comment_id}")
            if self.replace_comment(comment_id, full_body):
                return True
            print("Update failed, creating new comment instead", file=sys.stderr)
        else:
            print("Creating new comment")

        return self.post_comment(pr_number, full_body)

    def post_dispatch_results(
        self,
        pr_number: int,
        outcomes: Sequence[DispatchOutcome],
        ignored_targets: Sequence[str] = (),
        ref: str = "",
        identifier: str = DEFAULT_COMMENT_IDENTIFIER,
    ) -> bool:
        """Create or update the PR comment describing dispatch results.

        Args:
            pr_number: PR number
            outcomes: One outcome per dispatched target
            ignored_targets: /ci targets in the comment that are not recognized
            ref: Branch the workflows were dispatched on
            identifier: Marker identifier for the result comment

        Returns:
            True if the comment was posted
        """
        body = self.format_dispatch_summary(outcomes, ignored_targets, ref)
        return self.upsert_comment(pr_number, identifier, body)

    # ============================================================
    # Formatting
    # ============================================================

    @staticmethod
    def format_dispatch_summary(
        outcomes: Sequence[DispatchOutcome],
        ignored_targets: Sequence[str] = (),
        ref: str = "",
    ) -> str:
        """Format dispatch outcomes as a markdown comment body."""
        succeeded = [o for o in outcomes if isinstance(o, DispatchSuccess)]
        failed = [o for o in outcomes if isinstance(o, DispatchFailure)]

        lines = ["## CI Dispatch", ""]
        if ref:
            lines.extend([f"**Ref:** `{ref}`", ""])

        if outcomes:
            lines.extend(
                [
                    "| Target | Workflow | Result |",
                    "|--------|----------|--------|",
                ]
            )
            for outcome in outcomes:
                if isinstance(outcome, DispatchSuccess):
                    lines.append(
                        f"| {_table_cell(outcome.target)} | `{_table_cell(outcome.workflow_name)}` "
                        f"| ✅ Triggered (dispatch #{outcome.dispatch_id}) |"
                    )
                else:
                    lines.append(
                        f"| {_table_cell(outcome.target)} | - | ❌ {_table_cell(outcome.message)} |"
                    )
            lines.append("")

        if ignored_targets:
            names = ", ".join(f"`{t}`" for t in ignored_targets)
            lines.extend([f"⚠️ Ignored unknown target(s): {names}", ""])

        lines.append(f"**Triggered:** {len(succeeded)} / **Failed:** {len(failed)}")
        return "\n".join(lines)


def _table_cell(text: str) -> str:
    """Escape text for a single markdown table cell."""
    return " ".join(text.replace("|", "\\|").splitlines())
