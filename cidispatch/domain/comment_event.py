"""Domain model for GitHub issue_comment webhook events.

Parse-once pattern: the raw event payload from GITHUB_EVENT_PATH is parsed
into a typed model at the boundary. Commands use the typed API only.
"""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass
class CommentEvent:
    """A comment created on an issue or pull request."""

    action: str
    body: str
    comment_id: int
    author: str
    issue_number: int
    is_pull_request: bool
    repository: str

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict) -> CommentEvent:
        """Parse an issue_comment event payload.

        Args:
            data: Raw event payload dictionary

        Returns:
            Typed CommentEvent instance
        """
        comment = data.get("comment") or {}
        issue = data.get("issue") or {}
        repository = data.get("repository") or {}

        return cls(
            action=data.get("action", ""),
            body=comment.get("body") or "",
            comment_id=comment.get("id", 0),
            author=(comment.get("user") or {}).get("login", ""),
            issue_number=issue.get("number", 0),
            # Pull request comments arrive as issue comments with a pull_request key
            is_pull_request=bool(issue.get("pull_request")),
            repository=repository.get("full_name", ""),
        )

    @classmethod
    def from_json(cls, raw: str) -> CommentEvent:
        """Parse an issue_comment event from its JSON text."""
        return cls.from_dict(json.loads(raw))

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def is_new_pull_request_comment(self) -> bool:
        """Whether this event is a newly created comment on a PR."""
        return self.action == "created" and self.is_pull_request
