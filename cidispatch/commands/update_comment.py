"""Create or update a marker-tagged PR comment.

Thin command around GitHubCommentService.upsert_comment.
"""

from __future__ import annotations

import sys

from cidispatch.infrastructure import GhCommandRunner, Settings
from cidispatch.services import GitHubCommentService


def cmd_update_comment(
    identifier: str,
    body: str,
    pr_number: int,
    repo: str | None = None,
    dry_run: bool = False,
) -> int:
    """Update the PR comment tagged with ``identifier``, or create it.

    Args:
        identifier: Marker identifier (stored as an HTML comment in the body)
        body: Comment body
        pr_number: PR number
        repo: Repository in owner/repo format (defaults to GITHUB_REPOSITORY)
        dry_run: Print the gh commands instead of running them

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    settings = Settings.from_env()
    repository = repo or settings.repository
    if not repository:
        print("Repository not set (use --repo or GITHUB_REPOSITORY)", file=sys.stderr)
        return 1

    gh_runner = GhCommandRunner(dry_run=dry_run, token=settings.token or None)
    comment_service = GitHubCommentService(repo=repository, gh=gh_runner)

    if not comment_service.upsert_comment(pr_number, identifier, body):
        print("Failed to create or update comment", file=sys.stderr)
        return 1
    return 0
