"""Handle a /ci command posted in a PR comment.

Thin command that orchestrates domain models and services.
No business logic - just wiring and coordination.
"""

from __future__ import annotations

import asyncio
import sys
from functools import partial
from pathlib import Path

from cidispatch.domain.comment_event import CommentEvent
from cidispatch.domain.dispatch import DispatchContext
from cidispatch.domain.parse_result import ParseResult
from cidispatch.infrastructure import (
    ConfigError,
    GhCommandRunner,
    GitHubWorkflowClient,
    Settings,
    write_dispatch_results,
    write_github_step_summary,
    write_parse_outputs,
)
from cidispatch.services import (
    GitHubCommentService,
    WorkflowDispatcher,
    find_unknown_targets,
    parse_ci_comment,
)


def cmd_handle_comment(
    event_file: str | None = None,
    repo: str | None = None,
    targets_file: str | None = None,
    post_comment: bool = True,
    write_job_summary: bool = False,
) -> int:
    """Dispatch the CI workflows requested by an issue_comment event.

    Thin command that:
    1. Loads and parses the event payload into a domain model
    2. Parses the comment body for /ci commands
    3. Dispatches one workflow per target, concurrently
    4. Reports results as a PR comment and job outputs

    Args:
        event_file: Path to the event payload (defaults to GITHUB_EVENT_PATH)
        repo: Repository in owner/repo format (defaults to the event's repository)
        targets_file: Optional YAML target map
        post_comment: Post/update the result comment on the PR
        write_job_summary: Write results to GITHUB_STEP_SUMMARY

    Returns:
        Exit code (0 for success or "not a CI command", 1 for failure)
    """
    settings = Settings.from_env()

    # --------------------------------------------------------
    # 1. Load and parse into domain model
    # --------------------------------------------------------
    path = event_file or settings.event_path
    if not path:
        print("Event file not set (use --event-file or GITHUB_EVENT_PATH)", file=sys.stderr)
        return 1
    try:
        event = CommentEvent.from_json(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        print(f"Event file not found: {path}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Failed to parse event file: {e}", file=sys.stderr)
        return 1

    if not event.is_new_pull_request_comment:
        print("Not a new pull request comment, nothing to do")
        write_parse_outputs(ParseResult())
        return 0

    try:
        workflow_map = settings.load_workflow_map(targets_file)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Parse the comment
    # --------------------------------------------------------
    result = parse_ci_comment(event.body, workflow_map)
    ignored = find_unknown_targets(event.body, workflow_map)
    for target in ignored:
        print(f"Ignored unknown target: {target}")
    write_parse_outputs(result)

    repository = repo or event.repository or settings.repository
    gh_runner = GhCommandRunner(token=settings.token or None)
    comment_service = GitHubCommentService(repo=repository, gh=gh_runner)

    if not result.is_valid:
        if ignored and post_comment:
            comment_service.post_dispatch_results(event.issue_number, [], ignored)
        print("No CI command found in comment")
        return 0

    print(
        f"CI targets requested by @{event.author} on PR #{event.issue_number} "
        f"(comment {event.comment_id}): {', '.join(result.targets)}"
    )

    # --------------------------------------------------------
    # 3. Dispatch workflows
    # --------------------------------------------------------
    success, ref = gh_runner.get_pull_request_head_ref(event.issue_number, repository)
    if not success or not ref:
        print(f"Could not determine head branch of PR #{event.issue_number}: {ref}", file=sys.stderr)
        return 1

    try:
        context = DispatchContext.from_repository(
            repository=repository,
            ref=ref,
            pr_number=event.issue_number,
            token=settings.require_token(),
        )
    except (ConfigError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    dispatcher = WorkflowDispatcher(
        workflow_map=workflow_map,
        client_factory=partial(GitHubWorkflowClient, api_url=settings.api_url),
    )
    outcomes = asyncio.run(dispatcher.dispatch_all(result.targets, context))

    for outcome in outcomes:
        if outcome.success:
            print(f"  {outcome.target}: triggered {outcome.workflow_name}")
        else:
            print(f"  {outcome.target}: {outcome.message}", file=sys.stderr)

    # --------------------------------------------------------
    # 4. Report results
    # --------------------------------------------------------
    write_dispatch_results(outcomes)

    if post_comment:
        comment_service.post_dispatch_results(event.issue_number, outcomes, ignored, ref)

    if write_job_summary:
        write_github_step_summary(
            GitHubCommentService.format_dispatch_summary(outcomes, ignored, ref)
        )

    return 0 if all(o.success for o in outcomes) else 1
