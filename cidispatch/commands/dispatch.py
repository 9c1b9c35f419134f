"""Dispatch CI workflows for explicit targets.

Thin command that builds a DispatchContext and delegates to the
WorkflowDispatcher.
"""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Sequence
from functools import partial

from cidispatch.domain.dispatch import DispatchContext
from cidispatch.infrastructure import ConfigError, GitHubWorkflowClient, Settings
from cidispatch.services import WorkflowDispatcher


def cmd_dispatch(
    targets: Sequence[str],
    ref: str,
    pr_number: int,
    repo: str | None = None,
    targets_file: str | None = None,
) -> int:
    """Trigger the workflow for each target and print the outcomes as JSON.

    Args:
        targets: CI target names (unknown names are reported, not dispatched)
        ref: Branch or commit to run the workflows on
        pr_number: Originating PR number, passed as the pr_number input
        repo: Repository in owner/repo format (defaults to GITHUB_REPOSITORY)
        targets_file: Optional YAML target map

    Returns:
        Exit code (0 if every dispatch succeeded, 1 otherwise)
    """
    settings = Settings.from_env()
    try:
        workflow_map = settings.load_workflow_map(targets_file)
        context = DispatchContext.from_repository(
            repository=repo or settings.repository,
            ref=ref,
            pr_number=pr_number,
            token=settings.require_token(),
        )
    except (ConfigError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    dispatcher = WorkflowDispatcher(
        workflow_map=workflow_map,
        client_factory=partial(GitHubWorkflowClient, api_url=settings.api_url),
    )

    print(f"Dispatching {', '.join(targets)} on {context.repository}@{ref} for PR #{pr_number}")
    outcomes = asyncio.run(dispatcher.dispatch_all(targets, context))

    print(json.dumps([o.to_dict() for o in outcomes], indent=2))
    return 0 if all(o.success for o in outcomes) else 1
