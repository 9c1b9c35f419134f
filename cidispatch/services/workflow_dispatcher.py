"""Workflow dispatcher service.

Maps a CI target to its workflow file and asks GitHub to run it. Every
call ends in a DispatchOutcome value: unknown targets and remote failures
are reported, never raised. Cancellation of the surrounding task is the
one exception and propagates unchanged.

Used by:
    - commands/dispatch.py (explicit targets from the CLI)
    - commands/handle_comment.py (targets parsed from a PR comment)
"""

from __future__ import annotations

import asyncio
import itertools
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from cidispatch.domain.ci_target import DEFAULT_TARGET_WORKFLOWS, TargetWorkflowMap
from cidispatch.domain.dispatch import (
    DispatchContext,
    DispatchFailure,
    DispatchOutcome,
    DispatchSuccess,
    FailureReason,
)
from cidispatch.infrastructure.github.workflow_client import (
    GitHubWorkflowClient,
    WorkflowDispatchClient,
)

UNKNOWN_ERROR = "Unknown error"

ClientFactory = Callable[[str], WorkflowDispatchClient]


# ============================================================
# Dispatch Identifiers
# ============================================================


class DispatchIdGenerator:
    """Process-wide monotonic source of dispatch correlation ids.

    Thread-safe so dispatches from worker threads and the event loop never
    share an id.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


_DISPATCH_IDS = DispatchIdGenerator()


# ============================================================
# Service
# ============================================================


@dataclass
class WorkflowDispatcher:
    """Service that triggers one workflow run per CI target.

    Attributes:
        workflow_map: Target → workflow file lookup (shared with the parser)
        client_factory: Builds a dispatch client from the context's token
        id_generator: Source of dispatch correlation ids
    """

    workflow_map: TargetWorkflowMap = DEFAULT_TARGET_WORKFLOWS
    client_factory: ClientFactory = GitHubWorkflowClient
    id_generator: DispatchIdGenerator = field(default_factory=lambda: _DISPATCH_IDS)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    async def dispatch(self, target: str, context: DispatchContext) -> DispatchOutcome:
        """Trigger the workflow for a single target.

        Args:
            target: CI target name; may be unknown if the caller skipped the parser
            context: Repository, ref, PR number and credential for the run

        Returns:
            DispatchSuccess, or DispatchFailure with UNKNOWN_TARGET (no network
            call made) or REMOTE_CALL_ERROR
        """
        workflow_id = self.workflow_map.workflow_for(target)
        if workflow_id is None:
            return DispatchFailure(
                target=target,
                reason=FailureReason.UNKNOWN_TARGET,
                message=f"Invalid target: {target}",
            )

        try:
            client = self.client_factory(context.token)
            await client.create_workflow_dispatch(
                context.owner,
                context.repo,
                workflow_id,
                context.ref,
                context.workflow_inputs(),
            )
        except Exception as e:
            return DispatchFailure(
                target=target,
                reason=FailureReason.REMOTE_CALL_ERROR,
                message=f"GitHub API error: {str(e) or UNKNOWN_ERROR}",
            )

        return DispatchSuccess(
            target=target,
            workflow_name=workflow_id,
            dispatch_id=self.id_generator.next_id(),
        )

    async def dispatch_all(
        self,
        targets: Iterable[str],
        context: DispatchContext,
    ) -> list[DispatchOutcome]:
        """Trigger workflows for several targets concurrently.

        Each target runs as its own task, so a slow or failing target does
        not hold up the others.

        Returns:
            One outcome per target, in the order the targets were given
        """
        return list(
            await asyncio.gather(*(self.dispatch(target, context) for target in targets))
        )


async def trigger_workflow(
    target: str,
    context: DispatchContext,
    workflow_map: TargetWorkflowMap = DEFAULT_TARGET_WORKFLOWS,
) -> DispatchOutcome:
    """Trigger the workflow for ``target`` with the default GitHub client."""
    return await WorkflowDispatcher(workflow_map=workflow_map).dispatch(target, context)
