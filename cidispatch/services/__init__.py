"""Services for cidispatch.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from cidispatch.services.comment_parser import (
    find_unknown_targets,
    match_ci_command,
    parse_ci_comment,
)
from cidispatch.services.github_comment import GitHubCommentService
from cidispatch.services.workflow_dispatcher import (
    DispatchIdGenerator,
    WorkflowDispatcher,
    trigger_workflow,
)

__all__ = [
    "DispatchIdGenerator",
    "GitHubCommentService",
    "WorkflowDispatcher",
    "find_unknown_targets",
    "match_ci_command",
    "parse_ci_comment",
    "trigger_workflow",
]
