"""GitHub API wrappers."""

from .runner import GhCommandRunner
from .workflow_client import GitHubApiError, GitHubWorkflowClient, WorkflowDispatchClient

__all__ = [
    "GhCommandRunner",
    "GitHubApiError",
    "GitHubWorkflowClient",
    "WorkflowDispatchClient",
]
