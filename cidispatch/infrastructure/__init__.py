"""Infrastructure components for cidispatch.

This layer handles external system interactions:
- GitHub REST API (workflow dispatch) via requests
- GitHub API via gh CLI (PR metadata, comments)
- GitHub Actions outputs
- Configuration from the environment and YAML files
"""

# Configuration
from .config import ConfigError, Settings, load_target_workflows

# GitHub API
from .github import (
    GhCommandRunner,
    GitHubApiError,
    GitHubWorkflowClient,
    WorkflowDispatchClient,
)
from .github.output import (
    write_dispatch_results,
    write_github_output,
    write_github_step_summary,
    write_parse_outputs,
)

__all__ = [
    # Configuration
    "ConfigError",
    "Settings",
    "load_target_workflows",
    # GitHub API
    "GhCommandRunner",
    "GitHubApiError",
    "GitHubWorkflowClient",
    "WorkflowDispatchClient",
    "write_dispatch_results",
    "write_github_output",
    "write_github_step_summary",
    "write_parse_outputs",
]
