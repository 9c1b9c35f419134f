"""Configuration loading.

Settings come from the GitHub Actions environment. The target map can be
extended or overridden with a YAML file:

    targets:
      api: api-ci.yml
      frontend: frontend-ci.yml
      docs: docs-ci.yml
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from cidispatch.domain.ci_target import DEFAULT_TARGET_WORKFLOWS, TargetWorkflowMap
from cidispatch.infrastructure.github.workflow_client import DEFAULT_API_URL

_WORKFLOW_SUFFIXES = (".yml", ".yaml")


class ConfigError(ValueError):
    """Configuration is missing or malformed."""


# ============================================================
# Settings
# ============================================================


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment.

    Attributes:
        token: Credential for the GitHub API (GITHUB_TOKEN)
        repository: Target repository in owner/repo format (GITHUB_REPOSITORY)
        event_path: Path to the triggering event payload (GITHUB_EVENT_PATH)
        api_url: GitHub REST API base URL (GITHUB_API_URL)
        targets_file: Optional YAML target map (CI_TARGETS_FILE)
    """

    token: str = field(default="", repr=False)
    repository: str = ""
    event_path: str = ""
    api_url: str = DEFAULT_API_URL
    targets_file: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            token=env.get("GITHUB_TOKEN", ""),
            repository=env.get("GITHUB_REPOSITORY", ""),
            event_path=env.get("GITHUB_EVENT_PATH", ""),
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            targets_file=env.get("CI_TARGETS_FILE", ""),
        )

    def require_token(self) -> str:
        """Return the token or raise ConfigError if it is not set."""
        if not self.token:
            raise ConfigError("GITHUB_TOKEN is not set")
        return self.token

    def load_workflow_map(self, targets_file: str | None = None) -> TargetWorkflowMap:
        """Load the target map, preferring an explicit file over CI_TARGETS_FILE."""
        path = targets_file or self.targets_file
        if not path:
            return DEFAULT_TARGET_WORKFLOWS
        return load_target_workflows(Path(path))


# ============================================================
# Target Map Loading
# ============================================================


def load_target_workflows(
    path: Path,
    base: TargetWorkflowMap = DEFAULT_TARGET_WORKFLOWS,
) -> TargetWorkflowMap:
    """Load target → workflow entries from YAML and merge them into ``base``.

    Args:
        path: YAML file with a top-level ``targets`` mapping
        base: Map the file's entries are added to (built-in targets by default)

    Returns:
        Merged TargetWorkflowMap

    Raises:
        ConfigError: If the file is missing, unreadable or its contents are invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Targets file does not exist: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Targets file could not be read: {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Targets file is not valid YAML: {path}: {e}") from e

    return base.merged_with(parse_target_workflows(data))


def parse_target_workflows(data: object) -> dict[str, str]:
    """Validate the parsed YAML document and return its ``targets`` entries.

    Raises:
        ConfigError: If the document does not have the expected shape
    """
    if not isinstance(data, dict) or "targets" not in data:
        raise ConfigError("Targets file must contain a top-level 'targets' mapping")

    targets = data["targets"]
    if not isinstance(targets, dict) or not targets:
        raise ConfigError("'targets' must be a non-empty mapping of target name to workflow file")

    workflows: dict[str, str] = {}
    for name, workflow in targets.items():
        if not isinstance(name, str) or not name or any(c.isspace() for c in name):
            raise ConfigError(f"Invalid target name: {name!r}")
        if not isinstance(workflow, str) or not workflow.endswith(_WORKFLOW_SUFFIXES):
            raise ConfigError(f"Workflow for target '{name}' must be a .yml or .yaml file name: {workflow!r}")
        workflows[name] = workflow
    return workflows
