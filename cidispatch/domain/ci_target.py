"""Domain model for CI targets and their workflow files.

A CI target is a named pipeline category (``api``, ``frontend``) that a
``/ci <target>`` comment command can select. Each target maps to exactly
one GitHub Actions workflow file in the target repository.

The TargetWorkflowMap is the single source of truth for which targets are
valid: the comment parser checks its key set and the dispatcher resolves
workflow files from it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


# ============================================================
# Domain Models
# ============================================================


class CITarget(str, Enum):
    """Built-in CI targets.

    Attributes:
        API: Backend API pipeline
        FRONTEND: Frontend pipeline
    """

    API = "api"
    FRONTEND = "frontend"

    @property
    def default_workflow(self) -> str:
        """Workflow file that runs this target's pipeline."""
        return _DEFAULT_WORKFLOWS[self]


_DEFAULT_WORKFLOWS: dict[CITarget, str] = {
    CITarget.API: "api-ci.yml",
    CITarget.FRONTEND: "frontend-ci.yml",
}


@dataclass(frozen=True, eq=False)
class TargetWorkflowMap(Mapping[str, str]):
    """Immutable mapping of target name to workflow file id.

    Behaves as a read-only ``Mapping[str, str]`` so callers can use
    ``in``, ``[]`` and ``.get()`` directly.
    """

    workflows: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy and freeze so a caller's dict cannot change the map later
        frozen = MappingProxyType(
            {_target_name(k): v for k, v in self.workflows.items()}
        )
        object.__setattr__(self, "workflows", frozen)

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def default(cls) -> TargetWorkflowMap:
        """Build the map for the built-in targets."""
        return cls({target.value: target.default_workflow for target in CITarget})

    # --------------------------------------------------------
    # Mapping Protocol
    # --------------------------------------------------------

    def __getitem__(self, target: str) -> str:
        return self.workflows[_target_name(target)]

    def __iter__(self) -> Iterator[str]:
        return iter(self.workflows)

    def __len__(self) -> int:
        return len(self.workflows)

    def __hash__(self) -> int:
        return hash(tuple(self.workflows.items()))

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def targets(self) -> tuple[str, ...]:
        """Known target names, in declaration order."""
        return tuple(self.workflows)

    def workflow_for(self, target: str) -> str | None:
        """Return the workflow file for a target, or None if unknown."""
        return self.workflows.get(_target_name(target))

    def merged_with(self, overrides: Mapping[str, str]) -> TargetWorkflowMap:
        """Return a new map with entries added or replaced by ``overrides``."""
        return TargetWorkflowMap({**self.workflows, **overrides})


def _target_name(target: str) -> str:
    """Plain string name for a target given as a str or CITarget."""
    return target.value if isinstance(target, CITarget) else target


DEFAULT_TARGET_WORKFLOWS = TargetWorkflowMap.default()
