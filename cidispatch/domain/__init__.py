"""Domain models for cidispatch."""

from cidispatch.domain.ci_target import (
    DEFAULT_TARGET_WORKFLOWS,
    CITarget,
    TargetWorkflowMap,
)
from cidispatch.domain.comment_event import CommentEvent
from cidispatch.domain.dispatch import (
    DispatchContext,
    DispatchFailure,
    DispatchOutcome,
    DispatchSuccess,
    FailureReason,
)
from cidispatch.domain.parse_result import ParseResult

__all__ = [
    "CITarget",
    "CommentEvent",
    "DEFAULT_TARGET_WORKFLOWS",
    "DispatchContext",
    "DispatchFailure",
    "DispatchOutcome",
    "DispatchSuccess",
    "FailureReason",
    "ParseResult",
    "TargetWorkflowMap",
]
