"""CI comment parser.

Finds ``/ci <target>`` commands in free-form PR comment text. A command is
a line whose stripped text starts with ``/ci``, whitespace, then a target
name. Commands may appear anywhere in the comment, any number of times,
between arbitrary prose.

Unknown targets are ignored rather than rejected, so one typo does not
cancel the other commands in the same comment.
"""

from __future__ import annotations

import re

from cidispatch.domain.ci_target import DEFAULT_TARGET_WORKFLOWS, TargetWorkflowMap
from cidispatch.domain.parse_result import ParseResult

CI_COMMAND_PATTERN = re.compile(r"^/ci\s+(\S+)")


def parse_ci_comment(
    comment: str,
    workflow_map: TargetWorkflowMap = DEFAULT_TARGET_WORKFLOWS,
) -> ParseResult:
    """Extract the known CI targets from a comment.

    Args:
        comment: Raw comment body (may be empty or multi-line)
        workflow_map: Map whose keys are the valid target names

    Returns:
        ParseResult with each known target once, in first-seen order
    """
    targets: list[str] = []

    for line in comment.splitlines():
        target = match_ci_command(line)
        if target is None or target not in workflow_map:
            continue
        if target not in targets:
            targets.append(target)

    return ParseResult(targets=tuple(targets))


def match_ci_command(line: str) -> str | None:
    """Return the target token of a ``/ci`` command line, or None.

    The token is returned whether or not it names a known target.
    """
    match = CI_COMMAND_PATTERN.match(line.strip())
    if not match:
        return None
    return match.group(1)


def find_unknown_targets(
    comment: str,
    workflow_map: TargetWorkflowMap = DEFAULT_TARGET_WORKFLOWS,
) -> list[str]:
    """List the ``/ci`` targets in a comment that are not in the map.

    Each unknown name is listed once, in first-seen order. Used to tell the
    commenter which commands were ignored.
    """
    unknown: list[str] = []
    for line in comment.splitlines():
        target = match_ci_command(line)
        if target is not None and target not in workflow_map and target not in unknown:
            unknown.append(target)
    return unknown
