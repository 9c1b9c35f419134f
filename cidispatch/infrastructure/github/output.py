"""GitHub Actions output helpers.

Job outputs written by handle-comment:
- ``is_ci_command``: "true" when the comment selected at least one target
- ``targets``: JSON array of the selected targets
- ``results``: JSON array of dispatch outcomes (only after dispatching)
"""

from __future__ import annotations

import json
import os
import sys
import uuid
from collections.abc import Sequence

from cidispatch.domain.dispatch import DispatchOutcome
from cidispatch.domain.parse_result import ParseResult


def _heredoc_delimiter(value: str) -> str:
    """Pick a heredoc delimiter that does not occur in ``value``."""
    while True:
        delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
        if delimiter not in value:
            return delimiter


def write_github_output(key: str, value: str) -> None:
    """Append a key-value pair to GITHUB_OUTPUT.

    Multiline values are written with heredoc syntax under a random
    delimiter, so a value containing a line such as ``EOF`` cannot end
    the block early.

    Args:
        key: Output variable name
        value: Output value (can be multiline)
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        print(f"GITHUB_OUTPUT not set, would output: {key}={value[:100]}")
        return
    with open(output_file, "a", encoding="utf-8") as f:
        if "\n" in value or "\r" in value:
            delimiter = _heredoc_delimiter(value)
            f.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{key}={value}\n")


def write_parse_outputs(result: ParseResult) -> None:
    """Write ``is_ci_command`` and ``targets`` for a parsed comment."""
    write_github_output("is_ci_command", "true" if result.is_valid else "false")
    write_github_output("targets", json.dumps(list(result.targets), ensure_ascii=False))


def write_dispatch_results(outcomes: Sequence[DispatchOutcome]) -> None:
    """Write ``results`` as a JSON array of outcome dicts, in dispatch order."""
    write_github_output(
        "results",
        json.dumps([o.to_dict() for o in outcomes], ensure_ascii=False),
    )


def write_github_step_summary(content: str) -> bool:
    """Append markdown to GITHUB_STEP_SUMMARY, ending it with a newline.

    Returns:
        True if written successfully, False otherwise
    """
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        print("GITHUB_STEP_SUMMARY not set, skipping job summary")
        return False
    if not content.endswith("\n"):
        content += "\n"
    try:
        with open(summary_path, "a", encoding="utf-8") as f:
            f.write(content)
        return True
    except OSError as e:
        print(f"Failed to write job summary: {e}", file=sys.stderr)
        return False
