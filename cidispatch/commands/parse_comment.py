"""Parse a comment for /ci commands.

Thin command that reads the comment text and prints the ParseResult.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from cidispatch.infrastructure import ConfigError, Settings
from cidispatch.services import find_unknown_targets, parse_ci_comment


def cmd_parse_comment(
    body: str | None = None,
    body_file: str | None = None,
    targets_file: str | None = None,
) -> int:
    """Print the /ci targets found in a comment as JSON.

    The comment comes from ``body``, else ``body_file``, else stdin.

    Args:
        body: Comment text
        body_file: Path to a file containing the comment text
        targets_file: Optional YAML target map

    Returns:
        Exit code (0 if the comment selects at least one target, 1 otherwise)
    """
    try:
        workflow_map = Settings.from_env().load_workflow_map(targets_file)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if body is None:
        if body_file:
            try:
                body = Path(body_file).read_text(encoding="utf-8")
            except OSError as e:
                print(f"Failed to read comment file: {e}", file=sys.stderr)
                return 1
        else:
            body = sys.stdin.read()

    result = parse_ci_comment(body, workflow_map)
    print(json.dumps(result.to_dict(), ensure_ascii=False))

    for target in find_unknown_targets(body, workflow_map):
        print(f"Ignored unknown target: {target}", file=sys.stderr)

    return 0 if result.is_valid else 1
