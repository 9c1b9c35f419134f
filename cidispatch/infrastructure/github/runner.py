"""GitHub CLI command runner.

Infrastructure component that wraps subprocess calls to the gh CLI.
This abstraction allows services to be tested without actually calling gh.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from dataclasses import dataclass, field


@dataclass
class GhCommandRunner:
    """Runs gh CLI commands via subprocess.

    For testing, mock this class or patch its run() method.

    When ``token`` is set it is passed to gh through the GH_TOKEN
    environment variable instead of relying on ``gh auth login``.
    """

    dry_run: bool = False
    token: str | None = field(default=None, repr=False)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, cmd: list[str]) -> tuple[bool, str]:
        """Run a gh CLI command.

        Args:
            cmd: Command and arguments (e.g., ["gh", "api", "..."])

        Returns:
            Tuple of (success, output_or_error)
        """
        if self.dry_run:
            return True, f"[DRY RUN] Would run: {' '.join(cmd)}"

        env = None
        if self.token:
            env = {**os.environ, "GH_TOKEN": self.token}

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True, env=env)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {e.stderr}", file=sys.stderr)
            return False, e.stderr
        except FileNotFoundError as e:
            print(f"Command not found: {cmd[0]}", file=sys.stderr)
            return False, str(e)

    def api_get_paginated(self, endpoint: str) -> tuple[bool, list | str]:
        """GET every page of a list endpoint and return the combined items.

        Args:
            endpoint: API endpoint returning a JSON array

        Returns:
            Tuple of (success, list of items or error string)
        """
        success, output = self.run(["gh", "api", "--paginate", "--slurp", endpoint])
        if not success:
            return False, output
        if self.dry_run:
            return True, []
        pages = json.loads(output or "[]")
        return True, [item for page in pages for item in page]

    def api_post(self, endpoint: str, fields: dict[str, str]) -> tuple[bool, str]:
        """Make a POST request to the GitHub API.

        Args:
            endpoint: API endpoint
            fields: String fields to include in the request body

        Returns:
            Tuple of (success, response_or_error)
        """
        cmd = ["gh", "api", endpoint]
        for key, value in fields.items():
            cmd.extend(["-f", f"{key}={value}"])
        return self.run(cmd)

    def api_patch(self, endpoint: str, fields: dict[str, str]) -> tuple[bool, str]:
        """Make a PATCH request to the GitHub API.

        Args:
            endpoint: API endpoint
            fields: Fields to include in the request body

        Returns:
            Tuple of (success, response_or_error)
        """
        cmd = ["gh", "api", endpoint, "-X", "PATCH"]
        for key, value in fields.items():
            cmd.extend(["-f", f"{key}={value}"])
        return self.run(cmd)

    def get_pull_request_head_ref(self, pr_number: int, repo: str | None = None) -> tuple[bool, str]:
        """Get the head branch name of a pull request.

        Args:
            pr_number: PR number
            repo: Repository in owner/name format (uses git remote if None)

        Returns:
            Tuple of (success, branch name or error string)
        """
        cmd = [
            "gh", "pr", "view", str(pr_number),
            "--json", "headRefName",
            "--jq", ".headRefName",
        ]
        if repo:
            cmd.extend(["-R", repo])
        success, result = self.run(cmd)
        if not success:
            return False, result
        return True, result.strip()
