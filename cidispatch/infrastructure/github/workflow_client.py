"""GitHub Actions workflow dispatch client.

Infrastructure component that calls the REST endpoint
``POST /repos/{owner}/{repo}/actions/workflows/{workflow_id}/dispatches``
with requests. The call is blocking, so the coroutine API runs it in a
worker thread.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Protocol

import requests

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SEC = 30.0


class GitHubApiError(Exception):
    """The GitHub API answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code} {message}".strip())
        self.status_code = status_code


class WorkflowDispatchClient(Protocol):
    """Protocol for anything that can start a workflow_dispatch run."""

    async def create_workflow_dispatch(
        self,
        owner: str,
        repo: str,
        workflow_id: str,
        ref: str,
        inputs: dict[str, str],
    ) -> None:
        """Request a workflow run. Raises on any failure."""
        ...


@dataclass
class GitHubWorkflowClient:
    """Production WorkflowDispatchClient backed by the GitHub REST API."""

    token: str = field(repr=False)
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SEC

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    async def create_workflow_dispatch(
        self,
        owner: str,
        repo: str,
        workflow_id: str,
        ref: str,
        inputs: dict[str, str],
    ) -> None:
        """Request a workflow run without blocking the event loop.

        Raises:
            GitHubApiError: If GitHub rejects the request
            requests.RequestException: On network errors or timeouts
        """
        await asyncio.to_thread(
            self.create_workflow_dispatch_sync, owner, repo, workflow_id, ref, inputs
        )

    def create_workflow_dispatch_sync(
        self,
        owner: str,
        repo: str,
        workflow_id: str,
        ref: str,
        inputs: dict[str, str],
    ) -> None:
        """Request a workflow run (blocking).

        GitHub answers 204 No Content on success and does not return the
        id of the run it will create.
        """
        url = f"{self.api_url.rstrip('/')}/repos/{owner}/{repo}/actions/workflows/{workflow_id}/dispatches"
        response = requests.post(
            url,
            headers=self._headers(),
            json={"ref": ref, "inputs": inputs},
            timeout=self.timeout,
        )
        if not response.ok:
            raise GitHubApiError(response.status_code, _error_message(response))

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }


def _error_message(response: requests.Response) -> str:
    """Extract GitHub's error message from a failed response."""
    try:
        data = response.json()
    except ValueError:
        return response.reason or ""
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason or ""
