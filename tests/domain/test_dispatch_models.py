"""Tests for dispatch domain models.

Tests cover:
- DispatchContext construction from owner/repo strings
- Workflow inputs
- Credential hidden from repr
- Outcome serialization
"""

from __future__ import annotations

import dataclasses
import unittest

from cidispatch.domain.dispatch import (
    DispatchContext,
    DispatchFailure,
    DispatchSuccess,
    FailureReason,
)
from cidispatch.domain.parse_result import ParseResult


class TestDispatchContext(unittest.TestCase):
    """Tests for DispatchContext."""

    def test_from_repository_splits_owner_and_repo(self):
        context = DispatchContext.from_repository("octo/app", "main", 5, "t")
        self.assertEqual(context.owner, "octo")
        self.assertEqual(context.repo, "app")
        self.assertEqual(context.repository, "octo/app")

    def test_from_repository_rejects_bad_format(self):
        for value in ["", "octo", "octo/", "/app", "a/b/c"]:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    DispatchContext.from_repository(value, "main", 5, "t")

    def test_workflow_inputs_stringify_pr_number(self):
        context = DispatchContext("o", "r", "main", 123, "t")
        self.assertEqual(context.workflow_inputs(), {"pr_number": "123"})

    def test_repr_hides_token(self):
        context = DispatchContext("o", "r", "main", 1, "super-secret")
        self.assertNotIn("super-secret", repr(context))

    def test_is_immutable(self):
        context = DispatchContext("o", "r", "main", 1, "t")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            context.ref = "other"


class TestDispatchOutcomes(unittest.TestCase):
    """Tests for DispatchSuccess and DispatchFailure."""

    def test_success_to_dict(self):
        outcome = DispatchSuccess(target="api", workflow_name="api-ci.yml", dispatch_id=7)
        self.assertTrue(outcome.success)
        self.assertEqual(outcome.to_dict(), {
            "target": "api",
            "success": True,
            "workflowName": "api-ci.yml",
            "dispatchId": 7,
        })

    def test_failure_to_dict(self):
        outcome = DispatchFailure(
            target="api",
            reason=FailureReason.REMOTE_CALL_ERROR,
            message="GitHub API error: API Error",
        )
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.to_dict(), {
            "target": "api",
            "success": False,
            "reason": "remote_call_error",
            "error": "GitHub API error: API Error",
        })


class TestParseResult(unittest.TestCase):
    """Tests for ParseResult."""

    def test_valid_iff_targets_present(self):
        self.assertFalse(ParseResult().is_valid)
        self.assertTrue(ParseResult(targets=("api",)).is_valid)


if __name__ == "__main__":
    unittest.main()
