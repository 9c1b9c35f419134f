"""Tests for the /ci comment parser.

Tests cover:
- Recognizing api and frontend commands
- Whitespace around the comment and around command lines
- Commands embedded in multi-line prose
- De-duplication and first-seen ordering
- Unknown and malformed commands being ignored
- Custom target maps
"""

from __future__ import annotations

import unittest

from cidispatch.domain.ci_target import TargetWorkflowMap
from cidispatch.domain.parse_result import ParseResult
from cidispatch.services.comment_parser import (
    find_unknown_targets,
    match_ci_command,
    parse_ci_comment,
)


class TestParseApiCommand(unittest.TestCase):
    """Tests for recognizing the api target."""

    def test_recognizes_ci_api(self):
        result = parse_ci_comment("/ci api")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["api"]})

    def test_ignores_surrounding_whitespace(self):
        result = parse_ci_comment("  /ci api  ")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["api"]})

    def test_finds_command_inside_comment(self):
        result = parse_ci_comment("修正しました。\n/ci api\nよろしくお願いします。")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["api"]})

    def test_ignores_text_after_target(self):
        result = parse_ci_comment("/ci api please")
        self.assertEqual(result.targets, ("api",))

    def test_handles_windows_line_endings(self):
        result = parse_ci_comment("LGTM\r\n/ci api\r\nthanks")
        self.assertEqual(result.targets, ("api",))

    def test_accepts_tab_between_command_and_target(self):
        result = parse_ci_comment("/ci\tapi")
        self.assertEqual(result.targets, ("api",))


class TestParseFrontendCommand(unittest.TestCase):
    """Tests for recognizing the frontend target."""

    def test_recognizes_ci_frontend(self):
        result = parse_ci_comment("/ci frontend")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["frontend"]})


class TestParseMultipleTargets(unittest.TestCase):
    """Tests for comments with several commands."""

    def test_recognizes_multiple_commands(self):
        result = parse_ci_comment("/ci api\n/ci frontend")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["api", "frontend"]})

    def test_preserves_first_seen_order(self):
        result = parse_ci_comment("/ci frontend\n/ci api")
        self.assertEqual(result.targets, ("frontend", "api"))

    def test_duplicate_commands_collapse(self):
        result = parse_ci_comment("/ci api\n/ci api")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["api"]})

    def test_duplicates_across_prose_collapse_to_first(self):
        comment = "/ci api\nsome text\n/ci frontend\nmore text\n  /ci api\n/ci frontend"
        result = parse_ci_comment(comment)
        self.assertEqual(result.targets, ("api", "frontend"))


class TestParseInvalidCommands(unittest.TestCase):
    """Tests for comments without recognized commands."""

    def test_comment_without_command_is_invalid(self):
        result = parse_ci_comment("コメントです")
        self.assertEqual(result.to_dict(), {"isValid": False, "targets": []})

    def test_empty_comment_is_invalid(self):
        result = parse_ci_comment("")
        self.assertEqual(result, ParseResult())
        self.assertFalse(result.is_valid)

    def test_unknown_target_is_ignored(self):
        result = parse_ci_comment("/ci unknown")
        self.assertEqual(result.to_dict(), {"isValid": False, "targets": []})

    def test_partially_valid_comment_keeps_valid_targets(self):
        result = parse_ci_comment("/ci api\n/ci unknown")
        self.assertEqual(result.to_dict(), {"isValid": True, "targets": ["api"]})

    def test_command_without_space_is_not_recognized(self):
        self.assertFalse(parse_ci_comment("/ciapi").is_valid)

    def test_command_without_target_is_not_recognized(self):
        self.assertFalse(parse_ci_comment("/ci").is_valid)
        self.assertFalse(parse_ci_comment("/ci   ").is_valid)

    def test_command_not_at_line_start_is_ignored(self):
        self.assertFalse(parse_ci_comment("please run /ci api").is_valid)

    def test_target_match_is_case_sensitive(self):
        self.assertFalse(parse_ci_comment("/ci API").is_valid)

    def test_parsing_is_idempotent(self):
        comment = "hello\n/ci frontend\n/ci nope\n/ci api"
        self.assertEqual(parse_ci_comment(comment), parse_ci_comment(comment))


class TestCustomTargetMap(unittest.TestCase):
    """Tests for parsing against a non-default target map."""

    def test_extra_target_is_recognized(self):
        workflow_map = TargetWorkflowMap({"docs": "docs-ci.yml"})
        result = parse_ci_comment("/ci docs\n/ci api", workflow_map)
        self.assertEqual(result.targets, ("docs",))


class TestMatchCiCommand(unittest.TestCase):
    """Tests for single-line command matching."""

    def test_returns_token_for_any_target(self):
        self.assertEqual(match_ci_command("  /ci whatever  "), "whatever")

    def test_returns_none_for_prose(self):
        self.assertIsNone(match_ci_command("just a comment"))


class TestFindUnknownTargets(unittest.TestCase):
    """Tests for listing ignored targets."""

    def test_lists_each_unknown_target_once(self):
        comment = "/ci api\n/ci foo\n/ci bar\n/ci foo"
        self.assertEqual(find_unknown_targets(comment), ["foo", "bar"])

    def test_returns_empty_list_when_all_known(self):
        self.assertEqual(find_unknown_targets("/ci api\n/ci frontend"), [])


if __name__ == "__main__":
    unittest.main()
