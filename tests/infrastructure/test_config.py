"""Tests for configuration loading.

Tests cover:
- Settings read from environment variables
- Loading and merging the YAML target map
- Rejecting malformed target files
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from cidispatch.domain.ci_target import DEFAULT_TARGET_WORKFLOWS
from cidispatch.infrastructure.config import (
    ConfigError,
    Settings,
    load_target_workflows,
    parse_target_workflows,
)


class TestSettings(unittest.TestCase):
    """Tests for Settings.from_env."""

    def test_reads_environment(self):
        settings = Settings.from_env({
            "GITHUB_TOKEN": "tok",
            "GITHUB_REPOSITORY": "octo/app",
            "GITHUB_EVENT_PATH": "/tmp/event.json",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "CI_TARGETS_FILE": "targets.yml",
        })

        self.assertEqual(settings.token, "tok")
        self.assertEqual(settings.repository, "octo/app")
        self.assertEqual(settings.event_path, "/tmp/event.json")
        self.assertEqual(settings.api_url, "https://ghe.example.com/api/v3")
        self.assertEqual(settings.targets_file, "targets.yml")

    def test_defaults_when_unset(self):
        settings = Settings.from_env({})

        self.assertEqual(settings.token, "")
        self.assertEqual(settings.api_url, "https://api.github.com")

    def test_repr_hides_token(self):
        self.assertNotIn("tok-123", repr(Settings(token="tok-123")))

    def test_require_token_raises_when_missing(self):
        with self.assertRaises(ConfigError):
            Settings().require_token()

    def test_load_workflow_map_defaults(self):
        self.assertIs(Settings().load_workflow_map(), DEFAULT_TARGET_WORKFLOWS)


class TestLoadTargetWorkflows(unittest.TestCase):
    """Tests for reading the YAML target map."""

    def write(self, tmpdir: str, content: str) -> Path:
        path = Path(tmpdir) / "targets.yml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_merges_file_into_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self.write(tmpdir, "targets:\n  docs: docs-ci.yml\n  api: api-v2.yaml\n")

            workflow_map = load_target_workflows(path)

        self.assertEqual(dict(workflow_map), {
            "api": "api-v2.yaml",
            "frontend": "frontend-ci.yml",
            "docs": "docs-ci.yml",
        })

    def test_settings_prefers_explicit_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self.write(tmpdir, "targets:\n  docs: docs-ci.yml\n")
            settings = Settings(targets_file="/does/not/exist.yml")

            workflow_map = settings.load_workflow_map(str(path))

        self.assertIn("docs", workflow_map)

    def test_missing_file_raises(self):
        with self.assertRaises(ConfigError):
            load_target_workflows(Path("/does/not/exist.yml"))

    def test_directory_path_raises_config_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError) as ctx:
                load_target_workflows(Path(tmpdir))

        self.assertIn("could not be read", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_non_utf8_file_raises_config_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "targets.yml"
            path.write_bytes(b"targets:\n  api: \xff\xfe.yml\n")

            with self.assertRaises(ConfigError) as ctx:
                load_target_workflows(path)

        self.assertIsInstance(ctx.exception.__cause__, UnicodeDecodeError)

    def test_invalid_yaml_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self.write(tmpdir, "targets: [unclosed\n")
            with self.assertRaises(ConfigError):
                load_target_workflows(path)


class TestParseTargetWorkflows(unittest.TestCase):
    """Tests for validating the parsed YAML document."""

    def test_accepts_valid_document(self):
        self.assertEqual(
            parse_target_workflows({"targets": {"docs": "docs-ci.yml"}}),
            {"docs": "docs-ci.yml"},
        )

    def test_rejects_bad_documents(self):
        bad_documents = [
            None,
            [],
            {},
            {"targets": []},
            {"targets": {}},
            {"targets": {"docs": 3}},
            {"targets": {"docs": "docs-ci.json"}},
            {"targets": {"my docs": "docs-ci.yml"}},
            {"targets": {"": "docs-ci.yml"}},
            {"targets": {1: "docs-ci.yml"}},
        ]
        for data in bad_documents:
            with self.subTest(data=data):
                with self.assertRaises(ConfigError):
                    parse_target_workflows(data)

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))


if __name__ == "__main__":
    unittest.main()
