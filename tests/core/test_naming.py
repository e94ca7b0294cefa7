#!/usr/bin/env python3
"""
Unit tests for database name sanitization and resolution.
"""

import re
import unittest

from db_provisioner.core.naming import resolve_database_name, sanitize_database_name
from db_provisioner.models import CIContext


VALID_NAME = re.compile(r"^[a-z0-9_]*$")


class TestSanitizeDatabaseName(unittest.TestCase):
    def test_pull_request_branch(self):
        self.assertEqual(sanitize_database_name("pr-42-feature/login"), "pr_42_feature_login")

    def test_spaces_become_underscores_and_punctuation_removed(self):
        self.assertEqual(sanitize_database_name("Test DB!!"), "test_db")

    def test_uppercase_lowered(self):
        self.assertEqual(sanitize_database_name("MyDatabase"), "mydatabase")

    def test_empty_string(self):
        self.assertEqual(sanitize_database_name(""), "")

    def test_only_invalid_characters(self):
        self.assertEqual(sanitize_database_name("!@#$ %^&*"), "")

    def test_non_ascii_dropped(self):
        self.assertEqual(sanitize_database_name("café-über"), "caf_ber")

    def test_output_always_valid(self):
        samples = [
            "pr-1-Feature/X",
            "dependabot/npm_and_yarn/lodash-4.17.21",
            "  spaced   out  ",
            "tab\tnew\nline",
            "UPPER_lower-123/456",
            "ünïcödé",
            "a.b.c",
        ]
        for raw in samples:
            with self.subTest(raw=raw):
                self.assertRegex(sanitize_database_name(raw), VALID_NAME)

    def test_idempotent(self):
        samples = ["pr-42-feature/login", "Test DB!!", "x--y//z", "", "already_clean_1"]
        for raw in samples:
            with self.subTest(raw=raw):
                once = sanitize_database_name(raw)
                self.assertEqual(sanitize_database_name(once), once)


class TestResolveDatabaseName(unittest.TestCase):
    def test_hint_wins_over_pull_request(self):
        context = CIContext(pull_request_number=7, branch_name="fix-bug", build_number=3)
        self.assertEqual(resolve_database_name("My-Preview DB", context), "my_preview_db")

    def test_pull_request_context(self):
        context = CIContext(pull_request_number=7, branch_name="fix-bug", build_number=3)
        self.assertEqual(
            resolve_database_name(None, context),
            sanitize_database_name("pr-7-fix-bug"),
        )
        self.assertEqual(resolve_database_name(None, context), "pr_7_fix_bug")

    def test_build_number_fallback(self):
        context = CIContext(build_number=99)
        self.assertEqual(resolve_database_name(None, context), "test_99")

    def test_empty_hint_ignored(self):
        context = CIContext(build_number=5)
        self.assertEqual(resolve_database_name("", context), "test_5")

    def test_pull_request_without_branch(self):
        context = CIContext(pull_request_number=12)
        self.assertEqual(resolve_database_name(None, context), "pr_12_")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
