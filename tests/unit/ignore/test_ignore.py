"""Tests for literal ignore-rule matching and CLI rule parsing."""

from __future__ import annotations

import unittest

from treescribe.ignore import (
    is_ignored,
    matches_normalized_rules,
    normalize_ignore_path,
    normalize_ignore_rules,
    parse_ignore_argument,
)


class IsIgnoredTests(unittest.TestCase):
    def test_empty_or_missing_rules_never_match(self) -> None:
        self.assertFalse(is_ignored("a", []))
        self.assertFalse(is_ignored("a", None))
        self.assertFalse(is_ignored("a", ()))

    def test_exact_match_and_nested_paths_are_ignored(self) -> None:
        self.assertTrue(is_ignored("node_modules", ["node_modules"]))
        self.assertTrue(is_ignored("node_modules/pkg/index.js", ["node_modules"]))

    def test_rule_respects_path_component_boundary(self) -> None:
        self.assertFalse(is_ignored("foobar", ["foo"]))
        self.assertFalse(is_ignored("foobar/x.txt", ["foo"]))
        self.assertFalse(is_ignored("fo", ["foo"]))

    def test_nested_rule_does_not_hide_parent(self) -> None:
        self.assertFalse(is_ignored("_backup", ["_backup/js"]))
        self.assertTrue(is_ignored("_backup/js/app.js", ["_backup/js"]))

    def test_backslash_and_forward_slash_rules_match_identically(self) -> None:
        for candidate in ("a/b", "a\\b", "a/b/c", "a\\b\\c"):
            with self.subTest(candidate=candidate):
                self.assertTrue(is_ignored(candidate, ["a\\b"]))
                self.assertTrue(is_ignored(candidate, ["a/b"]))
        self.assertFalse(is_ignored("a/bc", ["a\\b"]))

    def test_trailing_separator_on_rule_is_irrelevant(self) -> None:
        self.assertTrue(is_ignored("dist", ["dist/"]))
        self.assertTrue(is_ignored("dist/app.js", ["dist\\"]))

    def test_no_glob_semantics(self) -> None:
        self.assertFalse(is_ignored("a.log", ["*.log"]))
        self.assertTrue(is_ignored("*.log", ["*.log"]))

    def test_any_rule_can_match(self) -> None:
        self.assertTrue(is_ignored(".git/HEAD", ["node_modules", ".git"]))


class MatchesNormalizedRulesTests(unittest.TestCase):
    def test_matches_against_pre_normalized_rules(self) -> None:
        rules = normalize_ignore_rules(["a\\b\\", "dist"])
        self.assertTrue(matches_normalized_rules("a\\b\\c.txt", rules))
        self.assertTrue(matches_normalized_rules("dist", rules))
        self.assertFalse(matches_normalized_rules("distro", rules))
        self.assertFalse(matches_normalized_rules("a", ()))


class NormalizeTests(unittest.TestCase):
    def test_normalize_ignore_path_converts_separators_and_strips_trailing(self) -> None:
        self.assertEqual(normalize_ignore_path("a\\b\\"), "a/b")
        self.assertEqual(normalize_ignore_path("a/b//"), "a/b")

    def test_normalize_ignore_rules_drops_empty_rules_and_keeps_order(self) -> None:
        self.assertEqual(normalize_ignore_rules(["z\\y", "/", "", "a"]), ("z/y", "a"))
        self.assertEqual(normalize_ignore_rules(None), ())


class ParseIgnoreArgumentTests(unittest.TestCase):
    def test_splits_on_pipe_and_trims(self) -> None:
        self.assertEqual(parse_ignore_argument("node_modules | .git|dist "), ["node_modules", ".git", "dist"])

    def test_drops_empty_segments(self) -> None:
        self.assertEqual(parse_ignore_argument(" | a ||  "), ["a"])

    def test_missing_value_yields_no_rules(self) -> None:
        self.assertEqual(parse_ignore_argument(None), [])
        self.assertEqual(parse_ignore_argument(""), [])


if __name__ == "__main__":
    unittest.main()
