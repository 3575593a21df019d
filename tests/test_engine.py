"""Tests for the gitmsglint lint engine."""
from __future__ import annotations

import logging

import pytest

from gitmsglint.config import DEFAULT_CONFIG, GitMsgLintConfig
from gitmsglint.engine import Linter, lint_commit_message, split_rule_entry
from gitmsglint.models import Rule, RuleOutcome, Severity
from gitmsglint.rules import RULES


# ---------------------------------------------------------------------------
# Test helper rules
# ---------------------------------------------------------------------------

class PassRule(Rule):
    name = "pass-rule"
    description = "Always passes"

    def validate(self, message, options=None):
        return RuleOutcome.ok()


class FailRule(Rule):
    name = "fail-rule"
    description = "Always fails"

    def validate(self, message, options=None):
        return RuleOutcome.fail("Failed")


class SilentFailRule(Rule):
    name = "silent-fail"
    description = "Fails without a message"

    def validate(self, message, options=None):
        return RuleOutcome(valid=False)


class RecordingRule(Rule):
    name = "recording"
    description = "Records the options it was called with"

    def __init__(self):
        self.calls: list = []

    def validate(self, message, options=None):
        self.calls.append(options)
        if options is not None:
            options["mutated"] = True
        return RuleOutcome.ok()


class ExplodingRule(Rule):
    name = "exploding"
    description = "Raises"

    def validate(self, message, options=None):
        raise RuntimeError("boom")


def _config(rules: dict, **kwargs) -> GitMsgLintConfig:
    return GitMsgLintConfig(verbose=False, rules=rules, **kwargs)


# ---------------------------------------------------------------------------
# split_rule_entry
# ---------------------------------------------------------------------------

class TestSplitRuleEntry:
    def test_bare_level(self) -> None:
        assert split_rule_entry(2) == (2, None)
        assert split_rule_entry("warning") == ("warning", None)

    def test_pair(self) -> None:
        assert split_rule_entry([2, {"maxLength": 50}]) == (2, {"maxLength": 50})
        assert split_rule_entry((1, {"maxLength": 50})) == (1, {"maxLength": 50})

    def test_single_element_sequence(self) -> None:
        assert split_rule_entry(["error"]) == ("error", None)

    def test_empty_sequence_is_off(self) -> None:
        assert split_rule_entry([]) == (Severity.OFF, None)

    def test_mapping_form(self) -> None:
        assert split_rule_entry({"severity": "error", "maxLength": 60}) == ("error", {"maxLength": 60})

    def test_mapping_without_options(self) -> None:
        assert split_rule_entry({"severity": 1}) == (1, None)

    def test_mapping_without_severity_has_no_level(self) -> None:
        assert split_rule_entry({"maxLength": 5}) == (None, {"maxLength": 5})

    def test_pair_options_are_copied(self) -> None:
        options = {"maxLength": 50}
        _, copied = split_rule_entry([2, options])
        assert copied == options
        assert copied is not options


# ---------------------------------------------------------------------------
# Linter with the default configuration
# ---------------------------------------------------------------------------

class TestDefaultConfig:
    def test_valid_conventional_message(self) -> None:
        result = lint_commit_message("feat: add new feature")
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_invalid_message_reports_conventional_error(self) -> None:
        result = lint_commit_message("Invalid commit message")
        assert result.valid is False
        assert any("conventional commit format" in e for e in result.errors)

    def test_long_header_reports_length_error(self) -> None:
        result = lint_commit_message("feat: " + "x" * 80)
        assert result.valid is False
        assert len(result.errors) == 1
        assert "maximum length of 72" in result.errors[0]

    def test_trailing_whitespace_is_only_a_warning(self) -> None:
        result = lint_commit_message("feat: add thing ")
        assert result.valid is True
        assert result.errors == []
        assert len(result.warnings) == 1
        assert "trailing whitespace" in result.warnings[0]

    def test_errors_follow_rule_order(self) -> None:
        message = "bad\nno blank line"
        result = lint_commit_message(message)
        assert len(result.errors) == 2
        assert "conventional" in result.errors[0]
        assert "blank line" in result.errors[1]

    @pytest.mark.parametrize(
        "message",
        [
            "Merge branch 'main' into feature",
            "Merge pull request #12 from org/branch",
            "Merged PR 99: something",
            'Revert "feat: add thing"',
            "Release 1.2.0",
        ],
    )
    def test_default_ignores_skip_linting(self, message) -> None:
        result = lint_commit_message(message)
        assert result.to_dict() == {"valid": True, "errors": [], "warnings": []}

    @pytest.mark.parametrize("message", ["", "   ", "\n\n\n", "\x00\x01", "🙂" * 500])
    def test_malformed_input_never_raises(self, message) -> None:
        result = lint_commit_message(message)
        assert result.valid is (not result.errors)


# ---------------------------------------------------------------------------
# Linter behavior
# ---------------------------------------------------------------------------

class TestLinter:
    def test_no_rules_configured(self) -> None:
        result = Linter(_config({})).lint("anything")
        assert result.valid is True

    def test_error_level_failure_invalidates(self) -> None:
        linter = Linter(_config({"fail-rule": 2}), rules=[FailRule()])
        result = linter.lint("x")
        assert result.valid is False
        assert result.errors == ["Failed"]
        assert result.warnings == []

    def test_warning_level_failure_keeps_valid(self) -> None:
        linter = Linter(_config({"fail-rule": "warning"}), rules=[FailRule()])
        result = linter.lint("x")
        assert result.valid is True
        assert result.warnings == ["Failed"]

    @pytest.mark.parametrize("level", [0, "off", Severity.OFF, []])
    def test_off_rules_are_not_evaluated(self, level) -> None:
        rule = RecordingRule()
        Linter(_config({"recording": level}), rules=[rule]).lint("x")
        assert rule.calls == []

    def test_fallback_message_when_rule_gives_none(self) -> None:
        linter = Linter(_config({"silent-fail": 2}), rules=[SilentFailRule()])
        assert linter.lint("x").errors == ['Rule "silent-fail" failed validation']

    def test_unknown_rule_is_skipped(self) -> None:
        linter = Linter(_config({"does-not-exist": 2, "pass-rule": 2}), rules=[PassRule()])
        assert linter.lint("x").valid is True

    def test_unknown_rule_warns_when_verbose(self, caplog) -> None:
        linter = Linter(_config({"does-not-exist": 2}), rules=[])
        with caplog.at_level(logging.WARNING, logger="gitmsglint"):
            linter.lint("x", verbose=True)
        assert "does-not-exist" in caplog.text

    def test_unknown_rule_is_silent_when_not_verbose(self, caplog) -> None:
        linter = Linter(_config({"does-not-exist": 2}), rules=[])
        with caplog.at_level(logging.WARNING, logger="gitmsglint"):
            linter.lint("x", verbose=False)
        assert caplog.text == ""

    @pytest.mark.parametrize("level", ["fatal", 7, None, True])
    def test_invalid_severity_is_treated_as_off(self, level, caplog) -> None:
        linter = Linter(_config({"fail-rule": level}), rules=[FailRule()])
        with caplog.at_level(logging.WARNING, logger="gitmsglint"):
            result = linter.lint("x")
        assert result.valid is True
        assert result.warnings == []
        assert "invalid severity" in caplog.text

    def test_bare_severity_passes_no_options(self) -> None:
        rule = RecordingRule()
        Linter(_config({"recording": 2}), rules=[rule]).lint("x")
        assert rule.calls == [None]

    def test_options_are_passed_as_copies(self) -> None:
        rule = RecordingRule()
        config = _config({"recording": [2, {"maxLength": 10}]})
        Linter(config, rules=[rule]).lint("x")
        assert rule.calls == [{"maxLength": 10, "mutated": True}]
        assert config.rules["recording"][1] == {"maxLength": 10}

    def test_mapping_entry_options(self) -> None:
        linter = Linter(_config({"header-max-length": {"severity": "error", "maxLength": 5}}))
        result = linter.lint("feat: too long")
        assert result.valid is False
        assert "maximum length of 5" in result.errors[0]

    def test_mapping_entry_without_severity_is_treated_as_off(self, caplog) -> None:
        linter = Linter(_config({"header-max-length": {"maxLength": 5}}))
        with caplog.at_level(logging.WARNING, logger="gitmsglint"):
            result = linter.lint("feat: too long")
        assert result.valid is True
        assert result.errors == []
        assert 'Rule "header-max-length" has invalid severity None' in caplog.text

    def test_rule_exception_is_logged_and_skipped(self, caplog) -> None:
        linter = Linter(_config({"exploding": 2, "fail-rule": 1}), rules=[ExplodingRule(), FailRule()])
        with caplog.at_level(logging.ERROR, logger="gitmsglint"):
            result = linter.lint("x")
        assert result.valid is True
        assert result.warnings == ["Failed"]
        assert "exploding" in caplog.text

    def test_custom_rule_overrides_builtin_by_name(self) -> None:
        class LenientHeader(PassRule):
            name = "header-max-length"

        linter = Linter(_config({"header-max-length": 2}), rules=[*RULES, LenientHeader()])
        assert linter.lint("feat: " + "x" * 200).valid is True

    def test_verbose_defaults_to_config(self, caplog) -> None:
        config = GitMsgLintConfig(verbose=True, rules={"nope": 2})
        with caplog.at_level(logging.WARNING, logger="gitmsglint"):
            Linter(config, rules=[]).lint("x")
        assert "nope" in caplog.text


class TestIgnores:
    def test_matching_ignore_short_circuits(self) -> None:
        config = _config({"fail-rule": 2}, ignores=["WIP"])
        result = Linter(config, rules=[FailRule()]).lint("chore: WIP do not merge")
        assert result.to_dict() == {"valid": True, "errors": [], "warnings": []}

    def test_ignore_is_searched_anywhere_in_message(self) -> None:
        config = _config({"fail-rule": 2}, ignores=["^skip-lint$"])
        assert Linter(config, rules=[FailRule()]).lint("a\nskip-lint").valid is False
        config = _config({"fail-rule": 2}, ignores=["skip-lint"])
        assert Linter(config, rules=[FailRule()]).lint("a\nskip-lint").valid is True

    def test_default_ignores_are_merged(self) -> None:
        config = _config({"fail-rule": 2}, default_ignores=["^fixup!"])
        assert Linter(config, rules=[FailRule()]).lint("fixup! feat: x").valid is True

    def test_non_matching_ignores_lint_normally(self) -> None:
        config = _config({"fail-rule": 2}, ignores=["WIP"])
        assert Linter(config, rules=[FailRule()]).lint("feat: x").valid is False

    def test_invalid_pattern_is_logged_and_skipped(self, caplog) -> None:
        config = _config({"fail-rule": 2}, ignores=["(unclosed", "ok"])
        with caplog.at_level(logging.WARNING, logger="gitmsglint"):
            result = Linter(config, rules=[FailRule()]).lint("ok then")
        assert result.valid is True
        assert "(unclosed" in caplog.text

    def test_verbose_logs_skip(self, caplog) -> None:
        config = _config({}, ignores=["x"])
        with caplog.at_level(logging.INFO, logger="gitmsglint"):
            result = Linter(config).lint("x", verbose=True)
        assert result.valid is True
        assert "ignore pattern" in caplog.text


class TestProperties:
    MESSAGES = [
        "feat: add new feature",
        "Invalid commit message",
        "feat: " + "x" * 80,
        "fix(core): x \nbody right away",
        "",
    ]

    @pytest.mark.parametrize("message", MESSAGES)
    def test_lint_is_deterministic(self, message) -> None:
        linter = Linter(DEFAULT_CONFIG)
        assert linter.lint(message) == linter.lint(message)

    @pytest.mark.parametrize("message", MESSAGES)
    def test_valid_iff_no_errors(self, message) -> None:
        result = Linter(DEFAULT_CONFIG).lint(message)
        assert result.valid is (result.errors == [])

    @pytest.mark.parametrize("message", MESSAGES)
    def test_single_enabled_rule_matches_rule_outcome(self, message) -> None:
        for rule in RULES:
            config = _config({r.name: (2 if r is rule else 0) for r in RULES})
            result = Linter(config).lint(message)
            assert result.valid is rule.validate(message).valid

    def test_config_is_not_mutated(self) -> None:
        before = dict(DEFAULT_CONFIG.rules)
        Linter(DEFAULT_CONFIG).lint("feat: x")
        assert dict(DEFAULT_CONFIG.rules) == before
