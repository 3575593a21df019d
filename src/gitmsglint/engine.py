"""gitmsglint evaluation engine."""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from gitmsglint.config import DEFAULT_CONFIG, GitMsgLintConfig
from gitmsglint.models import LintResult, Rule, Severity
from gitmsglint.rules import RULES

logger = logging.getLogger("gitmsglint")


def split_rule_entry(entry: object) -> tuple[object, dict | None]:
    """Split a configured rule entry into (level, options).

    Accepts a bare level, a ``[level]`` / ``[level, options]`` sequence or a
    mapping with a ``severity`` key whose other keys are options. A mapping
    without ``severity`` yields a ``None`` level, which fails to normalize.
    """
    if isinstance(entry, (list, tuple)):
        if not entry:
            return Severity.OFF, None
        level = entry[0]
        options = entry[1] if len(entry) > 1 else None
        return level, dict(options) if isinstance(options, Mapping) else None
    if isinstance(entry, Mapping):
        options = {k: v for k, v in entry.items() if k != "severity"}
        return entry.get("severity"), options or None
    return entry, None


class Linter:
    """Orchestrates ignore patterns, severity resolution and rule evaluation."""

    def __init__(self, config: GitMsgLintConfig = DEFAULT_CONFIG, rules: Iterable[Rule] | None = None):
        self.config = config
        # Later registrations win so custom rules can replace built-ins.
        self.rules: dict[str, Rule] = {rule.name: rule for rule in (RULES if rules is None else rules)}

    def _is_ignored(self, message: str) -> bool:
        for pattern in self.config.all_ignores:
            try:
                if re.search(pattern, message):
                    return True
            except re.error as exc:
                logger.warning("Invalid ignore pattern %r: %s", pattern, exc)
        return False

    def lint(self, message: str, verbose: bool | None = None) -> LintResult:
        """Lint a commit message against the configured rules."""
        if verbose is None:
            verbose = self.config.verbose
        result = LintResult()

        if self._is_ignored(message):
            if verbose:
                logger.info("Commit message matched ignore pattern, skipping validation")
            return result

        for rule_name, entry in self.config.rules.items():
            rule = self.rules.get(rule_name)
            if rule is None:
                if verbose:
                    logger.warning('Rule "%s" not found, skipping', rule_name)
                continue

            level, options = split_rule_entry(entry)
            try:
                severity = Severity.normalize(level)
            except ValueError:
                logger.warning('Rule "%s" has invalid severity %r, treating as off', rule_name, level)
                continue

            if severity == Severity.OFF:
                continue

            try:
                outcome = rule.validate(message, options)
            except Exception:
                logger.exception("Rule %s raised an exception", rule_name)
                continue

            if outcome.valid:
                continue

            text = outcome.message or f'Rule "{rule_name}" failed validation'
            if severity.is_blocking:
                result.errors.append(text)
            else:
                result.warnings.append(text)

        return result


def lint_commit_message(
    message: str,
    config: GitMsgLintConfig | None = None,
    verbose: bool | None = None,
) -> LintResult:
    """Lint message with a one-off Linter built on config (defaults if omitted)."""
    return Linter(config or DEFAULT_CONFIG).lint(message, verbose=verbose)
