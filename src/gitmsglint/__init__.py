"""gitmsglint - Lint and parse git commit messages."""

__version__ = "0.1.0"

from gitmsglint.config import DEFAULT_CONFIG, GitMsgLintConfig, load_config
from gitmsglint.engine import Linter, lint_commit_message
from gitmsglint.models import (
    LintResult,
    ParsedCommit,
    Reference,
    Rule,
    RuleOutcome,
    Severity,
)
from gitmsglint.parser import parse_commit_message
from gitmsglint.rules import RULES

__all__ = [
    "DEFAULT_CONFIG",
    "GitMsgLintConfig",
    "LintResult",
    "Linter",
    "ParsedCommit",
    "RULES",
    "Reference",
    "Rule",
    "RuleOutcome",
    "Severity",
    "lint_commit_message",
    "load_config",
    "parse_commit_message",
]
