"""Rule: the header must follow the conventional commit format."""
from __future__ import annotations

import re

from gitmsglint.models import Rule, RuleOutcome
from gitmsglint.rules._helpers import header_of, strip_quotes

COMMIT_TYPES = (
    "build", "chore", "ci", "docs", "feat", "fix",
    "perf", "refactor", "revert", "style", "test",
)

_CONVENTIONAL_RE = re.compile(
    rf"^(?:{'|'.join(COMMIT_TYPES)})(?:\([a-z0-9-]+\))?: [^\r]+$",
    re.IGNORECASE | re.ASCII,
)


class ConventionalCommits(Rule):
    """Enforce ``<type>[(scope)]: <description>`` on the header."""

    name = "conventional-commits"
    description = "Enforces conventional commit format"

    def validate(self, message: str, options: dict | None = None) -> RuleOutcome:
        header = strip_quotes(header_of(message))
        if not _CONVENTIONAL_RE.match(header):
            return RuleOutcome.fail(
                "Commit message header does not follow conventional commit format: "
                "<type>[(scope)]: <description>"
            )
        return RuleOutcome.ok()
