"""Rule: require a blank line between header and body."""
from __future__ import annotations

from gitmsglint.models import Rule, RuleOutcome


class BodyLeadingBlank(Rule):
    """Fail when the second line of a multi-line message is not blank."""

    name = "body-leading-blank"
    description = "Enforces a blank line between the commit header and body"

    def validate(self, message: str, options: dict | None = None) -> RuleOutcome:
        lines = message.split("\n")
        if len(lines) > 1 and lines[1].strip():
            return RuleOutcome.fail("Commit message must have a blank line between header and body")
        return RuleOutcome.ok()
