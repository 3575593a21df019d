"""Rule: no line may end in whitespace."""
from __future__ import annotations

from gitmsglint.models import Rule, RuleOutcome


class NoTrailingWhitespace(Rule):
    """Fail when any line, header included, ends with whitespace."""

    name = "no-trailing-whitespace"
    description = "Checks for trailing whitespace in commit message"

    def validate(self, message: str, options: dict | None = None) -> RuleOutcome:
        offending = [
            str(number)
            for number, line in enumerate(message.split("\n"), start=1)
            if line != line.rstrip()
        ]
        if offending:
            return RuleOutcome.fail(
                f"Commit message contains lines with trailing whitespace (lines: {', '.join(offending)})"
            )
        return RuleOutcome.ok()
