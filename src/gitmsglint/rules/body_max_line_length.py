"""Rule: cap the length of every body line."""
from __future__ import annotations

from gitmsglint.models import Rule, RuleOutcome
from gitmsglint.rules._helpers import max_length_option

_DEFAULT_MAX_LENGTH = 100


class BodyMaxLineLength(Rule):
    """Fail when a non-blank line from the third line on exceeds ``maxLength``.

    The line right after the header belongs to ``body-leading-blank`` and is
    not measured here.
    """

    name = "body-max-line-length"
    description = "Enforces a maximum line length for the commit message body"

    def validate(self, message: str, options: dict | None = None) -> RuleOutcome:
        max_length = max_length_option(options, _DEFAULT_MAX_LENGTH)
        lines = [line for line in message.split("\n")[2:] if line.strip()]

        if any(len(line) > max_length for line in lines):
            return RuleOutcome.fail(
                f"Commit message body contains lines exceeding maximum length of "
                f"{max_length} characters"
            )
        return RuleOutcome.ok()
