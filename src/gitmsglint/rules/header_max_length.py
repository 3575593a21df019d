"""Rule: cap the length of the header line."""
from __future__ import annotations

from gitmsglint.models import Rule, RuleOutcome
from gitmsglint.rules._helpers import header_of, max_length_option

_DEFAULT_MAX_LENGTH = 72


class HeaderMaxLength(Rule):
    """Fail when the first line is longer than ``maxLength`` characters."""

    name = "header-max-length"
    description = "Enforces a maximum length for the commit message header"

    def validate(self, message: str, options: dict | None = None) -> RuleOutcome:
        max_length = max_length_option(options, _DEFAULT_MAX_LENGTH)
        header = header_of(message)

        if len(header) > max_length:
            return RuleOutcome.fail(
                f"Commit message header exceeds maximum length of {max_length} characters "
                f"({len(header)})"
            )
        return RuleOutcome.ok()
