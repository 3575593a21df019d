"""Output formatting for lint results."""
from __future__ import annotations

import json

from gitmsglint.models import LintResult, ParsedCommit


class Reporter:
    """Formats a LintResult for terminal and git hook output."""

    def __init__(self, result: LintResult, verbose: bool = False):
        self.result = result
        self.verbose = verbose

    def exit_code(self) -> int:
        return 0 if self.result.valid else 1

    def format_errors(self) -> str | None:
        """Return the failure block for stderr, or None when the message is valid."""
        if self.result.valid:
            return None
        lines = ["Commit message validation failed:"]
        lines.extend(f"- {error}" for error in self.result.errors)
        return "\n".join(lines)

    def format_warnings(self) -> str | None:
        if not self.result.warnings:
            return None
        return "\n".join(f"! {warning}" for warning in self.result.warnings)

    def format_success(self) -> str | None:
        """Return the success line, shown only in verbose mode."""
        if self.result.valid and self.verbose:
            return "Commit message validation passed!"
        return None

    def format_json(self) -> str:
        return json.dumps(self.result.to_dict(), indent=2)


def format_parsed(parsed: ParsedCommit) -> str:
    """Render a ParsedCommit as indented JSON."""
    return json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False)
