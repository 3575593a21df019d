"""Commit message parser.

Pure functions: no I/O, no logging. Any input string parses to a
:class:`~gitmsglint.models.ParsedCommit`; fields that are not present are
``None`` rather than empty strings.
"""
from __future__ import annotations

import re

from gitmsglint.models import ParsedCommit, Reference
from gitmsglint.rules._helpers import strip_quotes

# type(scope): subject -- any word token is accepted as a type here.
HEADER_PATTERN = re.compile(
    r"^(?P<type>\w+)"
    r"(?:\((?P<scope>[^)]+)\))?"
    r": ?"
    r"(?P<subject>.+)$",
    re.ASCII,
)

# fixes #12, Closes org/repo#34, resolved #5
REFERENCE_PATTERN = re.compile(
    r"(?P<action>close[sd]?|fix(?:e[sd])?|resolve[sd]?)\s+"
    r"(?:(?P<owner>[\w-]+)/(?P<repository>[\w-]+))?"
    r"#(?P<issue>\d+)",
    re.IGNORECASE | re.ASCII,
)

MENTION_PATTERN = re.compile(r"@([\w-]+)", re.ASCII)


def _split_body_and_footer(lines: list[str]) -> tuple[str | None, str | None]:
    body_lines: list[str] = []
    footer_lines: list[str] = []

    in_body = True
    for line in lines:
        if in_body and not line.strip():
            in_body = False
            continue
        (body_lines if in_body else footer_lines).append(line)

    body = "\n".join(body_lines) if body_lines else None
    footer = "\n".join(footer_lines) if footer_lines else None
    return body, footer


def extract_references(text: str) -> tuple[Reference, ...]:
    """Find issue references in text, left to right."""
    return tuple(
        Reference(
            action=match.group("action").lower(),
            owner=match.group("owner"),
            repository=match.group("repository"),
            issue=match.group("issue"),
            raw=match.group(0),
        )
        for match in REFERENCE_PATTERN.finditer(text)
    )


def extract_mentions(text: str) -> tuple[str, ...]:
    """Find @handles in text, keeping duplicates and order."""
    return tuple(MENTION_PATTERN.findall(text))


def parse_commit_message(message: str) -> ParsedCommit:
    """Parse a commit message into header, type, scope, subject, body and footer."""
    lines = message.split("\n")
    header = lines[0]

    commit_type = scope = subject = None
    match = HEADER_PATTERN.match(strip_quotes(header))
    if match:
        commit_type = match.group("type")
        scope = match.group("scope")
        subject = match.group("subject").strip() or None

    # Line 1 is the blank separator after the header.
    body, footer = _split_body_and_footer(lines[2:])

    return ParsedCommit(
        header=header,
        type=commit_type,
        scope=scope,
        subject=subject,
        body=body,
        footer=footer,
        mentions=extract_mentions(message),
        references=extract_references(message),
        raw=message,
    )
