"""Core models for gitmsglint."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from enum import Enum


class Severity(Enum):
    """Rule severity levels, ranked OFF < WARNING < ERROR."""
    OFF = 0
    WARNING = 1
    ERROR = 2

    @property
    def is_blocking(self) -> bool:
        return self == Severity.ERROR

    @classmethod
    def normalize(cls, value: object) -> Severity:
        """Map a rank (0/1/2) or mnemonic ("off"/"warning"/"error") to a Severity."""
        if isinstance(value, Severity):
            return value
        # bool is an int subclass; True must not silently mean WARNING
        if isinstance(value, bool):
            raise ValueError(f"Unknown severity: {value!r}")
        if isinstance(value, int):
            for member in cls:
                if member.value == value:
                    return member
        elif isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Unknown severity: {value!r}")


@dataclass(frozen=True)
class RuleOutcome:
    """Result of validating a message against a single rule."""
    valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> RuleOutcome:
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> RuleOutcome:
        return cls(valid=False, message=message)


class Rule(ABC):
    """Base class for all gitmsglint rules."""
    name: str
    description: str

    @abstractmethod
    def validate(self, message: str, options: dict | None = None) -> RuleOutcome:
        """Validate a raw commit message. Must not raise or mutate options."""


@dataclass
class LintResult:
    """Aggregate outcome of linting one commit message."""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class Reference:
    """An issue cross-reference such as ``fixes #123`` or ``closes org/repo#4``."""
    action: str
    owner: str | None
    repository: str | None
    issue: str
    raw: str
    prefix: str = "#"


@dataclass(frozen=True)
class ParsedCommit:
    """Structured view of a commit message."""
    header: str
    type: str | None
    scope: str | None
    subject: str | None
    body: str | None
    footer: str | None
    mentions: tuple[str, ...]
    references: tuple[Reference, ...]
    raw: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mentions"] = list(self.mentions)
        data["references"] = [asdict(ref) for ref in self.references]
        return data
