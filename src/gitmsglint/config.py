"""Configuration loading and parsing for gitmsglint."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

logger = logging.getLogger("gitmsglint")

CONFIG_FILENAMES = ["gitmsglint.yml", "gitmsglint.yaml", ".gitmsglint.yml"]


class ConfigError(Exception):
    """Raised when a config file cannot be used."""


def _frozen(rules: Mapping) -> Mapping:
    return MappingProxyType(dict(rules))


@dataclass(frozen=True)
class GitMsgLintConfig:
    """Resolved, read-only gitmsglint configuration.

    ``rules`` maps a rule name to a bare severity, a ``[severity, options]``
    pair or a ``{severity: ..., **options}`` mapping (``severity`` required).
    """
    verbose: bool = True
    rules: Mapping[str, object] = field(default_factory=lambda: _frozen({}))
    ignores: tuple[str, ...] = ()
    default_ignores: tuple[str, ...] = ()
    custom_rules_dir: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", _frozen(self.rules))
        object.__setattr__(self, "ignores", tuple(self.ignores))
        object.__setattr__(self, "default_ignores", tuple(self.default_ignores))

    @property
    def all_ignores(self) -> tuple[str, ...]:
        return self.ignores + self.default_ignores


DEFAULT_CONFIG = GitMsgLintConfig(
    verbose=True,
    rules={
        "conventional-commits": 2,
        "header-max-length": (2, {"maxLength": 72}),
        "body-max-line-length": (2, {"maxLength": 100}),
        "body-leading-blank": 2,
        "no-trailing-whitespace": 1,
    },
    ignores=(),
    default_ignores=(
        "^Merge branch",
        "^Merge pull request",
        "^Merged PR",
        "^Revert ",
        "^Release ",
    ),
)


def _pattern_list(raw: dict, key: str, fallback: tuple[str, ...]) -> tuple[str, ...]:
    if key not in raw:
        return fallback
    value = raw[key]
    if value is None:
        return ()
    if not isinstance(value, list):
        logger.warning("Ignoring '%s' in config: expected a list of patterns", key)
        return fallback
    return tuple(str(pattern) for pattern in value)


def merge_config(raw: dict, base: GitMsgLintConfig = DEFAULT_CONFIG) -> GitMsgLintConfig:
    """Overlay a raw config mapping on top of base and return a new config."""
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping at the top level")

    user_rules = raw.get("rules") or {}
    if not isinstance(user_rules, dict):
        raise ConfigError("'rules' must be a mapping of rule name to severity")

    rules = dict(base.rules)
    rules.update(user_rules)

    return GitMsgLintConfig(
        verbose=bool(raw.get("verbose", base.verbose)),
        rules=rules,
        ignores=_pattern_list(raw, "ignores", base.ignores),
        default_ignores=_pattern_list(raw, "default_ignores", base.default_ignores),
        custom_rules_dir=raw.get("custom_rules_dir", base.custom_rules_dir),
    )


def _read_yaml(path: Path) -> dict:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    return raw if raw is not None else {}


def find_config_file(project_dir: str) -> Path | None:
    """Return the first known config file in project_dir, if any."""
    root = Path(project_dir)
    for filename in CONFIG_FILENAMES:
        config_path = root / filename
        if config_path.is_file():
            return config_path
    return None


def load_config(project_dir: str, config_file: str | None = None) -> GitMsgLintConfig:
    """Load config from an explicit file or gitmsglint.yml, merged over the defaults."""
    if config_file is not None:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {config_file}")
    else:
        path = find_config_file(project_dir)
        if path is None:
            return DEFAULT_CONFIG

    logger.debug("Loading config from %s", path)
    return merge_config(_read_yaml(path))


def render_config_template() -> str:
    """Return the starter gitmsglint.yml written by ``gitmsglint init``."""
    return """# gitmsglint configuration

verbose: true

# Severity: 0, 1, 2 or "off", "warning", "error" (quote "off": bare off is a YAML boolean).
# Options go in a [severity, {options}] pair or a mapping with a required severity key.
rules:
  conventional-commits: error
  header-max-length: [error, {maxLength: 72}]
  body-max-line-length:
    severity: error
    maxLength: 100
  body-leading-blank: error
  no-trailing-whitespace: warning

# Messages matching any of these regular expressions skip linting.
ignores: []

# custom_rules_dir: .gitmsglint/rules/
"""
