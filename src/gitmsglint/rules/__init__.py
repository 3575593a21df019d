"""Built-in rule registry and custom rule loader."""
from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path

from gitmsglint.models import Rule
from gitmsglint.rules.body_leading_blank import BodyLeadingBlank
from gitmsglint.rules.body_max_line_length import BodyMaxLineLength
from gitmsglint.rules.conventional_commits import ConventionalCommits
from gitmsglint.rules.header_max_length import HeaderMaxLength
from gitmsglint.rules.no_trailing_whitespace import NoTrailingWhitespace

logger = logging.getLogger("gitmsglint")

RULES: tuple[Rule, ...] = (
    ConventionalCommits(),
    HeaderMaxLength(),
    BodyMaxLineLength(),
    BodyLeadingBlank(),
    NoTrailingWhitespace(),
)


def get_rule(name: str) -> Rule | None:
    """Return the built-in rule registered under name, or None."""
    for rule in RULES:
        if rule.name == name:
            return rule
    return None


def load_custom_rules(custom_rules_dir: str, project_dir: str) -> list[Rule]:
    """Load Rule subclasses from .py files in a custom rules directory."""
    root = Path(project_dir) / custom_rules_dir
    if not root.is_dir():
        return []

    rules: list[Rule] = []
    for py_file in sorted(root.glob("*.py")):
        if py_file.name.startswith("_"):
            continue
        try:
            mod_name = f"gitmsglint_custom.{py_file.stem}"
            spec = importlib.util.spec_from_file_location(mod_name, py_file)
            if spec is None or spec.loader is None:
                continue
            module = importlib.util.module_from_spec(spec)
            sys.modules[mod_name] = module
            spec.loader.exec_module(module)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, Rule)
                    and attr is not Rule
                    and getattr(attr, "__module__", None) == mod_name
                    and hasattr(attr, "name")
                ):
                    rules.append(attr())
        except Exception:
            logger.exception("Failed to load custom rule from %s", py_file)

    return rules
