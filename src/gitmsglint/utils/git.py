"""Git utilities for gitmsglint."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger("gitmsglint")


def _rev_parse(project_dir: str, *args: str) -> str | None:
    try:
        result = subprocess.run(
            ["git", "rev-parse", *args],
            cwd=project_dir,
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        logger.debug("git rev-parse %s failed", " ".join(args), exc_info=True)
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def hooks_dir(project_dir: str) -> Path | None:
    """Return the hooks directory git uses for project_dir, or None outside a repo.

    Honors ``core.hooksPath`` and linked worktrees via ``git rev-parse --git-path``.
    """
    path = _rev_parse(project_dir, "--git-path", "hooks")
    if path is None:
        return None
    return (Path(project_dir) / path).resolve()
