"""Install and remove the gitmsglint commit-msg hook."""
from __future__ import annotations

import shlex
import shutil
import sys
import sysconfig
from pathlib import Path

HOOK_NAME = "commit-msg"
HOOK_MARKER = "# gitmsglint commit-msg hook"


class HookError(Exception):
    """Raised when the hook cannot be installed or removed."""


def resolve_command() -> str:
    """Resolve the command the hook script should run.

    Probes, in order: PATH, the pipx bin dir, the sysconfig scripts dir,
    then falls back to ``python -m gitmsglint``.
    """
    found = shutil.which("gitmsglint")
    if found:
        return shlex.quote(found)

    pipx = Path.home() / ".local" / "bin" / "gitmsglint"
    if pipx.is_file():
        return shlex.quote(str(pipx))

    scripts_dir = sysconfig.get_path("scripts")
    if scripts_dir:
        scripts_bin = Path(scripts_dir) / "gitmsglint"
        if scripts_bin.is_file():
            return shlex.quote(str(scripts_bin))

    return f"{shlex.quote(sys.executable)} -m gitmsglint"


def build_hook_script(cmd: str) -> str:
    """Return the shell script body for the commit-msg hook."""
    return f"""#!/bin/sh
{HOOK_MARKER}
# Installed by gitmsglint; remove with `gitmsglint hooks --uninstall`.

{cmd} lint --edit "$1"
"""


def is_gitmsglint_hook(path: Path) -> bool:
    """Return True if the hook file at path was written by gitmsglint."""
    try:
        return HOOK_MARKER in path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False


def install_hook(hooks_path: Path, command: str | None = None, force: bool = False) -> Path:
    """Write the commit-msg hook into hooks_path and return its path."""
    if not hooks_path.is_dir():
        raise HookError(f"Git hooks directory not found: {hooks_path}")

    hook_file = hooks_path / HOOK_NAME
    if hook_file.exists() and not force:
        raise HookError(f"{HOOK_NAME} hook already exists. Use --force to overwrite.")

    hook_file.write_text(build_hook_script(command or resolve_command()), encoding="utf-8")
    hook_file.chmod(0o755)
    return hook_file


def uninstall_hook(hooks_path: Path) -> bool:
    """Remove the commit-msg hook. Returns False if there was none to remove."""
    hook_file = hooks_path / HOOK_NAME
    if not hook_file.exists():
        return False

    if not is_gitmsglint_hook(hook_file):
        raise HookError(f"The {HOOK_NAME} hook was not installed by gitmsglint. Not removing.")

    hook_file.unlink()
    return True
