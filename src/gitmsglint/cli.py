"""gitmsglint CLI entry point."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from gitmsglint import __version__
from gitmsglint.config import CONFIG_FILENAMES, ConfigError, GitMsgLintConfig, load_config, render_config_template
from gitmsglint.engine import Linter
from gitmsglint.hooks import HookError, install_hook, uninstall_hook
from gitmsglint.parser import parse_commit_message
from gitmsglint.reporter import Reporter, format_parsed
from gitmsglint.rules import RULES, load_custom_rules
from gitmsglint.utils.git import hooks_dir


def _configure_logging() -> None:
    level = os.environ.get("GITMSGLINT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_message_file(file_path: str) -> str:
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error reading commit message file: {file_path}", err=True)
        click.echo(str(exc), err=True)
        sys.exit(1)


def _read_message(ctx: click.Context, edit: str | None, files: tuple[str, ...]) -> str:
    """Read the message from --edit, the first positional file or piped stdin."""
    if edit:
        return _read_message_file(edit)
    if files:
        return _read_message_file(files[0])

    if not sys.stdin.isatty():
        return sys.stdin.read()

    click.echo(ctx.get_help(), err=True)
    sys.exit(1)


def _load_config_or_exit(project_dir: str, config_file: str | None) -> GitMsgLintConfig:
    try:
        return load_config(project_dir, config_file)
    except ConfigError as exc:
        click.echo(f"Invalid configuration: {exc}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="gitmsglint")
def main():
    """gitmsglint - Lint and parse git commit messages."""
    _configure_logging()


@main.command()
@click.argument("files", nargs=-1, type=click.Path())
@click.option("--edit", default=None, type=click.Path(), help="Path to .git/COMMIT_EDITMSG file")
@click.option("--verbose/--quiet", default=None, help="Print a success line when the message passes")
@click.option("--config", "config_file", default=None, help="Path to config file")
@click.option("--project-dir", default=None, help="Directory to search for gitmsglint.yml")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def lint(
    ctx: click.Context,
    files: tuple[str, ...],
    edit: str | None,
    verbose: bool | None,
    config_file: str | None,
    project_dir: str | None,
    as_json: bool,
):
    """Lint a commit message from a file or stdin."""
    project_dir = project_dir or os.getcwd()
    message = _read_message(ctx, edit, files)

    config = _load_config_or_exit(project_dir, config_file)
    rules = list(RULES)
    if config.custom_rules_dir:
        rules.extend(load_custom_rules(config.custom_rules_dir, project_dir))

    if verbose is None:
        verbose = config.verbose

    result = Linter(config=config, rules=rules).lint(message, verbose=verbose)
    reporter = Reporter(result, verbose=verbose)

    if as_json:
        click.echo(reporter.format_json())
        sys.exit(reporter.exit_code())

    warnings = reporter.format_warnings()
    if warnings:
        click.echo(warnings, err=True)

    errors = reporter.format_errors()
    if errors:
        click.echo(errors, err=True)

    success = reporter.format_success()
    if success:
        click.echo(success)

    sys.exit(reporter.exit_code())


@main.command()
@click.argument("file", required=False, type=click.Path())
@click.option("--edit", default=None, type=click.Path(), help="Path to .git/COMMIT_EDITMSG file")
@click.pass_context
def parse(ctx: click.Context, file: str | None, edit: str | None):
    """Print the structured form of a commit message as JSON."""
    message = _read_message(ctx, edit, (file,) if file else ())
    click.echo(format_parsed(parse_commit_message(message)))


@main.command()
@click.option("--install", "action", flag_value="install", help="Install the commit-msg hook")
@click.option("--uninstall", "action", flag_value="uninstall", help="Remove the commit-msg hook")
@click.option("--force", is_flag=True, help="Overwrite an existing commit-msg hook")
@click.option("--project-dir", default=None, help="Repository directory")
def hooks(action: str | None, force: bool, project_dir: str | None):
    """Manage the git commit-msg hook."""
    if action is None:
        click.echo("Please specify --install or --uninstall", err=True)
        sys.exit(1)

    project_dir = project_dir or os.getcwd()
    path = hooks_dir(project_dir)
    if path is None:
        click.echo("Not a git repository", err=True)
        sys.exit(1)

    try:
        if action == "install":
            hook_file = install_hook(path, force=force)
            click.echo(f"Git commit-msg hook installed at {hook_file}", err=True)
        elif uninstall_hook(path):
            click.echo(f"Git commit-msg hook removed from {path}", err=True)
        else:
            click.echo("No commit-msg hook found", err=True)
    except HookError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"Failed to manage git hooks: {exc}", err=True)
        sys.exit(1)


@main.command()
@click.option("--project-dir", default=None, help="Project directory")
def init(project_dir: str | None):
    """Create a starter gitmsglint.yml in the project."""
    project_dir = project_dir or os.getcwd()
    config_path = os.path.join(project_dir, CONFIG_FILENAMES[0])

    if os.path.exists(config_path):
        click.echo(f"{config_path} already exists", err=True)
        sys.exit(1)

    with open(config_path, "w", encoding="utf-8") as f:
        f.write(render_config_template())

    click.echo(f"Created {config_path}")


@main.command("list-rules")
def list_rules():
    """List all built-in rules."""
    click.echo(f"{'Rule':<26} Description")
    click.echo("-" * 80)
    for rule in RULES:
        click.echo(f"{rule.name:<26} {rule.description}")
    click.echo(f"\n{len(RULES)} rules total.")


@main.command()
def version():
    """Show the version of gitmsglint."""
    click.echo(__version__)


if __name__ == "__main__":
    main()
