"""CLI command for inspecting exclusion patterns."""

from typing import Optional

import typer

from last_git_changes.patterns import expand_pattern
from last_git_changes.user_config import ConfigError, get_config_file
from last_git_changes.cli.utils import resolve_exclude_patterns


def patterns_command(
    directory: str = typer.Option(
        "./",
        "--dir",
        help="Directory whose .last-git-changes.yaml is read",
    ),
    exclude: Optional[str] = typer.Option(
        None,
        "--exclude",
        help="Comma separated patterns to exclude",
    ),
    no_config: bool = typer.Option(
        False,
        "--no-config",
        help="Ignore the .last-git-changes.yaml file",
    ),
) -> None:
    """Show the exclusion patterns and the globs they expand to."""
    try:
        patterns = resolve_exclude_patterns(directory, exclude, no_config)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    if not no_config:
        typer.echo(f"Config file: {get_config_file(directory)}")
        typer.echo()

    if not patterns:
        typer.echo("  (no patterns configured)")
        return

    for pattern in patterns:
        typer.echo(f"  - {pattern}")
        for glob in expand_pattern(pattern):
            typer.echo(f"      {glob}")
    typer.echo()
    typer.echo(f"Total: {len(patterns)} pattern(s)")
