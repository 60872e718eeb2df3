"""Shared utility functions for CLI commands."""

from typing import Optional

import typer

from last_git_changes import __version__
from last_git_changes.git import Commit
from last_git_changes.patterns import expand_pattern, merge_patterns, split_exclude_option
from last_git_changes.user_config import get_exclude_patterns


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is given."""
    if value:
        typer.echo(f"last-git-changes {__version__}")
        raise typer.Exit(0)


def resolve_exclude_patterns(
    directory: str,
    exclude: Optional[str],
    no_config: bool = False,
) -> list[str]:
    """Combine configured and command line exclusion patterns.

    Args:
        directory: The directory git is run in.
        exclude: Raw --exclude option value.
        no_config: Skip the .last-git-changes.yaml file.

    Returns:
        Configured patterns followed by --exclude patterns, without duplicates.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    configured = [] if no_config else get_exclude_patterns(directory)
    return merge_patterns(
        [p.strip() for p in configured if p.strip()],
        split_exclude_option(exclude),
    )


def display_debug_info(commit: Commit, git_paths: list[str], patterns: list[str]) -> None:
    """Print commit metadata and exclusion patterns to stderr."""
    typer.echo("[COMMIT]", err=True)
    typer.echo(f"  Directory: {commit.directory}", err=True)
    typer.echo(f"  Hash: {commit.hash}", err=True)
    typer.echo(f"  Date: {commit.date.isoformat()}", err=True)
    parents = " ".join(commit.parent_commits) or "(none)"
    typer.echo(f"  Parents: {parents}", err=True)
    typer.echo(f"  Merge commit: {'yes' if commit.is_merge_commit else 'no'}", err=True)
    typer.echo(f"  Changed files: {len(git_paths)}", err=True)

    typer.echo("\n[EXCLUDE]", err=True)
    if not patterns:
        typer.echo("  (no patterns)", err=True)
    for pattern in patterns:
        typer.echo(f"  {pattern} -> {', '.join(expand_pattern(pattern))}", err=True)
    typer.echo("", err=True)
