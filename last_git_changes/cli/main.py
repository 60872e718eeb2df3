"""Main CLI command for listing the latest changes."""

from typing import Optional

import typer

from last_git_changes.git import (
    GitError,
    NoChangesError,
    get_changed_paths,
    get_latest_commit,
    join_commit_path,
)
from last_git_changes.patterns import filter_excluded
from last_git_changes.user_config import ConfigError
from last_git_changes.cli.utils import (
    display_debug_info,
    resolve_exclude_patterns,
    version_callback,
)


def main_command(
    ctx: typer.Context,
    directory: str = typer.Option(
        "./",
        "--dir",
        help="Directory of the git repository to inspect",
    ),
    exclude: Optional[str] = typer.Option(
        None,
        "--exclude",
        help="Comma separated patterns to exclude (e.g. 'README.md,docs')",
    ),
    no_config: bool = typer.Option(
        False,
        "--no-config",
        help="Ignore the .last-git-changes.yaml file",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show commit metadata and expanded patterns on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """List the files changed by the latest commit.

    Example: last-git-changes --exclude='README.md,docs' --dir .
    """
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        patterns = resolve_exclude_patterns(directory, exclude, no_config)

        # Step 1: Latest commit and the paths it touched
        commit = get_latest_commit(directory)
        git_paths = get_changed_paths(commit)

        if debug:
            display_debug_info(commit, git_paths, patterns)

        # Step 2: Join onto the directory, then filter the printed paths
        changes = [join_commit_path(commit.directory, p) for p in git_paths]
        for path in filter_excluded(changes, patterns):
            typer.echo(path)

    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
    except NoChangesError as e:
        typer.echo(f"Git error: {e}", err=True)
        typer.echo("The latest commit is empty or has no parent to diff against.", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
