"""CLI entry point for last-git-changes.

This module provides the CLI application that combines the default command
and its subcommands into a single interface.
"""

import typer

from last_git_changes.cli.main import main_command
from last_git_changes.cli.patterns import patterns_command

# Main application
app = typer.Typer(
    name="last-git-changes",
    help="last-git-changes: list the files changed by the latest git commit",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Add individual commands
app.command("patterns")(patterns_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "main_command",
    "patterns_command",
]
