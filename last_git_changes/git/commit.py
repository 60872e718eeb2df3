"""Latest commit lookup.

Contains:
- Commit: Metadata of a single commit
- parse_commit_line: Parse one line of the latest commit log format
- get_latest_commit: Read the latest commit of a repository
"""

from datetime import datetime
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ValidationError

from last_git_changes.git.exceptions import GitError
from last_git_changes.git.runner import _run_git_command


# Produces "<iso date> <hash> <parent hash>..." on a single line
LATEST_COMMIT_ARGS = [
    "log",
    "--pretty=format:%ad %H %P",
    "--date=iso-strict",
    "-n",
    "1",
]


class Commit(BaseModel):
    """Metadata of the commit whose changes are reported."""

    date: datetime
    directory: str  # Directory git was run in
    hash: str
    parent_commits: list[str] = []

    @property
    def is_merge_commit(self) -> bool:
        """Whether the commit has more than one parent."""
        return len(self.parent_commits) > 1


def parse_commit_line(line: str, directory: Union[str, Path]) -> Commit:
    """Parse the output of the latest commit log command.

    Args:
        line: Output of ``git log --pretty=format:"%ad %H %P"``.
        directory: Directory the command was run in.

    Returns:
        The parsed Commit.

    Raises:
        GitError: If the line is empty or malformed.
    """
    fields = line.split()
    if len(fields) < 2:
        raise GitError(f"No commits found in {directory}")

    date, commit_hash, *parents = fields
    try:
        return Commit(
            date=date,
            directory=str(directory),
            hash=commit_hash,
            parent_commits=parents,
        )
    except ValidationError:
        raise GitError(f"Unexpected commit date in git log output: {date}")


def get_latest_commit(directory: Union[str, Path]) -> Commit:
    """Get the latest commit of the repository containing directory.

    Args:
        directory: Directory to run git in.

    Returns:
        The latest Commit.

    Raises:
        GitError: If git fails or the repository has no commits.
    """
    output = _run_git_command(LATEST_COMMIT_ARGS, cwd=directory)
    return parse_commit_line(output, directory)
