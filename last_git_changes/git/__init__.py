"""Git access for last-git-changes.

This package provides:
- exceptions: GitError, NoChangesError
- runner: _run_git_command
- commit: Commit, parse_commit_line, get_latest_commit
- changes: get_changed_paths, get_changes_from_commit, get_latest_changes
"""

# Exceptions
from last_git_changes.git.exceptions import (
    GitError,
    NoChangesError,
)

# Runner utilities
from last_git_changes.git.runner import _run_git_command

# Commit metadata
from last_git_changes.git.commit import (
    Commit,
    parse_commit_line,
    get_latest_commit,
)

# Changed files
from last_git_changes.git.changes import (
    get_changed_paths,
    get_changes_from_commit,
    get_latest_changes,
    join_commit_path,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoChangesError",
    # Runner
    "_run_git_command",
    # Commit
    "Commit",
    "parse_commit_line",
    "get_latest_commit",
    # Changes
    "get_changed_paths",
    "get_changes_from_commit",
    "get_latest_changes",
    "join_commit_path",
]
