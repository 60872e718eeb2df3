"""Changed file listing for a commit.

Contains:
- get_changed_paths: List the repository-relative paths touched by a commit
- get_changes_from_commit: Same paths, joined onto the commit directory
- get_latest_changes: Changed files of the latest commit in a directory
"""

import os
from pathlib import Path
from typing import Union

from last_git_changes.git.commit import Commit, get_latest_commit
from last_git_changes.git.exceptions import NoChangesError
from last_git_changes.git.runner import _run_git_command


def _diff_tree_args(commit: Commit) -> list[str]:
    # Merge commits are diffed over their parents instead of the merge itself
    revisions = commit.parent_commits if commit.is_merge_commit else [commit.hash]
    return ["diff-tree", "--no-commit-id", "--name-only", "-r"] + revisions


def get_changed_paths(commit: Commit) -> list[str]:
    """List the files touched by a commit, as git reports them.

    Args:
        commit: The commit to inspect.

    Returns:
        Paths relative to the repository root, in git's order.

    Raises:
        NoChangesError: If git lists no files for the commit.
    """
    output = _run_git_command(_diff_tree_args(commit), cwd=commit.directory)
    paths = [line for line in output.splitlines() if line.strip()]
    if not paths:
        raise NoChangesError(
            f"No changes detected in the latest commit {commit.hash[:12]} in {commit.directory}"
        )
    return paths


def join_commit_path(directory: str, path: str) -> str:
    """Join a git path onto the directory git was run in."""
    return os.path.normpath(os.path.join(directory, path))


def get_changes_from_commit(commit: Commit) -> list[str]:
    """List the files touched by a commit, joined onto its directory.

    Args:
        commit: The commit to inspect.

    Returns:
        File paths in git's order.
    """
    return [join_commit_path(commit.directory, p) for p in get_changed_paths(commit)]


def get_latest_changes(directory: Union[str, Path]) -> list[str]:
    """Get the files changed by the latest commit.

    Args:
        directory: Directory to run git in.

    Returns:
        File paths joined onto directory.
    """
    commit = get_latest_commit(directory)
    return get_changes_from_commit(commit)
