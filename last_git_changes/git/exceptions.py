"""Git-related exception classes.

Contains:
- GitError: Base exception for git-related errors
- NoChangesError: Raised when the latest commit lists no changed files
"""


class GitError(Exception):
    """Raised when a git command fails or its output cannot be understood."""

    pass


class NoChangesError(GitError):
    """Raised when the latest commit has no changed files."""

    pass
