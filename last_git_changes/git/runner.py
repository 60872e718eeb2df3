"""Git command runner.

Contains:
- _run_git_command: Run a git command in a directory and return its output
"""

import subprocess
from pathlib import Path
from typing import Union

from last_git_changes.git.exceptions import GitError


def _run_git_command(args: list[str], cwd: Union[str, Path]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run the command in.

    Returns:
        The stdout of the git command, stripped.

    Raises:
        GitError: If the command fails, git is missing or cwd does not exist.
    """
    command = "git " + " ".join(args)
    if not Path(cwd).is_dir():
        raise GitError(f"Directory does not exist: {cwd}")

    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Error running {command} in {cwd}:\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
