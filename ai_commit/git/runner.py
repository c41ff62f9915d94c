"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

from pathlib import Path
from typing import Optional

from ai_commit.git.exceptions import GitError
from ai_commit.runner import CommandRunner, SubprocessRunner


def run_git_command(
    args: list[str],
    runner: Optional[CommandRunner] = None,
    cwd: Optional[Path] = None,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        runner: Command runner to use. Defaults to a SubprocessRunner.
        cwd: Working directory for git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails or git cannot be started.
    """
    runner = runner or SubprocessRunner()
    try:
        result = runner.run(["git"] + args, cwd=cwd)
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e
    except OSError as e:
        raise GitError(f"Failed to run git: {e}") from e

    if not result.ok:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr.strip()}")
    return result.stdout


def get_repo_root(runner: Optional[CommandRunner] = None) -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = run_git_command(["rev-parse", "--show-toplevel"], runner=runner)
    except GitError as e:
        raise GitError("Not in a git repository. Please run this command from within a git repo.") from e
    return Path(root.strip())
