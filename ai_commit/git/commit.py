"""Commit creation."""

from pathlib import Path
from typing import Optional

from ai_commit.git.runner import run_git_command
from ai_commit.runner import CommandRunner


def commit_with_message_file(
    message_file: Path,
    runner: Optional[CommandRunner] = None,
    cwd: Optional[Path] = None,
) -> str:
    """Commit the staged changes using the message stored in a file.

    Args:
        message_file: File holding the final commit message.
        runner: Command runner to use. Defaults to a SubprocessRunner.
        cwd: Repository directory to commit in.

    Returns:
        The stdout of git commit.

    Raises:
        GitError: If git commit exits with a non-zero status.
    """
    return run_git_command(["commit", "-F", str(message_file)], runner=runner, cwd=cwd)
