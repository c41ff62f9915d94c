"""Staged diff retrieval."""

from typing import Optional

from ai_commit.config import DEFAULT_MAX_DIFF_CHARS
from ai_commit.git.exceptions import EmptyDiffError
from ai_commit.git.runner import run_git_command
from ai_commit.runner import CommandRunner

TRUNCATION_MARKER = "\n...[truncated]\n"


def get_staged_diff(
    runner: Optional[CommandRunner] = None,
    max_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> str:
    """Get the staged diff, truncating it if necessary.

    The diff is sent in a single request, so anything beyond max_chars is
    cut off rather than split into several requests.

    Args:
        runner: Command runner to use. Defaults to a SubprocessRunner.
        max_chars: Maximum characters for the diff output.

    Returns:
        The staged diff string.

    Raises:
        GitError: If git fails or the directory is not a repository.
        EmptyDiffError: If there are no staged changes.
    """
    diff = run_git_command(["diff", "--staged"], runner=runner)

    if not diff.strip():
        raise EmptyDiffError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    if len(diff) > max_chars:
        diff = diff[:max_chars] + TRUNCATION_MARKER

    return diff
