"""Git collaborator module for ai-commit.

This package wraps the git operations ai-commit needs:
- exceptions: GitError, EmptyDiffError
- runner: run_git_command, get_repo_root
- diff: get_staged_diff
- commit: commit_with_message_file
"""

from ai_commit.git.exceptions import (
    EmptyDiffError,
    GitError,
)
from ai_commit.git.runner import (
    get_repo_root,
    run_git_command,
)
from ai_commit.git.diff import get_staged_diff
from ai_commit.git.commit import commit_with_message_file


__all__ = [
    "GitError",
    "EmptyDiffError",
    "run_git_command",
    "get_repo_root",
    "get_staged_diff",
    "commit_with_message_file",
]
