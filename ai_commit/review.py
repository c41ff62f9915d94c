"""Review the generated message in an editor and commit it."""

import os
import shlex
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from ai_commit.git import commit_with_message_file
from ai_commit.runner import CommandRunner, SubprocessRunner


class EditorError(Exception):
    """Raised when the editor cannot be started or exits with an error."""

    pass


class AbortedError(Exception):
    """Raised when the user leaves the commit message empty."""

    pass


def find_editor(env: Optional[Mapping[str, str]] = None) -> list[str]:
    """Find the user's text editor.

    Preference order:
    1. $GIT_EDITOR
    2. $VISUAL
    3. $EDITOR
    4. nano (if available)
    5. vi (notepad on Windows)

    Args:
        env: Environment to read from. Defaults to os.environ.

    Returns:
        List of command parts to run the editor.
    """
    env = os.environ if env is None else env

    for var in ("GIT_EDITOR", "VISUAL", "EDITOR"):
        editor = env.get(var, "").strip()
        if editor:
            return shlex.split(editor, posix=os.name != "nt")

    if sys.platform == "win32":
        return ["notepad"]

    if shutil.which("nano"):
        return ["nano"]

    # Last resort: vi
    return ["vi"]


def open_editor(
    file_path: Path,
    runner: Optional[CommandRunner] = None,
    editor_cmd: Optional[list[str]] = None,
) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
        runner: Command runner to use. Defaults to a SubprocessRunner.
        editor_cmd: Editor command. Defaults to find_editor().

    Raises:
        EditorError: If the editor cannot be started or exits non-zero.
    """
    runner = runner or SubprocessRunner()
    editor_cmd = editor_cmd or find_editor()

    try:
        result = runner.run(editor_cmd + [str(file_path)], capture=False)
    except OSError as e:
        raise EditorError(f"Editor could not be started: {editor_cmd[0]} ({e})") from e

    if not result.ok:
        raise EditorError(f"Editor exited with code {result.returncode}: {' '.join(editor_cmd)}")


def read_message(file_path: Path, strip_comments: bool = True) -> str:
    """Read the commit message back from the file.

    With strip_comments, lines starting with '#' are dropped, following
    git's convention for edited commit messages.

    Raises:
        EditorError: If the file is gone or not valid UTF-8 after editing.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EditorError(f"Could not read the edited message: {e}") from e

    lines = text.splitlines()
    if not strip_comments:
        return "\n".join(lines).strip()
    kept = [line for line in lines if not line.startswith("#")]
    return "\n".join(kept).strip()


def review_and_commit(
    message: str,
    runner: Optional[CommandRunner] = None,
    repo_root: Optional[Path] = None,
    edit: bool = True,
    editor_cmd: Optional[list[str]] = None,
) -> str:
    """Let the user review the message in an editor, then commit with it.

    The message is written to a temporary file which is removed on every
    exit path, whether the editor fails, the user empties the message or
    the commit fails.

    Args:
        message: The generated commit message.
        runner: Command runner for the editor and git.
        repo_root: Repository to commit in. Defaults to the current directory.
        edit: Open the editor before committing.
        editor_cmd: Editor command. Defaults to find_editor().

    Returns:
        The stdout of git commit.

    Raises:
        EditorError: If the editor fails.
        AbortedError: If the reviewed message is empty.
        GitError: If git commit fails.
    """
    runner = runner or SubprocessRunner()

    with tempfile.NamedTemporaryFile(
        mode="w",
        prefix="COMMIT_EDITMSG_",
        suffix=".txt",
        encoding="utf-8",
        delete=False,
    ) as f:
        f.write(message.rstrip("\n") + "\n")
        message_file = Path(f.name)

    try:
        if edit:
            open_editor(message_file, runner=runner, editor_cmd=editor_cmd)

        final_message = read_message(message_file, strip_comments=edit)
        if not final_message:
            raise AbortedError("Aborting commit due to empty commit message.")

        # Rewrite so git commits exactly what was reviewed
        message_file.write_text(final_message + "\n", encoding="utf-8")
        return commit_with_message_file(message_file, runner=runner, cwd=repo_root)
    finally:
        message_file.unlink(missing_ok=True)
