"""External command runner.

Git and the editor are invoked through a CommandRunner so the commit
pipeline can run against a fake runner in tests, without a real
repository or editor.
"""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class CommandResult:
    """Outcome of an external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(ABC):
    """Abstract interface for running external commands."""

    @abstractmethod
    def run(
        self,
        args: list[str],
        capture: bool = True,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        """Run a command and wait for it to finish.

        Args:
            args: Program and arguments.
            capture: Capture stdout/stderr as text. When False the child
                inherits the terminal (needed for interactive editors).
            cwd: Working directory for the child process.

        Returns:
            The CommandResult. A non-zero exit status is not an error here;
            callers decide what a failure means.

        Raises:
            OSError: If the program cannot be started (FileNotFoundError
                when it is not on PATH).
        """
        pass


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by subprocess.run."""

    def run(
        self,
        args: list[str],
        capture: bool = True,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        result = subprocess.run(
            args,
            capture_output=capture,
            text=True,
            cwd=cwd,
            check=False,
        )
        return CommandResult(
            args=list(args),
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )


@dataclass
class RecordingRunner(CommandRunner):
    """CommandRunner that replays scripted results and records every call.

    Results are matched by the leading arguments of the command, e.g. the key
    ("git", "commit") answers any "git commit ..." invocation. Commands with
    no scripted result succeed with empty output. A scripted exception is
    raised instead of returning a result.
    """

    responses: dict[tuple[str, ...], object] = field(default_factory=dict)
    calls: list[list[str]] = field(default_factory=list)

    def run(
        self,
        args: list[str],
        capture: bool = True,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        self.calls.append(list(args))

        best = None
        for prefix, response in self.responses.items():
            if tuple(args[: len(prefix)]) == prefix:
                if best is None or len(prefix) > len(best[0]):
                    best = (prefix, response)

        if best is None:
            return CommandResult(args=list(args), returncode=0)

        response = best[1]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(list(args))
        return response

    def called_with(self, *prefix: str) -> list[list[str]]:
        """Return the recorded calls that start with the given arguments."""
        return [call for call in self.calls if tuple(call[: len(prefix)]) == prefix]
