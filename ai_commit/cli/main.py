"""Main CLI command for generating and committing a message."""

from typing import Optional

import typer

from ai_commit import __version__
from ai_commit.config import DEFAULT_MAX_DIFF_CHARS
from ai_commit.git import EmptyDiffError, GitError, get_repo_root, get_staged_diff
from ai_commit.llm import (
    AuthError,
    HttpStatusError,
    LLMError,
    NetworkError,
    ParseError,
    generate,
)
from ai_commit.review import AbortedError, EditorError, review_and_commit
from ai_commit.runner import SubprocessRunner
from ai_commit.settings import ConfigError, load_settings, merge_overrides


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ai-commit {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language for the commit message. Overrides config.",
    ),
    prompt: Optional[str] = typer.Option(
        None,
        "--prompt",
        "-p",
        help="Custom prompt for the AI model. Overrides config.",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="Custom URL for the AI model's API. Overrides config.",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="The specific model to use for generation. Overrides config.",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds. Overrides config.",
    ),
    max_diff_chars: int = typer.Option(
        DEFAULT_MAX_DIFF_CHARS,
        "--max-diff-chars",
        min=1,
        help="Maximum characters of the staged diff sent to the model",
    ),
    no_edit: bool = typer.Option(
        False,
        "--no-edit",
        help="Commit the generated message verbatim without opening an editor",
    ),
    message_only: bool = typer.Option(
        False,
        "-m",
        hidden=True,
        help="Print the generated message to stdout instead of committing (git hooks)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate an AI-powered commit message for the staged changes and commit it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = merge_overrides(
            load_settings(),
            language=language,
            prompt=prompt,
            url=url,
            model=model,
            timeout=timeout,
        )

        runner = SubprocessRunner()
        repo_root = get_repo_root(runner)

        typer.echo("Collecting staged diff...", err=True)
        diff = get_staged_diff(runner, max_chars=max_diff_chars)

        typer.echo(f"Generating commit message with {settings.model}...", err=True)
        result = generate(diff, settings)

        if message_only:
            typer.echo(result.message)
            return

        output = review_and_commit(
            result.message,
            runner=runner,
            repo_root=repo_root,
            edit=not no_edit,
        )
        typer.echo("Commit successful!", err=True)
        if output.strip():
            typer.echo(output.strip())

    except EmptyDiffError:
        typer.echo("No staged changes to commit.", err=True)
        typer.echo("Stage your changes first with: git add <file>...", err=True)
        raise typer.Exit(1)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except AuthError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except NetworkError as e:
        typer.echo(f"Network error: {e}", err=True)
        raise typer.Exit(1)
    except HttpStatusError as e:
        typer.echo(f"Error generating commit message:\n{e}", err=True)
        raise typer.Exit(1)
    except ParseError as e:
        typer.echo(f"Error parsing the API response:\n{e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except EditorError as e:
        typer.echo(f"Editor error: {e}", err=True)
        raise typer.Exit(1)
    except AbortedError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
