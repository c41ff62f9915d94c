"""CLI entry point for ai-commit.

This module provides the main CLI application that combines the default
generate-and-commit command with the config subcommands.
"""

import typer

from ai_commit.cli.config import config_app
from ai_commit.cli.main import main_command

# Main application
app = typer.Typer(
    name="ai-commit",
    help="AI-powered commit message generator.",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
