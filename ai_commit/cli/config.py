"""CLI commands for configuration management."""

import typer

from ai_commit import settings as settings_store
from ai_commit.settings import ConfigError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage ai-commit configuration (config.toml in the user config directory)",
    add_completion=False,
)


def _set(key: str, value: str) -> settings_store.Settings:
    try:
        return settings_store.set_field(key, value)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-api-key")
def config_set_api_key(
    key: str = typer.Argument(..., help="API key for the chat-completion service"),
) -> None:
    """Set the API key for the AI service."""
    _set("api_key", key)
    typer.echo("API key set successfully.")


@config_app.command("set-url")
def config_set_url(
    url: str = typer.Argument(..., help="Chat-completion endpoint URL"),
) -> None:
    """Set the API URL for a custom AI model endpoint."""
    updated = _set("url", url)
    typer.echo(f"API URL set to: {updated.url}")


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Model name (e.g. gpt-4o-mini)"),
) -> None:
    """Set the default model to use for generation."""
    updated = _set("model", model)
    typer.echo(f"Default model set to: {updated.model}")


@config_app.command("set-language")
def config_set_language(
    lang: str = typer.Argument(..., help="Language for commit messages (e.g. en, de, zh)"),
) -> None:
    """Set the default language for commit messages."""
    updated = _set("language", lang)
    typer.echo(f"Default language set to: {updated.language}")


@config_app.command("set-prompt")
def config_set_prompt(
    prompt: str = typer.Argument(..., help="Extra instruction sent to the model"),
) -> None:
    """Set a default prompt to guide the AI."""
    _set("prompt", prompt)
    typer.echo("Default prompt set.")


@config_app.command("show")
def config_show() -> None:
    """Show the current configuration (API key is masked)."""
    try:
        current = settings_store.load_settings()
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(settings_store.render_settings(current))


@config_app.command("path")
def config_path() -> None:
    """Print the path of the configuration file."""
    typer.echo(str(settings_store.get_config_file_path()))
