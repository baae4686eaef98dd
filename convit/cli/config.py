"""CLI commands for configuration management."""

import json

import typer

from convit import global_config
from convit.cli.utils import load_config_or_exit
from convit.config import API_KEY_ENV_VARS, AVAILABLE_MODELS, LLMProvider

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Configure the app",
    add_completion=False,
)


def _save(config) -> None:
    try:
        global_config.save_config(config)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Configuration updated successfully!")


@config_app.command("init")
def config_init() -> None:
    """Initialize the config."""
    config = load_config_or_exit()

    config.lower_case_first_letter = typer.confirm(
        "Lowercase first letter of commit message?",
        default=config.lower_case_first_letter,
    )
    config.prompt_for_optional_sub_type = typer.confirm(
        "Prompt for optional sub-type?",
        default=config.prompt_for_optional_sub_type,
    )

    _save(config)


@config_app.command("ai")
def config_ai() -> None:
    """Initialize the AI config."""
    config = load_config_or_exit()

    models = [model for provider in LLMProvider for model in AVAILABLE_MODELS[provider]]
    typer.echo("Available models:")
    for i, model in enumerate(models, 1):
        marker = " (current)" if model == config.generate_model else ""
        typer.echo(f"  {i}. {model}{marker}")

    default_choice = models.index(config.generate_model) + 1 if config.generate_model in models else 1
    model_choice = typer.prompt(f"Select a model (1-{len(models)})", type=int, default=default_choice)
    if model_choice < 1 or model_choice > len(models):
        typer.echo("Invalid choice. Aborting.", err=True)
        raise typer.Exit(1)

    config.generate_model = models[model_choice - 1]
    typer.echo(
        f"Using {config.provider.value}, set {API_KEY_ENV_VARS[config.provider]} in your environment."
    )
    config.generate_system_message = typer.prompt(
        "System message",
        default=config.generate_system_message,
        show_default=False,
    )

    _save(config)


@config_app.command("ls")
def config_ls() -> None:
    """List the current configuration."""
    config = load_config_or_exit()
    typer.echo(json.dumps(config.model_dump(), indent=2))
