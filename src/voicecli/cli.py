"""Typer CLI definition for voice-cli."""

import logging

import typer

from . import __version__
from .config import build_setup_config, load_config, save_config
from .core import execute_voice_command, interactive_mode, show_available_commands

app = typer.Typer(
    help="Control your computer with voice commands",
    add_completion=False,
)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # Only leading switches are options; everything after the first word
    # (including "-x" style tokens) is part of the command phrase.
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
}

EPILOG = (
    'Examples: voice-cli "open terminal" | voice-cli open downloads | '
    'voice-cli "what time is it". '
    "Add an ElevenLabs API key with --setup for AI voice responses; "
    "without one, responses are text-only."
)


def join_command(words: list[str] | None) -> str:
    """Join CLI words into one command phrase."""
    return " ".join(words or []).strip()


def run_setup() -> None:
    """Prompt for an ElevenLabs API key and save the configuration."""
    typer.echo("Voice CLI Setup - Enable AI Voice Responses\n")
    typer.echo("To enable voice responses, you'll need an ElevenLabs API key:")
    typer.echo("   1. Sign up at https://elevenlabs.io (free tier available)")
    typer.echo("   2. Go to your profile and copy your API key")
    typer.echo("   3. Paste it below\n")

    api_key = typer.prompt(
        "Enter your ElevenLabs API key (or press Enter to skip)",
        default="",
        show_default=False,
        hide_input=True,
    )
    config = build_setup_config(api_key)
    try:
        path = save_config(config)
    except OSError as e:
        typer.echo(f"✗ Could not save config: {e}")
        return
    typer.echo(f"✓ Configuration saved to {path}")

    if config.voice_enabled:
        typer.echo('✓ Voice responses enabled! Try: voice-cli "open browser"')
    else:
        typer.echo("✓ Setup complete! Voice responses disabled (text-only mode)")
        typer.echo("   Run setup again anytime to add voice responses.")


@app.command(epilog=EPILOG, context_settings=CONTEXT_SETTINGS)
def main(
    command: list[str] | None = typer.Argument(
        None, help="Voice command to execute once (interactive mode if omitted)"
    ),
    setup: bool = typer.Option(
        False, "--setup", help="Initial setup and configuration"
    ),
    list_commands: bool = typer.Option(
        False, "--list", "--commands", help="Show all available commands and exit"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", help="Show the version and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show verbose error messages and debug logging"
    ),
) -> None:
    """Control your computer with voice commands."""
    # Configure logging for debug mode
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if version:
        typer.echo(f"Voice CLI v{__version__}")
        raise typer.Exit(0)

    if list_commands:
        show_available_commands()
        raise typer.Exit(0)

    try:
        if setup:
            run_setup()
            return

        config = load_config()
        command_text = join_command(command)

        if command_text:
            execute_voice_command(command_text, config)
        else:
            interactive_mode(config)
    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\nGoodbye!")
        raise typer.Exit(0) from None
    except Exception as e:
        if debug:
            typer.echo(f"Debug - Unexpected error: {e!r}", err=True)
        else:
            typer.echo(f"Error: Unexpected error: {e}", err=True)
        raise typer.Exit(1) from None
