"""Entry point for running voice-cli as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the voice-cli application."""
    app()


if __name__ == "__main__":
    main()
