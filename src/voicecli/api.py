"""High-level API for voice-cli library usage."""

from .config import VoiceConfig, load_config
from .core import execute_voice_command


def run_command(text: str, config: VoiceConfig | None = None) -> bool:
    """Execute a single voice command phrase.

    Args:
        text: Phrase to run, e.g. "open downloads"
        config: Configuration to use; loaded from disk if None

    Returns:
        Whether the command was recognized and its action succeeded.
    """
    config = config or load_config()
    return execute_voice_command(text, config)
