"""Audio playback package for voice-cli.

This package plays cached responses through the platform's command-line
audio player.
"""

from .player import AudioPlayer

__all__ = ["AudioPlayer"]
