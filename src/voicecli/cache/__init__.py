"""Response audio cache for voice-cli."""

from pathlib import Path

from .manager import ResponseCache
from .models import CacheEntry

__all__ = ["CacheEntry", "ResponseCache", "get_cache_dir"]


def get_cache_dir() -> Path:
    """Get the voice-cli audio cache directory.

    The directory is ~/.cache/voice-cli/audio/; it is created on first write,
    not here, so the text-only tier never touches the disk.

    Returns:
        Path to the audio cache directory
    """
    return Path.home() / ".cache" / "voice-cli" / "audio"
