"""File-based memoization cache for synthesized responses.

Each distinct spoken text maps to one MP3 file named by a truncated hash of
the text. Entries are written once and never invalidated or evicted.
"""

import hashlib
import logging
from pathlib import Path

from .models import CacheEntry

logger = logging.getLogger(__name__)

CACHE_KEY_LENGTH = 10
AUDIO_SUFFIX = ".mp3"


class ResponseCache:
    """Audio cache keyed by the text that was spoken.

    Example:
        cache = ResponseCache()

        audio_path = cache.lookup("Done!")
        if not audio_path:
            audio_path = cache.store("Done!", client.synthesize("Done!", voice_id))
    """

    def __init__(self, cache_dir: Path | None = None) -> None:
        """Initialize the cache.

        Args:
            cache_dir: Directory holding the audio files (defaults to
                ~/.cache/voice-cli/audio)
        """
        if cache_dir is None:
            from . import get_cache_dir

            cache_dir = get_cache_dir()
        self.cache_dir = cache_dir

    @staticmethod
    def cache_key(text: str) -> str:
        """Deterministic short key for a response text."""
        return hashlib.md5(text.encode("utf-8")).hexdigest()[:CACHE_KEY_LENGTH]

    def entry_for(self, text: str) -> CacheEntry:
        key = self.cache_key(text)
        return CacheEntry(
            text=text, key=key, audio_path=self.cache_dir / f"{key}{AUDIO_SUFFIX}"
        )

    def lookup(self, text: str) -> Path | None:
        """Return the cached audio path for text, or None on a miss."""
        entry = self.entry_for(text)
        if entry.exists:
            logger.debug(f"Cache hit for key {entry.key}: {entry.audio_path}")
            return entry.audio_path

        logger.debug(f"Cache miss for key {entry.key}")
        return None

    def store(self, text: str, audio_data: bytes) -> Path:
        """Persist synthesized audio for text.

        Args:
            text: Text the audio was synthesized from
            audio_data: MP3 bytes returned by the TTS API

        Returns:
            Path of the written cache file

        Raises:
            ValueError: If no audio data provided.
            OSError: If the file cannot be written.
        """
        if not audio_data:
            raise ValueError("No audio data provided")

        entry = self.entry_for(text)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            entry.audio_path.write_bytes(audio_data)
        except OSError as e:
            raise OSError(f"Failed to cache audio to {entry.audio_path}: {e}") from e

        logger.debug(f"Cached {len(audio_data)} bytes at {entry.audio_path}")
        return entry.audio_path
