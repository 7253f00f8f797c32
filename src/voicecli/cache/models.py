"""Data models for the response cache."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CacheEntry:
    """Location of the memoized audio for one spoken text.

    Attributes:
        text: Text that was (or will be) synthesized
        key: Truncated MD5 hex digest of the text
        audio_path: Path of the cached MP3 file
    """

    text: str
    key: str
    audio_path: Path

    @property
    def exists(self) -> bool:
        return self.audio_path.is_file()
