"""Audio player delegating to the platform's external player binary."""

import logging
import subprocess
from pathlib import Path

from ..platforms import get_platform_commands
from ..platforms.base import PlatformCommands

logger = logging.getLogger(__name__)

PLAYBACK_UNAVAILABLE = "Audio playback not available on this system"


class AudioPlayer:
    """Plays audio files with afplay, PowerShell or mpg123/aplay/paplay.

    Playback problems are reported, never raised: by the time audio is played
    the text has already been shown to the user.
    """

    def __init__(self, platform_commands: PlatformCommands | None = None) -> None:
        self.platform_commands = platform_commands or get_platform_commands()

    def play_file(self, audio_path: str | Path) -> bool:
        """Play an audio file (blocking).

        Args:
            audio_path: Path to an MP3 file.

        Returns:
            True if a player ran successfully, False otherwise.
        """
        command = self.platform_commands.play_audio(Path(audio_path))
        logger.debug(f"Playing audio: {command}")

        try:
            result = subprocess.run(command, shell=True, capture_output=True)
        except OSError as e:
            logger.debug(f"Failed to spawn audio player: {e!r}")
            print(PLAYBACK_UNAVAILABLE)
            return False

        if result.returncode != 0:
            logger.debug(f"Audio player exited with status {result.returncode}")
            print(PLAYBACK_UNAVAILABLE)
            return False

        return True
