"""Linux command resolver (xdg-open, GNOME tools, command-line players)."""

import shlex
from pathlib import Path

from .base import PlatformCommands

# Tried in order; the first one installed plays the file.
AUDIO_PLAYERS = (
    ("mpg123", "mpg123 -q"),
    ("aplay", "aplay"),
    ("paplay", "paplay"),
)


class LinuxCommands(PlatformCommands):
    name = "Linux"
    applications = {
        "calculator": "gnome-calculator",
        "text editor": "gedit",
    }

    def open_url(self, url: str) -> str:
        return f"xdg-open {shlex.quote(url)}"

    def open_terminal(self, directory: Path) -> str:
        return f"gnome-terminal --working-directory={shlex.quote(str(directory))}"

    def open_folder(self, folder: Path) -> str:
        return f"xdg-open {shlex.quote(str(folder))}"

    def open_application(self, app_name: str) -> str:
        return shlex.quote(self.resolve_application(app_name).lower())

    def play_audio(self, audio_path: Path) -> str:
        quoted = shlex.quote(str(audio_path))
        attempts = [
            f"{{ which {binary} > /dev/null 2>&1 && {player} {quoted}; }}"
            for binary, player in AUDIO_PLAYERS
        ]
        return " || ".join(attempts)
