"""macOS command resolver (``open`` and ``afplay``)."""

import shlex
from pathlib import Path

from .base import PlatformCommands


class MacOSCommands(PlatformCommands):
    name = "Darwin"
    applications = {
        "calculator": "Calculator",
        "text editor": "TextEdit",
    }

    def open_url(self, url: str) -> str:
        return f"open {shlex.quote(url)}"

    def open_terminal(self, directory: Path) -> str:
        return f"open -a Terminal {shlex.quote(str(directory))}"

    def open_folder(self, folder: Path) -> str:
        return f"open {shlex.quote(str(folder))}"

    def open_application(self, app_name: str) -> str:
        return f"open -a {shlex.quote(self.resolve_application(app_name))}"

    def play_audio(self, audio_path: Path) -> str:
        return f"afplay {shlex.quote(str(audio_path))}"
