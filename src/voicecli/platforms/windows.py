"""Windows command resolver (cmd.exe ``start``, explorer, PowerShell).

Paths are wrapped in double quotes without escaping: ``"`` is not a legal
character in Windows file names. URLs may contain one, so it is
percent-encoded.
"""

from pathlib import Path

from .base import PlatformCommands


def _quote_url(url: str) -> str:
    return '"' + url.replace('"', "%22") + '"'


def _powershell_literal(value: str) -> str:
    """Single-quoted PowerShell string; embedded quotes are doubled."""
    return "'" + value.replace("'", "''") + "'"


class WindowsCommands(PlatformCommands):
    name = "Windows"
    applications = {
        "calculator": "calc",
        "text editor": "notepad",
    }

    def open_url(self, url: str) -> str:
        # The empty title keeps ``start`` from treating a quoted URL as one.
        return f'start "" {_quote_url(url)}'

    def open_terminal(self, directory: Path) -> str:
        return f'start cmd /k cd /d "{directory}"'

    def open_folder(self, folder: Path) -> str:
        return f'explorer "{folder}"'

    def open_application(self, app_name: str) -> str:
        return f'start "" "{self.resolve_application(app_name)}"'

    def play_audio(self, audio_path: Path) -> str:
        player = f"New-Object Media.SoundPlayer {_powershell_literal(str(audio_path))}"
        return f'powershell -c "({player}).PlaySync()"'
