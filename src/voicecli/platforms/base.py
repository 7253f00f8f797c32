"""Abstract base class for platform command resolvers.

Every OS-specific side effect (opening a URL, a folder, an application or a
terminal, and playing audio) is expressed as a shell command string built by
one resolver per operating system.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar


class PlatformCommands(ABC):
    """Builds shell commands for one operating system.

    Application names used by the command registry are logical
    ("calculator", "text editor"); each platform maps them to the
    executable or bundle it actually launches.
    """

    name: ClassVar[str]  # platform.system() value it is registered under
    applications: ClassVar[dict[str, str]] = {}

    def resolve_application(self, app_name: str) -> str:
        """Map a logical application name to this platform's program."""
        return self.applications.get(app_name.lower(), app_name)

    @abstractmethod
    def open_url(self, url: str) -> str:
        """Command that opens url in the default browser."""

    @abstractmethod
    def open_terminal(self, directory: Path) -> str:
        """Command that opens a new terminal window in directory."""

    @abstractmethod
    def open_folder(self, folder: Path) -> str:
        """Command that shows folder in the file manager."""

    @abstractmethod
    def open_application(self, app_name: str) -> str:
        """Command that launches the (logical) application app_name."""

    @abstractmethod
    def play_audio(self, audio_path: Path) -> str:
        """Command that plays audio_path and exits nonzero if it cannot."""
