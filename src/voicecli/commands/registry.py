"""Static phrase to action table.

Entries are plain data: the action is an ActionKind tag plus an optional
target, interpreted by ``voicecli.commands.actions.perform_action``.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType


class ActionKind(Enum):
    OPEN_URL = "open_url"
    OPEN_TERMINAL = "open_terminal"
    OPEN_FOLDER = "open_folder"
    OPEN_APPLICATION = "open_application"
    SHOW_TIME = "show_time"
    SYSTEM_INFO = "system_info"


@dataclass(frozen=True)
class CommandEntry:
    """One registered phrase.

    Attributes:
        phrase: Normalized (lower case, trimmed) lookup key
        description: Shown in listings and before running the action
        response: Spoken confirmation; ``{time}`` is replaced at dispatch
        action: Which side effect to perform
        target: Action argument (URL, folder name or logical application);
            None means the action's default
    """

    phrase: str
    description: str
    response: str
    action: ActionKind
    target: str | None = None

    def spoken_response(self, now: datetime | None = None) -> str:
        if "{time}" not in self.response:
            return self.response
        now = now or datetime.now()
        return self.response.format(time=now.strftime("%I:%M %p").lstrip("0"))


_ENTRIES = (
    # Browser operations
    CommandEntry(
        "open browser",
        "Opens your default web browser",
        "Opening your browser now!",
        ActionKind.OPEN_URL,
    ),
    CommandEntry(
        "open google",
        "Opens Google in your browser",
        "Taking you to Google!",
        ActionKind.OPEN_URL,
        "https://google.com",
    ),
    # System operations
    CommandEntry(
        "open terminal",
        "Opens a new terminal window",
        "Opening a new terminal for you!",
        ActionKind.OPEN_TERMINAL,
    ),
    CommandEntry(
        "open command prompt",
        "Opens command prompt (Windows) or terminal (Mac/Linux)",
        "Opening command prompt!",
        ActionKind.OPEN_TERMINAL,
    ),
    # File operations
    CommandEntry(
        "open downloads",
        "Opens your downloads folder",
        "Opening your downloads folder!",
        ActionKind.OPEN_FOLDER,
        "Downloads",
    ),
    CommandEntry(
        "open documents",
        "Opens your documents folder",
        "Opening your documents folder!",
        ActionKind.OPEN_FOLDER,
        "Documents",
    ),
    CommandEntry(
        "open desktop",
        "Opens your desktop folder",
        "Opening your desktop!",
        ActionKind.OPEN_FOLDER,
        "Desktop",
    ),
    # Application launching
    CommandEntry(
        "open calculator",
        "Opens the calculator app",
        "Opening calculator for you!",
        ActionKind.OPEN_APPLICATION,
        "calculator",
    ),
    CommandEntry(
        "open notepad",
        "Opens text editor (Notepad/TextEdit/gedit)",
        "Opening your text editor!",
        ActionKind.OPEN_APPLICATION,
        "text editor",
    ),
    # System info
    CommandEntry(
        "what time is it",
        "Shows current time",
        "It's {time}",
        ActionKind.SHOW_TIME,
    ),
    CommandEntry(
        "system info",
        "Shows basic system information",
        "Here is your system information",
        ActionKind.SYSTEM_INFO,
    ),
)

COMMANDS: MappingProxyType[str, CommandEntry] = MappingProxyType(
    {entry.phrase: entry for entry in _ENTRIES}
)


def normalize_phrase(text: str) -> str:
    """Normalize typed or spoken input into a registry key."""
    return text.strip().lower()


def lookup_command(text: str) -> CommandEntry | None:
    """Exact, case-insensitive lookup; no fuzzy matching."""
    return COMMANDS.get(normalize_phrase(text))
