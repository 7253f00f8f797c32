"""Platform abstraction for OS-level commands.

This module provides a registry of command resolvers keyed by the value of
``platform.system()``, so actions never branch on the operating system
themselves.
"""

import logging
import platform
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .base import PlatformCommands

from .linux import LinuxCommands
from .macos import MacOSCommands
from .windows import WindowsCommands

__all__ = ["PlatformRegistry", "get_platform_commands"]

logger = logging.getLogger(__name__)


class PlatformRegistry:
    """Registry for managing platform command resolvers."""

    _platforms: ClassVar[dict[str, type["PlatformCommands"]]] = {}

    @classmethod
    def register(cls, name: str, commands_class: type["PlatformCommands"]) -> None:
        """Register a resolver under a ``platform.system()`` name."""
        cls._platforms[name] = commands_class

    @classmethod
    def get(cls, name: str) -> type["PlatformCommands"]:
        """Get a resolver class by platform name.

        Raises:
            KeyError: If the platform is not supported
        """
        if name not in cls._platforms:
            available = ", ".join(cls._platforms.keys()) if cls._platforms else "none"
            raise KeyError(
                f"Unsupported platform '{name}'. Supported platforms: {available}"
            )
        return cls._platforms[name]


def get_platform_commands(system: str | None = None) -> "PlatformCommands":
    """Return the resolver for the given (default: current) platform.

    Systems other than Windows and macOS (FreeBSD, other Unix-likes) use the
    Linux resolver.
    """
    system = system or platform.system()
    try:
        commands_class = PlatformRegistry.get(system)
    except KeyError:
        logger.debug(f"No resolver for {system!r}, using Unix-like commands")
        commands_class = LinuxCommands
    return commands_class()


for _commands_class in (WindowsCommands, MacOSCommands, LinuxCommands):
    PlatformRegistry.register(_commands_class.name, _commands_class)
