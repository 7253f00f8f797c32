"""Execution of registered actions.

Actions that touch the desktop build a shell command through the platform
resolver and report success from the process exit status. Time and system
information are printed in-process.
"""

import logging
import platform
import subprocess
from datetime import datetime
from pathlib import Path

from ..config import DEFAULT_HOMEPAGE
from ..platforms.base import PlatformCommands
from .registry import ActionKind, CommandEntry

logger = logging.getLogger(__name__)


def run_shell_command(command: str, success_message: str) -> bool:
    """Run a shell command and report its outcome.

    Args:
        command: Command line passed to the system shell
        success_message: Printed when the command exits with status 0

    Returns:
        True on exit status 0, False otherwise.
    """
    logger.debug(f"Running: {command}")
    try:
        result = subprocess.run(command, shell=True, capture_output=True, text=True)
    except OSError as e:
        print(f"✗ Error: {e}")
        return False

    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
        print(f"✗ Error: Command failed: {command} ({detail})")
        return False

    print(f"✓ {success_message}")
    return True


def open_url(commands: PlatformCommands, url: str) -> bool:
    return run_shell_command(commands.open_url(url), f"Browser opened to {url}")


def open_terminal(commands: PlatformCommands, directory: Path | None = None) -> bool:
    directory = directory or Path.home()
    return run_shell_command(
        commands.open_terminal(directory), f"Terminal opened in {directory}"
    )


def open_folder(commands: PlatformCommands, folder: Path) -> bool:
    """Open folder in the file manager; a missing folder fails without spawning."""
    if not folder.is_dir():
        print(f"✗ Folder not found: {folder}")
        return False

    return run_shell_command(commands.open_folder(folder), f"Opened folder: {folder}")


def open_application(commands: PlatformCommands, app_name: str) -> bool:
    program = commands.resolve_application(app_name)
    return run_shell_command(commands.open_application(app_name), f"Launched {program}")


def show_time(now: datetime | None = None) -> bool:
    now = now or datetime.now()
    print(f"Current time: {now.strftime('%c')}")
    return True


def show_system_info() -> bool:
    print("System Information:")
    print(f"   Platform: {platform.system()} {platform.release()}")
    print(f"   Architecture: {platform.machine()}")
    print(f"   Python: {platform.python_version()}")
    print(f"   Home: {Path.home()}")
    return True


def perform_action(
    entry: CommandEntry,
    commands: PlatformCommands,
    homepage: str = DEFAULT_HOMEPAGE,
) -> bool:
    """Perform the side effect bound to a registry entry.

    Args:
        entry: Registry entry to run
        commands: Resolver for the current platform
        homepage: URL opened by an OPEN_URL entry without a target

    Returns:
        Whether the action succeeded.
    """
    if entry.action is ActionKind.OPEN_URL:
        return open_url(commands, entry.target or homepage)
    if entry.action is ActionKind.OPEN_TERMINAL:
        return open_terminal(commands)
    if entry.action is ActionKind.OPEN_FOLDER:
        return open_folder(commands, Path.home() / (entry.target or ""))
    if entry.action is ActionKind.OPEN_APPLICATION:
        return open_application(commands, entry.target or entry.phrase)
    if entry.action is ActionKind.SHOW_TIME:
        return show_time()
    if entry.action is ActionKind.SYSTEM_INFO:
        return show_system_info()

    raise ValueError(f"Unhandled action: {entry.action}")
