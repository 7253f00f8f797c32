"""Command registry and action execution."""

from .actions import perform_action, run_shell_command
from .registry import COMMANDS, ActionKind, CommandEntry, lookup_command, normalize_phrase

__all__ = [
    "COMMANDS",
    "ActionKind",
    "CommandEntry",
    "lookup_command",
    "normalize_phrase",
    "perform_action",
    "run_shell_command",
]
