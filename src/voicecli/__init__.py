"""voice-cli - control your computer with spoken (typed) phrases."""

__version__ = "1.0.1"
__all__ = ["run_command"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "run_command":
        from .api import run_command

        return run_command
    raise AttributeError(f"module 'voicecli' has no attribute {name!r}")
