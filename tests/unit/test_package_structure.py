"""Test package structure and imports."""

import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))


def test_package_imports() -> None:
    """Test that voicecli package can be imported."""
    import voicecli

    assert voicecli.__version__ == "1.0.1"


def test_main_module_imports() -> None:
    """Test that main module can be imported without error."""
    from voicecli.__main__ import main

    assert callable(main)


def test_run_command_is_exported_lazily() -> None:
    """Test that run_command resolves through the package namespace."""
    import voicecli
    from voicecli.api import run_command

    assert voicecli.run_command is run_command


def test_unknown_attribute_raises() -> None:
    import voicecli

    with pytest.raises(AttributeError, match="no attribute 'nope'"):
        voicecli.nope  # noqa: B018
