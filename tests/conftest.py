"""Pytest configuration and fixtures for voice-cli tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point the home directory at a temp dir so config and cache stay local."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))

    # Env overrides would leak a developer's real key into tests
    monkeypatch.delenv("ELEVENLABS_API_KEY", raising=False)
    monkeypatch.delenv("VOICE_CLI_VOICE_ID", raising=False)
    return home
