"""Integration tests for CLI execution in a subprocess.

Only commands that do not spawn desktop programs are exercised here.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Project root for running tests
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def run_cli(isolated_home: Path):
    """Run ``python -m voicecli`` with an isolated home directory."""

    def _run(*args: str, input: str | None = None) -> subprocess.CompletedProcess:
        env = {
            **os.environ,
            "PYTHONPATH": str(PROJECT_ROOT / "src"),
            "HOME": str(isolated_home),
            "USERPROFILE": str(isolated_home),
        }
        env.pop("ELEVENLABS_API_KEY", None)
        return subprocess.run(
            [sys.executable, "-m", "voicecli", *args],
            cwd=PROJECT_ROOT,
            env=env,
            input=input,
            capture_output=True,
            text=True,
            timeout=60,
        )

    return _run


def test_cli_version(run_cli) -> None:
    result = run_cli("--version")

    assert result.returncode == 0
    assert result.stdout == "Voice CLI v1.0.1\n"
    assert result.stderr == ""


def test_cli_list(run_cli) -> None:
    result = run_cli("--list")

    assert result.returncode == 0
    assert "Available Voice Commands" in result.stdout


def test_cli_what_time_is_it(run_cli) -> None:
    result = run_cli("what time is it")

    assert result.returncode == 0
    assert "Current time:" in result.stdout
    assert "Command completed successfully!" in result.stdout


def test_cli_system_info(run_cli) -> None:
    result = run_cli("system", "info")

    assert result.returncode == 0
    assert "System Information:" in result.stdout


def test_cli_unknown_command(run_cli) -> None:
    result = run_cli("unknown command")

    assert result.returncode == 0
    assert "Unknown command:" in result.stdout


def test_cli_missing_downloads_folder(run_cli) -> None:
    result = run_cli("open downloads")

    assert result.returncode == 0
    assert "Folder not found" in result.stdout


def test_cli_interactive_from_stdin(run_cli) -> None:
    result = run_cli(input="system info\nquit\n")

    assert result.returncode == 0
    assert "System Information:" in result.stdout
    assert "Goodbye!" in result.stdout


def test_cli_interactive_end_of_input(run_cli) -> None:
    result = run_cli(input="")

    assert result.returncode == 0
    assert "Goodbye!" in result.stdout


def test_cli_reads_saved_config(run_cli, isolated_home: Path) -> None:
    config_dir = isolated_home / ".config" / "voice-cli"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text('{"voice_enabled": true}')

    result = run_cli("what time is it")

    # Voice on but no key: text-only with a setup hint, no network
    assert result.returncode == 0
    assert "voice-cli --setup" in result.stdout
