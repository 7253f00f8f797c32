"""Unit tests for CLI logic and option handling."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from test_helpers import completed_process
from voicecli.cli import app, join_command
from voicecli.config import PLACEHOLDER_API_KEY, get_config_path

runner = CliRunner()


class TestJoinCommand:
    def test_joins_words(self) -> None:
        assert join_command(["open", "downloads"]) == "open downloads"

    def test_single_quoted_argument(self) -> None:
        assert join_command(["what time is it"]) == "what time is it"

    @pytest.mark.parametrize("words", [None, [], [" "]])
    def test_empty(self, words) -> None:
        assert join_command(words) == ""


class TestFlags:
    """Test the informational flags."""

    @pytest.mark.parametrize("flag", ["--version", "-v"])
    def test_version_prints_only_version(self, flag: str) -> None:
        with patch("voicecli.cli.execute_voice_command") as mock_execute:
            result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert result.stdout == "Voice CLI v1.0.1\n"
        mock_execute.assert_not_called()

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help(self, flag: str) -> None:
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert "Control your computer with voice commands" in result.stdout
        assert "--setup" in result.stdout

    @pytest.mark.parametrize("flag", ["--list", "--commands"])
    def test_list_commands(self, flag: str) -> None:
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert "Available Voice Commands" in result.stdout
        assert '"open downloads"' in result.stdout


class TestSingleCommand:
    """Test running one command from the arguments."""

    def test_words_are_joined_into_one_command(self) -> None:
        with patch("voicecli.cli.execute_voice_command", return_value=True) as mock_execute:
            result = runner.invoke(app, ["open", "downloads"])

        assert result.exit_code == 0
        assert mock_execute.call_args.args[0] == "open downloads"

    def test_open_downloads_present(self, isolated_home: Path) -> None:
        downloads = isolated_home / "Downloads"
        downloads.mkdir()

        with patch(
            "voicecli.commands.actions.subprocess.run", return_value=completed_process(0)
        ):
            result = runner.invoke(app, ["open downloads"])

        assert result.exit_code == 0
        assert f"Opened folder: {downloads}" in result.stdout

    def test_open_downloads_absent_still_exits_zero(self) -> None:
        with patch("voicecli.commands.actions.subprocess.run") as mock_run:
            result = runner.invoke(app, ["open downloads"])

        assert result.exit_code == 0
        assert "Folder not found" in result.stdout
        mock_run.assert_not_called()

    def test_unknown_command(self) -> None:
        result = runner.invoke(app, ["make", "coffee"])

        assert result.exit_code == 0
        assert 'Unknown command: "make coffee"' in result.stdout

    def test_leading_dash_word_is_a_command(self) -> None:
        result = runner.invoke(app, ["-x"])

        assert result.exit_code == 0
        assert 'Unknown command: "-x"' in result.stdout

    def test_flags_after_the_first_word_belong_to_the_command(self) -> None:
        with patch("voicecli.cli.execute_voice_command", return_value=False) as mock_execute:
            result = runner.invoke(app, ["open", "--list"])

        assert result.exit_code == 0
        assert mock_execute.call_args.args[0] == "open --list"
        assert "Available Voice Commands" not in result.stdout

    def test_unknown_command_with_trailing_flag(self) -> None:
        result = runner.invoke(app, ["open", "--list"])

        assert result.exit_code == 0
        stdout = result.stdout
        assert stdout.index('Unknown command: "open --list"') < stdout.index(
            "Available Voice Commands"
        )

    def test_leading_debug_flag_is_still_an_option(self) -> None:
        with patch("voicecli.cli.execute_voice_command", return_value=True) as mock_execute:
            result = runner.invoke(app, ["--debug", "system", "info"])

        assert result.exit_code == 0
        assert mock_execute.call_args.args[0] == "system info"

    def test_no_arguments_enters_interactive_mode(self) -> None:
        with patch("voicecli.cli.interactive_mode") as mock_interactive:
            result = runner.invoke(app, [])

        assert result.exit_code == 0
        mock_interactive.assert_called_once()

    def test_interactive_mode_reads_stdin(self) -> None:
        result = runner.invoke(app, [], input="what time is it\nquit\n")

        assert result.exit_code == 0
        assert "Interactive Mode" in result.stdout
        assert "Current time:" in result.stdout
        assert "Goodbye!" in result.stdout


class TestGlobalHandlers:
    """Test the process-level error and interrupt handling."""

    def test_unexpected_error_exits_one(self) -> None:
        with patch("voicecli.cli.execute_voice_command", side_effect=RuntimeError("boom")):
            result = runner.invoke(app, ["system info"])

        assert result.exit_code == 1
        assert "Unexpected error: boom" in result.output

    def test_debug_shows_repr(self) -> None:
        with patch("voicecli.cli.execute_voice_command", side_effect=RuntimeError("boom")):
            result = runner.invoke(app, ["--debug", "system info"])

        assert result.exit_code == 1
        assert "RuntimeError('boom')" in result.output

    def test_keyboard_interrupt_exits_cleanly(self) -> None:
        with patch("voicecli.cli.interactive_mode", side_effect=KeyboardInterrupt):
            result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Goodbye!" in result.stdout


class TestSetup:
    """Test the --setup flow."""

    def test_setup_with_key_enables_voice(self) -> None:
        result = runner.invoke(app, ["--setup"], input="sk-secret\n")

        assert result.exit_code == 0
        assert "Voice responses enabled" in result.stdout
        assert "sk-secret" not in result.stdout
        data = json.loads(get_config_path().read_text())
        assert data["voice_enabled"] is True
        assert data["api_key"] == "sk-secret"

    def test_setup_skipped_is_text_only(self) -> None:
        result = runner.invoke(app, ["--setup"], input="\n")

        assert result.exit_code == 0
        assert "text-only mode" in result.stdout
        data = json.loads(get_config_path().read_text())
        assert data["voice_enabled"] is False
        assert data["api_key"] == PLACEHOLDER_API_KEY

    def test_unwritable_config_is_reported(self) -> None:
        with patch("voicecli.cli.save_config", side_effect=OSError("read-only file system")):
            result = runner.invoke(app, ["--setup"], input="sk-secret\n")

        assert result.exit_code == 0
        assert "Could not save config: read-only file system" in result.stdout
        assert "Configuration saved" not in result.stdout
        assert not get_config_path().exists()
