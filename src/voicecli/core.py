"""Core functionality for voice-cli - orchestrates dispatch, TTS and playback."""

import logging
from collections.abc import Callable
from pathlib import Path

from .audio.player import AudioPlayer
from .cache.manager import ResponseCache
from .commands.actions import perform_action
from .commands.registry import COMMANDS, lookup_command, normalize_phrase
from .config import VoiceConfig
from .platforms import get_platform_commands
from .platforms.base import PlatformCommands
from .tts.client import TTSClient
from .tts.errors import TTSError

logger = logging.getLogger(__name__)

LISTEN_PROMPT = "Listening... (type your voice command): "
QUIT_WORDS = frozenset({"quit", "exit", "stop"})
HELP_WORDS = frozenset({"help", "list"})


class VoiceResponder:
    """Speaks short responses through ElevenLabs with a file cache.

    Falls back to printing the text whenever voice is disabled, no usable
    API key is configured, or synthesis/caching fails.
    """

    def __init__(
        self,
        config: VoiceConfig,
        cache: ResponseCache | None = None,
        player: AudioPlayer | None = None,
        client_factory: Callable[..., TTSClient] = TTSClient,
    ) -> None:
        self.config = config
        self.cache = cache or ResponseCache()
        self._player = player
        self._client_factory = client_factory
        self._client: TTSClient | None = None

    @property
    def player(self) -> AudioPlayer:
        if self._player is None:
            self._player = AudioPlayer()
        return self._player

    def _get_client(self) -> TTSClient:
        if self._client is None:
            self._client = self._client_factory(api_key=self.config.api_key)
        return self._client

    def _fetch_audio(self, text: str) -> Path:
        cached_path = self.cache.lookup(text)
        if cached_path:
            print("Playing cached response...")
            return cached_path

        print("Generating voice response...")
        audio_data = self._get_client().synthesize(
            text, voice_id=self.config.voice_id, model_id=self.config.model_id
        )
        return self.cache.store(text, audio_data)

    def speak(self, text: str) -> bool:
        """Speak text, or print it when voice is unavailable.

        Returns:
            True if audio was played, False if the text-only path was taken.
        """
        if not self.config.voice_enabled:
            print(f'(voice disabled) "{text}"')
            return False

        if not self.config.has_valid_api_key:
            print(f'"{text}"')
            print("Add an ElevenLabs API key for voice responses: voice-cli --setup")
            return False

        print(f'Speaking: "{text}"')
        try:
            audio_path = self._fetch_audio(text)
        except (TTSError, OSError, ValueError) as e:
            logger.debug(f"Voice response failed: {e!r}")
            print(f"✗ Voice response error: {e}")
            print(f'"{text}"')
            return False

        return self.player.play_file(audio_path)


def show_available_commands() -> None:
    """Print every registered phrase with its description."""
    print("\nAvailable Voice Commands:\n")
    for phrase, entry in COMMANDS.items():
        print(f'   "{phrase}" - {entry.description}')
    print("\nTip: Commands are case-insensitive")


def execute_voice_command(
    command_text: str,
    config: VoiceConfig,
    responder: VoiceResponder | None = None,
    platform_commands: PlatformCommands | None = None,
) -> bool:
    """Look up one phrase, confirm it, and run its action.

    Args:
        command_text: Raw typed or spoken input
        config: Active configuration
        responder: Voice output, created from config if omitted
        platform_commands: Resolver for the current OS, detected if omitted

    Returns:
        The action's success flag; False for unknown commands.
    """
    responder = responder or VoiceResponder(config)

    print(f'Voice command: "{command_text}"')
    entry = lookup_command(command_text)

    if entry is None:
        logger.debug(f"No registry entry for {normalize_phrase(command_text)!r}")
        print(f'? Unknown command: "{command_text}"')
        responder.speak("I didn't understand that command. Try asking for help.")
        print("Try one of these commands:")
        show_available_commands()
        return False

    print(entry.description)
    responder.speak(entry.spoken_response())

    platform_commands = platform_commands or get_platform_commands()
    success = perform_action(entry, platform_commands, homepage=config.homepage)

    if success:
        print("Command completed successfully!")
        responder.speak("Done!")
    else:
        responder.speak("Sorry, there was an error with that command.")
    return success


def interactive_mode(
    config: VoiceConfig,
    read_line: Callable[[str], str] = input,
    responder: VoiceResponder | None = None,
    platform_commands: PlatformCommands | None = None,
) -> None:
    """Read-eval loop: one typed line is one "heard" command.

    Each command, including its voice playback, finishes before the next
    line is read. Ends on quit/exit/stop or end of input.
    """
    from . import __version__

    responder = responder or VoiceResponder(config)

    print(f"Voice CLI v{__version__} - Interactive Mode")
    print("Type voice commands or 'quit' to exit")
    if config.voice_available:
        print("AI voice responses enabled!\n")
        responder.speak("Voice CLI ready! What would you like me to do?")
    else:
        print("Voice responses disabled. Run 'voice-cli --setup' to enable.\n")

    while True:
        try:
            command = normalize_phrase(read_line(LISTEN_PROMPT))
        except EOFError:
            command = "quit"

        if not command:
            continue

        if command in QUIT_WORDS:
            responder.speak("Goodbye!")
            print("Goodbye!")
            break

        if command in HELP_WORDS:
            show_available_commands()
            responder.speak("Here are the available commands")
            continue

        try:
            execute_voice_command(command, config, responder, platform_commands)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            print(f"✗ Error: {e}")
        print()
