"""TTS client for ElevenLabs API integration."""

import logging
import os

from elevenlabs.client import ElevenLabs

from .errors import TTSAPIError, TTSAuthError
from .models import VoiceSettings

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "eleven_monolingual_v1"


class TTSClient:
    """Client for ElevenLabs text-to-speech API.

    One ``synthesize`` call is one ``POST /v1/text-to-speech/{voice_id}``
    carrying the text, the model id and the voice settings, authenticated
    with the ``xi-api-key`` header.
    """

    def __init__(self, api_key: str | None = None) -> None:
        """Initialize TTS client.

        Args:
            api_key: ElevenLabs API key. If not provided, reads from
                    ELEVENLABS_API_KEY environment variable.

        Raises:
            TTSAuthError: If API key is not provided or the client fails to start.
        """
        self._api_key = api_key or os.getenv("ELEVENLABS_API_KEY")
        if not self._api_key:
            raise TTSAuthError(
                "ElevenLabs API key not found. Run `voice-cli --setup` or set "
                "the ELEVENLABS_API_KEY environment variable."
            )

        try:
            self._client = ElevenLabs(api_key=self._api_key)
        except Exception as e:
            raise TTSAuthError(f"Failed to initialize ElevenLabs client: {e}", e) from e

    def synthesize(
        self,
        text: str,
        voice_id: str,
        model_id: str = DEFAULT_MODEL_ID,
        settings: VoiceSettings | None = None,
    ) -> bytes:
        """Convert text to speech audio bytes.

        Args:
            text: Text to convert to speech
            voice_id: ElevenLabs voice ID
            model_id: ElevenLabs model ID to use
            settings: Voice tuning parameters, defaults to VoiceSettings()

        Returns:
            Audio data as bytes (MP3 format)

        Raises:
            TTSAPIError: If the API answers with an error status or no audio
            TTSAuthError: If authentication fails
            ValueError: If text or voice_id is empty
        """
        if not text or not text.strip():
            raise ValueError("Text cannot be empty")
        if not voice_id:
            raise ValueError("voice_id cannot be empty")

        settings = settings or VoiceSettings()
        logger.debug(f"Requesting synthesis from ElevenLabs (voice={voice_id}, model={model_id})")

        try:
            audio_generator = self._client.text_to_speech.convert(
                voice_id=voice_id,
                text=text,
                model_id=model_id,
                voice_settings=settings.to_dict(),
            )

            # Collect all audio chunks
            audio_bytes = b"".join(audio_generator)
        except Exception as e:
            raise _map_api_error(e) from e

        if not audio_bytes:
            raise TTSAPIError("No audio data received from API")

        logger.debug(f"Received {len(audio_bytes)} bytes of audio")
        return audio_bytes


def _map_api_error(error: Exception) -> Exception:
    """Translate an SDK/transport exception into a TTS error."""
    status_code = getattr(error, "status_code", None)

    if status_code == 401 or "unauthorized" in str(error).lower():
        return TTSAuthError(f"Authentication failed: {error}", error)
    if status_code is not None:
        return TTSAPIError(f"ElevenLabs API error: {status_code}", status_code, error)
    return TTSAPIError(f"API call failed: {error}", None, error)
