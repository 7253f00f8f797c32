"""TTS (Text-to-Speech) package for voice-cli.

This package wraps the ElevenLabs API used for spoken confirmations.
"""

from .client import TTSClient
from .errors import TTSAPIError, TTSAuthError, TTSError
from .models import VoiceSettings

__all__ = [
    "TTSAPIError",
    "TTSAuthError",
    "TTSClient",
    "TTSError",
    "VoiceSettings",
]
