"""Configuration management for voice-cli.

Loads configuration from ~/.config/voice-cli/config.json.
Priority chain: env vars > config file > defaults.

A missing file is not an error: the defaults describe the text-only tier
(voice disabled, placeholder API key). The file is only written by the
``--setup`` flow.
"""

import json
import logging
import os
import platform
import sys
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Any

from . import __version__
from .tts.client import DEFAULT_MODEL_ID

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your-api-key-here"
DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"  # Rachel
DEFAULT_HOMEPAGE = "https://duckduckgo.com"


def get_config_path() -> Path:
    """Get the config file path under the current user's home directory."""
    return Path.home() / ".config" / "voice-cli" / "config.json"


@dataclass(frozen=True)
class VoiceConfig:
    """Top-level voice-cli configuration."""

    voice_enabled: bool = False
    api_key: str = PLACEHOLDER_API_KEY
    voice_id: str = DEFAULT_VOICE_ID
    model_id: str = DEFAULT_MODEL_ID
    preferences: dict[str, Any] = field(default_factory=dict)
    version: str | None = None
    platform: str | None = None
    setup_date: str | None = None

    @property
    def has_valid_api_key(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    @property
    def voice_available(self) -> bool:
        """Whether spoken responses can be produced (voice tier)."""
        return self.voice_enabled and self.has_valid_api_key

    @property
    def homepage(self) -> str:
        return self.preferences.get("homepage", DEFAULT_HOMEPAGE)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VoiceConfig":
        """Build a config from parsed JSON, ignoring unknown keys."""
        defaults = cls()
        preferences = data.get("preferences", {})
        if not isinstance(preferences, dict):
            raise ValueError("preferences must be a JSON object")
        voice_enabled = data.get("voice_enabled", defaults.voice_enabled)
        if not isinstance(voice_enabled, bool):
            raise ValueError("voice_enabled must be true or false")

        return cls(
            voice_enabled=voice_enabled,
            api_key=str(data.get("api_key") or defaults.api_key),
            voice_id=str(data.get("voice_id") or defaults.voice_id),
            model_id=str(data.get("model_id") or defaults.model_id),
            preferences=preferences,
            version=data.get("version"),
            platform=data.get("platform"),
            setup_date=data.get("setup_date"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _apply_env_overrides(config: VoiceConfig) -> VoiceConfig:
    api_key = os.getenv("ELEVENLABS_API_KEY")
    voice_id = os.getenv("VOICE_CLI_VOICE_ID")

    if api_key:
        config = replace(config, api_key=api_key)
    if voice_id:
        config = replace(config, voice_id=voice_id)
    return config


def load_config(path: Path | None = None) -> VoiceConfig:
    """Load configuration from the config file with env var overrides.

    Args:
        path: Config file to read, defaults to get_config_path()

    Returns:
        Loaded VoiceConfig, or defaults if the file is missing or unreadable.
    """
    path = path or get_config_path()

    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return _apply_env_overrides(VoiceConfig())

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        config = VoiceConfig.from_dict(data)
    except (OSError, ValueError) as e:
        print(f"Warning: Could not load config {path}: {e}", file=sys.stderr)
        config = VoiceConfig()

    return _apply_env_overrides(config)


def save_config(config: VoiceConfig, path: Path | None = None) -> Path:
    """Write configuration to disk as pretty-printed JSON.

    Raises:
        OSError: If the file cannot be written.
    """
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug(f"Saved config to {path}")
    return path


def build_setup_config(api_key: str, voice_id: str = DEFAULT_VOICE_ID) -> VoiceConfig:
    """Create the config recorded by the setup flow.

    An empty API key produces a text-only configuration.
    """
    api_key = api_key.strip()

    return VoiceConfig(
        voice_enabled=bool(api_key),
        api_key=api_key or PLACEHOLDER_API_KEY,
        voice_id=voice_id,
        preferences={"auto_start": False, "verbose_output": True},
        version=__version__,
        platform=platform.system(),
        setup_date=datetime.now().isoformat(),
    )
