"""TTS data models with validation."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class VoiceSettings:
    """Voice generation settings sent with every synthesis request.

    Args:
        stability: Voice stability (0.0-1.0)
        similarity_boost: Voice similarity boost (0.0-1.0)
    """

    stability: float = 0.5
    similarity_boost: float = 0.8

    def __post_init__(self) -> None:
        """Validate voice settings."""
        if not 0.0 <= self.stability <= 1.0:
            raise ValueError("stability must be between 0.0 and 1.0")
        if not 0.0 <= self.similarity_boost <= 1.0:
            raise ValueError("similarity_boost must be between 0.0 and 1.0")

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
