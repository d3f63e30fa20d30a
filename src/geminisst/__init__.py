"""Audio-to-text transcription on top of the Google Gemini API."""

from .api import audio_to_text
from .domain import (
    ThinkingLevel,
    TranscriptionOptions,
    TranscriptionResult,
    UsageStats,
)
from .exceptions import (
    BackendError,
    GeminiSSTError,
    InvalidInputError,
    MissingCredentialError,
    NotFoundError,
)
from .infrastructure import GeminiBackend
from .infrastructure.interfaces import TranscriptionBackend
from .transcriber import AudioTranscriber

__all__ = [
    "audio_to_text",
    "AudioTranscriber",
    "GeminiBackend",
    "TranscriptionBackend",
    "ThinkingLevel",
    "TranscriptionOptions",
    "TranscriptionResult",
    "UsageStats",
    "GeminiSSTError",
    "MissingCredentialError",
    "NotFoundError",
    "InvalidInputError",
    "BackendError",
]
