"""Infrastructure interface exports."""

from .transcription_backend import TranscriptionBackend

__all__ = ["TranscriptionBackend"]
