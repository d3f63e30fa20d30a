"""Infrastructure layer exports."""

from .gemini_backend import GeminiBackend

__all__ = ["GeminiBackend"]
