"""Abstract interface for transcription backend operations."""

from abc import ABC, abstractmethod

from ...domain.models import BackendResponse, GenerationRequest, UploadedFile


class TranscriptionBackend(ABC):
    """Abstract base class for generative audio backends."""

    @abstractmethod
    def upload(self, path: str, mime_type: str) -> UploadedFile:
        """
        Stages a local audio file on the backend.

        Args:
            path: Local path of the audio file.
            mime_type: MIME type to declare for the file.

        Returns:
            UploadedFile with the backend-issued locator.

        Raises:
            BackendError: If the upload fails.
        """
        pass

    @abstractmethod
    def generate(self, request: GenerationRequest) -> BackendResponse:
        """
        Runs a single generation call for an audio transcription.

        Args:
            request: Prompt, audio reference, model and thinking settings.

        Returns:
            BackendResponse with ordered output segments and usage.

        Raises:
            BackendError: If the generation call fails.
        """
        pass
