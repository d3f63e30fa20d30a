"""Gemini implementation of the TranscriptionBackend interface."""

from google import genai
from google.genai import types

from ..constants import SYSTEM_INSTRUCTION
from ..domain.models import (
    BackendResponse,
    CurrentThinkingConfig,
    GenerationRequest,
    Segment,
    ThinkingConfig,
    TokenUsage,
    UploadedFile,
)
from ..exceptions import BackendError
from ..logging import setup_logging
from .interfaces import TranscriptionBackend

logger = setup_logging()


class GeminiBackend(TranscriptionBackend):
    """Handles file staging and content generation using Google Gemini."""

    def __init__(self, client: genai.Client):
        self._client = client

    def upload(self, path: str, mime_type: str) -> UploadedFile:
        """Uploads the file through the Gemini Files API."""
        try:
            uploaded = self._client.files.upload(
                file=path,
                config=types.UploadFileConfig(mime_type=mime_type),
            )
        except Exception as e:
            logger.exception("Gemini file upload failed", extra={"path": path})
            raise BackendError("upload", cause=e) from e

        logger.debug("Audio file uploaded", extra={"file_uri": uploaded.uri})
        return UploadedFile(uri=uploaded.uri, mime_type=uploaded.mime_type or mime_type)

    def generate(self, request: GenerationRequest) -> BackendResponse:
        """Calls generate_content and flattens the first candidate."""
        try:
            response = self._client.models.generate_content(
                model=request.model,
                contents=[
                    types.Content(
                        role="user",
                        parts=[
                            types.Part.from_text(text=request.prompt),
                            self._audio_part(request),
                        ],
                    )
                ],
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    thinking_config=self._thinking_config(request.thinking),
                ),
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"model": request.model})
            raise BackendError("generate", cause=e) from e

        return BackendResponse(
            segments=self._segments(response),
            usage=self._usage(response),
        )

    def _audio_part(self, request: GenerationRequest) -> types.Part:
        """Builds the audio part as a file reference or inline bytes."""
        if request.file_uri is not None:
            return types.Part.from_uri(
                file_uri=request.file_uri, mime_type=request.mime_type
            )
        return types.Part.from_bytes(
            data=request.inline_data or b"", mime_type=request.mime_type
        )

    def _thinking_config(self, thinking: ThinkingConfig) -> types.ThinkingConfig:
        """Translates the domain thinking config into the SDK shape."""
        if isinstance(thinking, CurrentThinkingConfig):
            level = thinking.level.value.upper() if thinking.level else None
            return types.ThinkingConfig(
                include_thoughts=thinking.include_thoughts,
                thinking_level=level,
            )
        return types.ThinkingConfig(
            include_thoughts=thinking.include_thoughts,
            thinking_budget=thinking.budget,
        )

    def _segments(self, response: types.GenerateContentResponse) -> list[Segment]:
        """Extracts the output parts of the first candidate, in order."""
        if not response.candidates:
            return []
        content = response.candidates[0].content
        if content is None or not content.parts:
            return []
        return [
            Segment(text=part.text or "", thought=bool(part.thought))
            for part in content.parts
        ]

    def _usage(self, response: types.GenerateContentResponse) -> TokenUsage | None:
        """Copies the raw token counts when the response carries them."""
        metadata = response.usage_metadata
        if metadata is None:
            return None
        return TokenUsage(
            prompt_token_count=metadata.prompt_token_count,
            candidates_token_count=metadata.candidates_token_count,
            total_token_count=metadata.total_token_count,
            thoughts_token_count=metadata.thoughts_token_count,
        )
