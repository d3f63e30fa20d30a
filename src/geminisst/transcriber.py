"""Orchestrates a single audio-to-text transcription."""

import logging
import os
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .domain import (
    GenerationRequest,
    ResolvedSource,
    ThinkingConfig,
    TranscriptionOptions,
    TranscriptionResult,
    build_thinking_config,
    classify_model,
    normalize_response,
    resolve_source,
)
from .exceptions import InvalidInputError
from .infrastructure.interfaces import TranscriptionBackend
from .logging import setup_logging

logger = setup_logging()

OptionsInput = TranscriptionOptions | Mapping[str, Any] | None


def coerce_options(options: OptionsInput = None, **overrides: Any) -> TranscriptionOptions:
    """
    Builds TranscriptionOptions from a model, a mapping or nothing.

    Keyword overrides win over the values in ``options``. Keys may use
    snake_case or camelCase.
    """
    if isinstance(options, TranscriptionOptions):
        base = options
    else:
        base = TranscriptionOptions.model_validate(dict(options or {}))
    if not overrides:
        return base

    update = TranscriptionOptions.model_validate(overrides)
    return TranscriptionOptions.model_validate(
        {
            **base.model_dump(exclude_unset=True),
            **update.model_dump(exclude_unset=True),
        }
    )


class AudioTranscriber:
    """Resolves the source, stages the audio and normalizes the response."""

    def __init__(self, backend: TranscriptionBackend):
        self._backend = backend

    def transcribe(
        self, audio_source: str | os.PathLike, options: OptionsInput = None
    ) -> TranscriptionResult:
        """
        Transcribes an audio file or an already-uploaded remote locator.

        Args:
            audio_source: Local path, or a ``https://`` locator returned by a
                previous upload.
            options: Prompt, model and thinking settings.

        Returns:
            TranscriptionResult with text, thoughts, model, file URI and usage.

        Raises:
            NotFoundError: If a local path does not exist.
            InvalidInputError: If a local path is not a regular file or cannot
                be read.
            BackendError: If the upload or generation call fails.
            pydantic.ValidationError: If an option value is invalid, such as an
                unknown thinking level, whatever the model family.
        """
        opts = coerce_options(options)
        level = logging.INFO if opts.verbose else logging.DEBUG

        source = resolve_source(audio_source)
        logger.log(
            level,
            "Processing audio",
            extra={
                "source": source.location,
                "mime_type": source.mime_type,
                "remote": source.is_remote,
            },
        )

        thinking = build_thinking_config(
            opts.model, opts.thinking_budget, opts.thinking_level
        )
        logger.log(
            level,
            "Thinking configured",
            extra={
                "model": opts.model,
                "family": classify_model(opts.model).value,
                "thinking": thinking.model_dump(mode="json", exclude={"family"}),
            },
        )

        request = self._build_request(source, opts, thinking, level)

        start = time.perf_counter()
        response = self._backend.generate(request)
        processing_time_sec = round(time.perf_counter() - start, 2)

        result = normalize_response(
            response,
            model=opts.model,
            file_uri=request.file_uri,
            processing_time_sec=processing_time_sec,
        )
        logger.log(
            level,
            "Transcription completed",
            extra={
                "model": opts.model,
                "processing_time_sec": processing_time_sec,
                "text_length": len(result.text),
            },
        )
        return result

    def _build_request(
        self,
        source: ResolvedSource,
        opts: TranscriptionOptions,
        thinking: ThinkingConfig,
        level: int = logging.DEBUG,
    ) -> GenerationRequest:
        """Picks the audio transport: reused locator, inline bytes or upload."""
        common = {
            "model": opts.model,
            "prompt": opts.prompt,
            "thinking": thinking,
        }

        if source.is_remote:
            return GenerationRequest(
                **common, mime_type=source.mime_type, file_uri=source.location
            )

        if opts.inline_max_bytes and (source.size_bytes or 0) <= opts.inline_max_bytes:
            logger.log(
                level, "Sending audio inline", extra={"size_bytes": source.size_bytes}
            )
            try:
                data = Path(source.location).read_bytes()
            except OSError as e:
                raise InvalidInputError(source.location, str(e)) from e
            return GenerationRequest(
                **common, mime_type=source.mime_type, inline_data=data
            )

        uploaded = self._backend.upload(source.location, source.mime_type)
        logger.log(level, "Audio file uploaded", extra={"file_uri": uploaded.uri})
        return GenerationRequest(
            **common, mime_type=uploaded.mime_type, file_uri=uploaded.uri
        )
