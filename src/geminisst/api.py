"""Public entry point for one-shot transcriptions."""

import os
from typing import Any

from google import genai

from .domain import TranscriptionResult
from .exceptions import MissingCredentialError
from .infrastructure import GeminiBackend
from .transcriber import AudioTranscriber, OptionsInput, coerce_options


def audio_to_text(
    audio_source: str | os.PathLike,
    api_key: str | None,
    options: OptionsInput = None,
    **overrides: Any,
) -> TranscriptionResult:
    """
    Transcribes an audio file with Gemini.

    Args:
        audio_source: Local audio path, or a ``https://`` file locator from a
            previous result's ``file_uri`` to skip re-uploading.
        api_key: Google Gemini API key.
        options: TranscriptionOptions or a mapping of option keys.
        **overrides: Individual options applied on top of ``options``.

    Returns:
        TranscriptionResult with the transcript, thoughts and usage.

    Raises:
        MissingCredentialError: If ``api_key`` is empty.
        NotFoundError: If a local path does not exist.
        InvalidInputError: If a local path is not a regular file or cannot
            be read.
        BackendError: If the Gemini upload or generation call fails.
        pydantic.ValidationError: If an option value is invalid, such as an
            unknown thinking level, whatever the model family.
    """
    if not api_key:
        raise MissingCredentialError()

    opts = coerce_options(options, **overrides)
    transcriber = AudioTranscriber(GeminiBackend(genai.Client(api_key=api_key)))
    return transcriber.transcribe(audio_source, opts)
