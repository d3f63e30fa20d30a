"""Flattens backend responses into transcription results."""

from .models import BackendResponse, TranscriptionResult, UsageStats


def normalize_response(
    response: BackendResponse,
    model: str,
    file_uri: str | None,
    processing_time_sec: float,
) -> TranscriptionResult:
    """
    Splits the response segments into transcript text and thoughts.

    Args:
        response: Backend output in original segment order.
        model: The requested model identifier, echoed in the result.
        file_uri: Locator of the staged audio, if one was used.
        processing_time_sec: Measured duration of the generation call.

    Returns:
        TranscriptionResult with text, optional thoughts and usage.
    """
    text = "".join(s.text for s in response.segments if not s.thought)
    thoughts = "".join(s.text for s in response.segments if s.thought)
    has_thoughts = any(s.thought for s in response.segments)

    usage = None
    if response.usage is not None:
        usage = UsageStats(
            input_tokens=response.usage.prompt_token_count or 0,
            output_tokens=response.usage.candidates_token_count or 0,
            total_tokens=response.usage.total_token_count or 0,
            thoughts_token_count=response.usage.thoughts_token_count or 0,
            processing_time_sec=processing_time_sec,
        )

    return TranscriptionResult(
        text=text,
        thoughts=thoughts if has_thoughts else None,
        model=model,
        file_uri=file_uri,
        usage=usage,
    )
