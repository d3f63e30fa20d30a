"""Tests for response normalization."""

from geminisst.domain import BackendResponse, Segment, TokenUsage, normalize_response


def _normalize(segments: list[Segment], usage: TokenUsage | None = None):
    return normalize_response(
        BackendResponse(segments=segments, usage=usage),
        model="gemini-2.5-flash-lite",
        file_uri=None,
        processing_time_sec=1.23,
    )


def test_splits_thoughts_from_text() -> None:
    result = _normalize(
        [
            Segment(text="reasoning...", thought=True),
            Segment(text="hello world"),
        ]
    )

    assert result.text == "hello world"
    assert result.thoughts == "reasoning..."


def test_non_thought_segments_concatenate_in_order() -> None:
    result = _normalize([Segment(text="one "), Segment(text="two "), Segment(text="three")])

    assert result.text == "one two three"
    assert result.thoughts is None


def test_reordering_thoughts_never_leaks_into_text() -> None:
    first = _normalize(
        [
            Segment(text="A", thought=True),
            Segment(text="spoken"),
            Segment(text="B", thought=True),
        ]
    )
    swapped = _normalize(
        [
            Segment(text="B", thought=True),
            Segment(text="spoken"),
            Segment(text="A", thought=True),
        ]
    )

    assert first.thoughts == "AB"
    assert swapped.thoughts == "BA"
    assert first.text == swapped.text == "spoken"


def test_empty_response_gives_empty_text() -> None:
    result = _normalize([])

    assert result.text == ""
    assert result.thoughts is None
    assert result.usage is None


def test_usage_mapping_defaults_missing_counts() -> None:
    result = _normalize(
        [Segment(text="hi")],
        TokenUsage(prompt_token_count=12, candidates_token_count=4, total_token_count=16),
    )

    assert result.usage is not None
    assert result.usage.input_tokens == 12
    assert result.usage.output_tokens == 4
    assert result.usage.total_tokens == 16
    assert result.usage.thoughts_token_count == 0
    assert result.usage.processing_time_sec == 1.23


def test_result_dumps_camel_case_keys() -> None:
    result = _normalize([Segment(text="hi")], TokenUsage(prompt_token_count=1))

    dumped = result.model_dump(by_alias=True)

    assert "fileUri" in dumped
    assert dumped["usage"]["inputTokens"] == 1
    assert "processingTimeSec" in dumped["usage"]
