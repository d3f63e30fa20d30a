"""Shared fixtures for geminisst tests."""

from pathlib import Path

import pytest

from geminisst.domain import (
    BackendResponse,
    GenerationRequest,
    Segment,
    TokenUsage,
    UploadedFile,
)
from geminisst.infrastructure.interfaces import TranscriptionBackend


class FakeBackend(TranscriptionBackend):
    """Backend double that records calls and returns canned output."""

    def __init__(self, response: BackendResponse | None = None) -> None:
        self.response = response or BackendResponse(
            segments=[Segment(text="hello world")],
            usage=TokenUsage(
                prompt_token_count=10,
                candidates_token_count=3,
                total_token_count=20,
                thoughts_token_count=7,
            ),
        )
        self.uploads: list[tuple[str, str]] = []
        self.requests: list[GenerationRequest] = []

    def upload(self, path: str, mime_type: str) -> UploadedFile:
        self.uploads.append((path, mime_type))
        return UploadedFile(
            uri="https://generativelanguage.googleapis.com/v1beta/files/abc123",
            mime_type=mime_type,
        )

    def generate(self, request: GenerationRequest) -> BackendResponse:
        self.requests.append(request)
        return self.response


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def speech_file(tmp_path: Path) -> Path:
    path = tmp_path / "speech.mp3"
    path.write_bytes(b"ID3fake-mp3-bytes")
    return path


@pytest.fixture
def make_backend():
    return FakeBackend
