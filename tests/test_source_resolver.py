"""Tests for source classification and MIME resolution."""

from pathlib import Path

import pytest

from geminisst.constants import DEFAULT_MIME_TYPE, MIME_TYPES
from geminisst.domain import mime_type_for, resolve_source
from geminisst.exceptions import InvalidInputError, NotFoundError


@pytest.mark.parametrize("extension,expected", sorted(MIME_TYPES.items()))
def test_known_extensions_map_exactly(extension: str, expected: str) -> None:
    assert mime_type_for(f"clip.{extension}") == expected
    assert mime_type_for(f"clip.{extension.upper()}") == expected


@pytest.mark.parametrize("name", ["clip.webm", "clip.txt", "clip", "archive.mp3.bak"])
def test_unknown_extensions_use_default(name: str) -> None:
    assert mime_type_for(name) == DEFAULT_MIME_TYPE


def test_local_file_resolves_with_size(speech_file: Path) -> None:
    source = resolve_source(str(speech_file))

    assert source.is_remote is False
    assert source.mime_type == "audio/mp3"
    assert source.size_bytes == speech_file.stat().st_size


def test_local_path_object_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "note.M4A"
    path.write_bytes(b"data")

    assert resolve_source(path).mime_type == "audio/mp4"


def test_missing_local_path_raises_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "nope.wav"

    with pytest.raises(NotFoundError) as exc_info:
        resolve_source(str(missing))

    assert exc_info.value.path == str(missing)


def test_directory_raises_invalid_input(tmp_path: Path) -> None:
    with pytest.raises(InvalidInputError):
        resolve_source(str(tmp_path))


def test_remote_locator_skips_existence_check() -> None:
    source = resolve_source("https://files.example/abc.flac")

    assert source.is_remote is True
    assert source.location == "https://files.example/abc.flac"
    assert source.mime_type == "audio/flac"
    assert source.size_bytes is None


def test_remote_locator_ignores_query_string() -> None:
    source = resolve_source("https://files.example/abc.wav?alt=media&x=1.ogg")

    assert source.mime_type == "audio/wav"


def test_remote_locator_without_extension_uses_default() -> None:
    source = resolve_source(
        "https://generativelanguage.googleapis.com/v1beta/files/abc123"
    )

    assert source.mime_type == DEFAULT_MIME_TYPE
