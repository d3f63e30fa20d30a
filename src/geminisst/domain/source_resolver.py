"""Classifies audio sources and resolves their MIME type."""

import os
from pathlib import Path, PurePosixPath
from urllib.parse import urlsplit

from ..constants import DEFAULT_MIME_TYPE, MIME_TYPES, REMOTE_PREFIX
from ..exceptions import InvalidInputError, NotFoundError
from .models import ResolvedSource


def is_remote(source: str | os.PathLike) -> bool:
    """Returns True when the source is an already-uploaded remote locator."""
    return isinstance(source, str) and source.startswith(REMOTE_PREFIX)


def mime_type_for(name: str, default: str = DEFAULT_MIME_TYPE) -> str:
    """
    Looks up the MIME type for a file name or path by its extension.

    Args:
        name: A file name, path or URL path.
        default: Value returned when the extension is not in the table.

    Returns:
        The mapped MIME type, or ``default``.
    """
    extension = PurePosixPath(name).suffix.lower().lstrip(".")
    return MIME_TYPES.get(extension, default)


def resolve_source(source: str | os.PathLike) -> ResolvedSource:
    """
    Resolves an audio source into a location and a MIME type.

    Remote locators are taken as-is, with the MIME type guessed from the
    URL path. Local paths must point at an existing regular file.

    Raises:
        NotFoundError: If a local path does not exist.
        InvalidInputError: If a local path is not a regular file.
    """
    if is_remote(source):
        url_path = urlsplit(source).path
        return ResolvedSource(
            location=source,
            mime_type=mime_type_for(url_path),
            is_remote=True,
        )

    path = Path(source)
    if not path.exists():
        raise NotFoundError(str(source))
    if not path.is_file():
        raise InvalidInputError(str(source), "path is not a file")

    return ResolvedSource(
        location=str(path),
        mime_type=mime_type_for(path.name),
        is_remote=False,
        size_bytes=path.stat().st_size,
    )
