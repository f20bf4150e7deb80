"""Exception hierarchy for image conversion failures."""

from __future__ import annotations

from pathlib import Path


class ImageConversionError(Exception):
    """Base error raised while traversing or converting images.

    Parameters
    ----------
    message : str
        Human readable error description.
    path : Path | None, default=None
        Filesystem path the failure relates to, when known.
    """

    exit_code = 1

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StatError(ImageConversionError):
    """Target path does not exist or cannot be inspected."""


class ListError(ImageConversionError):
    """Directory contents cannot be enumerated."""


class OpenError(ImageConversionError):
    """Source file cannot be opened for reading."""


class DecodeError(ImageConversionError):
    """Source content is not a recognized image format."""


class CreateError(ImageConversionError):
    """Destination file cannot be created or truncated."""


class EncodeError(ImageConversionError):
    """Encoder for the destination format failed."""


class UnsupportedFormatError(ImageConversionError):
    """Destination token does not select any known encoder."""

    exit_code = 2


class DeleteError(ImageConversionError):
    """Original file cannot be removed after conversion."""
