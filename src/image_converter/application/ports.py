"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from image_converter.types import ImageHandle, TargetFormat


class DecodedImage(Protocol):
    """Marker protocol for an in-memory pixel buffer."""

    format: str | None


class ImageDecoder(Protocol):
    """Decode an image by sniffing its byte content."""

    def decode(self, handle: ImageHandle) -> DecodedImage:
        """Return a fully loaded image; raise ``DecodeError`` on failure."""


class ImageEncoder(Protocol):
    """Serialize a decoded image to a destination stream."""

    def encode(
        self,
        image: DecodedImage,
        handle: ImageHandle,
        image_format: TargetFormat,
    ) -> None:
        """Write ``image`` to ``handle``; raise ``EncodeError`` on failure."""
