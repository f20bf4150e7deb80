"""Pillow-backed decoder and per-format encoders implementing application ports."""

from __future__ import annotations

import logging

from PIL import Image, UnidentifiedImageError

from image_converter.errors import DecodeError, EncodeError, UnsupportedFormatError
from image_converter.types import ImageHandle, TargetFormat

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ("jpg", "png", "gif", "bmp", "tiff")

# Modes each encoder writes natively; anything else is converted first.
_NATIVE_MODES: dict[str, frozenset[str]] = {
    "JPEG": frozenset({"L", "RGB", "CMYK"}),
    "PNG": frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}),
    "BMP": frozenset({"1", "L", "P", "RGB", "RGBA"}),
    "GIF": frozenset({"1", "L", "P", "RGB"}),
}


def resolve_target_format(to_suffix: str) -> TargetFormat:
    """Select the encoder format for a destination token.

    Parameters
    ----------
    to_suffix : str
        Destination suffix token, matched case-insensitively.

    Returns
    -------
    TargetFormat
        Pillow format name of the selected encoder.

    Raises
    ------
    UnsupportedFormatError
        If the token names none of the supported encoders.
    """
    token = to_suffix.upper()
    if token == "JPG":
        return "JPEG"
    if token == "PNG":
        return "PNG"
    if token == "GIF":
        return "GIF"
    if token == "BMP":
        return "BMP"
    if token == "TIFF":
        return "TIFF"
    raise UnsupportedFormatError(f"unknown suffix: {to_suffix}")


def _normalize_mode(image: Image.Image, image_format: TargetFormat) -> Image.Image:
    """Convert ``image`` into a mode the destination encoder accepts."""
    native = _NATIVE_MODES.get(image_format)
    if native is None or image.mode in native:
        return image
    if image_format in ("PNG", "BMP") and "A" in image.mode:
        return image.convert("RGBA")
    logger.debug("converting %s image to RGB for %s", image.mode, image_format)
    return image.convert("RGB")


class PillowImageDecoder:
    """Decode any format Pillow can sniff from byte content."""

    def decode(self, handle: ImageHandle) -> Image.Image:
        """Decode and fully load the image behind ``handle``.

        Parameters
        ----------
        handle : BinaryIO
            Open binary stream positioned at the start of the image.

        Returns
        -------
        PIL.Image.Image
            Loaded image; ``format`` holds the detected source format.

        Raises
        ------
        DecodeError
            If the content is not a recognized or intact image, or exceeds
            Pillow's ``MAX_IMAGE_PIXELS`` limit.
        """
        try:
            image = Image.open(handle)
            image.load()
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            SyntaxError,
            ValueError,
        ) as exc:
            raise DecodeError(f"cannot decode image: {exc}") from exc
        return image


class PillowImageEncoder:
    """Encode decoded images as JPEG, PNG, GIF, BMP or TIFF."""

    def encode(
        self,
        image: Image.Image,
        handle: ImageHandle,
        image_format: TargetFormat,
    ) -> None:
        """Serialize ``image`` to ``handle`` using codec defaults.

        Raises
        ------
        EncodeError
            If mode conversion or the encoder itself fails.
        """
        try:
            _normalize_mode(image, image_format).save(handle, format=image_format)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"cannot encode {image_format}: {exc}") from exc


def encoder_available(to_suffix: str) -> bool:
    """Return whether the installed Pillow can write the format for ``to_suffix``."""
    try:
        image_format = resolve_target_format(to_suffix)
    except UnsupportedFormatError:
        return False
    Image.init()
    return image_format in Image.SAVE
