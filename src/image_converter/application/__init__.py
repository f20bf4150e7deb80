"""Application-layer use-cases and option objects."""

from __future__ import annotations

from image_converter.application.options import ConversionOptions
from image_converter.application.ports import ImageDecoder, ImageEncoder
from image_converter.application.results import ConversionResult


def build_conversion_options(
    *,
    from_suffix: str = "tiff",
    to_suffix: str = "jpg",
    quit_on_error: bool = True,
    delete_original: bool = False,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from image_converter.application.use_cases import build_conversion_options as _impl

    return _impl(
        from_suffix=from_suffix,
        to_suffix=to_suffix,
        quit_on_error=quit_on_error,
        delete_original=delete_original,
    )


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "ImageDecoder",
    "ImageEncoder",
    "build_conversion_options",
]
