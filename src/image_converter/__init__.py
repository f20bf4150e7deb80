"""Top-level API for batch image-format conversion."""

from __future__ import annotations

from pathlib import Path

from image_converter.application.results import ConversionResult

__version__ = "0.1.0"


def traverse(
    path: Path | str = "./",
    from_suffix: str = "tiff",
    to_suffix: str = "jpg",
    quit_on_error: bool = True,
    delete_original: bool = False,
) -> None:
    """Walk ``path`` and convert every file whose name ends with ``from_suffix``.

    Parameters
    ----------
    path : Path | str, default="./"
        Directory to traverse recursively, or a single file.
    from_suffix : str, default="tiff"
        Source token matched case-insensitively against file names.
    to_suffix : str, default="jpg"
        Destination token (``jpg``, ``png``, ``gif``, ``bmp`` or ``tiff``).
    quit_on_error : bool, default=True
        Abort on the first failure instead of logging and continuing.
    delete_original : bool, default=False
        Remove each source file after its conversion succeeds.

    Raises
    ------
    ImageConversionError
        If a suffix token is blank, or the first failure under ``quit_on_error``.
    """
    from .application.use_cases import build_conversion_options, validate_traversal
    from .application.use_cases import traverse as _impl

    target, options = validate_traversal(
        path,
        build_conversion_options(
            from_suffix=from_suffix,
            to_suffix=to_suffix,
            quit_on_error=quit_on_error,
            delete_original=delete_original,
        ),
    )
    _impl(target, options)


def convert_file_if_match(
    name: Path | str,
    from_suffix: str = "tiff",
    to_suffix: str = "jpg",
    quit_on_error: bool = True,
    delete_original: bool = False,
) -> ConversionResult | None:
    """Convert a single file when its name ends with ``from_suffix``.

    Returns
    -------
    ConversionResult | None
        Outcome of the conversion, or ``None`` when the file was skipped.
    """
    from .application.use_cases import build_conversion_options, validate_traversal
    from .application.use_cases import convert_file_if_match as _impl

    target, options = validate_traversal(
        name,
        build_conversion_options(
            from_suffix=from_suffix,
            to_suffix=to_suffix,
            quit_on_error=quit_on_error,
            delete_original=delete_original,
        ),
    )
    return _impl(target, options)
