"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from image_converter.application.use_cases import build_conversion_options
from image_converter.application.use_cases import convert_tree


def convert_path(
    target: Path | str = "./",
    from_suffix: str = "tiff",
    to_suffix: str = "jpg",
    quit_on_error: bool = True,
    delete_original: bool = False,
) -> None:
    """Convert every file under ``target`` whose name ends with ``from_suffix``.

    Parameters
    ----------
    target : Path | str, default="./"
        Directory to traverse recursively, or a single file.
    from_suffix : str, default="tiff"
        Source token matched case-insensitively against file names.
    to_suffix : str, default="jpg"
        Destination token; selects the encoder and replaces the matched token.
    quit_on_error : bool, default=True
        Abort on the first failure instead of logging and continuing.
    delete_original : bool, default=False
        Remove each source file after its conversion succeeds.

    Raises
    ------
    ImageConversionError
        On invalid parameters, or on the first failure under ``quit_on_error``.
    """
    options = build_conversion_options(
        from_suffix=from_suffix,
        to_suffix=to_suffix,
        quit_on_error=quit_on_error,
        delete_original=delete_original,
    )
    convert_tree(target=Path(target), options=options)
