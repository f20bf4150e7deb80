"""Application use-cases orchestrating directory traversal and conversion."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from pydantic import ValidationError

from image_converter.adapters.codecs import (
    PillowImageDecoder,
    PillowImageEncoder,
    resolve_target_format,
)
from image_converter.application.options import ConversionOptions
from image_converter.application.ports import ImageDecoder, ImageEncoder
from image_converter.application.results import ConversionResult
from image_converter.errors import (
    CreateError,
    DecodeError,
    DeleteError,
    EncodeError,
    ImageConversionError,
    ListError,
    OpenError,
    StatError,
    UnsupportedFormatError,
)
from image_converter.naming import derive_output_name, matches_suffix
from image_converter.schemas import TraversalConfig

logger = logging.getLogger(__name__)

NON_FATAL_PREFIX = "A non-fatal error occurred: "


def _handle_failure(
    error: ImageConversionError,
    cause: BaseException | None,
    options: ConversionOptions,
    prefix: str,
) -> None:
    """Raise ``error`` under quit-on-error, otherwise log it as a warning."""
    if options.quit_on_error:
        raise error from cause
    logger.warning("%s%s", prefix, error)


def validate_traversal(
    target: Path | str, options: ConversionOptions
) -> tuple[Path, ConversionOptions]:
    """Validate a target and its options through ``TraversalConfig``.

    Returns
    -------
    tuple[Path, ConversionOptions]
        Target as a path, and options with stripped suffix tokens.

    Raises
    ------
    ImageConversionError
        If a token is blank or a value has the wrong type.
    """
    try:
        config = TraversalConfig(
            target=target,
            from_suffix=options.from_suffix,
            to_suffix=options.to_suffix,
            quit_on_error=options.quit_on_error,
            delete_original=options.delete_original,
        )
    except ValidationError as exc:
        raise ImageConversionError(f"Invalid traversal parameters: {exc}") from exc

    return config.target, build_conversion_options(
        from_suffix=config.from_suffix,
        to_suffix=config.to_suffix,
        quit_on_error=config.quit_on_error,
        delete_original=config.delete_original,
    )


def convert_tree(
    *,
    target: Path,
    options: ConversionOptions,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> None:
    """Use-case: validate inputs, then convert every matching file under ``target``."""
    target, options = validate_traversal(target, options)

    logger.debug(
        "traversing %s (%s -> %s, quit_on_error=%s, delete_original=%s)",
        target,
        options.from_suffix,
        options.to_suffix,
        options.quit_on_error,
        options.delete_original,
    )
    traverse(
        target,
        options,
        decoder=decoder or PillowImageDecoder(),
        encoder=encoder or PillowImageEncoder(),
    )


def traverse(
    path: Path | str,
    options: ConversionOptions,
    *,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> None:
    """Walk ``path`` depth-first and convert every file whose name matches.

    Parameters
    ----------
    path : Path | str
        Directory to descend into, or a single file.
    options : ConversionOptions
        Suffix tokens and error policy, shared by every recursive call.
    decoder : ImageDecoder | None, default=None
        Decoder used for every file; Pillow when omitted.
    encoder : ImageEncoder | None, default=None
        Encoder used for every file; Pillow when omitted.

    Raises
    ------
    ImageConversionError
        First failure encountered when ``options.quit_on_error`` is set.
    """
    path = Path(path)
    decoder = decoder or PillowImageDecoder()
    encoder = encoder or PillowImageEncoder()

    try:
        info = path.stat()
    except OSError as exc:
        _handle_failure(
            StatError(f"cannot stat {path}: {exc}", path), exc, options, NON_FATAL_PREFIX
        )
        return

    if not stat.S_ISDIR(info.st_mode):
        convert_file_if_match(path, options, decoder=decoder, encoder=encoder)
        return

    try:
        entries = sorted(path.iterdir())
    except OSError as exc:
        _handle_failure(
            ListError(f"cannot list {path}: {exc}", path), exc, options, NON_FATAL_PREFIX
        )
        return

    # Symlinked directories are not descended into, so link cycles cannot loop.
    for entry in entries:
        try:
            if entry.is_dir() and not entry.is_symlink():
                traverse(entry, options, decoder=decoder, encoder=encoder)
            else:
                convert_file_if_match(entry, options, decoder=decoder, encoder=encoder)
        except ImageConversionError as exc:
            if options.quit_on_error:
                raise
            logger.warning("%s%s", NON_FATAL_PREFIX, exc)


def convert_file_if_match(
    name: Path | str,
    options: ConversionOptions,
    *,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> ConversionResult | None:
    """Convert one file when its name ends with the source token.

    Parameters
    ----------
    name : Path | str
        Candidate file.
    options : ConversionOptions
        Suffix tokens and error policy.
    decoder : ImageDecoder | None, default=None
        Decoder for the source content; Pillow when omitted.
    encoder : ImageEncoder | None, default=None
        Encoder for the destination format; Pillow when omitted.

    Returns
    -------
    ConversionResult | None
        Outcome for a converted file. ``None`` when the name does not
        match, or when a step failed and the failure was only logged.

    Raises
    ------
    ImageConversionError
        Failure of any step when ``options.quit_on_error`` is set.
    """
    source = str(name)
    if not matches_suffix(source, options.from_suffix):
        return None

    source_path = Path(source)
    output_path = Path(derive_output_name(source, options.from_suffix, options.to_suffix))
    decoder = decoder or PillowImageDecoder()
    encoder = encoder or PillowImageEncoder()

    try:
        image_format = resolve_target_format(options.to_suffix)
    except UnsupportedFormatError as exc:
        exc.path = source_path
        _handle_failure(exc, None, options, "")
        return None

    try:
        source_handle = source_path.open("rb")
    except OSError as exc:
        _handle_failure(
            OpenError(f"cannot open {source}: {exc}", source_path),
            exc,
            options,
            "while opening input file: ",
        )
        return None

    with source_handle:
        try:
            image = decoder.decode(source_handle)
        except DecodeError as exc:
            _handle_failure(
                DecodeError(f"{source}: {exc}", source_path),
                exc,
                options,
                NON_FATAL_PREFIX,
            )
            return None

    try:
        output_handle = output_path.open("wb")
    except OSError as exc:
        _handle_failure(
            CreateError(f"cannot create {output_path}: {exc}", output_path),
            exc,
            options,
            "while opening output file: ",
        )
        return None

    with output_handle:
        try:
            encoder.encode(image, output_handle, image_format)
        except EncodeError as exc:
            _handle_failure(
                EncodeError(f"{output_path}: {exc}", output_path),
                exc,
                options,
                f"while saving {image_format.lower()}: ",
            )
            return None

    logger.info("converted %s -> %s", source_path, output_path)

    deleted_original = False
    if options.delete_original:
        try:
            if output_path.samefile(source_path):
                logger.debug("keeping %s: converted in place", source_path)
            else:
                source_path.unlink()
                deleted_original = True
        except OSError as exc:
            _handle_failure(
                DeleteError(f"cannot delete {source}: {exc}", source_path),
                exc,
                options,
                f"while deleting original file {source}, error = ",
            )
            return None

    return ConversionResult(
        source_path=source_path,
        output_path=output_path,
        image_format=image_format,
        detected_format=getattr(image, "format", None),
        deleted_original=deleted_original,
    )


def build_conversion_options(
    *,
    from_suffix: str = "tiff",
    to_suffix: str = "jpg",
    quit_on_error: bool = True,
    delete_original: bool = False,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(
        from_suffix=from_suffix,
        to_suffix=to_suffix,
        quit_on_error=quit_on_error,
        delete_original=delete_original,
    )
