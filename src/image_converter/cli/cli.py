#!/usr/bin/env python3
"""
image_converter.cli.cli

Typer-based CLI for batch image-format conversion.

Walks a directory tree (or a single file), converts every file whose name
ends with the ``--from`` token into the format named by ``--to``, and
optionally deletes the originals.

Examples
--------
Convert every ``.tiff`` below the current directory to ``.jpg``:

    convert-images convert

Convert PNG screenshots to BMP, keep going past broken files and remove
the sources:

    convert-images convert --target shots --from png --to bmp \\
        --no-quit-on-error --delete-original
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from image_converter.errors import ImageConversionError

app = typer.Typer(
    name="convert-images",
    help="Batch-convert images between JPEG, PNG, GIF, BMP and TIFF.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SUFFIX_HELP = "Matched case-insensitively; text before the match, dot included, is kept."


def _configure_logging(level: str) -> None:
    """Route package log records to stderr at ``level``, and only there.

    Parameters
    ----------
    level : str
        Logging level name.
    """
    package_logger = logging.getLogger("image_converter")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help=f"Log level: {', '.join(LOG_LEVELS)}.",
    ),
) -> None:
    """Initialize shared CLI state and logging.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    log_level : str, default="INFO"
        Threshold for log records written to stderr.
    """
    level = "DEBUG" if debug else log_level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'. Use one of: {', '.join(LOG_LEVELS)}.",
            param_hint="--log-level",
        )
    _configure_logging(level)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    target: Path = typer.Option(
        Path("./"),
        "--target",
        help="The directory to traverse, or file to convert.",
    ),
    from_suffix: str = typer.Option(
        "tiff", "--from", help=f"The suffix to search for. {SUFFIX_HELP}"
    ),
    to_suffix: str = typer.Option(
        "jpg",
        "--to",
        help=f"The suffix to write to: jpg, png, gif, bmp or tiff. {SUFFIX_HELP}",
    ),
    quit_on_error: bool = typer.Option(
        True,
        "--quit-on-error/--no-quit-on-error",
        help="Stop at the first error instead of logging it and continuing.",
    ),
    delete_original: bool = typer.Option(
        False,
        "--delete-original/--keep-original",
        help="Delete each original file after it has been converted.",
    ),
) -> None:
    """Convert every matching file below a directory, or a single file.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    target : Path
        Root directory or single file.
    from_suffix : str
        Token the file names must end with.
    to_suffix : str
        Token written in place of ``from_suffix``; selects the encoder.
    quit_on_error : bool, default=True
        Whether the first failure aborts the run.
    delete_original : bool, default=False
        Whether sources are removed after a successful conversion.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from image_converter.api import convert_path

        convert_path(
            target=target,
            from_suffix=from_suffix,
            to_suffix=to_suffix,
            quit_on_error=quit_on_error,
            delete_original=delete_original,
        )
        typer.echo(f"✓ Done: {target}")
    except Exception as exc:
        # Unexpected crashes keep their traceback in the log.
        logger.critical(
            "conversion aborted: %s",
            exc,
            exc_info=not isinstance(exc, ImageConversionError),
        )
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and available encoders."""
    import importlib.metadata as metadata

    from image_converter.adapters.codecs import SUPPORTED_SUFFIXES, encoder_available

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ["pillow", "pydantic", "typer"]:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    for suffix in SUPPORTED_SUFFIXES:
        status = "available" if encoder_available(suffix) else "<unavailable>"
        typer.echo(f"encoder {suffix}: {status}")


if __name__ == "__main__":
    app()
