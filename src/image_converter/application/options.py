"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """Options passed unchanged down the traversal."""

    from_suffix: str = "tiff"
    to_suffix: str = "jpg"
    quit_on_error: bool = True
    delete_original: bool = False
