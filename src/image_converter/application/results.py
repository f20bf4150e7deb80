"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from image_converter.types import TargetFormat


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of one converted file."""

    source_path: Path
    output_path: Path
    image_format: TargetFormat
    detected_format: str | None = None
    deleted_original: bool = False
