"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import BinaryIO, Literal

type TargetFormat = Literal["JPEG", "PNG", "GIF", "BMP", "TIFF"]
type SuffixToken = str
type ImageHandle = BinaryIO
