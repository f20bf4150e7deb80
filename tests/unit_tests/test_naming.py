"""Unit tests for suffix matching and output naming."""

from __future__ import annotations

import pytest

from image_converter.naming import derive_output_name, matches_suffix


@pytest.mark.parametrize(
    ("name", "from_suffix", "expected"),
    [
        ("imgs/a.tiff", "tiff", True),
        ("imgs/a.TIFF", "tiff", True),
        ("imgs/a.TiFf", "TIFF", True),
        ("imgs/a.tif", "tiff", False),
        ("imgs/a.tiff.bak", "tiff", False),
        ("imgs/tiff/readme.txt", "tiff", False),
        ("photo_tiff", "tiff", True),
    ],
)
def test_matches_suffix(name: str, from_suffix: str, expected: bool) -> None:
    """Match only names that end with the token, ignoring case."""
    assert matches_suffix(name, from_suffix) is expected


@pytest.mark.parametrize(
    ("name", "from_suffix", "to_suffix", "expected"),
    [
        ("imgs/a.tiff", "tiff", "jpg", "imgs/a.jpg"),
        ("imgs/a.TIFF", "tiff", "jpg", "imgs/a.jpg"),
        ("imgs/tiff.tiff", "tiff", "png", "imgs/tiff.png"),
        ("imgs/a.tiff", ".tiff", "_converted.bmp", "imgs/a_converted.bmp"),
        ("imgs/photo_tiff", "tiff", "gif", "imgs/photo_gif"),
        ("a.tiff", "tiff", "JPG", "a.JPG"),
    ],
)
def test_derive_output_name_replaces_last_occurrence(
    name: str, from_suffix: str, to_suffix: str, expected: str
) -> None:
    """Replace the trailing token literally and keep the rest of the path."""
    assert derive_output_name(name, from_suffix, to_suffix) == expected


def test_derive_output_name_rejects_non_matching_name() -> None:
    """Refuse to derive a name for a file that does not carry the token."""
    with pytest.raises(ValueError, match="does not end with"):
        derive_output_name("imgs/a.png", "tiff", "jpg")
