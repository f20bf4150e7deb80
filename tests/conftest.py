"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from PIL import Image

type ImageFactory = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches so later tests log through caplog only."""
    yield
    package_logger = logging.getLogger("image_converter")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def make_image() -> ImageFactory:
    """Return a factory writing a small gradient image to disk."""

    def _make(
        path: Path,
        image_format: str = "TIFF",
        size: tuple[int, int] = (24, 16),
        mode: str = "RGB",
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        image = Image.new(mode, size)
        width, height = size
        for x in range(width):
            for y in range(height):
                value = (x * 10 + y * 3) % 256
                if mode == "RGB":
                    image.putpixel((x, y), (value, 255 - value, (x * y) % 256))
                elif mode == "RGBA":
                    image.putpixel((x, y), (value, 255 - value, 40, 128 + x % 128))
                else:
                    image.putpixel((x, y), value)
        image.save(path, format=image_format)
        return path

    return _make
