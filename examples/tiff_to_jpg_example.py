#!/usr/bin/env python3
"""Build a small TIFF tree, convert it to JPEG and check the results."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from PIL import Image

from image_converter import traverse


def _make_tree(root: Path) -> list[Path]:
    sources = [root / "a.tiff", root / "nested" / "b.TIFF"]
    for index, path in enumerate(sources):
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", (32 + index, 16), color=(40 * index, 120, 200)).save(path, format="TIFF")
    (root / "notes.txt").write_text("not an image", encoding="utf-8")
    return sources


def example_api(root: Path) -> None:
    """Convert through the Python API and verify sizes are kept."""
    sources = _make_tree(root)
    traverse(root, from_suffix="tiff", to_suffix="jpg")
    for source in sources:
        output = source.with_name(source.name[: -len("tiff")] + "jpg")
        with Image.open(source) as original, Image.open(output) as converted:
            if converted.format != "JPEG" or converted.size != original.size:
                raise SystemExit(f"FAIL: unexpected output {output}")
        print(f"OK: {source.name} -> {output.name}")


def example_cli(root: Path) -> None:
    """Convert through the console script and delete the originals."""
    _make_tree(root)
    result = subprocess.run(
        [
            "convert-images",
            "convert",
            "--target",
            str(root),
            "--to",
            "png",
            "--delete-original",
        ],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise SystemExit(f"FAIL: CLI exited with {result.returncode}\n{result.stderr}")
    if any(root.rglob("*.tiff")) or any(root.rglob("*.TIFF")):
        raise SystemExit("FAIL: originals were not deleted.")
    print(f"OK: {len(list(root.rglob('*png')))} PNG files written by CLI")


def main() -> None:
    """Run both conversion flows below ./outputs."""
    output_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "outputs")
    example_api(output_dir / "api")
    example_cli(output_dir / "cli")


if __name__ == "__main__":
    main()
