"""Shared fixtures for building PGM files on disk."""

from collections.abc import Callable
from pathlib import Path

import pytest


def pgm_bytes(width: int, height: int, maxval: int, pixels: bytes, comment: str = "") -> bytes:
    """Build a binary PGM file from raw pixel bytes."""
    comment_line = f"# {comment}\n" if comment else ""
    header = f"P5\n{comment_line}{width} {height}\n{maxval}\n".encode("ascii")
    return header + pixels


@pytest.fixture
def make_pgm(tmp_path: Path) -> Callable[..., Path]:
    """Write a PGM to a temporary file and return its path."""
    counter = 0

    def _make(width: int, height: int, maxval: int, pixels: bytes, comment: str = "") -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / f"image_{counter}.pgm"
        path.write_bytes(pgm_bytes(width, height, maxval, pixels, comment))
        return path

    return _make
