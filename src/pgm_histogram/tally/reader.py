"""Chunked sequential reads over one span of a file."""

from collections.abc import Iterator
from typing import BinaryIO

from pgm_histogram.partition.types import CHUNK_SIZE


def iter_span_chunks(
    handle: BinaryIO,
    length: int,
    chunk_size: int = CHUNK_SIZE,
) -> Iterator[bytes]:
    """
    Yield up to length bytes from the current handle position in chunks.

    Stops early, without error, when the source is exhausted. Read errors
    propagate to the caller.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    remaining = length
    while remaining > 0:
        chunk = handle.read(min(chunk_size, remaining))
        if not chunk:
            return
        remaining -= len(chunk)
        yield chunk


def open_span(source_path: str, offset: int) -> BinaryIO:
    """Open a private read handle on source_path positioned at offset."""
    handle = open(source_path, "rb")  # noqa: SIM115
    try:
        handle.seek(offset)
    except OSError:
        handle.close()
        raise
    return handle
