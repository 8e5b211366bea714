"""Byte-range partitioning of the pixel-data region."""

from pgm_histogram.partition.types import Span


def partition_spans(total_bytes: int, worker_count: int, start_offset: int = 0) -> list[Span]:
    """
    Split total_bytes into worker_count back-to-back spans starting at start_offset.

    Every span gets total_bytes // worker_count bytes and the last one also
    takes the remainder. When total_bytes < worker_count the leading spans are
    empty. worker_count is expected to be clamped to >= 1 by the caller.
    """
    if total_bytes < 0:
        raise ValueError(f"total_bytes must be non-negative, got {total_bytes}")
    if start_offset < 0:
        raise ValueError(f"start_offset must be non-negative, got {start_offset}")

    base, remainder = divmod(total_bytes, worker_count)

    spans: list[Span] = []
    offset = start_offset
    for index in range(worker_count):
        length = base + remainder if index == worker_count - 1 else base
        spans.append(Span(index, offset, length))
        offset += length

    return spans
