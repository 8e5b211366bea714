"""Shared constants and span type for partitioning."""

from dataclasses import dataclass

# Bytes read per call in each worker. Bounds memory, not correctness.
CHUNK_SIZE = 1024


@dataclass(frozen=True, slots=True)
class Span:
    """Contiguous byte range of the source assigned to one worker."""

    index: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length
