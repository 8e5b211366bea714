from pgm_histogram.partition.partition import partition_spans
from pgm_histogram.partition.types import CHUNK_SIZE, Span

__all__ = ["CHUNK_SIZE", "Span", "partition_spans"]
