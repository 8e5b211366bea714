"""Shared type definitions for tallying and merging."""

from dataclasses import dataclass

import numpy as np

from pgm_histogram.errors import UnsupportedDepthError
from pgm_histogram.header.types import MAX_8BIT_MAXVAL
from pgm_histogram.partition.types import Span

# Number of distinct byte values.
VALUE_LIMIT = MAX_8BIT_MAXVAL + 1

COUNT_DTYPE = np.int64


def check_maxval(maxval: int) -> None:
    """Reject value domains that do not fit in one byte."""
    if maxval < 0:
        raise ValueError(f"maxval must be non-negative, got {maxval}")
    if maxval > MAX_8BIT_MAXVAL:
        raise UnsupportedDepthError(maxval)


def zero_counts(maxval: int) -> np.ndarray:
    """Allocate a zeroed dense counter array indexed by sample value."""
    return np.zeros(maxval + 1, dtype=COUNT_DTYPE)


@dataclass(slots=True)
class LocalTally:
    """
    Frequency table produced by one worker for its span.

    counts is None when the worker could not allocate its table and so
    contributes nothing. error describes a recovered failure, if any.
    """

    span: Span
    counts: np.ndarray | None
    bytes_read: int = 0
    out_of_range: int = 0
    error: str | None = None

    @property
    def complete(self) -> bool:
        return self.error is None and self.bytes_read == self.span.length


@dataclass
class HistogramStats:
    """Statistics accumulated while merging local tallies."""

    workers_merged: int = 0
    bytes_read: int = 0
    failed_spans: int = 0
    short_spans: int = 0
    out_of_range: int = 0
