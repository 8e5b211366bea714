"""Exception hierarchy for histogram computation."""

from pgm_histogram.partition.types import Span


class HistogramError(Exception):
    """Base exception for all pgm_histogram errors."""


class HeaderError(HistogramError):
    """Raised when a file is missing or does not start with a binary PGM header."""


class UnsupportedDepthError(HistogramError):
    """Raised when maxval needs more than one byte per sample."""

    def __init__(self, maxval: int):
        self.maxval = maxval
        super().__init__(f"Only 8-bit images (maxval <= 255) are supported, got maxval={maxval}")


class SpanReadError(HistogramError):
    """
    Raised in strict mode when a worker cannot read its whole span.

    Lenient mode never raises this: the worker keeps whatever it counted.
    """

    def __init__(self, span: Span, reason: str):
        self.span = span
        self.reason = reason
        super().__init__(
            f"Span {span.index} (offset={span.offset}, length={span.length}): {reason}"
        )


class HistogramStateError(HistogramError):
    """Raised when the global histogram is used outside its lifecycle."""
