"""Per-worker counting of sample values over one span."""

import logging

import numpy as np

from pgm_histogram.errors import SpanReadError
from pgm_histogram.partition.types import CHUNK_SIZE, Span
from pgm_histogram.tally.reader import iter_span_chunks, open_span
from pgm_histogram.tally.types import VALUE_LIMIT, LocalTally, check_maxval, zero_counts

logger = logging.getLogger(__name__)


def count_chunk(counts: np.ndarray, chunk: bytes) -> int:
    """
    Add the byte values of chunk into counts.

    Returns how many bytes held a value beyond the end of counts; those are
    not counted.
    """
    binned = np.bincount(np.frombuffer(chunk, dtype=np.uint8), minlength=VALUE_LIMIT)
    size = len(counts)
    counts += binned[:size]
    return int(binned[size:].sum())


def _recover(tally: LocalTally, reason: str, strict: bool, exc: BaseException) -> LocalTally:
    if strict:
        raise SpanReadError(tally.span, reason) from exc
    logger.warning(
        "Span %d: %s; keeping %d of %d bytes",
        tally.span.index,
        reason,
        tally.bytes_read,
        tally.span.length,
    )
    tally.error = reason
    return tally


def tally_span(
    source_path: str,
    span: Span,
    maxval: int,
    chunk_size: int = CHUNK_SIZE,
    strict: bool = False,
) -> LocalTally:
    """
    Count sample values in one span of source_path.

    The worker opens its own handle, seeks to span.offset and reads at most
    span.length bytes in chunks of chunk_size.

    Lenient mode (default) never raises for I/O: a failed open or seek yields
    an all-zero tally, a failed or short read keeps the partial counts, and a
    failed allocation yields a tally that contributes nothing. Strict mode
    raises SpanReadError for all of these.
    """
    check_maxval(maxval)

    try:
        counts = zero_counts(maxval)
    except MemoryError as exc:
        return _recover(LocalTally(span, None), "cannot allocate tally", strict, exc)

    tally = LocalTally(span, counts)
    if span.length == 0:
        return tally

    try:
        handle = open_span(source_path, span.offset)
    except OSError as exc:
        return _recover(tally, f"cannot open or seek: {exc.strerror or exc}", strict, exc)

    try:
        with handle:
            for chunk in iter_span_chunks(handle, span.length, chunk_size):
                tally.out_of_range += count_chunk(counts, chunk)
                tally.bytes_read += len(chunk)
    except OSError as exc:
        return _recover(tally, f"read failed: {exc.strerror or exc}", strict, exc)

    if tally.bytes_read < span.length:
        reason = "source ended early"
        if strict:
            raise SpanReadError(span, reason)
        logger.warning(
            "Span %d: %s after %d of %d bytes",
            span.index,
            reason,
            tally.bytes_read,
            span.length,
        )

    return tally
