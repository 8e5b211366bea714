import logging
import os
import time
from collections.abc import Callable
from functools import partial
from pathlib import Path

from pgm_histogram.engine.execution import (
    HISTO_EXECUTOR_ENV,
    ExecutorClass,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from pgm_histogram.header import check_depth, parse_header
from pgm_histogram.output import write_histogram
from pgm_histogram.partition import CHUNK_SIZE, Span, partition_spans
from pgm_histogram.tally import GlobalHistogram, tally_span

logger = logging.getLogger(__name__)


def run_worker(
    histogram: GlobalHistogram,
    source_path: str,
    span: Span,
    chunk_size: int = CHUNK_SIZE,
    strict: bool = False,
) -> None:
    """Tally one span, then fold the result into the shared histogram."""
    tally = tally_span(source_path, span, histogram.maxval, chunk_size, strict)
    histogram.merge(tally)
    logger.debug(
        "Span %d merged: offset=%d, length=%d, read=%d",
        span.index,
        span.offset,
        span.length,
        tally.bytes_read,
    )


def dispatch_spans(
    worker: Callable[[Span], None],
    spans: list[Span],
    executor_class: ExecutorClass,
) -> None:
    """
    Run worker once per span and re-raise the first failure after all have joined.

    With a thread class every span gets its own thread, started once and
    joined once. Without one the spans run in order in the calling thread.
    """
    errors: list[Exception | None] = [None] * len(spans)

    def guarded(span: Span) -> None:
        try:
            worker(span)
        except Exception as exc:
            errors[span.index] = exc

    if executor_class is None:
        for span in spans:
            guarded(span)
    else:
        threads = [
            executor_class(target=guarded, args=(span,), name=f"span-{span.index}")
            for span in spans
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    for exc in errors:
        if exc is not None:
            raise exc


def compute_histogram(
    source_path: str,
    total_bytes: int,
    maxval: int,
    header_size: int,
    worker_count: int,
    *,
    strict: bool = False,
    chunk_size: int = CHUNK_SIZE,
) -> GlobalHistogram:
    """
    Count byte values in [header_size, header_size + total_bytes) of source_path.

    1. Partition the region into one span per worker
    2. Run one worker per span: read and tally, then merge under the lock
    3. Join every worker and freeze the histogram

    In lenient mode per-worker I/O failures only undercount. In strict mode
    they raise SpanReadError once all workers have joined.
    """
    total_start = time.perf_counter()
    worker_count = max(1, worker_count)

    histogram = GlobalHistogram(maxval)
    spans = partition_spans(total_bytes, worker_count, header_size)

    executor_class = get_executor_class()
    executor_name = describe_executor(executor_class)
    gil_status = "enabled" if is_gil_enabled() else "disabled"
    executor_override = os.environ.get(HISTO_EXECUTOR_ENV, "")
    override_info = f", {HISTO_EXECUTOR_ENV}={executor_override}" if executor_override else ""

    logger.info(
        f"Starting: file={Path(source_path).name}, bytes={total_bytes}, workers={worker_count}, "
        f"executor={executor_name}, GIL={gil_status}, strict={strict}{override_info}"
    )

    worker = partial(
        run_worker,
        histogram,
        source_path,
        chunk_size=chunk_size,
        strict=strict,
    )

    dispatch_spans(worker, spans, executor_class)

    histogram.freeze()

    stats = histogram.stats
    if stats.failed_spans or stats.short_spans:
        logger.warning(
            "%d of %d spans incomplete (%d failed, %d short); read %d of %d bytes",
            stats.failed_spans + stats.short_spans,
            len(spans),
            stats.failed_spans,
            stats.short_spans,
            stats.bytes_read,
            total_bytes,
        )
    if stats.out_of_range:
        logger.warning(
            "%d bytes exceeded maxval=%d and were not counted", stats.out_of_range, maxval
        )

    total_time = time.perf_counter() - total_start
    logger.info("Done: %d bytes counted in %.2fs", stats.bytes_read, total_time)
    return histogram


def histogram_image(
    image_path: str,
    worker_count: int,
    *,
    strict: bool = False,
    chunk_size: int = CHUNK_SIZE,
) -> GlobalHistogram:
    """Parse the PGM header of image_path and histogram its pixel data."""
    header = parse_header(image_path)
    check_depth(header)
    logger.debug(
        "Header: width=%d, height=%d, maxval=%d, data offset=%d",
        header.width,
        header.height,
        header.maxval,
        header.header_size,
    )

    available = Path(image_path).stat().st_size - header.header_size
    if available < header.data_bytes:
        logger.warning(
            "Pixel data is truncated: header declares %d bytes, file holds %d",
            header.data_bytes,
            max(available, 0),
        )

    return compute_histogram(
        image_path,
        header.data_bytes,
        header.maxval,
        header.header_size,
        worker_count,
        strict=strict,
        chunk_size=chunk_size,
    )


def main_compute(
    image_path: str,
    output_path: str,
    worker_count: int,
    *,
    strict: bool = False,
    chunk_size: int = CHUNK_SIZE,
) -> GlobalHistogram:
    """Main entry point that writes the histogram table to output_path."""
    histogram = histogram_image(image_path, worker_count, strict=strict, chunk_size=chunk_size)
    write_histogram(output_path, histogram.items())
    logger.info("Wrote %d rows to %s", len(histogram), output_path)
    return histogram
