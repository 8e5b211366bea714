"""Thread-safe accumulation of local tallies into the global histogram."""

import threading
from collections.abc import Iterator

import numpy as np

from pgm_histogram.errors import HistogramStateError
from pgm_histogram.tally.types import HistogramStats, LocalTally, check_maxval, zero_counts


class GlobalHistogram:
    """
    Shared histogram that workers fold their local tallies into.

    Lifecycle: created zeroed before dispatch, mutated only by merge() under
    the lock, frozen once every worker has joined. Reading counts is only
    allowed after freeze().
    """

    def __init__(self, maxval: int):
        check_maxval(maxval)
        self._maxval = maxval
        self._counts = zero_counts(maxval)
        self._lock = threading.Lock()
        self._merged_spans: set[int] = set()
        self._frozen = False
        self.stats = HistogramStats()

    @property
    def maxval(self) -> int:
        return self._maxval

    @property
    def frozen(self) -> bool:
        return self._frozen

    def merge(self, tally: LocalTally) -> None:
        """Add one worker's tally. Each span may be merged once."""
        if tally.counts is not None and len(tally.counts) != self._maxval + 1:
            raise HistogramStateError(
                f"tally for span {tally.span.index} has {len(tally.counts)} bins, "
                f"expected {self._maxval + 1}"
            )

        with self._lock:
            if self._frozen:
                raise HistogramStateError("cannot merge into a frozen histogram")
            if tally.span.index in self._merged_spans:
                raise HistogramStateError(f"span {tally.span.index} merged twice")
            self._merged_spans.add(tally.span.index)

            if tally.counts is not None:
                self._counts += tally.counts

            self.stats.workers_merged += 1
            self.stats.bytes_read += tally.bytes_read
            self.stats.out_of_range += tally.out_of_range
            if tally.error is not None:
                self.stats.failed_spans += 1
            elif not tally.complete:
                self.stats.short_spans += 1

    def freeze(self) -> None:
        """Mark the histogram read-only once all workers have joined."""
        with self._lock:
            self._frozen = True
            self._counts.flags.writeable = False

    def _require_frozen(self) -> None:
        if not self._frozen:
            raise HistogramStateError("histogram is still accepting merges")

    @property
    def counts(self) -> np.ndarray:
        """Read-only view of the counters, indexed by sample value."""
        self._require_frozen()
        return self._counts

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield (value, count) pairs in ascending value order."""
        self._require_frozen()
        for value, count in enumerate(self._counts.tolist()):
            yield value, count

    def total(self) -> int:
        self._require_frozen()
        return int(self._counts.sum())

    def __len__(self) -> int:
        return self._maxval + 1
