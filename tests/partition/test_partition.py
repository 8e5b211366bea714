"""Tests for the partition module."""

import pytest

from pgm_histogram.partition import Span, partition_spans


class TestPartitionSpans:
    """Test cases for partition_spans function."""

    def test_even_split(self) -> None:
        """Test that evenly divisible totals give equal spans."""
        spans = partition_spans(16, 4, start_offset=15)
        assert spans == [
            Span(0, 15, 4),
            Span(1, 19, 4),
            Span(2, 23, 4),
            Span(3, 27, 4),
        ]

    def test_last_span_takes_remainder(self) -> None:
        """Test that the remainder goes to the last span only."""
        spans = partition_spans(10, 3)
        assert [span.length for span in spans] == [3, 3, 4]
        assert spans[-1].end == 10

    def test_more_workers_than_bytes(self) -> None:
        """Test that surplus workers get empty spans, and the last gets every byte."""
        spans = partition_spans(3, 5, start_offset=7)
        assert [span.length for span in spans] == [0, 0, 0, 0, 3]
        assert [span.offset for span in spans] == [7, 7, 7, 7, 7]

    def test_zero_bytes(self) -> None:
        """Test that an empty region gives empty spans."""
        spans = partition_spans(0, 3, start_offset=11)
        assert len(spans) == 3
        assert all(span.length == 0 for span in spans)
        assert all(span.offset == 11 for span in spans)

    def test_single_worker_covers_region(self) -> None:
        spans = partition_spans(1000, 1, start_offset=50)
        assert spans == [Span(0, 50, 1000)]

    @pytest.mark.parametrize("total_bytes", [0, 1, 2, 7, 64, 1000, 1023, 4097])
    @pytest.mark.parametrize("worker_count", [1, 2, 3, 8, 13, 100])
    def test_spans_are_contiguous_and_cover_region(
        self, total_bytes: int, worker_count: int
    ) -> None:
        """Test that spans are disjoint, back-to-back and sum to total_bytes."""
        start = 17
        spans = partition_spans(total_bytes, worker_count, start_offset=start)

        assert len(spans) == worker_count
        assert [span.index for span in spans] == list(range(worker_count))
        assert spans[0].offset == start
        for prev, cur in zip(spans, spans[1:]):
            assert cur.offset == prev.end
        assert spans[-1].end == start + total_bytes
        assert sum(span.length for span in spans) == total_bytes
        assert all(span.length >= 0 for span in spans)

    def test_is_deterministic(self) -> None:
        """Test that re-partitioning gives the same spans."""
        assert partition_spans(12345, 7, 99) == partition_spans(12345, 7, 99)

    def test_rejects_negative_inputs(self) -> None:
        with pytest.raises(ValueError):
            partition_spans(-1, 2)
        with pytest.raises(ValueError):
            partition_spans(10, 2, start_offset=-5)
