from pgm_histogram.tally.merge import GlobalHistogram
from pgm_histogram.tally.tally import count_chunk, tally_span
from pgm_histogram.tally.types import HistogramStats, LocalTally

__all__ = ["GlobalHistogram", "HistogramStats", "LocalTally", "count_chunk", "tally_span"]
