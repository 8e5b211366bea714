"""PGM Histogram - Concurrent byte-value histograms of 8-bit grayscale images."""

from pgm_histogram.engine import compute_histogram, histogram_image, main_compute

__all__ = ["compute_histogram", "histogram_image", "main_compute"]
