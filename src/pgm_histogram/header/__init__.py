from pgm_histogram.header.parse import check_depth, parse_header, read_header
from pgm_histogram.header.types import MAX_8BIT_MAXVAL, PGMHeader

__all__ = ["MAX_8BIT_MAXVAL", "PGMHeader", "check_depth", "parse_header", "read_header"]
