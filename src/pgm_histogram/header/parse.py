"""Parsing utilities for binary PGM headers."""

from typing import BinaryIO

from pgm_histogram.errors import HeaderError, UnsupportedDepthError
from pgm_histogram.header.types import MAX_8BIT_MAXVAL, PGM_MAGIC, PGM_MAX_MAXVAL, PGMHeader


def read_token(handle: BinaryIO) -> tuple[bytes, bytes]:
    """
    Read the next whitespace-delimited header token.

    Skips leading whitespace and '#' comments. Returns the token and the byte
    that terminated it (b"" at end of file).
    """
    ch = handle.read(1)
    while True:
        if not ch:
            raise HeaderError("unexpected end of file in header")
        if ch == b"#":
            handle.readline()
        elif not ch.isspace():
            break
        ch = handle.read(1)

    token = bytearray()
    while ch and not ch.isspace() and ch != b"#":
        token += ch
        ch = handle.read(1)
    return bytes(token), ch


def _parse_int(token: bytes, field: str) -> int:
    if not token.isdigit():
        raise HeaderError(f"{field} is not a decimal integer: {token!r}")
    return int(token)


def _read_field(handle: BinaryIO) -> bytes:
    token, terminator = read_token(handle)
    # A comment may follow a field directly.
    if terminator == b"#":
        handle.readline()
    return token


def read_header(handle: BinaryIO) -> PGMHeader:
    """Parse a P5 header from an open binary handle positioned at the start."""
    magic = handle.read(2)
    if magic != PGM_MAGIC:
        raise HeaderError(f"bad magic number {magic!r}, expected {PGM_MAGIC!r}")

    # The magic must be followed by whitespace or a comment.
    sep = handle.read(1)
    if not sep.isspace() and sep != b"#":
        raise HeaderError("missing whitespace after magic number")
    if sep == b"#":
        handle.readline()

    width_token = _read_field(handle)
    height_token = _read_field(handle)
    maxval_token, terminator = read_token(handle)

    width = _parse_int(width_token, "width")
    height = _parse_int(height_token, "height")
    maxval = _parse_int(maxval_token, "maxval")

    if not 0 < maxval <= PGM_MAX_MAXVAL:
        raise HeaderError(f"maxval must be in [1, {PGM_MAX_MAXVAL}], got {maxval}")

    # Exactly one whitespace byte separates maxval from the raster.
    if terminator == b"#":
        raise HeaderError("comment between maxval and pixel data")
    if not terminator and width * height > 0:
        raise HeaderError("no pixel data after header")

    return PGMHeader(handle.tell(), width, height, maxval)


def parse_header(path: str) -> PGMHeader:
    """
    Parse the header of the binary PGM file at path.

    Raises HeaderError if the file cannot be opened or is malformed.
    """
    try:
        with open(path, "rb") as handle:
            return read_header(handle)
    except OSError as exc:
        raise HeaderError(f"cannot read {path}: {exc.strerror or exc}") from exc


def check_depth(header: PGMHeader) -> None:
    """Reject images that need more than one byte per sample."""
    if header.maxval > MAX_8BIT_MAXVAL:
        raise UnsupportedDepthError(header.maxval)
