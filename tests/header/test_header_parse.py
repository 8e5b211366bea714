"""Tests for PGM header parsing."""

import io

import pytest

from pgm_histogram.errors import HeaderError, UnsupportedDepthError
from pgm_histogram.header import PGMHeader, check_depth, parse_header, read_header


def test_read_header_minimal() -> None:
    data = b"P5\n4 4\n255\n" + bytes(16)
    header = read_header(io.BytesIO(data))
    assert header == PGMHeader(header_size=11, width=4, height=4, maxval=255)
    assert header.data_bytes == 16


def test_read_header_with_comments_and_spacing() -> None:
    data = b"P5 # made by hand\n  3\t# width\n2\n# depth next\n15 " + bytes(6)
    header = read_header(io.BytesIO(data))
    assert (header.width, header.height, header.maxval) == (3, 2, 15)
    assert data[header.header_size :] == bytes(6)


def test_read_header_comment_glued_to_field() -> None:
    """A comment may start right after a width or height token."""
    data = b"P5\n2#w\n2# h\n255\n" + bytes(4)
    header = read_header(io.BytesIO(data))
    assert (header.width, header.height, header.maxval) == (2, 2, 255)
    assert data[header.header_size :] == bytes(4)


def test_read_header_single_whitespace_before_data() -> None:
    """A pixel byte that looks like whitespace belongs to the raster."""
    data = b"P5\n1 1\n255\n\n"
    header = read_header(io.BytesIO(data))
    assert header.header_size == len(data) - 1


def test_zero_area_image_has_no_data() -> None:
    header = read_header(io.BytesIO(b"P5\n0 0\n255"))
    assert header.data_bytes == 0


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"P2\n4 4\n255\n",
        b"P6\n4 4\n255\n",
        b"P54 4\n255\n",
        b"P5\n4\n",
        b"P5\nfour 4\n255\n",
        b"P5\n4 -4\n255\n",
        b"P5\n4 4\n0\n",
        b"P5\n4 4\n70000\n",
        b"P5\n4 4\n255#comment\n",
        b"P5\n4 4\n255",
    ],
)
def test_read_header_rejects_malformed(data: bytes) -> None:
    with pytest.raises(HeaderError):
        read_header(io.BytesIO(data))


def test_parse_header_missing_file(tmp_path) -> None:
    with pytest.raises(HeaderError, match="cannot read"):
        parse_header(str(tmp_path / "missing.pgm"))


def test_parse_header_from_file(make_pgm) -> None:
    path = make_pgm(2, 3, 200, bytes(6), comment="test")
    header = parse_header(str(path))
    assert (header.width, header.height, header.maxval) == (2, 3, 200)
    assert path.read_bytes()[header.header_size :] == bytes(6)


def test_check_depth() -> None:
    check_depth(PGMHeader(11, 1, 1, 255))
    with pytest.raises(UnsupportedDepthError) as excinfo:
        check_depth(PGMHeader(13, 1, 1, 65535))
    assert excinfo.value.maxval == 65535
