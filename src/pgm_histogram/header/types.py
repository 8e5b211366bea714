"""Shared constants and header metadata for PGM parsing."""

from dataclasses import dataclass

PGM_MAGIC = b"P5"

# Largest maxval the netpbm format allows (two bytes per sample).
PGM_MAX_MAXVAL = 65535

# Largest maxval that fits one byte per sample.
MAX_8BIT_MAXVAL = 255


@dataclass(frozen=True, slots=True)
class PGMHeader:
    """Layout of a binary PGM file: where pixel data starts and its dimensions."""

    header_size: int
    width: int
    height: int
    maxval: int

    @property
    def data_bytes(self) -> int:
        """Size of the pixel-data region for one byte per sample."""
        return self.width * self.height
