"""Loading of uncompressed 24-bit, single-plane bitmap images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

# Bytes from the start of the file to the width field.
_WIDTH_OFFSET = 18
# Bytes between the bits-per-pixel field and the pixel data.
_AFTER_BPP = 24


class BitmapError(ValueError):
    """Raised when a file is not a bitmap this loader can read."""


@dataclass
class Image:
    """An image of ``size_x`` by ``size_y`` pixels stored as RGB bytes."""

    size_x: int
    size_y: int
    data: bytes


def load_bitmap(path: Union[str, Path]) -> Image:
    """Read a 24-bit bitmap and return its pixels converted from BGR to RGB.

    Rows are read as one block of ``width * height * 3`` bytes, with no row
    padding.  Raises FileNotFoundError if the file is missing and
    BitmapError if the header or data do not fit a 24-bit, one-plane image.
    """
    with open(path, "rb") as f:
        header = f.read(_WIDTH_OFFSET + 12)
        if len(header) < _WIDTH_OFFSET + 12:
            raise BitmapError(f"{path}: header is truncated")
        width, height, planes, bpp = struct.unpack_from(
            "<IIHH", header, _WIDTH_OFFSET
        )
        if planes != 1:
            raise BitmapError(f"planes from {path} is not 1: {planes}")
        if bpp != 24:
            raise BitmapError(f"bpp from {path} is not 24: {bpp}")
        skipped = f.read(_AFTER_BPP)
        size = width * height * 3
        raw = f.read(size)
    if len(skipped) < _AFTER_BPP or len(raw) < size:
        raise BitmapError(f"error reading image data from {path}")

    rgb = bytearray(raw)
    rgb[0::3], rgb[2::3] = raw[2::3], raw[0::3]
    return Image(size_x=width, size_y=height, data=bytes(rgb))