"""Reading and writing binimg streams."""

# Reference: binimg file layout (no magic number, no checksum)
# Offset | Size        | Notes
# -------|-------------|---------------------------------------------
# 0      | 1           | width (0-255)
# 1      | 1           | height (0-255)
# 2      | width*height| pixel bytes, row-major, top-left origin

from __future__ import annotations

import io
import warnings
from pathlib import Path
from typing import BinaryIO

from .errors import ConversionError, ShortReadError, ShortWriteError
from .hsl import HSL_MODEL
from .image import BinImage, ColorSource

HEADER_SIZE = 2
MAX_DIMENSION = 255
OVERSIZE_MODES = ("truncate", "crop", "error")


def _read_once(stream: BinaryIO, size: int, what: str) -> bytes:
    # One read call; a short result is an error, not a reason to retry.
    data = stream.read(size)
    if data is None:
        data = b""
    if len(data) < size:
        raise ShortReadError(what, size, len(data))
    return bytes(data)


def _write_once(stream: BinaryIO, data: bytes) -> None:
    written = stream.write(data)
    if written is not None and written < len(data):
        raise ShortWriteError(len(data), written)


def decode(stream: BinaryIO) -> BinImage:
    width, height = _read_once(stream, HEADER_SIZE, "header")
    pixels = _read_once(stream, width * height, "pixel data")
    return BinImage(width, height, pixels)


def encode_bytes(
    source: ColorSource,
    oversize_mode: str = "truncate",
    strict: bool = False,
) -> bytes:
    """Quantize ``source`` and return the complete file contents.

    ``oversize_mode`` decides what happens when the source is wider or taller
    than 255 pixels:

    * ``truncate``: the header is clamped to 255 but every source pixel is
      still written, so the header no longer describes the payload. A
      ``RuntimeWarning`` is issued.
    * ``crop``: only the top-left 255x255 area is written.
    * ``error``: raise :class:`ConversionError`.
    """

    if oversize_mode not in OVERSIZE_MODES:
        raise ConversionError(f"Unknown oversize mode: {oversize_mode}")

    b = source.bounds()
    width = min(b.dx, MAX_DIMENSION)
    height = min(b.dy, MAX_DIMENSION)
    max_x, max_y = b.max_x, b.max_y

    if (width, height) != (b.dx, b.dy):
        if oversize_mode == "error":
            raise ConversionError(
                f"Image is {b.dx}x{b.dy}; the format is limited to {MAX_DIMENSION}x{MAX_DIMENSION}"
            )
        if oversize_mode == "crop":
            max_x = b.min_x + width
            max_y = b.min_y + height
        else:
            warnings.warn(
                f"Image is {b.dx}x{b.dy}; header records {width}x{height} "
                f"but {b.dx * b.dy} pixels are written",
                RuntimeWarning,
                stacklevel=2,
            )

    data = bytearray([width, height])
    # Always the HSL model, whatever source.color_model() reports.
    for y in range(b.min_y, max_y):
        for x in range(b.min_x, max_x):
            data.append(HSL_MODEL.convert(source.at(x, y)).to_byte(strict=strict))
    return bytes(data)


def encode(
    stream: BinaryIO,
    source: ColorSource,
    oversize_mode: str = "truncate",
    strict: bool = False,
) -> None:
    """Quantize ``source`` and write header and payload in a single write."""

    _write_once(stream, encode_bytes(source, oversize_mode=oversize_mode, strict=strict))


def encode_raw(stream: BinaryIO, image: BinImage) -> None:
    """Write ``image`` as-is, without converting its pixels again."""

    _write_once(stream, bytes([image.width, image.height]) + bytes(image.pixels))


def decode_bytes(data: bytes) -> BinImage:
    return decode(io.BytesIO(data))


def load(path: str | Path) -> BinImage:
    with open(Path(path), "rb") as infile:
        return decode(infile)


def save(
    path: str | Path,
    source: ColorSource,
    oversize_mode: str = "truncate",
    strict: bool = False,
) -> Path:
    path = Path(path)
    data = encode_bytes(source, oversize_mode=oversize_mode, strict=strict)
    with open(path, "wb") as outfile:
        _write_once(outfile, data)
    return path
