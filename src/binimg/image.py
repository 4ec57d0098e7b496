"""In-memory binimg images and the color-source protocol used for encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .hsl import HSL_MODEL, HSLModel, QuantizedHSL


@dataclass(frozen=True)
class Bounds:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def dx(self) -> int:
        return self.max_x - self.min_x

    @property
    def dy(self) -> int:
        return self.max_y - self.min_y


class ColorSource(Protocol):
    """Anything that can be encoded: bounds, per-pixel colors and a color model."""

    def bounds(self) -> Bounds: ...

    def at(self, x: int, y: int) -> Any: ...

    def color_model(self) -> Any: ...


@dataclass(frozen=True)
class BinImage:
    """A decoded image: dimensions plus one pixel byte per pixel, row-major.

    ``at`` does not check bounds; coordinates outside the image are a caller
    error.
    """

    width: int
    height: int
    pixels: bytes

    def at(self, x: int, y: int) -> QuantizedHSL:
        return QuantizedHSL.from_byte(self.pixels[x + y * self.width])

    def bounds(self) -> Bounds:
        return Bounds(0, 0, self.width, self.height)

    def color_model(self) -> HSLModel:
        return HSL_MODEL

    def to_rgb_bytes(self) -> bytes:
        # 256 distinct pixel values, so convert each once
        lut = [QuantizedHSL.from_byte(value).rgb() for value in range(256)]
        data = bytearray()
        for value in self.pixels:
            data.extend(lut[value])
        return bytes(data)
