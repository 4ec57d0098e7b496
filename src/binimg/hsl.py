"""One-byte quantized HSL colors and their conversion to and from RGB."""

# Reference: pixel byte layout
# Bits  | Chromatic (bits 3-0 != 0)          | Grayscale (bits 3-0 == 0)
# ------|------------------------------------|-------------------------------
# 7-4   | index into LEGAL_ANGLES (hue)      | lightness level, L = n / 15
# 3-0   | lightness level, L = n / 17        | 0 (grayscale flag)
#
# Chromatic pixels always have S = 1, grayscale pixels S = 0 and H = 0.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .errors import InvalidHueError

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

# Hue angles (degrees) the format can store. The high nibble of a chromatic
# pixel is an index into this table.
LEGAL_ANGLES: Tuple[int, ...] = (
    0,
    21,
    41,
    62,
    83,
    103,
    124,
    145,
    165,
    186,
    207,
    227,
    248,
    269,
    289,
    310,
)

CHROMATIC_LEVELS = 17
GRAYSCALE_LEVELS = 15

# The quantizer snaps every lightness, chromatic or not, to n / 17.
LIGHTNESS_LEVELS: Tuple[float, ...] = tuple(
    i / CHROMATIC_LEVELS for i in range(1, CHROMATIC_LEVELS)
)

# k / 15 * 15 can land just below k.
_FLOOR_TOLERANCE = 1e-9


@dataclass(frozen=True)
class QuantizedHSL:
    """A color that fits in one pixel byte."""

    hue: float = 0.0
    saturation: float = 0.0
    lightness: float = 0.0

    @classmethod
    def from_byte(cls, value: int) -> "QuantizedHSL":
        level = value & 0x0F
        index = (value & 0xF0) >> 4
        if level == 0:
            return cls(lightness=index / GRAYSCALE_LEVELS)
        # Matches LEGAL_ANGLES[index] for every index.
        hue = float(round(index * LEGAL_ANGLES[-1] / 15))
        return cls(hue=hue, saturation=1.0, lightness=level / CHROMATIC_LEVELS)

    def to_byte(self, strict: bool = False) -> int:
        """Pack this color into a pixel byte.

        A chromatic hue that is not one of ``LEGAL_ANGLES`` leaves the hue
        index at 0 unless ``strict`` is set, in which case
        :class:`InvalidHueError` is raised.
        """

        if self.saturation == 1:
            value = round(self.lightness * CHROMATIC_LEVELS) & 0x0F
            for index, angle in enumerate(LEGAL_ANGLES):
                if angle == self.hue:
                    return value | (index << 4)
            if strict:
                raise InvalidHueError(f"Hue {self.hue} is not one of the legal angles")
            return value

        level = math.floor(self.lightness * GRAYSCALE_LEVELS + _FLOOR_TOLERANCE)
        return (level & 0x0F) << 4

    @property
    def is_grayscale(self) -> bool:
        return self.saturation == 0

    def rgb(self) -> RGB:
        return hsl_to_rgb(self)

    def rgba(self) -> RGBA:
        r, g, b = hsl_to_rgb(self)
        return r, g, b, 0xFF

    def rgba16(self) -> RGBA:
        """16-bit channels, each 8-bit value replicated into both bytes."""

        r, g, b = hsl_to_rgb(self)
        return r | (r << 8), g | (g << 8), b | (b << 8), 0xFFFF


def _nearest(value: float, candidates: Sequence[float]) -> float:
    """Return the candidate closest to ``value``; the first one wins ties."""

    best = candidates[0]
    best_dist = abs(value - best)
    for candidate in candidates[1:]:
        dist = abs(value - candidate)
        if dist < best_dist:
            best = candidate
            best_dist = dist
    return best


def rgb_to_hsl(r: int, g: int, b: int) -> QuantizedHSL:
    """Map an 8-bit RGB color to the nearest representable quantized HSL.

    Hue snaps to the closest entry of ``LEGAL_ANGLES`` by plain absolute
    difference, so hues just under 360 go to 310 rather than wrapping to 0.
    Achromatic input keeps hue and saturation at 0 but its lightness is still
    snapped to the n / 17 scale, while the byte encoding of grayscale uses
    n / 15.
    """

    red = r / 255.0
    green = g / 255.0
    blue = b / 255.0

    cmax = max(red, green, blue)
    cmin = min(red, green, blue)
    delta = cmax - cmin
    lightness = _nearest((cmax + cmin) / 2.0, LIGHTNESS_LEVELS)

    if delta == 0:
        return QuantizedHSL(hue=0.0, saturation=0.0, lightness=lightness)

    if cmax == red:
        hue = 60 * (((green - blue) / delta) % 6)
    elif cmax == green:
        hue = 60 * ((blue - red) / delta + 2)
    else:
        hue = 60 * ((red - green) / delta + 4)
    if hue < 0:
        hue += 360.0

    return QuantizedHSL(hue=_nearest(hue, LEGAL_ANGLES), saturation=1.0, lightness=lightness)


def hsl_to_rgb(hsl: QuantizedHSL) -> RGB:
    h, s, l = hsl.hue, hsl.saturation, hsl.lightness
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c + m, x + m, m
    elif h < 120:
        r, g, b = x + m, c + m, m
    elif h < 180:
        r, g, b = m, c + m, x + m
    elif h < 240:
        r, g, b = m, x + m, c + m
    elif h < 300:
        r, g, b = x + m, m, c + m
    else:
        r, g, b = c + m, m, x + m

    return int(r * 255), int(g * 255), int(b * 255)


ColorLike = Union[QuantizedHSL, int, Sequence[int]]


def _rgb_channels(color: ColorLike) -> RGB:
    if isinstance(color, QuantizedHSL):
        return color.rgb()
    if isinstance(color, int):
        # single-band sources such as Pillow "L" images
        return color, color, color
    r, g, b = color[:3]
    return int(r), int(g), int(b)


class HSLModel:
    """Color model pairing :func:`rgb_to_hsl` with :func:`hsl_to_rgb`."""

    def convert(self, color: ColorLike) -> QuantizedHSL:
        return rgb_to_hsl(*_rgb_channels(color))

    def to_rgb(self, hsl: QuantizedHSL) -> RGB:
        return hsl_to_rgb(hsl)


class RGBModel:
    """Color model for plain 8-bit RGBA colors."""

    def convert(self, color: ColorLike) -> RGBA:
        r, g, b = _rgb_channels(color)
        alpha = 0xFF
        if not isinstance(color, (QuantizedHSL, int)) and len(color) > 3:
            alpha = int(color[3])
        return r, g, b, alpha

    def to_rgb(self, color: ColorLike) -> RGB:
        return _rgb_channels(color)


HSL_MODEL = HSLModel()
RGB_MODEL = RGBModel()
