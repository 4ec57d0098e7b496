"""binimg: one-byte-per-pixel images in a quantized HSL color space.

Each pixel packs a hue-table index and a lightness level (or a gray level)
into a single byte. Files are a 2-byte width/height header followed by the
pixel bytes. The codec can be used directly on streams, or through the Pillow
bridge and the CLI (``python -m binimg``).
"""

from .codec import decode, decode_bytes, encode, encode_bytes, encode_raw, load, save
from .converter import (
    ConvertOptions,
    PillowSource,
    binimg_to_image,
    convert_binimg_to_png,
    convert_image_to_binimg,
    convert_png_to_binimg,
)
from .errors import (
    BinImgError,
    ConversionError,
    InvalidHueError,
    ShortReadError,
    ShortWriteError,
)
from .hsl import (
    HSL_MODEL,
    LEGAL_ANGLES,
    RGB_MODEL,
    HSLModel,
    QuantizedHSL,
    RGBModel,
    hsl_to_rgb,
    rgb_to_hsl,
)
from .image import BinImage, Bounds, ColorSource

__all__ = [
    "BinImage",
    "BinImgError",
    "Bounds",
    "ColorSource",
    "ConversionError",
    "ConvertOptions",
    "HSLModel",
    "HSL_MODEL",
    "InvalidHueError",
    "LEGAL_ANGLES",
    "PillowSource",
    "QuantizedHSL",
    "RGBModel",
    "RGB_MODEL",
    "ShortReadError",
    "ShortWriteError",
    "binimg_to_image",
    "convert_binimg_to_png",
    "convert_image_to_binimg",
    "convert_png_to_binimg",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "encode_raw",
    "hsl_to_rgb",
    "load",
    "rgb_to_hsl",
    "save",
]
