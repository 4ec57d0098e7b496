"""Pillow bridge: PNG and other Pillow images to and from binimg."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .codec import MAX_DIMENSION, OVERSIZE_MODES, encode_bytes, load
from .errors import ConversionError
from .hsl import RGB_MODEL, RGBA, RGBModel
from .image import BinImage, Bounds


@dataclass
class ConvertOptions:
    """Options for oversize handling and hue packing."""

    oversize_mode: str = "truncate"  # truncate, crop, error, shrink
    strict_hue: bool = False


class PillowSource:
    """Expose a Pillow image as a color source for :func:`binimg.codec.encode`."""

    def __init__(self, image: Image.Image):
        self.image = image.convert("RGB")
        self._pixels = self.image.load()

    def bounds(self) -> Bounds:
        width, height = self.image.size
        return Bounds(0, 0, width, height)

    def at(self, x: int, y: int) -> RGBA:
        return RGB_MODEL.convert(self._pixels[x, y])

    def color_model(self) -> RGBModel:
        return RGB_MODEL


def shrink_to_fit(image: Image.Image) -> Image.Image:
    width, height = image.size
    if width <= MAX_DIMENSION and height <= MAX_DIMENSION:
        return image
    ratio = min(MAX_DIMENSION / width, MAX_DIMENSION / height)
    new_size = (max(1, int(width * ratio)), max(1, int(height * ratio)))
    return image.resize(new_size, Image.LANCZOS)


def convert_image_to_binimg(image: Image.Image, options: ConvertOptions | None = None) -> bytes:
    options = options or ConvertOptions()
    oversize_mode = options.oversize_mode

    image = image.convert("RGB")
    if oversize_mode == "shrink":
        image = shrink_to_fit(image)
        oversize_mode = "truncate"
    elif oversize_mode not in OVERSIZE_MODES:
        raise ConversionError(f"Unknown oversize mode: {options.oversize_mode}")

    return encode_bytes(PillowSource(image), oversize_mode=oversize_mode, strict=options.strict_hue)


def binimg_to_image(bin_image: BinImage) -> Image.Image:
    """Render a decoded image as an RGB Pillow image."""

    preview = Image.new("RGB", (bin_image.width, bin_image.height))
    if bin_image.width and bin_image.height:
        preview.frombytes(bin_image.to_rgb_bytes())
    return preview


def convert_png_to_binimg(path: str | Path, options: ConvertOptions | None = None) -> bytes:
    path = Path(path)
    try:
        with Image.open(path) as img:
            return convert_image_to_binimg(img, options)
    except FileNotFoundError as exc:
        raise ConversionError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to read PNG: {path}") from exc


def convert_binimg_to_png(path: str | Path) -> Image.Image:
    path = Path(path)
    try:
        bin_image = load(path)
    except FileNotFoundError as exc:
        raise ConversionError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to read binimg: {path}") from exc
    return binimg_to_image(bin_image)
