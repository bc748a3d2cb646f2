"""Single-pixel interop with Pillow images.

Only one pixel is read or written per call; walking an image is left to the
caller.
"""
from __future__ import annotations
from typing import Tuple
from PIL import Image
from .color import Color
from ..conversions import float_to_byte

WRITABLE_MODES = ("RGB", "RGBA", "L")
ALPHA_BANDS = ("A", "a")

def _has_alpha(image: Image.Image) -> bool:
    return any(band in ALPHA_BANDS for band in image.getbands()) or "transparency" in image.info

def pixel_from_image(image: Image.Image, xy: Tuple[int, int]) -> Color:
    """
    Read one pixel of a Pillow image as a Color.

    "RGB" pixels come back opaque, "RGBA" pixels carry their alpha, "L"
    pixels become the matching gray. Other modes that carry alpha ("LA",
    "PA", "RGBa", palettes with transparency) are read through "RGBA" so
    their opacity survives; everything else is read through "RGB".

    Args:
        image: Source image
        xy: (x, y) pixel coordinates

    Returns:
        Color in "rgb" space
    """
    if image.mode == "L":
        level = image.getpixel(xy)
        return Color.from_bytes(level, level, level)
    if image.mode != "RGBA" and _has_alpha(image):
        image = image.convert("RGBA")
    if image.mode == "RGBA":
        return Color.from_bytes(*image.getpixel(xy))
    if image.mode != "RGB":
        image = image.convert("RGB")
    return Color.from_pixel(image.getpixel(xy))

def put_pixel(image: Image.Image, xy: Tuple[int, int], color: Color) -> None:
    """
    Write a Color into one pixel of a Pillow image.

    Alpha is written only for "RGBA" images. "L" images receive the
    lightness of the color rounded to a byte.

    Raises:
        ValueError: if the image mode is not one of WRITABLE_MODES
    """
    if image.mode not in WRITABLE_MODES:
        raise ValueError(f"Cannot write pixels into mode {image.mode!r}, expected one of {WRITABLE_MODES}")

    if image.mode == "L":
        image.putpixel(xy, float_to_byte(color.value()))
        return

    r, g, b = (int(v) for v in color.to_pixel())
    if image.mode == "RGBA":
        image.putpixel(xy, (r, g, b, color.alpha_byte))
    else:
        image.putpixel(xy, (r, g, b))
