"""
pixelhue - Floating-Point Color Values with In-Place HSL
========================================================

A small color value type for image pipelines that need to work in a
perceptual space (hue rotation, saturation and lightness edits) without
making a second copy of every pixel.

Key Features
------------
- RGBA color stored as four 32-bit floats
- Read-only hue, saturation and lightness derivation
- In-place RGB ↔ packed HSL conversion on the same three slots
- Byte ↔ float channel precision conversion
- RGB vector normalization
- Single-pixel interop with numpy pixel vectors and Pillow images

Quick Start
-----------
>>> from pixelhue import Color
>>>
>>> orange = Color.from_bytes(255, 128, 0)
>>> orange.hue()            # ~0.0837, i.e. ~30°
>>>
>>> # Rotate the hue by half a turn, in place
>>> orange.rgb_to_hsl()
>>> orange.red = (orange.red + 0.5) % 1.0
>>> orange.hsl_to_rgb()
>>> orange.to_pixel()       # array([  0, 127, 255], dtype=uint8)

Modules
-------
- colors: the Color class and Pillow pixel interop
- conversions: scalar RGB/HSL conversion functions
- types: format and color space definitions
"""

from .colors.color import Color, ColorSpaceError
from .colors.pixel import pixel_from_image, put_pixel

from .conversions import (
    max_channel, min_channel,
    unit_rgb_to_hue, unit_rgb_to_saturation, unit_rgb_to_lightness,
    unit_rgb_to_hsl,
    rgb_to_packed_hsl, packed_hsl_to_rgb,
    HUE_SECTORS,
    byte_to_float, float_to_byte,
)

from .types import FormatType, ColorSpace

from boundednumbers.functions import clamp, cyclic_wrap_float

__version__ = "1.0.0"

__all__ = [
    # Color class
    "Color", "ColorSpaceError",

    # Pillow interop
    "pixel_from_image", "put_pixel",

    # Conversions
    "max_channel", "min_channel",
    "unit_rgb_to_hue", "unit_rgb_to_saturation", "unit_rgb_to_lightness",
    "unit_rgb_to_hsl",
    "rgb_to_packed_hsl", "packed_hsl_to_rgb",
    "HUE_SECTORS",
    "byte_to_float", "float_to_byte",

    # Types
    "FormatType", "ColorSpace",

    # Utility functions
    "clamp", "cyclic_wrap_float",

    # Version
    "__version__",
]
