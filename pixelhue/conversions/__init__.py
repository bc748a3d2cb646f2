"""
pixelhue Color Space Conversions
================================

Scalar conversions between RGB and the packed HSL layout used by
``pixelhue.Color``, plus channel precision helpers.

Conversion Functions
-------------------

Extrema:
    max_channel(r, g, b)
    min_channel(r, g, b)
        Greatest / least primary channel, ties resolved red, green, blue

RGB → HSL:
    unit_rgb_to_hue(r, g, b)
        Hue in [0, 1)
    unit_rgb_to_saturation(r, g, b)
        Channel spread, max - min
    unit_rgb_to_lightness(r, g, b)
        (max + min) / 2
    unit_rgb_to_hsl(r, g, b)
        (hue, saturation, lightness)
    rgb_to_packed_hsl(r, g, b)
        (hue, lightness, saturation), the order the color slots store them
    fold_hue(hue)
        Maps a rounded-up full turn (1.0) back to 0.0

HSL → RGB:
    packed_hsl_to_rgb(hue, lightness, saturation)
        Inverse of rgb_to_packed_hsl, driven by the HUE_SECTORS table

Precision:
    byte_to_float(value)
    float_to_byte(value)

Examples
--------
>>> from pixelhue.conversions import rgb_to_packed_hsl, packed_hsl_to_rgb
>>> h, l, s = rgb_to_packed_hsl(1.0, 0.5, 0.0)
>>> r, g, b = packed_hsl_to_rgb(h, l, s)
"""

from .extrema import max_channel, min_channel

from .to_hsl import (
    complements,
    fold_hue,
    unit_rgb_to_hue,
    unit_rgb_to_saturation,
    unit_rgb_to_lightness,
    unit_rgb_to_hsl,
    rgb_to_packed_hsl,
)

from .to_rgb import HueSector, HUE_SECTORS, hue_sector, packed_hsl_to_rgb

from .numbers import byte_to_float, float_to_byte

from ..types.format_type import FormatType

__all__ = [
    # Extrema
    'max_channel',
    'min_channel',

    # RGB → HSL
    'complements',
    'fold_hue',
    'unit_rgb_to_hue',
    'unit_rgb_to_saturation',
    'unit_rgb_to_lightness',
    'unit_rgb_to_hsl',
    'rgb_to_packed_hsl',

    # HSL → RGB
    'HueSector',
    'HUE_SECTORS',
    'hue_sector',
    'packed_hsl_to_rgb',

    # Precision
    'byte_to_float',
    'float_to_byte',

    # Types
    'FormatType',
]
