"""
pixelhue Color Classes
======================

A single mutable RGBA color whose three primary slots can be switched between
RGB and packed HSL in place.

Usage
-----
>>> from pixelhue.colors import Color
>>>
>>> color = Color.from_bytes(255, 128, 0)
>>> color.hue(), color.saturation(), color.value()
>>>
>>> # Reinterpret the same slots as HSL, edit, and flip back
>>> color.rgb_to_hsl()
>>> color.red = (color.red + 0.5) % 1.0
>>> color.hsl_to_rgb()

Notes
-----
- Channels are stored as float32, nominally in [0, 1]
- After rgb_to_hsl the slots hold (hue, lightness, saturation)
- Equality ignores alpha
"""

from .color import Color, ColorSpaceError
from .pixel import pixel_from_image, put_pixel

__all__ = ['Color', 'ColorSpaceError', 'pixel_from_image', 'put_pixel']
