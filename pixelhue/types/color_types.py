from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
FloatTriple = Tuple[float, float, float]
ByteTriple = Tuple[int, int, int]
PixelLike = Union[ByteTriple, ndarray]
ColorSpace = Literal["rgb", "hsl"]
Channel = Literal["red", "green", "blue", "alpha"]

COLOR_SPACES = ("rgb", "hsl")
CHANNELS = ("red", "green", "blue", "alpha")

# Meaning of the three primary slots in each space. Alpha is never reused.
SLOT_NAMES: dict[str, Tuple[str, str, str]] = {
    "rgb": ("Red", "Green", "Blue"),
    "hsl": ("Hue", "Lightness", "Saturation"),
}

def validate_space(space: str) -> ColorSpace:
    """
    Normalize and check a color space name.

    Args:
        space: Color space string, case-insensitive
    Returns:
        The lower-cased space name
    Raises:
        ValueError: if the space is not "rgb" or "hsl"
    """
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {space!r}, expected one of {COLOR_SPACES}")
    return space  # type: ignore[return-value]

def validate_channel(channel: str) -> Channel:
    channel = channel.lower()
    if channel not in CHANNELS:
        raise ValueError(f"Unknown channel: {channel!r}, expected one of {CHANNELS}")
    return channel  # type: ignore[return-value]

def to_float32(value: Scalar) -> np.float32:
    """Store a channel value at 32-bit precision."""
    return np.float32(value)
