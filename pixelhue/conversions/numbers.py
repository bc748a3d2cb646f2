import math
import numpy as np
from boundednumbers.functions import clamp
from ..types.format_type import BYTE_MAX, FormatType, format_valid_dtypes

def byte_to_float(value: int) -> np.float32:
    """
    Convert a single-byte channel value to a unit float.

    Args:
        value: Channel byte in [0, 255]

    Returns:
        np.float32: value / 255

    Raises:
        TypeError: if value is not an integer (bools included)
        ValueError: if value is outside [0, 255]
    """
    if isinstance(value, bool) or not isinstance(value, format_valid_dtypes[FormatType.INT]):
        raise TypeError(f"Byte channel must be an integer, got {type(value).__name__}")
    value = int(value)
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"Byte channel must be in [0, {BYTE_MAX}], got {value}")
    return np.float32(value) / np.float32(BYTE_MAX)

def float_to_byte(value: float) -> int:
    """
    Convert a unit float channel to a single byte.

    Rounds half away from zero (like C ``round``) and clamps the result to
    [0, 255]. Out-of-range floats therefore saturate instead of wrapping.

    Args:
        value: Channel value, nominally in [0, 1]

    Returns:
        int: round(value * 255), clamped to [0, 255]

    Raises:
        ValueError: if value is NaN
    """
    value = float(value)
    if math.isnan(value):
        raise ValueError("Cannot convert a NaN channel to a byte")
    if math.isinf(value):
        return BYTE_MAX if value > 0 else 0
    scaled = math.floor(value * BYTE_MAX + 0.5) if value >= 0 else -math.floor(-value * BYTE_MAX + 0.5)
    return int(clamp(scaled, 0, BYTE_MAX))
