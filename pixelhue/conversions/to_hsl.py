from ..types.format_type import HUE_360, SECTOR_WIDTH
from .extrema import max_channel, min_channel

def complements(r: float, g: float, b: float, max_c: float, delta: float) -> tuple[float, float, float]:
    """
    Distance of each channel from the maximum, as a fraction of delta.

    Args:
        r, g, b: RGB components
        max_c: Greatest of r, g, b
        delta: max_c minus the least of r, g, b

    Returns:
        Tuple[float, float, float]: (Rc, Gc, Bc), all zero for a flat gray
    """
    if delta == 0:
        return 0.0, 0.0, 0.0
    return (max_c - r) / delta, (max_c - g) / delta, (max_c - b) / delta

def fold_hue(hue: float) -> float:
    """
    Map a full turn back onto 0 so hue stays in [0, 1).

    A hue a hair below 360° can round up to exactly 1.0, in float64 after the
    division or in float32 when stored.
    """
    if hue >= 1.0:
        return hue - 1.0
    return hue

def _hue_from_complements(r: float, g: float, max_c: float, rc: float, gc: float, bc: float) -> float:
    if r == max_c:
        h = SECTOR_WIDTH * (bc - gc)
    elif g == max_c:
        h = SECTOR_WIDTH * (2.0 + rc - bc)
    else:
        h = SECTOR_WIDTH * (4.0 + gc - rc)

    # Magenta to red comes out negative.
    if h < 0:
        h = h + HUE_360

    return fold_hue(h / HUE_360)

def unit_rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Position of an RGB color on the hue wheel.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        float: Hue in [0, 1), where 1.0 would be a full turn (360°)
    """
    max_c = max_channel(r, g, b)
    min_c = min_channel(r, g, b)
    rc, gc, bc = complements(r, g, b, max_c, max_c - min_c)
    return _hue_from_complements(r, g, max_c, rc, gc, bc)

def unit_rgb_to_saturation(r: float, g: float, b: float) -> float:
    """Chromatic intensity: max minus min, with no lightness correction."""
    return max_channel(r, g, b) - min_channel(r, g, b)

def unit_rgb_to_lightness(r: float, g: float, b: float) -> float:
    """Midpoint of the greatest and least channel."""
    return (max_channel(r, g, b) + min_channel(r, g, b)) / 2.0

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to (hue, saturation, lightness) without packing.

    Saturation here is the plain channel spread (max - min), not the
    textbook HSL saturation that divides by ``1 - |2L - 1|``.

    Args:
        r, g, b: RGB components in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,1], saturation [0,1], lightness [0,1])
    """
    hue, lightness, saturation = rgb_to_packed_hsl(r, g, b)
    return hue, saturation, lightness

def rgb_to_packed_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL in packed slot order.

    The result is laid out for writing straight back into the red, green and
    blue slots of the same color: hue, then lightness, then saturation.
    ``packed_hsl_to_rgb`` reads this exact order.

    Args:
        r, g, b: RGB components in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue, lightness, saturation)
    """
    max_c = max_channel(r, g, b)
    min_c = min_channel(r, g, b)
    delta = max_c - min_c

    rc, gc, bc = complements(r, g, b, max_c, delta)

    lightness = (max_c + min_c) / 2.0
    saturation = delta
    hue = _hue_from_complements(r, g, max_c, rc, gc, bc)

    return hue, lightness, saturation
