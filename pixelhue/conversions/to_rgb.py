from typing import NamedTuple
from ..types.format_type import HUE_360, SECTOR_WIDTH

RED, GREEN, BLUE = 0, 1, 2

class HueSector(NamedTuple):
    """
    One 60° slice of the hue wheel.

    Attributes:
        base: Start of the slice in degrees
        rising: Whether the interpolated channel grows across the slice
        max_channel: Index of the channel that takes the maximum
        min_channel: Index of the channel that takes the minimum
        mid_channel: Index of the interpolated channel
    """
    base: float
    rising: bool
    max_channel: int
    min_channel: int
    mid_channel: int

# Red, yellow, green, cyan, blue, magenta, back to red.
HUE_SECTORS: tuple[HueSector, ...] = (
    HueSector(0.0,   True,  RED,   BLUE,  GREEN),
    HueSector(60.0,  False, GREEN, BLUE,  RED),
    HueSector(120.0, True,  GREEN, RED,   BLUE),
    HueSector(180.0, False, BLUE,  RED,   GREEN),
    HueSector(240.0, True,  BLUE,  GREEN, RED),
    HueSector(300.0, False, RED,   GREEN, BLUE),
)

def hue_sector(h_degrees: float) -> int:
    """
    Index into HUE_SECTORS for a hue in degrees.

    Hues below 0, at or past 300 and NaN all land in the last sector.
    """
    last = len(HUE_SECTORS) - 1
    if 0 <= h_degrees < HUE_SECTORS[last].base:
        return int(h_degrees // SECTOR_WIDTH)
    return last

def packed_hsl_to_rgb(hue: float, lightness: float, saturation: float) -> tuple[float, float, float]:
    """
    Convert packed HSL back to RGB.

    Inverse of ``rgb_to_packed_hsl``: the arguments come in the order the
    red, green and blue slots store them.

    Args:
        hue: Hue in [0, 1]
        lightness: Lightness in [0, 1]
        saturation: Channel spread (max - min) in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b)
    """
    min_c = (2 * lightness - saturation) * 0.5
    max_c = saturation + min_c

    # No saturation, no color.
    if saturation == 0:
        return lightness, lightness, lightness

    h = hue * HUE_360
    sector = HUE_SECTORS[hue_sector(h)]

    t = (h - sector.base) / SECTOR_WIDTH
    if not sector.rising:
        t = 1 - t

    rgb = [min_c, min_c, min_c]
    rgb[sector.max_channel] = max_c
    rgb[sector.mid_channel] = (t * saturation) + min_c
    return rgb[RED], rgb[GREEN], rgb[BLUE]
