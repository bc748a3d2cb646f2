from .format_type import FormatType, BYTE_MAX, HUE_360, SECTOR_WIDTH
from .color_types import ColorSpace, Channel, COLOR_SPACES, CHANNELS

__all__ = [
    "FormatType",
    "BYTE_MAX",
    "HUE_360",
    "SECTOR_WIDTH",
    "ColorSpace",
    "Channel",
    "COLOR_SPACES",
    "CHANNELS",
]
