from .color_types import Color, ColorSpace, ALPHA_SPACES, HUE_SPACES, has_alpha, is_hue_space
from .format_type import FormatType, max_non_hue

__all__ = [
    "Color",
    "ColorSpace",
    "ALPHA_SPACES",
    "HUE_SPACES",
    "has_alpha",
    "is_hue_space",
    "FormatType",
    "max_non_hue",
]
