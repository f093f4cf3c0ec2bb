"""okchroma: exact single-value conversions between sRGB, linear sRGB, OkLab and OkLch."""
import logging

from .colors import (
    ColorBase,
    Srgb8,
    Srgba8,
    Srgb32,
    Srgba32,
    LinearSrgb32,
    LinearSrgba32,
    Oklab32,
    Oklaba32,
    Oklch32,
    Oklcha32,
    color_convert,
    convert_color,
    get_color_class,
)
from .conversions import (
    to_unit,
    from_unit,
    linearize,
    nonlinearize,
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    convert,
)
from .constants import GAMMA, FLOAT_EPSILON
from .types import Color, ColorSpace, FormatType
from .utils import min_, max_, clamp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # contract and base
    "Color",
    "ColorBase",
    "ColorSpace",
    "FormatType",
    # color types
    "Srgb8",
    "Srgba8",
    "Srgb32",
    "Srgba32",
    "LinearSrgb32",
    "LinearSrgba32",
    "Oklab32",
    "Oklaba32",
    "Oklch32",
    "Oklcha32",
    "color_convert",
    "convert_color",
    "get_color_class",
    # conversions
    "to_unit",
    "from_unit",
    "linearize",
    "nonlinearize",
    "linear_srgb_to_oklab",
    "oklab_to_linear_srgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "convert",
    # numeric primitives
    "min_",
    "max_",
    "clamp",
    # constants
    "GAMMA",
    "FLOAT_EPSILON",
    "__version__",
]
