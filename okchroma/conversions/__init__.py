"""
okchroma Color Space Conversions
================================

Scalar conversion functions between gamma-encoded sRGB, linear sRGB,
OkLab and OkLch, plus the 8-bit unit normalization they share.

Conversion Functions
-------------------

8-bit <-> unit float:
    to_unit(byte), from_unit(value)

Transfer curve (per channel, clamped to [0, 1]):
    linearize(c, gamma=2.4)
        Gamma-encoded sRGB -> linear light
    nonlinearize(c, gamma=2.4)
        Linear light -> gamma-encoded sRGB
    srgb_to_linear_srgb(r, g, b), linear_srgb_to_srgb(r, g, b)

Perceptual transforms:
    linear_srgb_to_oklab(r, g, b), oklab_to_linear_srgb(L, a, b)
    oklab_to_oklch(L, a, b), oklch_to_oklab(L, C, h)
        Hue in degrees, [0, 360); zero chroma yields hue 0.

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type, alpha=None)
        Routes any pair of spaces along srgb <-> linear_srgb <-> oklab <-> oklch.

Examples
--------
>>> from okchroma.conversions import convert
>>> convert((255, 0, 0), "srgb", "oklab", "int", "float")
(0.627955..., 0.224863..., 0.125846...)
"""

from .unorm import to_unit, from_unit
from .transfer import linearize, nonlinearize, srgb_to_linear_srgb, linear_srgb_to_srgb
from .oklab import (
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    normalize_hue,
    oklab_squared_distance,
    oklab_distance,
)
from .wrapper import convert, conversion_path, CONVERSION_CHAIN

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    # 8-bit normalization
    'to_unit',
    'from_unit',

    # transfer curve
    'linearize',
    'nonlinearize',
    'srgb_to_linear_srgb',
    'linear_srgb_to_srgb',

    # perceptual
    'linear_srgb_to_oklab',
    'oklab_to_linear_srgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'normalize_hue',
    'oklab_squared_distance',
    'oklab_distance',

    # high-level API
    'convert',
    'conversion_path',
    'CONVERSION_CHAIN',

    # types
    'ColorSpace',
    'FormatType',
]
