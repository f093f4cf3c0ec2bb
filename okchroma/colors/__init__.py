"""
okchroma Color Classes
======================

Immutable single-value color representations, one class per
(color space, format) pair.

Features
--------
- Immutable instances (assignment after construction raises)
- Channel values clamped into their domain on construction
- Conversion between any two classes along the canonical
  sRGB <-> linear sRGB <-> OkLab <-> OkLch path
- Array/tuple round-tripping (the ``Color`` contract)
- Alpha variants as distinct classes

Usage
-----
>>> from okchroma.colors import Srgb8, Srgba8
>>>
>>> red = Srgb8(255, 0, 0)
>>> red.to_linear_srgb32()
LinearSrgb32(r=1.0, g=0.0, b=0.0)
>>> red.to_oklab32()
Oklab32(l=0.627955..., a=0.224863..., b=0.125846...)
>>>
>>> rgba = Srgba8.from_array([10, 20, 30, 255])
>>> rgba.to_tuple()
(10, 20, 30, 255)
>>> rgba.with_alpha(128).alpha
128

Color Classes
-------------
    - Srgb8 / Srgba8: gamma-encoded sRGB, 8-bit channels (0-255)
    - Srgb32 / Srgba32: gamma-encoded sRGB, float channels (0.0-1.0)
    - LinearSrgb32 / LinearSrgba32: linear-light sRGB, float channels (0.0-1.0)
    - Oklab32 / Oklaba32: OkLab, L in 0.0-1.0, a/b unbounded
    - Oklch32 / Oklcha32: OkLch, L in 0.0-1.0, C >= 0, h in degrees [0, 360)

Notes
-----
- Int-backed colors compare exactly and are hashable; float-backed colors
  compare within ``FLOAT_EPSILON`` and are not hashable.
- Alpha is straight (not premultiplied) and is never gamma-encoded.
"""

from .color_base import ColorBase
from .srgb import Srgb8, Srgba8, Srgb32, Srgba32
from .linear_srgb import LinearSrgb32, LinearSrgba32
from .oklab import Oklab32, Oklaba32
from .oklch import Oklch32, Oklcha32
from .color import color_convert, convert_color, get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase',
    'Srgb8',
    'Srgba8',
    'Srgb32',
    'Srgba32',
    'LinearSrgb32',
    'LinearSrgba32',
    'Oklab32',
    'Oklaba32',
    'Oklch32',
    'Oklcha32',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_tuple_to_class',
]
