"""
OkLch, the polar form of OkLab.

Channels:
    l: perceived lightness, same axis as OkLab, ``[0, 1]``
    c: chroma, ``>= 0`` (in practice below 0.4 inside sRGB)
    h: hue angle in degrees, wrapped into ``[0, 360)``
       0° points along +a (purplish red), 90° along +b (mustard yellow),
       180° along -a (greenish cyan), 270° along -b (sky blue).
       Achromatic colors report a hue of 0.
"""
from typing import ClassVar, Optional, Tuple
from ..constants import HUE_MAX
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry
from .oklab import PerceptualOps


class Oklch32(PerceptualOps, ColorBase):
    __slots__ = ()
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.OKLCH
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    minima:        ClassVar[Tuple[Optional[float], ...]] = (0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[Optional[float], ...]] = (1.0, None, HUE_MAX)
    null_value:    ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    hue_index:     ClassVar[Optional[int]] = 2


class Oklcha32(PerceptualOps, ColorBase):
    __slots__ = ()
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = ColorSpace.OKLCHA
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "c", "h", "alpha")
    minima:        ClassVar[Tuple[Optional[float], ...]] = (0.0, 0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[Optional[float], ...]] = (1.0, None, HUE_MAX, 1.0)
    null_value:    ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    hue_index:     ClassVar[Optional[int]] = 2


oklch_tuple_to_class = build_registry(
    Oklch32,
    Oklcha32,
)
