"""
OkLab, a perceptually uniform space with a D65 white point.

Channels:
    l: perceived lightness, ``[0, 1]``
    a: green/red axis, unbounded (roughly ``-0.4..0.4`` inside sRGB)
    b: blue/yellow axis, unbounded
"""
from typing import Callable, ClassVar, Optional, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..conversions.oklab import oklab_squared_distance, oklab_distance
from .color_base import ColorBase, build_registry


class PerceptualOps:
    """Perceptual distance for the OkLab family. Alpha is ignored."""
    __slots__ = ()

    to_oklab32: Callable[[], ColorBase]

    def squared_distance(self, other: ColorBase) -> float:
        return oklab_squared_distance(self.to_oklab32().value, other.to_oklab32().value)

    def distance(self, other: ColorBase) -> float:
        """deltaEOK: euclidean distance in OkLab."""
        return oklab_distance(self.to_oklab32().value, other.to_oklab32().value)


class Oklab32(PerceptualOps, ColorBase):
    __slots__ = ()
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.OKLAB
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "a", "b")
    minima:        ClassVar[Tuple[Optional[float], ...]] = (0.0, None, None)
    maxima:        ClassVar[Tuple[Optional[float], ...]] = (1.0, None, None)
    null_value:    ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)


class Oklaba32(PerceptualOps, ColorBase):
    __slots__ = ()
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = ColorSpace.OKLABA
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    # `a` is the green/red axis here, alpha is spelled out
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "a", "b", "alpha")
    minima:        ClassVar[Tuple[Optional[float], ...]] = (0.0, None, None, 0.0)
    maxima:        ClassVar[Tuple[Optional[float], ...]] = (1.0, None, None, 1.0)
    null_value:    ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)


oklab_tuple_to_class = build_registry(
    Oklab32,
    Oklaba32,
)
