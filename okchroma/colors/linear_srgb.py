from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class LinearSrgb32(ColorBase):
    """Linear-light sRGB, 3 float channels in ``[0, 1]``. Suited for physical calculations."""
    __slots__ = ()
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.LINEAR_SRGB
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    minima:        ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    null_value:    ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)


class LinearSrgba32(ColorBase):
    __slots__ = ()
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = ColorSpace.LINEAR_SRGBA
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    minima:        ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value:    ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)


linear_srgb_tuple_to_class = build_registry(
    LinearSrgb32,
    LinearSrgba32,
)
