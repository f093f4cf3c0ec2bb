"""Gamma-encoded sRGB, 8-bit and float, with and without alpha."""
from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class Srgb8(ColorBase):
    """Gamma-encoded sRGB with 3 × 8-bit channels. Suited for final output buffers."""
    __slots__ = ()
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.SRGB
    format_type:   ClassVar[FormatType] = FormatType.INT
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    minima:        ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value:    ClassVar[Tuple[int, int, int]] = (0, 0, 0)


class Srgba8(ColorBase):
    """Gamma-encoded sRGB plus straight alpha, 4 × 8-bit channels."""
    __slots__ = ()
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = ColorSpace.SRGBA
    format_type:   ClassVar[FormatType] = FormatType.INT
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    minima:        ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    maxima:        ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value:    ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)


class Srgb32(ColorBase):
    """Gamma-encoded sRGB with 3 float channels in ``[0, 1]``."""
    __slots__ = ()
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = ColorSpace.SRGB
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    minima:        ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    null_value:    ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)


class Srgba32(ColorBase):
    """Gamma-encoded sRGB plus straight alpha, 4 float channels in ``[0, 1]``."""
    __slots__ = ()
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = ColorSpace.SRGBA
    format_type:   ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    minima:        ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value:    ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)


srgb_tuple_to_class = build_registry(
    Srgb8,
    Srgba8,
    Srgb32,
    Srgba32,
)
