from __future__ import annotations
import logging
from typing import Any, Callable, ClassVar, Optional, Tuple, cast
from numpy import ndarray
import numpy as np

from ..constants import FLOAT_EPSILON, HUE_MAX
from ..conversions import convert as convert_value
from ..conversions.oklab import normalize_hue
from ..types.format_type import FormatType, default_format_dtypes, format_classes, format_valid_dtypes, max_non_hue
from ..types.color_types import ColorElement, ColorSpace, Scalar, ScalarVector, HUE_SPACES, ALPHA_SPACES, element_to_array
from ..utils import channel_count
from ..utils.num_utils import clamp

logger = logging.getLogger(__name__)

Bound = Optional[Scalar]

PERCEPTUAL_SPACES = {ColorSpace.OKLAB, ColorSpace.OKLABA, ColorSpace.OKLCH, ColorSpace.OKLCHA}


class ColorBase:
    """
    Immutable single color value tagged with a color space and a format.

    Subclasses only declare class-level metadata: channel names and count,
    per-channel bounds (``None`` for an unbounded side), the space/format
    pair, and which channel (if any) is a hue angle.
    """
    __slots__ = ('_value',)

    num_channels:  ClassVar[int]
    mode:          ClassVar[ColorSpace]
    format_type:   ClassVar[FormatType]
    channel_names: ClassVar[Tuple[str, ...]]
    minima:        ClassVar[Tuple[Bound, ...]]
    maxima:        ClassVar[Tuple[Bound, ...]]
    null_value:    ClassVar[ScalarVector]
    hue_index:     ClassVar[Optional[int]] = None

    # attached in .color to avoid an import cycle
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]
    without_alpha: Callable[[ColorBase], ColorBase]

    def __init__(self, *channels: Any) -> None:
        value: Any = channels[0] if len(channels) == 1 else channels

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = convert_value(
                    value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )

        # ---- Handle array input ----
        elif isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(
                    f"{type(self).__name__} expects a 1-D array, got shape {value.shape}"
                )
            value = value.tolist()

        if channel_count(value) != self.num_channels:
            raise ValueError(
                f"{type(self).__name__} expects {self.num_channels} channels "
                f"{self.channel_names!r}, got {value!r}"
            )

        # type enforcement
        valid_types = format_valid_dtypes[self.format_type]
        for v in cast(Tuple[Any, ...], value):
            if isinstance(v, bool) or not isinstance(v, valid_types):
                raise TypeError(
                    f"{type(self).__name__} with format {self.format_type.value} "
                    f"expects {self.format_type.value} channels, got {v!r}"
                )
        cast_to = format_classes[self.format_type]
        raw = tuple(cast_to(v) for v in cast(Tuple[Any, ...], value))

        clamped = tuple(self._fit_channel(i, v) for i, v in enumerate(raw))
        if logger.isEnabledFor(logging.DEBUG) and not _same(raw, clamped):
            logger.debug("%s clamped %r to %r", type(self).__name__, raw, clamped)

        object.__setattr__(self, '_value', clamped)

    @classmethod
    def _fit_channel(cls, index: int, v: Scalar) -> Scalar:
        if index == cls.hue_index:
            return normalize_hue(v)
        lo, hi = cls.minima[index], cls.maxima[index]
        if lo is not None and hi is not None:
            return clamp(v, lo, hi)
        if lo is not None and v < lo:
            return lo
        if hi is not None and v > hi:
            return hi
        return v

    # ------------------ IMMUTABILITY ------------------
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete {name}")

    def __copy__(self) -> ColorBase:
        return self

    def __deepcopy__(self, memo: dict) -> ColorBase:
        return self

    def __reduce__(self):
        return (type(self), (self._value,))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def alpha(self) -> Scalar:
        """Alpha channel, or full opacity for types without one."""
        if self.has_alpha:
            return self._value[-1]
        return max_non_hue[self.format_type]

    def __getattr__(self, name: str) -> Scalar:
        names = type(self).channel_names
        if name in names:
            return self._value[names.index(name)]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # ------------------ ARRAY / TUPLE CONTRACT ------------------
    def to_tuple(self) -> ScalarVector:
        return self._value

    @classmethod
    def from_tuple(cls, values: ScalarVector) -> ColorBase:
        return cls(tuple(values))

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=default_format_dtypes[self.format_type])

    @classmethod
    def from_array(cls, array: ColorElement) -> ColorBase:
        return cls(element_to_array(array))

    def to_array3(self) -> ndarray:
        """The three color channels, without alpha."""
        return self.to_array()[:3]

    def to_array4(self) -> ndarray:
        """The color channels plus alpha; full opacity if this type has none."""
        if self.has_alpha:
            return self.to_array()
        return np.array(self._value + (self.alpha,), dtype=default_format_dtypes[self.format_type])

    @classmethod
    def default(cls) -> ColorBase:
        return cls(cls.null_value)

    # ------------------ EQUALITY ------------------
    def is_close(self, other: ColorBase, tol: float = FLOAT_EPSILON) -> bool:
        """
        Channel-wise comparison within ``tol``.

        Hue channels are compared on the circle, so 359.99 and 0.0 are close.
        Only colors of the same class are comparable.
        """
        if type(other) is not type(self):
            return False
        for i, (a, b) in enumerate(zip(self._value, other._value)):
            diff = abs(a - b)
            if i == self.hue_index:
                diff = min(diff, HUE_MAX - diff)
            if not diff <= tol:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if type(other) is not type(self):
            return False
        if self.format_type == FormatType.INT:
            return self._value == other._value
        return self.is_close(other)

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # tolerance-based equality is not transitive, so float colors can't hash
        if cls.format_type != FormatType.INT:
            cls.__hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{type(self).__name__}({fields})"

    # ------------------ PERCEPTUAL SHORTCUTS ------------------
    def lightness(self) -> float:
        """Perceived lightness, the OkLab ``L`` channel."""
        if self.mode in PERCEPTUAL_SPACES:
            return float(self._value[0])
        return float(convert_value(
            self._value, self.mode, ColorSpace.OKLAB, self.format_type, FormatType.FLOAT
        )[0])

    def hue(self) -> float:
        """OkLch hue in degrees, ``[0, 360)``."""
        if self.has_hue:
            return float(self._value[2])
        return float(convert_value(
            self._value, self.mode, ColorSpace.OKLCH, self.format_type, FormatType.FLOAT
        )[2])

    # ------------------ NAMED CONVERSIONS ------------------
    def to_srgb8(self) -> ColorBase:
        return self.convert(ColorSpace.SRGB, FormatType.INT)

    def to_srgba8(self, alpha: Optional[int] = None) -> ColorBase:
        return self.convert(ColorSpace.SRGBA, FormatType.INT, alpha=alpha)

    def to_srgb32(self) -> ColorBase:
        return self.convert(ColorSpace.SRGB, FormatType.FLOAT)

    def to_srgba32(self, alpha: Optional[float] = None) -> ColorBase:
        return self.convert(ColorSpace.SRGBA, FormatType.FLOAT, alpha=alpha)

    def to_linear_srgb32(self) -> ColorBase:
        return self.convert(ColorSpace.LINEAR_SRGB, FormatType.FLOAT)

    def to_linear_srgba32(self, alpha: Optional[float] = None) -> ColorBase:
        return self.convert(ColorSpace.LINEAR_SRGBA, FormatType.FLOAT, alpha=alpha)

    def to_oklab32(self) -> ColorBase:
        return self.convert(ColorSpace.OKLAB, FormatType.FLOAT)

    def to_oklaba32(self, alpha: Optional[float] = None) -> ColorBase:
        return self.convert(ColorSpace.OKLABA, FormatType.FLOAT, alpha=alpha)

    def to_oklch32(self) -> ColorBase:
        return self.convert(ColorSpace.OKLCH, FormatType.FLOAT)

    def to_oklcha32(self, alpha: Optional[float] = None) -> ColorBase:
        return self.convert(ColorSpace.OKLCHA, FormatType.FLOAT, alpha=alpha)


def _same(a: ScalarVector, b: ScalarVector) -> bool:
    return all(x == y or (x != x and y != y) for x, y in zip(a, b))


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
