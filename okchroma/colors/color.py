from __future__ import annotations
from typing import Optional
from .color_base import ColorBase
from .srgb import srgb_tuple_to_class
from .linear_srgb import linear_srgb_tuple_to_class
from .oklab import oklab_tuple_to_class
from .oklch import oklch_tuple_to_class
from ..types.format_type import FormatType
from ..types.color_types import ALPHA_SPACE, BASE_SPACE, ColorSpace, Scalar
from ..conversions import convert

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **srgb_tuple_to_class,
    **linear_srgb_tuple_to_class,
    **oklab_tuple_to_class,
    **oklch_tuple_to_class,
}


def get_color_class(color_space: ColorSpace | str, format_type: FormatType | str) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((ColorSpace(color_space), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(
    self: ColorBase,
    to_space: ColorSpace | str | None = None,
    to_format: FormatType | str | None = None,
    alpha: Optional[Scalar] = None,
) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space. Defaults to the current one.
        to_format: Target format. Defaults to the current format when the
            target supports it (only sRGB has an int format), float otherwise.
        alpha: Alpha for the result, in the target format. Only used when the
            target carries alpha; defaults to this color's alpha.

    Returns:
        New ColorBase instance in the target space/format
    """
    space = ColorSpace(to_space or self.mode)
    if to_format is None:
        to_format = self.format_type
        if (space, to_format) not in unified_tuple_to_class:
            to_format = FormatType.FLOAT
    cls = get_color_class(space, to_format)

    result = convert(
        self.value,
        from_space=self.mode,
        to_space=space,
        input_type=self.format_type,
        output_type=cls.format_type,
        alpha=alpha,
    )
    return cls(result)


def with_alpha(self: ColorBase, alpha: Optional[Scalar] = None) -> ColorBase:
    """
    Return the alpha-carrying variant of this color with the given alpha.

    Args:
        alpha: Alpha value in this color's format. If None, keeps the current
            alpha, or uses full opacity when this color has none.

    Returns:
        New ColorBase instance with alpha channel.
    """
    if alpha is None:
        alpha = self.alpha
    cls = get_color_class(ALPHA_SPACE[BASE_SPACE[self.mode]], self.format_type)
    return cls(tuple(self.value[:3]) + (alpha,))


def without_alpha(self: ColorBase) -> ColorBase:
    """Return the non-alpha variant of this color; alpha is dropped."""
    if not self.has_alpha:
        return self
    cls = get_color_class(BASE_SPACE[self.mode], self.format_type)
    return cls(tuple(self.value[:3]))


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha
ColorBase.without_alpha = without_alpha


def convert_color(value, color_space: ColorSpace | str, format_type: FormatType | str) -> ColorBase:
    """Build a color of the requested space/format from raw channels or another color."""
    color_class = get_color_class(color_space, format_type)
    if isinstance(value, ColorBase):
        return value.convert(color_space, format_type)
    return color_class(value)

