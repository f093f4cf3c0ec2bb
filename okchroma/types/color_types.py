from __future__ import annotations
from enum import Enum
from typing import Protocol, Sequence, Tuple, Union, runtime_checkable
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Sequence[Scalar], ndarray]


class ColorSpace(str, Enum):
    SRGB = "srgb"
    SRGBA = "srgba"
    LINEAR_SRGB = "linear_srgb"
    LINEAR_SRGBA = "linear_srgba"
    OKLAB = "oklab"
    OKLABA = "oklaba"
    OKLCH = "oklch"
    OKLCHA = "oklcha"


ALPHA_SPACES = {
    ColorSpace.SRGBA,
    ColorSpace.LINEAR_SRGBA,
    ColorSpace.OKLABA,
    ColorSpace.OKLCHA,
}
HUE_SPACES = {ColorSpace.OKLCH, ColorSpace.OKLCHA}

# alpha variant -> base space
BASE_SPACE = {
    ColorSpace.SRGB: ColorSpace.SRGB,
    ColorSpace.SRGBA: ColorSpace.SRGB,
    ColorSpace.LINEAR_SRGB: ColorSpace.LINEAR_SRGB,
    ColorSpace.LINEAR_SRGBA: ColorSpace.LINEAR_SRGB,
    ColorSpace.OKLAB: ColorSpace.OKLAB,
    ColorSpace.OKLABA: ColorSpace.OKLAB,
    ColorSpace.OKLCH: ColorSpace.OKLCH,
    ColorSpace.OKLCHA: ColorSpace.OKLCH,
}
# base space -> alpha variant
ALPHA_SPACE = {
    base: space for space, base in BASE_SPACE.items() if space in ALPHA_SPACES
}


def has_alpha(color_space: ColorSpace | str) -> bool:
    return ColorSpace(color_space) in ALPHA_SPACES


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space carries a hue channel (OkLch).

    Args:
        color_space: Color space name or enum member
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace(color_space) in HUE_SPACES


def element_to_array(element: ColorElement) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    return np.array(element)


@runtime_checkable
class Color(Protocol):
    """
    Capability set shared by every color representation.

    Adapters for third-party color types bind against these four
    operations only.
    """

    def to_array(self) -> ndarray: ...

    @classmethod
    def from_array(cls, array: ColorElement) -> Color: ...

    def to_tuple(self) -> ScalarVector: ...

    @classmethod
    def from_tuple(cls, values: ScalarVector) -> Color: ...
