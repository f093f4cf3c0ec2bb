"""
sRGB transfer curve.

Both directions clamp their input into ``[0, 1]`` before applying the
curve, so results always stay inside the channel domain. They act on
color channels only; alpha is linear and is never passed through here.
"""
from ..constants import (
    GAMMA,
    SRGB_SLOPE,
    SRGB_OFFSET,
    SRGB_DIVISOR,
    SRGB_TO_LINEAR_TH,
    LINEAR_TO_SRGB_TH,
)
from ..utils.num_utils import clamp01


def linearize(c: float, gamma: float = GAMMA) -> float:
    """Convert a gamma-encoded sRGB channel (0..1) to linear light."""
    c = clamp01(float(c))
    if c <= SRGB_TO_LINEAR_TH:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_DIVISOR) ** gamma


def nonlinearize(c: float, gamma: float = GAMMA) -> float:
    """Convert a linear-light channel (0..1) to gamma-encoded sRGB."""
    c = clamp01(float(c))
    if c <= LINEAR_TO_SRGB_TH:
        return c * SRGB_SLOPE
    return clamp01(SRGB_DIVISOR * (c ** (1.0 / gamma)) - SRGB_OFFSET)


def srgb_to_linear_srgb(r: float, g: float, b: float, gamma: float = GAMMA) -> tuple[float, float, float]:
    return linearize(r, gamma), linearize(g, gamma), linearize(b, gamma)


def linear_srgb_to_srgb(r: float, g: float, b: float, gamma: float = GAMMA) -> tuple[float, float, float]:
    return nonlinearize(r, gamma), nonlinearize(g, gamma), nonlinearize(b, gamma)
