"""
Perceptual transforms: linear sRGB <-> OkLab <-> OkLch.

OkLab uses the D65 white point and the matrices published by Björn
Ottosson (https://bottosson.github.io/posts/oklab/). OkLch is the polar
form of OkLab; its hue is expressed in degrees, in ``[0, 360)``.
"""
import math
from typing import Tuple

import numpy as np

from ..constants import (
    ACHROMATIC_THRESHOLD,
    HUE_MAX,
    M1_OKLAB,
    M2_OKLAB,
    M1_INV_OKLAB,
    M2_INV_OKLAB,
)

Triple = Tuple[float, float, float]


def _as_triple(v: np.ndarray) -> Triple:
    return float(v[0]), float(v[1]), float(v[2])


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Triple:
    """Linear-light sRGB to OkLab ``(L, a, b)``."""
    lms = M1_OKLAB @ np.array((r, g, b), dtype=np.float64)
    return _as_triple(M2_OKLAB @ np.cbrt(lms))


def oklab_to_linear_srgb(lightness: float, a: float, b: float) -> Triple:
    """OkLab to linear-light sRGB. The result may fall outside ``[0, 1]``
    for colors outside the sRGB gamut; callers clamp on construction."""
    lms_ = M2_INV_OKLAB @ np.array((lightness, a, b), dtype=np.float64)
    return _as_triple(M1_INV_OKLAB @ (lms_ ** 3))


def normalize_hue(h: float) -> float:
    """Wrap an angle in degrees into ``[0, 360)``. Non-finite angles map to 0."""
    if not math.isfinite(h):
        return 0.0
    h = math.fmod(h, HUE_MAX)
    if h < 0.0:
        h += HUE_MAX
    # -tiny + 360 rounds to 360
    if h >= HUE_MAX:
        h = 0.0
    return h


def oklab_to_oklch(lightness: float, a: float, b: float) -> Triple:
    """
    OkLab to OkLch ``(L, C, h)``.

    Hue is undefined for achromatic colors; when chroma is at or below
    ``ACHROMATIC_THRESHOLD`` it is reported as ``0.0``.
    """
    chroma = math.hypot(a, b)
    if chroma <= ACHROMATIC_THRESHOLD:
        return lightness, chroma, 0.0
    return lightness, chroma, normalize_hue(math.degrees(math.atan2(b, a)))


def oklch_to_oklab(lightness: float, chroma: float, hue: float) -> Triple:
    rad = math.radians(hue)
    return lightness, chroma * math.cos(rad), chroma * math.sin(rad)


def oklab_squared_distance(lab1: Triple, lab2: Triple) -> float:
    return (
        (lab1[0] - lab2[0]) ** 2
        + (lab1[1] - lab2[1]) ** 2
        + (lab1[2] - lab2[2]) ** 2
    )


def oklab_distance(lab1: Triple, lab2: Triple) -> float:
    """Euclidean distance in OkLab (deltaEOK)."""
    return math.sqrt(oklab_squared_distance(lab1, lab2))
