"""Process-wide numeric constants.

All values here are created once at import time and never mutated. The
OkLab matrices are exposed as read-only numpy arrays.
"""
import numpy as np

# sRGB transfer curve
GAMMA = 2.4
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.0 + SRGB_OFFSET
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308

# 8-bit unit normalization
UNORM8_MAX = 255

# Hue, in degrees
HUE_MAX = 360.0

# Chroma at or below this is treated as achromatic (hue forced to 0).
ACHROMATIC_THRESHOLD = 1e-7

# Default tolerance for float channel equality
FLOAT_EPSILON = 1e-5


def _frozen(rows) -> np.ndarray:
    m = np.array(rows, dtype=np.float64)
    m.flags.writeable = False
    return m


# Linear sRGB -> LMS
M1_OKLAB = _frozen([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# Cube-rooted LMS -> OkLab
M2_OKLAB = _frozen([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# Inverses are computed from the forward matrices, exact to double precision.

# OkLab -> cube-rooted LMS
M2_INV_OKLAB = _frozen(np.linalg.inv(M2_OKLAB))

# LMS -> linear sRGB
M1_INV_OKLAB = _frozen(np.linalg.inv(M1_OKLAB))
