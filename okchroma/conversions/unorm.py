import math

from ..constants import UNORM8_MAX
from ..utils.num_utils import clamp


def to_unit(byte: int) -> float:
    """Map an 8-bit channel (0..=255) onto ``[0.0, 1.0]``."""
    return clamp(int(byte), 0, UNORM8_MAX) / float(UNORM8_MAX)


def from_unit(value: float) -> int:
    """
    Quantize a normalized channel to 8 bits, rounding half up.

    Lossy: ``to_unit(from_unit(f))`` only recovers ``f`` to within 1/510.
    NaN maps to 0.
    """
    value = float(value)
    if math.isnan(value):
        return 0
    return int(math.floor(clamp(value, 0.0, 1.0) * UNORM8_MAX + 0.5))
