from .dimension import channel_count
from .num_utils import min_, max_, clamp, clamp01, is_close

__all__ = ["channel_count", "min_", "max_", "clamp", "clamp01", "is_close"]
