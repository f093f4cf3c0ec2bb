from typing import Any
from collections.abc import Sized


def channel_count(element: Any) -> int:
    """
    Number of channels in a raw color value.

    Text is never a channel sequence and counts as 0, like None.
    Any other sized value counts its items; a bare scalar counts as 1.
    """
    if element is None or isinstance(element, (str, bytes)):
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1
