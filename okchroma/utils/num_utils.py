from typing import TypeVar

T = TypeVar('T')


def min_(a: T, b: T) -> T:
    """Smaller of ``a`` and ``b``; returns ``b`` when they are unordered."""
    return a if a < b else b  # type: ignore[operator]


def max_(a: T, b: T) -> T:
    """Larger of ``a`` and ``b``; returns ``b`` when they are unordered."""
    return a if a > b else b  # type: ignore[operator]


def clamp(value: T, lo: T, hi: T) -> T:
    """
    Restrict ``value`` to ``[lo, hi]``.

    Each bound is checked with a single comparison, so an unordered value
    (float NaN) fails both checks and is returned unchanged.
    """
    if value < lo:  # type: ignore[operator]
        return lo
    if value > hi:  # type: ignore[operator]
        return hi
    return value


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def is_close(a: float, b: float, tol: float) -> bool:
    """Absolute-tolerance comparison."""
    return abs(a - b) <= tol
