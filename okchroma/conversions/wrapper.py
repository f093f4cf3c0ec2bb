import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..types.format_type import FormatType, format_valid_dtypes, max_non_hue
from ..types.color_types import BASE_SPACE, ColorSpace, Scalar, ScalarVector, has_alpha
from ..utils.num_utils import clamp01
from .unorm import to_unit, from_unit
from .transfer import srgb_to_linear_srgb, linear_srgb_to_srgb
from .oklab import (
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    normalize_hue,
)

logger = logging.getLogger(__name__)

Triple = Tuple[float, float, float]

# The single canonical route every conversion follows, one hop at a time.
CONVERSION_CHAIN: Tuple[ColorSpace, ...] = (
    ColorSpace.SRGB,
    ColorSpace.LINEAR_SRGB,
    ColorSpace.OKLAB,
    ColorSpace.OKLCH,
)

CONVERT_STEPS: Dict[Tuple[ColorSpace, ColorSpace], Callable[[float, float, float], Triple]] = {
    (ColorSpace.SRGB, ColorSpace.LINEAR_SRGB): srgb_to_linear_srgb,
    (ColorSpace.LINEAR_SRGB, ColorSpace.SRGB): linear_srgb_to_srgb,
    (ColorSpace.LINEAR_SRGB, ColorSpace.OKLAB): linear_srgb_to_oklab,
    (ColorSpace.OKLAB, ColorSpace.LINEAR_SRGB): oklab_to_linear_srgb,
    (ColorSpace.OKLAB, ColorSpace.OKLCH): oklab_to_oklch,
    (ColorSpace.OKLCH, ColorSpace.OKLAB): oklch_to_oklab,
}

# Base spaces whose channels live in [0, 1]
UNIT_SPACES = {ColorSpace.SRGB, ColorSpace.LINEAR_SRGB}


def conversion_path(from_space: ColorSpace, to_space: ColorSpace) -> List[ColorSpace]:
    """Base spaces visited going from ``from_space`` to ``to_space``, both included."""
    start = CONVERSION_CHAIN.index(BASE_SPACE[ColorSpace(from_space)])
    stop = CONVERSION_CHAIN.index(BASE_SPACE[ColorSpace(to_space)])
    if stop >= start:
        return list(CONVERSION_CHAIN[start:stop + 1])
    return list(reversed(CONVERSION_CHAIN[stop:start + 1]))


def _check_format(space: ColorSpace, fmt: FormatType) -> None:
    if fmt == FormatType.INT and BASE_SPACE[space] != ColorSpace.SRGB:
        raise ValueError(f"{fmt.value} format is only defined for sRGB, not {space.value}")


def normalize(color: Sequence[Scalar], fmt: FormatType) -> Triple:
    if fmt == FormatType.INT:
        return to_unit(color[0]), to_unit(color[1]), to_unit(color[2])
    return float(color[0]), float(color[1]), float(color[2])


def scale(color: Triple, space: ColorSpace, fmt: FormatType) -> ScalarVector:
    if space in UNIT_SPACES:
        color = (clamp01(color[0]), clamp01(color[1]), clamp01(color[2]))
    elif space == ColorSpace.OKLAB:
        color = (clamp01(color[0]), color[1], color[2])
    elif space == ColorSpace.OKLCH:
        chroma = 0.0 if color[1] < 0.0 else color[1]
        color = (clamp01(color[0]), chroma, normalize_hue(color[2]))
    if fmt == FormatType.INT:
        return tuple(from_unit(c) for c in color)
    return color


def convert_alpha(alpha: Optional[Scalar], input_fmt: FormatType, output_fmt: FormatType) -> Optional[Scalar]:
    if alpha is None:
        return None
    if input_fmt == FormatType.INT:
        if isinstance(alpha, bool) or not isinstance(alpha, format_valid_dtypes[FormatType.INT]):
            raise TypeError(f"int format alpha must be an integer in 0..=255, got {alpha!r}")
        unit = to_unit(alpha)
    else:
        unit = clamp01(float(alpha))
    return from_unit(unit) if output_fmt == FormatType.INT else unit


def _convert_core(
    color: Sequence[Scalar],
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> Triple:
    path = conversion_path(from_space, to_space)
    logger.debug(
        "Converting %s/%s -> %s/%s via %s",
        from_space.value, input_fmt.value, to_space.value, output_fmt.value,
        " -> ".join(s.value for s in path),
    )
    # normalize -> walk the chain -> scale
    value = normalize(color, input_fmt)
    for src, dst in zip(path, path[1:]):
        value = CONVERT_STEPS[(src, dst)](*value)
    return value


def convert(
    color: Sequence[Scalar],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType | str = FormatType.FLOAT,
    output_type: FormatType | str = FormatType.FLOAT,
    alpha: Optional[Scalar] = None,
) -> ScalarVector:
    """
    Convert one color value between any two supported space/format pairs.

    Args:
        color: Channel values in ``from_space``/``input_type``, alpha last if present.
        from_space: Source color space.
        to_space: Target color space.
        input_type: Format of ``color``.
        output_type: Format of the result.
        alpha: Alpha for the result, in ``output_type``. Overrides the input alpha;
            when neither is available the format maximum is used. For the int
            format it must be an integer, otherwise ``TypeError`` is raised.

    Returns:
        Tuple of channel values in ``to_space``/``output_type``, clamped (hue
        wrapped) into the domain of the target space.
    """
    fs, ts = ColorSpace(from_space), ColorSpace(to_space)
    input_fmt, output_fmt = FormatType(input_type), FormatType(output_type)
    _check_format(fs, input_fmt)
    _check_format(ts, output_fmt)

    expected = 4 if has_alpha(fs) else 3
    if len(color) != expected:
        raise ValueError(f"{fs.value} expects {expected} channels, got {len(color)}")

    in_alpha = color[3] if expected == 4 else None
    base = _convert_core(color[:3], fs, ts, input_fmt, output_fmt)
    out = scale(base, BASE_SPACE[ts], output_fmt)

    if not has_alpha(ts):
        return tuple(out)
    if alpha is None:
        alpha = convert_alpha(in_alpha, input_fmt, output_fmt)
    else:
        alpha = convert_alpha(alpha, output_fmt, output_fmt)
    if alpha is None:
        alpha = max_non_hue[output_fmt]
    return tuple(out) + (alpha,)
