import math
import numpy as np
import pytest

from okchroma.conversions import (
    to_unit,
    srgb_to_linear_srgb,
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    normalize_hue,
    oklab_distance,
    oklab_squared_distance,
)
from okchroma.constants import M1_OKLAB, M2_OKLAB, M1_INV_OKLAB, M2_INV_OKLAB
from ..samples import samples_srgb8_oklab, samples_srgb8_oklch, oklab_tolerance, hue_tolerance


def _srgb8_to_oklab(rgb):
    return linear_srgb_to_oklab(*srgb_to_linear_srgb(*(to_unit(c) for c in rgb)))


def test_reference_oklab_values():
    for rgb, expected in samples_srgb8_oklab.items():
        lab = _srgb8_to_oklab(rgb)
        for got, exp in zip(lab, expected):
            assert abs(got - exp) < oklab_tolerance, (rgb, lab, expected)

def test_reference_oklch_values():
    for rgb, (l_exp, c_exp, h_exp) in samples_srgb8_oklch.items():
        l, c, h = oklab_to_oklch(*_srgb8_to_oklab(rgb))
        assert abs(l - l_exp) < oklab_tolerance
        assert abs(c - c_exp) < oklab_tolerance
        assert abs(h - h_exp) < hue_tolerance

def test_white_is_achromatic():
    l, a, b = linear_srgb_to_oklab(1.0, 1.0, 1.0)
    assert abs(l - 1.0) < 1e-6
    assert abs(a) < 1e-6
    assert abs(b) < 1e-6

def test_oklab_round_trip(linear_triples):
    for rgb in linear_triples:
        back = oklab_to_linear_srgb(*linear_srgb_to_oklab(*rgb))
        for got, exp in zip(back, rgb):
            assert abs(got - exp) < 1e-5

def test_oklch_round_trip():
    axis = np.linspace(-0.4, 0.4, 9)
    for a in axis:
        for b in axis:
            lab = (0.5, float(a), float(b))
            back = oklch_to_oklab(*oklab_to_oklch(*lab))
            for got, exp in zip(back, lab):
                assert abs(got - exp) < 1e-9

def test_oklch_hue_range():
    axis = np.linspace(-0.4, 0.4, 9)
    for a in axis:
        for b in axis:
            _, c, h = oklab_to_oklch(0.5, float(a), float(b))
            assert c >= 0.0
            assert 0.0 <= h < 360.0

def test_achromatic_hue_is_zero():
    assert oklab_to_oklch(0.5, 0.0, 0.0) == (0.5, 0.0, 0.0)

    _, c, h = oklab_to_oklch(0.5, -0.0, -0.0)
    assert c == 0.0
    assert h == 0.0
    assert math.copysign(1.0, h) == 1.0

    # below the achromatic threshold the hue is dropped too
    _, _, h = oklab_to_oklch(0.5, 1e-9, -1e-9)
    assert h == 0.0

def test_hue_direction():
    # +a is 0°, +b is 90°, -a is 180°, -b is 270°
    assert abs(oklab_to_oklch(0.5, 0.1, 0.0)[2] - 0.0) < 1e-9
    assert abs(oklab_to_oklch(0.5, 0.0, 0.1)[2] - 90.0) < 1e-9
    assert abs(oklab_to_oklch(0.5, -0.1, 0.0)[2] - 180.0) < 1e-9
    assert abs(oklab_to_oklch(0.5, 0.0, -0.1)[2] - 270.0) < 1e-9

@pytest.mark.parametrize("angle, expected", [
    (0.0, 0.0),
    (10.0, 10.0),
    (370.0, 10.0),
    (-30.0, 330.0),
    (360.0, 0.0),
    (720.0, 0.0),
    (-720.0, 0.0),
])
def test_normalize_hue(angle, expected):
    assert abs(normalize_hue(angle) - expected) < 1e-9

def test_normalize_hue_never_reaches_360():
    assert normalize_hue(-1e-20) == 0.0

def test_normalize_hue_non_finite():
    assert normalize_hue(float("nan")) == 0.0
    assert normalize_hue(float("inf")) == 0.0
    assert normalize_hue(float("-inf")) == 0.0

def test_distance():
    assert abs(oklab_distance((0.5, 0.3, 0.4), (0.5, 0.0, 0.0)) - 0.5) < 1e-12
    assert abs(oklab_squared_distance((0.5, 0.3, 0.4), (0.5, 0.0, 0.0)) - 0.25) < 1e-12
    assert oklab_distance((0.1, 0.2, 0.3), (0.1, 0.2, 0.3)) == 0.0

def test_matrices_are_read_only():
    with pytest.raises(ValueError):
        M1_OKLAB[0, 0] = 0.0
    with pytest.raises(ValueError):
        M2_OKLAB[0, 0] = 0.0

def test_inverse_matrices_are_exact():
    identity = np.eye(3)
    np.testing.assert_allclose(M2_OKLAB @ M2_INV_OKLAB, identity, atol=1e-12)
    np.testing.assert_allclose(M1_OKLAB @ M1_INV_OKLAB, identity, atol=1e-12)

def test_oklch_hue_survives_srgb_round_trip():
    lch = (0.7, 0.1, 30.0)
    lab = oklch_to_oklab(*lch)
    back = oklab_to_oklch(*linear_srgb_to_oklab(*oklab_to_linear_srgb(*lab)))
    for got, exp in zip(back, lch):
        assert abs(got - exp) < 1e-9
