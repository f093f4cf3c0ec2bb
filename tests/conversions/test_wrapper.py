import pytest
from okchroma.conversions import convert, conversion_path, ColorSpace, FormatType
from ..samples import samples_srgb8_oklab, oklab_tolerance

def test_convert_returns_tuple():
    result = convert((255, 128, 64), "srgb", "oklab", input_type=FormatType.INT)
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_same_space_is_identity():
    assert convert((255, 128, 64), "srgb", "srgb", FormatType.INT, FormatType.INT) == (255, 128, 64)

def test_adds_alpha():
    result = convert((255, 0, 0), "srgb", "srgba", FormatType.INT, FormatType.INT)
    assert result == (255, 0, 0, 255)

    result = convert((0.5, 0.0, 0.0), "oklab", "oklaba")
    assert result == (0.5, 0.0, 0.0, 1.0)

def test_adds_proper_format_alpha():
    result = convert((1.0, 0.5, 0.25), "srgb", "srgba", FormatType.FLOAT, FormatType.INT)
    assert result == (255, 128, 64, 255)

    result = convert((255, 128, 64), "srgb", "srgba", FormatType.INT, FormatType.FLOAT)
    assert result[3] == 1.0

def test_drops_alpha():
    assert convert((255, 0, 0, 17), "srgba", "srgb", FormatType.INT, FormatType.INT) == (255, 0, 0)

def test_input_alpha_is_rescaled():
    r, g, b, a = convert((10, 20, 30, 128), "srgba", "oklaba", FormatType.INT, FormatType.FLOAT)
    assert a == 128 / 255

    *_, a = convert((0.5, 0.0, 0.0, 128 / 255), "oklaba", "srgba", FormatType.FLOAT, FormatType.INT)
    assert a == 128

def test_explicit_alpha_overrides_input():
    *_, a = convert((255, 0, 0, 20), "srgba", "srgba", FormatType.INT, FormatType.INT, alpha=200)
    assert a == 200

    *_, a = convert((255, 0, 0), "srgb", "linear_srgba", FormatType.INT, FormatType.FLOAT, alpha=0.25)
    assert a == 0.25

def test_explicit_alpha_ignored_without_alpha_target():
    assert convert((255, 0, 0), "srgb", "srgb", FormatType.INT, FormatType.INT, alpha=7) == (255, 0, 0)

def test_srgb8_to_oklab_samples():
    for rgb, expected in samples_srgb8_oklab.items():
        lab = convert(rgb, ColorSpace.SRGB, ColorSpace.OKLAB, FormatType.INT)
        for got, exp in zip(lab, expected):
            assert abs(got - exp) < oklab_tolerance

def test_oklab_to_srgb8_samples():
    for rgb, lab in samples_srgb8_oklab.items():
        assert convert(lab, ColorSpace.OKLAB, ColorSpace.SRGB, FormatType.FLOAT, FormatType.INT) == rgb

def test_out_of_gamut_is_clamped_in_unit_spaces():
    # very saturated OkLch, outside sRGB
    r, g, b = convert((0.7, 0.4, 150.0), "oklch", "srgb")
    for c in (r, g, b):
        assert 0.0 <= c <= 1.0

def test_int_format_only_for_srgb():
    with pytest.raises(ValueError):
        convert((255, 0, 0), "srgb", "oklab", FormatType.INT, FormatType.INT)
    with pytest.raises(ValueError):
        convert((1, 0, 0), "linear_srgb", "srgb", FormatType.INT, FormatType.INT)

def test_wrong_channel_count():
    with pytest.raises(ValueError):
        convert((255, 0), "srgb", "oklab", FormatType.INT)
    with pytest.raises(ValueError):
        convert((255, 0, 0), "srgba", "oklab", FormatType.INT)

def test_unknown_space():
    with pytest.raises(ValueError):
        convert((0.1, 0.2, 0.3), "hsv", "oklab")

@pytest.mark.parametrize("src, dst, expected", [
    ("srgb", "srgb", ["srgb"]),
    ("srgb", "oklch", ["srgb", "linear_srgb", "oklab", "oklch"]),
    ("oklcha", "srgba", ["oklch", "oklab", "linear_srgb", "srgb"]),
    ("linear_srgb", "oklab", ["linear_srgb", "oklab"]),
    ("oklab", "linear_srgba", ["oklab", "linear_srgb"]),
])
def test_conversion_path(src, dst, expected):
    assert [s.value for s in conversion_path(ColorSpace(src), ColorSpace(dst))] == expected

def test_logs_route(debug_logs):
    convert((255, 0, 0), "srgb", "oklch", FormatType.INT)
    messages = [r.getMessage() for r in debug_logs.records]
    assert "Converting srgb/int -> oklch/float via srgb -> linear_srgb -> oklab -> oklch" in messages

def test_perceptual_results_stay_in_domain():
    l, c, h = convert((0.5, 0.1, 400.0), "oklch", "oklch")
    assert (l, c) == (0.5, 0.1)
    assert abs(h - 40.0) < 1e-9

    l, c, h = convert((0.5, -0.2, -30.0), "oklch", "oklcha")[:3]
    assert c == 0.0
    assert abs(h - 330.0) < 1e-9

    assert convert((2.0, 0.1, 0.1), "oklab", "oklab") == (1.0, 0.1, 0.1)
    assert convert((2.0, 0.1, 0.1), "oklab", "oklch")[0] == 1.0
    assert convert((-0.5, 0.0, 0.0), "oklab", "oklab")[0] == 0.0

def test_int_alpha_must_be_integer():
    with pytest.raises(TypeError):
        convert((1.0, 0.0, 0.0), "srgb", "srgba", FormatType.FLOAT, FormatType.INT, alpha=0.5)
    with pytest.raises(TypeError):
        convert((1.0, 0.0, 0.0), "srgb", "srgba", FormatType.FLOAT, FormatType.INT, alpha=True)
    assert convert((1.0, 0.0, 0.0), "srgb", "srgba", FormatType.FLOAT, FormatType.INT, alpha=128)[3] == 128
