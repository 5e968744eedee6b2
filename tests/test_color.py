import pytest

from palette_theme_generator.color import (
    HSL,
    RGB,
    adjust_brightness,
    adjust_saturation,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)


def test_round_half_up_matches_math_round():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_hex_to_rgb():
    assert hex_to_rgb("#4a90d9") == RGB(74, 144, 217)
    assert hex_to_rgb("4A90D9") == RGB(74, 144, 217)
    assert hex_to_rgb("#fff") == RGB(255, 255, 255)


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(RGB(74, 144, 217)) == "#4a90d9"
    assert rgb_to_hex(RGB(300, -4, 127.5)) == "#ff0080"


def test_rgb_hex_round_trip():
    for rgb in [RGB(0, 0, 0), RGB(255, 255, 255), RGB(12, 200, 99), RGB(1, 2, 3)]:
        assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


@pytest.mark.parametrize(
    "hsl, rgb",
    [
        (HSL(0, 100, 50), RGB(255, 0, 0)),
        (HSL(120, 100, 25), RGB(0, 128, 0)),
        (HSL(300, 50, 50), RGB(191, 64, 191)),
    ],
)
def test_hsl_rgb_known_values(hsl, rgb):
    assert hsl_to_rgb(hsl) == rgb
    assert rgb_to_hsl(rgb) == hsl


def test_achromatic_colors():
    assert rgb_to_hsl(RGB(128, 128, 128)) == HSL(0, 0, 50)
    assert hsl_to_rgb(HSL(200, 0, 50)) == RGB(128, 128, 128)


def test_hex_to_hsl_is_integer_and_bounded():
    h, s, l = hex_to_hsl("#4a90d9")
    assert (h, s, l) == (211, 65, 57)
    for value in (h, s, l):
        assert isinstance(value, int)


def test_hsl_round_trip_within_one_unit():
    for hsl in [HSL(211, 65, 57), HSL(30, 80, 45), HSL(160, 40, 60)]:
        back = hex_to_hsl(hsl_to_hex(hsl))
        assert abs(back.h - hsl.h) <= 1
        assert abs(back.s - hsl.s) <= 1
        assert abs(back.l - hsl.l) <= 1


def test_is_valid_hex():
    assert is_valid_hex("#4a90d9")
    assert is_valid_hex("4a90d9")
    assert is_valid_hex("#4a90d9cc")
    assert not is_valid_hex("#fff")
    assert not is_valid_hex("#4a90dz")
    assert not is_valid_hex(None)
    assert not is_valid_hex(123456)


def test_normalize_hex_drops_alpha():
    assert normalize_hex("4A90D9") == "#4a90d9"
    assert normalize_hex("#4A90D9CC") == "#4a90d9"


def test_adjust_brightness_clamps():
    assert adjust_brightness("#808080", 100) == "#ffffff"
    assert adjust_brightness("#808080", -100) == "#000000"
    assert hex_to_hsl(adjust_brightness("#4a90d9", -20)).l == 37


def test_adjust_saturation():
    assert hex_to_hsl(adjust_saturation("#4a90d9", 0)).s == 0
    assert hex_to_hsl(adjust_saturation("#4a90d9", 10)).s == 100
