import itertools

import pytest

from binimg import (
    HSL_MODEL,
    LEGAL_ANGLES,
    InvalidHueError,
    QuantizedHSL,
    hsl_to_rgb,
    rgb_to_hsl,
)
from binimg.hsl import LIGHTNESS_LEVELS


def test_every_byte_packs_back_to_itself() -> None:
    for value in range(256):
        assert QuantizedHSL.from_byte(value).to_byte() == value


def test_hue_formula_matches_angle_table() -> None:
    for index, angle in enumerate(LEGAL_ANGLES):
        hsl = QuantizedHSL.from_byte((index << 4) | 0x01)
        assert hsl.hue == angle
        assert hsl.saturation == 1


def test_grayscale_bytes_use_high_nibble() -> None:
    assert QuantizedHSL.from_byte(0x00) == QuantizedHSL(hue=0.0, saturation=0.0, lightness=0.0)
    assert QuantizedHSL.from_byte(0xF0) == QuantizedHSL(hue=0.0, saturation=0.0, lightness=1.0)
    assert QuantizedHSL.from_byte(0x30).lightness == pytest.approx(3 / 15)
    assert QuantizedHSL.from_byte(0x30).is_grayscale


def test_chromatic_bytes_use_low_nibble_for_lightness() -> None:
    hsl = QuantizedHSL.from_byte(0x95)
    assert hsl.hue == 186
    assert hsl.saturation == 1
    assert hsl.lightness == 5 / 17
    assert not hsl.is_grayscale


def test_chromatic_colors_survive_rgb_round_trip() -> None:
    for value in range(256):
        if value & 0x0F == 0:
            continue
        hsl = QuantizedHSL.from_byte(value)
        assert rgb_to_hsl(*hsl_to_rgb(hsl)) == hsl, hex(value)


def test_grayscale_requantizes_onto_seventeen_levels() -> None:
    for level in range(16):
        hsl = QuantizedHSL.from_byte(level << 4)
        result = rgb_to_hsl(*hsl_to_rgb(hsl))
        assert result.saturation == 0
        assert result.hue == 0
        assert result.lightness in LIGHTNESS_LEVELS


def test_quantized_hue_and_lightness_are_always_legal() -> None:
    steps = range(0, 256, 15)
    for r, g, b in itertools.product(steps, steps, steps):
        hsl = rgb_to_hsl(r, g, b)
        assert hsl.hue in LEGAL_ANGLES
        assert hsl.saturation in (0, 1)
        assert hsl.lightness in LIGHTNESS_LEVELS
        if r == g == b:
            assert hsl.saturation == 0
            assert hsl.hue == 0


@pytest.mark.parametrize(
    ("rgb", "angle"),
    [
        ((255, 0, 0), 0),
        ((200, 70, 0), 21),
        ((145, 150, 0), 62),
        ((0, 135, 150), 186),
        ((240, 0, 200), 310),
    ],
)
def test_hue_on_table_entry_is_selected(rgb, angle) -> None:
    assert rgb_to_hsl(*rgb).hue == angle


def test_hue_near_full_circle_does_not_wrap() -> None:
    # 357.6 degrees is closer to 0 on the circle, but distance is not wrapped.
    assert rgb_to_hsl(255, 0, 10).hue == 310


def test_pure_red_quantization() -> None:
    hsl = rgb_to_hsl(255, 0, 0)
    assert hsl.hue == 0
    assert hsl.saturation == 1
    assert hsl.lightness in (8 / 17, 9 / 17)

    value = hsl.to_byte()
    assert value >> 4 == 0
    assert value & 0x0F == round(hsl.lightness * 17)


def test_black_and_white_quantize_on_seventeen_level_scale() -> None:
    black = rgb_to_hsl(0, 0, 0)
    assert black == QuantizedHSL(hue=0.0, saturation=0.0, lightness=1 / 17)
    assert black.to_byte() == 0x00

    white = rgb_to_hsl(255, 255, 255)
    assert white.lightness == 16 / 17
    # floor(16 / 17 * 15) == 14
    assert white.to_byte() == 0xE0


def test_unmatched_hue_falls_back_to_index_zero() -> None:
    hsl = QuantizedHSL(hue=100.0, saturation=1.0, lightness=5 / 17)
    assert hsl.to_byte() == 0x05


def test_unmatched_hue_raises_when_strict() -> None:
    hsl = QuantizedHSL(hue=100.0, saturation=1.0, lightness=5 / 17)
    with pytest.raises(InvalidHueError):
        hsl.to_byte(strict=True)
    with pytest.raises(ValueError):
        hsl.to_byte(strict=True)


def test_top_lightness_level_overflows_into_grayscale_flag() -> None:
    hsl = QuantizedHSL(hue=21.0, saturation=1.0, lightness=16 / 17)
    assert hsl.to_byte() == 0x10


def test_rgba_variants() -> None:
    white = QuantizedHSL.from_byte(0xF0)
    assert white.rgb() == (255, 255, 255)
    assert white.rgba() == (255, 255, 255, 255)
    assert white.rgba16() == (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)

    black = QuantizedHSL.from_byte(0x00)
    assert black.rgba16() == (0, 0, 0, 0xFFFF)


def test_hsl_to_rgb_sectors() -> None:
    assert hsl_to_rgb(QuantizedHSL(0.0, 1.0, 0.5)) == (255, 0, 0)
    assert hsl_to_rgb(QuantizedHSL(120.0, 1.0, 0.5)) == (0, 255, 0)
    assert hsl_to_rgb(QuantizedHSL(240.0, 1.0, 0.5)) == (0, 0, 255)


def test_model_accepts_tuples_ints_and_hsl() -> None:
    assert HSL_MODEL.convert((255, 0, 0)) == rgb_to_hsl(255, 0, 0)
    assert HSL_MODEL.convert((255, 0, 0, 0)) == rgb_to_hsl(255, 0, 0)
    assert HSL_MODEL.convert(0) == rgb_to_hsl(0, 0, 0)

    chromatic = QuantizedHSL.from_byte(0x47)
    assert HSL_MODEL.convert(chromatic) == chromatic
    assert HSL_MODEL.to_rgb(chromatic) == hsl_to_rgb(chromatic)
