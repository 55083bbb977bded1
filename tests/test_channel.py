"""
Unit tests for the Channel color model

Covers hue normalization, color wheel interpolation, tonal variant
resolution and hex rendering.
"""

import re

import pytest

from colorscheme.services.colors import (
    COLOR_WHEEL, PRESETS, Channel, InvalidRangeError, MissingArgumentError
)

HEX6 = re.compile(r"^[0-9a-f]{6}$")


def hex_channels(hex_color):
    return [int(hex_color[i:i + 2], 16) for i in (0, 2, 4)]


class TestHueNormalization:
    """Test hue assignment and rotation."""

    @pytest.mark.parametrize("hue,expected", [
        (0, 0),
        (60, 60),
        (360, 0),
        (370, 10),
        (-30, 330),
        (725.5, 5.5),
        (-720, 0),
    ])
    def test_set_hue_wraps_into_circle(self, hue, expected):
        channel = Channel(hue)
        assert channel.get_hue() == pytest.approx(expected)
        assert 0 <= channel.get_hue() < 360

    def test_fractional_hue_preserved(self):
        channel = Channel(42.25)
        assert channel.get_hue() == pytest.approx(42.25)

    def test_tiny_negative_hue_wraps_to_zero(self):
        channel = Channel(-1e-20)
        assert channel.get_hue() == 0.0

    def test_rotate_wraps_around(self):
        channel = Channel(350)
        channel.rotate(20)
        assert channel.get_hue() == pytest.approx(10)

        channel.rotate(-370)
        assert channel.get_hue() == pytest.approx(0)

    @pytest.mark.parametrize("a,b", [(30, 45), (200, 250), (-90, 400), (720, -15)])
    def test_rotate_composes(self, a, b):
        stepwise = Channel(100)
        stepwise.rotate(a)
        stepwise.rotate(b)

        single = Channel(100)
        single.rotate(a + b)

        assert stepwise.get_hue() == pytest.approx(single.get_hue())

    def test_hue_is_mandatory(self):
        with pytest.raises(MissingArgumentError):
            Channel(None)

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_hue_is_rejected(self, value):
        channel = Channel(30)
        with pytest.raises(InvalidRangeError):
            channel.set_hue(value)
        with pytest.raises(InvalidRangeError):
            channel.rotate(value)
        assert channel.get_hue() == 30
        assert channel.to_hex(False, -1) == "ff6600"


class TestWheelInterpolation:
    """Test base color derivation from the color wheel."""

    @pytest.mark.parametrize("hue", range(0, 180, 15))
    def test_full_value_samples_render_exactly(self, hue):
        sample = COLOR_WHEEL[hue]
        channel = Channel(hue)

        assert hex_channels(channel.to_hex(False, -1)) == [sample.red, sample.green, sample.blue]

    @pytest.mark.parametrize("hue", range(0, 360, 15))
    def test_every_sample_reduces_to_table(self, hue):
        sample = COLOR_WHEEL[hue]
        channel = Channel(hue)

        assert (channel.base_red, channel.base_green, channel.base_blue) == (
            sample.red, sample.green, sample.blue
        )
        assert channel.base_value == pytest.approx(sample.value / 100)

        rendered = hex_channels(channel.to_hex(False, -1))
        for table, out in zip((sample.red, sample.green, sample.blue), rendered):
            if table == 0:
                assert out == 0
        assert abs(max(rendered) - sample.value * 2.55) <= 1

    def test_midpoint_blend(self):
        channel = Channel(7.5)  # halfway between 0 and 15
        assert channel.base_red == 255
        assert channel.base_green == 26
        assert channel.base_blue == 0
        assert channel.base_value == pytest.approx(1.0)

    def test_blend_wraps_past_last_sample(self):
        channel = Channel(352.5)  # halfway between 345 and 0
        assert channel.base_red == 242
        assert channel.base_green == 0
        assert channel.base_blue == 51
        assert channel.base_value == pytest.approx(0.95)

    @pytest.mark.parametrize("hue", [0, 7.5, 123.4, 200, 359.9])
    def test_base_saturation_is_constant(self, hue):
        assert Channel(hue).base_saturation == 1.0


class TestVariants:
    """Test tonal slot resolution."""

    def test_negative_entries_scale_base(self):
        channel = Channel(180)  # base value 0.8
        channel.set_variant(0, -0.5, -0.5)

        assert channel.get_saturation(0) == pytest.approx(0.5)
        assert channel.get_value(0) == pytest.approx(0.4)

    def test_values_are_clamped(self):
        channel = Channel(180)
        channel.set_variant(1, 2.0, -3)

        assert channel.get_saturation(1) == 1.0
        assert channel.get_value(1) == 1.0

    def test_preset_fills_all_slots(self):
        channel = Channel(90)
        channel.set_variant_preset(PRESETS["light"])

        assert channel.get_saturation(0) == pytest.approx(0.25)
        assert channel.get_value(0) == pytest.approx(1)
        assert channel.get_saturation(1) == pytest.approx(0.5)
        assert channel.get_value(1) == pytest.approx(0.75)
        assert channel.get_saturation(3) == pytest.approx(0.5)
        assert channel.get_value(3) == pytest.approx(1)

    def test_set_variant_returns_value(self):
        assert Channel(0).set_variant(2, 0.3, 0.6) == 0.6


class TestHexRendering:
    """Test variant rendering to hex."""

    def test_default_preset_on_red(self):
        channel = Channel(0)

        assert channel.to_hex(False, 0) == "ff0000"
        assert channel.to_hex(False, 2) == "ffbfbf"
        assert channel.to_hex(False, 3) == "ff8080"

        darker = hex_channels(channel.to_hex(False, 1))
        assert darker[1:] == [0, 0]
        assert darker[0] < 255

    @pytest.mark.parametrize("hue", [0, 37, 99.5, 181, 250, 333])
    def test_output_format(self, hue):
        channel = Channel(hue)
        for variation in (-1, 0, 1, 2, 3):
            assert HEX6.match(channel.to_hex(False, variation))

    @pytest.mark.parametrize("hue", [0, 37, 99.5, 181, 250, 333])
    def test_web_safe_quantization(self, hue):
        channel = Channel(hue)
        for variation in (-1, 0, 1, 2, 3):
            for value in hex_channels(channel.to_hex(True, variation)):
                assert value % 51 == 0
