"""Tests for shared/color.py."""
import pytest
from shared.color import (
    ColorParseError, argb, rgb, alpha, red, green, blue,
    to_css, to_rgba, parse_color, GRAY, TRANSPARENT,
)


def test_argb_packing():
    assert argb(125, 193, 230, 219) == 0x7DC1E6DB


def test_channel_accessors():
    c = 0x7DC1E6DB
    assert (alpha(c), red(c), green(c), blue(c)) == (125, 193, 230, 219)


def test_rgb_is_opaque():
    assert alpha(rgb(1, 2, 3)) == 255


def test_to_css_opaque():
    assert to_css(GRAY) == "#888888"


def test_to_css_translucent():
    assert to_css(argb(125, 193, 230, 219)) == "rgba(193,230,219,0.49)"


def test_to_css_transparent():
    assert to_css(TRANSPARENT) == "rgba(0,0,0,0)"


def test_to_rgba_range():
    r, g, b, a = to_rgba(argb(255, 255, 0, 51))
    assert (r, g, b, a) == (1.0, 0.0, 0.2, 1.0)


class TestParseColor:
    def test_rrggbb_is_opaque(self):
        assert parse_color("#FF0000") == 0xFFFF0000

    def test_aarrggbb(self):
        assert parse_color("#7DC1E6DB") == 0x7DC1E6DB

    def test_0x_prefix(self):
        assert parse_color("0x80112233") == 0x80112233

    def test_int_passthrough(self):
        assert parse_color(0x11223344) == 0x11223344

    def test_bad_hex_raises(self):
        with pytest.raises(ColorParseError, match="hex"):
            parse_color("#GGHHII")

    def test_bad_length_raises(self):
        with pytest.raises(ColorParseError):
            parse_color("#FFF")

    def test_bool_rejected(self):
        with pytest.raises(ColorParseError):
            parse_color(True)
