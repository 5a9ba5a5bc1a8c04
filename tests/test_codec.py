"""Unit tests for hex/RGB/HSL conversions."""

import pytest

from accessible_colors.codec import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from accessible_colors.exceptions import InvalidColorError
from accessible_colors.models import HSL, RGB


class TestHexDecoding:
    """Test hex parsing."""

    @pytest.mark.unit
    def test_hex_to_rgb(self):
        """Test decoding channels from a hex string."""
        assert hex_to_rgb("#ff8000") == RGB(r=255, g=128, b=0)
        assert hex_to_rgb("#000000") == RGB(r=0, g=0, b=0)

    @pytest.mark.unit
    def test_hash_is_optional(self):
        """Test that the leading '#' may be omitted."""
        assert hex_to_rgb("1a2b3c") == hex_to_rgb("#1a2b3c")

    @pytest.mark.unit
    def test_case_insensitive(self):
        """Test that upper and lower case digits decode the same."""
        assert hex_to_rgb("#EABDBD") == hex_to_rgb("#eabdbd")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", ["", "#", "#ff", "ff", "#fff", "#12345", "#1234567", "#gggggg", "# 12345", "red"]
    )
    def test_malformed_hex_rejected(self, value):
        """Test that anything but 6 hex digits is rejected."""
        with pytest.raises(InvalidColorError):
            hex_to_rgb(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 0xFFFFFF, b"#ffffff"])
    def test_non_string_rejected(self, value):
        """Test that non-string values are rejected."""
        with pytest.raises(InvalidColorError):
            hex_to_rgb(value)

    @pytest.mark.unit
    def test_is_valid_hex(self):
        """Test the validity predicate."""
        assert is_valid_hex("#abcdef") is True
        assert is_valid_hex("ABCDEF") is True
        assert is_valid_hex("#abc") is False
        assert is_valid_hex(None) is False


class TestHexEncoding:
    """Test hex output."""

    @pytest.mark.unit
    def test_rgb_to_hex_is_lowercase_and_padded(self):
        """Test that output is lowercase #rrggbb with leading zeros."""
        assert rgb_to_hex(RGB(r=0, g=10, b=255)) == "#000aff"

    @pytest.mark.unit
    def test_normalize_hex(self):
        """Test canonicalizing user input."""
        assert normalize_hex("FF00AA") == "#ff00aa"
        assert normalize_hex("#Ff00aA") == "#ff00aa"

    @pytest.mark.unit
    def test_hex_round_trip(self):
        """Test that hex -> rgb -> hex is exact."""
        for hex_color in ["#ffffff", "#000000", "#fe30f1", "#0a0b0c", "#7f8081"]:
            assert rgb_to_hex(hex_to_rgb(hex_color)) == hex_color

    @pytest.mark.unit
    def test_rgb_round_trip(self, rng):
        """Test that rgb -> hex -> rgb is exact."""
        for r, g, b in rng.integers(0, 256, size=(50, 3)):
            rgb = RGB(r=int(r), g=int(g), b=int(b))
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


class TestHsl:
    """Test HSL conversions."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "hex_color,expected",
        [
            ("#ff0000", (0.0, 1.0, 0.5)),
            ("#00ff00", (1 / 3, 1.0, 0.5)),
            ("#0000ff", (2 / 3, 1.0, 0.5)),
            ("#ff00ff", (5 / 6, 1.0, 0.5)),
            ("#ffffff", (0.0, 0.0, 1.0)),
            ("#000000", (0.0, 0.0, 0.0)),
        ],
    )
    def test_known_values(self, hex_color, expected):
        """Test HSL of primary, secondary and achromatic colors."""
        hsl = hex_to_hsl(hex_color)
        assert (hsl.h, hsl.s, hsl.l) == pytest.approx(expected)

    @pytest.mark.unit
    def test_red_max_with_blue_above_green(self):
        """Test hue wraps into the upper range when blue exceeds green."""
        hsl = rgb_to_hsl(RGB(r=255, g=0, b=128))
        assert 5 / 6 < hsl.h < 1.0

    @pytest.mark.unit
    def test_light_colors_use_other_saturation_branch(self):
        """Test saturation for lightness above one half."""
        hsl = rgb_to_hsl(RGB(r=255, g=204, b=204))
        assert hsl.l == pytest.approx(0.9)
        assert hsl.s == pytest.approx(1.0)

    @pytest.mark.unit
    def test_achromatic_rounds_half_up(self):
        """Test that l=0.5 grey becomes #808080."""
        assert hsl_to_rgb(HSL(h=0.0, s=0.0, l=0.5)) == RGB(r=128, g=128, b=128)

    @pytest.mark.unit
    def test_extreme_lightness_ignores_hue(self):
        """Test that lightness 0 and 1 give black and white for any hue."""
        assert hsl_to_hex(HSL(h=0.3, s=0.8, l=0.0)) == "#000000"
        assert hsl_to_hex(HSL(h=0.3, s=0.8, l=1.0)) == "#ffffff"

    @pytest.mark.unit
    def test_rgb_hsl_rgb_round_trip(self):
        """Test that rgb -> hsl -> rgb returns the original color."""
        rgb = RGB(r=255, g=255, b=255)
        assert hsl_to_rgb(rgb_to_hsl(rgb)) == rgb
        assert hex_to_rgb(hsl_to_hex(hex_to_hsl("#fe30f1"))) == hex_to_rgb("#fe30f1")

    @pytest.mark.unit
    def test_hsl_rgb_hsl_round_trip(self, rng):
        """Test that hsl -> rgb -> hsl is approximately the original."""
        for h, s, l in rng.uniform(0.0, 1.0, size=(100, 3)):
            # Hue and saturation are undefined near black and white
            l = 0.25 + 0.5 * l  # noqa: E741
            s = 0.4 + 0.6 * s
            hsl = HSL(h=float(h), s=float(s), l=float(l))
            back = rgb_to_hsl(hsl_to_rgb(hsl))
            assert back.l == pytest.approx(hsl.l, abs=1e-2)
            assert back.s == pytest.approx(hsl.s, abs=2e-2)
            hue_delta = abs(back.h - hsl.h)
            assert min(hue_delta, 1 - hue_delta) < 1e-2
