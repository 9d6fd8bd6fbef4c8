"""
Tests for the color converter (colors.py).

Tests:
- oklch conversion, percentage lightness and gamut clamping
- HSL, hex and rgb()/rgba() notations
- Named keyword fallback and absence for unknown input
- Color model helpers (tolerance equality, hex/CSS output)
"""

import itertools

import numpy as np
import pytest

from tokensync.colors import (
    colors_match,
    hex_to_rgba,
    hsl_to_rgba,
    linear_to_srgb,
    oklch_to_rgba,
    parse_color,
    rgb_string_to_rgba,
)
from tokensync.models import Color


def assert_channels(color, r, g, b, a=1.0, abs=0.01):
    assert color is not None
    assert color.r == pytest.approx(r, abs=abs)
    assert color.g == pytest.approx(g, abs=abs)
    assert color.b == pytest.approx(b, abs=abs)
    assert color.a == pytest.approx(a, abs=abs)


# =============================================================================
# oklch
# =============================================================================

class TestOklch:
    """Tests for oklch() parsing and conversion."""

    def test_reference_red(self):
        """Test a saturated red just inside the sRGB gamut."""
        color = parse_color("oklch(62.8% 0.25 29.23)")
        assert_channels(color, 0.9886, 0.0920, 0.0604)

    def test_white_and_black(self):
        """Test achromatic extremes."""
        assert_channels(parse_color("oklch(1 0 0)"), 1.0, 1.0, 1.0)
        assert_channels(parse_color("oklch(0 0 0)"), 0.0, 0.0, 0.0)

    def test_percentage_lightness_matches_fraction(self):
        """Test that 50% and 0.5 lightness are the same color."""
        assert parse_color("oklch(50% 0.1 200)") == parse_color("oklch(0.5 0.1 200)")

    def test_lightness_above_one_is_percent(self):
        """Test that a bare lightness above 1 is read as a percentage."""
        assert parse_color("oklch(98.5 0 0)") == parse_color("oklch(0.985 0 0)")

    def test_alpha_fraction_and_percent(self):
        """Test oklch alpha after a slash."""
        assert parse_color("oklch(0.5 0.1 200 / 0.4)").a == pytest.approx(0.4)
        assert parse_color("oklch(0.5 0.1 200 / 40%)").a == pytest.approx(0.4)

    def test_gray_is_neutral(self):
        """Test that zero chroma yields equal channels."""
        color = parse_color("oklch(0.6 0 0)")
        assert color.r == pytest.approx(color.g, abs=1e-6)
        assert color.g == pytest.approx(color.b, abs=1e-6)

    def test_out_of_gamut_is_clamped(self):
        """Test that very high chroma is clamped instead of rejected."""
        color = oklch_to_rgba(0.7, 0.4, 145)
        for channel in (color.r, color.g, color.b):
            assert 0.0 <= channel <= 1.0

    def test_channels_stay_in_range_over_grid(self):
        """Test the clamp range across lightness, chroma and hue."""
        grid = itertools.product(
            np.linspace(0, 1, 6),
            np.linspace(0, 0.4, 5),
            range(0, 360, 45),
        )
        for L, C, H in grid:
            color = oklch_to_rgba(float(L), float(C), float(H))
            assert all(0.0 <= c <= 1.0 for c in (color.r, color.g, color.b))

    def test_uppercase_and_whitespace(self):
        """Test case-insensitive parsing with surrounding whitespace."""
        assert parse_color("  OKLCH(63.7% 0.237 25.331)  ") is not None


class TestLinearToSrgb:
    """Tests for the sRGB transfer function."""

    def test_linear_segment(self):
        """Test the linear segment near zero."""
        assert linear_to_srgb(0.001) == pytest.approx(0.01292)

    def test_power_segment(self):
        """Test the power-law segment."""
        assert linear_to_srgb(1.0) == pytest.approx(1.0)
        assert linear_to_srgb(0.5) == pytest.approx(0.7354, abs=1e-3)

    def test_array_input(self):
        """Test vectorised input keeps shape."""
        result = linear_to_srgb([0.0, 1.0, -0.5])
        assert result.shape == (3,)
        assert result[0] == 0.0
        assert result[2] < 0  # clamping is the caller's job


# =============================================================================
# HSL
# =============================================================================

class TestHsl:
    """Tests for hsl()/hsla() parsing."""

    def test_primary_red(self):
        """Test pure red."""
        assert_channels(parse_color("hsl(0, 100%, 50%)"), 1.0, 0.0, 0.0)

    def test_space_separated(self):
        """Test the space-separated syntax."""
        assert_channels(parse_color("hsl(120 100% 25%)"), 0.0, 0.5, 0.0)

    def test_hsla_with_alpha(self):
        """Test comma alpha and percentage alpha."""
        assert parse_color("hsla(240, 100%, 50%, 0.5)").a == pytest.approx(0.5)
        assert parse_color("hsl(240 100% 50% / 25%)").a == pytest.approx(0.25)

    def test_hue_360_wraps_to_red(self):
        """Test that 360 degrees equals 0 degrees."""
        assert hsl_to_rgba(360, 100, 50) == hsl_to_rgba(0, 100, 50)

    def test_zero_saturation_is_gray(self):
        """Test grayscale output."""
        assert_channels(hsl_to_rgba(200, 0, 40), 0.4, 0.4, 0.4)


# =============================================================================
# Hex
# =============================================================================

class TestHex:
    """Tests for hex notations."""

    def test_short_and_long_forms_match(self):
        """Test 3-digit expansion."""
        white = Color(1.0, 1.0, 1.0, 1.0)
        assert parse_color("#fff") == parse_color("#ffffff") == white

    def test_eight_digit_alpha(self):
        """Test 8-digit alpha channel."""
        color = parse_color("#00000080")
        assert_channels(color, 0.0, 0.0, 0.0, 128 / 255, abs=1e-6)

    def test_four_digit_alpha(self):
        """Test 4-digit expansion including alpha."""
        color = hex_to_rgba("#f008")
        assert_channels(color, 1.0, 0.0, 0.0, 0x88 / 255, abs=1e-6)

    def test_uppercase(self):
        """Test uppercase hex digits."""
        assert_channels(parse_color("#3B82F6"), 59 / 255, 130 / 255, 246 / 255, abs=1e-6)

    @pytest.mark.parametrize("value", ["#ff", "#fffff", "#ggg", "#1234567"])
    def test_invalid_lengths_and_digits(self, value):
        """Test malformed hex is absent, not an error."""
        assert parse_color(value) is None


# =============================================================================
# rgb / rgba
# =============================================================================

class TestRgb:
    """Tests for rgb()/rgba() parsing."""

    def test_percentage_alpha(self):
        """Test rgba with a percentage alpha."""
        assert_channels(parse_color("rgba(255, 0, 0, 50%)"), 1.0, 0.0, 0.0, 0.5, abs=1e-6)

    def test_space_and_slash_syntax(self):
        """Test modern space-separated syntax."""
        assert_channels(parse_color("rgb(0 0 0 / 0.1)"), 0.0, 0.0, 0.0, 0.1, abs=1e-6)

    def test_comma_alpha(self):
        """Test comma-separated alpha."""
        assert parse_color("rgb(0,0,0,0.1)").a == pytest.approx(0.1)

    def test_channels_are_clamped(self):
        """Test that channels above 255 clamp to 1."""
        assert rgb_string_to_rgba("rgb(300, 0, 0)").r == 1.0

    def test_unparseable_rgb(self):
        """Test malformed rgb is absent."""
        assert parse_color("rgb(red)") is None


# =============================================================================
# Named colors and absence
# =============================================================================

class TestNamedAndAbsent:
    """Tests for the keyword fallback and unknown values."""

    def test_named_keywords(self):
        """Test the minimal named table."""
        assert parse_color("black") == Color.black()
        assert parse_color("White") == Color.white()
        assert parse_color("transparent") == Color.transparent()

    @pytest.mark.parametrize("value", ["not-a-color", "", "var(--x)", "red", "16px"])
    def test_unknown_values_are_absent(self, value):
        """Test that unparseable values return None."""
        assert parse_color(value) is None

    def test_non_string_is_absent(self):
        """Test that non-string input returns None."""
        assert parse_color(None) is None


# =============================================================================
# Color model
# =============================================================================

class TestColorModel:
    """Tests for the Color value type."""

    def test_tolerance_equality(self):
        """Test that tiny channel noise still compares equal."""
        assert Color(0.5, 0.5, 0.5) == Color(0.503, 0.498, 0.5)
        assert Color(0.5, 0.5, 0.5) != Color(0.51, 0.5, 0.5)

    def test_colors_match_custom_tolerance(self):
        """Test explicit tolerance."""
        assert colors_match(Color(0.5, 0.5, 0.5), Color(0.51, 0.5, 0.5), tolerance=0.02)
        assert not colors_match(Color(0.5, 0.5, 0.5), Color(0.51, 0.5, 0.5))

    def test_not_equal_to_other_types(self):
        """Test comparison with non-colors."""
        assert Color(0, 0, 0) != (0, 0, 0, 1)

    def test_immutable(self):
        """Test that channels cannot be reassigned."""
        color = Color(0, 0, 0)
        with pytest.raises(AttributeError):
            color.r = 1.0

    def test_to_hex(self):
        """Test hex output with and without alpha."""
        assert parse_color("#3b82f6").to_hex() == "#3b82f6"
        assert Color(1.0, 0.0, 0.0, 0.5).to_hex() == "#ff000080"

    def test_to_css(self):
        """Test CSS output."""
        assert parse_color("#3b82f6").to_css() == "rgb(59, 130, 246)"
        assert Color(1.0, 0.0, 0.0, 0.5).to_css() == "rgba(255, 0, 0, 0.5)"

    def test_to_dict(self):
        """Test dictionary export."""
        assert Color(1.0, 0.5, 0.0, 1.0).to_dict() == {"r": 1.0, "g": 0.5, "b": 0.0, "a": 1.0}
