"""
Color Converter - CSS color strings to canonical RGBA.

Supports oklch(), hsl()/hsla(), rgb()/rgba(), #hex (3, 4, 6 or 8 digits)
and a minimal set of named keywords. Every result has its channels clamped
to [0, 1]; out-of-gamut oklch colors are clipped, not gamut-mapped.

Usage:
    from tokensync.colors import parse_color

    parse_color("oklch(62.8% 0.25 29.23)")  # Color(r=0.9999.., g=0.2253.., ...)
    parse_color("#00000080")                # Color(r=0, g=0, b=0, a=0.502)
    parse_color("not-a-color")              # None
"""

import colorsys
import math
import re
from typing import Optional

import numpy as np

from .config import COLOR_TOLERANCE
from .models import Color

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"
_ALPHA = r"(\d+(?:\.\d*)?%?|\.\d+%?)"

_OKLCH_RE = re.compile(
    rf"oklch\(\s*{_NUMBER}(%?)\s+{_NUMBER}\s+{_NUMBER}\s*(?:/\s*{_ALPHA})?\s*\)"
)
_HSL_RE = re.compile(
    rf"hsla?\(\s*{_NUMBER}\s*[,\s]\s*{_NUMBER}%?\s*[,\s]\s*{_NUMBER}%?\s*(?:[,/]\s*{_ALPHA})?\s*\)"
)
_RGB_RE = re.compile(
    rf"rgba?\(\s*{_NUMBER}\s*,?\s*{_NUMBER}\s*,?\s*{_NUMBER}\s*(?:[,/]\s*{_ALPHA})?\s*\)"
)
_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$")

NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#ffffff",
    "transparent": "#00000000",
}

# oklab -> non-linear LMS (rows: l_, m_, s_)
_OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.291485548],
])

# cubed LMS -> linear sRGB (rows: R, G, B)
_LMS_TO_LINEAR_SRGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.707614701],
])


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _parse_alpha(text: Optional[str]) -> float:
    """Alpha as a bare fraction or a percentage; missing means opaque."""
    if not text:
        return 1.0
    if text.endswith("%"):
        return _clamp01(float(text[:-1]) / 100)
    return _clamp01(float(text))


def linear_to_srgb(channels):
    """Apply the sRGB transfer function to linear channel value(s)."""
    linear = np.asarray(channels, dtype=float)
    # Clamp the power-law input so negative channels never reach np.power
    encoded = np.where(
        linear <= 0.0031308,
        12.92 * linear,
        1.055 * np.power(np.maximum(linear, 0.0031308), 1 / 2.4) - 0.055,
    )
    if encoded.ndim == 0:
        return float(encoded)
    return encoded


# =============================================================================
# Individual converters
# =============================================================================


def oklch_to_rgba(L: float, C: float, H: float, alpha: float = 1.0) -> Color:
    """
    Convert oklch to canonical RGBA.

    Args:
        L: Lightness, 0-1
        C: Chroma, 0-0.4 and up
        H: Hue in degrees
        alpha: Opacity, 0-1
    """
    h_rad = H * math.pi / 180
    oklab = np.array([L, C * math.cos(h_rad), C * math.sin(h_rad)])

    lms = (_OKLAB_TO_LMS @ oklab) ** 3
    linear = _LMS_TO_LINEAR_SRGB @ lms
    r, g, b = np.clip(linear_to_srgb(linear), 0.0, 1.0)

    return Color(float(r), float(g), float(b), _clamp01(alpha))


def hsl_to_rgba(h: float, s: float, l: float, alpha: float = 1.0) -> Color:
    """Convert HSL to canonical RGBA. ``h`` in degrees, ``s``/``l`` as 0-100."""
    # colorsys uses HLS ordering with every component in 0..1
    r, g, b = colorsys.hls_to_rgb(h / 360, l / 100, s / 100)
    return Color(_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(alpha))


def hex_to_rgba(value: str) -> Optional[Color]:
    """Convert #RGB, #RGBA, #RRGGBB or #RRGGBBAA to canonical RGBA."""
    match = _HEX_RE.match(value.strip().lower())
    if not match:
        return None

    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)

    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return Color(r, g, b, a)


def rgb_string_to_rgba(value: str) -> Optional[Color]:
    """Convert rgb(R, G, B) / rgba(R G B / A) with 0-255 channels."""
    match = _RGB_RE.search(value)
    if not match:
        return None

    r = float(match.group(1)) / 255
    g = float(match.group(2)) / 255
    b = float(match.group(3)) / 255
    return Color(_clamp01(r), _clamp01(g), _clamp01(b), _parse_alpha(match.group(4)))


# =============================================================================
# Universal parser
# =============================================================================


def parse_color(value: str) -> Optional[Color]:
    """
    Parse any supported CSS color string.

    Returns None when no notation matches; callers skip the declaration.
    """
    if not isinstance(value, str):
        return None
    v = value.strip().lower()

    oklch = _OKLCH_RE.search(v)
    if oklch:
        L = float(oklch.group(1))
        if oklch.group(2) or L > 1:
            L /= 100
        C = float(oklch.group(3))
        H = float(oklch.group(4))
        return oklch_to_rgba(L, C, H, _parse_alpha(oklch.group(5)))

    hsl = _HSL_RE.search(v)
    if hsl:
        return hsl_to_rgba(
            float(hsl.group(1)),
            float(hsl.group(2)),
            float(hsl.group(3)),
            _parse_alpha(hsl.group(4)),
        )

    if v.startswith("rgb"):
        return rgb_string_to_rgba(v)

    if v.startswith("#"):
        return hex_to_rgba(v)

    if v in NAMED_COLORS:
        return hex_to_rgba(NAMED_COLORS[v])

    return None


def colors_match(a: Color, b: Color, tolerance: float = COLOR_TOLERANCE) -> bool:
    """Compare two colors for approximate equality."""
    return a.matches(b, tolerance)
