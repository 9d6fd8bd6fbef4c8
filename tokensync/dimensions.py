"""
Dimension Converter - CSS length literals to pixels.

Accepts px, rem and em (rem/em use a fixed root font size) and unitless
numbers, which are read as px.
"""

import re
from typing import Optional

from .config import ROOT_FONT_SIZE

_DIMENSION_RE = re.compile(r"^([-+]?(?:\d+(?:\.\d*)?|\.\d+))(rem|px|em)?$")

# Leading number of a value, like JavaScript's parseFloat
_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


def rem_to_px(rem: float, root_font_size: float = ROOT_FONT_SIZE) -> float:
    """Convert rem to px."""
    return rem * root_font_size


def parse_dimension(value: str, root_font_size: float = ROOT_FONT_SIZE) -> Optional[float]:
    """
    Parse a CSS dimension and return its size in px.

    Args:
        value: Length literal such as ``"16px"``, ``"0.25rem"`` or ``"-2"``
        root_font_size: Pixels per rem/em

    Returns:
        Pixel value, or None when the value is not a plain length
    """
    if not isinstance(value, str):
        return None
    match = _DIMENSION_RE.match(value.strip())
    if not match:
        return None

    number = float(match.group(1))
    unit = match.group(2) or "px"
    if unit in ("rem", "em"):
        return rem_to_px(number, root_font_size)
    return number


def parse_number(value: str) -> Optional[float]:
    """
    Parse the leading number of a value.

    Trailing text is ignored, so ``"500"``, ``"12deg"`` and ``"50%"`` give
    500, 12 and 50. Returns None when the value does not start with a number.
    """
    if not isinstance(value, str):
        return None
    match = _LEADING_NUMBER_RE.match(value)
    if not match:
        return None
    return float(match.group(1))
