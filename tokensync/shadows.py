"""
Shadow Decomposer - CSS box-shadow lists to structured layers.
"""

import logging
import re
from typing import Optional

from .colors import parse_color
from .config import DEFAULT_SHADOW_COLOR, ROOT_FONT_SIZE
from .dimensions import parse_dimension
from .models import Color, ShadowLayer, ShadowType

logger = logging.getLogger(__name__)

_INSET_RE = re.compile(r"^inset\b\s*", re.IGNORECASE)
_SHADOW_COLOR_RE = re.compile(r"((?:rgb|oklch|hsl)a?\([^)]+\))", re.IGNORECASE)

_FALLBACK_SHADOW_COLOR = Color(0.0, 0.0, 0.0, 0.1)


def split_shadow_list(value: str) -> list[str]:
    """
    Split a shadow list on top-level commas.

    Commas inside parentheses (color function arguments) do not separate
    layers. Blank trailing segments are dropped.
    """
    parts: list[str] = []
    depth = 0
    current = ""

    for char in value:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1

        if char == "," and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += char

    if current.strip():
        parts.append(current)
    return parts


def parse_shadow_layer(
    part: str,
    root_font_size: float = ROOT_FONT_SIZE,
    default_color: str = DEFAULT_SHADOW_COLOR,
) -> Optional[ShadowLayer]:
    """
    Parse one shadow layer: ``[inset] x y [blur [spread]] [color]``.

    Missing trailing offsets default to 0 and a missing color defaults to
    ``default_color``. Returns None when the layer has no numeric field.
    """
    shadow = part.strip()
    if not shadow:
        return None

    inset = _INSET_RE.match(shadow)
    if inset:
        shadow = shadow[inset.end():]

    color_match = _SHADOW_COLOR_RE.search(shadow)
    color_str = color_match.group(1) if color_match else default_color
    if color_match:
        shadow = shadow.replace(color_str, "", 1)

    fields = [parse_dimension(f, root_font_size) for f in shadow.split()]
    if all(f is None for f in fields):
        logger.debug(f"Shadow layer has no offsets: {part!r}")
        return None

    offsets = [f or 0.0 for f in fields[:4]]
    offsets += [0.0] * (4 - len(offsets))
    x, y, blur, spread = offsets

    color = parse_color(color_str) or parse_color(default_color) or _FALLBACK_SHADOW_COLOR

    return ShadowLayer(
        x=x,
        y=y,
        blur=blur,
        spread=spread,
        color=color,
        type=ShadowType.INNER_SHADOW if inset else ShadowType.DROP_SHADOW,
    )


def parse_shadow_value(
    value: str,
    root_font_size: float = ROOT_FONT_SIZE,
    default_color: str = DEFAULT_SHADOW_COLOR,
) -> list[ShadowLayer]:
    """Parse every layer of a comma-separated shadow value."""
    layers = []
    for part in split_shadow_list(value):
        layer = parse_shadow_layer(part, root_font_size, default_color)
        if layer is not None:
            layers.append(layer)
    return layers
