"""
JSON Token Normalizer - flat theme JSON to light/dark maps.

Expects the flat shape used by theme token files:

    {
        "colors/background": {"Light": "#ffffff", "Dark": "#09090b"},
        "radius/md": "0.5rem",
        "font/sans": "Inter, sans-serif",
        "text/sm": {"size": "14px", "lineHeight": "20px"}
    }

Bare strings and typography composites (objects with a ``size`` key) are
not themed values and are skipped by ``normalize_json``.
"""

import logging
import re
from typing import Any, Optional

from .colors import parse_color
from .config import ROOT_FONT_SIZE
from .exceptions import InvalidInputError
from .models import JsonColorToken, JsonFloatToken, ThemeTokens

logger = logging.getLogger(__name__)

MODE_KEYS = ("Light", "Dark")

_JSON_DIMENSION_RE = re.compile(r"^([\d.]+)(px|rem)$")


def _require_mapping(data: Any) -> None:
    if not isinstance(data, dict):
        raise InvalidInputError("data", "dict", data)


def _is_mode_object(value: Any) -> bool:
    return isinstance(value, dict) and any(mode in value for mode in MODE_KEYS)


def strip_category_prefix(key: str) -> str:
    """``"colors/background"`` -> ``"background"``. Keys without ``/`` are unchanged."""
    _, sep, rest = key.partition("/")
    return rest if sep else key


def normalize_json(data: dict[str, Any], strip_prefix: bool = False) -> ThemeTokens:
    """
    Split a flat JSON token file into light and dark value maps.

    Args:
        data: Flat token mapping
        strip_prefix: Drop the ``category/`` part of each key

    Returns:
        ThemeTokens with the raw Light/Dark strings
    """
    _require_mapping(data)
    theme = ThemeTokens()

    for key, value in data.items():
        if isinstance(value, str):
            continue
        if isinstance(value, dict) and "size" in value:
            continue
        if not _is_mode_object(value):
            logger.debug(f"Skipping JSON token {key!r}: no Light/Dark values")
            continue

        name = strip_category_prefix(key) if strip_prefix else key
        if value.get("Light"):
            theme.light[name] = value["Light"]
        if value.get("Dark"):
            theme.dark[name] = value["Dark"]

    return theme


def parse_json_color_tokens(data: dict[str, Any], strip_prefix: bool = False) -> list[JsonColorToken]:
    """
    Resolve every themed JSON value to canonical colors.

    Modes whose value is not a color are ``None``; tokens with no parseable
    mode at all are omitted.
    """
    theme = normalize_json(data, strip_prefix=strip_prefix)
    tokens = []
    for name in theme.keys():
        light = parse_color(theme.light[name]) if name in theme.light else None
        dark = parse_color(theme.dark[name]) if name in theme.dark else None
        if light is None and dark is None:
            continue
        tokens.append(JsonColorToken(name=name, light=light, dark=dark))
    return tokens


def parse_json_dimension(value: Any, root_font_size: float = ROOT_FONT_SIZE) -> Optional[float]:
    """
    Parse a JSON dimension: ``"4px"``, ``"0.625rem"`` or a bare number (px).

    Returns None for anything else.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None

    match = _JSON_DIMENSION_RE.match(value.strip())
    if not match:
        return None
    try:
        number = float(match.group(1))
    except ValueError:
        return None
    return number * root_font_size if match.group(2) == "rem" else number


def parse_json_float_tokens(
    data: dict[str, Any],
    category_prefix: str,
    root_font_size: float = ROOT_FONT_SIZE,
) -> list[JsonFloatToken]:
    """
    Extract dimension tokens whose key starts with ``category_prefix``.

    Values may be a ``{"Light", "Dark"}`` object or a bare dimension. When
    only one mode parses, its value is used for both.
    """
    _require_mapping(data)
    results = []

    for key, value in data.items():
        if not key.startswith(category_prefix):
            continue
        name = key.replace(f"{category_prefix}/", "", 1)

        if _is_mode_object(value):
            light = parse_json_dimension(value.get("Light"), root_font_size)
            dark = parse_json_dimension(value.get("Dark"), root_font_size)
            if light is None and dark is None:
                continue
            results.append(JsonFloatToken(
                name=name,
                light=light if light is not None else dark,
                dark=dark if dark is not None else light,
            ))
        else:
            parsed = parse_json_dimension(value, root_font_size)
            if parsed is not None:
                results.append(JsonFloatToken(name=name, light=parsed, dark=parsed))

    return results
