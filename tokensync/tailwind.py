"""
Tailwind CSS v4 theme loading.

Parses the text of Tailwind's ``theme.css`` into a TokenSet and fills in
the utility scales that the theme file does not declare as variables
(opacity, border width, skew, font weights, tracking) plus the base
black/white palette.
"""

import dataclasses
import logging
from typing import Optional

from .categorize import categorize_tokens
from .config import TokenParserConfig
from .extract import extract_theme_block, extract_variables
from .models import Color, ParsedColor, ParsedFloat, TokenSet

logger = logging.getLogger(__name__)

BORDER_WIDTHS = (0, 1, 2, 4, 8)
SKEW_DEGREES = (0, 1, 2, 3, 6, 12)

FONT_WEIGHTS: dict[str, float] = {
    "thin": 100,
    "extralight": 200,
    "light": 300,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "extrabold": 800,
    "black": 900,
}

# em fractions, as in Tailwind's tracking-* utilities
TRACKING: dict[str, float] = {
    "tighter": -0.05,
    "tight": -0.025,
    "normal": 0,
    "wide": 0.025,
    "wider": 0.05,
    "widest": 0.1,
}


def _fill_by_value(tokens: list[ParsedFloat], values, unit: str = "") -> None:
    present = {t.value for t in tokens}
    for value in values:
        if value not in present:
            tokens.append(ParsedFloat(path=[str(value)], value=value, raw_value=f"{value}{unit}"))


def _fill_by_name(tokens: list[ParsedFloat], named: dict[str, float]) -> None:
    present = {t.path[0] for t in tokens}
    for name, value in named.items():
        if name not in present:
            tokens.append(ParsedFloat(path=[name], value=value, raw_value=str(value)))


def apply_tailwind_defaults(tokens: TokenSet) -> TokenSet:
    """
    Return a copy of ``tokens`` with Tailwind's implicit scales added.

    - opacity: replaced by integers 0..100 unless all 101 steps exist
    - border width / skew: missing values from the default scales
    - font weights / tracking: missing names from the default maps
    - zinc: replaced by a copy of the neutral palette when neutral exists
    - base: white and black when no base palette exists
    """
    result = dataclasses.replace(tokens, **{
        name: list(family) for name, family in tokens.families().items()
    })

    if len(result.opacity) < 101:
        result.opacity = [
            ParsedFloat(path=[str(i)], value=i, raw_value=str(i)) for i in range(101)
        ]

    _fill_by_value(result.border_width, BORDER_WIDTHS, unit="px")
    _fill_by_value(result.skew, SKEW_DEGREES)
    _fill_by_name(result.font_weights, FONT_WEIGHTS)
    _fill_by_name(result.tracking, TRACKING)

    neutral = [c for c in result.colors if c.path[0] == "neutral"]
    if neutral:
        result.colors = [c for c in result.colors if c.path[0] != "zinc"]
        for token in neutral:
            result.colors.append(ParsedColor(
                path=["zinc", *token.path[1:]],
                color=token.color,
                raw_value=token.raw_value,
            ))

    if not any(c.path[0] == "base" for c in result.colors):
        result.colors.append(ParsedColor(["base", "white"], Color.white(), "#FFFFFF"))
        result.colors.append(ParsedColor(["base", "black"], Color.black(), "#000000"))

    return result


def load_tailwind_theme(css: str, config: Optional[TokenParserConfig] = None) -> TokenSet:
    """
    Parse Tailwind ``theme.css`` text into a complete TokenSet.

    Falls back to every declaration in the file when no ``@theme`` block
    can be located.
    """
    variables = extract_theme_block(css)
    if not variables:
        logger.warning("No @theme block variables found, extracting all declarations")
        variables = extract_variables(css)

    tokens = apply_tailwind_defaults(categorize_tokens(variables, config))
    logger.info(f"Loaded Tailwind theme with {tokens.count()} tokens")
    return tokens


def prefix_theme_keys(data: dict[str, str]) -> dict[str, str]:
    """Turn ``{"background": v}`` into ``{"--background": v}`` for theme maps."""
    return {f"--{key}": value for key, value in data.items()}
