"""
Variable Extractor - custom property declarations from raw CSS text.

Handles three source shapes:
- Tailwind v4 ``@theme [modifiers] { ... }`` blocks
- ``:root { ... }`` / ``.dark { ... }`` light and dark blocks
- Unscoped lists of ``--name: value;`` declarations

Block location is regex based, not a CSS parser. ``@theme`` ends at the
first line that is exactly ``}``, so nested braces inside it are not
supported; ``:root`` and ``.dark`` end at their first closing brace.
"""

import logging
import re

from .exceptions import InvalidInputError
from .models import RawVariable, ThemeTokens

logger = logging.getLogger(__name__)

_DECLARATION_RE = re.compile(r"(--[\w-]+)\s*:\s*([^;]+)")
_WHITESPACE_RE = re.compile(r"\s+")
_THEME_BLOCK_RE = re.compile(r"@theme\b[^{]*\{([\s\S]*?)\n\}")
_ROOT_BLOCK_RE = re.compile(r":root\s*\{([\s\S]*?)\}")
_DARK_BLOCK_RE = re.compile(r"\.dark\s*\{([\s\S]*?)\}")


def _require_text(css: str, argument: str = "css") -> None:
    if not isinstance(css, str):
        raise InvalidInputError(argument, "str", css)


def extract_variables(css: str) -> list[RawVariable]:
    """
    Extract every ``--name: value`` declaration, in source order.

    Values run to the next ``;``. Internal whitespace runs, including
    newlines in multi-line font stacks and shadow lists, collapse to a
    single space.
    """
    _require_text(css)
    return [
        RawVariable(
            name=match.group(1).strip(),
            raw_value=_WHITESPACE_RE.sub(" ", match.group(2).strip()),
        )
        for match in _DECLARATION_RE.finditer(css)
    ]


def extract_theme_block(css: str) -> list[RawVariable]:
    """
    Extract the declarations inside the first ``@theme`` block.

    Modifiers such as ``inline reference`` or ``default`` are allowed after
    ``@theme``. Returns an empty list when there is no such block.
    """
    _require_text(css)
    match = _THEME_BLOCK_RE.search(css)
    if not match:
        logger.debug("No @theme block found")
        return []
    return extract_variables(match.group(1))


def _block_to_map(pattern: re.Pattern, css: str) -> dict[str, str]:
    match = pattern.search(css)
    if not match:
        return {}
    # Later declarations of the same name overwrite earlier ones
    return {var.name: var.raw_value for var in extract_variables(match.group(1))}


def extract_root_and_dark(css: str) -> ThemeTokens:
    """
    Extract the first ``:root`` block as light values and the first
    ``.dark`` block as dark values, keyed by ``--name``.
    """
    _require_text(css)
    theme = ThemeTokens(
        light=_block_to_map(_ROOT_BLOCK_RE, css),
        dark=_block_to_map(_DARK_BLOCK_RE, css),
    )
    logger.debug(f"Extracted {len(theme.light)} light and {len(theme.dark)} dark variables")
    return theme
