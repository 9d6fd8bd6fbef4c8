"""
tokensync - CSS design tokens to a typed token model.

Parses Tailwind ``@theme`` blocks, ``:root``/``.dark`` blocks, unscoped
custom property lists and flat light/dark JSON into token families with
canonical RGBA colors and px dimensions, ready to hand to a variable store.

Usage:
    from tokensync import (
        extract_theme_block,
        categorize_tokens,
        extract_root_and_dark,
        normalize_json,
        parse_color,
    )

    # Primitives from a Tailwind theme
    tokens = categorize_tokens(extract_theme_block(css))
    for token in tokens.colors:
        print("/".join(token.path), token.color.to_hex())

    # Light/dark semantic tokens
    theme = extract_root_and_dark(css)
    theme.light["--background"]

    # Individual conversions
    parse_color("oklch(62.8% 0.25 29.23)")
    parse_dimension("1rem")  # 16.0
"""

from .config import TokenParserConfig
from .exceptions import (
    TokenSyncError,
    ConfigurationError,
    InvalidInputError,
    CategorizerError,
    DuplicateRuleError,
)
from .models import (
    Color,
    RawVariable,
    ShadowType,
    ShadowLayer,
    ParsedColor,
    ParsedFloat,
    ParsedShadow,
    ParsedTypography,
    ParsedFont,
    TokenSet,
    ThemeTokens,
    JsonColorToken,
    JsonFloatToken,
)
from .colors import (
    parse_color,
    oklch_to_rgba,
    hsl_to_rgba,
    hex_to_rgba,
    rgb_string_to_rgba,
    colors_match,
)
from .dimensions import parse_dimension, parse_number, rem_to_px
from .extract import extract_variables, extract_theme_block, extract_root_and_dark
from .shadows import split_shadow_list, parse_shadow_layer, parse_shadow_value
from .categorize import (
    CategoryRule,
    DEFAULT_RULES,
    TokenCategorizer,
    categorize_tokens,
    evaluate_line_height,
    generate_spacing_scale,
)
from .json_tokens import (
    normalize_json,
    parse_json_color_tokens,
    parse_json_float_tokens,
)
from .tailwind import apply_tailwind_defaults, load_tailwind_theme, prefix_theme_keys
from .preview import PreviewNode, build_preview_tree, build_theme_preview_tree

__version__ = "0.1.0"
__all__ = [
    # Config
    "TokenParserConfig",
    # Exceptions
    "TokenSyncError",
    "ConfigurationError",
    "InvalidInputError",
    "CategorizerError",
    "DuplicateRuleError",
    # Models
    "Color",
    "RawVariable",
    "ShadowType",
    "ShadowLayer",
    "ParsedColor",
    "ParsedFloat",
    "ParsedShadow",
    "ParsedTypography",
    "ParsedFont",
    "TokenSet",
    "ThemeTokens",
    "JsonColorToken",
    "JsonFloatToken",
    # Colors
    "parse_color",
    "oklch_to_rgba",
    "hsl_to_rgba",
    "hex_to_rgba",
    "rgb_string_to_rgba",
    "colors_match",
    # Dimensions
    "parse_dimension",
    "parse_number",
    "rem_to_px",
    # Extraction
    "extract_variables",
    "extract_theme_block",
    "extract_root_and_dark",
    # Shadows
    "split_shadow_list",
    "parse_shadow_layer",
    "parse_shadow_value",
    # Categorization
    "CategoryRule",
    "DEFAULT_RULES",
    "TokenCategorizer",
    "categorize_tokens",
    "evaluate_line_height",
    "generate_spacing_scale",
    # JSON
    "normalize_json",
    "parse_json_color_tokens",
    "parse_json_float_tokens",
    # Tailwind
    "apply_tailwind_defaults",
    "load_tailwind_theme",
    "prefix_theme_keys",
    # Preview
    "PreviewNode",
    "build_preview_tree",
    "build_theme_preview_tree",
]
