"""
Token Categorizer - flat custom properties to typed token families.

Each variable name (without its leading ``--``) is matched against an
ordered table of rules. The first rule whose predicate accepts the name
claims the variable; later rules never see it, so table order is part of
the contract. Names no rule claims are dropped.

Two passes finish the set:
- Typography records fold in their ``--text-<size>--line-height``,
  ``--letter-spacing`` and ``--font-weight`` siblings while the text size
  itself is categorized.
- A single ``--spacing`` base expands into the full multiplier scale.

Duplicate paths within a family are resolved last-wins: a later
declaration replaces the earlier token in place.

Usage:
    from tokensync.categorize import categorize_tokens
    from tokensync.extract import extract_theme_block

    tokens = categorize_tokens(extract_theme_block(css))
    tokens.colors[0].path  # ["red", "50"]
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .colors import parse_color
from .config import SPACING_STEPS, TokenParserConfig
from .dimensions import parse_dimension, parse_number
from .exceptions import DuplicateRuleError, InvalidInputError
from .models import (
    FAMILY_NAMES,
    ParsedColor,
    ParsedFloat,
    ParsedFont,
    ParsedShadow,
    ParsedTypography,
    RawVariable,
    TokenSet,
)
from .shadows import parse_shadow_value

logger = logging.getLogger(__name__)

_CALC_RATIO_RE = re.compile(
    r"calc\(\s*(\d+(?:\.\d*)?|\.\d+)\s*/\s*(\d+(?:\.\d*)?|\.\d+)\s*\)"
)

TYPOGRAPHY_MODIFIERS = ("--line-height", "--letter-spacing", "--font-weight")


# =============================================================================
# Helpers
# =============================================================================


def evaluate_line_height(value: str) -> Optional[float]:
    """
    Evaluate a line-height value.

    ``calc(A / B)`` gives the ratio A/B; anything else is read as a plain
    number. Returns None for non-numeric values.
    """
    match = _CALC_RATIO_RE.search(value)
    if match:
        denominator = float(match.group(2))
        if denominator != 0:
            return float(match.group(1)) / denominator
    return parse_number(value)


def _format_number(value: float) -> str:
    return f"{value:g}"


def _format_px(value: float) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".") + "px"


def generate_spacing_scale(
    base_px: float,
    steps: Iterable[float] = SPACING_STEPS,
) -> list[ParsedFloat]:
    """
    Build the Tailwind spacing scale from the ``--spacing`` base value.

    Step names replace ``.`` with ``_`` (``0.5`` -> ``0_5``) because the
    downstream variable store rejects dots in names.
    """
    scale = []
    for step in steps:
        value = step * base_px
        scale.append(ParsedFloat(
            path=[_format_number(step).replace(".", "_")],
            value=value,
            raw_value=_format_px(value),
        ))
    return scale


def _strip_dashes(name: str) -> str:
    return name[2:] if name.startswith("--") else name


# =============================================================================
# Categorization pass
# =============================================================================


class _CategorizationPass:
    """Mutable state for one ``categorize`` call."""

    def __init__(self, variables: list[RawVariable], config: TokenParserConfig):
        self.config = config
        self.tokens = TokenSet()
        self._positions: dict[str, dict[Any, int]] = {name: {} for name in FAMILY_NAMES}

        # Sibling lookup by bare name; the first declaration wins
        self.index: dict[str, str] = {}
        for var in variables:
            self.index.setdefault(_strip_dashes(var.name), var.raw_value)

    def dimension(self, value: str) -> Optional[float]:
        return parse_dimension(value, self.config.root_font_size)

    def add(self, family: str, token) -> None:
        """Append a token, replacing any earlier token with the same key."""
        tokens = getattr(self.tokens, family)
        positions = self._positions[family]
        if token.key in positions:
            logger.debug(f"Replacing duplicate {family} token {token.key}")
            tokens[positions[token.key]] = token
        else:
            positions[token.key] = len(tokens)
            tokens.append(token)


Handler = Callable[[_CategorizationPass, str, RawVariable], None]


@dataclass(frozen=True)
class CategoryRule:
    """
    One entry of the categorization table.

    ``matches`` receives the variable name without ``--``. ``handle``
    receives the pass, the same name and the variable, and adds zero or
    more tokens.
    """
    name: str
    matches: Callable[[str], bool]
    handle: Handler


# =============================================================================
# Rule builders
# =============================================================================


def _prefix(*prefixes: str) -> Callable[[str], bool]:
    def matches(name: str) -> bool:
        return name.startswith(prefixes)
    return matches


def _exact_or_prefix(base: str) -> Callable[[str], bool]:
    def matches(name: str) -> bool:
        return name == base or name.startswith(base + "-")
    return matches


def _remainder(name: str, prefixes: tuple[str, ...]) -> str:
    for prefix in prefixes:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


def _float_handler(
    family: str,
    prefixes: tuple[str, ...],
    numeric: bool = False,
    split_path: bool = True,
    bare_name: Optional[str] = None,
) -> Handler:
    """
    Handler for a float family.

    Args:
        family: TokenSet attribute to add to
        prefixes: Name prefixes removed to form the path
        numeric: Parse a leading number instead of a px dimension
        split_path: Split the remainder on ``-`` into path segments
        bare_name: The bare family name (e.g. ``radius``), mapped to ``default``
    """
    def handle(ctx: _CategorizationPass, name: str, var: RawVariable) -> None:
        if bare_name is not None and name == bare_name:
            path = ["default"]
        else:
            rest = _remainder(name, prefixes)
            if not rest:
                logger.debug(f"Skipping {var.name}: empty token path")
                return
            path = rest.split("-") if split_path else [rest]

        value = parse_number(var.raw_value) if numeric else ctx.dimension(var.raw_value)
        if value is None:
            logger.debug(f"Skipping {var.name}: unparseable value {var.raw_value!r}")
            return
        ctx.add(family, ParsedFloat(path=path, value=value, raw_value=var.raw_value))

    return handle


def _handle_color(ctx: _CategorizationPass, name: str, var: RawVariable) -> None:
    rest = name[len("color-"):]
    if not rest:
        return
    color = parse_color(var.raw_value)
    if color is None:
        logger.debug(f"Skipping {var.name}: unparseable color {var.raw_value!r}")
        return
    ctx.add("colors", ParsedColor(path=rest.split("-"), color=color, raw_value=var.raw_value))


def _handle_spacing(ctx: _CategorizationPass, name: str, var: RawVariable) -> None:
    value = ctx.dimension(var.raw_value)
    if value is not None:
        ctx.add("spacing", ParsedFloat(path=["base"], value=value, raw_value=var.raw_value))


def _shadow_handler(prefix: str, namespace: str) -> Handler:
    def handle(ctx: _CategorizationPass, name: str, var: RawVariable) -> None:
        rest = name[len(prefix):]
        if not rest:
            logger.debug(f"Skipping {var.name}: empty shadow name")
            return
        layers = parse_shadow_value(
            var.raw_value,
            ctx.config.root_font_size,
            ctx.config.default_shadow_color,
        )
        if not layers:
            logger.debug(f"Skipping {var.name}: no shadow layers")
            return
        ctx.add("shadows", ParsedShadow(
            name=f"{namespace}/{rest}",
            shadows=layers,
            raw_value=var.raw_value,
        ))
    return handle


def _is_bare_shadow(name: str) -> bool:
    return name.startswith("shadow-") and not name.startswith("shadow-inner")


def _is_text_size(name: str) -> bool:
    return name.startswith("text-") and "shadow" not in name


def _handle_typography(ctx: _CategorizationPass, name: str, var: RawVariable) -> None:
    # Modifier declarations are folded into their text size below
    if name.endswith(TYPOGRAPHY_MODIFIERS):
        return

    size_name = name[len("text-"):]
    if not size_name:
        logger.debug(f"Skipping {var.name}: empty text size name")
        return

    font_size = ctx.dimension(var.raw_value)
    if font_size is None:
        logger.debug(f"Skipping {var.name}: unparseable font size {var.raw_value!r}")
        return

    line_height = None
    raw = ctx.index.get(f"{name}--line-height")
    if raw is not None:
        line_height = evaluate_line_height(raw)

    letter_spacing = None
    raw = ctx.index.get(f"{name}--letter-spacing")
    if raw is not None:
        letter_spacing = ctx.dimension(raw)

    font_weight = None
    raw = ctx.index.get(f"{name}--font-weight")
    if raw is not None:
        font_weight = parse_number(raw)

    ctx.add("typography", ParsedTypography(
        name=size_name,
        font_size=font_size,
        line_height=line_height,
        letter_spacing=letter_spacing,
        font_weight=font_weight,
        raw_value=var.raw_value,
        line_height_ratio_limit=ctx.config.line_height_ratio_limit,
        default_line_height_ratio=ctx.config.default_line_height_ratio,
    ))


def _is_font_family(name: str) -> bool:
    return name.startswith("font-") and not name.startswith("font-weight-")


def _handle_font(ctx: _CategorizationPass, name: str, var: RawVariable) -> None:
    font_name = name[len("font-"):]
    if not font_name:
        logger.debug(f"Skipping {var.name}: empty font name")
        return
    family = var.raw_value.split(",")[0].strip().replace('"', "").replace("'", "")
    ctx.add("fonts", ParsedFont(name=font_name, family=family, raw_value=var.raw_value))


# =============================================================================
# Rule table (order matters)
# =============================================================================

DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("colors", _prefix("color-"), _handle_color),
    CategoryRule("spacing", lambda name: name == "spacing", _handle_spacing),
    CategoryRule(
        "breakpoints", _prefix("breakpoint-"),
        _float_handler("breakpoints", ("breakpoint-",), split_path=False),
    ),
    CategoryRule(
        "containers", _prefix("container-"),
        _float_handler("containers", ("container-",), split_path=False),
    ),
    CategoryRule(
        "max_width", _prefix("max-w-", "max-width-"),
        _float_handler("max_width", ("max-width-", "max-w-"), split_path=False),
    ),
    CategoryRule(
        "font_weights", _prefix("font-weight-"),
        _float_handler("font_weights", ("font-weight-",), numeric=True, split_path=False),
    ),
    CategoryRule(
        "tracking", _prefix("tracking-"),
        _float_handler("tracking", ("tracking-",), split_path=False),
    ),
    CategoryRule(
        "leading", _prefix("leading-"),
        _float_handler("leading", ("leading-",), numeric=True, split_path=False),
    ),
    CategoryRule(
        "radius", _exact_or_prefix("radius"),
        _float_handler("radius", ("radius-",), bare_name="radius"),
    ),
    CategoryRule("inset_shadows", _prefix("inset-shadow-"), _shadow_handler("inset-shadow-", "inset-shadow")),
    CategoryRule("drop_shadows", _prefix("drop-shadow-"), _shadow_handler("drop-shadow-", "drop-shadow")),
    CategoryRule("text_shadows", _prefix("text-shadow-"), _shadow_handler("text-shadow-", "text-shadow")),
    CategoryRule("box_shadows", _is_bare_shadow, _shadow_handler("shadow-", "drop-shadow")),
    CategoryRule(
        "blur", _exact_or_prefix("blur"),
        _float_handler("blur", ("blur-",), bare_name="blur"),
    ),
    CategoryRule(
        "backdrop_blur", _exact_or_prefix("backdrop-blur"),
        _float_handler("backdrop_blur", ("backdrop-blur-",), bare_name="backdrop-blur"),
    ),
    CategoryRule("typography", _is_text_size, _handle_typography),
    CategoryRule("fonts", _is_font_family, _handle_font),
    CategoryRule(
        "opacity", _prefix("opacity-"),
        _float_handler("opacity", ("opacity-",), numeric=True),
    ),
    CategoryRule(
        "border_width", _prefix("border-width-"),
        _float_handler("border_width", ("border-width-",)),
    ),
    CategoryRule(
        "skew", _prefix("skew-"),
        _float_handler("skew", ("skew-",), numeric=True),
    ),
)


# =============================================================================
# Categorizer
# =============================================================================


class TokenCategorizer:
    """
    Classify raw custom properties into a TokenSet.

    Example:
        categorizer = TokenCategorizer()
        tokens = categorizer.categorize([
            RawVariable("--color-red-500", "oklch(63.7% 0.237 25.331)"),
            RawVariable("--radius-sm", "4px"),
        ])
    """

    def __init__(
        self,
        config: Optional[TokenParserConfig] = None,
        rules: Optional[Iterable[CategoryRule]] = None,
    ):
        """
        Initialize the categorizer.

        Args:
            config: Parser configuration
            rules: Ordered rule table (defaults to DEFAULT_RULES)
        """
        self.config = config or TokenParserConfig()
        self.rules = tuple(rules) if rules is not None else DEFAULT_RULES

        seen = set()
        for rule in self.rules:
            if rule.name in seen:
                raise DuplicateRuleError(rule.name)
            seen.add(rule.name)

    def match_rule(self, name: str) -> Optional[CategoryRule]:
        """Return the first rule that claims ``name`` (``--`` optional)."""
        return self._find_rule(_strip_dashes(name))

    def _find_rule(self, bare: str) -> Optional[CategoryRule]:
        for rule in self.rules:
            if rule.matches(bare):
                return rule
        return None

    def categorize(self, variables: Iterable[RawVariable]) -> TokenSet:
        """
        Categorize variables into typed token families.

        Args:
            variables: RawVariable instances or ``(name, value)`` pairs

        Returns:
            TokenSet with spacing already expanded to its full scale
        """
        items = self._normalize(variables)
        ctx = _CategorizationPass(items, self.config)

        dropped = 0
        for var in items:
            name = _strip_dashes(var.name)
            rule = self._find_rule(name)
            if rule is None:
                dropped += 1
                continue
            rule.handle(ctx, name, var)

        tokens = ctx.tokens
        if len(tokens.spacing) == 1:
            tokens.spacing = generate_spacing_scale(tokens.spacing[0].value, self.config.spacing_steps)

        logger.info(
            f"Categorized {tokens.count()} tokens from {len(items)} variables "
            f"({dropped} unmatched)"
        )
        return tokens

    @staticmethod
    def _normalize(variables: Iterable[RawVariable]) -> list[RawVariable]:
        if isinstance(variables, (str, bytes)) or not isinstance(variables, Iterable):
            raise InvalidInputError("variables", "iterable of RawVariable", variables)

        items = []
        for var in variables:
            if isinstance(var, RawVariable):
                items.append(var)
            elif isinstance(var, tuple) and len(var) == 2:
                items.append(RawVariable(str(var[0]), str(var[1])))
            else:
                raise InvalidInputError("variables", "RawVariable or (name, value) pair", var)
        return items


def categorize_tokens(
    variables: Iterable[RawVariable],
    config: Optional[TokenParserConfig] = None,
) -> TokenSet:
    """Categorize variables with the default rule table."""
    return TokenCategorizer(config).categorize(variables)
