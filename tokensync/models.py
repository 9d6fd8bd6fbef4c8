"""
Data models for parsed design tokens.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .config import COLOR_TOLERANCE


@dataclass(frozen=True, eq=False)
class Color:
    """
    Canonical RGBA color with every channel in [0, 1].

    Equality is approximate: two colors are equal when every channel
    differs by less than ``COLOR_TOLERANCE``. Instances are unhashable.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def matches(self, other: "Color", tolerance: float = COLOR_TOLERANCE) -> bool:
        """Check whether every channel is within ``tolerance`` of ``other``."""
        return (
            abs(self.r - other.r) < tolerance
            and abs(self.g - other.g) < tolerance
            and abs(self.b - other.b) < tolerance
            and abs(self.a - other.a) < tolerance
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.matches(other)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def transparent(cls) -> "Color":
        return cls(0.0, 0.0, 0.0, 0.0)

    def _channels_255(self) -> tuple[int, int, int]:
        return tuple(round(c * 255) for c in (self.r, self.g, self.b))

    def to_hex(self) -> str:
        """Hex string, with an alpha byte only when the color is translucent."""
        r, g, b = self._channels_255()
        if self.a < 1.0:
            return f"#{r:02x}{g:02x}{b:02x}{round(self.a * 255):02x}"
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_css(self) -> str:
        """CSS ``rgb()`` / ``rgba()`` string."""
        r, g, b = self._channels_255()
        if self.a < 1.0:
            return f"rgba({r}, {g}, {b}, {round(self.a, 3)})"
        return f"rgb({r}, {g}, {b})"

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass(frozen=True)
class RawVariable:
    """A custom property declaration extracted verbatim from CSS or JSON."""

    name: str  # e.g. "--color-red-500"
    raw_value: str  # e.g. "oklch(63.7% 0.237 25.331)"


class ShadowType(Enum):
    """Effect type of a single shadow layer."""
    DROP_SHADOW = "DROP_SHADOW"
    INNER_SHADOW = "INNER_SHADOW"


@dataclass
class ShadowLayer:
    """One layer of a (possibly multi-layer) shadow value. Offsets are px."""

    x: float
    y: float
    blur: float
    spread: float
    color: Color
    type: ShadowType = ShadowType.DROP_SHADOW

    @property
    def inset(self) -> bool:
        return self.type is ShadowType.INNER_SHADOW

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "blur": self.blur,
            "spread": self.spread,
            "color": self.color.to_dict(),
            "type": self.type.value,
        }


@dataclass
class ParsedColor:
    """A color token."""

    path: list[str]  # e.g. ["red", "500"]
    color: Color
    raw_value: str = ""

    @property
    def key(self) -> tuple[str, ...]:
        return tuple(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "color": self.color.to_dict(), "raw_value": self.raw_value}


@dataclass
class ParsedFloat:
    """A numeric token, already resolved to px, degrees or a unitless ratio."""

    path: list[str]
    value: float
    raw_value: str = ""

    @property
    def key(self) -> tuple[str, ...]:
        return tuple(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "value": self.value, "raw_value": self.raw_value}


@dataclass
class ParsedShadow:
    """A named shadow token, e.g. ``drop-shadow/sm``."""

    name: str
    shadows: list[ShadowLayer] = field(default_factory=list)
    raw_value: str = ""

    @property
    def key(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "shadows": [layer.to_dict() for layer in self.shadows],
            "raw_value": self.raw_value,
        }


@dataclass
class ParsedTypography:
    """A text size with its optional line-height, letter-spacing and weight."""

    name: str
    font_size: float
    line_height: Optional[float] = None  # px, or a unitless ratio when small
    letter_spacing: Optional[float] = None
    font_weight: Optional[float] = None
    raw_value: str = ""

    # Set from TokenParserConfig by the categorizer
    line_height_ratio_limit: float = 4.0
    default_line_height_ratio: float = 1.5

    @property
    def key(self) -> str:
        return self.name

    def resolved_line_height(
        self,
        ratio_limit: Optional[float] = None,
        default_ratio: Optional[float] = None,
    ) -> float:
        """
        Line height in px.

        Values below ``ratio_limit`` are treated as multipliers of the font
        size. A missing line height falls back to ``default_ratio``. Both
        default to the limits recorded on the token.
        """
        if ratio_limit is None:
            ratio_limit = self.line_height_ratio_limit
        if default_ratio is None:
            default_ratio = self.default_line_height_ratio
        line_height = self.line_height or self.font_size * default_ratio
        if line_height < ratio_limit:
            line_height = self.font_size * line_height
        return line_height

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "font_size": self.font_size,
            "line_height": self.line_height,
            "letter_spacing": self.letter_spacing,
            "font_weight": self.font_weight,
            "raw_value": self.raw_value,
        }


@dataclass
class ParsedFont:
    """A font family token."""

    name: str
    family: str
    raw_value: str = ""

    @property
    def key(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "family": self.family, "raw_value": self.raw_value}


# Family names in presentation order
FAMILY_NAMES: tuple[str, ...] = (
    "colors",
    "spacing",
    "radius",
    "shadows",
    "blur",
    "backdrop_blur",
    "typography",
    "opacity",
    "fonts",
    "breakpoints",
    "containers",
    "font_weights",
    "tracking",
    "leading",
    "border_width",
    "max_width",
    "skew",
)


@dataclass
class TokenSet:
    """All token families produced by one categorization pass."""

    colors: list[ParsedColor] = field(default_factory=list)
    spacing: list[ParsedFloat] = field(default_factory=list)
    radius: list[ParsedFloat] = field(default_factory=list)
    shadows: list[ParsedShadow] = field(default_factory=list)
    blur: list[ParsedFloat] = field(default_factory=list)
    backdrop_blur: list[ParsedFloat] = field(default_factory=list)
    typography: list[ParsedTypography] = field(default_factory=list)
    opacity: list[ParsedFloat] = field(default_factory=list)
    fonts: list[ParsedFont] = field(default_factory=list)
    breakpoints: list[ParsedFloat] = field(default_factory=list)
    containers: list[ParsedFloat] = field(default_factory=list)
    font_weights: list[ParsedFloat] = field(default_factory=list)
    tracking: list[ParsedFloat] = field(default_factory=list)
    leading: list[ParsedFloat] = field(default_factory=list)
    border_width: list[ParsedFloat] = field(default_factory=list)
    max_width: list[ParsedFloat] = field(default_factory=list)
    skew: list[ParsedFloat] = field(default_factory=list)

    def families(self) -> dict[str, list]:
        """Family name to token list, in presentation order."""
        return {name: getattr(self, name) for name in FAMILY_NAMES}

    def count(self) -> int:
        """Total number of tokens across all families."""
        return sum(len(tokens) for tokens in self.families().values())

    def is_empty(self) -> bool:
        return self.count() == 0

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Convert to dictionary for serialization."""
        return {
            name: [token.to_dict() for token in tokens]
            for name, tokens in self.families().items()
        }


@dataclass
class ThemeTokens:
    """Light and dark mode raw values keyed by variable name."""

    light: dict[str, str] = field(default_factory=dict)
    dark: dict[str, str] = field(default_factory=dict)

    def keys(self) -> list[str]:
        """Union of light and dark names, light order first."""
        return list(dict.fromkeys([*self.light, *self.dark]))

    def is_empty(self) -> bool:
        return not self.light and not self.dark

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"light": dict(self.light), "dark": dict(self.dark)}


@dataclass
class JsonFloatToken:
    """A numeric token read from flat JSON, resolved per mode."""

    name: str
    light: float
    dark: float


@dataclass
class JsonColorToken:
    """A color token read from flat JSON. Unparseable modes are ``None``."""

    name: str
    light: Optional[Color] = None
    dark: Optional[Color] = None
