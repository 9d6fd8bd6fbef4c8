"""
Configuration for the token parser.
"""

from dataclasses import dataclass, field

from .exceptions import ConfigurationError

# Pixels per rem/em unit
ROOT_FONT_SIZE = 16.0

# Per-channel tolerance for approximate color equality
COLOR_TOLERANCE = 0.005

# Tailwind v4 spacing multipliers applied to the --spacing base value
SPACING_STEPS: tuple[float, ...] = (
    0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10,
    11, 12, 14, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56,
    60, 64, 72, 80, 96,
)

DEFAULT_SHADOW_COLOR = "rgb(0 0 0 / 0.1)"


@dataclass
class TokenParserConfig:
    """Configuration for the token categorizer and converters."""

    # Units
    root_font_size: float = ROOT_FONT_SIZE

    # Spacing scale synthesis
    spacing_steps: tuple[float, ...] = field(default_factory=lambda: SPACING_STEPS)

    # Shadows
    default_shadow_color: str = DEFAULT_SHADOW_COLOR

    # Typography
    line_height_ratio_limit: float = 4.0  # Below this = unitless ratio
    default_line_height_ratio: float = 1.5

    def __post_init__(self):
        """Reject values the converters cannot work with."""
        if self.root_font_size <= 0:
            raise ConfigurationError("root_font_size", self.root_font_size, "must be positive")
        if self.default_line_height_ratio <= 0:
            raise ConfigurationError(
                "default_line_height_ratio", self.default_line_height_ratio, "must be positive"
            )
        if not self.spacing_steps:
            raise ConfigurationError("spacing_steps", self.spacing_steps, "must not be empty")
        self.spacing_steps = tuple(self.spacing_steps)
