"""
Preview summaries of parsed tokens for display before import.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from .models import ThemeTokens, TokenSet

FAMILY_LABELS: dict[str, str] = {
    "colors": "Colors",
    "spacing": "Spacing",
    "radius": "Radius",
    "shadows": "Shadows",
    "blur": "Blur",
    "backdrop_blur": "Backdrop Blur",
    "typography": "Typography",
    "opacity": "Opacity",
    "fonts": "Fonts",
    "breakpoints": "Breakpoints",
    "containers": "Containers",
    "font_weights": "Font Weights",
    "tracking": "Tracking",
    "leading": "Leading",
    "border_width": "Border Width",
    "max_width": "Max Width",
    "skew": "Skew",
}


@dataclass
class PreviewNode:
    """A labelled count, optionally broken down into children."""
    label: str
    count: int
    children: list["PreviewNode"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label, "count": self.count}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def build_preview_tree(tokens: TokenSet) -> list[PreviewNode]:
    """One node per non-empty family; colors are grouped by palette."""
    nodes = []
    for name, family in tokens.families().items():
        if not family:
            continue
        node = PreviewNode(label=FAMILY_LABELS[name], count=len(family))
        if name == "colors":
            palettes = Counter(token.path[0] for token in family)
            node.children = [PreviewNode(label=p, count=n) for p, n in palettes.items()]
        nodes.append(node)
    return nodes


def build_theme_preview_tree(theme: ThemeTokens) -> list[PreviewNode]:
    """Single node counting distinct names, with per-mode children."""
    return [
        PreviewNode(
            label="Theme Tokens",
            count=len(theme.keys()),
            children=[
                PreviewNode(label="Light Mode", count=len(theme.light)),
                PreviewNode(label="Dark Mode", count=len(theme.dark)),
            ],
        )
    ]
