"""
Pytest fixtures for tokensync tests.
"""

import pytest

from tokensync.config import TokenParserConfig
from tokensync.models import RawVariable


TAILWIND_THEME_CSS = """\
@layer theme, base, components, utilities;

@theme default {
  --font-sans:
    ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji",
    "Segoe UI Emoji";
  --font-mono: "JetBrains Mono", ui-monospace, monospace;

  --color-red-50: oklch(97.1% 0.013 17.38);
  --color-red-500: oklch(63.7% 0.237 25.331);
  --color-neutral-50: oklch(98.5% 0 0);
  --color-neutral-950: oklch(14.5% 0 0);
  --color-zinc-50: oklch(98.5% 0 0);
  --color-black: #000;
  --color-white: #fff;

  --spacing: 0.25rem;

  --breakpoint-sm: 40rem;
  --container-3xs: 16rem;

  --text-xs: 0.75rem;
  --text-xs--line-height: calc(1 / 0.75);
  --text-sm: 0.875rem;
  --text-sm--line-height: calc(1.25 / 0.875);

  --font-weight-bold: 700;
  --tracking-tight: -0.025em;
  --leading-relaxed: 1.625;

  --radius-xs: 0.125rem;
  --radius-md: 0.375rem;

  --shadow-sm: 0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1);
  --inset-shadow-xs: inset 0 1px 1px rgb(0 0 0 / 0.05);
  --drop-shadow-md: 0 3px 3px rgb(0 0 0 / 0.12);
  --text-shadow-lg:
    0px 1px 2px rgb(0 0 0 / 0.1), 0px 3px 2px rgb(0 0 0 / 0.1),
    0px 4px 8px rgb(0 0 0 / 0.1);

  --blur-xs: 4px;
  --blur-sm: 8px;

  --default-transition-duration: 150ms;
}
"""

SHADCN_CSS = """\
:root {
  --radius: 0.625rem;
  --background: oklch(1 0 0);
  --foreground: oklch(0.145 0 0);
  --primary: oklch(0.205 0 0);
}

.dark {
  --background: oklch(0.145 0 0);
  --foreground: oklch(0.985 0 0);
}
"""

THEME_JSON = {
    "colors/background": {"Light": "#ffffff", "Dark": "#09090b"},
    "colors/foreground": {"Light": "#09090b", "Dark": "#fafafa"},
    "colors/ring": {"Light": "hsl(240 5% 65%)"},
    "colors/broken": {"Light": "nope", "Dark": "also-nope"},
    "radius/sm": {"Light": "4px", "Dark": "4px"},
    "radius/md": "0.5rem",
    "radius/lg": {"Dark": "0.75rem"},
    "font/sans": "Inter, sans-serif",
    "text/sm": {"size": "14px", "lineHeight": "20px"},
}


@pytest.fixture
def config():
    """Default parser configuration."""
    return TokenParserConfig()


@pytest.fixture
def tailwind_css():
    """Excerpt of Tailwind v4 theme.css."""
    return TAILWIND_THEME_CSS


@pytest.fixture
def shadcn_css():
    """Shadcn-style :root and .dark blocks."""
    return SHADCN_CSS


@pytest.fixture
def theme_json():
    """Flat light/dark JSON token file."""
    return dict(THEME_JSON)


@pytest.fixture
def make_vars():
    """Build RawVariable lists from (name, value) pairs."""
    def build(*pairs):
        return [RawVariable(name, value) for name, value in pairs]
    return build
