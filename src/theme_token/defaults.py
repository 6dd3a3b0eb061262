"""
Built-in default theme values.

Provides a complete light-mode property set covering every key in
:data:`~theme_token.models.REQUIRED_PROPERTY_KEYS`, plus the fallbacks used
when exporting a theme that omits typography or spacing.
"""

from __future__ import annotations

from theme_token.models import ThemeStyleProps

# ---------------------------------------------------------------------------
# Default light palette (ShadCN neutral)
# ---------------------------------------------------------------------------

DEFAULT_LIGHT_STYLES: ThemeStyleProps = {
    "background": "oklch(1 0 0)",
    "foreground": "oklch(0.145 0 0)",
    "card": "oklch(1 0 0)",
    "card-foreground": "oklch(0.145 0 0)",
    "popover": "oklch(1 0 0)",
    "popover-foreground": "oklch(0.145 0 0)",
    "primary": "oklch(0.205 0 0)",
    "primary-foreground": "oklch(0.985 0 0)",
    "secondary": "oklch(0.97 0 0)",
    "secondary-foreground": "oklch(0.205 0 0)",
    "muted": "oklch(0.97 0 0)",
    "muted-foreground": "oklch(0.556 0 0)",
    "accent": "oklch(0.97 0 0)",
    "accent-foreground": "oklch(0.205 0 0)",
    "destructive": "oklch(0.577 0.245 27.325)",
    "destructive-foreground": "oklch(0.577 0.245 27.325)",
    "border": "oklch(0.922 0 0)",
    "input": "oklch(0.922 0 0)",
    "ring": "oklch(0.708 0 0)",
    "radius": "0.625rem",
}


# ---------------------------------------------------------------------------
# Registry export fallbacks
# ---------------------------------------------------------------------------

DEFAULT_FONT_SANS = "Inter, sans-serif"
DEFAULT_FONT_MONO = "monospace"
DEFAULT_FONT_SERIF = "serif"
DEFAULT_RADIUS = "0.5rem"
DEFAULT_TRACKING = "0em"
DEFAULT_SPACING = "0.25rem"


def get_default_styles() -> ThemeStyleProps:
    """Return a fresh copy of the default light property set."""
    return dict(DEFAULT_LIGHT_STYLES)
