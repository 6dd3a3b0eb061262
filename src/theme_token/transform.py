"""
Theme format transformations.

Convert a ThemeToken into stylesheet text, a ShadCN registry item, JSON and
a Tailwind v4 config snippet.
"""

from __future__ import annotations

import json
import re
from typing import TypedDict

from theme_token.defaults import (
    DEFAULT_FONT_MONO,
    DEFAULT_FONT_SANS,
    DEFAULT_FONT_SERIF,
    DEFAULT_RADIUS,
    DEFAULT_SPACING,
    DEFAULT_TRACKING,
    get_default_styles,
)
from theme_token.models import (
    COLOR_KEYS,
    LAYER_BASE,
    THEME_TOKEN_SCHEMA_URL,
    ThemeStyleProps,
    ThemeStyles,
    ThemeToken,
)
from theme_token.variables import to_css_name

SHADCN_REGISTRY_SCHEMA_URL = "https://ui.shadcn.com/schema/registry-item.json"
REGISTRY_BASE_URL = "https://themetoken.dev/r/themes"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Tracking scale expressed relative to --tracking-normal.
_TRACKING_SCALE: dict[str, str] = {
    "tracking-tighter": "calc(var(--tracking-normal) - 0.05em)",
    "tracking-tight": "calc(var(--tracking-normal) - 0.025em)",
    "tracking-wide": "calc(var(--tracking-normal) + 0.025em)",
    "tracking-wider": "calc(var(--tracking-normal) + 0.05em)",
    "tracking-widest": "calc(var(--tracking-normal) + 0.1em)",
}


class ShadcnCssVars(TypedDict):
    """Variable groups of a registry item."""

    theme: dict[str, str]
    light: dict[str, str]
    dark: dict[str, str]


ShadcnRegistryItem = TypedDict(
    "ShadcnRegistryItem",
    {
        "$schema": str,
        "name": str,
        "type": str,
        "css": dict[str, dict[str, dict[str, str]]],
        "cssVars": ShadcnCssVars,
    },
)
"""Registry item compatible with ``npx shadcn add``."""


def _theme_value(light: ThemeStyleProps, dark: ThemeStyleProps, key: str) -> str:
    """Get a value from light, then dark, else an empty string."""
    return light.get(key) or dark.get(key) or ""


def to_shadcn_name(name: str) -> str:
    """Convert a theme name to a registry name (lowercase, hyphenated)."""
    return _NON_ALNUM_RE.sub("-", name.lower()).strip("-")


def _to_registry_vars(props: ThemeStyleProps) -> dict[str, str]:
    # Only letter-spacing is renamed here; the shadow offsets keep their
    # internal names inside registry items.
    registry_vars: dict[str, str] = {}
    for key, value in props.items():
        if value is None:
            continue
        if key == "letter-spacing":
            registry_vars["tracking-normal"] = value
        else:
            registry_vars[key] = value
    return registry_vars


def to_shadcn_registry(theme: ThemeToken) -> ShadcnRegistryItem:
    """
    Convert a ThemeToken to a ShadCN registry item.

    Args:
        theme: A validated ThemeToken

    Returns:
        Registry item usable with ``npx shadcn add <url>``
    """
    light = theme.styles.light
    dark = theme.styles.dark

    shared = {
        "font-sans": _theme_value(light, dark, "font-sans") or DEFAULT_FONT_SANS,
        "font-mono": _theme_value(light, dark, "font-mono") or DEFAULT_FONT_MONO,
        "font-serif": _theme_value(light, dark, "font-serif") or DEFAULT_FONT_SERIF,
        "radius": _theme_value(light, dark, "radius") or DEFAULT_RADIUS,
    }
    shared.update(_TRACKING_SCALE)

    light_vars = _to_registry_vars(light)
    light_vars["tracking-normal"] = _theme_value(light, dark, "letter-spacing") or DEFAULT_TRACKING
    light_vars["spacing"] = _theme_value(light, dark, "spacing") or DEFAULT_SPACING

    return {
        "$schema": SHADCN_REGISTRY_SCHEMA_URL,
        "name": to_shadcn_name(theme.name),
        "type": "registry:style",
        "css": {
            LAYER_BASE: {
                "body": {"letter-spacing": "var(--tracking-normal)"},
            },
        },
        "cssVars": {
            "theme": shared,
            "light": light_vars,
            "dark": _to_registry_vars(dark),
        },
    }


def _css_block(selector: str, props: ThemeStyleProps) -> list[str]:
    lines = [f"{selector} {{"]
    for key, value in props.items():
        if value is not None:
            lines.append(f"  --{to_css_name(key)}: {value};")
    lines.append("}")
    return lines


def to_css(theme: ThemeToken) -> str:
    """
    Convert a ThemeToken to stylesheet text.

    Emits ``:root`` (light) then ``.dark``, in property order, mapping
    internal names back to their CSS variable names, followed by the
    ``@layer base`` rules when present.
    """
    lines: list[str] = []
    lines.extend(_css_block(":root", theme.styles.light))
    lines.append("")
    lines.extend(_css_block(".dark", theme.styles.dark))

    layer = (theme.css or {}).get(LAYER_BASE)
    if layer:
        lines.append("")
        lines.append(f"{LAYER_BASE} {{")
        for selector, props in layer.items():
            lines.append(f"  {selector} {{")
            for prop, value in props.items():
                lines.append(f"    {prop}: {value};")
            lines.append("  }")
        lines.append("}")

    return "\n".join(lines)


def to_css_variables(styles: ThemeStyleProps) -> dict[str, str]:
    """Map one mode's properties to ``--name`` custom properties."""
    return {
        f"--{to_css_name(key)}": value
        for key, value in styles.items()
        if isinstance(value, str)
    }


def to_json(theme: ThemeToken, pretty: bool = True, indent: int = 2) -> str:
    """Serialize a ThemeToken to JSON (indented by default)."""
    if pretty:
        return json.dumps(theme.to_dict(), indent=indent, ensure_ascii=False)
    return json.dumps(theme.to_dict(), separators=(",", ":"), ensure_ascii=False)


def create_theme_token(
    name: str,
    light: ThemeStyleProps,
    dark: ThemeStyleProps | None = None,
    schema_url: str = THEME_TOKEN_SCHEMA_URL,
) -> ThemeToken:
    """
    Create a complete ThemeToken from partial styles.

    Missing required properties are filled from the built-in defaults. When
    *dark* is omitted the dark mode is a copy of the merged light mode.
    *schema_url* is stamped as the document's ``$schema``.
    """
    light_styles = get_default_styles()
    light_styles.update(light)

    if dark is None:
        dark_styles = dict(light_styles)
    else:
        dark_styles = get_default_styles()
        dark_styles.update(dark)

    return ThemeToken(
        schema=schema_url,
        name=name,
        styles=ThemeStyles(light=light_styles, dark=dark_styles),
    )


def to_tailwind_config(theme: ThemeToken) -> str:
    """Generate a Tailwind v4 CSS config snippet (``@theme`` plus variables)."""
    lines: list[str] = ["@theme {", "  /* Colors */"]
    for key in COLOR_KEYS:
        lines.append(f"  --color-{key}: var(--{key});")

    lines.append("")
    lines.append("  /* Border Radius */")
    lines.append("  --radius-sm: calc(var(--radius) - 4px);")
    lines.append("  --radius-md: calc(var(--radius) - 2px);")
    lines.append("  --radius-lg: var(--radius);")
    lines.append("  --radius-xl: calc(var(--radius) + 4px);")
    lines.append("}")
    lines.append("")

    # Tailwind reads the variables under their document names here.
    lines.append("/* Light mode (default) */")
    lines.append(":root {")
    for key, value in theme.styles.light.items():
        if value is not None:
            lines.append(f"  --{key}: {value};")
    lines.append("}")
    lines.append("")
    lines.append("/* Dark mode */")
    lines.append(".dark {")
    for key, value in theme.styles.dark.items():
        if value is not None:
            lines.append(f"  --{key}: {value};")
    lines.append("}")

    return "\n".join(lines)


def get_theme_registry_url(origin: str, base_url: str = REGISTRY_BASE_URL) -> str:
    """Return the registry URL for an inscribed theme origin."""
    return f"{base_url.rstrip('/')}/{origin}"


def to_shadcn_cli_command(origin: str, base_url: str = REGISTRY_BASE_URL) -> str:
    """Return the ``npx shadcn`` command that installs an inscribed theme."""
    return f"npx shadcn@latest add {get_theme_registry_url(origin, base_url)}"
