"""Shared pytest fixtures for theme-token tests."""

from pathlib import Path
from textwrap import dedent
from typing import Any

import pytest

from theme_token.models import THEME_TOKEN_SCHEMA_URL

LIGHT_STYLES = {
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
    "destructive-foreground": "oklch(0.985 0 0)",
    "border": "oklch(0.922 0 0)",
    "input": "oklch(0.922 0 0)",
    "ring": "oklch(0.708 0 0)",
    "radius": "0.625rem",
}

DARK_STYLES = {
    "background": "oklch(0.145 0 0)",
    "foreground": "oklch(0.985 0 0)",
    "card": "oklch(0.145 0 0)",
    "card-foreground": "oklch(0.985 0 0)",
    "popover": "oklch(0.145 0 0)",
    "popover-foreground": "oklch(0.985 0 0)",
    "primary": "oklch(0.985 0 0)",
    "primary-foreground": "oklch(0.205 0 0)",
    "secondary": "oklch(0.269 0 0)",
    "secondary-foreground": "oklch(0.985 0 0)",
    "muted": "oklch(0.269 0 0)",
    "muted-foreground": "oklch(0.708 0 0)",
    "accent": "oklch(0.269 0 0)",
    "accent-foreground": "oklch(0.985 0 0)",
    "destructive": "oklch(0.396 0.141 25.723)",
    "destructive-foreground": "oklch(0.985 0 0)",
    "border": "oklch(0.269 0 0)",
    "input": "oklch(0.269 0 0)",
    "ring": "oklch(0.439 0 0)",
    "radius": "0.625rem",
}


def css_block(selector: str, styles: dict[str, str]) -> str:
    body = "\n".join(f"  --{key}: {value};" for key, value in styles.items())
    return f"{selector} {{\n{body}\n}}\n"


@pytest.fixture
def valid_theme_data() -> dict[str, Any]:
    """A valid ThemeToken document as parsed JSON."""
    return {
        "$schema": THEME_TOKEN_SCHEMA_URL,
        "name": "Test Theme",
        "styles": {
            "light": dict(LIGHT_STYLES),
            "dark": dict(DARK_STYLES),
        },
    }


@pytest.fixture
def full_css() -> str:
    """Stylesheet with :root and .dark blocks covering all required properties."""
    return css_block(":root", LIGHT_STYLES) + "\n" + css_block(".dark", DARK_STYLES)


@pytest.fixture
def light_only_css() -> str:
    """Stylesheet with only a :root block."""
    return css_block(":root", LIGHT_STYLES)


@pytest.fixture
def shadcn_export_css() -> str:
    """A realistic editor export with var() references and @theme inline."""
    return dedent("""
        :root {
          --background: oklch(1 0 0);
          --foreground: oklch(0.145 0 0);
          --primary: oklch(0.205 0 0);
          --primary-foreground: var(--color-white);
          --radius: 0.625rem;
          --sidebar: var(--background);
          --shadow-x: 0px;
          --shadow-y: 1px;
          --tracking-normal: 0.01em;
        }

        .dark {
          --background: oklch(0.145 0 0);
          --foreground: var(--color-black);
          --primary: oklch(0.985 0 0);
          --radius: 0.625rem;
          --sidebar: var(--background);
        }

        @theme inline {
          --color-background: var(--background);
          --color-foreground: var(--foreground);
          --radius-sm: calc(var(--radius) - 4px);
          --tracking-tight: calc(var(--tracking-normal) - 0.025em);
        }

        @layer base {
          body {
            letter-spacing: var(--tracking-normal);
          }
        }
    """)


@pytest.fixture
def theme_file(tmp_path: Path, valid_theme_data: dict[str, Any]) -> Path:
    """A ThemeToken JSON file on disk."""
    import json

    path = tmp_path / "theme.json"
    path.write_text(json.dumps(valid_theme_data, indent=2), encoding="utf-8")
    return path
