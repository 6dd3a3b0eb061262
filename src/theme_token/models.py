"""
Theme token data models.

Defines the property keys every theme must provide and the value objects
exchanged between the parser, the validator and the transformers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

THEME_TOKEN_SCHEMA_URL = "https://themetoken.dev/v1/schema.json"
"""Schema URL stamped on documents created by this package."""

# ---------------------------------------------------------------------------
# Required property keys
# ---------------------------------------------------------------------------

# Flat, kebab-case keys matching the ShadCN CSS variable names.

COLOR_KEYS: list[str] = [
    "background",
    "foreground",
    "card",
    "card-foreground",
    "popover",
    "popover-foreground",
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "destructive",
    "destructive-foreground",
    "border",
    "input",
    "ring",
]

REQUIRED_PROPERTY_KEYS: list[str] = COLOR_KEYS + ["radius"]
"""The 20 properties each mode must define."""

# Minimum a pasted stylesheet must declare in :root to be accepted.
CSS_REQUIRED_KEYS: list[str] = ["background", "foreground", "primary", "radius"]

BUNDLE_ASSET_TYPES: tuple[str, ...] = ("font", "pattern", "wallpaper", "icon")

LAYER_BASE = "@layer base"


# ---------------------------------------------------------------------------
# Aliases
# ---------------------------------------------------------------------------

ThemeStyleProps = dict[str, str]
"""A mapping from property name to CSS value for one mode."""

CssRules = dict[str, dict[str, dict[str, str]]]
"""Nested rule block: ``{"@layer base": {selector: {prop: value}}}``."""

BundleAssetType = Literal["font", "pattern", "wallpaper", "icon"]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


@dataclass
class BundleAsset:
    """A sibling inscription shipped in the same transaction as the theme."""

    vout: int  # Output index in the transaction
    type: BundleAssetType
    slot: str  # Slot this asset fills, e.g. "sans" or "background"

    def to_dict(self) -> dict[str, Any]:
        return {"vout": self.vout, "type": self.type, "slot": self.slot}


@dataclass
class ThemeBundle:
    """Bundle metadata for themes with associated assets."""

    version: int = 1
    assets: list[BundleAsset] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "assets": [asset.to_dict() for asset in self.assets],
        }


@dataclass
class ThemeStyles:
    """Property sets for both modes."""

    light: ThemeStyleProps = field(default_factory=dict)
    dark: ThemeStyleProps = field(default_factory=dict)


@dataclass
class ThemeToken:
    """
    A complete theme document.

    Attributes
    ----------
    schema:
        Schema URL the document claims (serialized as ``$schema``).
    name:
        Human-readable theme name.
    styles:
        Light and dark property sets.
    author:
        Optional attribution (paymail or other identity).
    bundle:
        Optional bundle metadata describing sibling asset inscriptions.
    css:
        Optional nested rule block, e.g. ``@layer base { body { ... } }``.
    """

    schema: str
    name: str
    styles: ThemeStyles
    author: str | None = None
    bundle: ThemeBundle | None = None
    css: CssRules | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON document shape."""
        data: dict[str, Any] = {"$schema": self.schema, "name": self.name}
        if self.author is not None:
            data["author"] = self.author
        if self.bundle is not None:
            data["bundle"] = self.bundle.to_dict()
        data["styles"] = {
            "light": dict(self.styles.light),
            "dark": dict(self.styles.dark),
        }
        if self.css is not None:
            data["css"] = {
                scope: {selector: dict(props) for selector, props in rules.items()}
                for scope, rules in self.css.items()
            }
        return data


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class ParseMetadata:
    """Metadata about a parsed stylesheet."""

    light_property_count: int = 0
    dark_property_count: int = 0
    total_property_count: int = 0  # Distinct names across both modes
    has_light_mode: bool = False  # Whether a :root block was found
    has_dark_mode: bool = False  # Whether a .dark block was found


@dataclass
class ValidationResult:
    """Result of validating untrusted data against the theme schema."""

    valid: bool
    theme: ThemeToken | None = None
    error: str | None = None

    @classmethod
    def success(cls, theme: ThemeToken) -> ValidationResult:
        return cls(valid=True, theme=theme)

    @classmethod
    def failure(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)


@dataclass
class ParseResult:
    """Result of parsing stylesheet text into a theme."""

    valid: bool
    theme: ThemeToken | None = None
    metadata: ParseMetadata | None = None
    error: str | None = None

    @classmethod
    def success(cls, theme: ThemeToken, metadata: ParseMetadata) -> ParseResult:
        return cls(valid=True, theme=theme, metadata=metadata)

    @classmethod
    def failure(cls, error: str) -> ParseResult:
        return cls(valid=False, error=error)
