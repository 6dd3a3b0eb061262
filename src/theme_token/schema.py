"""Theme token schema validation."""
from __future__ import annotations

from typing import Any

from theme_token.models import (
    BUNDLE_ASSET_TYPES,
    LAYER_BASE,
    REQUIRED_PROPERTY_KEYS,
    BundleAsset,
    CssRules,
    ThemeBundle,
    ThemeStyleProps,
    ThemeStyles,
    ThemeToken,
    ValidationResult,
)

_STYLE_PROPS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {key: {"type": "string", "minLength": 1} for key in REQUIRED_PROPERTY_KEYS},
    "required": list(REQUIRED_PROPERTY_KEYS),
    "additionalProperties": {"type": "string"},
}

THEME_TOKEN_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "$schema": {"type": "string"},
        "name": {"type": "string"},
        "author": {"type": "string"},
        "bundle": {
            "type": "object",
            "properties": {
                "version": {"const": 1},
                "assets": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "vout": {"type": "integer", "minimum": 0},
                            "type": {"enum": list(BUNDLE_ASSET_TYPES)},
                            "slot": {"type": "string"},
                        },
                        "required": ["vout", "type", "slot"],
                    },
                },
            },
            "required": ["version", "assets"],
        },
        "styles": {
            "type": "object",
            "properties": {
                "light": _STYLE_PROPS_SCHEMA,
                "dark": _STYLE_PROPS_SCHEMA,
            },
            "required": ["light", "dark"],
        },
        "css": {
            "type": "object",
            "properties": {
                LAYER_BASE: {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "additionalProperties": {"type": "string"},
                    },
                },
            },
        },
    },
    "required": ["$schema", "name", "styles"],
}
"""JSON-schema description of a theme token document."""


class _SchemaError(Exception):
    """First structural violation found while walking a document."""


def validate_theme_token(data: Any) -> ValidationResult:
    """Validate untrusted data (e.g. parsed JSON) as a theme token.

    Returns a successful result carrying the typed :class:`ThemeToken`, or a
    failure describing the first violation. Unknown top-level keys are
    dropped rather than rejected.
    """
    try:
        theme = _build_theme(data)
    except _SchemaError as exc:
        return ValidationResult.failure(str(exc))
    return ValidationResult.success(theme)


def _build_theme(data: Any) -> ThemeToken:
    if not isinstance(data, dict):
        raise _SchemaError(f"Theme must be a JSON object, got: {_type_name(data)}")

    schema = _required_str(data, "$schema")
    name = _required_str(data, "name")

    author = None
    if "author" in data:
        author = _expect_str(data["author"], "author")

    bundle = None
    if "bundle" in data:
        bundle = _build_bundle(data["bundle"])

    if "styles" not in data:
        raise _SchemaError("Missing required field: 'styles'")
    styles = _expect_object(data["styles"], "styles")
    for mode in ("light", "dark"):
        if mode not in styles:
            raise _SchemaError(f"Missing required field: 'styles.{mode}'")
    light = _build_style_props(styles["light"], "styles.light")
    dark = _build_style_props(styles["dark"], "styles.dark")

    css = None
    if "css" in data:
        css = _build_css_rules(data["css"])

    return ThemeToken(
        schema=schema,
        name=name,
        author=author,
        bundle=bundle,
        styles=ThemeStyles(light=light, dark=dark),
        css=css,
    )


def _build_style_props(value: Any, path: str) -> ThemeStyleProps:
    props = _expect_object(value, path)
    for key in REQUIRED_PROPERTY_KEYS:
        if key not in props:
            raise _SchemaError(f"{path}: missing required property '{key}'")
        required = props[key]
        if not isinstance(required, str):
            raise _SchemaError(
                f"{path}.{key} must be a string, got: {_type_name(required)}"
            )
        if not required.strip():
            raise _SchemaError(f"{path}.{key} must be a non-empty string")

    result: ThemeStyleProps = {}
    for key, prop in props.items():
        result[key] = _expect_str(prop, f"{path}.{key}")
    return result


def _build_bundle(value: Any) -> ThemeBundle:
    bundle = _expect_object(value, "bundle")
    if "version" not in bundle:
        raise _SchemaError("Missing required field: 'bundle.version'")
    version = bundle["version"]
    if isinstance(version, bool) or version != 1:
        raise _SchemaError(f"bundle.version must be 1, got: {version!r}")

    if "assets" not in bundle:
        raise _SchemaError("Missing required field: 'bundle.assets'")
    raw_assets = bundle["assets"]
    if not isinstance(raw_assets, list):
        raise _SchemaError(f"bundle.assets must be an array, got: {_type_name(raw_assets)}")

    assets: list[BundleAsset] = []
    for index, raw in enumerate(raw_assets):
        path = f"bundle.assets[{index}]"
        entry = _expect_object(raw, path)
        for key in ("vout", "type", "slot"):
            if key not in entry:
                raise _SchemaError(f"Missing required field: '{path}.{key}'")
        vout = entry["vout"]
        if isinstance(vout, bool) or not isinstance(vout, int):
            raise _SchemaError(f"{path}.vout must be an integer, got: {_type_name(vout)}")
        if vout < 0:
            raise _SchemaError(f"{path}.vout must be >= 0, got: {vout}")
        asset_type = entry["type"]
        if asset_type not in BUNDLE_ASSET_TYPES:
            allowed = ", ".join(BUNDLE_ASSET_TYPES)
            raise _SchemaError(f"{path}.type must be one of {allowed}, got: {asset_type!r}")
        slot = _expect_str(entry["slot"], f"{path}.slot")
        assets.append(BundleAsset(vout=vout, type=asset_type, slot=slot))

    return ThemeBundle(version=1, assets=assets)


def _build_css_rules(value: Any) -> CssRules:
    css = _expect_object(value, "css")
    rules: CssRules = {}
    if LAYER_BASE not in css:
        return rules

    layer = _expect_object(css[LAYER_BASE], f"css.{LAYER_BASE}")
    selectors: dict[str, dict[str, str]] = {}
    for selector, raw_props in layer.items():
        path = f"css.{LAYER_BASE}.{selector}"
        props = _expect_object(raw_props, path)
        selectors[selector] = {
            prop: _expect_str(prop_value, f"{path}.{prop}")
            for prop, prop_value in props.items()
        }
    rules[LAYER_BASE] = selectors
    return rules


def _required_str(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise _SchemaError(f"Missing required field: '{key}'")
    return _expect_str(data[key], key)


def _expect_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise _SchemaError(f"{path} must be a string, got: {_type_name(value)}")
    return value


def _expect_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _SchemaError(f"{path} must be an object, got: {_type_name(value)}")
    return value


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
