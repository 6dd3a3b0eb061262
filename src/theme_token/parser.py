"""
Stylesheet parsing.

Turns pasted theme CSS (``:root { ... }`` plus an optional ``.dark { ... }``
and ``@layer base { body { ... } }``) into a :class:`ThemeToken`.
"""

from __future__ import annotations

import re

from theme_token.logging import get_logger
from theme_token.models import (
    CSS_REQUIRED_KEYS,
    LAYER_BASE,
    THEME_TOKEN_SCHEMA_URL,
    CssRules,
    ParseMetadata,
    ParseResult,
    ThemeStyleProps,
    ThemeStyles,
    ThemeToken,
)
from theme_token.variables import (
    MAX_REFERENCE_DEPTH,
    VAR_DECLARATION_RE,
    build_var_lookup,
    resolve_var,
    to_internal_name,
)

logger = get_logger("parser")

DEFAULT_THEME_NAME = "Custom Theme"

_ROOT_BLOCK_RE = re.compile(r":root\s*\{([^}]+)\}")
_DARK_BLOCK_RE = re.compile(r"\.dark\s*\{([^}]+)\}")

_LAYER_BASE_RE = re.compile(r"@layer\s+base\s*\{([\s\S]*?body\s*\{[^}]*\})")
_BODY_RULE_RE = re.compile(r"body\s*\{([^}]+)\}")
_ROOT_BODY_RULE_RE = re.compile(r"(?:^|\n)body\s*\{([^}]+)\}")
_DECLARATION_RE = re.compile(r"([a-z-]+)\s*:\s*([^;]+);", re.IGNORECASE)

# @theme inline duplicates (--color-*, --radius-*) point back at the real
# variables; they are generated, not theme values.
_DERIVED_PREFIXES = ("color-", "radius-")
_DERIVED_TRACKING_RE = re.compile(r"^tracking-(tighter|tight|wide|wider|widest)$")

_MAX_UNRESOLVED_LISTED = 3


def parse_css_block(
    css: str,
    var_lookup: dict[str, str],
    max_depth: int = MAX_REFERENCE_DEPTH,
) -> ThemeStyleProps:
    """Parse the body of one selector block into theme properties.

    ``--shadow-x``/``--shadow-y``/``--tracking-normal`` are stored under their
    internal names and every value is passed through :func:`resolve_var`.
    Derived ``@theme inline`` variables and the tracking scale are dropped.
    """
    props: ThemeStyleProps = {}
    for match in VAR_DECLARATION_RE.finditer(css):
        name, value = match.group(1), match.group(2)
        if name.startswith(_DERIVED_PREFIXES):
            continue
        if _DERIVED_TRACKING_RE.match(name):
            continue
        props[to_internal_name(name)] = resolve_var(value.strip(), var_lookup, max_depth)
    return props


def parse_layer_base(css: str) -> CssRules | None:
    """Extract ``body { ... }`` declarations as an ``@layer base`` rule block.

    A ``body`` rule inside ``@layer base`` is preferred over a top-level one.
    Returns None when no declarations are found.
    """
    body_content: str | None = None

    layer_match = _LAYER_BASE_RE.search(css)
    if layer_match:
        body_match = _BODY_RULE_RE.search(layer_match.group(1))
        if body_match:
            body_content = body_match.group(1)
    else:
        root_body_match = _ROOT_BODY_RULE_RE.search(css)
        if root_body_match:
            body_content = root_body_match.group(1)

    if not body_content:
        return None

    body_props: dict[str, str] = {}
    for match in _DECLARATION_RE.finditer(body_content):
        body_props[match.group(1).strip()] = match.group(2).strip()

    if not body_props:
        return None

    return {LAYER_BASE: {"body": body_props}}


def parse_css(
    css: str,
    name: str = DEFAULT_THEME_NAME,
    *,
    max_depth: int = MAX_REFERENCE_DEPTH,
    schema_url: str = THEME_TOKEN_SCHEMA_URL,
) -> ParseResult:
    """
    Parse exported theme CSS into a ThemeToken.

    Args:
        css: Raw CSS with a ``:root`` block and optionally a ``.dark`` block
        name: Theme name for the resulting document
        max_depth: Maximum ``var()`` chain length followed while resolving
        schema_url: Schema URL stamped on the resulting document

    Returns:
        ParseResult with the theme and parse metadata, or an error message.
        Malformed input never raises.

    Example:
        result = parse_css(":root { --background: oklch(1 0 0); ... }", "My Theme")
        if result.valid:
            print(result.theme.name)
    """
    try:
        return _parse_css(css, name, max_depth, schema_url)
    except Exception as exc:
        logger.warning("Unexpected error while parsing CSS: %s", exc, exc_info=True)
        return ParseResult.failure(str(exc) or "Failed to parse CSS")


def _parse_css(css: str, name: str, max_depth: int, schema_url: str) -> ParseResult:
    root_match = _ROOT_BLOCK_RE.search(css)
    dark_match = _DARK_BLOCK_RE.search(css)

    if root_match is None:
        return ParseResult.failure("Missing :root { } block for light mode")

    # Lookup spans the whole text so .dark can reference :root variables.
    var_lookup = build_var_lookup(css)

    light = parse_css_block(root_match.group(1), var_lookup, max_depth)
    if dark_match is not None:
        dark = parse_css_block(dark_match.group(1), var_lookup, max_depth)
    else:
        dark = dict(light)

    for prop in CSS_REQUIRED_KEYS:
        if prop not in light:
            return ParseResult.failure(f"Missing required property: --{prop}")

    unresolved = _find_unresolved(light, dark)
    if unresolved:
        listed = ", ".join(unresolved[:_MAX_UNRESOLVED_LISTED])
        remainder = len(unresolved) - _MAX_UNRESOLVED_LISTED
        more = f" and {remainder} more" if remainder > 0 else ""
        return ParseResult.failure(
            f"Unresolved var() references: {listed}{more}. "
            "Please paste CSS with resolved values."
        )

    theme = ThemeToken(
        schema=schema_url,
        name=name,
        styles=ThemeStyles(light=light, dark=dark),
        css=parse_layer_base(css),
    )
    metadata = ParseMetadata(
        light_property_count=len(light),
        dark_property_count=len(dark),
        total_property_count=len(set(light) | set(dark)),
        has_light_mode=True,
        has_dark_mode=dark_match is not None,
    )
    logger.debug(
        "Parsed theme %r: %d light, %d dark properties",
        name,
        metadata.light_property_count,
        metadata.dark_property_count,
    )
    return ParseResult.success(theme, metadata)


def _find_unresolved(light: ThemeStyleProps, dark: ThemeStyleProps) -> list[str]:
    names = [f"--{key}" for key, value in light.items() if value.startswith("var(")]
    names.extend(f"--{key} (dark)" for key, value in dark.items() if value.startswith("var("))
    return names
