"""
CSS custom property lookup and ``var()`` resolution.

Stylesheets exported by theme editors frequently point one variable at
another (``--sidebar: var(--background);``) and the ``.dark`` block may
reference variables only declared in ``:root``. A single lookup table built
over the whole text lets every block resolve those references.
"""

from __future__ import annotations

import re

# ``--name: value;`` declarations, shared by the lookup builder and the
# block parser.
VAR_DECLARATION_RE = re.compile(r"--([a-z0-9-]+)\s*:\s*([^;]+);", re.IGNORECASE)

_VAR_REFERENCE_RE = re.compile(r"^var\(--([a-z0-9-]+)\)$", re.IGNORECASE)

MAX_REFERENCE_DEPTH = 32

# Tailwind v4 built-ins that are never declared in exported stylesheets.
BUILTIN_VARIABLES: dict[str, str] = {
    "color-white": "oklch(1 0 0)",
    "color-black": "oklch(0 0 0)",
}

# External stylesheet name -> internal document name.
CSS_TO_INTERNAL: dict[str, str] = {
    "shadow-x": "shadow-offset-x",
    "shadow-y": "shadow-offset-y",
    "tracking-normal": "letter-spacing",
}

INTERNAL_TO_CSS: dict[str, str] = {value: key for key, value in CSS_TO_INTERNAL.items()}


def to_internal_name(css_name: str) -> str:
    """Map a stylesheet variable name (without ``--``) to its document key."""
    return CSS_TO_INTERNAL.get(css_name, css_name)


def to_css_name(key: str) -> str:
    """Map a document key back to its stylesheet variable name."""
    return INTERNAL_TO_CSS.get(key, key)


def build_var_lookup(css: str) -> dict[str, str]:
    """Build a name -> raw value table from every declaration in *css*.

    The first declaration of a name wins, so ``:root`` values shadow later
    re-declarations in ``.dark``.
    """
    lookup: dict[str, str] = {}
    for match in VAR_DECLARATION_RE.finditer(css):
        name = match.group(1)
        if name not in lookup:
            lookup[name] = match.group(2).strip()
    return lookup


def is_var_reference(value: str) -> bool:
    """Return True if *value* is exactly ``var(--name)``."""
    return _VAR_REFERENCE_RE.match(value) is not None


def resolve_var(
    value: str,
    lookup: dict[str, str],
    max_depth: int = MAX_REFERENCE_DEPTH,
) -> str:
    """Resolve a ``var(--name)`` reference against *lookup*.

    Values that are not a bare reference are returned unchanged. A reference
    to an unknown name comes back as that unresolved reference; callers
    decide whether that is an error. Chains longer than *max_depth* (cycles
    included) return *value* untouched.
    """
    current = value
    for _ in range(max_depth + 1):
        match = _VAR_REFERENCE_RE.match(current)
        if match is None:
            return current

        ref_name = match.group(1)
        if ref_name in BUILTIN_VARIABLES:
            return BUILTIN_VARIABLES[ref_name]

        resolved = lookup.get(ref_name)
        if not resolved:
            return current
        current = resolved

    return value
