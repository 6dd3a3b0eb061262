"""
Theme asset helpers.

Themes may reference on-chain assets (``/content/<origin>`` paths) for fonts
and background patterns, or name a Google Font. This module recognises
those references and loads on-chain assets through :class:`AssetCache`,
which guarantees at most one in-flight load per origin. The actual fetch is
injected by the caller.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar
from urllib.parse import quote

from theme_token.logging import get_logger
from theme_token.models import ThemeStyleProps

logger = get_logger("assets")

T = TypeVar("T")

CONTENT_BASE_URL = "https://ordfs.network"
ON_CHAIN_PREFIX = "/content/"

# ---------------------------------------------------------------------------
# On-chain paths
# ---------------------------------------------------------------------------


def is_on_chain_path(value: str) -> bool:
    """Check if a CSS value is an on-chain asset path (``/content/...``)."""
    return value.startswith(ON_CHAIN_PREFIX)


def extract_origin(path: str) -> str | None:
    """Return the origin from ``/content/<origin>``, or None."""
    if not is_on_chain_path(path):
        return None
    return path[len(ON_CHAIN_PREFIX):]


def get_content_url(origin: str, base_url: str = CONTENT_BASE_URL) -> str:
    """Return the content URL for an origin."""
    return f"{base_url.rstrip('/')}/content/{origin}"


# ---------------------------------------------------------------------------
# Google Fonts
# ---------------------------------------------------------------------------

_DEFAULT_WEIGHTS: tuple[int, ...] = (400, 500, 600, 700)

GOOGLE_FONTS_CATALOG: dict[str, list[tuple[str, tuple[int, ...]]]] = {
    "sans": [
        ("Inter", _DEFAULT_WEIGHTS),
        ("DM Sans", _DEFAULT_WEIGHTS),
        ("Geist", _DEFAULT_WEIGHTS),
        ("IBM Plex Sans", _DEFAULT_WEIGHTS),
        ("Montserrat", _DEFAULT_WEIGHTS),
        ("Open Sans", _DEFAULT_WEIGHTS),
        ("Outfit", _DEFAULT_WEIGHTS),
        ("Plus Jakarta Sans", _DEFAULT_WEIGHTS),
        ("Poppins", _DEFAULT_WEIGHTS),
        ("Roboto", (400, 500, 700)),
        ("Space Grotesk", _DEFAULT_WEIGHTS),
        ("Nunito", _DEFAULT_WEIGHTS),
        ("Lato", (400, 700)),
        ("Raleway", _DEFAULT_WEIGHTS),
        ("Work Sans", _DEFAULT_WEIGHTS),
        ("Manrope", (400, 500, 600, 700, 800)),
        ("Sora", _DEFAULT_WEIGHTS),
    ],
    "serif": [
        ("Libre Baskerville", (400, 700)),
        ("Lora", _DEFAULT_WEIGHTS),
        ("Merriweather", (400, 700)),
        ("Playfair Display", _DEFAULT_WEIGHTS),
        ("Source Serif 4", _DEFAULT_WEIGHTS),
        ("Crimson Pro", _DEFAULT_WEIGHTS),
        ("EB Garamond", _DEFAULT_WEIGHTS),
        ("Cormorant", _DEFAULT_WEIGHTS),
        ("Spectral", _DEFAULT_WEIGHTS),
        ("Bitter", _DEFAULT_WEIGHTS),
    ],
    "mono": [
        ("Fira Code", _DEFAULT_WEIGHTS),
        ("Geist Mono", _DEFAULT_WEIGHTS),
        ("IBM Plex Mono", _DEFAULT_WEIGHTS),
        ("JetBrains Mono", _DEFAULT_WEIGHTS),
        ("Roboto Mono", (400, 500, 700)),
        ("Source Code Pro", _DEFAULT_WEIGHTS),
        ("Space Mono", (400, 700)),
        ("Inconsolata", _DEFAULT_WEIGHTS),
        ("Ubuntu Mono", (400, 700)),
    ],
    "display": [
        ("Architects Daughter", (400,)),
        ("Oxanium", _DEFAULT_WEIGHTS),
        ("Righteous", (400,)),
        ("Bebas Neue", (400,)),
        ("Abril Fatface", (400,)),
        ("Josefin Sans", _DEFAULT_WEIGHTS),
        ("Fredoka", _DEFAULT_WEIGHTS),
    ],
}

_GOOGLE_FONTS_BY_NAME: dict[str, tuple[str, tuple[int, ...]]] = {
    font_name.lower(): (font_name, weights)
    for fonts in GOOGLE_FONTS_CATALOG.values()
    for font_name, weights in fonts
}

_SYSTEM_FONT_NAMES = frozenset(
    {
        "ui-sans-serif",
        "ui-serif",
        "ui-monospace",
        "system-ui",
        "-apple-system",
        "blinkmacsystemfont",
        "sans-serif",
        "serif",
        "monospace",
    }
)

# Fallback stacks appended after an on-chain font family.
SYSTEM_FONTS: dict[str, str] = {
    "sans": "ui-sans-serif, system-ui, -apple-system, BlinkMacSystemFont, sans-serif",
    "serif": "ui-serif, Georgia, Cambria, Times New Roman, serif",
    "mono": "ui-monospace, SFMono-Regular, SF Mono, Menlo, Consolas, monospace",
}

FONT_SLOTS: tuple[str, ...] = ("sans", "serif", "mono")
IMAGE_PROPERTIES: tuple[str, ...] = ("bg-image", "card-bg-image", "sidebar-bg-image")


def extract_font_family(font_value: str) -> str | None:
    """Return the first family in a ``font-family`` value, skipping system fonts."""
    if not font_value:
        return None
    first = font_value.split(",", 1)[0].strip().strip("\"'").strip()
    if not first or first.lower() in _SYSTEM_FONT_NAMES:
        return None
    return first


def get_google_font_info(font_name: str) -> tuple[str, tuple[int, ...]] | None:
    """Return ``(name, weights)`` for a catalogued Google Font."""
    return _GOOGLE_FONTS_BY_NAME.get(font_name.lower())


def is_google_font(font_name: str) -> bool:
    return get_google_font_info(font_name) is not None


def build_google_font_url(font_name: str, weights: tuple[int, ...] | None = None) -> str:
    """Build the Google Fonts stylesheet URL for a family."""
    if weights is None:
        info = get_google_font_info(font_name)
        weights = info[1] if info else _DEFAULT_WEIGHTS
    weights_param = ";".join(str(weight) for weight in weights)
    return (
        f"https://fonts.googleapis.com/css2?family={quote(font_name, safe='')}"
        f":wght@{weights_param}&display=swap"
    )


def google_font_urls(styles: ThemeStyleProps) -> list[str]:
    """Stylesheet URLs for every catalogued Google Font the styles use."""
    urls: list[str] = []
    for slot in FONT_SLOTS:
        value = styles.get(f"font-{slot}")
        if not value or is_on_chain_path(value):
            continue
        font_name = extract_font_family(value)
        if font_name is None:
            continue
        info = get_google_font_info(font_name)
        if info is None:
            continue
        url = build_google_font_url(info[0], info[1])
        if url not in urls:
            urls.append(url)
    return urls


# ---------------------------------------------------------------------------
# Asset cache
# ---------------------------------------------------------------------------


class AssetCache(Generic[T]):
    """
    Keyed async cache with request de-duplication.

    Completed values are memoized by origin. Concurrent requests for an
    origin that is still loading share one pending task, so *loader* runs at
    most once per origin at a time. Failed loads are not cached.
    """

    def __init__(self, loader: Callable[[str], Awaitable[T]]) -> None:
        self._loader = loader
        self._cache: dict[str, T] = {}
        self._pending: dict[str, asyncio.Task[T]] = {}

    async def get(self, origin: str) -> T:
        if origin in self._cache:
            return self._cache[origin]

        task = self._pending.get(origin)
        if task is None:
            task = asyncio.ensure_future(self._load(origin))
            self._pending[origin] = task
        # One caller being cancelled must not cancel the shared load.
        return await asyncio.shield(task)

    async def _load(self, origin: str) -> T:
        try:
            value = await self._loader(origin)
            self._cache[origin] = value
            logger.debug("Loaded asset %s", origin)
            return value
        finally:
            self._pending.pop(origin, None)

    def is_loaded(self, origin: str) -> bool:
        return origin in self._cache

    def is_pending(self, origin: str) -> bool:
        return origin in self._pending

    def get_cached(self, origin: str) -> T | None:
        return self._cache.get(origin)

    def clear(self) -> None:
        """Forget completed values. In-flight loads are left running."""
        self._cache.clear()


def generate_font_family_name(origin: str) -> str:
    """Unique family name under which an on-chain font is registered."""
    return f"OnChain-{origin[:8]}"


async def load_theme_assets(
    styles: ThemeStyleProps,
    fonts: AssetCache[str],
    patterns: AssetCache[str],
) -> dict[str, str]:
    """
    Load the on-chain assets referenced by one mode's styles.

    Args:
        styles: Theme properties for one mode
        fonts: Cache whose loader returns the registered font family name
        patterns: Cache whose loader returns a URL (typically a data URL)

    Returns:
        CSS custom property overrides, e.g. ``{"--font-sans": '"OnChain-abc", ...'}``
    """
    keys: list[str] = []
    loads: list[Awaitable[str]] = []

    for slot in FONT_SLOTS:
        value = styles.get(f"font-{slot}")
        origin = extract_origin(value) if value else None
        if origin:
            keys.append(f"font-{slot}")
            loads.append(fonts.get(origin))

    for prop in IMAGE_PROPERTIES:
        value = styles.get(prop)
        origin = extract_origin(value) if value else None
        if origin:
            keys.append(prop)
            loads.append(patterns.get(origin))

    results = await asyncio.gather(*loads)

    overrides: dict[str, str] = {}
    for key, result in zip(keys, results):
        if key.startswith("font-"):
            slot = key[len("font-"):]
            overrides[f"--{key}"] = f'"{result}", {SYSTEM_FONTS[slot]}'
        else:
            overrides[f"--{key}"] = f'url("{result}")'
    return overrides
