"""
theme-token - parse, validate and convert ShadCN-compatible theme tokens.

A theme token is a named set of CSS custom property values for a light and
a dark mode. This package converts between pasted stylesheet text, the
validated ThemeToken JSON document and ShadCN registry items.

Example:
    from theme_token import parse_css, to_shadcn_registry, validate_theme_token

    result = parse_css(css_text, "My Theme")
    if result.valid:
        registry_item = to_shadcn_registry(result.theme)

    validation = validate_theme_token(json.loads(document))
    if not validation.valid:
        print(validation.error)
"""

from theme_token.assets import (
    GOOGLE_FONTS_CATALOG,
    AssetCache,
    build_google_font_url,
    extract_font_family,
    extract_origin,
    generate_font_family_name,
    get_content_url,
    get_google_font_info,
    google_font_urls,
    is_google_font,
    is_on_chain_path,
    load_theme_assets,
)
from theme_token.config import ThemeTokenConfig, load_config
from theme_token.defaults import DEFAULT_LIGHT_STYLES, get_default_styles
from theme_token.logging import get_logger, setup_logging
from theme_token.models import (
    REQUIRED_PROPERTY_KEYS,
    THEME_TOKEN_SCHEMA_URL,
    BundleAsset,
    CssRules,
    ParseMetadata,
    ParseResult,
    ThemeBundle,
    ThemeStyleProps,
    ThemeStyles,
    ThemeToken,
    ValidationResult,
)
from theme_token.parser import parse_css, parse_css_block, parse_layer_base
from theme_token.schema import THEME_TOKEN_SCHEMA, validate_theme_token
from theme_token.transform import (
    ShadcnRegistryItem,
    create_theme_token,
    get_theme_registry_url,
    to_css,
    to_css_variables,
    to_json,
    to_shadcn_cli_command,
    to_shadcn_registry,
    to_tailwind_config,
)
from theme_token.variables import build_var_lookup, resolve_var

__version__ = "0.1.0"

__all__ = [
    # Schema & validation
    "THEME_TOKEN_SCHEMA",
    "THEME_TOKEN_SCHEMA_URL",
    "REQUIRED_PROPERTY_KEYS",
    "validate_theme_token",
    # Models
    "BundleAsset",
    "CssRules",
    "ParseMetadata",
    "ParseResult",
    "ThemeBundle",
    "ThemeStyleProps",
    "ThemeStyles",
    "ThemeToken",
    "ValidationResult",
    # Parsing
    "build_var_lookup",
    "parse_css",
    "parse_css_block",
    "parse_layer_base",
    "resolve_var",
    # Transformations
    "ShadcnRegistryItem",
    "create_theme_token",
    "get_theme_registry_url",
    "to_css",
    "to_css_variables",
    "to_json",
    "to_shadcn_cli_command",
    "to_shadcn_registry",
    "to_tailwind_config",
    # Defaults
    "DEFAULT_LIGHT_STYLES",
    "get_default_styles",
    # Assets
    "GOOGLE_FONTS_CATALOG",
    "AssetCache",
    "build_google_font_url",
    "extract_font_family",
    "extract_origin",
    "generate_font_family_name",
    "get_content_url",
    "get_google_font_info",
    "google_font_urls",
    "is_google_font",
    "is_on_chain_path",
    "load_theme_assets",
    # Config & logging
    "ThemeTokenConfig",
    "get_logger",
    "load_config",
    "setup_logging",
]
