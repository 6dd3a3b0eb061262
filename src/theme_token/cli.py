"""
Command-line interface for theme-token.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from theme_token.config import CONFIG_SEARCH_PATHS, ThemeTokenConfig, find_config_file, load_config
from theme_token.logging import get_logger, setup_logging
from theme_token.models import ThemeToken
from theme_token.parser import parse_css
from theme_token.schema import validate_theme_token
from theme_token.transform import (
    to_css,
    to_json,
    to_shadcn_cli_command,
    to_shadcn_registry,
    to_tailwind_config,
)

console = Console()
logger = get_logger("cli")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert and validate Theme Token themes",
        prog="theme-token",
    )

    # Global options
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a YAML config file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse theme CSS into ThemeToken JSON")
    parse_parser.add_argument("file", type=Path, help="CSS file with :root and .dark blocks")
    parse_parser.add_argument("-n", "--name", help="Theme name")
    parse_parser.add_argument("-o", "--output", type=Path, help="Write JSON to this file")
    parse_parser.add_argument(
        "--compact",
        action="store_true",
        help="Output compact JSON",
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a ThemeToken JSON file")
    validate_parser.add_argument("file", type=Path, help="ThemeToken JSON file")

    # CSS command
    css_parser = subparsers.add_parser("css", help="Convert ThemeToken JSON to CSS")
    css_parser.add_argument("file", type=Path, help="ThemeToken JSON file")
    css_parser.add_argument("-o", "--output", type=Path, help="Write CSS to this file")

    # Registry command
    registry_parser = subparsers.add_parser(
        "registry", help="Convert ThemeToken JSON to a ShadCN registry item"
    )
    registry_parser.add_argument("file", type=Path, help="ThemeToken JSON file")
    registry_parser.add_argument("-o", "--output", type=Path, help="Write JSON to this file")
    registry_parser.add_argument(
        "--origin",
        help="Inscription origin; prints the matching shadcn install command",
    )

    # Tailwind command
    tailwind_parser = subparsers.add_parser(
        "tailwind", help="Convert ThemeToken JSON to a Tailwind v4 config snippet"
    )
    tailwind_parser.add_argument("file", type=Path, help="ThemeToken JSON file")
    tailwind_parser.add_argument("-o", "--output", type=Path, help="Write CSS to this file")

    # Config command with subcommands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")

    # config show
    config_subparsers.add_parser("show", help="Show current configuration")

    # config init
    config_init_parser = config_subparsers.add_parser("init", help="Initialize a new config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="theme-token.yaml",
        help="Output file path",
    )

    # config path
    config_subparsers.add_parser("path", help="Show config file paths")

    args = parser.parse_args(argv)

    load_dotenv()
    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Failed to load config {args.config}:[/red] {escape(str(e))}")
        sys.exit(1)

    # Setup logging based on verbosity
    if getattr(args, "verbose", False):
        setup_logging("DEBUG")
    else:
        setup_logging(config.log_level)

    if args.command == "parse":
        cmd_parse(args, config)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "css":
        cmd_css(args)
    elif args.command == "registry":
        cmd_registry(args, config)
    elif args.command == "tailwind":
        cmd_tailwind(args)
    elif args.command == "config":
        cmd_config(args, config)
    else:
        parser.print_help()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Unable to read {path}:[/red] {escape(str(e))}")
        sys.exit(1)


def _load_theme(path: Path) -> ThemeToken:
    """Read and validate a ThemeToken JSON file, exiting on failure."""
    content = _read_text(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}:[/red] {escape(str(e))}")
        sys.exit(1)

    result = validate_theme_token(data)
    if not result.valid or result.theme is None:
        console.print(f"[red]Invalid theme:[/red] {escape(result.error or '')}")
        sys.exit(1)
    return result.theme


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return
    output.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]Wrote {output}[/green]")


def cmd_parse(args: argparse.Namespace, config: ThemeTokenConfig) -> None:
    """Parse theme CSS into ThemeToken JSON."""
    css = _read_text(args.file)
    result = parse_css(
        css,
        args.name or config.default_theme_name,
        max_depth=config.max_reference_depth,
        schema_url=config.schema_url,
    )

    if not result.valid or result.theme is None or result.metadata is None:
        console.print(f"[red]Error:[/red] {escape(result.error or '')}")
        sys.exit(1)

    logger.info("Parsed %s", args.file)
    _emit(to_json(result.theme, pretty=not args.compact, indent=config.json_indent), args.output)

    if args.output is not None:
        metadata = result.metadata
        table = Table(title=f"Parsed {result.theme.name}")
        table.add_column("Mode", style="cyan")
        table.add_column("Block")
        table.add_column("Properties", justify="right")
        table.add_row(
            "light",
            "[green]✓[/green]" if metadata.has_light_mode else "[dim]·[/dim]",
            str(metadata.light_property_count),
        )
        table.add_row(
            "dark",
            "[green]✓[/green]" if metadata.has_dark_mode else "[dim]fallback[/dim]",
            str(metadata.dark_property_count),
        )
        console.print(table)
        console.print(f"\n[dim]Total: {metadata.total_property_count} distinct properties[/dim]")


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate a ThemeToken JSON file."""
    content = _read_text(args.file)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        console.print(f"  [red]✗[/red] Invalid JSON: {escape(str(e))}")
        sys.exit(1)

    result = validate_theme_token(data)
    if not result.valid or result.theme is None:
        console.print(f"  [red]✗[/red] {escape(result.error or '')}")
        sys.exit(1)

    theme = result.theme
    console.print(f"  [green]✓[/green] {theme.name}")
    if theme.author:
        console.print(f"  Author: {theme.author}")
    console.print(
        f"  [dim]{len(theme.styles.light)} light, {len(theme.styles.dark)} dark properties[/dim]"
    )


def cmd_css(args: argparse.Namespace) -> None:
    """Convert ThemeToken JSON to CSS."""
    theme = _load_theme(args.file)
    _emit(to_css(theme), args.output)


def cmd_registry(args: argparse.Namespace, config: ThemeTokenConfig) -> None:
    """Convert ThemeToken JSON to a ShadCN registry item."""
    theme = _load_theme(args.file)
    item = to_shadcn_registry(theme)
    _emit(json.dumps(item, indent=config.json_indent, ensure_ascii=False), args.output)
    if args.origin:
        command = to_shadcn_cli_command(args.origin, config.registry_base_url)
        console.print(f"\n[dim]Install with:[/dim] {command}", highlight=False)


def cmd_tailwind(args: argparse.Namespace) -> None:
    """Convert ThemeToken JSON to a Tailwind v4 config snippet."""
    theme = _load_theme(args.file)
    _emit(to_tailwind_config(theme), args.output)


def cmd_config(args: argparse.Namespace, config: ThemeTokenConfig) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        _config_show(config, args.config)
    elif args.config_command == "init":
        _config_init(args.output)
    elif args.config_command == "path":
        _config_path()
    else:
        console.print("[yellow]Usage: theme-token config <show|init|path>[/yellow]")


def _config_show(config: ThemeTokenConfig, explicit: Path | None = None) -> None:
    """Show current configuration."""
    loaded_from = explicit or find_config_file()
    if loaded_from is None:
        console.print("[dim]No config file found. Using defaults.[/dim]")
    else:
        console.print(f"[dim]Loaded from: {loaded_from}[/dim]\n")

    console.print("[bold]Current Configuration:[/bold]\n")
    console.print(
        yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False),
        markup=False,
        highlight=False,
    )


def _config_init(output: str) -> None:
    """Initialize a new config file."""
    output_path = Path(output)

    if output_path.exists():
        console.print(f"[red]File already exists: {output_path}[/red]")
        sys.exit(1)

    with open(output_path, "w") as f:
        yaml.dump(ThemeTokenConfig().to_dict(), f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Created config file: {output_path}[/green]")


def _config_path() -> None:
    """Show config file search paths."""
    console.print("[bold]Config file search paths:[/bold]\n")

    for path in CONFIG_SEARCH_PATHS:
        exists = "[green]✓[/green]" if path.exists() else "[dim]·[/dim]"
        console.print(f"  {exists} {path}")


if __name__ == "__main__":
    main()
