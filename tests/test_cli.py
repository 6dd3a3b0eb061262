"""Tests for CLI commands."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from theme_token.cli import main


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each command from an empty directory and reset logging afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "theme_token.config.CONFIG_SEARCH_PATHS", [tmp_path / "theme-token.yaml"]
    )
    monkeypatch.setattr("theme_token.cli.CONFIG_SEARCH_PATHS", [tmp_path / "theme-token.yaml"])
    for field in ("json_indent", "log_level", "schema_url", "max_reference_depth"):
        key = f"THEME_TOKEN_{field.upper()}"
        monkeypatch.delenv(key, raising=False)
    yield
    logging.getLogger("theme_token").handlers.clear()


class TestCmdParse:
    """Tests for the parse command."""

    def test_parse_to_stdout(self, tmp_path: Path, full_css: str, capsys) -> None:
        """Should print ThemeToken JSON."""
        css_file = tmp_path / "globals.css"
        css_file.write_text(full_css)

        main(["parse", str(css_file), "--name", "From CLI"])

        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "From CLI"
        assert data["styles"]["light"]["radius"] == "0.625rem"

    def test_parse_uses_configured_name(self, tmp_path: Path, full_css: str, capsys) -> None:
        (tmp_path / "theme-token.yaml").write_text("default_theme_name: Configured\n")
        css_file = tmp_path / "globals.css"
        css_file.write_text(full_css)

        main(["parse", str(css_file), "--compact"])

        out = capsys.readouterr().out
        assert '"name":"Configured"' in out

    def test_parse_uses_configured_schema_url(
        self, tmp_path: Path, full_css: str, capsys
    ) -> None:
        (tmp_path / "theme-token.yaml").write_text("schema_url: https://example.com/v2.json\n")
        css_file = tmp_path / "globals.css"
        css_file.write_text(full_css)

        main(["parse", str(css_file)])

        data = json.loads(capsys.readouterr().out)
        assert data["$schema"] == "https://example.com/v2.json"

    def test_parse_to_file(self, tmp_path: Path, full_css: str, capsys) -> None:
        """Should write JSON and print a summary table."""
        css_file = tmp_path / "globals.css"
        css_file.write_text(full_css)
        output = tmp_path / "theme.json"

        main(["parse", str(css_file), "-o", str(output)])

        data = json.loads(output.read_text())
        assert data["name"] == "Custom Theme"
        out = capsys.readouterr().out
        assert "Wrote" in out
        assert "light" in out
        assert "Total: 20 distinct properties" in out

    def test_parse_error(self, tmp_path: Path, capsys) -> None:
        """Should exit non-zero with the parse error."""
        css_file = tmp_path / "bad.css"
        css_file.write_text(":root { --foreground: red; }")

        with pytest.raises(SystemExit) as exc_info:
            main(["parse", str(css_file)])

        assert exc_info.value.code == 1
        assert "Missing required property: --background" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["parse", str(tmp_path / "nope.css")])
        assert "Unable to read" in capsys.readouterr().out


class TestCmdValidate:
    """Tests for the validate command."""

    def test_valid(self, theme_file: Path, capsys) -> None:
        main(["validate", str(theme_file)])
        out = capsys.readouterr().out
        assert "✓" in out
        assert "Test Theme" in out

    def test_invalid(
        self, tmp_path: Path, valid_theme_data: dict[str, Any], capsys
    ) -> None:
        del valid_theme_data["styles"]["light"]["ring"]
        path = tmp_path / "broken.json"
        path.write_text(json.dumps(valid_theme_data))

        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(path)])

        assert exc_info.value.code == 1
        assert "missing required property 'ring'" in capsys.readouterr().out

    def test_invalid_json(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(SystemExit):
            main(["validate", str(path)])
        assert "Invalid JSON" in capsys.readouterr().out


class TestConversionCommands:
    """Tests for css, registry and tailwind commands."""

    def test_css(self, theme_file: Path, capsys) -> None:
        main(["css", str(theme_file)])
        out = capsys.readouterr().out
        assert out.startswith(":root {")
        assert ".dark {" in out

    def test_css_to_file(self, theme_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "theme.css"
        main(["css", str(theme_file), "-o", str(output)])
        assert output.read_text().startswith(":root {\n  --background: oklch(1 0 0);")

    def test_registry(self, theme_file: Path, capsys) -> None:
        main(["registry", str(theme_file), "--origin", "abc_0"])
        out = capsys.readouterr().out
        item_text, _, install = out.partition("Install with:")
        item = json.loads(item_text)
        assert item["name"] == "test-theme"
        assert item["type"] == "registry:style"
        assert "npx shadcn@latest add https://themetoken.dev/r/themes/abc_0" in install

    def test_registry_rejects_invalid_theme(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"name": "x"}))

        with pytest.raises(SystemExit):
            main(["registry", str(path)])
        assert "Invalid theme" in capsys.readouterr().out

    def test_tailwind(self, theme_file: Path, capsys) -> None:
        main(["tailwind", str(theme_file)])
        assert capsys.readouterr().out.startswith("@theme {")


class TestCmdConfig:
    """Tests for config subcommands."""

    def test_show_defaults(self, capsys) -> None:
        main(["config", "show"])
        out = capsys.readouterr().out
        assert "No config file found" in out
        assert "max_reference_depth: 32" in out

    def test_show_explicit_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("json_indent: 4\n")

        main(["-c", str(path), "config", "show"])

        out = capsys.readouterr().out
        assert "Loaded from" in out
        assert "json_indent: 4" in out

    def test_init(self, tmp_path: Path, capsys) -> None:
        main(["config", "init"])

        created = tmp_path / "theme-token.yaml"
        assert created.exists()
        assert "Created config file" in capsys.readouterr().out

    def test_init_refuses_overwrite(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "theme-token.yaml").write_text("json_indent: 2\n")

        with pytest.raises(SystemExit):
            main(["config", "init"])
        assert "File already exists" in capsys.readouterr().out

    def test_broken_config_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("json_indent: [unclosed\n")

        with pytest.raises(SystemExit):
            main(["-c", str(path), "config", "show"])
        assert "Failed to load config" in capsys.readouterr().out

    def test_non_mapping_config_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- json_indent\n- 4\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["-c", str(path), "config", "show"])

        assert exc_info.value.code == 1
        out = " ".join(capsys.readouterr().out.split())
        assert "Config must be a mapping, got: list" in out

    def test_non_integer_config_value(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("max_reference_depth: lots\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["-c", str(path), "config", "show"])

        assert exc_info.value.code == 1
        out = " ".join(capsys.readouterr().out.split())
        assert "max_reference_depth must be an integer, got: 'lots'" in out

    def test_non_integer_env_value(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setenv("THEME_TOKEN_JSON_INDENT", "abc")

        with pytest.raises(SystemExit) as exc_info:
            main(["config", "show"])

        assert exc_info.value.code == 1
        out = " ".join(capsys.readouterr().out.split())
        assert "json_indent must be an integer, got: 'abc'" in out
