"""Tests for CLI commands."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from shieldgen.cli import (
    build_parser,
    collect_options,
    do_config,
    do_fixed,
    do_measure,
    do_render,
    load_catalog,
    main,
)
from shieldgen.config import set_default_option, set_icons_path
from shieldgen.widths import text_width


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the default config at a temporary file."""
    path = tmp_path / "config.json"
    monkeypatch.setattr("shieldgen.config.DEFAULT_CONFIG_PATH", path)
    return path


# ── Argument Parsing ──────────────────────────────────────────────────────────


class TestArgumentParsing:
    def test_no_args_defaults_to_none_command(self):
        args = build_parser().parse_args([])
        assert args.command is None

    def test_render_options(self):
        args = build_parser().parse_args(
            ["render", "--label", "npm", "--value", "v1", "--label-color", "black", "--icon-color", "red"]
        )
        assert collect_options(args) == {
            "label": "npm", "value": "v1", "labelColor": "black", "iconColor": "red",
        }

    def test_render_output(self):
        args = build_parser().parse_args(["render", "-o", "out.svg"])
        assert args.output == "out.svg"

    def test_fixed_path(self):
        args = build_parser().parse_args(["fixed", "build-passing-green", "--style", "plastic"])
        assert args.path == "build-passing-green"
        assert collect_options(args) == {"style": "plastic"}

    def test_config_set(self):
        args = build_parser().parse_args(["config", "set", "style", "flat-square"])
        assert (args.config_command, args.key, args.value) == ("set", "style", "flat-square")


# ── Commands ──────────────────────────────────────────────────────────────────


class TestDoRender:
    def test_writes_file(self, tmp_path, config_path):
        output = tmp_path / "badge.svg"
        with patch("shieldgen.cli.print_render_result") as mock_print:
            result = do_render({"label": "build", "value": "passing", "color": "green"}, str(output))
        assert result["ok"] is True
        assert result["title"] == "build: passing"
        assert result["content_type"] == "image/svg+xml"
        assert output.read_text(encoding="utf-8").startswith("<svg")
        mock_print.assert_called_once()

    def test_stdout(self, capsys, config_path):
        result = do_render({"value": "hello"})
        assert result == {"ok": True, "output": None}
        assert "<title>hello</title>" in capsys.readouterr().out

    def test_applies_config_defaults(self, tmp_path, config_path):
        set_default_option("format", "json", config_path)
        output = tmp_path / "badge.json"
        with patch("shieldgen.cli.print_render_result"):
            do_render({"value": "x"}, str(output))
        assert json.loads(output.read_text(encoding="utf-8"))["format"] == "json"


class TestDoFixed:
    def test_renders(self, tmp_path, config_path):
        output = tmp_path / "badge.svg"
        with patch("shieldgen.cli.print_render_result"):
            result = do_fixed("build-passing-green", {}, str(output))
        assert result["ok"] is True
        assert 'fill="#3C1"' in output.read_text(encoding="utf-8")

    def test_format_suffix(self, tmp_path, config_path):
        output = tmp_path / "badge.json"
        with patch("shieldgen.cli.print_render_result"):
            result = do_fixed("build-passing-green.json", {}, str(output))
        assert result["content_type"] == "application/json"

    def test_bad_path(self, config_path):
        with patch("shieldgen.cli.print_error") as mock_error:
            result = do_fixed("a-b-c-d", {})
        assert result["ok"] is False
        mock_error.assert_called_once()


class TestDoMeasure:
    def test_width(self):
        result = do_measure("npm")
        assert result["width"] == text_width("npm")


class TestDoConfig:
    def test_set_and_show(self, config_path):
        args = build_parser().parse_args(["config", "set", "style", "plastic"])
        result = do_config(args, config_path)
        assert result["config"]["defaults"] == {"style": "plastic"}

    def test_set_unknown_key(self, config_path):
        args = build_parser().parse_args(["config", "set", "colour", "red"])
        with patch("shieldgen.cli.print_error"):
            result = do_config(args, config_path)
        assert result["ok"] is False

    def test_unset_missing(self, config_path):
        args = build_parser().parse_args(["config", "unset", "style"])
        with patch("shieldgen.cli.print_error"):
            assert do_config(args, config_path)["ok"] is False

    def test_icons(self, tmp_path, config_path):
        args = build_parser().parse_args(["config", "icons", str(tmp_path / "icons.json")])
        result = do_config(args, config_path)
        assert result["config"]["icons_path"] == str((tmp_path / "icons.json").resolve())


class TestLoadCatalog:
    def test_not_configured(self, config_path):
        assert load_catalog(config_path) is None

    def test_configured(self, tmp_path, config_path):
        icons = tmp_path / "icons.json"
        icons.write_text('{"rocket": "M0 0h1"}', encoding="utf-8")
        set_icons_path(icons, config_path)
        assert load_catalog(config_path)["rocket"] == "M0 0h1"

    def test_broken_file_ignored(self, tmp_path, config_path):
        set_icons_path(tmp_path / "missing.json", config_path)
        assert load_catalog(config_path) is None


class TestMain:
    def test_render_to_stdout(self, capsys, config_path):
        main(["render", "--label", "a", "--value", "b"])
        assert "<title>a: b</title>" in capsys.readouterr().out

    def test_bad_fixed_path_exits(self, config_path):
        with patch("shieldgen.cli.print_error"):
            with pytest.raises(SystemExit) as excinfo:
                main(["fixed", "a-b-c-d"])
        assert excinfo.value.code == 2

    def test_no_command_prints_help(self, capsys):
        main([])
        assert "usage" in capsys.readouterr().out.lower()
