"""CLI commands for shieldgen."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from pathlib import Path

from shieldgen.badge import Badge
from shieldgen.config import (
    apply_defaults,
    get_icons_path,
    load_config,
    set_default_option,
    set_icons_path,
    unset_default_option,
)
from shieldgen.display import (
    print_config,
    print_error,
    print_measure_result,
    print_render_result,
)
from shieldgen.fixed import FixedBadgeError, fixed_badge, split_format_suffix
from shieldgen.icons import load_icons
from shieldgen.render import render
from shieldgen.resolver import resolve
from shieldgen.widths import text_width

logger = logging.getLogger(__name__)

# argparse dest -> option key
_OPTION_FLAGS: dict[str, str] = {
    "label": "label",
    "value": "value",
    "color": "color",
    "label_color": "labelColor",
    "icon": "icon",
    "icon_color": "iconColor",
    "style": "style",
    "radius": "radius",
    "scale": "scale",
    "cache": "cache",
    "format": "format",
}


def _add_badge_options(parser: argparse.ArgumentParser, with_value: bool = True) -> None:
    parser.add_argument("--label", help="Left-hand text")
    if with_value:
        parser.add_argument("--value", help="Right-hand text (default: unknown)")
    parser.add_argument("--color", help="Value color: name or hex without '#'")
    parser.add_argument("--label-color", help="Label color: name or hex without '#'")
    parser.add_argument("--icon", help="Icon name")
    parser.add_argument("--icon-color", help="Icon color (default: fff)")
    parser.add_argument("--style", help="flat, flat-square, plastic or for-the-badge")
    parser.add_argument("--radius", help="Corner radius, 0-12")
    parser.add_argument("--scale", help="Scale factor, 0.1-8")
    parser.add_argument("--cache", help="Cache seconds, 300-604800")
    parser.add_argument("--format", help="svg or json")
    parser.add_argument("--output", "-o", default=None, help="Write to file instead of stdout")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shieldgen",
        description="Render shields-style SVG badges",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log degraded options")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render a badge from options")
    _add_badge_options(render_parser)

    fixed_parser = subparsers.add_parser("fixed", help="Render a badge from a label-message-color path")
    fixed_parser.add_argument("path", help="e.g. build-passing-green or just%%20the%%20message-8A2BE2")
    _add_badge_options(fixed_parser)

    measure_parser = subparsers.add_parser("measure", help="Measure text width")
    measure_parser.add_argument("text")

    config_parser = subparsers.add_parser("config", help="Show or change default options")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Show stored defaults")
    set_p = config_sub.add_parser("set", help="Set a default option")
    set_p.add_argument("key")
    set_p.add_argument("value")
    unset_p = config_sub.add_parser("unset", help="Remove a default option")
    unset_p.add_argument("key")
    icons_p = config_sub.add_parser("icons", help="Use an extra icon JSON file")
    icons_p.add_argument("path")
    return parser


def collect_options(args: argparse.Namespace) -> dict[str, str]:
    """Badge options given on the command line, keyed like query parameters."""
    options: dict[str, str] = {}
    for dest, key in _OPTION_FLAGS.items():
        value = getattr(args, dest, None)
        if value is not None:
            options[key] = str(value)
    return options


def load_catalog(config_path: Path | None = None) -> Mapping[str, str] | None:
    """Icon catalog including the configured extra file, or None for the bundled one."""
    icons_path = get_icons_path(config_path)
    if icons_path is None:
        return None
    try:
        return load_icons(icons_path)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring icon file %s: %s", icons_path, exc)
        return None


def _emit(badge: Badge, output: str | None, icons: Mapping[str, str] | None) -> dict:
    rendered = render(badge, icons)
    if output is None:
        sys.stdout.write(rendered.body.decode("utf-8") + "\n")
        return {"ok": True, "output": None}
    output_path = Path(output)
    output_path.write_bytes(rendered.body)
    result = {
        "ok": True,
        "output": str(output_path.resolve()),
        "title": badge.title,
        "size": len(rendered.body),
        "content_type": rendered.content_type,
        "cache_control": rendered.cache_control,
    }
    print_render_result(result)
    return result


def do_render(
    options: Mapping[str, str],
    output: str | None = None,
    config_path: Path | None = None,
) -> dict:
    """Render a badge from options alone."""
    badge = resolve(apply_defaults(options, config_path))
    return _emit(badge, output, load_catalog(config_path))


def do_fixed(
    path: str,
    options: Mapping[str, str],
    output: str | None = None,
    config_path: Path | None = None,
) -> dict:
    """Render a badge from a static label-message-color path."""
    path, options = split_format_suffix(path, apply_defaults(options, config_path))
    try:
        badge = fixed_badge(path, options)
    except FixedBadgeError as exc:
        print_error(str(exc))
        return {"ok": False, "error": str(exc)}
    return _emit(badge, output, load_catalog(config_path))


def do_measure(text: str) -> dict:
    """Print the badge width of ``text``."""
    width = text_width(text)
    print_measure_result(text, width)
    return {"ok": True, "text": text, "width": width}


def do_config(args: argparse.Namespace, config_path: Path | None = None) -> dict:
    """Show or edit the stored defaults."""
    command = getattr(args, "config_command", None)
    if command == "set":
        try:
            set_default_option(args.key, args.value, config_path)
        except ValueError as exc:
            print_error(str(exc))
            return {"ok": False, "error": str(exc)}
    elif command == "unset":
        if not unset_default_option(args.key, config_path):
            print_error(f"Option {args.key!r} is not set")
            return {"ok": False, "error": f"Option {args.key!r} is not set"}
    elif command == "icons":
        set_icons_path(Path(args.path).expanduser().resolve(), config_path)
    config = load_config(config_path)
    print_config(config)
    return {"ok": True, "config": config}


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    command = args.command
    if command == "render":
        result = do_render(collect_options(args), output=args.output)
    elif command == "fixed":
        result = do_fixed(args.path, collect_options(args), output=args.output)
    elif command == "measure":
        result = do_measure(args.text)
    elif command == "config":
        result = do_config(args)
    else:
        parser.print_help()
        return

    if not result.get("ok"):
        sys.exit(2)


if __name__ == "__main__":
    main()
