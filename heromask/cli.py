"""CLI entry point for HeroMask."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import CONTENT_GLOBS, CONTENT_ROOT, ICONS_DIR, OUTPUT_PATH


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="heromask",
        description="Inline SVG icons into a stylesheet as CSS mask images.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"HeroMask {__version__}",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Build the icon stylesheet")
    p_build.add_argument("--icons", "-i", type=Path, default=ICONS_DIR, help="Icon asset root")
    p_build.add_argument("--content-root", type=Path, default=CONTENT_ROOT, help="Base directory for content globs")
    p_build.add_argument(
        "--content",
        "-c",
        action="append",
        default=None,
        help="Content glob (repeatable; defaults to the application globs)",
    )
    p_build.add_argument("--out", "-o", type=Path, default=OUTPUT_PATH, help="Output stylesheet")
    p_build.add_argument("--theme", type=Path, default=None, help="Theme JSON file")
    p_build.add_argument("--with-theme", action="store_true", help="Prepend theme custom properties")

    p_list = sub.add_parser("list", help="List available icon names")
    p_list.add_argument("--icons", "-i", type=Path, default=ICONS_DIR, help="Icon asset root")
    p_list.add_argument("--style", choices=["outline", "solid", "mini", "micro"], help="Filter by style")

    p_show = sub.add_parser("show", help="Print the CSS for one icon")
    p_show.add_argument("name", help="Icon name, with or without the hero- prefix (e.g. x-mark-mini)")
    p_show.add_argument("--icons", "-i", type=Path, default=ICONS_DIR, help="Icon asset root")
    p_show.add_argument("--theme", type=Path, default=None, help="Theme JSON file")

    p_theme = sub.add_parser("theme", help="Print the resolved theme tokens")
    p_theme.add_argument("--theme", type=Path, default=None, help="Theme JSON file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "list":
        return _cmd_list(args)
    if args.cmd == "show":
        return _cmd_show(args)
    if args.cmd == "theme":
        return _cmd_theme(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .css.build import build_stylesheet
    from .theme.tokens import load_theme

    try:
        result = build_stylesheet(
            icons_dir=args.icons,
            content_root=args.content_root,
            patterns=args.content or CONTENT_GLOBS,
            theme=load_theme(args.theme),
            out_path=args.out,
            include_theme=bool(args.with_theme),
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Stylesheet built")
    print(f"  Output: {result.output_path}")
    print(f"  Files scanned: {result.files_scanned}")
    print(f"  Icons: {len(result.icons)}")
    print(f"  Size: {len(result.css.encode('utf-8')) / 1024:.1f} KB")

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):")
        for w in result.warnings[:10]:
            print(f"  - {w}")
        if len(result.warnings) > 10:
            print(f"  ... and {len(result.warnings) - 10} more")

    return 0


def _cmd_list(args: Any) -> int:
    from .icons.scan import IconStyle, scan_icons

    try:
        icons = scan_icons(args.icons)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    style = IconStyle.from_label(args.style) if args.style else None
    names = icons.names(style)
    if not names:
        print("No icons found")
        return 0

    for name in names:
        print(name)
    return 0


def _cmd_show(args: Any) -> int:
    from .css.build import render_icon_css
    from .icons.scan import scan_icons
    from .theme.tokens import load_theme

    try:
        icons = scan_icons(args.icons)
        name = args.name if args.name.startswith("hero-") else f"hero-{args.name}"
        css, _ = render_icon_css(icons, [name], load_theme(args.theme))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(css, end="")
    return 0


def _cmd_theme(args: Any) -> int:
    from .theme.tokens import load_theme

    try:
        theme = load_theme(args.theme)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(theme.model_dump(mode="json"), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    app()
