"""Wren CLI — wren build / wren routes.

Entry point for the ``wren`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys

from wren._errors import WrenError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wren CLI."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Static export for single-page applications.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # wren build
    build_parser = subparsers.add_parser(
        "build",
        help="Export routes as static HTML files",
    )
    _add_pipeline_args(build_parser)
    build_parser.add_argument("--output", default=None, help="Output directory")
    build_parser.add_argument(
        "--ssr", action="store_true", default=None,
        help="Server-side render pages using the render artifact",
    )

    # wren routes
    routes_parser = subparsers.add_parser(
        "routes",
        help="Print the route map without writing files",
    )
    _add_pipeline_args(routes_parser)

    return parser


def _add_pipeline_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument(
        "--html-suffix", action="store_true", default=None,
        help="Export pages as name.html instead of name/index.html",
    )
    parser.add_argument(
        "--dynamic-root", action="store_true", default=None,
        help="Resolve the public path at runtime",
    )
    parser.add_argument(
        "--extra-path", action="append", dest="extra_paths", default=None,
        metavar="PATH", help="Concrete path to export for a dynamic route (repeatable)",
    )


def _get_version() -> str:
    """Get the package version."""
    from wren import __version__

    return __version__


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    """Turn parsed flags into load_config overrides, skipping unset ones."""
    static: dict[str, object] = {}
    if args.html_suffix:
        static["html_suffix"] = True
    if args.dynamic_root:
        static["dynamic_root"] = True
    if args.extra_paths:
        static["extra_paths"] = args.extra_paths

    overrides: dict[str, object] = {}
    if static:
        overrides["export_static"] = static
    if getattr(args, "output", None):
        overrides["output"] = args.output
    if getattr(args, "ssr", None):
        overrides["ssr"] = True
    return overrides


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from wren.app import build, route_map

    try:
        if args.command == "build":
            build(root=args.root, **_overrides(args))
        elif args.command == "routes":
            for entry in route_map(root=args.root, **_overrides(args)):
                print(f"{entry.route.path}\t{entry.file}")
    except WrenError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
