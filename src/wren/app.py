"""Wren application entry points.

``build`` exports the project as static HTML files; ``route_map`` runs the
route pipeline without touching the filesystem, for inspection.
"""

import sys
import time
from pathlib import Path

from wren.config import WrenConfig, apply_build_config
from wren.config_loader import load_config, read_config_file
from wren.export.static import ExportResult, StaticExporter
from wren.observability.events import RouteMapExtended
from wren.observability.log import EventLog
from wren.render.server import load_server_renderer
from wren.routes.model import Route, load_routes
from wren.routes.route_map import RouteMapEntry


def _load_project(root: str | Path, **kwargs: object) -> tuple[WrenConfig, tuple[Route, ...]]:
    """Load config and routes for the project at *root*.

    Raises:
        ConfigError: If the config file or route table is malformed.

    """
    root_path = Path(root)
    config = load_config(root_path, **kwargs)
    routes = load_routes(config.root, read_config_file(config.root))
    return config, routes


def route_map(root: str | Path = ".", **kwargs: object) -> list[RouteMapEntry]:
    """Return the final route map for the project without writing files.

    Args:
        root: Path to the project root.
        **kwargs: Override WrenConfig fields.

    """
    config, routes = _load_project(root, **kwargs)
    return StaticExporter(config, routes).route_map()


def build(root: str | Path = ".", **kwargs: object) -> ExportResult:
    """Export the project as static HTML files.

    The server render artifact is looked up once; when it is missing (or
    ``ssr`` is off) every page is the plain template.

    Args:
        root: Path to the project root.
        **kwargs: Override WrenConfig fields.

    Raises:
        ConfigError: If the config or routes are invalid.
        ExportError: If the template or render artifact cannot be loaded.
        Exception: Whatever the server renderer raised for a page.

    """
    t0 = time.perf_counter()
    config, routes = _load_project(root, **kwargs)

    renderer = load_server_renderer(config.server_path) if config.ssr else None
    load_ms = (time.perf_counter() - t0) * 1000

    print(
        f"  wren build: {len(routes)} route{'s' if len(routes) != 1 else ''}"
        f" loaded in {load_ms:.0f}ms"
        f" (ssr {'on' if renderer is not None else 'off'})",
        file=sys.stderr,
    )

    log = EventLog()
    exporter = StaticExporter(config, routes, renderer=renderer, log=log)
    try:
        result = exporter.export()
    except Exception:
        failed = len(log.failures())
        if failed:
            print(f"  {failed} page{'s' if failed != 1 else ''} failed to render", file=sys.stderr)
        raise

    _print_export_summary(result, config, log)
    return result


def _print_export_summary(result: ExportResult, config: WrenConfig, log: EventLog) -> None:
    """Print export completion summary to stderr."""
    settings = apply_build_config(config, {"publicPath": config.public_path})
    extended = log.count(RouteMapExtended)

    lines = [
        "",
        "─" * 41,
        f"  Exported {result.total_pages} page{'s' if result.total_pages != 1 else ''}",
    ]
    if result.total_rendered > 0:
        lines.append(f"  Server-rendered {result.total_rendered}")
    if extended:
        lines.append(f"  Extra paths matched {extended}")
    if settings.get("runtimePublicPath"):
        lines.append("  Public path: resolved at runtime")
    lines.append(f"  Output: {result.output_dir}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)
