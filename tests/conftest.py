"""Shared test fixtures for wren."""

from __future__ import annotations

from pathlib import Path

import pytest

from wren.config import ExportStaticConfig, WrenConfig
from wren.routes.model import Route

TEMPLATE = "<!DOCTYPE html>\n<html>\n<body><div id=\"root\"></div></body>\n</html>\n"


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal SPA project for export testing.

    Returns the project root with ``wren.yaml`` (routes included) and the
    ``index.html`` template.
    """
    (tmp_path / "index.html").write_text(TEMPLATE)
    (tmp_path / "wren.yaml").write_text(
        "export_static:\n"
        "  extraPaths:\n"
        "    - /blog/1\n"
        "    - /missing\n"
        "routes:\n"
        "  - path: /\n"
        "    exact: true\n"
        "    title: Home\n"
        "  - path: /about\n"
        "    title: About\n"
        "  - path: /blog/:id\n"
        "    title: Post\n"
    )
    return tmp_path


@pytest.fixture
def ssr_project(tmp_project: Path) -> Path:
    """Extend tmp_project with a server render artifact in ``dist/``."""
    dist = tmp_project / "dist"
    dist.mkdir()
    (dist / "server.py").write_text(
        "def render(path, html_template):\n"
        "    body = f'<h1>{path}</h1>'\n"
        "    return {'html': html_template.replace('<div id=\"root\"></div>', body)}\n"
    )
    return tmp_project


def make_config(
    root: Path,
    *,
    html_suffix: bool = False,
    dynamic_root: bool = False,
    extra_paths: tuple[str, ...] = (),
    ssr: bool = False,
) -> WrenConfig:
    """Build a WrenConfig with export_static enabled."""
    return WrenConfig(
        root=root,
        ssr=ssr,
        export_static=ExportStaticConfig(
            html_suffix=html_suffix,
            dynamic_root=dynamic_root,
            extra_paths=extra_paths,
        ),
    )


@pytest.fixture
def config_factory():
    """Return the ``make_config`` helper."""
    return make_config


@pytest.fixture
def sample_routes() -> tuple[Route, ...]:
    """Root, a static page, a nested section, and a dynamic route."""
    return (
        Route(path="/", exact=True),
        Route(path="/about"),
        Route(path="/docs", routes=(Route(path="/docs/intro"),)),
        Route(path="/blog/:id"),
    )
