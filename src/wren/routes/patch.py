"""Route patching — prepare the route tree for static export.

Two passes run before the route map is built:

    patch_routes(routes, config)   # per-route: add .html suffixes
    inject_root_alias(routes)      # whole list: copy "/" to "/index.html"

Both return new tuples; the caller's routes are never modified.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from wren.config import WrenConfig
from wren.routes.model import Route

_HTML_SUFFIX = ".html"
_OPTIONAL_HTML_SUFFIX = "(.html)?"

ROOT_PATH = "/"
ROOT_ALIAS_PATH = "/index.html"


def add_html_suffix(path: str, has_child_routes: bool) -> str:
    """Rewrite a route pattern so it also matches the exported ``.html`` file.

    ``/``                       -> ``/``
    ``/about``   (leaf)         -> ``/about.html``
    ``/about/``  (leaf)         -> ``/about.html``
    ``/user``    (with children) -> ``/user(.html)?``
    ``/user/``   (with children) -> ``/user/``

    Parents get an optional suffix because their descendants' files may or
    may not carry one.  Must be applied once per route: the leaf form is
    not idempotent.

    """
    if path == ROOT_PATH:
        return path
    if has_child_routes:
        return path if path.endswith("/") else path + _OPTIONAL_HTML_SUFFIX
    if path.endswith("/"):
        return path[:-1] + _HTML_SUFFIX
    return path + _HTML_SUFFIX


def patch_route(route: Route, config: WrenConfig) -> Route:
    """Apply the ``.html`` suffix to a single route when enabled.

    Children are not visited; see :func:`patch_routes`.
    """
    if not config.html_suffix or not route.path:
        return route
    return dataclasses.replace(
        route, path=add_html_suffix(route.path, route.has_children),
    )


def patch_routes(routes: Sequence[Route], config: WrenConfig) -> tuple[Route, ...]:
    """Patch every route of the tree, children before their parent."""
    patched: list[Route] = []
    for route in routes:
        current = route
        if route.routes is not None:
            current = dataclasses.replace(route, routes=patch_routes(route.routes, config))
        patched.append(patch_route(current, config))
    return tuple(patched)


def inject_root_alias(routes: Sequence[Route]) -> Sequence[Route]:
    """Insert an ``/index.html`` copy of the exact root route.

    The copy is placed immediately before the matched route so it wins
    matching for ``/index.html`` requests.  If several exact ``/`` routes
    exist the last one is aliased.  Without a match *routes* is returned
    as-is (same object).

    """
    root_index: int | None = None
    for index, route in enumerate(routes):
        if route.path == ROOT_PATH and route.exact:
            root_index = index

    if root_index is None:
        return routes

    alias = dataclasses.replace(routes[root_index], path=ROOT_ALIAS_PATH)
    return (*routes[:root_index], alias, *routes[root_index:])
