"""Route table handling for static export.

Loads the application's route tree, patches it for static hosting, and
maps every exportable route to an output file.

Public API::

    from wren.routes import load_routes, patch_routes, inject_root_alias

    routes = inject_root_alias(patch_routes(load_routes(root), config))
    entries = build_route_map(routes, compute_file)
    entries = extend_route_map(entries, config.extra_paths, compute_file)
"""

from wren.routes.model import Route, load_routes, route_from_dict, routes_from_list
from wren.routes.patch import add_html_suffix, inject_root_alias, patch_route, patch_routes
from wren.routes.pattern import PathPattern, compile_path, is_dynamic_route
from wren.routes.route_map import (
    RouteMapEntry,
    build_route_map,
    deep_merge,
    extend_route_map,
    flatten_routes,
    html_path,
)

__all__ = [
    "PathPattern",
    "Route",
    "RouteMapEntry",
    "add_html_suffix",
    "build_route_map",
    "compile_path",
    "deep_merge",
    "extend_route_map",
    "flatten_routes",
    "html_path",
    "inject_root_alias",
    "is_dynamic_route",
    "load_routes",
    "patch_route",
    "patch_routes",
    "route_from_dict",
    "routes_from_list",
]
