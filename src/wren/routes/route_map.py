"""Route map — which output file each exportable route is written to.

    entries = build_route_map(routes, compute_file)
    entries = extend_route_map(entries, ["/blog/1", "/blog/2"], compute_file)

``extend_route_map`` fills in concrete pages for dynamic routes: every
extra path is matched against the existing route patterns and, on the
first hit, a copy of that entry is appended with the concrete path and its
own output file.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from wren.observability.events import RouteMapExtended, now_ns
from wren.routes.pattern import compile_path

if TYPE_CHECKING:
    from wren._types import ComputeFile, OutputFile
    from wren.observability.log import EventLog
    from wren.routes.model import Route

_HTML_SUFFIX = ".html"
_OPTIONAL_HTML_SUFFIX = "(.html)?"
_INDEX_FILE = "index.html"


@dataclass(frozen=True, slots=True)
class RouteMapEntry:
    """A route paired with the file it is exported to.

    Attributes:
        route: The (patched) route.
        file: Output file path relative to the export directory.
        meta: Extra data attached by the host build, read-only.

    """

    route: Route
    file: OutputFile
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def html_path(path: str, *, html_suffix: bool = False) -> OutputFile:
    """Convert a URL path to its output file.

    Default convention:
        ``/``             -> ``index.html``
        ``/about``        -> ``about/index.html``
        ``/docs/intro/``  -> ``docs/intro/index.html``
        ``/index.html``   -> ``index.html``

    With *html_suffix*:
        ``/about.html``   -> ``about.html``
        ``/user(.html)?`` -> ``user.html``
        ``/blog/1``       -> ``blog/1.html``

    """
    clean = path.removeprefix("/")
    if clean.endswith(_OPTIONAL_HTML_SUFFIX):
        clean = clean[: -len(_OPTIONAL_HTML_SUFFIX)]
    clean = clean.removesuffix("/")
    if not clean:
        return _INDEX_FILE
    if clean.endswith(_HTML_SUFFIX):
        return clean
    if html_suffix:
        return clean + _HTML_SUFFIX
    return f"{clean}/{_INDEX_FILE}"


def flatten_routes(routes: Sequence[Route]) -> list[Route]:
    """Flatten the route tree depth-first, parents before children.

    Pathless routes, redirects and patterns with optional tokens (``?``),
    which cannot map to a single file, are skipped; their children are
    still visited.

    """
    flat: list[Route] = []
    for route in routes:
        if route.path and route.redirect is None and "?" not in route.path:
            flat.append(route)
        if route.routes:
            flat.extend(flatten_routes(route.routes))
    return flat


def build_route_map(routes: Sequence[Route], compute_file: ComputeFile) -> list[RouteMapEntry]:
    """Build one entry per exportable route, in route order."""
    return [
        RouteMapEntry(route=route, file=compute_file(route.path or "/"))
        for route in flatten_routes(routes)
    ]


def deep_merge(target: Any, overrides: Mapping[str, Any]) -> Any:
    """Return a copy of *target* with *overrides* merged in recursively.

    *target* may be a dataclass instance or a mapping.  Nested mappings in
    *overrides* are merged into the corresponding dataclass or mapping
    value; everything else replaces the current value.  *target* is never
    modified.
    """
    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        changes = {
            name: _merge_value(getattr(target, name), value)
            for name, value in overrides.items()
        }
        return dataclasses.replace(target, **changes)

    merged = {
        key: _merge_value(target.get(key), value) if key in target else value
        for key, value in overrides.items()
    }
    result = {**target, **merged}
    if isinstance(target, MappingProxyType):
        return MappingProxyType(result)
    return result


def _merge_value(current: Any, value: Any) -> Any:
    if isinstance(value, Mapping) and (
        isinstance(current, Mapping)
        or (dataclasses.is_dataclass(current) and not isinstance(current, type))
    ):
        return deep_merge(current, value)
    return value


def extend_route_map(
    route_map: Sequence[RouteMapEntry],
    extra_paths: Sequence[str] | None,
    compute_file: ComputeFile,
    *,
    log: EventLog | None = None,
) -> Sequence[RouteMapEntry]:
    """Append entries for concrete paths that match existing route patterns.

    Each extra path is matched, in order, against every entry's route
    pattern; the first match is copied with ``route.path`` set to the
    extra path and ``file`` set to ``compute_file(extra_path)``.  Paths
    that match nothing are skipped.  Existing entries are kept as-is and
    in order; no deduplication is done.

    Returns *route_map* unchanged when there are no extra paths.

    """
    if not extra_paths:
        return route_map

    extended = list(route_map)
    for path in extra_paths:
        match = next(
            (
                entry for entry in extended
                if entry.route.path and compile_path(entry.route.path).match(path) is not None
            ),
            None,
        )
        if match is None:
            continue

        entry = deep_merge(match, {
            "route": {"path": path},
            "file": compute_file(path),
        })
        extended.append(entry)

        if log is not None:
            log.append(RouteMapExtended(
                path=path,
                pattern=match.route.path or "",
                file=entry.file,
                timestamp_ns=now_ns(),
            ))

    return extended
