"""Route tree model and loading.

Routes are read from the ``routes`` list of ``wren.yaml`` or from a
standalone ``routes.yaml`` / ``routes.json`` in the project root::

    routes:
      - path: /
        exact: true
        component: ./pages/index
      - path: /blog/:id
        component: ./pages/blog
      - path: /docs
        routes:
          - path: /docs/intro

Any key other than ``path``, ``exact``, ``routes`` and ``redirect`` is kept
verbatim in :attr:`Route.meta`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from wren._errors import ConfigError

_ROUTE_FIELDS = frozenset({"path", "exact", "routes", "redirect"})


@dataclass(frozen=True, slots=True)
class Route:
    """A single route of the application's route tree.

    Attributes:
        path: URL pattern (e.g., ``/``, ``/blog/:id``), or *None* for
            pathless layout routes.
        exact: Match the path exactly rather than as a prefix.
        routes: Child routes, or *None* for a leaf.  An empty tuple still
            counts as having children.
        redirect: Redirect target; redirect routes are never exported.
        meta: Remaining route fields (title, component, ...), read-only.

    """

    path: str | None = None
    exact: bool = False
    routes: tuple[Route, ...] | None = None
    redirect: str | None = None
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_children(self) -> bool:
        return self.routes is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict rendering of the route (children included)."""
        data: dict[str, Any] = dict(self.meta)
        if self.path is not None:
            data["path"] = self.path
        if self.exact:
            data["exact"] = True
        if self.redirect is not None:
            data["redirect"] = self.redirect
        if self.routes is not None:
            data["routes"] = [child.to_dict() for child in self.routes]
        return data


def route_from_dict(data: Mapping[str, Any]) -> Route:
    """Build a :class:`Route` (and its children) from a mapping.

    Raises:
        ConfigError: If a field has the wrong type.

    """
    if not isinstance(data, Mapping):
        msg = f"Route must be a mapping, got {type(data).__name__}"
        raise ConfigError(msg)

    path = data.get("path")
    if path is not None and not isinstance(path, str):
        msg = f"Route 'path' must be a str, got {type(path).__name__}"
        raise ConfigError(msg)

    exact = data.get("exact", False)
    if not isinstance(exact, bool):
        msg = f"Route {path!r}: 'exact' must be a boolean"
        raise ConfigError(msg)

    redirect = data.get("redirect")
    if redirect is not None and not isinstance(redirect, str):
        msg = f"Route {path!r}: 'redirect' must be a str"
        raise ConfigError(msg)

    children = data.get("routes")
    if children is not None:
        if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
            msg = f"Route {path!r}: 'routes' must be a list"
            raise ConfigError(msg)
        children = routes_from_list(children)

    meta = {k: v for k, v in data.items() if k not in _ROUTE_FIELDS}
    return Route(
        path=path,
        exact=exact,
        routes=children,
        redirect=redirect,
        meta=MappingProxyType(meta),
    )


def routes_from_list(items: Sequence[Mapping[str, Any]]) -> tuple[Route, ...]:
    """Build an ordered route tuple from a list of mappings."""
    return tuple(route_from_dict(item) for item in items)


def load_routes(root: Path, file_config: Mapping[str, object] | None = None) -> tuple[Route, ...]:
    """Load the route table for the project at *root*.

    The ``routes`` key of the already-read config file wins; otherwise
    ``routes.yaml``, ``routes.yml`` and ``routes.json`` are tried in order.
    Returns an empty tuple when no route table exists.

    Raises:
        ConfigError: If a routes file cannot be parsed or is malformed.

    """
    if file_config and "routes" in file_config:
        return _coerce_route_list(file_config["routes"], "config file")

    for name in ("routes.yaml", "routes.yml", "routes.json"):
        path = root / name
        if not path.is_file():
            continue
        text = path.read_text()
        try:
            data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            msg = f"Failed to parse {path}: {exc}"
            raise ConfigError(msg) from exc
        if isinstance(data, Mapping) and "routes" in data:
            data = data["routes"]
        return _coerce_route_list(data, str(path))

    return ()


def _coerce_route_list(data: object, source: str) -> tuple[Route, ...]:
    if data is None:
        return ()
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        msg = f"Routes in {source} must be a list"
        raise ConfigError(msg)
    return routes_from_list(data)
