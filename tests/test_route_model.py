"""Tests for wren.routes.model — route tree model and loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wren._errors import ConfigError
from wren.routes.model import Route, load_routes, route_from_dict, routes_from_list


class TestRoute:
    """Route — frozen dataclass."""

    def test_frozen(self) -> None:
        route = Route(path="/")
        with pytest.raises(AttributeError):
            route.path = "/x"  # type: ignore[misc]

    def test_defaults(self) -> None:
        route = Route()
        assert route.path is None
        assert route.exact is False
        assert route.routes is None
        assert route.redirect is None
        assert dict(route.meta) == {}

    def test_has_children(self) -> None:
        assert Route(routes=()).has_children
        assert not Route().has_children

    def test_to_dict(self) -> None:
        route = Route(
            path="/docs", routes=(Route(path="/docs/a", exact=True),), meta={"title": "Docs"},
        )
        assert route.to_dict() == {
            "title": "Docs",
            "path": "/docs",
            "routes": [{"path": "/docs/a", "exact": True}],
        }


class TestRouteFromDict:
    """route_from_dict — validation and meta capture."""

    def test_basic(self) -> None:
        route = route_from_dict({"path": "/", "exact": True, "component": "./Home"})
        assert route.path == "/"
        assert route.exact is True
        assert route.meta == {"component": "./Home"}

    def test_meta_read_only(self) -> None:
        route = route_from_dict({"path": "/", "title": "Home"})
        with pytest.raises(TypeError):
            route.meta["title"] = "Other"  # type: ignore[index]

    def test_children(self) -> None:
        route = route_from_dict({"path": "/a", "routes": [{"path": "/a/b"}]})
        assert route.routes == (Route(path="/a/b"),)

    def test_empty_children_kept(self) -> None:
        assert route_from_dict({"path": "/a", "routes": []}).routes == ()

    def test_redirect(self) -> None:
        assert route_from_dict({"path": "/old", "redirect": "/new"}).redirect == "/new"

    @pytest.mark.parametrize(
        "data",
        [
            {"path": 1},
            {"path": "/", "exact": "yes"},
            {"path": "/", "routes": "nope"},
            {"path": "/", "redirect": 5},
        ],
    )
    def test_invalid_fields(self, data: dict) -> None:
        with pytest.raises(ConfigError):
            route_from_dict(data)

    def test_non_mapping(self) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            route_from_dict(["/"])  # type: ignore[arg-type]

    def test_roundtrip_through_to_dict(self) -> None:
        data = {"path": "/a", "exact": True, "title": "A", "routes": [{"path": "/a/b"}]}
        assert route_from_dict(data).to_dict() == data


class TestLoadRoutes:
    """load_routes — config key first, then routes.yaml / routes.json."""

    def test_from_config_mapping(self, tmp_path: Path) -> None:
        routes = load_routes(tmp_path, {"routes": [{"path": "/"}, {"path": "/a"}]})
        assert [r.path for r in routes] == ["/", "/a"]

    def test_from_project_config(self, tmp_project: Path) -> None:
        from wren.config_loader import read_config_file

        routes = load_routes(tmp_project, read_config_file(tmp_project))
        assert [r.path for r in routes] == ["/", "/about", "/blog/:id"]
        assert routes[0].exact is True
        assert routes[2].meta == {"title": "Post"}

    def test_routes_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "routes.yaml").write_text("- path: /\n- path: /x\n")
        assert [r.path for r in load_routes(tmp_path)] == ["/", "/x"]

    def test_routes_json_with_routes_key(self, tmp_path: Path) -> None:
        (tmp_path / "routes.json").write_text(json.dumps({"routes": [{"path": "/j"}]}))
        assert [r.path for r in load_routes(tmp_path)] == ["/j"]

    def test_no_routes(self, tmp_path: Path) -> None:
        assert load_routes(tmp_path) == ()

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "routes.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_routes(tmp_path)

    def test_not_a_list(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a list"):
            load_routes(tmp_path, {"routes": "/"})

    def test_routes_from_list(self) -> None:
        assert routes_from_list([{"path": "/"}]) == (Route(path="/"),)
