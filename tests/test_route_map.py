"""Tests for wren.routes.route_map — route-to-file mapping and extension."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from wren.observability.events import RouteMapExtended
from wren.observability.log import EventLog
from wren.routes.model import Route
from wren.routes.route_map import (
    RouteMapEntry,
    build_route_map,
    deep_merge,
    extend_route_map,
    flatten_routes,
    html_path,
)


def _compute_file(path: str) -> str:
    return html_path(path)


@pytest.fixture
def blog_map() -> list[RouteMapEntry]:
    return [
        RouteMapEntry(route=Route(path="/", exact=True), file="index.html"),
        RouteMapEntry(
            route=Route(path="/blog/:id", meta=MappingProxyType({"title": "Post"})),
            file="blog/:id/index.html",
            meta=MappingProxyType({"chunk": "blog"}),
        ),
    ]


# ---------------------------------------------------------------------------
# html_path
# ---------------------------------------------------------------------------


class TestHtmlPath:
    """html_path — the output file convention."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", "index.html"),
            ("/about", "about/index.html"),
            ("/about/", "about/index.html"),
            ("/docs/intro", "docs/intro/index.html"),
            ("/index.html", "index.html"),
            ("/blog/:id", "blog/:id/index.html"),
        ],
    )
    def test_directory_style(self, path: str, expected: str) -> None:
        assert html_path(path) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", "index.html"),
            ("/about.html", "about.html"),
            ("/user(.html)?", "user.html"),
            ("/blog/1", "blog/1.html"),
            ("/index.html", "index.html"),
        ],
    )
    def test_html_suffix(self, path: str, expected: str) -> None:
        assert html_path(path, html_suffix=True) == expected


# ---------------------------------------------------------------------------
# flatten_routes / build_route_map
# ---------------------------------------------------------------------------


class TestFlattenRoutes:
    """flatten_routes — depth-first, parents before children."""

    def test_order(self, sample_routes) -> None:
        assert [r.path for r in flatten_routes(sample_routes)] == [
            "/", "/about", "/docs", "/docs/intro", "/blog/:id",
        ]

    def test_skips_redirects_pathless_and_optional(self) -> None:
        routes = (
            Route(path="/old", redirect="/new"),
            Route(routes=(Route(path="/inner"),)),
            Route(path="/user(.html)?", routes=(Route(path="/user/list.html"),)),
            Route(path="/docs/:page?"),
        )
        assert [r.path for r in flatten_routes(routes)] == ["/inner", "/user/list.html"]


class TestBuildRouteMap:
    """build_route_map — one entry per exportable route."""

    def test_entries(self, sample_routes) -> None:
        entries = build_route_map(sample_routes, _compute_file)
        assert [(e.route.path, e.file) for e in entries] == [
            ("/", "index.html"),
            ("/about", "about/index.html"),
            ("/docs", "docs/index.html"),
            ("/docs/intro", "docs/intro/index.html"),
            ("/blog/:id", "blog/:id/index.html"),
        ]


# ---------------------------------------------------------------------------
# deep_merge
# ---------------------------------------------------------------------------


class TestDeepMerge:
    """deep_merge — copy with recursive overrides."""

    def test_dataclass_nested_override(self) -> None:
        entry = RouteMapEntry(route=Route(path="/a", exact=True), file="a/index.html")
        merged = deep_merge(entry, {"route": {"path": "/b"}, "file": "b/index.html"})
        assert merged.route == Route(path="/b", exact=True)
        assert merged.file == "b/index.html"
        assert entry.route.path == "/a"

    def test_mapping_merge(self) -> None:
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        merged = deep_merge(base, {"a": {"y": 3}, "c": 4})
        assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
        assert base == {"a": {"x": 1, "y": 2}, "b": 1}

    def test_read_only_mapping_stays_read_only(self) -> None:
        merged = deep_merge(MappingProxyType({"a": 1}), {"b": 2})
        assert isinstance(merged, MappingProxyType)
        assert merged == {"a": 1, "b": 2}

    def test_non_mapping_value_replaces(self) -> None:
        assert deep_merge({"a": {"x": 1}}, {"a": 5}) == {"a": 5}


# ---------------------------------------------------------------------------
# extend_route_map
# ---------------------------------------------------------------------------


class TestExtendRouteMap:
    """extend_route_map — extra paths for dynamic routes."""

    def test_appends_matching_path(self, blog_map) -> None:
        original = list(blog_map)
        result = extend_route_map(blog_map, ["/blog/1"], _compute_file)

        assert len(result) == 3
        assert list(result[:2]) == original
        assert all(a is b for a, b in zip(result[:2], original, strict=True))

        new = result[2]
        assert new.route.path == "/blog/1"
        assert new.file == _compute_file("/blog/1") == "blog/1/index.html"

    def test_other_fields_preserved(self, blog_map) -> None:
        new = extend_route_map(blog_map, ["/blog/7"], _compute_file)[-1]
        assert new.route.meta == {"title": "Post"}
        assert new.route.exact is False
        assert new.meta == {"chunk": "blog"}

    def test_original_entries_unchanged(self, blog_map) -> None:
        extend_route_map(blog_map, ["/blog/1"], _compute_file)
        assert len(blog_map) == 2
        assert blog_map[1].route.path == "/blog/:id"
        assert blog_map[1].file == "blog/:id/index.html"

    def test_no_match_skipped(self, blog_map) -> None:
        result = extend_route_map(blog_map, ["/nonexistent"], _compute_file)
        assert list(result) == blog_map

    @pytest.mark.parametrize("extra", [[], None])
    def test_empty_returns_input(self, blog_map, extra) -> None:
        assert extend_route_map(blog_map, extra, _compute_file) is blog_map

    def test_order_follows_extra_paths(self, blog_map) -> None:
        result = extend_route_map(blog_map, ["/blog/2", "/nope", "/blog/1"], _compute_file)
        assert [e.route.path for e in result[2:]] == ["/blog/2", "/blog/1"]

    def test_first_matching_entry_wins(self) -> None:
        entries = [
            RouteMapEntry(route=Route(path="/:lang", meta={"n": 1}), file="a"),
            RouteMapEntry(route=Route(path="/:slug", meta={"n": 2}), file="b"),
        ]
        new = extend_route_map(entries, ["/en"], _compute_file)[-1]
        assert new.route.meta == {"n": 1}

    def test_no_deduplication(self) -> None:
        entries = [
            RouteMapEntry(route=Route(path="/about"), file="about/index.html"),
        ]
        result = extend_route_map(entries, ["/about"], _compute_file)
        assert [e.file for e in result] == ["about/index.html", "about/index.html"]

    def test_entries_without_path_ignored(self) -> None:
        entries = [RouteMapEntry(route=Route(), file="x")]
        assert list(extend_route_map(entries, ["/x"], _compute_file)) == entries

    def test_records_events(self, blog_map) -> None:
        log = EventLog()
        extend_route_map(blog_map, ["/blog/1", "/missing"], _compute_file, log=log)
        events = log.query(event_type=RouteMapExtended)
        assert len(events) == 1
        assert events[0].path == "/blog/1"
        assert events[0].pattern == "/blog/:id"
        assert events[0].file == "blog/1/index.html"
