"""Render dispatch — decide per route whether to server-side render.

A page is rendered only when SSR is enabled, a renderer is available, and
the route path is static.  Dynamic routes (``/blog/:id``) have no concrete
parameters at export time and keep the plain template.

A renderer failure is fatal: it is reported, recorded, and re-raised
unchanged so the build fails instead of shipping the bare template.
"""

from __future__ import annotations

import inspect
import sys
import time
from typing import TYPE_CHECKING

from wren.observability.events import RenderFailed, RouteRendered, now_ns
from wren.render.server import RenderResult
from wren.routes.pattern import is_dynamic_route

if TYPE_CHECKING:
    from wren._types import RenderFunc
    from wren.observability.log import EventLog
    from wren.routes.model import Route


def should_render(route: Route, *, ssr_enabled: bool, renderer_available: bool) -> bool:
    """Return True if *route* should go through the server renderer."""
    return ssr_enabled and renderer_available and not is_dynamic_route(route.path)


async def render_route(
    route: Route,
    html_template: str,
    *,
    ssr_enabled: bool,
    renderer: RenderFunc | None,
    log: EventLog | None = None,
) -> str:
    """Produce the final HTML for one route.

    Args:
        route: The route being exported.
        html_template: Base HTML every page starts from.
        ssr_enabled: Whether server-side rendering is turned on.
        renderer: The render capability, or *None* when unavailable.
            May be sync or async.
        log: Optional event log for render outcomes.

    Returns:
        The rendered HTML, or *html_template* unchanged on pass-through.

    Raises:
        Exception: Whatever the renderer raised, unchanged.

    """
    if renderer is None or not should_render(
        route, ssr_enabled=ssr_enabled, renderer_available=True,
    ):
        return html_template

    path = route.path or "/"
    t0 = time.perf_counter()
    try:
        value = renderer(path, html_template)
        if inspect.isawaitable(value):
            value = await value
        result = RenderResult.from_value(value)
    except Exception as exc:
        print(f"  {path} render failed: {exc}", file=sys.stderr)
        if log is not None:
            log.append(RenderFailed(path=path, error=repr(exc), timestamp_ns=now_ns()))
        raise

    elapsed = (time.perf_counter() - t0) * 1000
    print(f"  {path} render success", file=sys.stderr)
    if log is not None:
        log.append(RouteRendered(path=path, duration_ms=elapsed, timestamp_ns=now_ns()))
    return result.html


class RenderDispatcher:
    """Render capability bound once per build.

    Holds the SSR switch and the injected renderer so the artifact is
    acquired a single time rather than on every page.

    Args:
        ssr_enabled: Whether server-side rendering is turned on.
        renderer: Render callable, or *None* when no artifact exists.
        log: Optional event log for render outcomes.

    """

    __slots__ = ("_log", "_renderer", "_ssr_enabled")

    def __init__(
        self,
        *,
        ssr_enabled: bool,
        renderer: RenderFunc | None,
        log: EventLog | None = None,
    ) -> None:
        self._ssr_enabled = ssr_enabled
        self._renderer = renderer
        self._log = log

    @property
    def renderer_available(self) -> bool:
        return self._renderer is not None

    def will_render(self, route: Route) -> bool:
        return should_render(
            route,
            ssr_enabled=self._ssr_enabled,
            renderer_available=self.renderer_available,
        )

    async def render(self, route: Route, html_template: str) -> str:
        """Render *route*, or return *html_template* on pass-through."""
        return await render_route(
            route,
            html_template,
            ssr_enabled=self._ssr_enabled,
            renderer=self._renderer,
            log=self._log,
        )
