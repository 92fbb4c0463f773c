"""Render layer — server-side rendering of exported pages.

Public API::

    from wren.render import RenderDispatcher, load_server_renderer

    renderer = load_server_renderer(config.server_path)
    dispatcher = RenderDispatcher(ssr_enabled=config.ssr, renderer=renderer)
    html = await dispatcher.render(route, template)
"""

from wren.render.dispatch import RenderDispatcher, render_route, should_render
from wren.render.server import RenderResult, load_server_renderer

__all__ = [
    "RenderDispatcher",
    "RenderResult",
    "load_server_renderer",
    "render_route",
    "should_render",
]
