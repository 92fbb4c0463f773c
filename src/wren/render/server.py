"""Server render artifact — locate and load the SSR entry once per build.

The host build emits a Python module next to the exported site (by default
``<output>/server.py``) exposing::

    def render(path: str, html_template: str) -> dict:   # or async def
        return {"html": "..."}

Its presence is what makes server-side rendering available.  The module is
imported here exactly once and its ``render`` callable is handed to the
:class:`~wren.render.dispatch.RenderDispatcher`.
"""

from __future__ import annotations

import importlib.util
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wren._errors import ExportError

if TYPE_CHECKING:
    from wren._types import RenderFunc

_RENDER_ATTR = "render"


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Output of one server-side render.

    Attributes:
        html: The rendered HTML document.

    """

    html: str

    @classmethod
    def from_value(cls, value: Any) -> RenderResult:
        """Normalize a renderer return value.

        Accepts ``{"html": ...}`` mappings, objects with an ``html``
        attribute, and plain strings.

        Raises:
            TypeError: If no HTML string can be extracted.

        """
        if isinstance(value, str):
            return cls(html=value)
        html = value.get("html") if isinstance(value, Mapping) else getattr(value, "html", None)
        if not isinstance(html, str):
            msg = f"Renderer must return {{'html': str}}, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(html=html)


def load_server_renderer(server_path: Path) -> RenderFunc | None:
    """Import the render artifact at *server_path* and return its ``render``.

    Returns *None* when the file does not exist, which means the renderer
    is unavailable and pages are exported with the plain template.

    Raises:
        ExportError: If the module cannot be imported or has no callable
            ``render``.

    """
    if not server_path.is_file():
        return None

    module_name = f"wren_server.{server_path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, server_path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load server renderer from {server_path}"
        raise ExportError(msg)

    try:
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        msg = f"Failed to load server renderer {server_path}: {exc}"
        raise ExportError(msg) from exc

    render = getattr(module, _RENDER_ATTR, None)
    if render is None or not callable(render):
        msg = f"Server renderer {server_path} must define a callable '{_RENDER_ATTR}(path, html_template)'"
        raise ExportError(msg)
    return render
