"""Wren — static export for single-page applications.

Turns an application's route table into static HTML pages, one per
exportable route, with optional server-side pre-rendering.

Quick start::

    import wren

    wren.build("my-app/")

Project layout::

    my-app/
      wren.yaml        # config + routes
      index.html       # SPA template every page starts from
      dist/server.py   # optional server render artifact (enables SSR)

"""

__version__ = "0.1.0"
__all__ = [
    "ExportStaticConfig",
    "WrenConfig",
    "__version__",
    "build",
    "route_map",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "WrenConfig":
        from wren.config import WrenConfig

        return WrenConfig

    if name == "ExportStaticConfig":
        from wren.config import ExportStaticConfig

        return ExportStaticConfig

    if name == "build":
        from wren.app import build

        return build

    if name == "route_map":
        from wren.app import route_map

        return route_map

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
