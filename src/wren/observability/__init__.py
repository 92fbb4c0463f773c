"""Export observability — structured events for the static export pipeline.

Records route-map extension, server-side render outcomes, and written
files as frozen dataclasses with nanosecond timestamps, safe for
concurrent production from render tasks.

Quick Start:
    >>> from wren.observability import EventLog, RouteRendered
    >>> log = EventLog()
    >>> # pass ``log=log`` to StaticExporter or RenderDispatcher
    >>> log.query(event_type=RouteRendered)

"""

from wren.observability.events import (
    ExportEvent,
    FileExported,
    RenderFailed,
    RouteMapExtended,
    RouteRendered,
    now_ns,
)
from wren.observability.log import EventLog

__all__ = [
    "EventLog",
    "ExportEvent",
    "FileExported",
    "RenderFailed",
    "RouteMapExtended",
    "RouteRendered",
    "now_ns",
]
