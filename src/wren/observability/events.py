"""Event model for export observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads
    and concurrent render tasks.

"""

import time
from typing import TypeAlias
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Route map events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RouteMapExtended:
    """An extra path matched a route pattern and was added to the route map.

    Attributes:
        path: The concrete extra path (e.g., ``/blog/1``).
        pattern: The route pattern it matched (e.g., ``/blog/:id``).
        file: Output file computed for the new entry.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    pattern: str
    file: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Render events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RouteRendered:
    """A route was server-side rendered successfully.

    Attributes:
        path: Route path passed to the renderer.
        duration_ms: Time spent in the renderer in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RenderFailed:
    """The server renderer raised while rendering a route.

    Attributes:
        path: Route path passed to the renderer.
        error: ``repr`` of the raised exception.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Export events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileExported:
    """An HTML file was written to the output directory.

    Attributes:
        path: Route path the file was produced for.
        file: Output file path relative to the export directory.
        size_bytes: Size of the written file.
        rendered: True if the content came from the server renderer.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    file: str
    size_bytes: int
    rendered: bool
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

ExportEvent: TypeAlias = RouteMapExtended | RouteRendered | RenderFailed | FileExported


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
