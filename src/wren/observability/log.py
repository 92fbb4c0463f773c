"""Event log — what one export did, as a thread-safe event store.

Collects the ``ExportEvent`` records produced while building the route
map, rendering pages, and writing files.  Events are kept in the order
they were recorded so a finished build can be replayed route by route.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  Render tasks and
    worker threads may append while another thread reads.

"""

import threading
from collections import deque

from wren.observability.events import ExportEvent, RenderFailed


class EventLog:
    """Bounded, append-only record of export events.

    Args:
        max_events: Maximum number of events to retain.  Very large builds
            drop their oldest events first.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[ExportEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ExportEvent) -> None:
        """Record an event in the log."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        path: str | None = None,
    ) -> list[ExportEvent]:
        """Return matching events in the order they were recorded.

        Args:
            event_type: Only return events of this type.
            path: Only return events for exactly this route path.

        """
        with self._lock:
            events = list(self._events)
        return [
            event for event in events
            if (event_type is None or isinstance(event, event_type))
            and (path is None or event.path == path)
        ]

    def count(self, event_type: type) -> int:
        """Number of recorded events of *event_type*."""
        with self._lock:
            return sum(1 for event in self._events if isinstance(event, event_type))

    def failures(self) -> list[RenderFailed]:
        """Render failures recorded during the export."""
        return [e for e in self.query(event_type=RenderFailed) if isinstance(e, RenderFailed)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
