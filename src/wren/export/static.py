"""Static export — write one HTML file per exportable route.

Turns a single-page application's route table into static pages.  Every
page starts from the SPA's HTML template and, when server-side rendering
is enabled and a render artifact exists, is filled with pre-rendered
markup.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from wren._errors import ExportError
from wren.observability.events import FileExported, now_ns
from wren.render.dispatch import RenderDispatcher
from wren.routes.patch import inject_root_alias, patch_routes
from wren.routes.route_map import build_route_map, extend_route_map, html_path

if TYPE_CHECKING:
    from wren._types import RenderFunc
    from wren.config import WrenConfig
    from wren.observability.log import EventLog
    from wren.routes.model import Route
    from wren.routes.route_map import RouteMapEntry


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        source_path: Route path the file was produced for (e.g., ``"/about"``).
        output_path: Absolute filesystem path to the written file.
        rendered: True if the content came from the server renderer.
        size_bytes: Size of the written file in bytes.

    """

    source_path: str
    output_path: Path
    rendered: bool
    size_bytes: int


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of a full static export.

    Attributes:
        files: All files written during export, in route-map order.
        total_pages: Number of HTML files written.
        total_rendered: Number of pages produced by the server renderer.
        duration_ms: Total wall-clock time for the export.
        output_dir: Absolute path to the output directory.

    """

    files: tuple[ExportedFile, ...]
    total_pages: int
    total_rendered: int
    duration_ms: float
    output_dir: Path


class StaticExporter:
    """Exports a route table as static HTML files.

    Args:
        config: Frozen wren configuration.
        routes: The application's route tree.
        renderer: Server render capability, or *None* when unavailable.
        log: Optional event log for route-map, render and write events.

    """

    def __init__(
        self,
        config: WrenConfig,
        routes: Sequence[Route],
        renderer: RenderFunc | None = None,
        log: EventLog | None = None,
    ) -> None:
        self._config = config
        self._routes = routes
        self._log = log
        self._dispatcher = RenderDispatcher(
            ssr_enabled=config.ssr, renderer=renderer, log=log,
        )

    def compute_file(self, path: str) -> str:
        """Output file for a URL path under the configured suffix convention."""
        return html_path(path, html_suffix=self._config.html_suffix)

    def route_map(self) -> list[RouteMapEntry]:
        """Build the final route map without rendering or writing anything.

        Pipeline order:
            1. Add ``.html`` suffixes (if enabled)
            2. Alias the exact root route as ``/index.html``
            3. Map every exportable route to its output file
            4. Append entries for ``extra_paths`` matching dynamic routes

        """
        routes = patch_routes(self._routes, self._config)
        routes = inject_root_alias(routes)
        entries = build_route_map(routes, self.compute_file)
        return list(extend_route_map(
            entries, self._config.extra_paths, self.compute_file, log=self._log,
        ))

    def export(self) -> ExportResult:
        """Run the full export pipeline in a fresh event loop.

        Use :meth:`export_async` when an event loop is already running.

        Raises:
            ExportError: If the template is missing, a file cannot be written,
                or an event loop is already running in this thread.
            Exception: Whatever the server renderer raised for a page.

        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.export_async())
        msg = "export() cannot run inside a running event loop; await export_async() instead"
        raise ExportError(msg)

    async def export_async(self) -> ExportResult:
        """Run the full export pipeline and return the result.

        Raises:
            ExportError: If the template is missing or a file cannot be written.
            Exception: Whatever the server renderer raised for a page.

        """
        start = time.perf_counter()
        output_dir = self._config.output_path
        template = self._read_template()

        entries = self.route_map()
        pages = await self._render_all(entries, template)

        output_dir.mkdir(parents=True, exist_ok=True)
        files: list[ExportedFile] = []
        for entry, html in zip(entries, pages, strict=True):
            filepath = output_dir / entry.file
            rendered = self._dispatcher.will_render(entry.route)
            size = self._write_html(filepath, html)
            files.append(ExportedFile(
                source_path=entry.route.path or "/",
                output_path=filepath,
                rendered=rendered,
                size_bytes=size,
            ))
            if self._log is not None:
                self._log.append(FileExported(
                    path=entry.route.path or "/",
                    file=entry.file,
                    size_bytes=size,
                    rendered=rendered,
                    timestamp_ns=now_ns(),
                ))

        elapsed = (time.perf_counter() - start) * 1000
        return ExportResult(
            files=tuple(files),
            total_pages=len(files),
            total_rendered=sum(1 for f in files if f.rendered),
            duration_ms=elapsed,
            output_dir=output_dir,
        )

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    async def _render_all(self, entries: Sequence[RouteMapEntry], template: str) -> list[str]:
        """Render every entry concurrently; results keep route-map order.

        Async renderers overlap.  A sync renderer runs on the event loop, so
        its pages render one after another in route-map order.

        Every outcome is collected before anything is raised; the failure of
        the earliest entry in route-map order then propagates unchanged.
        Log lines from concurrent renders may interleave in any order.
        """
        outcomes = await asyncio.gather(
            *(self._dispatcher.render(entry.route, template) for entry in entries),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return list(outcomes)

    def _read_template(self) -> str:
        path = self._config.template_path
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read HTML template {path}: {exc}"
            raise ExportError(msg) from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _write_html(filepath: Path, html: str) -> int:
        """Write HTML content to a file, creating parent dirs as needed.

        Returns the size in bytes of the written file.

        Raises:
            ExportError: If the file cannot be written.

        """
        data = html.encode("utf-8")
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            filepath.write_bytes(data)
        except OSError as exc:
            msg = f"Failed to write {filepath}: {exc}"
            raise ExportError(msg) from exc
        return len(data)
