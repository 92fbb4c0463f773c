"""Shared type definitions for wren."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

# Output file path relative to the export directory (e.g., "about/index.html")
OutputFile: TypeAlias = str

# Maps a concrete URL path to its output file (the ``computeFile`` convention)
ComputeFile: TypeAlias = Callable[[str], OutputFile]

# Server-side render capability: render(path, html_template) -> {"html": ...}
RenderFunc: TypeAlias = Callable[[str, str], Any | Awaitable[Any]]
