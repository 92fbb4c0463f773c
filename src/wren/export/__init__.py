"""Export layer — static output generation.

Writes one HTML file per exportable route of a single-page application,
optionally filled with server-side rendered markup.
"""

from wren.export.static import ExportedFile, ExportResult, StaticExporter

__all__ = ["ExportedFile", "ExportResult", "StaticExporter"]
