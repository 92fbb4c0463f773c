"""Wren error hierarchy.

All wren-specific errors inherit from WrenError for easy catching.
Render failures raised by a server renderer are not wrapped; they
propagate as-is so the build fails with the renderer's own traceback.
"""


class WrenError(Exception):
    """Base error for all wren operations."""


class ConfigError(WrenError):
    """Invalid or missing configuration (including route tables)."""


class ExportError(WrenError):
    """Error during static export."""
