"""Wren configuration.

WrenConfig is the central configuration object, frozen after creation.
ExportStaticConfig holds the ``export_static`` section that drives the
route-to-static-path pipeline.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ExportStaticConfig:
    """Options for static export of a single-page application.

    Attributes:
        html_suffix: Rewrite route patterns so pages are exported as
            ``about.html`` instead of ``about/index.html``.
        dynamic_root: Deploy the site under an arbitrary sub-path; turns on
            runtime-relative public asset paths in the host build.
        extra_paths: Concrete URL paths (e.g. ``/blog/1``) to export for
            dynamic routes that would otherwise have no output file.

    """

    html_suffix: bool = False
    dynamic_root: bool = False
    extra_paths: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class WrenConfig:
    """Configuration for a wren build.

    Attributes:
        root: Path to the project root. Always resolved to an absolute path
              on construction.
        output: Output directory for static export.
        template: HTML template every page starts from, relative to root.
        ssr: Enable server-side rendering of exported pages.
        server_entry: File name of the server render artifact, relative to
            the output directory.
        public_path: Public asset path used by the host build.
        export_static: Static export options, or *None* when static export
            is not configured.

    """

    root: Path = field(default_factory=Path.cwd)
    output: Path = field(default_factory=lambda: Path("dist"))
    template: str = "index.html"
    ssr: bool = False
    server_entry: str = "server.py"
    public_path: str = "/"
    export_static: ExportStaticConfig | None = None

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output

    @property
    def template_path(self) -> Path:
        """Absolute path to the HTML template."""
        return self.root / self.template

    @property
    def server_path(self) -> Path:
        """Absolute path where the server render artifact is expected."""
        return self.output_path / self.server_entry

    @property
    def html_suffix(self) -> bool:
        return self.export_static is not None and self.export_static.html_suffix

    @property
    def extra_paths(self) -> tuple[str, ...]:
        if self.export_static is None:
            return ()
        return self.export_static.extra_paths

    @property
    def runtime_public_path(self) -> bool:
        """True when assets must resolve relative to the runtime location."""
        return self.export_static is not None and self.export_static.dynamic_root


def apply_build_config(config: WrenConfig, build: Mapping[str, object]) -> dict[str, object]:
    """Return a copy of the host build settings adjusted for static export.

    ``dynamic_root`` forces ``runtimePublicPath`` on, since pages may be
    served from any sub-path.  The input mapping is left untouched.
    """
    result = dict(build)
    if config.runtime_public_path:
        result["runtimePublicPath"] = True
    return result
