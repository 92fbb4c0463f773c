"""Tests for wren.config."""

from pathlib import Path

import pytest

from wren.config import ExportStaticConfig, WrenConfig, apply_build_config


class TestExportStaticConfig:
    """ExportStaticConfig — frozen, everything off by default."""

    def test_defaults(self) -> None:
        config = ExportStaticConfig()
        assert config.html_suffix is False
        assert config.dynamic_root is False
        assert config.extra_paths == ()

    def test_frozen(self) -> None:
        config = ExportStaticConfig()
        with pytest.raises(AttributeError):
            config.html_suffix = True  # type: ignore[misc]


class TestWrenConfig:
    """WrenConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = WrenConfig()
        assert config.template == "index.html"
        assert config.ssr is False
        assert config.server_entry == "server.py"
        assert config.public_path == "/"
        assert config.export_static is None

    def test_frozen(self) -> None:
        config = WrenConfig()
        with pytest.raises(AttributeError):
            config.ssr = True  # type: ignore[misc]

    def test_paths_resolve_from_root(self, tmp_path: Path) -> None:
        config = WrenConfig(root=tmp_path)
        assert config.output_path == tmp_path / "dist"
        assert config.template_path == tmp_path / "index.html"
        assert config.server_path == tmp_path / "dist" / "server.py"

    def test_absolute_output_preserved(self, tmp_path: Path) -> None:
        output = tmp_path / "elsewhere"
        config = WrenConfig(root=tmp_path / "site", output=output)
        assert config.output_path == output
        assert config.server_path == output / "server.py"

    def test_relative_root_resolved_to_absolute(self) -> None:
        config = WrenConfig(root=Path("site"))
        assert config.root.is_absolute()

    def test_static_options_without_section(self) -> None:
        config = WrenConfig()
        assert config.html_suffix is False
        assert config.extra_paths == ()
        assert config.runtime_public_path is False

    def test_static_options_from_section(self) -> None:
        config = WrenConfig(export_static=ExportStaticConfig(
            html_suffix=True, dynamic_root=True, extra_paths=("/a",),
        ))
        assert config.html_suffix is True
        assert config.extra_paths == ("/a",)
        assert config.runtime_public_path is True


class TestApplyBuildConfig:
    """apply_build_config — dynamic_root turns on runtimePublicPath."""

    def test_dynamic_root_sets_runtime_public_path(self) -> None:
        config = WrenConfig(export_static=ExportStaticConfig(dynamic_root=True))
        build = {"publicPath": "/"}
        result = apply_build_config(config, build)
        assert result == {"publicPath": "/", "runtimePublicPath": True}
        assert build == {"publicPath": "/"}

    def test_without_dynamic_root_unchanged(self) -> None:
        config = WrenConfig(export_static=ExportStaticConfig())
        assert apply_build_config(config, {"publicPath": "/"}) == {"publicPath": "/"}
