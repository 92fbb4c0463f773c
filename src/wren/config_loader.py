"""Load WrenConfig from wren.yaml / wren.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from wren._errors import ConfigError
from wren.config import ExportStaticConfig, WrenConfig

_CONFIG_KEYS = frozenset({
    "output", "template", "ssr", "server_entry", "public_path", "export_static",
})

# camelCase spellings accepted for export_static options
_EXPORT_STATIC_ALIASES: dict[str, str] = {
    "htmlSuffix": "html_suffix",
    "dynamicRoot": "dynamic_root",
    "extraPaths": "extra_paths",
}


def load_config(root: Path, **overrides: object) -> WrenConfig:
    """Load WrenConfig from root, optionally merging wren.yaml.

    Looks for wren.yaml, wren.yml, or wren.toml in root. If found, loads
    and merges with overrides. Overrides take precedence; an
    ``export_static`` override is merged key by key into the file section.

    Raises:
        ConfigError: If the config file cannot be parsed or a value has the
            wrong type.

    """
    file_config = read_config_file(root)
    settings = {k: v for k, v in file_config.items() if k in _CONFIG_KEYS}

    static_override = overrides.pop("export_static", None)
    merged = {**settings, **{k: v for k, v in overrides.items() if v is not None}}

    static_section = merged.pop("export_static", None)
    if static_override is not None:
        base = _canonical_keys(static_section) if isinstance(static_section, dict) else {}
        static_section = {**base, **_canonical_keys(dict(static_override))}  # type: ignore[call-overload]
    merged["export_static"] = parse_export_static(static_section)

    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "ssr" in merged and not isinstance(merged["ssr"], bool):
        msg = f"'ssr' must be a boolean, got {type(merged['ssr']).__name__}"
        raise ConfigError(msg)
    return WrenConfig(root=root, **merged)  # type: ignore[arg-type]


def parse_export_static(section: object) -> ExportStaticConfig | None:
    """Validate an ``export_static`` section and build its config object.

    ``True`` or an empty mapping enables static export with defaults;
    ``None`` or ``False`` disables it.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.

    """
    if section is None or section is False:
        return None
    if section is True:
        return ExportStaticConfig()
    if not isinstance(section, dict):
        msg = f"'export_static' must be a mapping or boolean, got {type(section).__name__}"
        raise ConfigError(msg)

    options = _canonical_keys(section)
    for key in options:
        if key not in ("html_suffix", "dynamic_root", "extra_paths"):
            msg = f"Unknown export_static option {key!r}"
            raise ConfigError(msg)

    for name in ("html_suffix", "dynamic_root"):
        if name in options and not isinstance(options[name], bool):
            msg = f"export_static.{name} must be a boolean, got {type(options[name]).__name__}"
            raise ConfigError(msg)

    extra = options.get("extra_paths", ())
    if extra is None:
        extra = ()
    if not isinstance(extra, (list, tuple)) or not all(isinstance(p, str) for p in extra):
        msg = "export_static.extra_paths must be a list of strings"
        raise ConfigError(msg)
    options["extra_paths"] = tuple(extra)

    return ExportStaticConfig(**options)  # type: ignore[arg-type]


def _canonical_keys(section: dict[str, object]) -> dict[str, object]:
    return {_EXPORT_STATIC_ALIASES.get(k, k): v for k, v in section.items()}


def read_config_file(root: Path) -> dict[str, object]:
    """Read wren config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("wren.yaml", "wren.yml"):
        path = root / name
        if path.is_file():
            return _flatten_wren_section(_parse_yaml(path))
    toml_path = root / "wren.toml"
    if toml_path.is_file():
        return _flatten_wren_section(_parse_toml(toml_path))
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return data


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse {path}: {exc}"
        raise ConfigError(msg) from exc


def _flatten_wren_section(data: dict[str, object]) -> dict[str, object]:
    """Extract wren.* keys into top-level config."""
    result: dict[str, object] = {}
    wren = data.get("wren")
    if isinstance(wren, dict):
        result.update(wren)
    for k, v in data.items():
        if k != "wren":
            result.setdefault(k, v)
    if "exportStatic" in result and "export_static" not in result:
        result["export_static"] = result.pop("exportStatic")
    return result
