"""Converter settings and the loader for YAML/JSON settings files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping

import yaml

DEFAULT_TOOL_NAME = "Infer"


class ConfigError(RuntimeError):
    """Raised when converter settings cannot be loaded or are invalid."""


@dataclass(frozen=True, slots=True)
class ConverterSettings:
    """Options fixed for the lifetime of a converter."""

    project_root: Path
    compute_hashes: bool = False
    tool_name: str = DEFAULT_TOOL_NAME
    mime_types: Mapping[str, str] = field(default_factory=dict)


def load_settings(
    path: Path | str | None = None,
    *,
    project_root: Path | str | None = None,
    compute_hashes: bool | None = None,
    tool_name: str | None = None,
) -> ConverterSettings:
    """Build settings from an optional settings file plus explicit overrides.

    Overrides that are ``None`` leave the file value (or the default) in place.
    A relative ``project_root`` from the file is taken relative to the file.
    """

    values: MutableMapping[str, Any] = {}
    base_dir = Path.cwd()
    if path is not None:
        settings_path = Path(path)
        values.update(_load_settings_file(settings_path))
        base_dir = settings_path.resolve().parent

    root_value = project_root if project_root is not None else values.get("project_root")
    if root_value is None:
        root = Path.cwd()
    elif isinstance(root_value, (str, Path)):
        root = Path(root_value)
        if project_root is None and not root.is_absolute():
            root = base_dir / root
    else:
        raise ConfigError("project_root must be a string path")

    hashes_value = compute_hashes if compute_hashes is not None else values.get("compute_hashes", False)
    if not isinstance(hashes_value, bool):
        raise ConfigError("compute_hashes must be a boolean")

    name_value = tool_name if tool_name is not None else values.get("tool_name", DEFAULT_TOOL_NAME)
    if not isinstance(name_value, str) or not name_value.strip():
        raise ConfigError("tool_name must be a non-empty string")

    return ConverterSettings(
        project_root=root.resolve(),
        compute_hashes=hashes_value,
        tool_name=name_value.strip(),
        mime_types=_normalize_mime_types(values.get("mime_types")),
    )


def _load_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
        raise ConfigError(f"Failed to read settings file {path}") from exc

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file {path}") from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"Settings file must be a mapping: {path}")

    return dict(data)


def _normalize_mime_types(raw: object) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError("mime_types must map file extensions to MIME types")

    mime_types: Dict[str, str] = {}
    for extension, mime_type in raw.items():
        if not isinstance(extension, str) or not isinstance(mime_type, str):
            raise ConfigError("mime_types must map file extensions to MIME types")
        extension = extension.strip().lower()
        if not extension.startswith("."):
            extension = f".{extension}"
        mime_types[extension] = mime_type.strip()
    return mime_types


__all__ = ["ConfigError", "ConverterSettings", "DEFAULT_TOOL_NAME", "load_settings"]
