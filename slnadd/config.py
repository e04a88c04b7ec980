"""Configuration management for slnadd."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from slnadd.errors import CONFIG_001, CONFIG_002, CONFIG_003, ConfigError
from slnadd.placement import FixedFolders, Inferred, InRoot, Placement, split_solution_folder

DEFAULT_CONFIG_FILENAME = "slnadd.yaml"

CSHARP_PROJECT_GUID = "{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}"
FSHARP_PROJECT_GUID = "{F2A71F9B-5D33-465A-A702-920D77279786}"
VB_PROJECT_GUID = "{F184B08F-C81C-45F6-A57F-5ABD9991F28F}"
SQL_PROJECT_GUID = "{00D1A9C2-B5F0-4AF3-8072-F6C62B433612}"


def _default_project_types() -> dict[str, str]:
    return {
        ".csproj": CSHARP_PROJECT_GUID,
        ".fsproj": FSHARP_PROJECT_GUID,
        ".vbproj": VB_PROJECT_GUID,
        ".sqlproj": SQL_PROJECT_GUID,
        ".proj": CSHARP_PROJECT_GUID,
    }


class PlacementConfig(BaseModel):
    in_root: bool = False
    solution_folder: str | None = None


class SlnAddConfig(BaseModel):
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    project_types: dict[str, str] = Field(default_factory=_default_project_types)
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None, overrides: dict[str, Any] | None = None) -> SlnAddConfig:
    resolved_path = _resolve_config_path(config_path)
    data: dict[str, Any] = {}
    if resolved_path is not None:
        data = _load_yaml(resolved_path)
    if overrides:
        data = _deep_update(data, overrides)
    try:
        config = SlnAddConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(CONFIG_003, str(exc)) from exc
    return _normalize_project_types(config)


def serialize_config(config: SlnAddConfig) -> dict[str, Any]:
    return config.model_dump(mode="json")


def placement_from_config(config: SlnAddConfig) -> Placement:
    """Build the placement mode, rejecting mutually exclusive options."""
    in_root = config.placement.in_root
    solution_folder = config.placement.solution_folder
    if in_root and solution_folder:
        raise ConfigError(
            CONFIG_001,
            "The --solution-folder and --in-root options cannot be used together; use only one of the options.",
        )
    if in_root:
        return InRoot()
    if solution_folder:
        return FixedFolders(split_solution_folder(solution_folder))
    return Inferred()


def _resolve_config_path(config_path: Path | None) -> Path | None:
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(CONFIG_002, f"Config file not found: {config_path}")
        return config_path
    default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return default_path if default_path.exists() else None


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(CONFIG_003, f"Failed to read config file: {path}") from exc
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(CONFIG_003, f"Invalid YAML in config file: {path}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(CONFIG_003, "Config file must define a mapping.")
    return data


def _deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = value
    return merged


def _normalize_project_types(config: SlnAddConfig) -> SlnAddConfig:
    project_types: dict[str, str] = {}
    for extension, type_guid in config.project_types.items():
        key = extension.lower()
        if not key.startswith("."):
            key = f".{key}"
        guid = type_guid.strip().upper()
        if not guid.startswith("{"):
            guid = f"{{{guid}}}"
        project_types[key] = guid
    return config.model_copy(update={"project_types": project_types})
