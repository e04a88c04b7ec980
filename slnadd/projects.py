"""Validate project arguments and resolve them to project files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Mapping

from slnadd.errors import INPUT_002, INPUT_003, INPUT_004, INPUT_005, ProjectPathError

logger = logging.getLogger(__name__)

PROJECT_PATTERN = "*.*proj"


def ensure_paths_exist(paths: Iterable[Path]) -> None:
    for path in paths:
        if not Path(path).exists():
            raise ProjectPathError(INPUT_002, f"Could not find project or directory `{path}`.")


def resolve_project_file(directory: Path) -> Path:
    """Return the single project file inside ``directory``."""
    candidates = sorted(candidate for candidate in directory.glob(PROJECT_PATTERN) if candidate.is_file())
    if not candidates:
        raise ProjectPathError(INPUT_003, f"Could not find any project in `{directory}`.")
    if len(candidates) > 1:
        raise ProjectPathError(INPUT_004, f"Found more than one project in `{directory}`. Specify which one to use.")
    return candidates[0]


def project_type_guid(project_path: Path, project_types: Mapping[str, str]) -> str:
    type_guid = project_types.get(project_path.suffix.lower())
    if type_guid is None:
        raise ProjectPathError(
            INPUT_005,
            f"Project `{project_path}` has an unknown project type and cannot be added to the solution file.",
        )
    return type_guid


def resolve_project_paths(paths: Iterable[Path], project_types: Mapping[str, str]) -> list[tuple[Path, str]]:
    """Turn project or directory arguments into absolute project files and their type GUIDs, in input order."""
    paths = [Path(path) for path in paths]
    ensure_paths_exist(paths)
    resolved: list[tuple[Path, str]] = []
    for path in paths:
        full_path = Path(os.path.abspath(path))
        if full_path.is_dir():
            full_path = resolve_project_file(full_path)
            logger.debug("Resolved directory %s to %s", path, full_path)
        resolved.append((full_path, project_type_guid(full_path, project_types)))
    return resolved
