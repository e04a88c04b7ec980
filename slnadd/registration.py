"""Add projects to a solution, nesting them under solution folders."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from slnadd.config import SlnAddConfig
from slnadd.errors import INPUT_001, ProjectPathError
from slnadd.placement import Placement, infer_solution_folders
from slnadd.projects import resolve_project_paths
from slnadd.results import RegistrationResult
from slnadd.solution import SolutionFile, load_solution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectEntry:
    """A project file paired with the solution folders it belongs under."""

    path: Path
    folders: tuple[str, ...]
    type_guid: str


def register(solution: SolutionFile, entries: Iterable[ProjectEntry]) -> RegistrationResult:
    """Add ``entries`` to ``solution`` in order and write it once if anything was added.

    Projects already in the solution are skipped without touching folders.
    """
    pre_add_count = solution.project_count
    added: list[str] = []
    skipped: list[str] = []
    for entry in entries:
        if solution.find_project(entry.path) is not None:
            relative_path = solution.relative_path_of(entry.path)
            logger.info("Solution %s already contains project %s", solution.path, relative_path)
            skipped.append(relative_path)
            continue
        folder_guid = solution.ensure_folder_path(entry.folders)
        project = solution.add_project(entry.path, entry.type_guid, folder_guid)
        logger.info("Added project %s under %s", project.file_path, "/".join(entry.folders) or "<root>")
        added.append(project.file_path)

    written = solution.project_count > pre_add_count
    if written:
        solution.write()
    else:
        logger.debug("No new projects for %s; leaving file untouched", solution.path)
    return RegistrationResult(solution_path=solution.path, added=added, skipped=skipped, written=written)


def add_projects(
    solution_path: Path,
    project_paths: Iterable[Path],
    placement: Placement,
    config: SlnAddConfig | None = None,
) -> RegistrationResult:
    """Load a solution, add the given projects or project directories, and save it.

    Every input is validated before the solution is modified, so a failure
    leaves the file on disk unchanged.
    """
    config = config or SlnAddConfig()
    project_paths = list(project_paths)
    if not project_paths:
        raise ProjectPathError(INPUT_001, "You must specify at least one project to add.")

    solution = load_solution(solution_path)
    resolved = resolve_project_paths(project_paths, config.project_types)
    entries = [
        ProjectEntry(
            path=full_path,
            folders=tuple(infer_solution_folders(solution.base_directory, full_path, placement)),
            type_guid=type_guid,
        )
        for full_path, type_guid in resolved
    ]
    return register(solution, entries)
