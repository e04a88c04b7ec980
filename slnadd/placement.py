"""Solution folder placement for projects being added to a solution."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class InRoot:
    """Every project goes to the solution root."""


@dataclass(frozen=True)
class FixedFolders:
    """Every project goes under the same explicit folder path."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class Inferred:
    """Folders are derived from each project's location under the solution directory."""


Placement = Union[InRoot, FixedFolders, Inferred]


def split_solution_folder(value: str) -> tuple[str, ...]:
    """Split a user supplied folder path such as ``src/libs`` into folder names."""
    return tuple(part for part in _SEPARATORS.split(value) if part)


def infer_solution_folders(base_directory: Path, full_project_path: Path, placement: Placement) -> list[str]:
    """Return the solution folder names a project should be nested under.

    An empty list places the project at the solution root.
    """
    if isinstance(placement, InRoot):
        return []
    if isinstance(placement, FixedFolders):
        return list(placement.names)
    try:
        relative_path = os.path.relpath(full_project_path, base_directory)
    except ValueError:
        # different drives on Windows
        return []
    return solution_folders_from_relative_path(relative_path)


def solution_folders_from_relative_path(relative_path: str) -> list[str]:
    """Derive folder names from a project path relative to the solution directory.

    The project file and the directory holding it are dropped, so
    ``src/Lib/Lib.csproj`` yields ``["src"]``. Paths that leave the solution
    directory tree yield no folders.
    """
    if os.altsep:
        relative_path = relative_path.replace(os.altsep, os.sep)
    parts = [part for part in relative_path.split(os.sep) if part]
    if parts and parts[0] == os.pardir:
        # TODO: decide whether projects outside the solution tree should be rejected instead
        return []
    if parts and parts[0] == os.curdir:
        parts = parts[1:]
    # file name, then the project's own directory
    return parts[:-2]
