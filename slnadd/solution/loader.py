"""Locate and load a solution from a file or a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from slnadd.errors import SLN_001, SLN_002, SolutionError
from slnadd.solution.models import SolutionFile
from slnadd.solution.parser import read_solution

logger = logging.getLogger(__name__)

SOLUTION_PATTERN = "*.sln"


def find_solution_file(file_or_directory: Path) -> Path:
    path = Path(file_or_directory)
    if path.is_file():
        return Path(os.path.abspath(path))
    if not path.is_dir():
        raise SolutionError(
            SLN_001,
            f"Specified solution file {path} does not exist, or there is no solution file in the directory.",
        )
    candidates = sorted(candidate for candidate in path.glob(SOLUTION_PATTERN) if candidate.is_file())
    if not candidates:
        raise SolutionError(
            SLN_001,
            f"Specified solution file {path} does not exist, or there is no solution file in the directory.",
        )
    if len(candidates) > 1:
        raise SolutionError(SLN_002, f"Found more than one solution file in {path}. Specify which one to use.")
    return Path(os.path.abspath(candidates[0]))


def load_solution(file_or_directory: Path) -> SolutionFile:
    """Load the solution at ``file_or_directory``.

    A directory must contain exactly one ``.sln`` file.
    """
    solution_path = find_solution_file(file_or_directory)
    logger.debug("Loading solution %s", solution_path)
    return read_solution(solution_path)
