"""Visual Studio solution file model, parser and writer."""

from slnadd.solution.loader import find_solution_file, load_solution
from slnadd.solution.models import (
    SOLUTION_FOLDER_TYPE_GUID,
    FolderNode,
    FolderTree,
    GlobalSection,
    SolutionFile,
    SolutionProject,
)
from slnadd.solution.parser import parse_solution, read_solution
from slnadd.solution.writer import render_solution, write_solution

__all__ = [
    "SOLUTION_FOLDER_TYPE_GUID",
    "FolderNode",
    "FolderTree",
    "GlobalSection",
    "SolutionFile",
    "SolutionProject",
    "find_solution_file",
    "load_solution",
    "parse_solution",
    "read_solution",
    "render_solution",
    "write_solution",
]
