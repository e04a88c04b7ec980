"""slnadd library package."""

from slnadd.config import SlnAddConfig, load_config, placement_from_config
from slnadd.errors import ConfigError, ProjectPathError, SlnAddError, SolutionError
from slnadd.placement import FixedFolders, Inferred, InRoot, Placement, infer_solution_folders
from slnadd.registration import ProjectEntry, add_projects, register
from slnadd.results import RegistrationResult
from slnadd.solution import SolutionFile, load_solution

__all__ = [
    "SlnAddConfig",
    "load_config",
    "placement_from_config",
    "ConfigError",
    "ProjectPathError",
    "SlnAddError",
    "SolutionError",
    "FixedFolders",
    "Inferred",
    "InRoot",
    "Placement",
    "infer_solution_folders",
    "ProjectEntry",
    "add_projects",
    "register",
    "RegistrationResult",
    "SolutionFile",
    "load_solution",
]
