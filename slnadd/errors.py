"""Error codes for slnadd."""

from __future__ import annotations

CONFIG_001 = "CONFIG_001"  # --in-root and --solution-folder both given
CONFIG_002 = "CONFIG_002"  # Config file not found
CONFIG_003 = "CONFIG_003"  # Invalid config
INPUT_001 = "INPUT_001"  # No projects supplied
INPUT_002 = "INPUT_002"  # Project or directory does not exist
INPUT_003 = "INPUT_003"  # Directory holds no project file
INPUT_004 = "INPUT_004"  # Directory holds more than one project file
INPUT_005 = "INPUT_005"  # Unsupported project type
SLN_001 = "SLN_001"  # Solution file not found
SLN_002 = "SLN_002"  # More than one solution file in directory
SLN_003 = "SLN_003"  # Solution file could not be read or parsed
SLN_004 = "SLN_004"  # Solution file could not be written


class SlnAddError(RuntimeError):
    """Base exception for all slnadd errors."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class ConfigError(SlnAddError):
    pass


class SolutionError(SlnAddError):
    pass


class ProjectPathError(SlnAddError):
    pass
