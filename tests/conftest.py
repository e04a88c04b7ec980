from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

APP_GUID = "{7072A694-548F-4CAE-A58F-12D257D5F486}"

SAMPLE_SLN = (
    "\ufeff\r\n"
    "Microsoft Visual Studio Solution File, Format Version 12.00\r\n"
    "# Visual Studio 15\r\n"
    "VisualStudioVersion = 15.0.26124.0\r\n"
    "MinimumVisualStudioVersion = 15.0.26124.0\r\n"
    'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "App\\App.csproj", "' + APP_GUID + '"\r\n'
    "EndProject\r\n"
    "Global\r\n"
    "\tGlobalSection(SolutionConfigurationPlatforms) = preSolution\r\n"
    "\t\tDebug|Any CPU = Debug|Any CPU\r\n"
    "\t\tRelease|Any CPU = Release|Any CPU\r\n"
    "\tEndGlobalSection\r\n"
    "\tGlobalSection(ProjectConfigurationPlatforms) = postSolution\r\n"
    "\t\t" + APP_GUID + ".Debug|Any CPU.ActiveCfg = Debug|Any CPU\r\n"
    "\t\t" + APP_GUID + ".Debug|Any CPU.Build.0 = Debug|Any CPU\r\n"
    "\t\t" + APP_GUID + ".Release|Any CPU.ActiveCfg = Release|Any CPU\r\n"
    "\t\t" + APP_GUID + ".Release|Any CPU.Build.0 = Release|Any CPU\r\n"
    "\tEndGlobalSection\r\n"
    "\tGlobalSection(SolutionProperties) = preSolution\r\n"
    "\t\tHideSolutionNode = FALSE\r\n"
    "\tEndGlobalSection\r\n"
    "EndGlobal\r\n"
)

EMPTY_SLN = (
    "\n"
    "Microsoft Visual Studio Solution File, Format Version 12.00\n"
    "# Visual Studio 15\n"
    "VisualStudioVersion = 15.0.26124.0\n"
    "MinimumVisualStudioVersion = 15.0.26124.0\n"
    "Global\n"
    "\tGlobalSection(SolutionProperties) = preSolution\n"
    "\t\tHideSolutionNode = FALSE\n"
    "\tEndGlobalSection\n"
    "EndGlobal\n"
)


@pytest.fixture
def make_project() -> Callable[[Path, str], Path]:
    def _make(root: Path, relative_path: str) -> Path:
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('<Project Sdk="Microsoft.NET.Sdk" />\n', encoding="utf-8")
        return path

    return _make


@pytest.fixture
def repo(tmp_path: Path, make_project: Callable[[Path, str], Path]) -> Path:
    """A solution directory holding ``Repo.sln`` with one project, ``App``."""
    root = tmp_path / "repo"
    root.mkdir()
    (root / "Repo.sln").write_bytes(SAMPLE_SLN.encode("utf-8"))
    make_project(root, "App/App.csproj")
    return root


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    root = tmp_path / "empty"
    root.mkdir()
    (root / "Empty.sln").write_text(EMPTY_SLN, encoding="utf-8")
    return root
