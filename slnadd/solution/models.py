"""In-memory model of a Visual Studio solution file."""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

SOLUTION_FOLDER_TYPE_GUID = "{2150E333-8FDC-42A3-9474-1A3956D46DE8}"
NESTED_PROJECTS = "NestedProjects"
SOLUTION_CONFIGURATION_PLATFORMS = "SolutionConfigurationPlatforms"
PROJECT_CONFIGURATION_PLATFORMS = "ProjectConfigurationPlatforms"
PROJECT_PLATFORM = "Any CPU"


def new_guid() -> str:
    return "{" + str(uuid.uuid4()).upper() + "}"


def project_key(full_path: str | Path) -> str:
    """Identity of a project: its normalized full path, compared case-insensitively."""
    return os.path.normpath(os.fspath(full_path)).casefold()


@dataclass
class SolutionProject:
    """A ``Project(...) ... EndProject`` block.

    Solution folders are projects too, distinguished by their type GUID.
    Lines between the header and ``EndProject`` are kept verbatim in ``body``.
    """

    type_guid: str
    name: str
    file_path: str
    guid: str
    body: list[str] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        return self.type_guid.upper() == SOLUTION_FOLDER_TYPE_GUID


@dataclass
class GlobalSection:
    name: str
    position: str
    entries: list[tuple[str, str]] = field(default_factory=list)

    def add(self, key: str, value: str) -> None:
        self.entries.append((key, value))

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]


@dataclass
class FolderNode:
    name: str
    guid: str
    parent: int | None
    children: dict[str, int] = field(default_factory=dict)


class FolderTree:
    """Arena of solution folders.

    Nodes are addressed by index; children map a folder name to the child
    index in first-seen order, so a name appears at most once per level.
    """

    def __init__(self) -> None:
        self._nodes: list[FolderNode] = []
        self._roots: dict[str, int] = {}

    @classmethod
    def from_projects(cls, projects: Sequence[SolutionProject], nested: GlobalSection | None) -> FolderTree:
        tree = cls()
        index_by_guid: dict[str, int] = {}
        folders = [project for project in projects if project.is_folder]
        for folder in folders:
            index = len(tree._nodes)
            tree._nodes.append(FolderNode(name=folder.name, guid=folder.guid, parent=None))
            index_by_guid[folder.guid.upper()] = index
        parents: dict[str, str] = {}
        if nested is not None:
            parents = {child.upper(): parent.upper() for child, parent in nested.entries}
        for folder in folders:
            index = index_by_guid[folder.guid.upper()]
            parent = index_by_guid.get(parents.get(folder.guid.upper(), ""))
            tree._nodes[index].parent = parent
            siblings = tree._roots if parent is None else tree._nodes[parent].children
            siblings.setdefault(folder.name, index)
        return tree

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, index: int) -> FolderNode:
        return self._nodes[index]

    def child(self, parent: int | None, name: str) -> int | None:
        siblings = self._roots if parent is None else self._nodes[parent].children
        return siblings.get(name)

    def add(self, name: str, guid: str, parent: int | None) -> int:
        siblings = self._roots if parent is None else self._nodes[parent].children
        if name in siblings:
            raise ValueError(f"Folder {name!r} already exists at this level")
        index = len(self._nodes)
        self._nodes.append(FolderNode(name=name, guid=guid, parent=parent))
        siblings[name] = index
        return index

    def path_of(self, index: int) -> tuple[str, ...]:
        names: list[str] = []
        current: int | None = index
        while current is not None:
            node = self._nodes[current]
            names.append(node.name)
            current = node.parent
        return tuple(reversed(names))


@dataclass
class SolutionFile:
    path: Path
    header: list[str] = field(default_factory=list)
    projects: list[SolutionProject] = field(default_factory=list)
    global_sections: list[GlobalSection] = field(default_factory=list)
    trailer: list[str] = field(default_factory=list)
    newline: str = "\r\n"
    has_bom: bool = True
    folders: FolderTree = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(os.path.abspath(self.path))
        self.folders = FolderTree.from_projects(self.projects, self.section(NESTED_PROJECTS))

    @property
    def base_directory(self) -> Path:
        return self.path.parent

    @property
    def project_count(self) -> int:
        return len(self.projects)

    def section(self, name: str) -> GlobalSection | None:
        for section in self.global_sections:
            if section.name == name:
                return section
        return None

    def ensure_section(self, name: str, position: str) -> GlobalSection:
        section = self.section(name)
        if section is None:
            section = GlobalSection(name=name, position=position)
            self.global_sections.append(section)
        return section

    def full_path_of(self, project: SolutionProject) -> Path:
        relative = project.file_path.replace("\\", os.sep).replace("/", os.sep)
        return Path(os.path.normpath(self.base_directory / relative))

    def relative_path_of(self, full_project_path: str | Path) -> str:
        try:
            relative = os.path.relpath(full_project_path, self.base_directory)
        except ValueError:
            # different drives on Windows; keep the absolute path
            relative = os.fspath(full_project_path)
        return relative.replace(os.sep, "\\")

    def find_project(self, full_project_path: str | Path) -> SolutionProject | None:
        key = project_key(full_project_path)
        for project in self.projects:
            if not project.is_folder and project_key(self.full_path_of(project)) == key:
                return project
        return None

    def ensure_folder_path(self, names: Sequence[str]) -> str | None:
        """Return the GUID of the folder at ``names``, creating missing levels.

        An empty sequence means the solution root and returns ``None``.
        """
        current: int | None = None
        for name in names:
            existing = self.folders.child(current, name)
            if existing is None:
                existing = self._add_folder(name, current)
            current = existing
        if current is None:
            return None
        return self.folders.node(current).guid

    def add_project(self, full_project_path: str | Path, type_guid: str, folder_guid: str | None) -> SolutionProject:
        full_path = Path(full_project_path)
        project = SolutionProject(
            type_guid=type_guid,
            name=full_path.stem,
            file_path=self.relative_path_of(full_path),
            guid=new_guid(),
        )
        self.projects.append(project)
        if folder_guid is not None:
            self.ensure_section(NESTED_PROJECTS, "preSolution").add(project.guid, folder_guid)
        self._add_configurations(project)
        return project

    def write(self) -> None:
        from slnadd.solution.writer import write_solution

        write_solution(self)

    def _add_folder(self, name: str, parent: int | None) -> int:
        folder = SolutionProject(
            type_guid=SOLUTION_FOLDER_TYPE_GUID,
            name=name,
            file_path=name,
            guid=new_guid(),
        )
        self.projects.append(folder)
        index = self.folders.add(name, folder.guid, parent)
        if parent is not None:
            parent_guid = self.folders.node(parent).guid
            self.ensure_section(NESTED_PROJECTS, "preSolution").add(folder.guid, parent_guid)
        logger.debug("Created solution folder %s", "/".join(self.folders.path_of(index)))
        return index

    def _add_configurations(self, project: SolutionProject) -> None:
        solution_configurations = self.section(SOLUTION_CONFIGURATION_PLATFORMS)
        if solution_configurations is None or not solution_configurations.entries:
            return
        target = self.ensure_section(PROJECT_CONFIGURATION_PLATFORMS, "postSolution")
        for configuration in solution_configurations.keys():
            build_type = configuration.split("|", 1)[0]
            value = f"{build_type}|{PROJECT_PLATFORM}"
            target.add(f"{project.guid}.{configuration}.ActiveCfg", value)
            target.add(f"{project.guid}.{configuration}.Build.0", value)
