"""Parse Visual Studio ``.sln`` files (custom text format, not XML)."""

from __future__ import annotations

import re
from pathlib import Path

from slnadd.errors import SLN_003, SolutionError
from slnadd.solution.models import GlobalSection, SolutionFile, SolutionProject

BOM = "\ufeff"
FILE_HEADER = "Microsoft Visual Studio Solution File"

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
_PROJECT_RE = re.compile(
    r'^Project\("(?P<type>[^"]*)"\)\s*=\s*"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"(?P<guid>[^"]*)"\s*$'
)
_SECTION_RE = re.compile(r"^GlobalSection\((?P<name>[^)]+)\)\s*=\s*(?P<position>\S+)$")


def parse_solution(text: str, path: Path) -> SolutionFile:
    """Parse solution text into a :class:`SolutionFile`.

    Header lines, project bodies and anything after ``EndGlobal`` are kept
    verbatim so untouched content survives a round trip.
    """
    has_bom = text.startswith(BOM)
    if has_bom:
        text = text[len(BOM):]
    newline = "\r\n" if "\r\n" in text else "\n"
    lines = text.splitlines()

    header: list[str] = []
    projects: list[SolutionProject] = []
    sections: list[GlobalSection] = []
    trailer: list[str] = []

    index = 0
    while index < len(lines) and not _starts_body(lines[index]):
        header.append(lines[index])
        index += 1
    if not any(line.strip().startswith(FILE_HEADER) for line in header):
        raise SolutionError(SLN_003, f"Invalid solution file {path}: file header is missing.")

    while index < len(lines):
        line = lines[index]
        stripped = line.strip()
        if stripped.startswith("Project("):
            project, index = _parse_project(lines, index, path)
            projects.append(project)
        elif stripped == "Global":
            index = _parse_global(lines, index, path, sections)
            trailer = lines[index:]
            break
        elif stripped:
            raise SolutionError(SLN_003, f"Invalid format in line {index + 1} of {path}: {stripped}")
        index += 1

    return SolutionFile(
        path=path,
        header=header,
        projects=projects,
        global_sections=sections,
        trailer=trailer,
        newline=newline,
        has_bom=has_bom,
    )


def read_solution(path: Path) -> SolutionFile:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise SolutionError(SLN_003, f"Failed to read solution file: {path}") from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SolutionError(SLN_003, f"Solution file is not valid UTF-8: {path}") from exc
    return parse_solution(text, path)


def _starts_body(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("Project(") or stripped == "Global"


def _parse_project(lines: list[str], index: int, path: Path) -> tuple[SolutionProject, int]:
    match = _PROJECT_RE.match(lines[index].strip())
    if match is None:
        raise SolutionError(SLN_003, f"Invalid format in line {index + 1} of {path}: project section is malformed.")
    body: list[str] = []
    start = index
    index += 1
    while index < len(lines):
        if lines[index].strip() == "EndProject":
            project = SolutionProject(
                type_guid=match.group("type"),
                name=match.group("name"),
                file_path=match.group("path"),
                guid=match.group("guid"),
                body=body,
            )
            return project, index
        body.append(lines[index])
        index += 1
    raise SolutionError(SLN_003, f"Invalid format in line {start + 1} of {path}: project section is missing EndProject.")


def _parse_global(lines: list[str], index: int, path: Path, sections: list[GlobalSection]) -> int:
    start = index
    index += 1
    while index < len(lines):
        stripped = lines[index].strip()
        if stripped == "EndGlobal":
            return index + 1
        if stripped.startswith("GlobalSection("):
            section, index = _parse_section(lines, index, path)
            sections.append(section)
        elif stripped:
            raise SolutionError(SLN_003, f"Invalid format in line {index + 1} of {path}: {stripped}")
        index += 1
    raise SolutionError(SLN_003, f"Invalid format in line {start + 1} of {path}: Global is missing EndGlobal.")


def _parse_section(lines: list[str], index: int, path: Path) -> tuple[GlobalSection, int]:
    match = _SECTION_RE.match(lines[index].strip())
    if match is None:
        raise SolutionError(SLN_003, f"Invalid format in line {index + 1} of {path}: global section is malformed.")
    section = GlobalSection(name=match.group("name"), position=match.group("position"))
    start = index
    index += 1
    while index < len(lines):
        stripped = lines[index].strip()
        if stripped == "EndGlobalSection":
            return section, index
        if stripped:
            key, sep, value = stripped.partition("=")
            if not sep:
                raise SolutionError(SLN_003, f"Invalid format in line {index + 1} of {path}: expected 'key = value'.")
            section.add(key.strip(), value.strip())
        index += 1
    raise SolutionError(SLN_003, f"Invalid format in line {start + 1} of {path}: section is missing EndGlobalSection.")
