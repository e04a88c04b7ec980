"""Serialize a :class:`SolutionFile` back to ``.sln`` text."""

from __future__ import annotations

import logging
import os
import stat
import tempfile

from slnadd.errors import SLN_004, SolutionError
from slnadd.solution.models import SolutionFile

logger = logging.getLogger(__name__)


def render_solution(solution: SolutionFile) -> str:
    lines = list(solution.header)
    for project in solution.projects:
        lines.append(
            f'Project("{project.type_guid}") = "{project.name}", "{project.file_path}", "{project.guid}"'
        )
        lines.extend(project.body)
        lines.append("EndProject")
    if solution.global_sections:
        lines.append("Global")
        for section in solution.global_sections:
            lines.append(f"\tGlobalSection({section.name}) = {section.position}")
            lines.extend(f"\t\t{key} = {value}" for key, value in section.entries)
            lines.append("\tEndGlobalSection")
        lines.append("EndGlobal")
    lines.extend(solution.trailer)
    return solution.newline.join(lines) + solution.newline


def write_solution(solution: SolutionFile) -> None:
    """Replace the solution file on disk with the rendered model.

    The text is encoded and written to a sibling temporary file first, so a
    failure leaves the existing file untouched.
    """
    encoding = "utf-8-sig" if solution.has_bom else "utf-8"
    try:
        data = render_solution(solution).encode(encoding)
    except UnicodeEncodeError as exc:
        raise SolutionError(SLN_004, f"Failed to encode solution file {solution.path}: {exc.reason}") from exc

    directory = solution.path.parent
    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{solution.path.name}.", suffix=".tmp", dir=directory)
    except OSError as exc:
        raise SolutionError(SLN_004, f"Failed to write solution file: {solution.path}") from exc
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        if solution.path.exists():
            os.chmod(temp_name, stat.S_IMODE(solution.path.stat().st_mode))
        os.replace(temp_name, solution.path)
    except OSError as exc:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise SolutionError(SLN_004, f"Failed to write solution file: {solution.path}") from exc
    logger.debug("Wrote %d project entries to %s", solution.project_count, solution.path)
