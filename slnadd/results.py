"""Result schema for adding projects to a solution."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class RegistrationResult(BaseModel):
    solution_path: Path
    added: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    written: bool = False
