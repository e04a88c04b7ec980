"""Command-line interface for slnadd."""

from __future__ import annotations

import importlib.metadata
import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console

from slnadd.config import SlnAddConfig, load_config, placement_from_config, serialize_config
from slnadd.errors import SlnAddError
from slnadd.registration import add_projects

app = typer.Typer(help="Add projects to a Visual Studio solution file.")
console = Console(soft_wrap=True, markup=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(importlib.metadata.version("slnadd"))
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", callback=_version_callback, is_eager=True),
) -> None:
    pass


def _build_overrides(in_root: bool | None, solution_folder: str | None) -> dict[str, Any]:
    placement_overrides: dict[str, Any] = {}
    if in_root:
        placement_overrides["in_root"] = True
    if solution_folder is not None:
        placement_overrides["solution_folder"] = solution_folder
    if placement_overrides:
        return {"placement": placement_overrides}
    return {}


def _print_error(code: str, message: str) -> None:
    typer.echo(f"{code}: {message}", err=True)


def _configure_logging(config: SlnAddConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


@app.command()
def add(
    solution: Path = typer.Argument(..., help="Solution file, or a directory holding exactly one"),
    projects: list[Path] = typer.Argument(None, help="Project files or directories to add"),
    in_root: bool = typer.Option(
        False,
        "--in-root",
        help="Place the projects in the root of the solution instead of creating solution folders",
    ),
    solution_folder: str | None = typer.Option(
        None,
        "--solution-folder",
        "-s",
        help="Destination solution folder path to add the projects to",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        resolve_path=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Add one or more projects to a solution file."""
    try:
        config = load_config(config_path, _build_overrides(in_root, solution_folder))
        _configure_logging(config, verbose)
        placement = placement_from_config(config)
        result = add_projects(solution, projects or [], placement, config)
    except SlnAddError as exc:
        _print_error(exc.code, str(exc))
        raise typer.Exit(code=1) from exc

    for relative_path in result.skipped:
        console.print(f"Solution {result.solution_path} already contains project {relative_path}.")
    for relative_path in result.added:
        console.print(f"Project `{relative_path}` added to the solution.", style="green")


@app.command()
def config(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        resolve_path=True,
    ),
    output_format: str = typer.Option("yaml", "--format", "-f"),
    in_root: bool = typer.Option(False, "--in-root"),
    solution_folder: str | None = typer.Option(None, "--solution-folder", "-s"),
) -> None:
    """Show current configuration."""
    try:
        config_data = load_config(config_path, _build_overrides(in_root, solution_folder))
        placement_from_config(config_data)
    except SlnAddError as exc:
        _print_error(exc.code, str(exc))
        raise typer.Exit(code=1) from exc
    payload = serialize_config(config_data)
    output_format_normalized = output_format.lower()
    if output_format_normalized == "yaml":
        output = yaml.safe_dump(payload, sort_keys=False)
    elif output_format_normalized == "json":
        output = json.dumps(payload, indent=2)
    else:
        raise typer.BadParameter("Format must be 'yaml' or 'json'.")
    typer.echo(output)
