#!/usr/bin/env python3
"""
Project list, device list, open and build commands.

Usage:
    axis projects                     # remembered projects + current folder
    axis projects -w ~/robots/a -w .  # treat several folders as the workspace
    axis refresh                      # same list, re-read from disk
    axis open                         # pick a listed project to open
    axis open ~/robots/worlds-bot
    axis build                        # run `make` in the current folder
    axis devices
"""

from __future__ import annotations

from pathlib import Path

import click

from axis_vex.cli.context import get_config
from axis_vex.core.device_lister import list_devices
from axis_vex.core.project_actions import ProjectActionError, build_project, open_project
from axis_vex.core.project_lister import ProjectRecord, list_projects
from axis_vex.helpers.config import AxisConfig
from axis_vex.helpers.helpers_logging import (
    print_dim,
    print_error,
    print_header,
    print_info,
)
from axis_vex.helpers.project_registry import load_remembered_paths

_WORKSPACE_OPTION = click.option(
    "--workspace", "-w", "workspace",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Open workspace folder (repeatable, default: current folder)",
)


def collect_projects(config: AxisConfig, workspace: tuple[Path, ...]) -> list[ProjectRecord]:
    """List projects from the registry plus the given workspace folders."""
    folders = workspace or (Path.cwd(),)
    workspace_paths = [str(folder.resolve()) for folder in folders]
    remembered = load_remembered_paths(config.projects_file)
    return list_projects(remembered, workspace_paths)


def print_projects(projects: list[ProjectRecord]) -> None:
    """Render the project list; selectable rows are numbered."""
    print_header("📂 VEX Projects")
    index = 0
    for record in projects:
        if not record.selectable:
            print_dim(f"  ℹ️  {record.label}")
            continue
        index += 1
        print(f"  {index:>2}. 📁 {record.label}  {record.path}")


def _choose_project(projects: list[ProjectRecord]) -> ProjectRecord | None:
    """Ask for one selectable project. Placeholders are never offered."""
    selectable = [record for record in projects if record.selectable]
    if not selectable:
        return None

    print_projects(projects)
    try:
        choice = click.prompt(
            "Open project number",
            type=click.IntRange(1, len(selectable)),
        )
    except click.Abort:
        return None
    return selectable[choice - 1]


@click.command(name="projects", help="List remembered and open VEX projects")
@_WORKSPACE_OPTION
@click.pass_obj
def projects_cmd(obj: dict[str, object], workspace: tuple[Path, ...]) -> int:
    print_projects(collect_projects(get_config(obj), workspace))
    return 0


@click.command(name="refresh", help="Re-scan and list VEX projects")
@_WORKSPACE_OPTION
@click.pass_obj
def refresh_cmd(obj: dict[str, object], workspace: tuple[Path, ...]) -> int:
    projects = collect_projects(get_config(obj), workspace)
    print_projects(projects)
    found = sum(1 for record in projects if record.selectable)
    print_info(f"Refreshed: {found} project(s)")
    return 0


@click.command(name="devices", help="List connected VEX devices")
def devices_cmd() -> int:
    print_header("🔌 VEX Devices")
    for device in list_devices():
        print(f"  {device.label}")
        print_dim(f"     {device.description}")
    return 0


@click.command(name="open", help="Open a VEX project in the editor")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@_WORKSPACE_OPTION
@click.pass_obj
def open_cmd(
    obj: dict[str, object],
    path: Path | None,
    workspace: tuple[Path, ...],
) -> int:
    config = get_config(obj)

    if path is None:
        projects = collect_projects(config, workspace)
        if not any(record.selectable for record in projects):
            print_info("No VEX projects to open. Create one with 'axis create'.")
            return 1
        record = _choose_project(projects)
        if record is None:
            print_dim("Cancelled.")
            return 0
        path = Path(record.path)

    try:
        return open_project(path, config)
    except ProjectActionError as e:
        e.print_error()
        return 1


@click.command(name="build", help="Run the build command inside a VEX project")
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(path_type=Path),
)
@click.pass_obj
def build_cmd(obj: dict[str, object], path: Path) -> int:
    config = get_config(obj)
    try:
        returncode = build_project(path, config)
    except ProjectActionError as e:
        e.print_error()
        return 1

    if returncode != 0:
        print_error(f"Build failed (exit code {returncode})")
    return returncode
