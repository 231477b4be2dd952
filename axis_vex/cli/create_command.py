#!/usr/bin/env python3
"""
Create a new VEX V5 competition project from the bundled template.

Usage:
    # Fully interactive (name prompt, folder prompt, "Open Folder?" prompt)
    axis create

    # Name and parent folder up front, open in the editor afterwards
    axis create worlds-bot --destination ~/robots --open

The project is written to <destination>/<name>. That folder must not exist
or must be empty. .git, .vsix, node_modules, out and build entries in the
template are never copied.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from axis_vex.cli.context import get_config
from axis_vex.cli.host_ui import ClickHostUI
from axis_vex.core.create_flow import CreateState, ProjectCreator
from axis_vex.core.project_actions import ProjectActionError, open_project
from axis_vex.helpers.config import AxisConfig
from axis_vex.helpers.helpers_logging import print_dim, print_info


def _opener(config: AxisConfig) -> Callable[[Path], int]:
    """Return the "Open Folder" callback; editor failures are reported, not raised."""

    def _open(target: Path) -> int:
        try:
            return open_project(target, config)
        except ProjectActionError as e:
            e.print_error()
            return 1

    return _open


def run_create(
    config: AxisConfig,
    name: str | None,
    destination: Path | None,
    open_choice: bool | None,
) -> int:
    """Run the create flow and map the outcome to an exit code."""
    creator = ProjectCreator(
        ClickHostUI(open_choice=open_choice),
        config,
        open_folder=_opener(config),
    )
    outcome = creator.run(name=name, destination=destination)

    if outcome.state is CreateState.IDLE:
        print_dim("Cancelled, nothing was created.")
        return 0
    if outcome.state is CreateState.FAILED:
        return 1

    if not outcome.opened:
        print_info(f"   cd {outcome.target} && axis build")
    return 0


@click.command(name="create", help="Create a VEX competition project from the template")
@click.argument("name", required=False)
@click.option(
    "--destination", "-d",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Existing parent folder; the project is created inside it",
)
@click.option(
    "--open/--no-open", "open_choice", default=None,
    help="Open the new project in the editor (asks when omitted)",
)
@click.pass_obj
def create_cmd(
    obj: dict[str, object],
    name: str | None,
    destination: Path | None,
    open_choice: bool | None,
) -> int:
    return run_create(get_config(obj), name, destination, open_choice)
