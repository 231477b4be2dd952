#!/usr/bin/env python3
"""Axis CLI - Main Entry Point.

Scaffold, list and build VEX V5 competition projects.

Usage:
    axis <command> [options]

Commands:
    create     Create a VEX competition project from the bundled template
    projects   List remembered and open VEX projects
    refresh    Re-scan and list VEX projects
    open       Open a VEX project in the editor
    build      Run the build command (make) inside a VEX project
    devices    List connected VEX devices
    help       Show this help message
"""

from __future__ import annotations

import locale
import sys

import click

from axis_vex.cli.context import get_config
from axis_vex.cli.create_command import create_cmd
from axis_vex.cli.project_commands import (
    build_cmd,
    devices_cmd,
    open_cmd,
    projects_cmd,
    refresh_cmd,
)
from axis_vex.helpers.helpers_logging import print_debug

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

CLICK_COMMANDS: dict[str, click.Command] = {
    "create": create_cmd,
    "projects": projects_cmd,
    "refresh": refresh_cmd,
    "open": open_cmd,
    "build": build_cmd,
    "devices": devices_cmd,
}

COMMAND_ALIASES: dict[str, str] = {
    "new": "create",
    "ls": "projects",
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)

    config = get_config(None)
    print(f"📍 State directory: {config.home}")
    print(f"   Template: {config.template_root}")
    print(f"   Build command: {' '.join(config.build_command)}")

    print("\n⚡ Aliases:")
    for alias, canonical in COMMAND_ALIASES.items():
        print(f"  {alias:10} - alias for {canonical}")


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level axis command group."""
    ctx.ensure_object(dict)
    if ctx.invoked_subcommand is not None:
        return 0

    print_help()
    return 0


def _register_commands() -> None:
    """Register all top-level commands and their aliases."""
    for _name, cmd_obj in CLICK_COMMANDS.items():
        _click_cli.add_command(cmd_obj)

    for alias, canonical in COMMAND_ALIASES.items():
        _click_cli.add_command(CLICK_COMMANDS[canonical], name=alias)

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def _init_locale() -> None:
    """Use the environment's LC_TIME so creation dates read like the local clock."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        print_debug(f"Keeping default time locale: {e}")


def main() -> int:
    """Main CLI entry point."""
    _init_locale()

    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        try:
            print_help()
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="axis",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
