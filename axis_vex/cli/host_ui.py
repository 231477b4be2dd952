"""Terminal implementation of the create flow's HostUI.

Prompts go through ``click.prompt`` so invalid input is re-asked with the
validation message inline. Ctrl-C or end of input at a prompt counts as
cancel and is returned as ``None``, never raised.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator
from pathlib import Path

import click

from axis_vex.core.create_flow import OK, OPEN_FOLDER
from axis_vex.helpers.helpers_logging import print_error, print_info, print_success


class ClickHostUI:
    """HostUI backed by click prompts and the console helpers.

    Args:
        open_choice: Pre-answers the "Open Folder" question (``--open`` /
            ``--no-open``). ``None`` asks interactively.
    """

    def __init__(self, open_choice: bool | None = None) -> None:
        self.open_choice = open_choice

    def prompt_project_name(
        self,
        default: str,
        validate: Callable[[str], str | None],
    ) -> str | None:
        def _check(value: str) -> str:
            error = validate(value)
            if error is not None:
                raise click.BadParameter(error)
            return value.strip()

        try:
            return click.prompt(
                "Project folder name",
                default=default,
                value_proc=_check,
            )
        except click.Abort:
            return None

    def pick_destination(self) -> Path | None:
        def _check(value: str) -> Path | None:
            if not value.strip():
                return None
            folder = Path(value.strip()).expanduser()
            if not folder.is_dir():
                raise click.BadParameter(f"Not a folder: {folder}")
            return folder

        try:
            return click.prompt(
                "Select destination folder (empty to cancel)",
                default="",
                show_default=False,
                value_proc=_check,
            )
        except click.Abort:
            return None

    @contextlib.contextmanager
    def progress(self, title: str) -> Iterator[None]:
        print_info(f"⏳ {title}...")
        yield

    def show_info(self, message: str, actions: list[str]) -> str | None:
        print_success(message)
        if OPEN_FOLDER not in actions:
            return None
        if self.open_choice is not None:
            return OPEN_FOLDER if self.open_choice else OK

        try:
            return click.prompt(
                "Next",
                type=click.Choice(actions),
                default=OK if OK in actions else actions[-1],
            )
        except click.Abort:
            return None

    def show_error(self, message: str) -> None:
        print_error(message)
