"""Create-project flow: name → destination → copy → stamp → notify.

The flow talks to the operator only through :class:`HostUI`, a set of
request/response calls that return ``None`` on cancel. The CLI supplies a
click implementation; tests supply a scripted one.

States::

    IDLE → NAME_COLLECTED → DESTINATION_COLLECTED → MATERIALIZING → STAMPING → DONE
                                                        └──────────────→ FAILED(reason)

Cancelling at either prompt returns to IDLE without touching the disk.
A failure is reported verbatim and partial files are left in place.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from axis_vex.core.materializer import materialize
from axis_vex.core.metadata_stamper import stamp_project_metadata
from axis_vex.core.name_validator import project_name_error, validate_project_name
from axis_vex.helpers.config import AxisConfig
from axis_vex.helpers.file_lock import LockUnavailableError, target_lock
from axis_vex.helpers.helpers_logging import print_warning
from axis_vex.helpers.project_registry import remember_project

OPEN_FOLDER = "Open Folder"
OK = "OK"


class CreateState(Enum):
    """Where the create flow stopped."""

    IDLE = "idle"
    NAME_COLLECTED = "name_collected"
    DESTINATION_COLLECTED = "destination_collected"
    MATERIALIZING = "materializing"
    STAMPING = "stamping"
    DONE = "done"
    FAILED = "failed"


class HostUI(Protocol):
    """Operator-facing calls the flow depends on."""

    def prompt_project_name(
        self,
        default: str,
        validate: Callable[[str], str | None],
    ) -> str | None:
        """Ask for a name; ``validate`` returns an inline error or None."""
        ...

    def pick_destination(self) -> Path | None:
        """Ask for an existing parent folder."""
        ...

    def progress(self, title: str) -> AbstractContextManager[object]:
        """Context manager shown around the long-running copy."""
        ...

    def show_info(self, message: str, actions: list[str]) -> str | None:
        """Show a notification; return the chosen action or None."""
        ...

    def show_error(self, message: str) -> None:
        ...


@dataclass
class CreateOutcome:
    """Result of one run of the create flow.

    Attributes:
        state: Final state (IDLE on cancel, DONE or FAILED otherwise).
        history: Every state visited, in order.
        name: Accepted project name.
        target: Project folder (``<destination>/<name>``).
        reason: Failure reason when ``state`` is FAILED.
        stamped: Whether the settings file was rewritten.
        opened: Whether the operator chose "Open Folder".
    """

    state: CreateState = CreateState.IDLE
    history: list[CreateState] = field(default_factory=lambda: [CreateState.IDLE])
    name: str | None = None
    target: Path | None = None
    reason: str = ""
    stamped: bool = False
    opened: bool = False

    def advance(self, state: CreateState) -> None:
        self.state = state
        self.history.append(state)

    def fail(self, reason: str) -> None:
        self.reason = reason
        self.advance(CreateState.FAILED)


class ProjectCreator:
    """Run the create-project flow against a host UI.

    Args:
        host: Prompt/notification implementation.
        config: Resolved configuration (template root, state directory).
        open_folder: Called with the new project path when the operator
            picks "Open Folder".
    """

    def __init__(
        self,
        host: HostUI,
        config: AxisConfig,
        open_folder: Callable[[Path], object] | None = None,
    ) -> None:
        self.host = host
        self.config = config
        self.open_folder = open_folder

    def run(
        self,
        name: str | None = None,
        destination: Path | None = None,
    ) -> CreateOutcome:
        """Drive the flow once.

        Args:
            name: Pre-supplied project name (skips the prompt when valid).
            destination: Pre-supplied parent folder (skips the picker).
        """
        outcome = CreateOutcome()

        project_name = self._collect_name(name)
        if project_name is None:
            outcome.advance(CreateState.IDLE)
            return outcome
        outcome.name = project_name
        outcome.advance(CreateState.NAME_COLLECTED)

        parent = destination if destination is not None else self.host.pick_destination()
        if parent is None:
            outcome.advance(CreateState.IDLE)
            return outcome
        target = parent / project_name
        outcome.target = target
        outcome.advance(CreateState.DESTINATION_COLLECTED)

        try:
            with target_lock(self.config.locks_dir, target):
                self._scaffold(outcome, target, project_name)
        except LockUnavailableError:
            outcome.fail(f"Another scaffold is already writing to {target}.")
        except OSError as e:
            outcome.fail(str(e))

        if outcome.state is CreateState.FAILED:
            self.host.show_error(f"Unable to create project: {outcome.reason}")
            return outcome

        try:
            remember_project(
                self.config.projects_file,
                target,
                self.config.max_remembered_projects,
            )
        except OSError as e:
            print_warning(f"Could not record {target} in the project list: {e}")

        choice = self.host.show_info(
            f"Created VEX competition project at {target}.",
            [OPEN_FOLDER, OK],
        )
        if choice == OPEN_FOLDER and self.open_folder is not None:
            self.open_folder(target)
            outcome.opened = True

        return outcome

    def _collect_name(self, name: str | None) -> str | None:
        if name is not None:
            accepted = validate_project_name(name)
            if accepted is not None:
                return accepted
            print_warning(f"Invalid project name {name!r}: {project_name_error(name)}")
        raw = self.host.prompt_project_name(
            self.config.default_project_name,
            project_name_error,
        )
        if raw is None:
            return None
        return validate_project_name(raw)

    def _scaffold(self, outcome: CreateOutcome, target: Path, project_name: str) -> None:
        with self.host.progress(f"Creating VEX project: {project_name}"):
            outcome.advance(CreateState.MATERIALIZING)
            result = materialize(self.config.template_root, target)
            if not result.ok:
                outcome.fail(result.reason)
                return

            outcome.advance(CreateState.STAMPING)
            outcome.stamped = stamp_project_metadata(target, project_name)

        outcome.advance(CreateState.DONE)
