"""Open and build actions for an existing project.

Both actions shell out: opening runs the configured editor command with the
project path appended, building runs the configured build command (``make``
by default) with the project root as working directory. Neither waits on
anything beyond the child process.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from axis_vex.helpers.config import AxisConfig
from axis_vex.helpers.helpers_logging import print_error, print_info
from axis_vex.helpers.project_registry import remember_project


class ProjectActionError(Exception):
    """An open or build request could not be started."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


def _require_directory(project_path: Path) -> Path:
    if not project_path.is_dir():
        raise ProjectActionError(f"Not a project folder: {project_path}")
    return project_path.resolve()


def _run(cmd: list[str], cwd: Path | None = None) -> int:
    """Run a subprocess and return its exit code."""
    try:
        result = subprocess.run(cmd, cwd=cwd, check=False)
    except FileNotFoundError as e:
        raise ProjectActionError(f"Command not found: {cmd[0]}") from e
    except OSError as e:
        raise ProjectActionError(f"Failed to run {cmd[0]}: {e}") from e
    return result.returncode


def open_project(project_path: Path, config: AxisConfig) -> int:
    """Open ``project_path`` in the configured editor and remember it.

    Raises:
        ProjectActionError: If the path is not a folder or the editor is missing.
    """
    root = _require_directory(project_path)
    cmd = [*config.open_command, str(root)]
    print_info(f"Opening {root}")
    returncode = _run(cmd)
    if returncode == 0:
        remember_project(config.projects_file, root, config.max_remembered_projects)
    return returncode


def build_project(project_path: Path, config: AxisConfig) -> int:
    """Run the build command inside ``project_path``.

    Output streams straight to the terminal.

    Returns:
        The build tool's exit code.

    Raises:
        ProjectActionError: If the path is not a folder or the tool is missing.
    """
    root = _require_directory(project_path)
    print_info(f"🔨 Building {root.name}: {' '.join(config.build_command)}")
    return _run(list(config.build_command), cwd=root)
