"""Build the project list shown by ``axis projects``.

A folder counts as a VEX project when it holds a ``makefile`` and a ``vex``
directory at its top level. Remembered paths come first in stored order,
then workspace folders that are not already listed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

MAKEFILE_NAME = "makefile"
VEX_DIR_NAME = "vex"
NO_PROJECTS_LABEL = "No VEX projects found"


@dataclass(frozen=True)
class ProjectRecord:
    """One row in the project list.

    The "no projects" placeholder has an empty path and cannot be opened
    or built.
    """

    label: str
    path: str
    is_placeholder: bool = False

    @property
    def selectable(self) -> bool:
        return not self.is_placeholder


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def is_vex_project(project_path: str | Path) -> bool:
    """Return True when ``makefile`` exists and ``vex`` is a directory under the path.

    Any error while checking counts as "not a project".
    """
    root = Path(project_path)
    has_makefile = _exists(root / MAKEFILE_NAME)
    has_vex_dir = _is_dir(root / VEX_DIR_NAME)
    return has_makefile and has_vex_dir


def _label_for(path: str) -> str:
    return Path(path).name or path


def list_projects(
    remembered_paths: Iterable[str],
    workspace_paths: Iterable[str],
) -> list[ProjectRecord]:
    """Return qualifying projects, or a single placeholder when none qualify.

    Args:
        remembered_paths: Paths from the project registry, in stored order.
        workspace_paths: Currently open folders, in folder order.

    Returns:
        Project records; never empty.
    """
    projects: list[ProjectRecord] = []
    seen: set[str] = set()

    for path in [*remembered_paths, *workspace_paths]:
        if path in seen:
            continue
        if is_vex_project(path):
            projects.append(ProjectRecord(label=_label_for(path), path=path))
            seen.add(path)

    if not projects:
        return [ProjectRecord(label=NO_PROJECTS_LABEL, path="", is_placeholder=True)]
    return projects
