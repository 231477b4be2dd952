"""Write project metadata into the copied ``vex_project_settings.json``.

Stamping is best effort. A missing, unreadable or malformed settings file,
or one without a ``project`` object, is left exactly as it was and the
scaffold still counts as successful.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, cast

from axis_vex.helpers.helpers_logging import print_debug

SETTINGS_RELATIVE_PATH = Path(".vscode") / "vex_project_settings.json"
DEFAULT_DESCRIPTION = "VEX Competition Project"


def settings_path(project_root: Path) -> Path:
    """Return the settings file location inside a project."""
    return project_root / SETTINGS_RELATIVE_PATH


def format_creation_date(now: datetime) -> str:
    """Render a local timestamp with the C library's ``%c`` format.

    The output follows ``LC_TIME``, which ``axis`` sets from the environment
    at startup.
    """
    return now.strftime("%c")


def stamp_project_metadata(
    project_root: Path,
    project_name: str,
    now: datetime | None = None,
) -> bool:
    """Set name, description and creation date in the project settings.

    Args:
        project_root: Root of the freshly copied project.
        project_name: Validated project name.
        now: Timestamp to record (defaults to the current local time).

    Returns:
        True if the file was rewritten. Callers are free to ignore this;
        every failure path returns False without raising.
    """
    path = settings_path(project_root)

    try:
        raw = path.read_text(encoding="utf-8")
        data: object = json.loads(raw)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        print_debug(f"Skipping metadata stamp for {path}: {e}")
        return False

    if not isinstance(data, dict):
        print_debug(f"Skipping metadata stamp for {path}: top level is not an object")
        return False

    document = cast(dict[str, Any], data)
    project = document.get("project")
    if not isinstance(project, dict):
        print_debug(f"Skipping metadata stamp for {path}: no 'project' object")
        return False

    metadata = cast(dict[str, Any], project)
    metadata["name"] = project_name
    metadata["description"] = metadata.get("description") or DEFAULT_DESCRIPTION
    metadata["creationDate"] = format_creation_date(now or datetime.now())

    try:
        path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        print_debug(f"Could not write {path}: {e}")
        return False

    return True
