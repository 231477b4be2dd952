"""Remembered project paths stored in ``<AXIS_HOME>/projects.yaml``.

File layout::

    # Projects created or opened with axis (most recent first)
    projects:
      - /home/me/robots/worlds-bot
      - /home/me/robots/skills-bot

The list is passed explicitly to the project lister, so listing stays a
pure function of (remembered paths, workspace paths).
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

from ruamel.yaml.error import YAMLError

from axis_vex.helpers.helpers_logging import print_warning
from axis_vex.helpers.yaml_loader import ConfigDict, ConfigValue, load_yaml_file, save_yaml_file

PROJECTS_KEY = "projects"


def _read_registry(projects_file: Path) -> ConfigDict:
    """Load the registry document; a broken file is reported and treated as empty."""
    if not projects_file.exists():
        return {}
    try:
        data = load_yaml_file(projects_file)
    except (OSError, YAMLError) as e:
        print_warning(f"Ignoring unreadable project registry {projects_file}: {e}")
        return {}
    if not isinstance(data, dict):
        print_warning(f"Ignoring project registry {projects_file}: expected a mapping")
        return {}
    return data


def _paths_from(data: ConfigDict) -> list[str]:
    raw = data.get(PROJECTS_KEY)
    if not isinstance(raw, list):
        return []

    paths: list[str] = []
    for entry in raw:
        if isinstance(entry, str) and entry and entry not in paths:
            paths.append(entry)
    return paths


def load_remembered_paths(projects_file: Path) -> list[str]:
    """Return remembered project paths in stored order, without duplicates."""
    return _paths_from(_read_registry(projects_file))


def remember_project(projects_file: Path, project_path: Path, limit: int = 20) -> list[str]:
    """Move ``project_path`` to the front of the registry and persist it.

    Args:
        projects_file: Registry file path.
        project_path: Project directory to remember (stored resolved).
        limit: Maximum number of entries kept.

    Returns:
        The updated list of remembered paths.
    """
    data = _read_registry(projects_file)
    entry = str(project_path.resolve())

    existing = [path for path in _paths_from(data) if path != entry]
    updated = [entry, *existing][:limit]

    data[PROJECTS_KEY] = cast(list[ConfigValue], list(updated))
    save_yaml_file(data, projects_file)
    return updated
