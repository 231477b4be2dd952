"""User configuration and state locations for the axis CLI.

Settings are resolved in this order (later wins):

1. Built-in defaults
2. ``<AXIS_HOME>/config.yaml``
3. ``AXIS_BUILD_COMMAND`` / ``AXIS_OPEN_COMMAND`` environment variables
4. Command-line options (applied by the CLI handlers)

Example ``config.yaml``::

    template_root: ~/vex/templates/my-team
    default_project_name: worlds-bot
    build_command: make -j4
    open_command: [code, --new-window]
    max_remembered_projects: 10
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import yaml

from axis_vex.helpers.helpers_logging import print_warning

TEMPLATE_NAME = "vex-competition"
CONFIG_FILE_NAME = "config.yaml"
PROJECTS_FILE_NAME = "projects.yaml"
LOCKS_DIR_NAME = "locks"

_DEFAULT_PROJECT_NAME = "vex-competition"
_DEFAULT_BUILD_COMMAND = ("make",)
_DEFAULT_OPEN_COMMAND = ("code", "--new-window")
_DEFAULT_MAX_REMEMBERED = 20


class ConfigError(ValueError):
    """Configuration file parsed but holds a value of the wrong type."""


def axis_home() -> Path:
    """Return the state directory (``AXIS_HOME`` or ``~/.axis``)."""
    env = os.environ.get("AXIS_HOME", "").strip()
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".axis").resolve()


def bundled_template_root() -> Path:
    """Return the template tree shipped inside the package."""
    import axis_vex.templates as templates_pkg

    return Path(templates_pkg.__file__).resolve().parent / TEMPLATE_NAME


def _default_build_command() -> list[str]:
    return list(_DEFAULT_BUILD_COMMAND)


def _default_open_command() -> list[str]:
    return list(_DEFAULT_OPEN_COMMAND)


@dataclass
class AxisConfig:
    """Resolved configuration.

    Attributes:
        home: State directory holding config, registry and lock files.
        template_root: Template tree copied by ``axis create``.
        default_project_name: Pre-filled value of the name prompt.
        build_command: Argv run by ``axis build`` inside the project.
        open_command: Argv prefix used by ``axis open`` (path appended).
        max_remembered_projects: Registry size cap.
    """

    home: Path
    template_root: Path
    default_project_name: str = _DEFAULT_PROJECT_NAME
    build_command: list[str] = field(default_factory=_default_build_command)
    open_command: list[str] = field(default_factory=_default_open_command)
    max_remembered_projects: int = _DEFAULT_MAX_REMEMBERED

    @property
    def projects_file(self) -> Path:
        return self.home / PROJECTS_FILE_NAME

    @property
    def locks_dir(self) -> Path:
        return self.home / LOCKS_DIR_NAME


def _as_command(key: str, value: object) -> list[str]:
    """Accept either a shell-style string or a list of strings."""
    if isinstance(value, str):
        parts = shlex.split(value)
    elif isinstance(value, list) and all(
        isinstance(item, str) for item in cast(list[object], value)
    ):
        parts = list(cast(list[str], value))
    else:
        raise ConfigError(f"'{key}' must be a string or a list of strings")
    if not parts:
        raise ConfigError(f"'{key}' must not be empty")
    return parts


def _read_config_file(config_path: Path) -> dict[str, object]:
    """Read config.yaml; unreadable or non-mapping files yield no overrides."""
    if not config_path.exists():
        return {}

    try:
        raw_data: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        print_warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}

    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        print_warning(f"Ignoring config {config_path}: expected a mapping at top level")
        return {}
    return cast(dict[str, object], raw_data)


def load_config(home: Path | None = None) -> AxisConfig:
    """Build the effective configuration.

    Args:
        home: State directory override (defaults to :func:`axis_home`).

    Returns:
        Resolved :class:`AxisConfig`.

    Raises:
        ConfigError: If config.yaml contains a value of the wrong type.
    """
    state_dir = home if home is not None else axis_home()
    data = _read_config_file(state_dir / CONFIG_FILE_NAME)

    config = AxisConfig(home=state_dir, template_root=bundled_template_root())

    template_root = data.get("template_root")
    if template_root is not None:
        if not isinstance(template_root, str) or not template_root.strip():
            raise ConfigError("'template_root' must be a non-empty path string")
        config.template_root = Path(template_root).expanduser()

    default_name = data.get("default_project_name")
    if default_name is not None:
        if not isinstance(default_name, str):
            raise ConfigError("'default_project_name' must be a string")
        config.default_project_name = default_name

    if "build_command" in data:
        config.build_command = _as_command("build_command", data["build_command"])
    if "open_command" in data:
        config.open_command = _as_command("open_command", data["open_command"])

    max_remembered = data.get("max_remembered_projects")
    if max_remembered is not None:
        if isinstance(max_remembered, bool) or not isinstance(max_remembered, int) or max_remembered < 1:
            raise ConfigError("'max_remembered_projects' must be a positive integer")
        config.max_remembered_projects = max_remembered

    env_build = os.environ.get("AXIS_BUILD_COMMAND", "").strip()
    if env_build:
        config.build_command = _as_command("AXIS_BUILD_COMMAND", env_build)
    env_open = os.environ.get("AXIS_OPEN_COMMAND", "").strip()
    if env_open:
        config.open_command = _as_command("AXIS_OPEN_COMMAND", env_open)

    return config
