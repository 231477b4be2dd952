"""Core scaffolding and listing logic."""

from axis_vex.core.device_lister import list_devices
from axis_vex.core.project_lister import is_vex_project, list_projects

__all__ = ["is_vex_project", "list_devices", "list_projects"]
