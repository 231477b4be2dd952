"""
Axis VEX

Scaffold, list and build VEX V5 competition robotics projects from a
bundled template.
"""

__version__ = "0.1.0"

from axis_vex.core.create_flow import ProjectCreator
from axis_vex.core.materializer import materialize
from axis_vex.core.metadata_stamper import stamp_project_metadata
from axis_vex.core.project_lister import list_projects

__all__ = [
    "ProjectCreator",
    "materialize",
    "stamp_project_metadata",
    "list_projects",
]
