"""Configuration schema and manifest loading for modgraph."""

from .loader import Project, load_project, load_resolution_config
from .schema import (
    ConditionalEdgeSpec,
    ModuleSpec,
    ProjectManifest,
    ResolutionConfig,
)

__all__ = [
    "ConditionalEdgeSpec",
    "ModuleSpec",
    "Project",
    "ProjectManifest",
    "ResolutionConfig",
    "load_project",
    "load_resolution_config",
]
