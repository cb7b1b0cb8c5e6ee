"""Module dependency model and build-order resolution engine."""

from modgraph.descriptor import (
    ConditionalEdge,
    FieldKind,
    ModuleDescriptor,
    PCHUsageMode,
    ResolvedDescriptor,
    Visibility,
)
from modgraph.errors import (
    CyclicDependencyError,
    DuplicateModuleError,
    ManifestError,
    MissingReference,
    ModuleGraphError,
    UnknownModuleError,
    ValidationError,
)
from modgraph.runtime.context import ConfigurationContext
from modgraph.runtime.resolver import DescriptorResolver
from modgraph.graph import (
    BuildOrderResolver,
    BuildPlan,
    BuildStep,
    DependencyGraph,
    DependencyGraphBuilder,
)
from modgraph.config import ResolutionConfig, load_project
from modgraph.runtime.api import ProjectResolution, build_graph, resolve_project

__version__ = "0.1.0"

__all__ = [
    "BuildOrderResolver",
    "BuildPlan",
    "BuildStep",
    "ConditionalEdge",
    "ConfigurationContext",
    "CyclicDependencyError",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "DescriptorResolver",
    "DuplicateModuleError",
    "FieldKind",
    "ManifestError",
    "MissingReference",
    "ModuleDescriptor",
    "ModuleGraphError",
    "PCHUsageMode",
    "ProjectResolution",
    "ResolutionConfig",
    "ResolvedDescriptor",
    "UnknownModuleError",
    "ValidationError",
    "Visibility",
    "build_graph",
    "load_project",
    "resolve_project",
]
