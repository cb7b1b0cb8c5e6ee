"""Configuration and manifest schema definitions using Pydantic.

This module provides strongly-typed models for resolution settings and
for the project manifest consumed by the reference loader. Using Pydantic
ensures structural mistakes (unknown keys, bad enum values, out-of-range
numbers) are caught early with clear error messages, before descriptors
are built.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from modgraph.descriptor import ConditionalEdge, FieldKind, ModuleDescriptor, PCHUsageMode
from modgraph.runtime.context import ConfigurationContext


class ResolutionConfig(BaseModel):
    """Settings controlling how a project is resolved.

    Attributes:
        default_pch_mode: PCH mode applied to modules declaring none.
            ``None`` leaves the choice to the compiler driver.
        max_workers: Threads used to resolve descriptors in parallel.
        strict_dynamic_modules: Treat dynamically loaded references to
            undeclared modules as errors instead of warnings.
    """

    default_pch_mode: Optional[PCHUsageMode] = None
    max_workers: int = Field(default=1, ge=1, le=64)
    strict_dynamic_modules: bool = False

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "ResolutionConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolutionConfig":
        """Create configuration from dictionary.

        Raises:
            pydantic.ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class ConditionalEdgeSpec(BaseModel):
    """Manifest form of a flag-gated entry."""

    predicate: str = Field(min_length=1)
    kind: FieldKind
    value: str = Field(min_length=1)

    model_config = {"extra": "forbid"}

    def to_edge(self) -> ConditionalEdge:
        return ConditionalEdge(predicate=self.predicate, kind=self.kind, value=self.value)


class ModuleSpec(BaseModel):
    """Manifest form of one module.

    Only structure is checked here; descriptor invariants such as
    self-references and duplicates are enforced by ``ModuleDescriptor``.
    """

    name: str
    pch_mode: Optional[PCHUsageMode] = None
    public_include_paths: List[str] = Field(default_factory=list)
    private_include_paths: List[str] = Field(default_factory=list)
    public_dependencies: List[str] = Field(default_factory=list)
    private_dependencies: List[str] = Field(default_factory=list)
    private_include_path_modules: List[str] = Field(default_factory=list)
    dynamically_loaded_modules: List[str] = Field(default_factory=list)
    conditional_edges: List[ConditionalEdgeSpec] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_descriptor(self) -> ModuleDescriptor:
        """Build the raw descriptor.

        Raises:
            modgraph.errors.ValidationError: If the module is malformed.
        """
        return ModuleDescriptor(
            name=self.name,
            pch_mode=self.pch_mode,
            public_include_paths=self.public_include_paths,
            private_include_paths=self.private_include_paths,
            public_dependencies=self.public_dependencies,
            private_dependencies=self.private_dependencies,
            private_include_path_modules=self.private_include_path_modules,
            dynamically_loaded_modules=self.dynamically_loaded_modules,
            conditional_edges=[edge.to_edge() for edge in self.conditional_edges],
        )


class ProjectManifest(BaseModel):
    """Top-level project manifest.

    Attributes:
        modules: Module declarations, in load order.
        flags: Build flags active for this invocation.
        resolution: Resolution settings.
    """

    modules: List[ModuleSpec] = Field(default_factory=list)
    flags: Dict[str, bool] = Field(default_factory=dict)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)

    model_config = {"extra": "forbid"}

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, v: Dict[str, bool]) -> Dict[str, bool]:
        """Validate that flag names are non-empty."""
        for name in v:
            if not name.strip():
                raise ValueError("Flag names must be non-empty")
        return v

    def descriptors(self) -> List[ModuleDescriptor]:
        return [spec.to_descriptor() for spec in self.modules]

    def context(self) -> ConfigurationContext:
        return ConfigurationContext(self.flags)
