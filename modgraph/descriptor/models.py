"""Module descriptor models.

A descriptor is the immutable, declarative record of one build unit: its
precompiled-header strategy, include paths, dependencies and the
flag-gated entries that only apply under certain build configurations.
Descriptors validate themselves on construction and raise
``modgraph.errors.ValidationError`` when malformed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from modgraph.descriptor.validation import (
    MODULE_FIELDS,
    PATH_FIELDS,
    SEQUENCE_FIELDS,
    descriptor_problems,
)
from modgraph.errors import ValidationError


class PCHUsageMode(str, Enum):
    """Precompiled-header generation strategy for a module."""

    NONE = "none"
    USE_EXPLICIT = "use_explicit"
    USE_SHARED = "use_shared"
    USE_EXPLICIT_OR_SHARED = "use_explicit_or_shared"


class Visibility(str, Enum):
    """Propagation scope of a dependency or include path."""

    PUBLIC = "public"
    PRIVATE = "private"


class FieldKind(str, Enum):
    """Descriptor field that a conditional edge augments."""

    PUBLIC_INCLUDE_PATH = "public_include_path"
    PRIVATE_INCLUDE_PATH = "private_include_path"
    PUBLIC_DEPENDENCY = "public_dependency"
    PRIVATE_DEPENDENCY = "private_dependency"
    PRIVATE_INCLUDE_PATH_MODULE = "private_include_path_module"
    DYNAMICALLY_LOADED_MODULE = "dynamically_loaded_module"

    @property
    def attribute(self) -> str:
        """Name of the descriptor attribute this kind appends to."""
        return FIELD_ATTRIBUTES[self]

    @property
    def is_module_reference(self) -> bool:
        """True when values of this kind are module names rather than paths."""
        return self.attribute in MODULE_FIELDS


FIELD_ATTRIBUTES: Dict[FieldKind, str] = {
    FieldKind.PUBLIC_INCLUDE_PATH: "public_include_paths",
    FieldKind.PRIVATE_INCLUDE_PATH: "private_include_paths",
    FieldKind.PUBLIC_DEPENDENCY: "public_dependencies",
    FieldKind.PRIVATE_DEPENDENCY: "private_dependencies",
    FieldKind.PRIVATE_INCLUDE_PATH_MODULE: "private_include_path_modules",
    FieldKind.DYNAMICALLY_LOADED_MODULE: "dynamically_loaded_modules",
}


@dataclass(frozen=True)
class ConditionalEdge:
    """An entry added to ``kind``'s field only when ``predicate`` is set.

    Attributes:
        predicate: Name of the configuration flag gating the entry.
        kind: Field the value is appended to.
        value: Include path or module name to append.
    """

    predicate: str
    kind: FieldKind
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FieldKind):
            object.__setattr__(self, "kind", FieldKind(self.kind))

    def to_dict(self) -> Dict[str, str]:
        return {"predicate": self.predicate, "kind": self.kind.value, "value": self.value}


@dataclass(frozen=True)
class _DescriptorBase:
    """Fields and validation shared by raw and resolved descriptors."""

    name: str
    pch_mode: Optional[PCHUsageMode] = None
    public_include_paths: Tuple[str, ...] = ()
    private_include_paths: Tuple[str, ...] = ()
    public_dependencies: Tuple[str, ...] = ()
    private_dependencies: Tuple[str, ...] = ()
    private_include_path_modules: Tuple[str, ...] = ()
    dynamically_loaded_modules: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable from callers but store tuples so instances
        # stay hashable and cannot be mutated through shared lists.
        for attr in SEQUENCE_FIELDS:
            value = getattr(self, attr)
            if isinstance(value, str):
                value = (value,)
            object.__setattr__(self, attr, tuple(value))
        try:
            if self.pch_mode is not None and not isinstance(self.pch_mode, PCHUsageMode):
                object.__setattr__(self, "pch_mode", PCHUsageMode(self.pch_mode))
            self._normalize_extra()
        except ValueError as exc:
            raise ValidationError(self.name, [str(exc)]) from exc

        problems = descriptor_problems(self)
        if problems:
            raise ValidationError(self.name, problems)

    def _normalize_extra(self) -> None:
        """Hook for subclasses to normalise their own fields."""

    def dependencies(self) -> Tuple[str, ...]:
        """Public then private dependencies, in declaration order."""
        return self.public_dependencies + self.private_dependencies

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "pch_mode": self.pch_mode.value if self.pch_mode else None,
        }
        for attr in SEQUENCE_FIELDS:
            data[attr] = list(getattr(self, attr))
        return data


@dataclass(frozen=True)
class ModuleDescriptor(_DescriptorBase):
    """Raw, declared properties of one module.

    ``conditional_edges`` are kept unevaluated; ``DescriptorResolver``
    folds them into the regular fields for a given configuration.
    """

    conditional_edges: Tuple[ConditionalEdge, ...] = field(default=())

    def _normalize_extra(self) -> None:
        edges = tuple(
            edge if isinstance(edge, ConditionalEdge) else ConditionalEdge(*edge)
            for edge in self.conditional_edges
        )
        object.__setattr__(self, "conditional_edges", edges)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["conditional_edges"] = [edge.to_dict() for edge in self.conditional_edges]
        return data


@dataclass(frozen=True)
class ResolvedDescriptor(_DescriptorBase):
    """A descriptor with every conditional edge evaluated.

    Attributes:
        applied_edges: Conditional edges whose predicate was set, in
            declaration order. Kept for diagnostics only.
    """

    applied_edges: Tuple[ConditionalEdge, ...] = field(default=())

    def _normalize_extra(self) -> None:
        object.__setattr__(self, "applied_edges", tuple(self.applied_edges))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["applied_edges"] = [edge.to_dict() for edge in self.applied_edges]
        return data


__all__ = [
    "ConditionalEdge",
    "FIELD_ATTRIBUTES",
    "FieldKind",
    "MODULE_FIELDS",
    "ModuleDescriptor",
    "PATH_FIELDS",
    "PCHUsageMode",
    "ResolvedDescriptor",
    "SEQUENCE_FIELDS",
    "Visibility",
]
