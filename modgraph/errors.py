"""Error taxonomy for module graph resolution.

Every error raised by the resolution pipeline derives from
``ModuleGraphError`` so that orchestrators can catch a single base class.
None of these errors are recoverable automatically: they describe
structural problems in the declared modules and must be surfaced to the
user.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence


class ModuleGraphError(Exception):
    """Base class for all module graph errors."""


class ValidationError(ModuleGraphError, ValueError):
    """A single module descriptor is malformed.

    Raised for empty names, duplicate entries within a field, a module
    referencing itself, or conflicting public/private visibility. All
    problems found in one descriptor are reported together.
    """

    def __init__(self, module: str, problems: Sequence[str]) -> None:
        self.module = module
        self.problems: List[str] = list(problems)
        label = module or "<unnamed>"
        super().__init__(f"Invalid module '{label}': " + "; ".join(self.problems))


class DuplicateModuleError(ModuleGraphError):
    """Two or more descriptors share a name within one project."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names: List[str] = list(names)
        super().__init__("Duplicate module name(s): " + ", ".join(self.names))


@dataclass(frozen=True)
class MissingReference:
    """A reference from ``module`` to an undeclared ``reference``."""

    module: str
    reference: str
    field: str

    def __str__(self) -> str:
        return f"{self.module} -> {self.reference} ({self.field})"


class UnknownModuleError(ModuleGraphError):
    """One or more references point at modules absent from the project.

    The builder collects every missing reference across the whole module
    set before raising, so ``missing`` is exhaustive.
    """

    def __init__(self, missing: Iterable[MissingReference]) -> None:
        self.missing: List[MissingReference] = list(missing)
        super().__init__(
            f"{len(self.missing)} unknown module reference(s): "
            + "; ".join(str(item) for item in self.missing)
        )

    @property
    def references(self) -> List[str]:
        """Names of the missing modules, in discovery order."""
        return [item.reference for item in self.missing]


class CyclicDependencyError(ModuleGraphError):
    """The dependency graph contains a cycle.

    Attributes:
        cycle: Module names forming the loop, without repeating the first
            module at the end.
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle: List[str] = list(cycle)
        # Present a closed loop for readability: A -> B -> C -> A
        loop = self.cycle + self.cycle[:1]
        super().__init__("Dependency cycle detected: " + " -> ".join(loop))


class ManifestError(ModuleGraphError):
    """A project manifest or configuration source could not be loaded."""


__all__ = [
    "CyclicDependencyError",
    "DuplicateModuleError",
    "ManifestError",
    "MissingReference",
    "ModuleGraphError",
    "UnknownModuleError",
    "ValidationError",
]
