"""Build plan handed to the compiler/linker driver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from modgraph.descriptor import PCHUsageMode


@dataclass(frozen=True)
class BuildStep:
    """Compile/link inputs for one module.

    Attributes:
        name: Module name.
        pch_mode: Effective precompiled-header mode, after applying the
            configured default to modules that declare none.
        include_paths: Include search paths for compiling the module.
        link_dependencies: Modules to link against, in build order.
        dynamically_loaded_modules: Modules loaded at runtime; passed
            through for the runtime loader, never linked.
    """

    name: str
    pch_mode: Optional[PCHUsageMode]
    include_paths: Tuple[str, ...]
    link_dependencies: Tuple[str, ...]
    dynamically_loaded_modules: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pch_mode": self.pch_mode.value if self.pch_mode else None,
            "include_paths": list(self.include_paths),
            "link_dependencies": list(self.link_dependencies),
            "dynamically_loaded_modules": list(self.dynamically_loaded_modules),
        }


@dataclass(frozen=True)
class BuildPlan:
    """Ordered build steps; dependencies precede their dependents."""

    steps: Tuple[BuildStep, ...]

    def __iter__(self) -> Iterator[BuildStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def order(self) -> Tuple[str, ...]:
        return tuple(step.name for step in self.steps)

    def step(self, name: str) -> BuildStep:
        for step in self.steps:
            if step.name == name:
                return step
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order": list(self.order),
            "steps": [step.to_dict() for step in self.steps],
        }


__all__ = ["BuildPlan", "BuildStep"]
