"""Build ordering and visibility propagation over a dependency graph.

Ordering treats public and private edges alike: both require the
dependency to be built first. Visibility only matters for propagation,
where public include paths and public dependencies flow on to any module
that depends on their owner, while private ones stop at the owner.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from modgraph.descriptor import PCHUsageMode, Visibility
from modgraph.graph.model import DependencyGraph
from modgraph.graph.ops.plan import BuildPlan, BuildStep
from modgraph.graph.ops.traversal import Traversal, depth_first

logger = logging.getLogger("modgraph.graph.ops.order")


def _unique(items: Iterable[str]) -> List[str]:
    """Drop repeated entries, keeping first occurrences in order."""
    seen = set()
    result: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class BuildOrderResolver:
    """Compute build order and propagated compile/link inputs.

    The graph is immutable, so the computed order is cached on first use.

    Args:
        graph: Dependency graph produced by ``DependencyGraphBuilder``.
    """

    def __init__(self, graph: DependencyGraph) -> None:
        self.graph = graph
        self._order: Optional[Tuple[str, ...]] = None

    def order(self) -> List[str]:
        """Return a valid build order.

        For every edge ``A -> B`` the dependency ``B`` precedes ``A``.
        Modules without a mutual constraint keep their input order.

        Raises:
            CyclicDependencyError: If the graph contains a cycle.
        """
        if self._order is None:
            traversal = depth_first(self.graph.names, self.graph.dependencies)
            self._order = traversal.postorder
            logger.debug("Build order: %s", " -> ".join(self._order))
        return list(self._order)

    def _public_walk(self, name: str) -> Traversal:
        return depth_first(
            [name], lambda module: self.graph.dependencies(module, Visibility.PUBLIC)
        )

    def transitive_public_include_paths(self, name: str) -> List[str]:
        """Public include paths visible to anything depending on ``name``.

        Starts with the module's own public paths, then adds those of every
        module reachable through public dependency edges. Paths reachable
        only through a private edge are excluded.

        Raises:
            UnknownModuleError: If ``name`` is not in the graph.
            CyclicDependencyError: If the public edges contain a cycle.
        """
        modules = self._public_walk(name).preorder
        return _unique(
            path
            for module in modules
            for path in self.graph.descriptor(module).public_include_paths
        )

    def transitive_public_dependencies(self, name: str) -> List[str]:
        """Modules reachable from ``name`` through public edges only."""
        return list(self._public_walk(name).preorder[1:])

    def compile_include_paths(self, name: str) -> List[str]:
        """Include search paths needed to compile ``name`` itself.

        The module's own public and private paths come first, followed by
        the transitive public paths of each direct dependency and of each
        private include-path module.
        """
        descriptor = self.graph.descriptor(name)
        paths: List[str] = list(descriptor.public_include_paths)
        paths.extend(descriptor.private_include_paths)
        for module in descriptor.dependencies() + descriptor.private_include_path_modules:
            paths.extend(self.transitive_public_include_paths(module))
        return _unique(paths)

    def link_dependencies(self, name: str) -> List[str]:
        """Modules ``name`` links against, in build order.

        Direct dependencies of either visibility, plus everything their
        public edges re-export.
        """
        reachable = set()
        for module in self.graph.dependencies(name):
            reachable.update(self._public_walk(module).preorder)
        position: Dict[str, int] = {module: index for index, module in enumerate(self.order())}
        return sorted(reachable, key=position.__getitem__)

    def plan(self, default_pch_mode: Optional[PCHUsageMode] = None) -> BuildPlan:
        """Assemble the ordered build plan.

        Args:
            default_pch_mode: Mode applied to modules that declare none.

        Raises:
            CyclicDependencyError: If the graph contains a cycle.
        """
        steps = []
        for name in self.order():
            descriptor = self.graph.descriptor(name)
            steps.append(
                BuildStep(
                    name=name,
                    pch_mode=descriptor.pch_mode or default_pch_mode,
                    include_paths=tuple(self.compile_include_paths(name)),
                    link_dependencies=tuple(self.link_dependencies(name)),
                    dynamically_loaded_modules=descriptor.dynamically_loaded_modules,
                )
            )
        logger.info("Build plan assembled for %d module(s)", len(steps))
        return BuildPlan(steps=tuple(steps))


__all__ = ["BuildOrderResolver"]
