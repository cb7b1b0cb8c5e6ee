"""Build the project-wide dependency graph from resolved descriptors."""

from __future__ import annotations

import logging
from typing import Iterable, List

import networkx as nx

from modgraph.descriptor import ResolvedDescriptor, Visibility
from modgraph.errors import DuplicateModuleError, MissingReference, UnknownModuleError
from modgraph.graph.model import DependencyGraph

logger = logging.getLogger("modgraph.graph.builder")

# Fields whose entries must name a module declared in the same project.
_REFERENCE_FIELDS = (
    "public_dependencies",
    "private_dependencies",
    "private_include_path_modules",
)


class DependencyGraphBuilder:
    """Aggregate resolved descriptors into a ``DependencyGraph``.

    Args:
        strict_dynamic_modules: When True, dynamically loaded modules that
            name undeclared modules are reported as unknown references.
            Otherwise they are only logged, since they carry no build-order
            constraint.
    """

    def __init__(self, strict_dynamic_modules: bool = False) -> None:
        self.strict_dynamic_modules = strict_dynamic_modules

    def build(self, resolved_descriptors: Iterable[ResolvedDescriptor]) -> DependencyGraph:
        """Create one node per module and one edge per declared dependency.

        Args:
            resolved_descriptors: Complete set of resolved descriptors for
                the project, in the order they were loaded.

        Returns:
            Frozen DependencyGraph.

        Raises:
            DuplicateModuleError: If names are shared between descriptors.
            UnknownModuleError: If any reference names an undeclared module.
                Every missing reference in the set is reported.
        """
        descriptors = list(resolved_descriptors)
        self._check_duplicates(descriptors)

        known = {descriptor.name for descriptor in descriptors}
        missing: List[MissingReference] = []

        for descriptor in descriptors:
            for attr in _REFERENCE_FIELDS:
                for reference in getattr(descriptor, attr):
                    if reference not in known:
                        missing.append(MissingReference(descriptor.name, reference, attr))
            for reference in descriptor.dynamically_loaded_modules:
                if reference in known:
                    continue
                if self.strict_dynamic_modules:
                    missing.append(
                        MissingReference(descriptor.name, reference, "dynamically_loaded_modules")
                    )
                else:
                    logger.warning(
                        "Module %s dynamically loads undeclared module %s",
                        descriptor.name,
                        reference,
                    )

        if missing:
            raise UnknownModuleError(missing)

        graph = nx.DiGraph()
        for descriptor in descriptors:
            graph.add_node(
                descriptor.name,
                type="module",
                pch_mode=descriptor.pch_mode.value if descriptor.pch_mode else None,
            )
        for descriptor in descriptors:
            for target in descriptor.public_dependencies:
                graph.add_edge(descriptor.name, target, visibility=Visibility.PUBLIC.value)
            for target in descriptor.private_dependencies:
                graph.add_edge(descriptor.name, target, visibility=Visibility.PRIVATE.value)

        logger.debug(
            "Built dependency graph: %d modules, %d edges",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return DependencyGraph(descriptors, graph)

    @staticmethod
    def _check_duplicates(descriptors: List[ResolvedDescriptor]) -> None:
        seen = set()
        duplicates: List[str] = []
        for descriptor in descriptors:
            if descriptor.name in seen and descriptor.name not in duplicates:
                duplicates.append(descriptor.name)
            seen.add(descriptor.name)
        if duplicates:
            raise DuplicateModuleError(duplicates)


__all__ = ["DependencyGraphBuilder"]
