"""Dependency graph over resolved module descriptors.

The graph owns its resolved descriptors and a frozen networkx ``DiGraph``
whose edges point from a module to each module it depends on. Every edge
carries a ``visibility`` attribute (``"public"`` or ``"private"``). Both
kinds constrain build order; only public edges propagate include paths and
link dependencies to third parties.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import networkx as nx

from modgraph.descriptor import ResolvedDescriptor, Visibility
from modgraph.errors import MissingReference, UnknownModuleError

EdgeTuple = Tuple[str, str, Visibility]


class DependencyGraph:
    """Immutable module graph for one project build.

    Instances are produced by ``DependencyGraphBuilder``; constructing one
    directly skips reference validation.

    Args:
        descriptors: Resolved descriptors in input order.
        graph: networkx graph holding one node per descriptor.
    """

    def __init__(self, descriptors: Sequence[ResolvedDescriptor], graph: nx.DiGraph) -> None:
        self._descriptors: Dict[str, ResolvedDescriptor] = {d.name: d for d in descriptors}
        self._graph = nx.freeze(graph)

    @property
    def native_graph(self) -> nx.DiGraph:
        """The underlying frozen networkx graph."""
        return self._graph

    @property
    def names(self) -> Tuple[str, ...]:
        """Module names in input order."""
        return tuple(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def descriptor(self, name: str) -> ResolvedDescriptor:
        """Return the resolved descriptor for ``name``.

        Raises:
            UnknownModuleError: If ``name`` is not part of the graph.
        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownModuleError(
                [MissingReference(module="<query>", reference=name, field="lookup")]
            ) from None

    def descriptors(self) -> Tuple[ResolvedDescriptor, ...]:
        return tuple(self._descriptors.values())

    def dependencies(
        self, name: str, visibility: Optional[Visibility] = None
    ) -> Tuple[str, ...]:
        """Direct dependencies of ``name`` in declaration order.

        Args:
            name: Module to inspect.
            visibility: Restrict to public or private edges. ``None``
                returns public dependencies followed by private ones.
        """
        descriptor = self.descriptor(name)
        if visibility is Visibility.PUBLIC:
            return descriptor.public_dependencies
        if visibility is Visibility.PRIVATE:
            return descriptor.private_dependencies
        return descriptor.dependencies()

    def dependents(
        self, name: str, visibility: Optional[Visibility] = None
    ) -> Tuple[str, ...]:
        """Modules that depend directly on ``name``, in input order."""
        self.descriptor(name)
        sources = set()
        for source, _, data in self._graph.in_edges(name, data=True):
            if visibility is None or data.get("visibility") == visibility.value:
                sources.add(source)
        return tuple(module for module in self._descriptors if module in sources)

    def edge_visibility(self, source: str, target: str) -> Optional[Visibility]:
        """Visibility of the edge ``source -> target``, or None if absent."""
        if not self._graph.has_edge(source, target):
            return None
        return Visibility(self._graph.edges[source, target]["visibility"])

    def edges(self, visibility: Optional[Visibility] = None) -> List[EdgeTuple]:
        """All dependency edges as ``(source, target, visibility)`` triples."""
        result: List[EdgeTuple] = []
        for name in self._descriptors:
            for kind in (Visibility.PUBLIC, Visibility.PRIVATE):
                if visibility is not None and kind is not visibility:
                    continue
                for target in self.dependencies(name, kind):
                    result.append((name, target, kind))
        return result


__all__ = ["DependencyGraph", "EdgeTuple"]
