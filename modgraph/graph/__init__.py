"""Public graph API surface."""

from modgraph.graph.builder import DependencyGraphBuilder
from modgraph.graph.model import DependencyGraph, EdgeTuple
from modgraph.graph.ops import (
    BuildOrderResolver,
    BuildPlan,
    BuildStep,
    Traversal,
    depth_first,
)

__all__ = [
    "BuildOrderResolver",
    "BuildPlan",
    "BuildStep",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "EdgeTuple",
    "Traversal",
    "depth_first",
]
