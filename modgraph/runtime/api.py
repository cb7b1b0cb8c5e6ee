"""Library-facing helper running the full resolution pipeline.

raw descriptors -> DescriptorResolver -> DependencyGraphBuilder
-> BuildOrderResolver -> BuildPlan

Each call builds its own graph, so independent invocations (for example
with different configuration contexts) can run in parallel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from modgraph.config.schema import ResolutionConfig
from modgraph.descriptor import ModuleDescriptor
from modgraph.graph.builder import DependencyGraphBuilder
from modgraph.graph.model import DependencyGraph
from modgraph.graph.ops.order import BuildOrderResolver
from modgraph.graph.ops.plan import BuildPlan
from modgraph.runtime.context import ConfigurationContext
from modgraph.runtime.resolver import DescriptorResolver

logger = logging.getLogger("modgraph.runtime.api")


@dataclass(frozen=True)
class ProjectResolution:
    """Outputs of one resolution run."""

    graph: DependencyGraph
    resolver: BuildOrderResolver
    plan: BuildPlan

    @property
    def order(self) -> Tuple[str, ...]:
        return self.plan.order


def build_graph(
    descriptors: Sequence[ModuleDescriptor],
    context: Optional[ConfigurationContext] = None,
    config: Optional[ResolutionConfig] = None,
) -> DependencyGraph:
    """Resolve descriptors and build the project graph.

    Raises:
        ValidationError, DuplicateModuleError, UnknownModuleError
    """
    context = context or ConfigurationContext()
    config = config or ResolutionConfig.default()

    resolved = DescriptorResolver(max_workers=config.max_workers).resolve_all(
        descriptors, context
    )
    builder = DependencyGraphBuilder(strict_dynamic_modules=config.strict_dynamic_modules)
    return builder.build(resolved)


def resolve_project(
    descriptors: Sequence[ModuleDescriptor],
    context: Optional[ConfigurationContext] = None,
    config: Optional[ResolutionConfig] = None,
) -> ProjectResolution:
    """Run the whole pipeline and return graph, resolver and plan.

    Args:
        descriptors: Raw descriptors, one per module.
        context: Active build flags. Defaults to no flags set.
        config: Resolution settings. Defaults to ``ResolutionConfig()``.

    Raises:
        ModuleGraphError: Any structural problem in the module set.
    """
    config = config or ResolutionConfig.default()
    graph = build_graph(descriptors, context, config)
    order_resolver = BuildOrderResolver(graph)
    plan = order_resolver.plan(default_pch_mode=config.default_pch_mode)
    logger.info("Resolved %d module(s)", len(plan))
    return ProjectResolution(graph=graph, resolver=order_resolver, plan=plan)


__all__ = ["ProjectResolution", "build_graph", "resolve_project"]
