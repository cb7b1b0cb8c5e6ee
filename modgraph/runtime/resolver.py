"""Descriptor resolution against a configuration context.

Resolution folds every conditional edge whose predicate is active into the
field named by its kind and drops the rest. It is a pure function of
(descriptor, context): the input is never mutated and resolving twice
produces field-equal results.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, List, Sequence, Tuple

from modgraph.descriptor import (
    SEQUENCE_FIELDS,
    ConditionalEdge,
    ModuleDescriptor,
    ResolvedDescriptor,
)
from modgraph.runtime.context import ConfigurationContext

logger = logging.getLogger("modgraph.runtime.resolver")


class DescriptorResolver:
    """Expand raw module descriptors into flag-resolved descriptors.

    Args:
        max_workers: Worker threads used by ``resolve_all``. ``1`` resolves
            sequentially on the calling thread.
    """

    def __init__(self, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    def resolve(
        self, descriptor: ModuleDescriptor, context: ConfigurationContext
    ) -> ResolvedDescriptor:
        """Resolve one descriptor for ``context``.

        Args:
            descriptor: Raw descriptor to expand.
            context: Active build flags.

        Returns:
            ResolvedDescriptor with true-predicate edges merged in.

        Raises:
            ValidationError: If a merged entry produces conflicting
                visibility (for example a conditional private dependency
                that is already a public one).
        """
        fields: Dict[str, List[str]] = {
            attr: list(getattr(descriptor, attr)) for attr in SEQUENCE_FIELDS
        }
        applied: List[ConditionalEdge] = []

        for edge in descriptor.conditional_edges:
            if not context.is_set(edge.predicate):
                logger.debug(
                    "Skipping %s edge '%s' on %s: flag '%s' not set",
                    edge.kind.value,
                    edge.value,
                    descriptor.name,
                    edge.predicate,
                )
                continue
            target = fields[edge.kind.attribute]
            if edge.value not in target:
                target.append(edge.value)
            applied.append(edge)

        return ResolvedDescriptor(
            name=descriptor.name,
            pch_mode=descriptor.pch_mode,
            applied_edges=tuple(applied),
            **{attr: tuple(values) for attr, values in fields.items()},
        )

    def resolve_all(
        self,
        descriptors: Sequence[ModuleDescriptor],
        context: ConfigurationContext,
    ) -> Tuple[ResolvedDescriptor, ...]:
        """Resolve a set of descriptors, preserving input order.

        Descriptors are independent of each other, so with
        ``max_workers > 1`` they are resolved on a thread pool. The call
        returns only once every descriptor has been resolved; when several
        fail, the error of the earliest descriptor in input order is raised.
        """
        descriptors = list(descriptors)
        if self.max_workers == 1 or len(descriptors) < 2:
            resolved = tuple(self.resolve(d, context) for d in descriptors)
        else:
            with ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="Resolve"
            ) as executor:
                futures: List[Future] = [
                    executor.submit(self.resolve, descriptor, context)
                    for descriptor in descriptors
                ]
            # Leaving the executor waits for every future, so no partial
            # set is ever returned.
            resolved = tuple(future.result() for future in futures)

        logger.debug(
            "Resolved %d descriptor(s) with active flags: %s",
            len(resolved),
            ", ".join(context.active_flags()) or "<none>",
        )
        return resolved


__all__ = ["DescriptorResolver"]
