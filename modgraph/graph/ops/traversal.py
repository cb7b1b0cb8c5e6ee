"""Depth-first traversal with cycle detection.

This walker is the single place where module cycles are detected. Build
ordering and include-path propagation both run through it, differing only
in the successor function they pass.

The walk is iterative so that long dependency chains are not limited by
the interpreter's recursion depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from modgraph.errors import CyclicDependencyError

SuccessorFn = Callable[[str], Iterable[str]]

_ACTIVE = 1
_DONE = 2


@dataclass(frozen=True)
class Traversal:
    """Visit orders produced by ``depth_first``.

    Attributes:
        preorder: Nodes in the order they were first entered.
        postorder: Nodes in the order they were finished. Every node
            appears after all nodes reachable from it.
    """

    preorder: Tuple[str, ...]
    postorder: Tuple[str, ...]


def depth_first(roots: Iterable[str], successors: SuccessorFn) -> Traversal:
    """Walk every node reachable from ``roots``.

    Roots are visited in the given order and successors in the order the
    successor function yields them, so the result is deterministic.

    Args:
        roots: Start nodes.
        successors: Returns the outgoing neighbours of a node.

    Raises:
        CyclicDependencyError: If a node is reached again while it is still
            on the active path. The error carries that path segment.
    """
    state: Dict[str, int] = {}
    preorder: List[str] = []
    postorder: List[str] = []

    for root in roots:
        if root in state:
            continue

        path: List[str] = [root]
        stack: List[Tuple[str, Iterator[str]]] = [(root, iter(successors(root)))]
        state[root] = _ACTIVE
        preorder.append(root)

        while stack:
            node, children = stack[-1]
            for child in children:
                mark = state.get(child)
                if mark is None:
                    state[child] = _ACTIVE
                    preorder.append(child)
                    path.append(child)
                    stack.append((child, iter(successors(child))))
                    break
                if mark == _ACTIVE:
                    raise CyclicDependencyError(path[path.index(child):])
            else:
                stack.pop()
                path.pop()
                state[node] = _DONE
                postorder.append(node)

    return Traversal(preorder=tuple(preorder), postorder=tuple(postorder))


__all__ = ["SuccessorFn", "Traversal", "depth_first"]
