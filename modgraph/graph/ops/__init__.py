"""Operations and algorithms built on top of the dependency graph."""

from .order import BuildOrderResolver
from .plan import BuildPlan, BuildStep
from .traversal import Traversal, depth_first

__all__ = [
    "BuildOrderResolver",
    "BuildPlan",
    "BuildStep",
    "Traversal",
    "depth_first",
]
