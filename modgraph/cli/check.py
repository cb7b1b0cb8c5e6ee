"""CLI command to validate a project's module graph.

Runs the full pipeline and reports the first structural problem found:
invalid descriptors, duplicate or unknown modules, or a dependency cycle.
Suitable for CI, where a non-zero exit code fails the build.
"""

from __future__ import annotations

import logging

from modgraph.cli.common import load_from_args, make_console
from modgraph.errors import CyclicDependencyError, ModuleGraphError, UnknownModuleError
from modgraph.runtime.api import resolve_project

logger = logging.getLogger("modgraph.cli.check")


def check_command(args) -> int:
    """Execute graph validation.

    Args:
        args: Parsed command-line arguments; ``strict_dynamic`` makes
            undeclared dynamically loaded modules an error.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        project = load_from_args(args)
        config = project.config
        if getattr(args, "strict_dynamic", False):
            config = config.model_copy(update={"strict_dynamic_modules": True})
        result = resolve_project(project.descriptors, project.context, config)
    except CyclicDependencyError as e:
        logger.error("Dependency cycle: %s", " -> ".join(e.cycle + e.cycle[:1]))
        return 1
    except UnknownModuleError as e:
        for item in e.missing:
            logger.error("Unknown module reference: %s", item)
        return 1
    except (ModuleGraphError, ValueError) as e:
        logger.error("Check failed: %s", e)
        return 1

    make_console().print(
        f"OK: {result.graph.node_count()} module(s), "
        f"{result.graph.edge_count()} dependency edge(s)",
        markup=False,
    )
    return 0
