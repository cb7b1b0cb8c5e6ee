"""CLI commands printing build order and propagated include paths."""

from __future__ import annotations

import logging

from modgraph.cli.common import load_from_args, make_console
from modgraph.errors import ModuleGraphError
from modgraph.graph.ops.order import BuildOrderResolver
from modgraph.runtime.api import build_graph

logger = logging.getLogger("modgraph.cli.order")


def order_command(args) -> int:
    """Print the build order, one module per line.

    Args:
        args: Parsed command-line arguments (manifest, flag, config).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        project = load_from_args(args)
        graph = build_graph(project.descriptors, project.context, project.config)
        order = BuildOrderResolver(graph).order()
    except (ModuleGraphError, ValueError) as e:
        logger.error("Order command failed: %s", e)
        return 1

    console = make_console()
    for name in order:
        console.print(name, markup=False)
    return 0


def includes_command(args) -> int:
    """Print include paths for one module.

    By default prints the transitive public include paths exported to
    dependents; with ``--compile`` prints the full search path used to
    compile the module itself.
    """
    try:
        project = load_from_args(args)
        graph = build_graph(project.descriptors, project.context, project.config)
        resolver = BuildOrderResolver(graph)
        if getattr(args, "compile", False):
            paths = resolver.compile_include_paths(args.module)
        else:
            paths = resolver.transitive_public_include_paths(args.module)
    except (ModuleGraphError, ValueError) as e:
        logger.error("Includes command failed: %s", e)
        return 1

    console = make_console()
    for path in paths:
        console.print(path, markup=False)
    return 0
