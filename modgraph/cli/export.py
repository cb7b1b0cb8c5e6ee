"""Export command implementation."""

import logging
from pathlib import Path

from modgraph.cli.common import load_from_args
from modgraph.errors import ModuleGraphError
from modgraph.export.json import export_graph_json, export_plan_json
from modgraph.runtime.api import resolve_project

logger = logging.getLogger("modgraph.cli.export")


def export_command(args) -> int:
    """Execute export command.

    Args:
        args: Parsed command-line arguments containing:
            - manifest: Project manifest path
            - output: Output file path
            - format: ``plan`` (ordered build plan) or ``graph``
              (node-link graph with resolved descriptors)

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    output_path = Path(args.output)
    export_format = getattr(args, "format", "plan")

    try:
        project = load_from_args(args)
        result = resolve_project(project.descriptors, project.context, project.config)
    except (ModuleGraphError, ValueError) as e:
        logger.error("Export failed: %s", e)
        return 1

    try:
        if export_format == "graph":
            export_graph_json(result.graph, output_path)
        else:
            export_plan_json(result.plan, output_path)
    except OSError as e:
        logger.error("Cannot write %s: %s", output_path, e)
        return 1
    return 0
