"""JSON export for dependency graphs and build plans."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import networkx as nx

from modgraph.graph.model import DependencyGraph
from modgraph.graph.ops.plan import BuildPlan

logger = logging.getLogger("modgraph.export.json")


def graph_to_dict(graph: DependencyGraph) -> Dict[str, Any]:
    """Node-link representation of ``graph`` plus resolved descriptors."""
    data = nx.readwrite.json_graph.node_link_data(graph.native_graph, edges="edges")
    data["modules"] = [descriptor.to_dict() for descriptor in graph.descriptors()]
    return data


def _write(data: Dict[str, Any], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_graph_json(graph: DependencyGraph, output_path: Path) -> None:
    """Export graph to JSON format.

    Args:
        graph: Dependency graph to export.
        output_path: Output file path.
    """
    logger.info("Exporting graph to JSON: %s", output_path)
    _write(graph_to_dict(graph), output_path)
    logger.info("JSON export completed: %d nodes, %d edges",
                graph.node_count(), graph.edge_count())


def export_plan_json(plan: BuildPlan, output_path: Path) -> None:
    """Export an ordered build plan to JSON format."""
    logger.info("Exporting build plan to JSON: %s", output_path)
    _write(plan.to_dict(), output_path)
    logger.info("JSON export completed: %d steps", len(plan))
