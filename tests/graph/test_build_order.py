"""Tests for build ordering and cycle detection."""

from __future__ import annotations

import pytest

from modgraph.descriptor import ResolvedDescriptor
from modgraph.errors import CyclicDependencyError
from modgraph.graph.builder import DependencyGraphBuilder
from modgraph.graph.model import DependencyGraph
from modgraph.graph.ops.order import BuildOrderResolver


def _graph(*modules: ResolvedDescriptor) -> DependencyGraph:
    return DependencyGraphBuilder().build(modules)


def _module(name: str, public=(), private=(), **fields) -> ResolvedDescriptor:
    return ResolvedDescriptor(
        name=name, public_dependencies=public, private_dependencies=private, **fields
    )


def _assert_topological(graph: DependencyGraph, order: list) -> None:
    position = {name: index for index, name in enumerate(order)}
    assert sorted(order) == sorted(graph.names)
    for source, target, _ in graph.edges():
        assert position[target] < position[source], f"{target} must precede {source}"


def test_dependencies_precede_dependents() -> None:
    graph = _graph(
        _module("Plugin", public=["Core"], private=["Engine", "Slate"]),
        _module("Slate", public=["SlateCore"]),
        _module("Engine", public=["Core"]),
        _module("SlateCore", public=["Core"]),
        _module("Core"),
    )

    order = BuildOrderResolver(graph).order()

    _assert_topological(graph, order)
    assert order == ["Core", "Engine", "SlateCore", "Slate", "Plugin"]


def test_order_is_valid_on_larger_acyclic_graph() -> None:
    modules = []
    for index in range(60):
        public = [f"M{dep}" for dep in range(index) if (index + dep) % 7 == 0]
        private = [f"M{dep}" for dep in range(index) if (index * dep) % 11 == 1]
        private = [dep for dep in private if dep not in public]
        modules.append(_module(f"M{index}", public=public, private=private))
    graph = _graph(*reversed(modules))

    _assert_topological(graph, BuildOrderResolver(graph).order())


def test_unconstrained_modules_keep_input_order() -> None:
    graph = _graph(_module("C"), _module("A"), _module("B"))

    assert BuildOrderResolver(graph).order() == ["C", "A", "B"]


def test_order_is_deterministic_across_runs() -> None:
    modules = [
        _module("Plugin", private=["Engine", "Json"]),
        _module("Json", public=["Core"]),
        _module("Engine", public=["Core"], private=["Json"]),
        _module("Core"),
        _module("Tools"),
    ]

    orders = {tuple(BuildOrderResolver(_graph(*modules)).order()) for _ in range(10)}

    assert len(orders) == 1


def test_three_module_cycle_reports_full_path() -> None:
    """A -> B -> C -> A fails with the cycle [A, B, C] or a rotation of it."""
    graph = _graph(
        _module("A", public=["B"]),
        _module("B", private=["C"]),
        _module("C", public=["A"]),
    )

    with pytest.raises(CyclicDependencyError) as excinfo:
        BuildOrderResolver(graph).order()

    cycle = excinfo.value.cycle
    rotations = [["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"]]
    assert cycle in rotations
    assert "A -> B -> C -> A" in str(excinfo.value)


def test_cycle_reported_excludes_acyclic_prefix() -> None:
    graph = _graph(
        _module("Root", public=["A"]),
        _module("A", public=["B"]),
        _module("B", public=["A"]),
    )

    with pytest.raises(CyclicDependencyError) as excinfo:
        BuildOrderResolver(graph).order()

    assert excinfo.value.cycle == ["A", "B"]


def test_dynamically_loaded_modules_never_form_cycles() -> None:
    graph = _graph(
        _module("Core", dynamically_loaded_modules=["Plugin"]),
        _module("Plugin", public=["Core"]),
    )

    assert BuildOrderResolver(graph).order() == ["Core", "Plugin"]


def test_include_path_modules_do_not_constrain_order() -> None:
    graph = _graph(
        _module("Plugin", private_include_path_modules=["LiveCoding"]),
        _module("LiveCoding"),
    )

    assert BuildOrderResolver(graph).order() == ["Plugin", "LiveCoding"]


def test_long_chain_does_not_hit_recursion_limit() -> None:
    depth = 5000
    modules = [_module("M0")] + [
        _module(f"M{index}", public=[f"M{index - 1}"]) for index in range(1, depth)
    ]
    graph = _graph(*reversed(modules))

    order = BuildOrderResolver(graph).order()

    assert order[0] == "M0"
    assert order[-1] == f"M{depth - 1}"
