"""Tests for module descriptor construction and validation."""

from __future__ import annotations

import pytest

from modgraph.descriptor import (
    ConditionalEdge,
    FieldKind,
    ModuleDescriptor,
    PCHUsageMode,
)
from modgraph.errors import ModuleGraphError, ValidationError


def test_descriptor_normalises_sequences_to_tuples() -> None:
    """Lists passed by callers are stored as tuples."""
    descriptor = ModuleDescriptor(
        name="Plugin",
        public_dependencies=["Core"],
        private_include_paths=["Plugin/Private"],
    )

    assert descriptor.public_dependencies == ("Core",)
    assert descriptor.private_include_paths == ("Plugin/Private",)
    assert descriptor.pch_mode is None
    hash(descriptor)


def test_descriptor_coerces_enum_strings() -> None:
    """PCH modes and conditional edge kinds accept their string values."""
    descriptor = ModuleDescriptor(
        name="Plugin",
        pch_mode="use_explicit_or_shared",
        conditional_edges=[("with_live_coding", "private_include_path_module", "LiveCoding")],
    )

    assert descriptor.pch_mode is PCHUsageMode.USE_EXPLICIT_OR_SHARED
    edge = descriptor.conditional_edges[0]
    assert edge == ConditionalEdge(
        "with_live_coding", FieldKind.PRIVATE_INCLUDE_PATH_MODULE, "LiveCoding"
    )


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_name_is_rejected(name: str) -> None:
    with pytest.raises(ValidationError):
        ModuleDescriptor(name=name)


def test_self_dependency_is_rejected() -> None:
    """A module listing itself as a dependency fails at construction."""
    with pytest.raises(ValidationError) as excinfo:
        ModuleDescriptor(name="Core", private_dependencies=["Core"])

    assert excinfo.value.module == "Core"
    assert any("itself" in problem for problem in excinfo.value.problems)


@pytest.mark.parametrize(
    "field_name",
    ["public_dependencies", "dynamically_loaded_modules", "private_include_path_modules"],
)
def test_self_reference_rejected_in_every_module_field(field_name: str) -> None:
    with pytest.raises(ValidationError):
        ModuleDescriptor(name="Plugin", **{field_name: ["Plugin"]})


def test_conditional_self_reference_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ModuleDescriptor(
            name="Plugin",
            conditional_edges=[ConditionalEdge("flag", FieldKind.PRIVATE_DEPENDENCY, "Plugin")],
        )


def test_conditional_path_named_like_module_is_allowed() -> None:
    """Path-valued edges are not module references."""
    descriptor = ModuleDescriptor(
        name="Plugin",
        conditional_edges=[ConditionalEdge("flag", FieldKind.PRIVATE_INCLUDE_PATH, "Plugin")],
    )

    assert len(descriptor.conditional_edges) == 1


def test_duplicate_entry_within_field_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        ModuleDescriptor(name="Plugin", public_include_paths=["Public", "Public"])

    assert "public_include_paths lists 'Public' more than once" in excinfo.value.problems


def test_conflicting_dependency_visibility_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        ModuleDescriptor(
            name="Plugin",
            public_dependencies=["Core"],
            private_dependencies=["Core"],
        )

    assert "public_dependencies and private_dependencies" in str(excinfo.value)


def test_conflicting_include_path_visibility_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ModuleDescriptor(
            name="Plugin",
            public_include_paths=["Shared"],
            private_include_paths=["Shared"],
        )


def test_all_problems_are_reported_together() -> None:
    with pytest.raises(ValidationError) as excinfo:
        ModuleDescriptor(
            name="Plugin",
            public_dependencies=["Plugin", "Core", "Core"],
            private_include_paths=[""],
        )

    assert len(excinfo.value.problems) == 3


def test_unknown_pch_mode_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        ModuleDescriptor(name="Plugin", pch_mode="always")


def test_unknown_conditional_edge_kind_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        ModuleDescriptor(name="Plugin", conditional_edges=[("flag", "linked_library", "Zlib")])


def test_validation_error_is_value_error_and_graph_error() -> None:
    with pytest.raises(ValueError):
        ModuleDescriptor(name="")
    with pytest.raises(ModuleGraphError):
        ModuleDescriptor(name="")


def test_to_dict_round_trips_field_values() -> None:
    descriptor = ModuleDescriptor(
        name="Plugin",
        pch_mode=PCHUsageMode.USE_SHARED,
        public_dependencies=["Core"],
        conditional_edges=[("flag", "public_include_path", "Extra/Public")],
    )

    data = descriptor.to_dict()

    assert data["name"] == "Plugin"
    assert data["pch_mode"] == "use_shared"
    assert data["public_dependencies"] == ["Core"]
    assert data["conditional_edges"] == [
        {"predicate": "flag", "kind": "public_include_path", "value": "Extra/Public"}
    ]
