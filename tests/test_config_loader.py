"""Tests for manifest and settings loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from modgraph.config.loader import load_project, load_resolution_config
from modgraph.config.schema import ResolutionConfig
from modgraph.descriptor import FieldKind, PCHUsageMode
from modgraph.errors import ManifestError, ValidationError


def test_load_fixture_manifest(blueprint_manifest: Path) -> None:
    project = load_project(blueprint_manifest)

    names = [descriptor.name for descriptor in project.descriptors]
    assert names[0] == "Core"
    assert names[-1] == "BlueprintAssist"
    plugin = project.descriptors[-1]
    assert plugin.pch_mode is PCHUsageMode.USE_EXPLICIT_OR_SHARED
    assert plugin.conditional_edges[0].kind is FieldKind.PRIVATE_INCLUDE_PATH_MODULE
    assert project.context.is_set("with_live_coding") is False
    assert project.config.default_pch_mode is PCHUsageMode.USE_SHARED
    assert project.config.max_workers == 2


def test_flag_overrides_layer_over_manifest(blueprint_manifest: Path) -> None:
    project = load_project(blueprint_manifest, flag_overrides={"with_live_coding": True})

    assert project.context.is_set("with_live_coding") is True


def test_explicit_config_replaces_manifest_settings(blueprint_manifest: Path) -> None:
    config = ResolutionConfig(max_workers=8)

    project = load_project(blueprint_manifest, config=config)

    assert project.config is config


def test_load_from_dict_and_inline_strings() -> None:
    data = {"modules": [{"name": "Core"}, {"name": "Engine", "public_dependencies": ["Core"]}]}

    from_dict = load_project(data)
    from_json = load_project(json.dumps(data))
    from_toml = load_project(
        '[[modules]]\nname = "Core"\n\n[[modules]]\nname = "Engine"\n'
        'public_dependencies = ["Core"]\n'
    )

    assert from_dict.descriptors == from_json.descriptors == from_toml.descriptors


def test_load_json_file(tmp_path: Path) -> None:
    path = tmp_path / "project.json"
    path.write_text(json.dumps({"flags": {"a": True}, "modules": [{"name": "Core"}]}))

    project = load_project(path)

    assert project.context.active_flags() == ("a",)


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ManifestError):
        load_project({"modules": [{"name": "Core", "public_deps": ["Engine"]}]})


def test_unknown_enum_values_are_rejected() -> None:
    with pytest.raises(ManifestError):
        load_project(
            {
                "modules": [
                    {
                        "name": "Core",
                        "conditional_edges": [
                            {"predicate": "a", "kind": "linked_library", "value": "x"}
                        ],
                    }
                ]
            }
        )


def test_invalid_module_raises_validation_error() -> None:
    with pytest.raises(ValidationError):
        load_project({"modules": [{"name": "Core", "public_dependencies": ["Core"]}]})


def test_missing_file_is_manifest_error(tmp_path: Path) -> None:
    with pytest.raises(ManifestError):
        load_project(tmp_path / "missing.toml")


def test_malformed_toml_is_manifest_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[[modules]\nname = ")

    with pytest.raises(ManifestError):
        load_project(path)


def test_resolution_config_from_table_or_top_level() -> None:
    nested = load_resolution_config('[resolution]\nmax_workers = 3\n')
    flat = load_resolution_config('{"strict_dynamic_modules": true}')

    assert nested.max_workers == 3
    assert flat.strict_dynamic_modules is True
    assert load_resolution_config(None) == ResolutionConfig.default()


def test_resolution_config_bounds_are_enforced() -> None:
    with pytest.raises(ManifestError):
        load_resolution_config({"max_workers": 0})


def test_inline_toml_starting_with_table_header() -> None:
    project = load_project('[flags]\nwith_live_coding = true\n\n[[modules]]\nname = "Core"\n')

    assert [descriptor.name for descriptor in project.descriptors] == ["Core"]
    assert project.context.is_set("with_live_coding") is True


def test_inline_settings_starting_with_table_header() -> None:
    config = load_resolution_config('[resolution]\ndefault_pch_mode = "use_shared"\n')

    assert config.default_pch_mode is PCHUsageMode.USE_SHARED


def test_existing_path_containing_equals_sign_is_read_as_file(tmp_path: Path) -> None:
    path = tmp_path / "target=editor.toml"
    path.write_text('[[modules]]\nname = "Core"\n', encoding="utf-8")

    project = load_project(str(path))

    assert [descriptor.name for descriptor in project.descriptors] == ["Core"]
