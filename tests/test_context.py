"""Tests for the configuration context."""

from __future__ import annotations

import pytest

from modgraph.runtime.context import ConfigurationContext


def test_unknown_flag_is_inactive() -> None:
    context = ConfigurationContext({"with_live_coding": True})

    assert context.is_set("with_live_coding") is True
    assert context.is_set("never_declared") is False


def test_explicitly_disabled_flag_is_inactive() -> None:
    context = ConfigurationContext({"with_editor": False})

    assert context.is_set("with_editor") is False
    assert context.active_flags() == ()


def test_context_is_immutable() -> None:
    source = {"a": True}
    context = ConfigurationContext(source)
    source["a"] = False

    assert context.is_set("a") is True
    with pytest.raises(TypeError):
        context.flags["b"] = True  # type: ignore[index]


def test_with_overrides_returns_new_context() -> None:
    base = ConfigurationContext.from_active(["a", "b"])
    layered = base.with_overrides({"b": False, "c": True})

    assert base.active_flags() == ("a", "b")
    assert layered.active_flags() == ("a", "c")


def test_equal_contexts_hash_equal() -> None:
    first = ConfigurationContext({"a": True, "b": False})
    second = ConfigurationContext({"b": False, "a": True})

    assert first == second
    assert hash(first) == hash(second)


@pytest.mark.parametrize("value", ["false", 0, None])
def test_non_bool_flag_values_are_rejected(value: object) -> None:
    with pytest.raises(TypeError):
        ConfigurationContext({"with_live_coding": value})  # type: ignore[dict-item]


def test_overrides_are_checked_too() -> None:
    with pytest.raises(TypeError):
        ConfigurationContext().with_overrides({"with_editor": "yes"})  # type: ignore[dict-item]
