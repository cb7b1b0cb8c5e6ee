"""Configuration context for one build invocation.

The context is the explicit, immutable replacement for process-wide
build-target state: it captures which named build flags are active and is
passed by value to the resolver. It owns no resources and contains no
business logic beyond flag lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple


@dataclass(frozen=True)
class ConfigurationContext:
    """Set of build flags active for a single resolution.

    Args:
        flags: Mapping from flag name to whether it is enabled. Flags that
            are absent are treated as disabled.

    Raises:
        TypeError: If a flag name is not a string or a value is not a bool.
    """

    flags: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        flags = dict(self.flags)
        for name, value in flags.items():
            if not isinstance(name, str):
                raise TypeError(f"Flag names must be strings, got {name!r}")
            if not isinstance(value, bool):
                raise TypeError(f"Flag {name!r} must be a bool, got {value!r}")
        frozen = MappingProxyType(flags)
        object.__setattr__(self, "flags", frozen)

    def __hash__(self) -> int:
        return hash(frozenset(self.flags.items()))

    @classmethod
    def from_active(cls, names: Iterable[str]) -> "ConfigurationContext":
        """Build a context where exactly ``names`` are enabled."""
        return cls({name: True for name in names})

    def is_set(self, flag: str) -> bool:
        """Return True when ``flag`` is explicitly enabled.

        Unknown flags are inactive rather than an error, matching the
        "feature not present" default of optional build capabilities.
        """
        return self.flags.get(flag, False)

    def active_flags(self) -> Tuple[str, ...]:
        """Enabled flag names in sorted order."""
        return tuple(sorted(name for name, value in self.flags.items() if value))

    def with_overrides(self, overrides: Mapping[str, bool]) -> "ConfigurationContext":
        """Return a new context with ``overrides`` layered on top."""
        merged = dict(self.flags)
        merged.update(overrides)
        return ConfigurationContext(merged)


__all__ = ["ConfigurationContext"]
