"""Construction-time checks shared by raw and resolved descriptors."""

from __future__ import annotations

from typing import Any, List, Tuple

PATH_FIELDS: Tuple[str, ...] = ("public_include_paths", "private_include_paths")

MODULE_FIELDS: Tuple[str, ...] = (
    "public_dependencies",
    "private_dependencies",
    "private_include_path_modules",
    "dynamically_loaded_modules",
)

SEQUENCE_FIELDS: Tuple[str, ...] = PATH_FIELDS + MODULE_FIELDS

# (public field, private field) pairs where one entry may not appear in both.
VISIBILITY_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("public_dependencies", "private_dependencies"),
    ("public_include_paths", "private_include_paths"),
)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def descriptor_problems(descriptor: Any) -> List[str]:
    """Return every invariant violation found in ``descriptor``.

    An empty list means the descriptor is valid.
    """
    problems: List[str] = []
    name = descriptor.name

    if _is_blank(name):
        problems.append("module name must be a non-empty string")

    for attr in SEQUENCE_FIELDS:
        seen = set()
        for entry in getattr(descriptor, attr):
            if _is_blank(entry):
                problems.append(f"{attr} contains an empty entry")
                continue
            if entry in seen:
                problems.append(f"{attr} lists '{entry}' more than once")
            seen.add(entry)

    for attr in MODULE_FIELDS:
        if name and name in getattr(descriptor, attr):
            problems.append(f"{attr} references the module itself")

    for public_attr, private_attr in VISIBILITY_PAIRS:
        public = set(getattr(descriptor, public_attr))
        for entry in getattr(descriptor, private_attr):
            if entry in public:
                problems.append(
                    f"'{entry}' is declared in both {public_attr} and {private_attr}"
                )

    for edge in getattr(descriptor, "conditional_edges", ()):
        if _is_blank(edge.predicate):
            problems.append("conditional edge has an empty predicate")
        if _is_blank(edge.value):
            problems.append(f"conditional {edge.kind.value} edge has an empty value")
        elif edge.kind.is_module_reference and edge.value == name:
            problems.append(
                f"conditional {edge.kind.value} edge references the module itself"
            )

    return problems


__all__ = [
    "MODULE_FIELDS",
    "PATH_FIELDS",
    "SEQUENCE_FIELDS",
    "VISIBILITY_PAIRS",
    "descriptor_problems",
]
