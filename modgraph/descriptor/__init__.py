"""Module descriptor models and validation."""

from .models import (
    ConditionalEdge,
    FieldKind,
    ModuleDescriptor,
    PCHUsageMode,
    ResolvedDescriptor,
    Visibility,
)
from .validation import MODULE_FIELDS, PATH_FIELDS, SEQUENCE_FIELDS, descriptor_problems

__all__ = [
    "ConditionalEdge",
    "FieldKind",
    "MODULE_FIELDS",
    "ModuleDescriptor",
    "PATH_FIELDS",
    "PCHUsageMode",
    "ResolvedDescriptor",
    "SEQUENCE_FIELDS",
    "Visibility",
    "descriptor_problems",
]
