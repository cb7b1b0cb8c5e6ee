"""Helpers for loading project manifests and settings from TOML/JSON.

Both entry points accept the same source forms:

* None -> empty mapping (defaults)
* dict -> treated as already-parsed data
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import pydantic

from modgraph.config.schema import ProjectManifest, ResolutionConfig
from modgraph.descriptor import ModuleDescriptor
from modgraph.errors import ManifestError
from modgraph.runtime.context import ConfigurationContext

logger = logging.getLogger("modgraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


@dataclass(frozen=True)
class Project:
    """Everything the resolution pipeline needs for one invocation."""

    descriptors: Tuple[ModuleDescriptor, ...]
    context: ConfigurationContext
    config: ResolutionConfig


def _existing_file(source: Union[str, Path]) -> Optional[Path]:
    path = Path(source)
    try:
        return path if path.is_file() else None
    except (OSError, ValueError):
        # Inline text can exceed the platform path length.
        return None


def _looks_inline(text: str) -> bool:
    stripped = text.lstrip()
    return "\n" in text or "=" in text or stripped.startswith(("{", "["))


def _parse(text: str, fmt: str, origin: str) -> Dict[str, Any]:
    try:
        data = json.loads(text) if fmt == "json" else tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ManifestError(f"Cannot parse {fmt.upper()} from {origin}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError("Top-level configuration must be a mapping/dict")
    return data


def _read_source(source: ConfigSource) -> Dict[str, Any]:
    """Turn any supported source into a plain mapping."""
    if source is None:
        logger.debug("No source provided; using defaults")
        return {}

    if isinstance(source, dict):
        logger.debug("Loading from provided dict")
        return source

    if not isinstance(source, (str, Path)):
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    path = _existing_file(source)
    if path is None and isinstance(source, str) and _looks_inline(source):
        # TOML documents open with "[table]" headers, so only "{" means JSON.
        fmt = "json" if source.lstrip().startswith("{") else "toml"
        logger.info("Loading configuration from inline %s string", fmt)
        return _parse(source, fmt, "inline string")

    if path is None:
        path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read {path}: {exc}") from exc
    suffix = path.suffix.lower()
    if suffix in {".toml", ".tml"}:
        fmt = "toml"
    elif suffix == ".json":
        fmt = "json"
    else:
        # Fallback: guess from content
        fmt = "json" if text.lstrip().startswith("{") else "toml"
    logger.info("Loading from file: %s (fmt=%s)", path, fmt)
    return _parse(text, fmt, str(path))


def load_resolution_config(source: ConfigSource) -> ResolutionConfig:
    """Load ResolutionConfig from a settings source.

    The source may either hold the settings at top level or under a
    ``[resolution]`` table, so a project manifest can be reused.

    Raises:
        ManifestError: If the source cannot be read or is invalid.
    """
    data = _read_source(source)
    if isinstance(data.get("resolution"), dict):
        data = data["resolution"]
    try:
        return ResolutionConfig.from_dict(data)
    except pydantic.ValidationError as exc:
        raise ManifestError(f"Invalid resolution settings: {exc}") from exc


def load_project(
    source: ConfigSource,
    *,
    flag_overrides: Optional[Mapping[str, bool]] = None,
    config: Optional[ResolutionConfig] = None,
) -> Project:
    """Load a project manifest into descriptors, context and settings.

    Args:
        source: Manifest source (see module docstring).
        flag_overrides: Flags layered over the manifest's ``[flags]``.
        config: Settings replacing the manifest's ``[resolution]`` table.

    Returns:
        Project with raw descriptors in manifest order.

    Raises:
        ManifestError: If the manifest cannot be read or does not match
            the schema.
        ValidationError: If a declared module violates descriptor rules.
    """
    data = _read_source(source)
    try:
        manifest = ProjectManifest.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ManifestError(f"Invalid project manifest: {exc}") from exc

    context = manifest.context()
    if flag_overrides:
        context = context.with_overrides(flag_overrides)

    descriptors = tuple(manifest.descriptors())
    logger.info(
        "Loaded %d module(s); active flags: %s",
        len(descriptors),
        ", ".join(context.active_flags()) or "<none>",
    )
    return Project(
        descriptors=descriptors,
        context=context,
        config=config or manifest.resolution,
    )


__all__ = ["ConfigSource", "Project", "load_project", "load_resolution_config"]
