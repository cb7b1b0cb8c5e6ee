"""Argument helpers shared by CLI commands."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from rich.console import Console

from modgraph.config.loader import Project, load_project, load_resolution_config

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_flag(text: str) -> tuple:
    """Parse ``NAME`` or ``NAME=BOOL`` into ``(name, value)``.

    Raises:
        ValueError: If the name is empty or the value is not a boolean word.
    """
    name, sep, raw = text.partition("=")
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid flag '{text}': empty name")
    if not sep:
        return name, True
    value = raw.strip().lower()
    if value in _TRUE:
        return name, True
    if value in _FALSE:
        return name, False
    raise ValueError(f"Invalid flag '{text}': expected a boolean value")


def parse_flags(items: Optional[Iterable[str]]) -> Dict[str, bool]:
    return dict(parse_flag(item) for item in items or ())


def load_from_args(args) -> Project:
    """Load the manifest named on the command line, applying overrides.

    Reads ``args.manifest``, optional ``args.flag`` (repeatable) and
    optional ``args.config`` (settings replacing the manifest's own).
    """
    config_source = getattr(args, "config", None)
    config = load_resolution_config(config_source) if config_source else None
    return load_project(
        args.manifest,
        flag_overrides=parse_flags(getattr(args, "flag", None)),
        config=config,
    )


def make_console() -> Console:
    return Console(soft_wrap=True, highlight=False)
