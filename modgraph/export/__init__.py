"""Exporters for dependency graphs and build plans."""
