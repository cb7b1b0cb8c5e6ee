"""Command implementations for the modgraph CLI."""
