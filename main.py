#!/usr/bin/env python3
"""Modgraph - Module Dependency Resolution

Resolves per-module build descriptors into a deterministic build plan:
flag-gated entries are applied, the project graph is validated, and
modules are ordered so dependencies build before their dependents.

Usage:
    modgraph order <manifest> [--flag NAME[=BOOL]] [-c CONFIG]
    modgraph includes <manifest> <module> [--compile]
    modgraph check <manifest> [--strict-dynamic]
    modgraph export <manifest> -o <output> [--format plan|graph]

Architecture:
- descriptor/: Module descriptor models and validation
- runtime/: Configuration context, descriptor resolver, pipeline API
- graph/: Graph builder, model, ordering and build plan
- config/: Pydantic settings and manifest loader
- export/: JSON exporters
"""

import sys

from modgraph.main import main

if __name__ == "__main__":
    sys.exit(main())
