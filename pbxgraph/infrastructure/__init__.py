"""Infrastructure Layer — cross-cutting concerns around the core.

Invariants:
    - Infrastructure depends on pbxgraph.config only, never on core/ graph modules
"""
