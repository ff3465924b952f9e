"""Core Layer — in-memory object graph, no IO.

Invariants:
    - No module in core/ imports from infrastructure/
    - Every reference edge between nodes is mirrored by a referrer record on the target

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
