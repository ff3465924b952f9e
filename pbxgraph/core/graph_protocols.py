"""Graph Protocols — structural contracts between containers and the nodes they hold.

Invariants:
    - Containers depend on these Protocols, never on the concrete Node class
    - Referrer bookkeeping is a multiset: add/remove are counted, not boolean

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - runtime_checkable GraphNode: attribute descriptors use it as the default
      accepted type without importing node.py (breaks the node <-> container cycle)
"""

from typing import Any, Protocol, runtime_checkable

from pbxgraph.core.domain_types import ObjectUUID


@runtime_checkable
class GraphNode(Protocol):
    """Anything a reference container may point at."""
    uuid: ObjectUUID
    isa: str

    def add_referrer(self, referrer: Any) -> None: ...
    def remove_referrer(self, referrer: Any) -> None: ...
    def to_tree_hash(self) -> dict: ...

