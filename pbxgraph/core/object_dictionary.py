"""Object Dictionary — keyed references from one owner node to other nodes.

Invariants:
    - For every entry (key -> node), the owner appears among node.referrers
    - Releasing an entry removes exactly one owner occurrence from the node's referrers
    - Validation runs before any mutation: a rejected set() changes nothing
    - Storage is private; every mutator routes through set() or delete()

Design Decisions:
    - Composition over dict subclass: no native mutator can bypass referrer bookkeeping
    - Overwrite registers the new value before releasing the old one, so re-setting the
      same node never transiently orphans it
    - set(key, None) removes the key: the flat representation only lists live entries
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pbxgraph.core.attribute import AttributeDescriptor
from pbxgraph.core.graph_protocols import GraphNode

logger = logging.getLogger(__name__)


class ObjectDictionary:
    """Reference-counted mapping owned by exactly one node."""

    def __init__(self, attribute: AttributeDescriptor, owner: GraphNode):
        self._attribute = attribute
        self._owner = owner
        self._entries: dict[str, GraphNode] = {}

    @property
    def attribute(self) -> AttributeDescriptor:
        """The descriptor that generated the dictionary."""
        return self._attribute

    @property
    def owner(self) -> GraphNode:
        """The node that owns the dictionary."""
        return self._owner

    # --- Notification enabled mutators ----------------------------------------

    def set(self, key: str, value: GraphNode | None) -> None:
        """Associate `value` with `key`, or drop `key` when value is None."""
        self._attribute.validate_key(key)
        if value is None:
            self.delete(key)
            return
        self._attribute.validate(value, key)

        previous = self._entries.get(key)
        value.add_referrer(self._owner)
        self._entries[key] = value
        logger.debug(
            "Set %s[%s] -> %s", self._attribute.name, key, value.uuid,
            extra=self._log_extra(key, value),
        )
        if previous is not None:
            self._release(key, previous)

    def delete(self, key: str) -> GraphNode | None:
        """Remove `key` and release its value. Absent keys are a no-op."""
        value = self._entries.pop(key, None)
        if value is not None:
            self._release(key, value)
        return value

    def __setitem__(self, key: str, value: GraphNode | None) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def pop(self, key: str, default: Any = None) -> Any:
        if key not in self._entries:
            return default
        return self.delete(key)

    def update(
        self,
        other: Mapping[str, GraphNode | None] | Iterable[tuple[str, GraphNode | None]] = (),
        **kwargs: GraphNode | None,
    ) -> None:
        """Set every pair of `other` and `kwargs`, validating all values first."""
        pairs = list(other.items() if isinstance(other, Mapping) else other)
        pairs.extend(kwargs.items())
        for key, value in pairs:
            self._attribute.validate_key(key)
            if value is not None:
                self._attribute.validate(value, key)
        for key, value in pairs:
            self.set(key, value)

    def clear(self) -> None:
        for key in list(self._entries):
            self.delete(key)

    # --- Read paths (no side effects) -----------------------------------------

    def get(self, key: str, default: GraphNode | None = None) -> GraphNode | None:
        return self._entries.get(key, default)

    def __getitem__(self, key: str) -> GraphNode | None:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def values(self) -> list[GraphNode]:
        return list(self._entries.values())

    def items(self) -> list[tuple[str, GraphNode]]:
        return list(self._entries.items())

    def __repr__(self) -> str:
        entries = ", ".join(f"{k!r}: {v.uuid}" for k, v in self._entries.items())
        return f"<ObjectDictionary {self._attribute.name} {{{entries}}}>"

    # --- Serialization --------------------------------------------------------

    def to_hash(self) -> dict[str, str]:
        """Plist view: each node replaced by its UUID."""
        return {key: node.uuid for key, node in self._entries.items()}

    def to_tree_hash(self) -> dict[str, Any]:
        """Cascade view: each node replaced by its own tree, without UUIDs."""
        return {key: node.to_tree_hash() for key, node in self._entries.items()}

    # --- Graph maintenance ----------------------------------------------------

    def remove_reference(self, target: GraphNode) -> None:
        """Drop every entry pointing at `target` (compared by identity)."""
        for key, node in list(self._entries.items()):
            if node is target:
                self.set(key, None)

    def add_referrer(self, referrer: Any) -> None:
        """Propagate a new referrer of the owner to every held node."""
        for node in list(self._entries.values()):
            node.add_referrer(referrer)

    def remove_referrer(self, referrer: Any) -> None:
        """Propagate a lost referrer of the owner to every held node."""
        for node in list(self._entries.values()):
            node.remove_referrer(referrer)

    # --- Helpers --------------------------------------------------------------

    def _release(self, key: str, value: GraphNode) -> None:
        value.remove_referrer(self._owner)
        logger.debug(
            "Released %s[%s] -> %s", self._attribute.name, key, value.uuid,
            extra=self._log_extra(key, value),
        )

    def _log_extra(self, key: str, value: GraphNode) -> dict:
        return {
            "owner_uuid": self._owner.uuid,
            "object_uuid": value.uuid,
            "attribute": self._attribute.name,
            "key": key,
        }
