"""Node — base class of every object stored in a project document.

Invariants:
    - referrers is a multiset: one entry per live reference edge, in insertion order
    - A node is registered in its document exactly while it has at least one referrer
    - Each declared reference attribute is materialized as one ObjectDictionary owned by the node
    - Equality is identity: two nodes with equal attributes are still distinct objects

Design Decisions:
    - Attributes declared as class-level tuples: subclasses list their fields, the base
      class builds storage (ADR: declarative schema, no metaclass)
    - Document registration driven by referrer count: unreachable objects drop out of
      the serialized document automatically
"""

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from pbxgraph.core.attribute import AttributeDescriptor
from pbxgraph.core.domain_types import ISA_PREFIX, ObjectUUID
from pbxgraph.core.object_dictionary import ObjectDictionary

if TYPE_CHECKING:
    from pbxgraph.core.document import Document

logger = logging.getLogger(__name__)


class Node:
    """An identified element of the document graph."""

    isa: ClassVar[str] = "PBXObject"
    simple_attributes: ClassVar[tuple[str, ...]] = ()
    reference_attributes: ClassVar[tuple[AttributeDescriptor, ...]] = ()

    def __init__(self, document: "Document", uuid: ObjectUUID):
        self.document = document
        self.uuid = uuid
        self.referrers: list[Any] = []
        self._simple: dict[str, str | None] = {name: None for name in self.simple_attributes}
        self._dictionaries: dict[str, ObjectDictionary] = {
            attribute.name: ObjectDictionary(attribute, self)
            for attribute in self.reference_attributes
        }

    # --- Attribute access -----------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for declared attributes.
        simple = self.__dict__.get("_simple", {})
        if name in simple:
            return simple[name]
        dictionaries = self.__dict__.get("_dictionaries", {})
        if name in dictionaries:
            return dictionaries[name]
        raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.simple_attributes:
            self._simple[name] = value
        elif name in self.__dict__.get("_dictionaries", {}):
            raise AttributeError(f"'{name}' is a reference dictionary; mutate it in place")
        else:
            super().__setattr__(name, value)

    @property
    def display_name(self) -> str:
        """Name shown in tree views: name, then path basename, then isa."""
        name = self._simple.get("name")
        if name:
            return name
        basename = (self._simple.get("path") or "").rstrip("/").rsplit("/", 1)[-1]
        if basename:
            return basename
        return self.isa.removeprefix(ISA_PREFIX)

    # --- Referrers ------------------------------------------------------------

    def add_referrer(self, referrer: Any) -> None:
        if self.document.object_with_uuid(self.uuid) is not self:
            self.document.register(self)
        self.referrers.append(referrer)

    def remove_referrer(self, referrer: Any) -> None:
        """Drop one occurrence of `referrer`; unregister once unreferenced."""
        for index, existing in enumerate(self.referrers):
            if existing is referrer:
                del self.referrers[index]
                break
        else:
            logger.debug(
                "remove_referrer on %s ignored: not a referrer", self.uuid,
                extra={"object_uuid": self.uuid},
            )
            return
        if not self.referrers:
            self.document.unregister(self)

    def remove_reference(self, target: "Node") -> None:
        """Forget every reference this node holds to `target`."""
        for dictionary in self._dictionaries.values():
            dictionary.remove_reference(target)

    def remove_from_project(self) -> None:
        """Excise the node: referrers forget it, it forgets its children."""
        for referrer in _unique(self.referrers):
            referrer.remove_reference(self)
        # Referrers propagated by fan-out hold no entry to sweep.
        self.referrers.clear()
        for dictionary in self._dictionaries.values():
            dictionary.clear()
        self.document.unregister(self)
        logger.info(
            "Removed %s %s from project", self.isa, self.uuid,
            extra={"object_uuid": self.uuid},
        )

    # --- Serialization --------------------------------------------------------

    def to_hash(self) -> dict[str, Any]:
        """Plist view of the node: references replaced by UUIDs."""
        result: dict[str, Any] = {"isa": self.isa}
        for name, value in self._simple.items():
            if value is not None:
                result[_camel_case(name)] = value
        for dictionary in self._dictionaries.values():
            result[dictionary.attribute.plist_name] = dictionary.to_hash()
        return result

    def to_tree_hash(self) -> dict[str, Any]:
        """Cascade view of the node: references inlined, no UUIDs."""
        result: dict[str, Any] = {"displayName": self.display_name, "isa": self.isa}
        for name, value in self._simple.items():
            if value is not None:
                result[_camel_case(name)] = value
        for dictionary in self._dictionaries.values():
            result[dictionary.attribute.plist_name] = dictionary.to_tree_hash()
        return result

    def __repr__(self) -> str:
        return f"<{self.isa} name=`{self.display_name}` UUID=`{self.uuid}`>"


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _unique(items: list[Any]) -> list[Any]:
    seen: list[Any] = []
    for item in items:
        if not any(item is s for s in seen):
            seen.append(item)
    return seen
