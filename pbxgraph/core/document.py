"""Document — registry of every reachable node in one project.

Invariants:
    - objects_by_uuid holds exactly the nodes with at least one referrer
    - A UUID maps to at most one node; registering a different node under it raises
    - generate_uuid never hands out the same UUID twice, referenced or not
    - The root object is retained by the document itself, so sweeps never orphan it

Design Decisions:
    - Registration is driven by Node.add_referrer / remove_referrer, not by callers
    - UUIDs are uppercase hex, as in Xcode project files; length comes from Settings
"""

import logging
import uuid as uuid_lib
from typing import Any, TypeVar

from pbxgraph.config import get_settings
from pbxgraph.core.domain_types import ObjectUUID
from pbxgraph.core.errors import DuplicateUUIDError, ErrorContext
from pbxgraph.core.node import Node

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)


class Document:
    """In-memory project document: node registry plus root object."""

    def __init__(self, uuid_length: int | None = None):
        self.uuid_length = uuid_length or get_settings().uuid_length
        self.objects_by_uuid: dict[ObjectUUID, Node] = {}
        self.generated_uuids: set[ObjectUUID] = set()
        self._root_object: Node | None = None

    # --- Object creation ------------------------------------------------------

    def generate_uuid(self) -> ObjectUUID:
        while True:
            candidate = ObjectUUID(uuid_lib.uuid4().hex[: self.uuid_length].upper())
            if candidate not in self.generated_uuids and candidate not in self.objects_by_uuid:
                self.generated_uuids.add(candidate)
                return candidate

    def new(self, node_class: type[N], **attributes: Any) -> N:
        """Create an unreferenced node; it joins the registry once referenced."""
        node = node_class(self, self.generate_uuid())
        for name, value in attributes.items():
            setattr(node, name, value)
        return node

    # --- Registry -------------------------------------------------------------

    def register(self, node: Node) -> None:
        existing = self.objects_by_uuid.get(node.uuid)
        if existing is not None and existing is not node:
            raise DuplicateUUIDError(
                node.uuid, ErrorContext(debug_info={"isa": node.isa}),
            )
        self.objects_by_uuid[node.uuid] = node
        logger.debug(
            "Registered %s %s", node.isa, node.uuid, extra={"object_uuid": node.uuid},
        )

    def unregister(self, node: Node) -> None:
        if self.objects_by_uuid.get(node.uuid) is node:
            del self.objects_by_uuid[node.uuid]
            logger.debug(
                "Unregistered %s %s", node.isa, node.uuid,
                extra={"object_uuid": node.uuid},
            )

    def object_with_uuid(self, uuid: str) -> Node | None:
        return self.objects_by_uuid.get(ObjectUUID(uuid))

    @property
    def objects(self) -> list[Node]:
        return list(self.objects_by_uuid.values())

    # --- Root object ----------------------------------------------------------

    @property
    def root_object(self) -> Node | None:
        return self._root_object

    @root_object.setter
    def root_object(self, node: Node | None) -> None:
        previous = self._root_object
        if node is not None:
            node.add_referrer(self)
        self._root_object = node
        if previous is not None:
            previous.remove_referrer(self)

    def remove_reference(self, target: Node) -> None:
        if self._root_object is target:
            self.root_object = None

    # --- Serialization --------------------------------------------------------

    def to_hash(self) -> dict[str, Any]:
        return {
            "objects": {uuid: node.to_hash() for uuid, node in self.objects_by_uuid.items()},
            "rootObject": self._root_object.uuid if self._root_object else None,
        }

    def to_tree_hash(self) -> dict[str, Any]:
        return self._root_object.to_tree_hash() if self._root_object else {}
