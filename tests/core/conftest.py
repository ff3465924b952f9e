"""Core test fixtures — small documents built from plain node classes.

Invariants:
    - Every test gets a fresh Document
    - Nodes here carry one permissive dictionary so tests can exercise any shape
"""

import pytest

from pbxgraph.core.attribute import AttributeDescriptor
from pbxgraph.core.document import Document
from pbxgraph.core.node import Node


class Item(Node):
    isa = "PBXItem"
    simple_attributes = ("name", "path")


class Holder(Node):
    isa = "PBXHolder"
    simple_attributes = ("name",)
    reference_attributes = (AttributeDescriptor(name="references"),)


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def owner(document):
    holder = document.new(Holder, name="owner")
    document.root_object = holder
    return holder


@pytest.fixture
def refs(owner):
    return owner.references


@pytest.fixture
def make_item(document):
    def _make(name: str) -> Item:
        return document.new(Item, name=name)
    return _make


@pytest.fixture
def make_holder(document):
    def _make(name: str) -> Holder:
        return document.new(Holder, name=name)
    return _make
