"""Object Types — the concrete node classes of a project document.

Invariants:
    - Each class declares its isa, its simple attributes and its reference attributes
    - project_references only accepts a file reference under ProjectRef and a group under ProductGroup
"""

from pbxgraph.core.attribute import AttributeDescriptor
from pbxgraph.core.node import Node


class PBXFileReference(Node):
    isa = "PBXFileReference"
    simple_attributes = ("name", "path", "source_tree")


class PBXGroup(Node):
    isa = "PBXGroup"
    simple_attributes = ("name", "path", "source_tree")


class PBXProject(Node):
    """Root object of a project; links sub-projects through project_references."""

    isa = "PBXProject"
    simple_attributes = ("project_dir_path",)
    reference_attributes = (
        AttributeDescriptor(
            name="project_references",
            classes=(PBXFileReference, PBXGroup),
            classes_by_key={
                "ProjectRef": (PBXFileReference,),
                "ProductGroup": (PBXGroup,),
            },
        ),
    )
