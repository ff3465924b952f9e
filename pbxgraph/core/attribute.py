"""Attribute Descriptor — declares and validates one reference attribute of a node class.

Invariants:
    - A descriptor is immutable once built: frozen pydantic model, read-only classes_by_key
    - validate() raises AttributeValidationError and never mutates anything
    - Empty `classes` accepts any GraphNode; `classes_by_key` narrows specific keys further

Design Decisions:
    - Pydantic model over hand-written __init__: field validation of the declaration itself
    - Per-key classes model the references-by-keys shape (ProjectRef -> file, ProductGroup -> group)
"""

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pbxgraph.core.errors import AttributeValidationError, ErrorContext
from pbxgraph.core.graph_protocols import GraphNode

logger = logging.getLogger(__name__)

_SNAKE_CASE = re.compile(r"^[a-z][a-z0-9_]*$")


class AttributeDescriptor(BaseModel):
    """Declaration of a reference attribute bound to one container role."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    classes: tuple[type, ...] = ()
    classes_by_key: Mapping[str, tuple[type, ...]] = Field(
        default_factory=lambda: MappingProxyType({}),
    )

    @field_validator("name")
    @classmethod
    def check_snake_case(cls, v: str) -> str:
        if not _SNAKE_CASE.match(v):
            raise ValueError(f"attribute name must be snake_case, got '{v}'")
        return v

    @field_validator("classes_by_key")
    @classmethod
    def freeze_classes_by_key(
        cls, v: Mapping[str, tuple[type, ...]],
    ) -> Mapping[str, tuple[type, ...]]:
        return MappingProxyType(dict(v))

    @property
    def plist_name(self) -> str:
        """Camel-cased key used when the owner is serialized."""
        head, *rest = self.name.split("_")
        return head + "".join(part.capitalize() for part in rest)

    def validate_key(self, key: object) -> None:
        if not isinstance(key, str):
            raise self._reject(
                f"Key for '{self.name}' must be a string, got {type(key).__name__}",
                None, key=None,
            )

    def validate(self, value: object, key: str | None = None) -> None:
        """Raise AttributeValidationError if `value` may not be stored under `key`."""
        if not isinstance(value, GraphNode):
            raise self._reject(
                f"'{self.name}' only holds graph objects, got {type(value).__name__}",
                None, key,
            )
        if self.classes and not isinstance(value, self.classes):
            raise self._reject(
                f"'{self.name}' does not accept {value.isa}"
                f" (expected {_class_names(self.classes)})",
                value.isa, key,
            )
        allowed = self.classes_by_key.get(key) if key is not None else None
        if allowed and not isinstance(value, allowed):
            raise self._reject(
                f"'{self.name}[{key}]' does not accept {value.isa}"
                f" (expected {_class_names(allowed)})",
                value.isa, key,
            )

    def _reject(
        self, message: str, value_isa: str | None, key: str | None,
    ) -> AttributeValidationError:
        logger.warning(
            message,
            extra={"attribute": self.name, "key": key, "error_code": "VALIDATION_ERROR"},
        )
        return AttributeValidationError(
            message, self.name, value_isa,
            ErrorContext(attribute=self.name, key=key),
        )


def _class_names(classes: tuple[type, ...]) -> str:
    return ", ".join(getattr(c, "isa", c.__name__) for c in classes)
