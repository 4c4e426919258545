# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""The type-introspection boundary consumed by the skeleton builder.

The builder never inspects raw type metadata. Everything it needs to know
about a type is asked through a :class:`TypeResolver`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from jsonskel.model.entities import CompositeTypeDef
from jsonskel.model.types import (
    ArrayTypeRef,
    FieldDef,
    JsonScalar,
    ListTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeRef,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class NotFound:
    """Explicit result of a lookup that found no composite type definition.

    Attributes:
        type_name: Presentable name of the type that could not be resolved.
    """

    type_name: str


class TypeResolver(Protocol):
    """Answers the type questions the skeleton builder asks while recursing."""

    def classify(self, type_ref: TypeRef) -> TypeRef:
        """Return the canonical variant for *type_ref*."""
        ...

    def resolve_composite(self, type_ref: TypeRef) -> CompositeTypeDef | NotFound:
        """Return the composite definition *type_ref* refers to, or NotFound."""
        ...

    def fields_of(self, type_name: str) -> list[FieldDef]:
        """Return all fields of the named type in declaration order."""
        ...

    def element_type_of(self, type_ref: TypeRef) -> TypeRef:
        """Return the element type of an array or list reference."""
        ...

    def primitive_default(self, type_ref: TypeRef) -> JsonScalar:
        """Return the zero value of a language primitive type."""
        ...


PRIMITIVE_DEFAULTS: dict[PrimitiveType, JsonScalar] = {
    PrimitiveType.BOOLEAN: False,
    PrimitiveType.BYTE: 0,
    PrimitiveType.SHORT: 0,
    PrimitiveType.INT: 0,
    PrimitiveType.LONG: 0,
    PrimitiveType.FLOAT: 0.0,
    PrimitiveType.DOUBLE: 0.0,
    PrimitiveType.CHAR: "",
}


def primitive_default(type_ref: TypeRef) -> JsonScalar:
    """Return the zero value for a primitive type reference.

    Raises:
        TypeError: If *type_ref* is not a :class:`PrimitiveTypeRef`.
    """
    if not isinstance(type_ref, PrimitiveTypeRef):
        raise TypeError(f"Not a primitive type: {type_ref.presentable_name}")
    return PRIMITIVE_DEFAULTS[type_ref.primitive]


def element_type_of(type_ref: TypeRef) -> TypeRef:
    """Return the element type of an array or list reference.

    Raises:
        TypeError: If *type_ref* is neither an array nor a list.
    """
    if isinstance(type_ref, (ArrayTypeRef, ListTypeRef)):
        return type_ref.element_type
    raise TypeError(f"Not a container type: {type_ref.presentable_name}")
