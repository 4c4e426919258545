# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model for jsonskel (type references, fields, composite types)."""

from jsonskel.model.entities import CompositeTypeDef, TypeCatalog
from jsonskel.model.types import (
    ArrayTypeRef,
    ClassTypeRef,
    FieldDef,
    ListTypeRef,
    NamedScalarTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeRef,
    UnresolvedTypeRef,
)

__all__ = [
    # Type references
    "PrimitiveType",
    "PrimitiveTypeRef",
    "NamedScalarTypeRef",
    "ArrayTypeRef",
    "ListTypeRef",
    "ClassTypeRef",
    "UnresolvedTypeRef",
    "TypeRef",
    "FieldDef",
    # Entities
    "CompositeTypeDef",
    "TypeCatalog",
]
