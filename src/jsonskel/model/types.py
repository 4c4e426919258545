# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type reference representations for the jsonskel type model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# Scalar values a skeleton field may hold.
JsonScalar = bool | int | float | str | None


class PrimitiveType(Enum):
    """Language primitive types that carry no boxed wrapper."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"


class PrimitiveTypeRef(BaseModel):
    """Reference to a language primitive type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType

    @property
    def presentable_name(self) -> str:
        return self.primitive.value


class NamedScalarTypeRef(BaseModel):
    """Reference to a boxed numeric, string, or date-like wrapper type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named_scalar"] = "named_scalar"
    name: str

    @property
    def presentable_name(self) -> str:
        return self.name


class ArrayTypeRef(BaseModel):
    """Reference to an array type ``E[]``; arrays may nest."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element_type: TypeRef

    @property
    def presentable_name(self) -> str:
        return f"{self.element_type.presentable_name}[]"


class ListTypeRef(BaseModel):
    """Reference to a single-parameter generic ``List<E>`` type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    element_type: TypeRef

    @property
    def presentable_name(self) -> str:
        return f"List<{self.element_type.presentable_name}>"


class ClassTypeRef(BaseModel):
    """Reference to a composite type by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    name: str

    @property
    def presentable_name(self) -> str:
        return self.name


class UnresolvedTypeRef(BaseModel):
    """A type the host environment could not classify."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unresolved"] = "unresolved"
    text: str = ""

    @property
    def presentable_name(self) -> str:
        return self.text or "<unresolved>"


# A field type reference: one of the primitive, scalar, container, or class types.
# The `kind` discriminator field enables fast, unambiguous deserialization.
TypeRef = Annotated[
    PrimitiveTypeRef | NamedScalarTypeRef | ArrayTypeRef | ListTypeRef | ClassTypeRef | UnresolvedTypeRef,
    _Field(discriminator="kind"),
]


class FieldDef(BaseModel):
    """A named, typed field of a composite type, optionally documented."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeRef
    doc: str | None = None


# Resolve forward references for models that use TypeRef.
ArrayTypeRef.model_rebuild()
ListTypeRef.model_rebuild()
FieldDef.model_rebuild()
