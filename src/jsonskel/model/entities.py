# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Composite type definitions and the catalog that groups them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

from jsonskel.model.types import FieldDef

# ###############
# Public Interface
# ###############


class CompositeTypeDef(BaseModel):
    """A class-like type: an ordered sequence of fields keyed by a type name.

    Attributes:
        name: Identity of the type, referenced by ``ClassTypeRef.name``.
        fields: The type's own fields in declaration order.
        base: Optional name of a composite type whose fields are inherited.
        doc: Optional documentation text of the type itself.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    fields: list[FieldDef] = _Field(default_factory=list)
    base: str | None = None
    doc: str | None = None


class TypeCatalog(BaseModel):
    """An ordered collection of composite type definitions with unique names."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    types: list[CompositeTypeDef] = _Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_names(self) -> TypeCatalog:
        seen: set[str] = set()
        for type_def in self.types:
            if type_def.name in seen:
                raise ValueError(f"Duplicate type name '{type_def.name}'")
            seen.add(type_def.name)
        return self

    @property
    def names(self) -> list[str]:
        """Return the type names in declaration order."""
        return [t.name for t in self.types]

    def get(self, name: str) -> CompositeTypeDef | None:
        """Return the type named *name*, or None if the catalog has none."""
        for type_def in self.types:
            if type_def.name == name:
                return type_def
        return None
