# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory type resolver backed by a YAML type catalog.

A catalog declares composite types structurally. Field types carry an explicit
``kind`` tag, so no type expressions are parsed::

    types:
      - name: User
        fields:
          - name: name
            type: {kind: named_scalar, name: String}
          - name: roles
            type: {kind: list, element_type: {kind: class, name: Role}}
      - name: Role
        fields:
          - name: name
            type: {kind: named_scalar, name: String}
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from jsonskel.model.entities import CompositeTypeDef, TypeCatalog
from jsonskel.model.types import ClassTypeRef, FieldDef, JsonScalar, NamedScalarTypeRef, TypeRef
from jsonskel.resolver import base
from jsonskel.resolver.base import NotFound
from jsonskel.skeleton.defaults import DEFAULT_VALUES

# ###############
# Public Interface
# ###############


class CatalogError(Exception):
    """Raised when a type catalog cannot be read or is invalid."""


def load_catalog(path: Path) -> TypeCatalog:
    """Load and validate a type catalog from a YAML file.

    An empty file is treated as an empty catalog.

    Args:
        path: Path to the catalog YAML file.

    Returns:
        A validated TypeCatalog instance.

    Raises:
        CatalogError: If the file cannot be read, contains invalid YAML,
            or does not conform to the catalog schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CatalogError(f"Type catalog not found: {path}") from None
    except OSError as exc:
        raise CatalogError(f"Cannot read type catalog '{path}': {exc}") from exc

    return parse_catalog(raw, source_label=str(path))


def parse_catalog(text: str, source_label: str = "<string>") -> TypeCatalog:
    """Parse catalog YAML text into a TypeCatalog.

    Raises:
        CatalogError: If the YAML is invalid or does not match the catalog schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in type catalog '{source_label}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogError(f"{source_label}: type catalog must be a YAML mapping")

    try:
        return TypeCatalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid type catalog '{source_label}': {exc}") from exc


class CatalogTypeResolver:
    """Resolves class references against the composite types of a catalog.

    Class references whose name is a recognized scalar (``String``,
    ``Integer``, ...) are classified as named scalars, so catalogs may write
    either form.
    """

    def __init__(
        self,
        catalog: TypeCatalog,
        scalar_names: Mapping[str, JsonScalar] = DEFAULT_VALUES,
    ) -> None:
        self._catalog = catalog
        self._scalar_names = scalar_names
        self._by_name: dict[str, CompositeTypeDef] = {t.name: t for t in catalog.types}

    @property
    def catalog(self) -> TypeCatalog:
        return self._catalog

    def classify(self, type_ref: TypeRef) -> TypeRef:
        if isinstance(type_ref, ClassTypeRef) and type_ref.name in self._scalar_names:
            return NamedScalarTypeRef(name=type_ref.name)
        return type_ref

    def resolve_composite(self, type_ref: TypeRef) -> CompositeTypeDef | NotFound:
        if isinstance(type_ref, ClassTypeRef) and type_ref.name in self._by_name:
            return self._by_name[type_ref.name]
        return NotFound(type_name=type_ref.presentable_name)

    def fields_of(self, type_name: str) -> list[FieldDef]:
        """Return own fields first, then inherited fields not shadowed by a closer one."""
        fields: list[FieldDef] = []
        seen_names: set[str] = set()
        visited_types: set[str] = set()
        current = self._by_name.get(type_name)
        while current is not None and current.name not in visited_types:
            visited_types.add(current.name)
            for f in current.fields:
                if f.name not in seen_names:
                    seen_names.add(f.name)
                    fields.append(f)
            current = self._by_name.get(current.base) if current.base is not None else None
        return fields

    def element_type_of(self, type_ref: TypeRef) -> TypeRef:
        return base.element_type_of(type_ref)

    def primitive_default(self, type_ref: TypeRef) -> JsonScalar:
        return base.primitive_default(type_ref)
