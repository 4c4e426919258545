# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive generation of JSON skeletons from composite type definitions.

For every field of a composite type, in declaration order, the builder picks
a canonical default value: the zero value of a primitive, the table default of
a recognized scalar, a one-element list for arrays and lists, or a nested
skeleton for a class reference. Field documentation is collected into a
separate container attached under a reserved comment key.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from jsonskel.model.entities import CompositeTypeDef
from jsonskel.model.types import (
    ArrayTypeRef,
    ClassTypeRef,
    FieldDef,
    JsonScalar,
    ListTypeRef,
    PrimitiveTypeRef,
    TypeRef,
)
from jsonskel.resolver.base import NotFound, TypeResolver
from jsonskel.skeleton.container import KV
from jsonskel.skeleton.defaults import DEFAULT_VALUES

# ###############
# Public Interface
# ###############

DEFAULT_COMMENT_KEY = "@comment"
DEFAULT_MAX_DEPTH = 64
# Each nesting level costs several interpreter frames; stay well below the
# default recursion limit of 1000.
MAX_DEPTH_LIMIT = 128


class SkeletonError(Exception):
    """Base class for field-level failures while building a skeleton."""


class UnresolvedTypeError(SkeletonError):
    """Raised when a field type cannot be resolved to a value or composite type."""


class UnboundedRecursionError(SkeletonError):
    """Raised when expanding a type would re-enter it or exceed the depth bound."""


@dataclass(frozen=True)
class BuildDiagnostic:
    """A field that could not be expanded normally.

    Attributes:
        path: Dotted path of the field within the skeleton, e.g. ``user.roles[0]``.
        message: Human-readable description of the problem.
    """

    path: str
    message: str


@dataclass
class SkeletonResult:
    """Result of building a skeleton.

    Attributes:
        skeleton: The generated container.
        diagnostics: Fields that were replaced by a placeholder value.
    """

    skeleton: KV
    diagnostics: list[BuildDiagnostic] = field(default_factory=list)


# Anything the builder accepts as the type to expand.
BuildTarget = CompositeTypeDef | TypeRef | str | None


class SkeletonBuilder:
    """Builds JSON skeletons for composite types known to a :class:`TypeResolver`.

    The builder holds no per-call state, so one instance may serve many
    ``build`` calls, from several threads when the resolver is read-only.

    Args:
        resolver: Answers classification and resolution questions.
        comment_key: Key under which field documentation is attached. A real
            field with the same name is overwritten by the documentation.
        include_comments: When False, field documentation is not collected.
        max_depth: Maximum number of composite types expanded along one path,
            between 1 and :data:`MAX_DEPTH_LIMIT`.
        defaults: Table of recognized scalar type names and their defaults.
    """

    def __init__(
        self,
        resolver: TypeResolver,
        *,
        comment_key: str = DEFAULT_COMMENT_KEY,
        include_comments: bool = True,
        max_depth: int = DEFAULT_MAX_DEPTH,
        defaults: Mapping[str, JsonScalar] = DEFAULT_VALUES,
    ) -> None:
        if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")
        self._resolver = resolver
        self._comment_key = comment_key
        self._include_comments = include_comments
        self._max_depth = max_depth
        self._defaults = defaults

    def build(self, target: BuildTarget) -> KV:
        """Return the skeleton of *target*.

        A ``None`` target, or one that does not resolve to a composite type,
        yields an empty container.
        """
        return self.build_result(target).skeleton

    def build_result(self, target: BuildTarget) -> SkeletonResult:
        """Return the skeleton of *target* together with field diagnostics."""
        type_def = self._resolve_target(target)
        if type_def is None:
            return SkeletonResult(skeleton=KV.create())

        if isinstance(target, CompositeTypeDef):
            fields = self._fields_of_definition(target)
        else:
            fields = self._resolver.fields_of(type_def.name)

        expansion = _Expansion(max_depth=self._max_depth)
        with expansion.entering(type_def.name):
            skeleton = self._build_composite(fields, expansion, path="")
        return SkeletonResult(skeleton=skeleton, diagnostics=expansion.diagnostics)

    # ################
    # Implementation
    # ################

    def _resolve_target(self, target: BuildTarget) -> CompositeTypeDef | None:
        if target is None:
            return None
        if isinstance(target, CompositeTypeDef):
            return target
        if isinstance(target, str):
            target = ClassTypeRef(name=target)
        resolved = self._resolver.resolve_composite(self._resolver.classify(target))
        if isinstance(resolved, NotFound):
            return None
        return resolved

    def _fields_of_definition(self, type_def: CompositeTypeDef) -> list[FieldDef]:
        """Own fields of a caller-supplied definition, then fields inherited from its base."""
        fields = list(type_def.fields)
        if type_def.base is None or type_def.base == type_def.name:
            return fields
        base = self._resolver.resolve_composite(ClassTypeRef(name=type_def.base))
        if isinstance(base, NotFound):
            return fields
        own_names = {f.name for f in fields}
        fields.extend(f for f in self._resolver.fields_of(base.name) if f.name not in own_names)
        return fields

    def _build_composite(self, fields: list[FieldDef], expansion: _Expansion, path: str) -> KV:
        kv = KV.create()
        comments = KV.create()

        for f in fields:
            field_path = f"{path}.{f.name}" if path else f.name
            if self._include_comments and f.doc and f.doc.strip():
                comments.set(f.name, f.doc)
            try:
                value = self._value_for(f.type, expansion, field_path)
            except UnresolvedTypeError as exc:
                expansion.report(field_path, str(exc))
                value = None
            kv.set(f.name, value)

        if comments.size() > 0:
            kv.set(self._comment_key, comments)
        return kv

    def _value_for(self, type_ref: TypeRef, expansion: _Expansion, path: str) -> Any:
        kind = self._resolver.classify(type_ref)

        if isinstance(kind, PrimitiveTypeRef):
            return self._resolver.primitive_default(kind)
        if kind.presentable_name in self._defaults:
            return self._defaults[kind.presentable_name]
        if isinstance(kind, ArrayTypeRef):
            element = self._resolver.classify(self._resolver.element_type_of(kind))
            while isinstance(element, ArrayTypeRef):
                element = self._resolver.classify(self._resolver.element_type_of(element))
            return [self._element_value(element, expansion, f"{path}[0]")]
        if isinstance(kind, ListTypeRef):
            element = self._resolver.classify(self._resolver.element_type_of(kind))
            return [self._element_value(element, expansion, f"{path}[0]")]
        if isinstance(kind, ClassTypeRef):
            return self._expand(kind, expansion, path)
        raise UnresolvedTypeError(f"Cannot resolve type '{kind.presentable_name}'")

    def _element_value(self, element: TypeRef, expansion: _Expansion, path: str) -> Any:
        if isinstance(element, PrimitiveTypeRef):
            return self._resolver.primitive_default(element)
        if element.presentable_name in self._defaults:
            return self._defaults[element.presentable_name]
        # Generic containers nested in an element position are not unwrapped.
        if isinstance(element, (ArrayTypeRef, ListTypeRef)):
            return KV.create()
        return self._expand(element, expansion, path)

    def _expand(self, type_ref: TypeRef, expansion: _Expansion, path: str) -> KV:
        resolved = self._resolver.resolve_composite(type_ref)
        if isinstance(resolved, NotFound):
            raise UnresolvedTypeError(f"Cannot resolve type '{resolved.type_name}'")
        try:
            with expansion.entering(resolved.name):
                return self._build_composite(self._resolver.fields_of(resolved.name), expansion, path)
        except UnboundedRecursionError as exc:
            expansion.report(path, str(exc))
            return KV.create()


@dataclass
class _Expansion:
    """State of one top-level build: the types on the active path and diagnostics."""

    max_depth: int
    stack: list[str] = field(default_factory=list)
    diagnostics: list[BuildDiagnostic] = field(default_factory=list)

    @contextmanager
    def entering(self, type_name: str) -> Iterator[None]:
        if type_name in self.stack:
            cycle = " -> ".join([*self.stack[self.stack.index(type_name) :], type_name])
            raise UnboundedRecursionError(f"Recursive type reference {cycle}")
        if len(self.stack) >= self.max_depth:
            raise UnboundedRecursionError(
                f"Maximum nesting depth of {self.max_depth} exceeded at type '{type_name}'"
            )
        self.stack.append(type_name)
        try:
            yield
        finally:
            self.stack.pop()

    def report(self, path: str, message: str) -> None:
        self.diagnostics.append(BuildDiagnostic(path=path, message=message))
