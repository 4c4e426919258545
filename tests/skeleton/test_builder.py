# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the recursive skeleton builder."""

import pytest

from jsonskel.model import (
    ArrayTypeRef,
    ClassTypeRef,
    CompositeTypeDef,
    FieldDef,
    ListTypeRef,
    NamedScalarTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TypeCatalog,
    TypeRef,
    UnresolvedTypeRef,
)
from jsonskel.resolver.catalog import CatalogTypeResolver
from jsonskel.skeleton import KV, MAX_DEPTH_LIMIT, SkeletonBuilder, with_overrides

# ###############
# Helpers
# ###############


def _prim(name: str) -> PrimitiveTypeRef:
    return PrimitiveTypeRef(primitive=PrimitiveType(name))


def _scalar(name: str) -> NamedScalarTypeRef:
    return NamedScalarTypeRef(name=name)


def _cls(name: str) -> ClassTypeRef:
    return ClassTypeRef(name=name)


def _array(element: TypeRef, depth: int = 1) -> ArrayTypeRef:
    ref = ArrayTypeRef(element_type=element)
    for _ in range(depth - 1):
        ref = ArrayTypeRef(element_type=ref)
    return ref


def _list(element: TypeRef) -> ListTypeRef:
    return ListTypeRef(element_type=element)


def _type(name: str, *fields: tuple, base: str | None = None) -> CompositeTypeDef:
    """Build a composite type from (name, type) or (name, type, doc) tuples."""
    return CompositeTypeDef(
        name=name,
        base=base,
        fields=[FieldDef(name=f[0], type=f[1], doc=f[2] if len(f) > 2 else None) for f in fields],
    )


def _builder(*types: CompositeTypeDef, **kwargs) -> SkeletonBuilder:
    return SkeletonBuilder(CatalogTypeResolver(TypeCatalog(types=list(types))), **kwargs)


# ###############
# Scenarios
# ###############


def test_point_scenario() -> None:
    """Point{int x; int y;} expands to zeroes."""
    builder = _builder(_type("Point", ("x", _prim("int")), ("y", _prim("int"))))
    assert builder.build("Point") == {"x": 0, "y": 0}


def test_user_with_role_list_scenario() -> None:
    """User{String name; List<Role> roles;} expands the list element type."""
    builder = _builder(
        _type("User", ("name", _scalar("String")), ("roles", _list(_cls("Role")))),
        _type("Role", ("name", _scalar("String"))),
    )
    assert builder.build(_cls("User")).to_json(pretty=False) == '{"name":"","roles":[{"name":""}]}'


def test_self_reference_scenario_terminates() -> None:
    """Wrapper{Wrapper self;} yields an empty placeholder for the recursive field."""
    builder = _builder(_type("Wrapper", ("self", _cls("Wrapper"))))
    result = builder.build_result("Wrapper")
    assert result.skeleton == {"self": {}}
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].path == "self"
    assert "Wrapper -> Wrapper" in result.diagnostics[0].message


# ###############
# Normal Cases
# ###############


def test_zero_field_type_yields_empty_container() -> None:
    builder = _builder(_type("Empty"))
    skeleton = builder.build("Empty")
    assert isinstance(skeleton, KV)
    assert skeleton.size() == 0


@pytest.mark.parametrize(
    ("primitive", "expected"),
    [
        ("boolean", False),
        ("byte", 0),
        ("short", 0),
        ("int", 0),
        ("long", 0),
        ("float", 0.0),
        ("double", 0.0),
        ("char", ""),
    ],
)
def test_primitive_defaults(primitive: str, expected: object) -> None:
    builder = _builder(_type("T", ("v", _prim(primitive))))
    value = builder.build("T")["v"]
    assert value == expected
    assert type(value) is type(expected)


def test_scalar_fields_use_table_defaults() -> None:
    builder = _builder(
        _type(
            "T",
            ("flag", _scalar("Boolean")),
            ("count", _scalar("Integer")),
            ("amount", _scalar("BigDecimal")),
            ("label", _scalar("String")),
            ("when", _scalar("Date")),
        )
    )
    skeleton = builder.build("T")
    assert skeleton == {"flag": False, "count": 0, "amount": 0.0, "label": "", "when": ""}
    assert skeleton["flag"] is False
    assert isinstance(skeleton["amount"], float)


def test_class_reference_to_scalar_name_uses_table_default() -> None:
    """A class reference naming a known scalar is treated as that scalar."""
    builder = _builder(_type("T", ("label", _cls("String")), ("count", _cls("Long"))))
    assert builder.build("T") == {"label": "", "count": 0}


def test_key_order_follows_declaration_order() -> None:
    names = ["zeta", "alpha", "mid", "beta"]
    builder = _builder(_type("T", *[(n, _prim("int")) for n in names]))
    assert list(builder.build("T")) == names


def test_nested_composite_types() -> None:
    builder = _builder(
        _type("Order", ("id", _scalar("Long")), ("customer", _cls("Customer"))),
        _type("Customer", ("name", _scalar("String")), ("address", _cls("Address"))),
        _type("Address", ("city", _scalar("String"))),
    )
    assert builder.build("Order") == {"id": 0, "customer": {"name": "", "address": {"city": ""}}}


def test_shared_type_in_sibling_fields_is_not_a_cycle() -> None:
    """The same type reached along two different paths is expanded both times."""
    builder = _builder(
        _type("Route", ("start", _cls("Point")), ("end", _cls("Point"))),
        _type("Point", ("x", _prim("int"))),
    )
    result = builder.build_result("Route")
    assert result.skeleton == {"start": {"x": 0}, "end": {"x": 0}}
    assert result.diagnostics == []


def test_build_is_deterministic() -> None:
    builder = _builder(
        _type("User", ("name", _scalar("String")), ("roles", _list(_cls("Role"))), ("boss", _cls("User"))),
        _type("Role", ("name", _scalar("String"), "Role name.")),
    )
    first = builder.build("User")
    second = builder.build("User")
    assert first == second
    assert first is not second


# ###############
# Arrays and Lists
# ###############


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_primitive_arrays_flatten_to_single_default(depth: int) -> None:
    """int[] and int[][] both yield a one-element list holding 0."""
    builder = _builder(_type("T", ("values", _array(_prim("int"), depth))))
    assert builder.build("T") == {"values": [0]}


def test_scalar_array_uses_table_default() -> None:
    builder = _builder(_type("T", ("names", _array(_scalar("String"), 2))))
    assert builder.build("T") == {"names": [""]}


def test_composite_array_builds_element() -> None:
    builder = _builder(
        _type("Polygon", ("points", _array(_cls("Point")))),
        _type("Point", ("x", _prim("int")), ("y", _prim("int"))),
    )
    assert builder.build("Polygon") == {"points": [{"x": 0, "y": 0}]}


def test_list_of_scalars() -> None:
    builder = _builder(_type("T", ("tags", _list(_cls("String"))), ("ids", _list(_scalar("Long")))))
    assert builder.build("T") == {"tags": [""], "ids": [0]}


def test_nested_generic_list_is_not_unwrapped() -> None:
    """Only one level of List is unwrapped; an inner container becomes an empty object."""
    builder = _builder(
        _type("T", ("matrix", _list(_list(_prim("int")))), ("rows", _list(_array(_prim("int"))))),
    )
    assert builder.build("T") == {"matrix": [{}], "rows": [{}]}


def test_list_of_self_keeps_list_shape() -> None:
    builder = _builder(_type("Node", ("value", _prim("int")), ("children", _list(_cls("Node")))))
    result = builder.build_result("Node")
    assert result.skeleton == {"value": 0, "children": [{}]}
    assert [d.path for d in result.diagnostics] == ["children[0]"]


# ###############
# Error Cases
# ###############


def test_unresolved_list_element_sets_null_and_keeps_siblings() -> None:
    builder = _builder(
        _type("T", ("before", _prim("int")), ("items", _list(_cls("Missing"))), ("after", _scalar("String"))),
    )
    result = builder.build_result("T")
    assert result.skeleton == {"before": 0, "items": None, "after": ""}
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].path == "items"
    assert "Missing" in result.diagnostics[0].message


def test_unresolved_class_reference_sets_null() -> None:
    builder = _builder(_type("T", ("other", _cls("Nowhere")), ("x", _prim("int"))))
    result = builder.build_result("T")
    assert result.skeleton == {"other": None, "x": 0}
    assert result.diagnostics[0].message == "Cannot resolve type 'Nowhere'"


def test_unresolved_type_ref_sets_null() -> None:
    builder = _builder(_type("T", ("broken", UnresolvedTypeRef(text="Map<K"))))
    result = builder.build_result("T")
    assert result.skeleton == {"broken": None}
    assert "Map<K" in result.diagnostics[0].message


def test_unknown_named_scalar_sets_null() -> None:
    builder = _builder(_type("T", ("id", _scalar("UUID"))))
    assert builder.build("T") == {"id": None}


def test_unresolved_nested_field_reports_dotted_path() -> None:
    builder = _builder(
        _type("Outer", ("inner", _cls("Inner"))),
        _type("Inner", ("ref", _cls("Gone"))),
    )
    result = builder.build_result("Outer")
    assert result.skeleton == {"inner": {"ref": None}}
    assert result.diagnostics[0].path == "inner.ref"


def test_none_target_yields_empty_container() -> None:
    builder = _builder()
    assert builder.build(None) == KV.create()


def test_unresolvable_target_yields_empty_container() -> None:
    builder = _builder(_type("Point", ("x", _prim("int"))))
    result = builder.build_result("Nope")
    assert result.skeleton == {}
    assert result.diagnostics == []
    assert builder.build(_prim("int")) == {}


def test_mutual_recursion_terminates() -> None:
    builder = _builder(
        _type("A", ("name", _scalar("String")), ("b", _cls("B"))),
        _type("B", ("a", _cls("A")), ("count", _prim("int"))),
    )
    result = builder.build_result("A")
    assert result.skeleton == {"name": "", "b": {"a": {}, "count": 0}}
    assert result.diagnostics[0].path == "b.a"
    assert "A -> B -> A" in result.diagnostics[0].message


def test_max_depth_bounds_expansion() -> None:
    builder = _builder(
        _type("L1", ("next", _cls("L2"))),
        _type("L2", ("next", _cls("L3"))),
        _type("L3", ("value", _prim("int"))),
        max_depth=2,
    )
    result = builder.build_result("L1")
    assert result.skeleton == {"next": {"next": {}}}
    assert "Maximum nesting depth of 2" in result.diagnostics[0].message


@pytest.mark.parametrize("max_depth", [0, MAX_DEPTH_LIMIT + 1, 1000])
def test_max_depth_must_be_within_limit(max_depth: int) -> None:
    with pytest.raises(ValueError, match="max_depth"):
        _builder(max_depth=max_depth)


def test_long_type_chain_stops_at_depth_limit() -> None:
    """A chain far deeper than the limit ends in a placeholder, not an interpreter error."""
    chain = [_type(f"T{i}", ("next", _cls(f"T{i + 1}"))) for i in range(400)]
    chain.append(_type("T400", ("v", _prim("int"))))
    builder = _builder(*chain, max_depth=MAX_DEPTH_LIMIT)

    result = builder.build_result("T0")

    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].path == ".".join(["next"] * MAX_DEPTH_LIMIT)
    assert f"Maximum nesting depth of {MAX_DEPTH_LIMIT}" in result.diagnostics[0].message
    node = result.skeleton
    for _ in range(MAX_DEPTH_LIMIT):
        node = node["next"]
    assert node == {}


# ###############
# Documentation
# ###############


def test_documented_fields_are_collected_under_comment_key() -> None:
    builder = _builder(
        _type(
            "User",
            ("id", _scalar("Long"), "Primary key."),
            ("name", _scalar("String")),
            ("email", _scalar("String"), "Contact address."),
        )
    )
    skeleton = builder.build("User")
    assert list(skeleton) == ["id", "name", "email", "@comment"]
    assert skeleton["@comment"] == {"id": "Primary key.", "email": "Contact address."}


def test_blank_documentation_contributes_nothing() -> None:
    builder = _builder(_type("T", ("a", _prim("int"), ""), ("b", _prim("int"), "   ")))
    assert builder.build("T") == {"a": 0, "b": 0}


def test_nested_types_carry_their_own_comments() -> None:
    builder = _builder(
        _type("User", ("role", _cls("Role"))),
        _type("Role", ("name", _scalar("String"), "Role name.")),
    )
    assert builder.build("User") == {"role": {"name": "", "@comment": {"name": "Role name."}}}


def test_custom_comment_key_and_disabled_comments() -> None:
    point = _type("Point", ("x", _prim("int"), "Horizontal."))
    assert _builder(point, comment_key="_doc").build("Point") == {"x": 0, "_doc": {"x": "Horizontal."}}
    assert _builder(point, include_comments=False).build("Point") == {"x": 0}


def test_comment_key_collision_overwrites_field() -> None:
    """Known limitation: a real field named like the comment key is overwritten in place."""
    builder = _builder(_type("T", ("@comment", _scalar("String")), ("x", _prim("int"), "Doc.")))
    skeleton = builder.build("T")
    assert list(skeleton) == ["@comment", "x"]
    assert skeleton["@comment"] == {"x": "Doc."}


# ###############
# Inheritance and Direct Input
# ###############


def test_inherited_fields_follow_own_fields() -> None:
    builder = _builder(
        _type("Entity", ("id", _scalar("Long")), ("name", _scalar("Integer"))),
        _type("User", ("name", _scalar("String")), base="Entity"),
    )
    skeleton = builder.build("User")
    assert skeleton == {"name": "", "id": 0}


def test_composite_definition_can_be_passed_directly() -> None:
    builder = _builder(_type("Role", ("name", _scalar("String"))))
    standalone = _type("Holder", ("role", _cls("Role")), ("n", _prim("long")))
    assert builder.build(standalone) == {"role": {"name": ""}, "n": 0}


def test_direct_definition_wins_over_same_named_catalog_type() -> None:
    builder = _builder(_type("Point", ("x", _prim("int"))))
    direct = _type("Point", ("lat", _scalar("Double")), ("lon", _scalar("Double")))
    assert builder.build(direct) == {"lat": 0.0, "lon": 0.0}
    assert builder.build("Point") == {"x": 0}


def test_direct_definition_inherits_from_catalog_base() -> None:
    builder = _builder(
        _type("Entity", ("id", _scalar("Long")), ("name", _scalar("Integer")), base="Root"),
        _type("Root", ("version", _prim("int"))),
    )
    direct = _type("User", ("name", _scalar("String")), base="Entity")
    assert builder.build(direct) == {"name": "", "id": 0, "version": 0}


def test_direct_definition_with_unknown_base_keeps_own_fields() -> None:
    builder = _builder()
    direct = _type("User", ("name", _scalar("String")), base="Missing")
    assert builder.build(direct) == {"name": ""}


def test_overridden_scalar_defaults() -> None:
    table = with_overrides({"UUID": "00000000-0000-0000-0000-000000000000"})
    catalog = TypeCatalog(types=[_type("T", ("id", _cls("UUID")))])
    builder = SkeletonBuilder(CatalogTypeResolver(catalog, scalar_names=table), defaults=table)
    assert builder.build("T") == {"id": "00000000-0000-0000-0000-000000000000"}
