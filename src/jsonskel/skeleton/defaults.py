# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Canonical default values for well-known scalar type names."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from jsonskel.model.types import JsonScalar

# ###############
# Public Interface
# ###############

# Date-like types render as an empty string rather than a date value.
DEFAULT_VALUES: Mapping[str, JsonScalar] = MappingProxyType(
    {
        "Boolean": False,
        "Byte": 0,
        "Short": 0,
        "Integer": 0,
        "Long": 0,
        "BigInteger": 0,
        "Float": 0.0,
        "Double": 0.0,
        "BigDecimal": 0.0,
        "String": "",
        "Character": "",
        "Date": "",
        "LocalDate": "",
        "LocalDateTime": "",
        "LocalTime": "",
        "Instant": "",
    }
)


def is_scalar(type_name: str, table: Mapping[str, JsonScalar] = DEFAULT_VALUES) -> bool:
    """Return True if *type_name* is a recognized scalar type name."""
    return type_name in table


def lookup(type_name: str, table: Mapping[str, JsonScalar] = DEFAULT_VALUES) -> JsonScalar:
    """Return the default for *type_name*, or None if it is not a recognized scalar.

    None is never a default value in the table, so it unambiguously signals
    absence; use :func:`is_scalar` when a boolean answer reads better.
    """
    return table.get(type_name)


def with_overrides(overrides: Mapping[str, JsonScalar]) -> Mapping[str, JsonScalar]:
    """Return a new read-only table extending :data:`DEFAULT_VALUES` with *overrides*.

    Raises:
        ValueError: If an override maps a name to None.
    """
    for name, value in overrides.items():
        if value is None:
            raise ValueError(f"Scalar default for '{name}' must not be null")
    return MappingProxyType({**DEFAULT_VALUES, **overrides})
