# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Insertion-ordered key-value container with JSON rendering.

A :class:`KV` is the output of the skeleton builder. It behaves like a plain
``dict`` (which already preserves insertion order) but adds fluent setters,
order-sensitive equality, and JSON text rendering.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

# ###############
# Public Interface
# ###############

PRETTY_INDENT = 2


class KV(dict[str, Any]):
    """An insertion-ordered mapping from string keys to JSON-representable values.

    Setting an existing key overwrites its value and keeps the key's original
    position. Two containers are equal only when they hold the same pairs in
    the same order.
    """

    @classmethod
    def create(cls) -> KV:
        """Return a new, empty container."""
        return cls()

    @classmethod
    def by(cls, key: str, value: Any) -> KV:
        """Return a new container holding the single pair ``key: value``."""
        return cls().set(key, value)

    def set(self, key: str, value: Any) -> KV:
        """Set *key* to *value* and return self for chaining."""
        self[key] = value
        return self

    def merge(self, other: Mapping[str, Any]) -> KV:
        """Set every pair of *other*, in its order, and return self."""
        for key, value in other.items():
            self[key] = value
        return self

    def delete(self, key: str) -> KV:
        """Remove *key* if present and return self."""
        self.pop(key, None)
        return self

    def size(self) -> int:
        return len(self)

    def to_json(self, pretty: bool = True, indent: int = PRETTY_INDENT) -> str:
        """Render the container as JSON text, keys in insertion order.

        Args:
            pretty: Render with one pair per line and *indent* spaces per
                nesting level. When False, render without extraneous whitespace.
            indent: Indentation width used in pretty mode.
        """
        if pretty:
            return json.dumps(self, indent=indent, ensure_ascii=False)
        return json.dumps(self, separators=(",", ":"), ensure_ascii=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"KV({dict.__repr__(self)})"
