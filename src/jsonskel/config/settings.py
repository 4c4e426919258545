# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the jsonskel settings file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from jsonskel.model.types import JsonScalar
from jsonskel.skeleton.builder import DEFAULT_COMMENT_KEY, DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT
from jsonskel.skeleton.container import PRETTY_INDENT

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".jsonskel.yaml"


class SettingsError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


@dataclass
class Settings:
    """Options controlling skeleton generation and rendering.

    Attributes:
        indent: Indentation width of pretty-printed JSON.
        comment_key: Key under which field documentation is attached.
        include_comments: Whether field documentation is collected at all.
        max_depth: Maximum number of composite types expanded along one path,
            at most ``MAX_DEPTH_LIMIT``.
        scalar_defaults: Extra scalar type names and their default values.
    """

    indent: int = PRETTY_INDENT
    comment_key: str = DEFAULT_COMMENT_KEY
    include_comments: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    scalar_defaults: dict[str, JsonScalar] = field(default_factory=dict)


def load_settings(path: Path) -> Settings:
    """Load and parse a jsonskel settings file.

    Args:
        path: Path to the `.jsonskel.yaml` file.

    Returns:
        A Settings instance populated from the file. Keys missing from the
        file keep their defaults.

    Raises:
        SettingsError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file: {exc}") from exc

    return parse_settings(text, source_label=str(path))


def parse_settings(text: str, source_label: str = "<string>") -> Settings:
    """Parse settings YAML text into a Settings instance.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        SettingsError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise SettingsError(f"{source_label}: unknown setting(s): {', '.join(unknown)}")

    settings = Settings()
    if "indent" in data:
        settings.indent = _require_int(data, "indent", source_label, minimum=0)
    if "comment-key" in data:
        settings.comment_key = _require_string(data, "comment-key", source_label)
    if "include-comments" in data:
        settings.include_comments = _require_bool(data, "include-comments", source_label)
    if "max-depth" in data:
        settings.max_depth = _require_int(data, "max-depth", source_label, minimum=1, maximum=MAX_DEPTH_LIMIT)
    if "scalar-defaults" in data:
        settings.scalar_defaults = _parse_scalar_defaults(data["scalar-defaults"], source_label)
    return settings


# ################
# Implementation
# ################

_KNOWN_KEYS = {"indent", "comment-key", "include-comments", "max-depth", "scalar-defaults"}


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise SettingsError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise SettingsError(f"{source_label}: '{key}' must be true or false")
    return value


def _require_int(
    mapping: dict[str, object],
    key: str,
    source_label: str,
    minimum: int,
    maximum: int | None = None,
) -> int:
    value = mapping[key]
    # bool is a subclass of int and must not pass as a number here.
    valid = not isinstance(value, bool) and isinstance(value, int) and value >= minimum
    if valid and maximum is not None and value > maximum:
        valid = False
    if not valid:
        bound = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise SettingsError(f"{source_label}: '{key}' must be an integer {bound}")
    return value  # type: ignore[return-value]


def _parse_scalar_defaults(raw: object, source_label: str) -> dict[str, JsonScalar]:
    """Parse the ``scalar-defaults`` mapping of type name to default literal."""
    if not isinstance(raw, dict):
        raise SettingsError(f"{source_label}: 'scalar-defaults' must be a mapping")
    result: dict[str, JsonScalar] = {}
    for name, value in raw.items():
        if not isinstance(name, str):
            raise SettingsError(f"{source_label}: scalar-defaults keys must be type names")
        if not isinstance(value, (bool, int, float, str)):
            raise SettingsError(
                f"{source_label}: scalar-defaults['{name}'] must be a boolean, number, or string"
            )
        result[name] = value
    return result
