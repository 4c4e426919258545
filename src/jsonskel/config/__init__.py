# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings for jsonskel."""

from jsonskel.config.settings import (
    SETTINGS_FILE_NAME,
    Settings,
    SettingsError,
    load_settings,
    parse_settings,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "Settings",
    "SettingsError",
    "load_settings",
    "parse_settings",
]
