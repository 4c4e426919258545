# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for jsonskel documentation."""

import sys
from pathlib import Path

# Document the package from the source tree without installing it.
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "jsonskel"
author = "jsonskel Contributors"
release = "0.1.0"

# Docstrings follow the Google style (Args/Returns/Raises sections).
extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"
autodoc_typehints = "description"
napoleon_google_docstring = True
napoleon_numpy_docstring = False

html_theme = "alabaster"
