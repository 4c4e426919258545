# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type resolution: the resolver protocol and the catalog-backed resolver."""

from jsonskel.resolver.base import NotFound, TypeResolver
from jsonskel.resolver.catalog import CatalogError, CatalogTypeResolver, load_catalog, parse_catalog

__all__ = [
    "NotFound",
    "TypeResolver",
    "CatalogError",
    "CatalogTypeResolver",
    "load_catalog",
    "parse_catalog",
]
