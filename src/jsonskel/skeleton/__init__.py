# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Skeleton generation: the ordered container, scalar defaults, and the builder."""

from jsonskel.skeleton.builder import (
    DEFAULT_COMMENT_KEY,
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_LIMIT,
    BuildDiagnostic,
    SkeletonBuilder,
    SkeletonError,
    SkeletonResult,
    UnboundedRecursionError,
    UnresolvedTypeError,
)
from jsonskel.skeleton.container import KV
from jsonskel.skeleton.defaults import DEFAULT_VALUES, is_scalar, lookup, with_overrides

__all__ = [
    "DEFAULT_COMMENT_KEY",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_VALUES",
    "MAX_DEPTH_LIMIT",
    "BuildDiagnostic",
    "KV",
    "SkeletonBuilder",
    "SkeletonError",
    "SkeletonResult",
    "UnboundedRecursionError",
    "UnresolvedTypeError",
    "is_scalar",
    "lookup",
    "with_overrides",
]
