# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeIndex - Parent-lookup index for nested record trees.

A lightweight, zero-dependency library that overlays a forest of plain
records (nested children lists) with a node -> parent index, for ancestor
path queries and safe add/remove without parent pointers in the data.
"""

__version__ = "0.1.0"

from .exceptions import (
    MissingParentError,
    NotFoundError,
    TreeIndexError,
)
from .index import TreeIndex
from .node import AttributeAccessor, NodeAccessor

__all__ = [
    # Core classes
    "TreeIndex",
    # Accessors
    "NodeAccessor",
    "AttributeAccessor",
    # Exceptions
    "TreeIndexError",
    "MissingParentError",
    "NotFoundError",
]
