# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex package - Parent-lookup index over a forest of records.

This package provides the TreeIndex class, a side table mapping each node
of a caller-owned forest to its parent, with ancestor queries and
identity-based structural mutation.

Example:
    >>> from genro_treeindex import TreeIndex
    >>> index = TreeIndex([{'value': 'a', 'label': 'A', 'children': []}])
    >>> index.depth(index.forest[0])
    0
"""

from .core import TreeIndex

__all__ = ["TreeIndex"]
