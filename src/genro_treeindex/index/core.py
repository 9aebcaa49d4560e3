# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex - A parent-lookup index over a forest of plain records.

This module provides the TreeIndex class. It overlays a mutable forest
(a list of root nodes, each with a nested children list) with a side table
mapping every node to its parent node, or to the forest itself for roots.
Nodes never need to carry a parent pointer of their own.

Key Features:
    - **Schema-agnostic**: Nodes are read through a NodeAccessor configured
      with the value, label and children field names
    - **Ancestor queries**: O(depth) walks with optional field projection
    - **Safe mutation**: add_child/remove_child keep the forest and the
      index consistent, removal is by identity
    - **Derived cache**: The forest is the source of truth; the index can
      be rebuilt at any time

Example:
    Basic usage::

        forest = [
            {'id': '1', 'name': 'one', 'children': [
                {'id': '1-1', 'name': 'one.one', 'children': []},
            ]},
        ]
        index = TreeIndex(forest, value='id', label='name')
        leaf = forest[0]['children'][0]

        index.get_ancestor_values(leaf)  # ['1']
        index.remove_child(leaf)
        forest[0]['children']  # []
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, Callable, Iterable, Iterator, Union

from ..exceptions import MissingParentError, NotFoundError
from ..node import NodeAccessor

logger = logging.getLogger(__name__)

Projection = Union[str, Callable[[Any], Any], None]


class TreeIndex:
    """A node -> parent index scoped to a single forest.

    TreeIndex provides:
    - initialize(forest, start_parent): (Re)build entries from the forest shape
    - get_parent(node) / get_ancestors(node, projection): Upward queries
    - add_child(target, node) / remove_child(node): Structural mutation
    - rename(node, label): Label mutation through the accessor

    Entries are keyed by node identity and hold a strong reference to the
    node, so an identity handle cannot be reused while its entry lives.
    Entries of removed descendants are left in place until prune(),
    clear() or rebuild() evicts them.

    Attributes:
        accessor: The NodeAccessor used to read and write node fields.

    Example:
        >>> index = TreeIndex([{'value': 1, 'label': 'a', 'children': []}])
        >>> root = index.forest[0]
        >>> index.add_child(root, {'value': 2, 'label': 'b'})
        {'value': 2, 'label': 'b'}
        >>> index.get_ancestor_labels(root['children'][0])
        ['a']
    """

    __slots__ = ('_entries', '_forest', 'accessor')

    def __init__(
        self,
        forest: list[Any] | None = None,
        accessor: NodeAccessor | None = None,
        *,
        value: str = 'value',
        label: str = 'label',
        children: str = 'children',
    ) -> None:
        """Initialize a TreeIndex.

        Args:
            forest: Optional list of root nodes to index immediately.
                If None, an empty forest is created.
            accessor: Optional NodeAccessor. When given, the field name
                arguments are ignored.
            value: Name of the identifier field.
            label: Name of the display name field.
            children: Name of the children list field.
        """
        self.accessor = accessor or NodeAccessor(value, label, children)
        self._entries: dict[int, tuple[Any, Any]] = {}
        self._forest: list[Any] = []
        self.initialize([] if forest is None else forest)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"TreeIndex(entries={len(self._entries)}, roots={len(self._forest)})"

    def __len__(self) -> int:
        """Return the number of entries, stale ones included."""
        return len(self._entries)

    def __contains__(self, node: Any) -> bool:
        """True if the node has an entry in the index."""
        return id(node) in self._entries

    @property
    def forest(self) -> list[Any]:
        """The list of root nodes this index is bound to."""
        return self._forest

    # ==================== Index Maintenance ====================

    def _set_parent(self, node: Any, parent: Any) -> None:
        self._entries[id(node)] = (node, parent)

    def initialize(self, forest: list[Any], start_parent: Any = None) -> None:
        """Record the parent of every node reachable from ``forest``.

        Args:
            forest: List of nodes to index.
            start_parent: Optional node the listed nodes belong to, for
                re-indexing a single subtree. If None, the list is treated
                as the root forest and becomes the one this index is bound to.

        Existing entries for nodes still present are overwritten with the
        same parent, so calling this after every edit is safe.
        """
        if start_parent is None:
            self._forest = forest

        def _index(nodes: list[Any], parent: Any) -> int:
            count = 0
            for node in nodes:
                self._set_parent(node, parent)
                count += 1
                children = self.accessor.get_children(node)
                if children:
                    count += _index(children, node)
            return count

        count = _index(forest, forest if start_parent is None else start_parent)
        logger.debug("Indexed %d nodes", count)

    def clear(self) -> None:
        """Drop every entry. The forest is left untouched."""
        self._entries.clear()

    def rebuild(self, forest: list[Any] | None = None) -> None:
        """Clear the index and initialize it from ``forest``.

        Args:
            forest: New root forest. If None, the current forest is re-read.
        """
        self.clear()
        self.initialize(self._forest if forest is None else forest)

    def prune(self) -> int:
        """Evict entries whose nodes are no longer reachable from the forest.

        Returns:
            Number of entries evicted.
        """
        live = {id(node) for _, node in self.walk()}
        stale = [key for key in self._entries if key not in live]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug("Pruned %d stale entries", len(stale))
        return len(stale)

    # ==================== Queries ====================

    @staticmethod
    def is_root_container(value: Any) -> bool:
        """True if a parent value is a forest rather than a node."""
        return isinstance(value, MutableSequence)

    def get_parent(self, node: Any) -> Any:
        """Return the node's parent node, its forest, or None if not indexed."""
        entry = self._entries.get(id(node))
        if entry is None:
            return None
        return entry[1]

    def _project(self, node: Any, projection: Projection) -> Any:
        if projection is None:
            return node
        if callable(projection):
            return projection(node)
        return self.accessor.get_field(node, projection)

    def get_ancestors(
        self,
        node: Any,
        projection: Projection = None,
        seed: Iterable[Any] | None = None,
    ) -> list[Any]:
        """Return the ancestors of a node, nearest first.

        Args:
            node: The node to start from. It is not included.
            projection: Optional field name (e.g. 'label') or callable applied
                to each ancestor. If None, ancestor nodes are returned.
            seed: Optional items placed at the front of the result.

        Returns:
            A new list. Empty for root nodes and for nodes not in the index.
            The forest itself is never included.

        Example:
            >>> index.get_ancestors(leaf, 'value')
            ['1-1', '1']
        """
        result = list(seed) if seed is not None else []
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None or self.is_root_container(parent):
                break
            result.append(self._project(parent, projection))
            current = parent
        return result

    def get_ancestor_labels(
        self, node: Any, seed: Iterable[Any] | None = None
    ) -> list[Any]:
        """Return the labels of the node's ancestors, nearest first."""
        return self.get_ancestors(node, self.accessor.label, seed)

    def get_ancestor_values(
        self, node: Any, seed: Iterable[Any] | None = None
    ) -> list[Any]:
        """Return the values of the node's ancestors, nearest first."""
        return self.get_ancestors(node, self.accessor.value, seed)

    def get_path(self, node: Any, projection: Projection = None) -> list[Any]:
        """Return the node followed by its ancestors, nearest first.

        Example:
            >>> index.get_path(leaf, 'label')
            ['1-1-1', '1-1', '1']
        """
        return self.get_ancestors(
            node, projection, seed=[self._project(node, projection)]
        )

    def depth(self, node: Any) -> int:
        """Return the number of ancestors of a node (roots are at depth 0)."""
        return len(self.get_ancestors(node))

    # ==================== Walk ====================

    def walk(self) -> Iterator[tuple[int, Any]]:
        """Yield (depth, node) pairs over the forest in pre-order.

        Follows the live children lists, not the index, so it reflects the
        forest as it is now.

        Example:
            >>> for depth, node in index.walk():
            ...     print('  ' * depth + node['label'])
        """
        def _walk_gen(nodes: list[Any], depth: int) -> Iterator[tuple[int, Any]]:
            for node in nodes:
                yield depth, node
                children = self.accessor.get_children(node)
                if children:
                    yield from _walk_gen(children, depth + 1)

        return _walk_gen(self._forest, 0)

    def find(self, value: Any) -> Any:
        """Return the first node whose value field equals ``value``, or None."""
        for _, node in self.walk():
            if self.accessor.get_value(node) == value:
                return node
        return None

    # ==================== Mutation ====================

    def add_child(self, target: Any, new_node: Any) -> Any:
        """Append a node to the forest or to a node's children.

        Args:
            target: A forest (the node becomes a root) or a node. A missing
                children list on the node is created.
            new_node: The node to append. It must not be indexed under
                another live parent.

        Returns:
            The appended node.
        """
        if self.is_root_container(target):
            target.append(new_node)
        else:
            self.accessor.ensure_children(target).append(new_node)
        self._set_parent(new_node, target)
        logger.debug("Added node %r", self._describe(new_node))
        return new_node

    def remove_child(self, node: Any) -> Any:
        """Detach a node from whichever sequence holds it.

        Removal is by identity: siblings with equal content are kept.
        Descendants are not unindexed and must not be relied upon afterwards.

        Args:
            node: An indexed node.

        Returns:
            The removed node.

        Raises:
            MissingParentError: If the node has no entry in the index.
            NotFoundError: If the node is indexed as a root but is not in
                its forest.
        """
        parent = self.get_parent(node)
        if parent is None:
            raise MissingParentError(
                f"No parent recorded for node {self._describe(node)!r}"
            )

        if self.is_root_container(parent):
            for position, item in enumerate(parent):
                if item is node:
                    break
            else:
                raise NotFoundError(
                    f"Root node {self._describe(node)!r} not present in its forest"
                )
            del parent[position]
        else:
            siblings = self.accessor.get_children(parent)
            remaining = [item for item in siblings or () if item is not node]
            if siblings is None or len(remaining) == len(siblings):
                logger.warning(
                    "Node %r not found among the children of %r",
                    self._describe(node), self._describe(parent),
                )
            if siblings is not None:
                self.accessor.set_children(parent, remaining)

        del self._entries[id(node)]
        logger.debug("Removed node %r", self._describe(node))
        return node

    def rename(self, node: Any, label: Any) -> None:
        """Set a node's label. The index is not affected."""
        self.accessor.set_label(node, label)

    # ==================== Helpers ====================

    def _describe(self, node: Any) -> Any:
        value = self.accessor.get_value(node)
        return node if value is None else value
