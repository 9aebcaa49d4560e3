# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node accessors.

A TreeIndex never assumes a node shape. It reads and writes the three
meaningful fields (value, label, children) through an accessor configured
once with their names.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any


class NodeAccessor:
    """Field access for mapping-style nodes (``node[field]``).

    Each node has:
    - value: A stable unique identifier
    - label: A human-readable name, mutable
    - children: An ordered list of child nodes, absent or empty for leaves

    Example:
        >>> acc = NodeAccessor(value='id', label='name')
        >>> node = acc.make_node('1', 'root')
        >>> node
        {'id': '1', 'name': 'root', 'children': []}
        >>> acc.get_label(node)
        'root'
    """

    __slots__ = ('value', 'label', 'children')

    def __init__(
        self,
        value: str = 'value',
        label: str = 'label',
        children: str = 'children',
    ) -> None:
        """Initialize a NodeAccessor.

        Args:
            value: Name of the identifier field.
            label: Name of the display name field.
            children: Name of the children list field.
        """
        self.value = value
        self.label = label
        self.children = children

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self.value!r}, "
            f"label={self.label!r}, children={self.children!r})"
        )

    @property
    def field_names(self) -> tuple[str, str, str]:
        """The configured (value, label, children) field names."""
        return self.value, self.label, self.children

    # ==================== Raw Field Access ====================

    def get_field(self, node: Any, name: str) -> Any:
        """Read a field by name, returning None when it is absent."""
        try:
            return node[name]
        except (KeyError, IndexError, TypeError):
            return None

    def set_field(self, node: Any, name: str, value: Any) -> None:
        """Write a field by name."""
        node[name] = value

    # ==================== Semantic Fields ====================

    def get_value(self, node: Any) -> Any:
        return self.get_field(node, self.value)

    def get_label(self, node: Any) -> Any:
        return self.get_field(node, self.label)

    def set_label(self, node: Any, label: Any) -> None:
        self.set_field(node, self.label, label)

    def get_children(self, node: Any) -> list[Any] | None:
        """Return the node's children list, or None if absent or not a list."""
        children = self.get_field(node, self.children)
        if isinstance(children, list):
            return children
        return None

    def set_children(self, node: Any, children: list[Any]) -> None:
        self.set_field(node, self.children, children)

    def ensure_children(self, node: Any) -> list[Any]:
        """Return the node's children list, creating an empty one if needed."""
        children = self.get_children(node)
        if children is None:
            children = []
            self.set_children(node, children)
        return children

    def make_node(
        self, value: Any, label: Any, children: list[Any] | None = None
    ) -> Any:
        """Build a new node shaped for this accessor.

        Args:
            value: Identifier of the new node.
            label: Display name of the new node.
            children: Optional initial children. Defaults to an empty list.

        Returns:
            A new dict node.
        """
        return {
            self.value: value,
            self.label: label,
            self.children: [] if children is None else children,
        }


class AttributeAccessor(NodeAccessor):
    """Field access for attribute-style nodes (``getattr(node, field)``).

    Suitable for dataclasses, namespaces or any plain object.
    """

    __slots__ = ()

    def get_field(self, node: Any, name: str) -> Any:
        return getattr(node, name, None)

    def set_field(self, node: Any, name: str, value: Any) -> None:
        setattr(node, name, value)

    def make_node(
        self, value: Any, label: Any, children: list[Any] | None = None
    ) -> Any:
        node = SimpleNamespace()
        setattr(node, self.value, value)
        setattr(node, self.label, label)
        setattr(node, self.children, [] if children is None else children)
        return node
