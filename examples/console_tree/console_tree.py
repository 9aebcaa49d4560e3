# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConsoleTree - Example presentation layer over a TreeIndex.

A didactic example: a text tree with add/rename/delete commands. The
TreeIndex does the structural work; this class only turns commands into
index calls and re-renders the forest afterwards.

Commands (one per line):
    add <name>            add a root node
    add <value> <name>    add a child under the node with that value
    rename <value> <name> rename a node
    delete <value>        delete a node and its subtree
    path <value>          print the label path of a node
    quit
"""

from __future__ import annotations

import itertools
import logging

from genro_treeindex import TreeIndex, TreeIndexError


class ConsoleTree:
    """A forest rendered as indented text.

    Example:
        >>> tree = ConsoleTree()
        >>> docs = tree.add('docs')
        >>> api = tree.add('api', parent=docs)
        >>> print(tree.render())
        docs (1)
          api (2)
    """

    def __init__(self, forest: list | None = None) -> None:
        self.index = TreeIndex(forest, value='id', label='name')
        self._ids = itertools.count(1)

    def add(self, name: str, parent: str | None = None) -> str:
        """Add a node under ``parent`` (a value) or as a root. Returns its value."""
        target = self.index.forest if parent is None else self._lookup(parent)
        node = self.index.accessor.make_node(str(next(self._ids)), name)
        self.index.add_child(target, node)
        return node['id']

    def rename(self, value: str, name: str) -> None:
        self.index.rename(self._lookup(value), name)

    def delete(self, value: str) -> None:
        self.index.remove_child(self._lookup(value))
        self.index.prune()

    def path(self, value: str) -> str:
        labels = self.index.get_path(self._lookup(value), 'name')
        return ' / '.join(reversed(labels))

    def render(self) -> str:
        return '\n'.join(
            f"{'  ' * depth}{node['name']} ({node['id']})"
            for depth, node in self.index.walk()
        )

    def _lookup(self, value: str) -> dict:
        node = self.index.find(value)
        if node is None:
            raise KeyError(f"No node with value '{value}'")
        return node

    def execute(self, line: str) -> str | None:
        """Run one command line. Returns output text, if any."""
        command, _, rest = line.strip().partition(' ')
        args = rest.split(' ', 1) if rest else []
        if command == 'add' and len(args) == 1:
            self.add(args[0])
        elif command == 'add' and len(args) == 2:
            self.add(args[1], parent=args[0])
        elif command == 'rename' and len(args) == 2:
            self.rename(args[0], args[1])
        elif command == 'delete' and len(args) == 1:
            self.delete(args[0])
        elif command == 'path' and len(args) == 1:
            return self.path(args[0])
        else:
            return f"Unknown command: {line.strip()}"
        return self.render()


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    tree = ConsoleTree()
    while True:
        try:
            line = input('> ')
        except EOFError:
            break
        if line.strip() == 'quit':
            break
        if not line.strip():
            continue
        try:
            output = tree.execute(line)
        except (KeyError, TreeIndexError) as exc:
            output = f"Error: {exc}"
        if output:
            print(output)


if __name__ == '__main__':
    main()
