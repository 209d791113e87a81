"""
Generic Tree Module

A labeled, ordered, multi-child tree with glob search over node keys.
It knows nothing about files or directories; payloads are attached to
nodes as opaque properties.

Nodes live in a single table keyed by node number. Parent and child
links are node numbers, so the tree holds no reference cycles and a
deleted subtree is dropped from the table in one pass.

Author: YSNRFD
Version: 1.0.0
"""

from collections import deque
from typing import Optional, Any, List, Iterator, Union

from .glob import compile_pattern
from .node import Node
from deskfs.exceptions import (
    MissingArgumentError,
    RootAlreadyExistsError,
    ParentNotFoundError,
    TargetNotFoundError,
)
from deskfs.logger import get_logger


# A node handle, or a glob pattern resolved through search()
Locator = Union[Node, str]


class GenericTree:
    """
    A labeled tree with a single root.

    Example:
        >>> tree = GenericTree()
        >>> root = tree.insert('')
        >>> docs = tree.insert('docs', root)
        >>> notes = tree.insert('notes.txt', 'docs')
        >>> [n.key for n in tree.search('*.txt')]
        ['notes.txt']
    """

    def __init__(self):
        self._nodes: dict[int, Node] = {}
        self._next_ino = 1
        self._root_ino: Optional[int] = None
        self._logger = get_logger('tree')

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self.contains(node)

    @property
    def root(self) -> Optional[Node]:
        if self._root_ino is None:
            return None
        return self._nodes[self._root_ino]

    def _generate_ino(self) -> int:
        ino = self._next_ino
        self._next_ino += 1
        return ino

    # Node access

    def get(self, ino: int) -> Optional[Node]:
        """Get a node by number."""
        return self._nodes.get(ino)

    def contains(self, node: Node) -> bool:
        """Check that a node handle still belongs to this tree."""
        return self._nodes.get(node.ino) is node

    def parent(self, node: Node) -> Optional[Node]:
        """Get the parent of a node, None for the root."""
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def children(self, node: Node) -> List[Node]:
        """Get the direct children of a node in order."""
        return [self._nodes[ino] for ino in node.children]

    def ancestors(self, node: Node) -> Iterator[Node]:
        """Yield the node's ancestors, nearest first."""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def in_subtree(self, node: Node, top: Node) -> bool:
        """Check whether node is top itself or one of its descendants."""
        if node is top:
            return True
        return any(ancestor is top for ancestor in self.ancestors(node))

    def walk(self, node: Optional[Node] = None) -> Iterator[Node]:
        """
        Yield a subtree in pre-order.

        Each node comes before its children and children are visited
        left to right. Defaults to the whole tree.
        """
        start = node if node is not None else self.root
        if start is None:
            return

        stack = [start]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(self._nodes[ino] for ino in reversed(current.children))

    # Structural operations

    def insert(
        self,
        key: str,
        parent: Optional[Locator] = None,
        properties: Any = None
    ) -> Node:
        """
        Insert a new node.

        Args:
            key: Label of the new node
            parent: Parent node, a glob pattern (first search match is
                used), or None to make the node the root
            properties: Payload attached to the node

        Returns:
            The new node

        Raises:
            MissingArgumentError: If key is None
            RootAlreadyExistsError: If parent is None and a root exists
            ParentNotFoundError: If the parent cannot be resolved
        """
        if key is None:
            raise MissingArgumentError('key')

        if parent is None:
            if self._root_ino is not None:
                raise RootAlreadyExistsError(key)
            node = self._create(key, properties)
            self._root_ino = node.ino
        else:
            parent_node = self._resolve_parent(parent)
            node = self._create(key, properties)
            parent_node.attach(node)

        self._logger.debug(
            "Inserted node",
            context={'key': key, 'ino': node.ino, 'parent': node.parent}
        )

        return node

    def delete(self, target: Optional[Locator]) -> None:
        """
        Delete nodes and their subtrees.

        Args:
            target: Node to delete, or a glob pattern (every match is
                deleted)

        Raises:
            MissingArgumentError: If target is None
            TargetNotFoundError: If nothing matches
        """
        if target is None:
            raise MissingArgumentError('node')

        if isinstance(target, Node):
            if not self.contains(target):
                raise TargetNotFoundError(target.key)
            targets = [target]
        else:
            targets = self.search(target)
            if not targets:
                raise TargetNotFoundError(target)

        for node in targets:
            # Already dropped along with an ancestor that matched first
            if not self.contains(node):
                continue

            if node.ino == self._root_ino:
                self._nodes.clear()
                self._root_ino = None
            else:
                self.parent(node).detach(node)
                self._discard(node)

            self._logger.debug(
                "Deleted node",
                context={'key': node.key, 'ino': node.ino}
            )

    def search(self, pattern: Optional[str], start: Optional[Node] = None) -> List[Node]:
        """
        Find every node whose key matches a glob pattern.

        Args:
            pattern: Glob pattern ('*' matches any run of characters)
            start: Subtree to search, the whole tree by default

        Returns:
            Matching nodes in pre-order; empty for a rootless tree or a
            None pattern
        """
        if pattern is None or self.root is None:
            return []

        glob = compile_pattern(pattern)
        return [node for node in self.walk(start) if glob.match(node.key)]

    def find(self, node: Node, pattern: str) -> List[Node]:
        """Find the direct children of a node whose key matches a pattern."""
        glob = compile_pattern(pattern)
        return [child for child in self.children(node) if glob.match(child.key)]

    def child(self, node: Node, key: str) -> Optional[Node]:
        """Get the first direct child with exactly this key."""
        for child in self.children(node):
            if child.key == key:
                return child
        return None

    def traverse(self) -> List[List[Node]]:
        """
        Group nodes by breadth-first level.

        Returns:
            Level 0 holds the root, level 1 its children, and so on;
            empty for a rootless tree
        """
        if self.root is None:
            return []

        levels: List[List[Node]] = []
        queue = deque([self.root])

        while queue:
            level = list(queue)
            levels.append(level)
            queue.clear()
            for node in level:
                queue.extend(self.children(node))

        return levels

    # Internal helpers

    def _create(self, key: str, properties: Any) -> Node:
        node = Node(ino=self._generate_ino(), key=key, properties=properties)
        self._nodes[node.ino] = node
        return node

    def _resolve_parent(self, locator: Locator) -> Node:
        if isinstance(locator, Node):
            if not self.contains(locator):
                raise ParentNotFoundError(locator.key)
            return locator

        matches = self.search(locator)
        if not matches:
            raise ParentNotFoundError(locator)
        return matches[0]

    def _discard(self, node: Node) -> None:
        for ino in [n.ino for n in self.walk(node)]:
            del self._nodes[ino]
