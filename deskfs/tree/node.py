"""
Node Module

A node is one labeled entry of a GenericTree. Nodes do not reference
each other directly: the tree keeps every node in a table keyed by
its number and links are stored as numbers.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, Any, List


@dataclass(eq=False)
class Node:
    """
    A labeled, ordered container.

    Attributes:
        ino: Node number, unique within its tree for the tree's lifetime
        key: Label, unique only among siblings (and only if the caller
            enforces it)
        parent: Number of the parent node, None for the root
        children: Numbers of the child nodes in order
        properties: Payload attached at creation
    """

    ino: int
    key: str
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    properties: Any = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def attach(self, child: 'Node') -> None:
        """Append a child and point it back at this node."""
        self.children.append(child.ino)
        child.parent = self.ino

    def detach(self, child: 'Node') -> None:
        """Remove the first occurrence of a child."""
        self.children.remove(child.ino)
        child.parent = None

    def __repr__(self) -> str:
        return (
            f"Node(ino={self.ino}, key={self.key!r}, "
            f"parent={self.parent}, children={len(self.children)})"
        )
