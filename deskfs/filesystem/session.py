"""
Session Module

A session is one consumer's view of the filesystem: a terminal or a
file browser window. Each session keeps its own working directory
while all of them share the same tree.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from itertools import count

from deskfs.tree import Node


_session_ids = count(start=1)


@dataclass(eq=False)
class Session:
    """
    Working-directory state for one consumer.

    Attributes:
        pointer: Current working directory node
        name: Label shown in logs
        sid: Session number
    """
    pointer: Node
    name: str = 'session'
    sid: int = 0

    def __post_init__(self):
        if not self.sid:
            self.sid = next(_session_ids)

    def __repr__(self) -> str:
        return f"Session(sid={self.sid}, name={self.name!r}, pointer={self.pointer.key!r})"
