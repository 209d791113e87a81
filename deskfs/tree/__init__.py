"""
DeskFS Tree Module

Provides the generic labeled tree:
- Node table with numbered links
- Pre-order glob search and breadth-first traversal
- Restricted glob patterns ('*' only)
"""

from .node import Node
from .glob import GlobPattern, compile_pattern, matches
from .generic_tree import GenericTree, Locator

__all__ = [
    # Node
    'Node',
    # Glob
    'GlobPattern',
    'compile_pattern',
    'matches',
    # Tree
    'GenericTree',
    'Locator',
]
