"""
DeskFS - In-memory filesystem for a simulated desktop

A generic labeled tree specialized into directories and files, with
path resolution, glob search and a terminal front-end. Implemented in
Python 3.10+ using only the standard library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .tree import GenericTree, Node
from .filesystem import VirtualFileSystem, Session, populate_sample_tree
from .shell import Shell, create_shell

__all__ = [
    'GenericTree',
    'Node',
    'VirtualFileSystem',
    'Session',
    'populate_sample_tree',
    'Shell',
    'create_shell',
]
