"""
DeskFS Virtual File System Module

Provides the desktop's file system:
- Directory and file entries on a generic tree
- Path resolution with '.' and '..'
- Per-consumer sessions
- File operations
"""

from .entry import Directory, File, FileType, Entry
from .path_resolver import PathResolver, ParsedPath
from .session import Session
from .vfs import VirtualFileSystem, Target, READ, OVERWRITE, APPEND, CAT_MODES
from .seed import populate_sample_tree, SAMPLE_DIRECTORIES, SAMPLE_FILES

__all__ = [
    # Entries
    'Directory',
    'File',
    'FileType',
    'Entry',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    # Sessions
    'Session',
    # VFS
    'VirtualFileSystem',
    'Target',
    'READ',
    'OVERWRITE',
    'APPEND',
    'CAT_MODES',
    # Sample tree
    'populate_sample_tree',
    'SAMPLE_DIRECTORIES',
    'SAMPLE_FILES',
]
