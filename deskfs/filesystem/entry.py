"""
Entry Module

The two kinds of filesystem entry carried as node properties:
directories, which have no payload beyond their children, and files,
which hold a text blob.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class FileType(Enum):
    """Types of filesystem entries."""
    DIRECTORY = 'directory'
    FILE = 'file'


@dataclass
class Directory:
    """A directory entry."""
    type: ClassVar[FileType] = FileType.DIRECTORY

    def copy(self) -> 'Directory':
        return Directory()


@dataclass
class File:
    """A file entry holding its contents."""
    type: ClassVar[FileType] = FileType.FILE
    contents: str = ''

    @property
    def size(self) -> int:
        return len(self.contents)

    def copy(self) -> 'File':
        return File(contents=self.contents)


Entry = Union[Directory, File]
