"""
Path Resolver Module

String-level path handling for the virtual file system. Walking a
path through the tree happens in VirtualFileSystem; this module only
takes paths apart and puts them back together.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List, Tuple


SEPARATOR = '/'
CURRENT = '.'
PARENT = '..'


@dataclass
class ParsedPath:
    """A parsed path with its raw segments."""
    is_absolute: bool
    segments: List[str]

    def prefix(self, count: int) -> str:
        """Render the first `count` segments as written."""
        head = SEPARATOR.join(self.segments[:count])
        return SEPARATOR + head if self.is_absolute else head


class PathResolver:
    """
    Takes apart and joins filesystem paths.

    Handles:
    - Absolute and relative paths
    - Parent/leaf splitting with trailing slashes ignored
    - Rendering of the root's empty absolute path
    """

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith(SEPARATOR)

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into segments.

        Segments are kept as written, including empty, '.' and '..'
        segments, so error messages can quote the path faithfully.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with segments
        """
        is_absolute = PathResolver.is_absolute(path)
        body = path[1:] if is_absolute else path
        segments = body.split(SEPARATOR) if body else []
        return ParsedPath(is_absolute=is_absolute, segments=segments)

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split a path into parent path and leaf name.

        Trailing slashes are ignored. The parent of a top-level
        absolute path is '/'; the parent of a bare name is '' (the
        working directory).

        Example:
            >>> PathResolver.split('docs/notes/')
            ('docs', 'notes')
            >>> PathResolver.split('/docs')
            ('/', 'docs')
        """
        stripped = path.rstrip(SEPARATOR)
        if SEPARATOR not in stripped:
            return ('/' if PathResolver.is_absolute(path) else '', stripped)

        parent, name = stripped.rsplit(SEPARATOR, 1)
        if not parent and PathResolver.is_absolute(stripped):
            parent = SEPARATOR
        return (parent, name)

    @staticmethod
    def join(*paths: str) -> str:
        """
        Join path components.

        An absolute component discards everything before it.

        Example:
            >>> PathResolver.join('/docs', 'notes', 'a.txt')
            '/docs/notes/a.txt'
        """
        result = ''
        for path in paths:
            if not path:
                continue
            if PathResolver.is_absolute(path) or not result:
                result = path
            else:
                result = result.rstrip(SEPARATOR) + SEPARATOR + path
        return result

    @staticmethod
    def display(path: str) -> str:
        """Render an absolute path, showing the root as '/'."""
        return path or SEPARATOR

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check whether a string can be used as an entry name."""
        return bool(name) and name not in (CURRENT, PARENT) and SEPARATOR not in name
