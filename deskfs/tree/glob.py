"""
Glob Pattern Module

Matches node keys against restricted glob patterns: '*' stands for any
run of characters (possibly empty) and every other character matches
itself. Patterns are anchored at both ends.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


WILDCARD = '*'


@dataclass(frozen=True)
class GlobPattern:
    """
    A compiled glob pattern.

    The pattern is kept as the literal segments found between
    wildcards. A pattern without wildcards has a single segment and
    only matches an identical key.

    Example:
        >>> compile_pattern('*.txt').match('note.txt')
        True
        >>> compile_pattern('*.txt').match('note.txtx')
        False
    """
    pattern: str
    segments: Tuple[str, ...]

    @property
    def is_literal(self) -> bool:
        return len(self.segments) == 1

    def match(self, key: str) -> bool:
        """Check whether the whole key matches the pattern."""
        if self.is_literal:
            return key == self.segments[0]

        head, *middle, tail = self.segments

        if len(key) < len(head) + len(tail):
            return False
        if not key.startswith(head) or not key.endswith(tail):
            return False

        # Each middle segment takes its leftmost place after the previous one
        position = len(head)
        end = len(key) - len(tail)
        for segment in middle:
            index = key.find(segment, position, end)
            if index < 0:
                return False
            position = index + len(segment)

        return True

    def __str__(self) -> str:
        return self.pattern


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> GlobPattern:
    """
    Compile a glob pattern.

    Args:
        pattern: Pattern string, '*' being the only wildcard

    Returns:
        GlobPattern ready for matching
    """
    return GlobPattern(pattern=pattern, segments=tuple(pattern.split(WILDCARD)))


def matches(key: str, pattern: str) -> bool:
    """Check whether a key matches a glob pattern."""
    return compile_pattern(pattern).match(key)
