"""
Command Parser Module

Parses terminal command lines into a command and its arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class TokenType(Enum):
    """Token types for command parsing."""
    WORD = "word"
    MODE = "mode"


@dataclass
class Token:
    """A parsed token."""
    type: TokenType
    value: str


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)
    line: str = ""


class CommandParser:
    """
    Parses terminal command lines.

    Handles:
    - Command and arguments separated by whitespace
    - Quoted strings (single or double quotes, stripped)
    - Escape sequences (backslash)
    - The write modes '>' and '>>' as separate arguments
    - Comment lines starting with '#'

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse('cat > notes.txt "hello world"')
        >>> cmd.args
        ['>', 'notes.txt', 'hello world']
    """

    def __init__(self, history_size: int = 1000):
        self._history: List[str] = []
        self._history_size = history_size

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            ParsedCommand or None if empty
        """
        line = line.strip()

        if not line or line.startswith('#'):
            return None

        self._remember(line)

        tokens = self.tokenize(line)

        if not tokens:
            return None

        words = [token.value for token in tokens]
        return ParsedCommand(command=words[0], args=words[1:], line=line)

    def tokenize(self, line: str) -> List[Token]:
        """Convert a line into tokens."""
        tokens: List[Token] = []
        current = ""
        quoted = False
        in_quote = None
        i = 0

        def flush() -> None:
            nonlocal current, quoted
            if current or quoted:
                tokens.append(Token(TokenType.WORD, current))
            current = ""
            quoted = False

        while i < len(line):
            char = line[i]

            # Handle quotes
            if char in ('"', "'") and in_quote is None:
                in_quote = char
                quoted = True
                i += 1
                continue

            if char == in_quote:
                in_quote = None
                i += 1
                continue

            # Handle escape
            if char == '\\' and i + 1 < len(line):
                current += line[i + 1]
                i += 2
                continue

            # Inside quotes, just add character
            if in_quote:
                current += char
                i += 1
                continue

            if char == '>':
                flush()
                if i + 1 < len(line) and line[i + 1] == '>':
                    tokens.append(Token(TokenType.MODE, '>>'))
                    i += 2
                else:
                    tokens.append(Token(TokenType.MODE, '>'))
                    i += 1
                continue

            if char.isspace():
                flush()
                i += 1
                continue

            current += char
            i += 1

        flush()

        return tokens

    def _remember(self, line: str) -> None:
        self._history.append(line)
        if len(self._history) > self._history_size:
            self._history = self._history[-self._history_size:]

    def get_history(self) -> List[str]:
        """Get command history."""
        return self._history

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
