"""
DeskFS Shell Module

Provides the terminal front-end:
- Command parsing
- Built-in commands
- Multi-line capture for file writes
"""

from .parser import CommandParser, ParsedCommand, Token, TokenType
from .builtins import BuiltinCommands, PASSTHROUGH_COMMANDS
from .shell import Shell, PendingWrite, create_shell

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'Token',
    'TokenType',
    'BuiltinCommands',
    'PASSTHROUGH_COMMANDS',
    'Shell',
    'PendingWrite',
    'create_shell',
]
