"""
Shell Exceptions

Exceptions raised by the terminal front-end.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .tree_exceptions import TreeException


class ShellException(TreeException):
    """Base exception for shell errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or 5000,
            context=context
        )


class CommandNotFoundError(ShellException):
    """
    The command is neither a built-in nor a filesystem operation.

    Example:
        >>> raise CommandNotFoundError("frobnicate")
    """

    def __init__(
        self,
        command: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Command not found: {command}",
            error_code=5001,
            context=context
        )
        self.command = command
