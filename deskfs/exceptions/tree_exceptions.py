"""
Tree Exceptions

Exceptions raised by the generic labeled tree. These cover missing
arguments, root invariant violations and locator resolution failures.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class TreeException(Exception):
    """
    Base exception for all DeskFS errors.

    Every failure raised by the tree, the filesystem and the shell
    derives from this class so that consumers can catch them all in
    one place and display the message.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 3000
        self.context = context or {}

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class RootInvariantError(TreeException):
    """Base class for operations that would break the single-root invariant."""
    pass


class MissingArgumentError(TreeException):
    """
    A required argument was omitted.

    Example:
        >>> raise MissingArgumentError("key")
    """

    def __init__(
        self,
        argument: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["argument"] = argument
        super().__init__(
            message=f"Missing argument: {argument}",
            error_code=3001,
            context=ctx
        )
        self.argument = argument


class RootAlreadyExistsError(RootInvariantError):
    """
    The tree already has a root and no parent was given.

    Example:
        >>> raise RootAlreadyExistsError("docs")
    """

    def __init__(
        self,
        key: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["key"] = key
        super().__init__(
            message="Tree already has a root. Please specify the node's parent.",
            error_code=3002,
            context=ctx
        )
        self.key = key


class ParentNotFoundError(TreeException):
    """
    A parent locator matched no node.

    Example:
        >>> raise ParentNotFoundError("*.txt")
    """

    def __init__(
        self,
        locator: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["locator"] = locator
        super().__init__(
            message=f"Parent node not found: {locator}",
            error_code=3003,
            context=ctx
        )
        self.locator = locator


class TargetNotFoundError(TreeException):
    """
    A node locator matched no node, or a node handle is no longer in the tree.

    Example:
        >>> raise TargetNotFoundError("notes")
    """

    def __init__(
        self,
        locator: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["locator"] = locator
        super().__init__(
            message=f"Target node not found: {locator}",
            error_code=3004,
            context=ctx
        )
        self.locator = locator
