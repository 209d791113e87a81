"""
Filesystem Exceptions

Exceptions related to virtual filesystem operations: path resolution,
sibling name conflicts and directory/file type mismatches.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .tree_exceptions import TreeException, RootInvariantError


class FileSystemException(TreeException):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or 4000,
            context=context
        )
        self.path = path
        if path is not None:
            self.context["path"] = path


class CannotDeleteRootError(FileSystemException, RootInvariantError):
    """
    The root directory cannot be deleted or moved.

    Example:
        >>> raise CannotDeleteRootError()
    """

    def __init__(self, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message="You cannot delete the root directory.",
            path="/",
            error_code=4001,
            context=context
        )


class CannotRenameRootError(FileSystemException, RootInvariantError):
    """
    The root directory cannot be renamed.

    Example:
        >>> raise CannotRenameRootError()
    """

    def __init__(self, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message="You cannot rename the root directory.",
            path="/",
            error_code=4002,
            context=context
        )


class NoPathBeyondRootError(FileSystemException, RootInvariantError):
    """
    A '..' segment was applied while already at the root.

    Example:
        >>> raise NoPathBeyondRootError("../..")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message="No more directories beyond root directory.",
            path=path,
            error_code=4003,
            context=context
        )


class PathNotFoundError(FileSystemException):
    """
    A path segment did not match any entry.

    The message cites the partial path traversed up to and including
    the segment that failed.

    Example:
        >>> raise PathNotFoundError("/a/missing", partial_path="/a/missing")
    """

    def __init__(
        self,
        path: str,
        partial_path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        partial = partial_path if partial_path is not None else path
        ctx = context or {}
        ctx["partial_path"] = partial
        super().__init__(
            message=f"Path not found: {partial}",
            path=path,
            error_code=4004,
            context=ctx
        )
        self.partial_path = partial


class FileNotFoundError(FileSystemException):
    """
    The specified file does not exist.

    Example:
        >>> raise FileNotFoundError("notes/todo.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File not found: {path}",
            path=path,
            error_code=4005,
            context=context
        )


class NameTakenError(FileSystemException):
    """
    An entry with the requested name already exists in the directory.

    Example:
        >>> raise NameTakenError("docs")
    """

    def __init__(
        self,
        name: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Name already taken: {name}",
            path=path,
            error_code=4006,
            context=context
        )
        self.name = name


class RenameConflictError(FileSystemException):
    """
    A sibling of the same type already uses the new name.

    Example:
        >>> raise RenameConflictError("/docs/a.txt", name="b.txt")
    """

    def __init__(
        self,
        path: str,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__(
            message=f"Rename failed. Name already taken: {name}",
            path=path,
            error_code=4007,
            context=ctx
        )
        self.name = name


class NotADirectoryError(FileSystemException):
    """
    Path is not a directory.

    Example:
        >>> raise NotADirectoryError("/docs/a.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4008,
            context=context
        )


class NotAFileError(FileSystemException):
    """
    Path is not a regular file.

    Example:
        >>> raise NotAFileError("/docs")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a file: {path}",
            path=path,
            error_code=4009,
            context=context
        )


class InvalidNameError(FileSystemException):
    """
    An entry name is empty, is '.' or '..', or contains a slash.

    Example:
        >>> raise InvalidNameError("a/b")
    """

    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Invalid name: {name!r}",
            error_code=4010,
            context=context
        )
        self.name = name


class InvalidModeError(FileSystemException):
    """
    An unknown cat mode was given.

    Example:
        >>> raise InvalidModeError("<")
    """

    def __init__(
        self,
        mode: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Invalid mode: {mode!r} (expected '', '>' or '>>')",
            error_code=4011,
            context=context
        )
        self.mode = mode


class InvalidMoveError(FileSystemException):
    """
    A directory cannot be moved into itself or one of its descendants.

    Example:
        >>> raise InvalidMoveError("/a", destination="/a/b")
    """

    def __init__(
        self,
        path: str,
        destination: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["destination"] = destination
        super().__init__(
            message=f"Cannot move {path or '/'} into itself: {destination or '/'}",
            path=path,
            error_code=4012,
            context=ctx
        )
        self.destination = destination
