"""
DeskFS Exception Hierarchy

All custom exceptions inherit from TreeException so that front-ends can
catch every core failure in one place and display its message.

Architecture:
    TreeException (Base)
    ├── MissingArgumentError
    ├── RootInvariantError
    │   ├── RootAlreadyExistsError
    │   ├── CannotDeleteRootError      (also FileSystemException)
    │   ├── CannotRenameRootError      (also FileSystemException)
    │   └── NoPathBeyondRootError      (also FileSystemException)
    ├── ParentNotFoundError
    ├── TargetNotFoundError
    ├── FileSystemException
    │   ├── PathNotFoundError
    │   ├── FileNotFoundError
    │   ├── NameTakenError
    │   ├── RenameConflictError
    │   ├── NotADirectoryError
    │   ├── NotAFileError
    │   ├── InvalidNameError
    │   ├── InvalidModeError
    │   └── InvalidMoveError
    └── ShellException
        └── CommandNotFoundError
"""

from .tree_exceptions import (
    TreeException,
    RootInvariantError,
    MissingArgumentError,
    RootAlreadyExistsError,
    ParentNotFoundError,
    TargetNotFoundError,
)

from .fs_exceptions import (
    FileSystemException,
    CannotDeleteRootError,
    CannotRenameRootError,
    NoPathBeyondRootError,
    PathNotFoundError,
    FileNotFoundError,
    NameTakenError,
    RenameConflictError,
    NotADirectoryError,
    NotAFileError,
    InvalidNameError,
    InvalidModeError,
    InvalidMoveError,
)

from .shell_exceptions import (
    ShellException,
    CommandNotFoundError,
)

__all__ = [
    # Tree exceptions
    "TreeException",
    "RootInvariantError",
    "MissingArgumentError",
    "RootAlreadyExistsError",
    "ParentNotFoundError",
    "TargetNotFoundError",
    # Filesystem exceptions
    "FileSystemException",
    "CannotDeleteRootError",
    "CannotRenameRootError",
    "NoPathBeyondRootError",
    "PathNotFoundError",
    "FileNotFoundError",
    "NameTakenError",
    "RenameConflictError",
    "NotADirectoryError",
    "NotAFileError",
    "InvalidNameError",
    "InvalidModeError",
    "InvalidMoveError",
    # Shell exceptions
    "ShellException",
    "CommandNotFoundError",
]
