"""
Virtual File System (VFS) Module

Implements the desktop's in-memory file system on top of GenericTree:
- Directory and file entries
- Absolute and relative path resolution with '.' and '..'
- Per-consumer working directories (sessions)
- File operations (mkdir, rmdir, cd, cat, rm, rn, cp, mv, ls, whereis)

Every operation validates its arguments and the tree before changing
anything, so a failed call leaves the tree as it was.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any, List, Iterable, Tuple, Union

from .entry import Directory, File, FileType
from .path_resolver import PathResolver, CURRENT, PARENT
from .session import Session
from deskfs.tree import GenericTree, Node
from deskfs.exceptions import (
    MissingArgumentError,
    TargetNotFoundError,
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
from deskfs.logger import get_logger


READ = ''
OVERWRITE = '>'
APPEND = '>>'
CAT_MODES = (READ, OVERWRITE, APPEND)

# A path, or a node handle obtained from an earlier call
Target = Union[str, Node]

# (ino, parent ino, key, entry) rows of a subtree in pre-order
_Snapshot = List[Tuple[int, Optional[int], str, Any]]


class VirtualFileSystem:
    """
    Virtual File System.

    The root directory always exists and has the empty string as its
    key. Relative paths resolve against a session's working directory;
    calls without a session use the filesystem's default session.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> docs = vfs.mkdir('docs')
        >>> vfs.cat('>', 'docs/todo.txt', 'buy milk')
        >>> vfs.cat('', '/docs/todo.txt')
        'buy milk'
    """

    def __init__(self):
        self._logger = get_logger('filesystem')
        self.tree = GenericTree()
        self.tree.insert('', None, Directory())
        self._sessions: List[Session] = []
        self._session = self.open_session(name='default')
        self._logger.debug("Virtual filesystem initialized")

    @property
    def root(self) -> Node:
        return self.tree.root

    @property
    def session(self) -> Session:
        """The default session."""
        return self._session

    @property
    def pointer(self) -> Node:
        """Working directory of the default session."""
        return self._session.pointer

    @pointer.setter
    def pointer(self, node: Node) -> None:
        self._session.pointer = self._require_directory(self._locate(node))

    @property
    def sessions(self) -> List[Session]:
        return list(self._sessions)

    # Sessions

    def open_session(self, path: Optional[Target] = None, name: str = 'session') -> Session:
        """
        Open a session with its own working directory.

        Args:
            path: Starting directory (path or node), the root by default
            name: Label for logs

        Returns:
            The new session
        """
        pointer = self.root if path is None else self._locate(path)
        session = Session(pointer=self._require_directory(pointer), name=name)
        self._sessions.append(session)

        self._logger.debug(
            "Opened session",
            context={'sid': session.sid, 'name': name, 'path': self.display_path(pointer)}
        )

        return session

    def close_session(self, session: Session) -> None:
        """Forget a session. The default session cannot be closed."""
        if session is self._session:
            return
        if session in self._sessions:
            self._sessions.remove(session)
            self._logger.debug("Closed session", context={'sid': session.sid})

    # Directory operations

    def mkdir(self, path: Optional[str], session: Optional[Session] = None, parents: bool = False) -> Node:
        """
        Create a directory.

        Args:
            path: Path of the new directory
            session: Session for relative paths
            parents: Create missing parent directories too. The whole
                path is checked first, so a failed call creates nothing.

        Returns:
            The new directory node

        Raises:
            NameTakenError: If the parent already has an entry with that name
        """
        if path is None:
            raise MissingArgumentError('path')

        parent_path, name = PathResolver.split(path)
        self._check_name(name)

        if parents and parent_path and parent_path != '/':
            parent, missing = self._plan_parents(parent_path, session)
        else:
            parent = self._require_directory(self._resolve_path(parent_path, session), parent_path)
            missing = []

        if not missing and self.tree.child(parent, name) is not None:
            raise NameTakenError(name, path=path)

        for segment in missing:
            parent = self.tree.insert(segment, parent, Directory())
            self._logger.debug("Created directory", context={'path': self.absolute_path(parent)})

        node = self.tree.insert(name, parent, Directory())

        self._logger.debug("Created directory", context={'path': self.absolute_path(node)})

        return node

    def rmdir(self, path: Optional[str], session: Optional[Session] = None) -> None:
        """
        Delete a directory and everything below it.

        Sessions whose working directory was inside the deleted
        directory move up to its parent.

        Raises:
            CannotDeleteRootError: If path is the root
            NotADirectoryError: If path is a file
        """
        if path is None:
            raise MissingArgumentError('path')

        node = self._resolve_path(path, session)

        if node is self.root:
            raise CannotDeleteRootError()
        if not self.is_directory(node):
            raise NotADirectoryError(path)

        parent = self.tree.parent(node)
        displaced = [s for s in self._sessions if self.tree.in_subtree(s.pointer, node)]
        deleted_path = self.absolute_path(node)

        self.tree.delete(node)

        for displaced_session in displaced:
            displaced_session.pointer = parent

        self._logger.debug(
            "Removed directory",
            context={'path': deleted_path, 'relocated_sessions': len(displaced)}
        )

    def cd(self, path: Optional[Target], session: Optional[Session] = None) -> Node:
        """
        Change a session's working directory.

        Returns:
            The new working directory
        """
        if path is None:
            raise MissingArgumentError('path')

        session = session or self._session
        node = self._require_directory(self._locate(path, session), path)
        session.pointer = node
        return node

    def ls(self, path: Optional[Target] = None, session: Optional[Session] = None) -> List[Node]:
        """
        List a directory's direct children in insertion order.

        Args:
            path: Directory to list, the working directory by default
            session: Session for relative paths

        Raises:
            NotADirectoryError: If path is a file
        """
        session = session or self._session
        node = session.pointer if path is None else self._locate(path, session)

        if not self.is_directory(node):
            raise NotADirectoryError(path if isinstance(path, str) else self.display_path(node))

        return self.tree.children(node)

    # File operations

    def cat(
        self,
        mode: Optional[str],
        path: Optional[str],
        contents: Optional[str] = None,
        session: Optional[Session] = None
    ) -> Optional[str]:
        """
        Read, overwrite or append to a file.

        Args:
            mode: '' to read, '>' to overwrite, '>>' to append; both
                write modes create the file when it is missing
            path: Path of the file
            contents: Text to write
            session: Session for relative paths

        Returns:
            The file contents when reading, None when writing

        Raises:
            NotAFileError: If the name belongs to a directory
            FileNotFoundError: If reading a missing file
        """
        if mode is None:
            raise MissingArgumentError('mode')
        if mode not in CAT_MODES:
            raise InvalidModeError(mode)
        if path is None:
            raise MissingArgumentError('path')

        parent_path, name = PathResolver.split(path)
        parent = self._require_directory(self._resolve_path(parent_path, session), parent_path)
        node = self._entry_for_cat(parent, name, path)

        if mode == READ:
            if node is None:
                raise FileNotFoundError(path)
            return node.properties.contents

        if node is None:
            self._check_name(name)
            node = self.tree.insert(name, parent, File())

        text = contents if contents is not None else ''
        if mode == OVERWRITE:
            node.properties.contents = text
        else:
            node.properties.contents += text

        self._logger.debug(
            "Wrote file",
            context={'path': self.absolute_path(node), 'mode': mode, 'size': node.properties.size}
        )

        return None

    def rm(self, path: Optional[str], session: Optional[Session] = None) -> None:
        """
        Delete a file.

        Raises:
            NotAFileError: If path is a directory
        """
        if path is None:
            raise MissingArgumentError('path')

        node = self._resolve_path(path, session)

        if not self.is_file(node):
            raise NotAFileError(path)

        deleted_path = self.absolute_path(node)
        self.tree.delete(node)

        self._logger.debug("Deleted file", context={'path': deleted_path})

    def rn(self, path: Optional[str], name: Optional[str], session: Optional[Session] = None) -> Node:
        """
        Rename an entry in place.

        A sibling may share the new name as long as it is of the other
        type.

        Raises:
            CannotRenameRootError: If path is the root
            RenameConflictError: If a same-type sibling has the name
        """
        if path is None:
            raise MissingArgumentError('path')
        if name is None:
            raise MissingArgumentError('name')

        node = self._resolve_path(path, session)

        if node is self.root:
            raise CannotRenameRootError()
        self._check_name(name)

        parent = self.tree.parent(node)
        for sibling in self.tree.children(parent):
            if sibling is not node and sibling.key == name and self.type_of(sibling) == self.type_of(node):
                raise RenameConflictError(path, name)

        old_key = node.key
        node.key = name

        self._logger.debug(
            "Renamed entry",
            context={'from': old_key, 'to': name, 'path': self.absolute_path(node)}
        )

        return node

    def cp(
        self,
        target: Optional[Target],
        destination: Optional[Target],
        session: Optional[Session] = None
    ) -> Node:
        """
        Copy an entry and its subtree into a directory.

        Copies keep the original's type, file contents and child order.

        Args:
            target: Entry to copy (path or node)
            destination: Directory receiving the copy (path or node)
            session: Session for relative paths

        Returns:
            The root of the copied subtree
        """
        if target is None:
            raise MissingArgumentError('target')
        if destination is None:
            raise MissingArgumentError('destination')

        source = self._locate(target, session)
        parent = self._require_directory(self._locate(destination, session), destination)
        self._check_free(parent, source, destination)

        copied = self._materialize(self._snapshot(source), parent)

        self._logger.debug(
            "Copied entry",
            context={'from': self.absolute_path(source), 'to': self.absolute_path(copied)}
        )

        return copied

    def mv(
        self,
        target: Optional[Target],
        destination: Optional[Target],
        session: Optional[Session] = None
    ) -> Node:
        """
        Move an entry and its subtree into a directory.

        The entry is deleted and rebuilt from a copy, so the moved
        nodes are new nodes and old handles to them go stale. Sessions
        working inside the moved subtree follow it to the new place.

        Returns:
            The root of the moved subtree

        Raises:
            CannotDeleteRootError: If target is the root
            InvalidMoveError: If destination is inside target
        """
        if target is None:
            raise MissingArgumentError('target')
        if destination is None:
            raise MissingArgumentError('destination')

        source = self._locate(target, session)
        parent = self._require_directory(self._locate(destination, session), destination)

        if source is self.root:
            raise CannotDeleteRootError()
        if self.tree.in_subtree(parent, source):
            raise InvalidMoveError(self.absolute_path(source), self.absolute_path(parent))
        self._check_free(parent, source, destination)

        snapshot = self._snapshot(source)
        followers = [
            (s, s.pointer.ino) for s in self._sessions
            if self.tree.in_subtree(s.pointer, source)
        ]
        old_path = self.absolute_path(source)

        self.tree.delete(source)
        copies = self._copy_rows(snapshot, parent)

        for follower, ino in followers:
            follower.pointer = copies[ino]

        moved = copies[snapshot[0][0]]

        self._logger.debug(
            "Moved entry",
            context={'from': old_path, 'to': self.absolute_path(moved)}
        )

        return moved

    def whereis(self, query: Optional[str]) -> List[Node]:
        """
        Find every entry whose name matches a glob pattern.

        Returns:
            Matching nodes in pre-order, the root first
        """
        if query is None:
            raise MissingArgumentError('query')
        return self.tree.search(query)

    # Path algebra

    def resolve(self, path: Optional[Target] = None, session: Optional[Session] = None) -> Node:
        """Resolve a path (or validate a node handle); None means the root."""
        if path is None:
            return self.root
        return self._locate(path, session)

    def absolute_path(self, node: Node) -> str:
        """
        Render a node's absolute path.

        The root's key is empty, so the root renders as '' and its
        children as '/name'.
        """
        keys = [node.key] + [ancestor.key for ancestor in self.tree.ancestors(node)]
        return '/'.join(reversed(keys))

    def display_path(self, node: Node) -> str:
        """Render a node's absolute path with the root shown as '/'."""
        return PathResolver.display(self.absolute_path(node))

    # Entry helpers

    @staticmethod
    def type_of(node: Node) -> FileType:
        return node.properties.type

    @staticmethod
    def is_directory(node: Node) -> bool:
        return isinstance(node.properties, Directory)

    @staticmethod
    def is_file(node: Node) -> bool:
        return isinstance(node.properties, File)

    @classmethod
    def sort_entries(cls, nodes: Iterable[Node], directories_first: bool = True) -> List[Node]:
        """Order entries for display: directories first, then by name."""
        if directories_first:
            return sorted(nodes, key=lambda n: (not cls.is_directory(n), n.key))
        return sorted(nodes, key=lambda n: n.key)

    def describe(self, node: Node) -> dict[str, Any]:
        """Summarize an entry for display."""
        info = {
            'name': node.key,
            'path': self.display_path(node),
            'type': self.type_of(node).value,
        }
        if self.is_file(node):
            info['size'] = node.properties.size
        else:
            info['entries'] = len(node.children)
        return info

    def traverse(self) -> List[List[Node]]:
        """Group every entry by depth, the root alone at depth 0."""
        return self.tree.traverse()

    def get_stats(self) -> dict[str, Any]:
        """Get filesystem statistics."""
        directories = files = size = 0
        for node in self.tree.walk():
            if self.is_file(node):
                files += 1
                size += node.properties.size
            else:
                directories += 1
        return {
            'directories': directories,
            'files': files,
            'total_size': size,
            'sessions': len(self._sessions),
        }

    # Internal helpers

    def _resolve_path(self, path: str, session: Optional[Session] = None) -> Node:
        """
        Walk a path from the root (absolute) or a working directory.

        Empty and '.' segments are skipped, '..' climbs one level and
        any other segment must name a direct child exactly.
        """
        parsed = PathResolver.parse(path)
        node = self.root if parsed.is_absolute else (session or self._session).pointer

        for index, segment in enumerate(parsed.segments):
            if not segment or segment == CURRENT:
                continue

            if segment == PARENT:
                parent = self.tree.parent(node)
                if parent is None:
                    raise NoPathBeyondRootError(path)
                node = parent
                continue

            child = self.tree.child(node, segment)
            if child is None:
                raise PathNotFoundError(path, partial_path=parsed.prefix(index + 1))
            node = child

        return node

    def _locate(self, target: Target, session: Optional[Session] = None) -> Node:
        if isinstance(target, Node):
            if not self.tree.contains(target):
                raise TargetNotFoundError(target.key)
            return target
        return self._resolve_path(target, session)

    def _require_directory(self, node: Node, path: Optional[Target] = None) -> Node:
        if not self.is_directory(node):
            shown = path if isinstance(path, str) and path else self.display_path(node)
            raise NotADirectoryError(shown)
        return node

    def _plan_parents(self, path: str, session: Optional[Session]) -> Tuple[Node, List[str]]:
        """
        Walk a parent path without changing the tree.

        Returns:
            The deepest existing directory on the path and the names
            still to be created below it, in order. A missing directory
            climbed out of by a later '..' is dropped from the list.
        """
        parsed = PathResolver.parse(path)
        node = self.root if parsed.is_absolute else (session or self._session).pointer
        missing: List[str] = []

        for index, segment in enumerate(parsed.segments):
            if not segment or segment == CURRENT:
                continue

            if segment == PARENT:
                if missing:
                    missing.pop()
                    continue
                parent = self.tree.parent(node)
                if parent is None:
                    raise NoPathBeyondRootError(path)
                node = parent
                continue

            if missing:
                missing.append(segment)
                continue

            child = self.tree.child(node, segment)
            if child is None:
                missing.append(segment)
            elif not self.is_directory(child):
                raise NotADirectoryError(parsed.prefix(index + 1))
            else:
                node = child

        return node, missing

    def _entry_for_cat(self, parent: Node, name: str, path: str) -> Optional[Node]:
        node = self.tree.child(parent, name)
        if node is not None and not self.is_file(node):
            raise NotAFileError(path)
        return node

    def _check_free(self, parent: Node, source: Node, destination: Target) -> None:
        for child in self.tree.children(parent):
            if child is not source and child.key == source.key and self.type_of(child) == self.type_of(source):
                shown = destination if isinstance(destination, str) else self.display_path(parent)
                raise NameTakenError(source.key, path=shown)

    @staticmethod
    def _check_name(name: str) -> None:
        if not PathResolver.is_valid_name(name):
            raise InvalidNameError(name)

    def _snapshot(self, source: Node) -> _Snapshot:
        # Taken before any insertion, so copying a directory into its
        # own subtree does not copy the copy.
        return [
            (node.ino, node.parent, node.key, node.properties.copy())
            for node in self.tree.walk(source)
        ]

    def _copy_rows(self, snapshot: _Snapshot, parent: Node) -> dict[int, Node]:
        top_ino = snapshot[0][0]
        copies: dict[int, Node] = {}

        for ino, parent_ino, key, entry in snapshot:
            new_parent = parent if ino == top_ino else copies[parent_ino]
            copies[ino] = self.tree.insert(key, new_parent, entry)

        return copies

    def _materialize(self, snapshot: _Snapshot, parent: Node) -> Node:
        return self._copy_rows(snapshot, parent)[snapshot[0][0]]
