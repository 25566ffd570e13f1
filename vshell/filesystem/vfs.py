"""
Virtual File System (VFS) Module

An in-memory tree of directories and text files:
- Path resolution relative to any directory
- Node creation
- Listing a directory filtered by node type

The tree lives for the duration of the session; nothing is persisted and
nothing is ever deleted.
"""

from typing import Optional, Any, List

from .nodes import FileNode, Directory, TextFile, FileType
from .path_resolver import PathResolver, CURRENT, PARENT, HOME
from vshell.exceptions import ConfigValidationError, DirectoryNotFoundError, NoSuchFileError
from vshell.logger import get_logger


class VirtualFileSystem:
    """
    Virtual File System.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> notes = vfs.create(vfs.root, ['notes.txt'], FileType.TEXT)
        >>> vfs.resolve(vfs.root, ['notes.txt'], FileType.TEXT) is notes
        True
    """

    def __init__(self, root_label: str = '~', seed: Optional[dict[str, Any]] = None):
        self._logger = get_logger('filesystem')
        self._root = Directory(name='', parent=None, root_label=root_label)
        if seed:
            self.populate(self._root, seed)

    @property
    def root(self) -> Directory:
        return self._root

    def resolve(
        self,
        start: Directory,
        segments: List[str],
        required_type: Optional[FileType] = None
    ) -> Optional[FileNode]:
        """
        Resolve path segments relative to a directory.

        ``.`` is the current directory, ``..`` its parent (the root is its
        own parent) and ``~`` the root. Every segment but the last must be
        a directory; the last one is matched against required_type when it
        is given. An empty last segment with required_type DIRECTORY is the
        directory reached so far.

        Never mutates the tree.

        Returns:
            The node, or None if any hop fails
        """
        if not segments:
            return start if required_type == FileType.DIRECTORY else None

        current: Optional[FileNode] = start
        last = len(segments) - 1

        for index, segment in enumerate(segments):
            if current is None or not isinstance(current, Directory):
                return None

            type_to_find = required_type if index == last else FileType.DIRECTORY

            if segment == '' and index == last and required_type == FileType.DIRECTORY:
                found: Optional[FileNode] = current
            elif segment == CURRENT:
                found = current
            elif segment == PARENT:
                found = current.parent or current
            elif segment == HOME:
                found = self._root
            else:
                found = current.get_child(segment, type_to_find)

            current = found

        return current

    def resolve_path(
        self,
        start: Directory,
        path: str,
        required_type: Optional[FileType] = None
    ) -> Optional[FileNode]:
        """Resolve a path string (see resolve)."""
        return self.resolve(start, PathResolver.split(path), required_type)

    def create(self, start: Directory, segments: List[str], file_type: FileType) -> FileNode:
        """
        Create a new node.

        All segments but the last are resolved as a directory; the last one
        names the new node. Existing siblings are never checked or replaced.

        Raises:
            DirectoryNotFoundError: If the parent directory does not resolve
            NoSuchFileError: If the new node would have an empty name
        """
        dir_segments, name = PathResolver.split_last(segments)

        if dir_segments:
            parent = self.resolve(start, dir_segments, FileType.DIRECTORY)
        else:
            parent = start

        if parent is None:
            raise DirectoryNotFoundError(PathResolver.join(dir_segments))
        if not name:
            raise NoSuchFileError(PathResolver.join(segments))

        node: FileNode
        if file_type == FileType.DIRECTORY:
            node = Directory(name, parent, root_label=self._root.root_label)
        else:
            node = TextFile(name, parent)
        parent.add_child(node)

        self._logger.debug("Created node", context={'path': node.path, 'type': node.type})
        return node

    def list_by_types(
        self,
        directory: Directory,
        file_types: Optional[List[FileType]] = None
    ) -> List[FileNode]:
        """Children of directory whose type is in file_types, in creation order."""
        return directory.get_children_by_types(file_types)

    def populate(self, directory: Directory, seed: dict[str, Any]) -> None:
        """
        Build a subtree from a nested mapping.

        A dict value is a directory, a list of strings a text file, a plain
        string a single-line text file.
        """
        for name, value in seed.items():
            if isinstance(value, dict):
                child = self.create(directory, [name], FileType.DIRECTORY)
                self.populate(child, value)
            elif isinstance(value, str):
                self.create(directory, [name], FileType.TEXT).write([value])
            elif isinstance(value, list) and all(isinstance(line, str) for line in value):
                self.create(directory, [name], FileType.TEXT).write(value)
            else:
                raise ConfigValidationError(
                    f"Seed entry {name!r} must be an object, a string or a list of strings"
                )
