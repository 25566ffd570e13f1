"""
File Node Module

The nodes that make up the virtual filesystem tree.

Parents own their children through an ordered list; children refer back to
their parent through a weak reference, so the tree has no ownership cycles.
"""

import time
import weakref
from enum import Enum
from typing import Optional, List


class FileType(Enum):
    """Types of filesystem nodes."""
    DIRECTORY = 'dir'
    TEXT = 'txt'


class FileNode:
    """
    Common base for everything stored in the tree.

    Attributes:
        name: Name of the node within its parent
        file_type: FileType of the node
    """

    file_type: FileType

    def __init__(self, name: str, parent: Optional['Directory'] = None):
        self.name = name
        self._parent_ref: Optional[weakref.ref] = None
        if parent is not None:
            self._parent_ref = weakref.ref(parent)

    @property
    def parent(self) -> Optional['Directory']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def path(self) -> str:
        """Full path of the node, e.g. ``~/projects/shell.txt``."""
        parent = self.parent
        if parent is None:
            return getattr(self, 'root_label', '')
        return f"{parent.path}/{self.name}"

    @property
    def type(self) -> str:
        return self.file_type.value

    @property
    def is_directory(self) -> bool:
        return self.file_type == FileType.DIRECTORY

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


class Directory(FileNode):
    """A directory: an ordered list of child nodes (creation order)."""

    file_type = FileType.DIRECTORY

    def __init__(
        self,
        name: str = '',
        parent: Optional['Directory'] = None,
        root_label: str = '~'
    ):
        super().__init__(name, parent)
        self.root_label = root_label
        self.children: List[FileNode] = []

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def add_child(self, node: FileNode) -> FileNode:
        """Append a node created with this directory as its parent."""
        if node.parent is not self:
            raise ValueError(f"{node.name!r} was not created under {self.path!r}")
        self.children.append(node)
        return node

    def get_child(self, name: str, file_type: Optional[FileType] = None) -> Optional[FileNode]:
        """
        Find a child by exact name.

        Args:
            name: Child name
            file_type: Only match a child of this type, if given

        Returns:
            The last matching child, or None
        """
        found = None
        for child in self.children:
            if child.name == name and (file_type is None or child.file_type == file_type):
                found = child
        return found

    def get_children_by_types(self, file_types: Optional[List[FileType]] = None) -> List[FileNode]:
        """Children whose type is in file_types (all children when None)."""
        if file_types is None:
            return list(self.children)
        return [child for child in self.children if child.file_type in file_types]


class TextFile(FileNode):
    """A text file. Content is kept as a list of lines."""

    file_type = FileType.TEXT

    def __init__(
        self,
        name: str,
        parent: Optional[Directory] = None,
        contents: Optional[List[str]] = None
    ):
        super().__init__(name, parent)
        self.contents: List[str] = list(contents or [])
        self.last_modified: float = time.time()

    @property
    def text(self) -> str:
        return '\n'.join(self.contents)

    def touch(self) -> None:
        """Update the modification time."""
        self.last_modified = time.time()

    def write(self, lines: List[str]) -> None:
        """Replace the content."""
        self.contents = list(lines)
        self.touch()

    def append(self, lines: List[str]) -> None:
        """Append lines to the content."""
        self.contents.extend(lines)
        self.touch()

