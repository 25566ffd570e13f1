"""
VShell Virtual File System Module

Provides the in-memory file tree:
- Directory and text file nodes
- Path splitting and resolution
- Node creation and typed listing
"""

from .nodes import FileNode, Directory, TextFile, FileType
from .path_resolver import PathResolver, ParsedPath
from .vfs import VirtualFileSystem

__all__ = [
    # Nodes
    'FileNode',
    'Directory',
    'TextFile',
    'FileType',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    # VFS
    'VirtualFileSystem',
]
