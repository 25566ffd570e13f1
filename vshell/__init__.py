"""
VShell - a simulated shell

A line-editing shell session driving a command interpreter over an
in-memory hierarchical filesystem, with tab completion and a minimal
``vi``.
"""

import logging

__version__ = "1.0.0"

logging.getLogger('vshell').addHandler(logging.NullHandler())

from .filesystem import VirtualFileSystem, Directory, TextFile, FileType
from .shell.session import SessionState, create_session
from .shell.interpreter import CommandInterpreter
from .shell.result import CommandResult

__all__ = [
    'VirtualFileSystem',
    'Directory',
    'TextFile',
    'FileType',
    'SessionState',
    'create_session',
    'CommandInterpreter',
    'CommandResult',
]
