"""
VShell Exception Hierarchy

Architecture:
    ShellException (Base)
    ├── CommandNotFoundError
    ├── DirectoryNotFoundError
    ├── NoSuchFileError
    ├── IsDirectoryError
    ├── RedirectSyntaxError
    └── ConfigValidationError
"""

from .shell_exceptions import (
    ShellException,
    CommandNotFoundError,
    DirectoryNotFoundError,
    NoSuchFileError,
    IsDirectoryError,
    RedirectSyntaxError,
    ConfigValidationError,
)

__all__ = [
    "ShellException",
    "CommandNotFoundError",
    "DirectoryNotFoundError",
    "NoSuchFileError",
    "IsDirectoryError",
    "RedirectSyntaxError",
    "ConfigValidationError",
]
