"""
Shell Exceptions

Exceptions raised inside the shell core. None of them escape a command:
handlers and the interpreter turn them into stderr lines of a CommandResult.
Each one carries the exact stderr line shown to the user.
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all shell errors.

    Attributes:
        message: Human-readable error description
        stderr: Line rendered to the user for this error
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        stderr: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stderr = stderr if stderr is not None else message
        self.error_code = error_code or 5000
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class CommandNotFoundError(ShellException):
    """
    No handler is registered under the command name.

    Example:
        >>> raise CommandNotFoundError("foo")
    """

    def __init__(self, command: str) -> None:
        super().__init__(
            message=f"Command not found: {command}",
            stderr=f"{command}: command not found",
            error_code=5001,
            context={'command': command}
        )
        self.command = command


class DirectoryNotFoundError(ShellException):
    """
    A directory along a path could not be resolved.

    Raised by VirtualFileSystem.create when the parent of the new node
    does not exist.
    """

    def __init__(self, path: str) -> None:
        super().__init__(
            message=f"Directory not found: {path}",
            stderr=f"{path}: Directory not found",
            error_code=5002,
            context={'path': path}
        )
        self.path = path


class NoSuchFileError(ShellException):
    """The named file does not exist."""

    def __init__(self, path: str, command: str = 'bash') -> None:
        super().__init__(
            message=f"No such file or directory: {path}",
            stderr=f"{command}: {path}: No such file or directory",
            error_code=5003,
            context={'path': path}
        )
        self.path = path


class IsDirectoryError(ShellException):
    """A text file was expected but the path names a directory."""

    def __init__(self, name: str, command: str) -> None:
        super().__init__(
            message=f"Is a directory: {name}",
            stderr=f"{command}: {name}: Is a directory",
            error_code=5004,
            context={'name': name}
        )
        self.name = name


class RedirectSyntaxError(ShellException):
    """A redirect operator is not followed by a target path."""

    def __init__(self, operator: str) -> None:
        super().__init__(
            message=f"Missing redirect target after '{operator}'",
            stderr="bash: syntax error near unexpected token `newline'",
            error_code=5005,
            context={'operator': operator}
        )
        self.operator = operator


class ConfigValidationError(ShellException):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(
            message=message,
            error_code=5100,
            context={'path': path} if path else None
        )
        self.path = path
