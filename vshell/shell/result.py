"""
Command Result Module
"""

from dataclasses import dataclass, field
from typing import Optional, List, Union

from vshell.exceptions import ShellException
from vshell.filesystem import FileNode


def _as_lines(value: Union[None, str, List[str]]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass
class CommandResult:
    """
    Output of one command.

    Attributes:
        std_out: Lines for standard output
        std_err: Lines for standard error
        data: File node created or located by the command, if any
    """
    std_out: List[str] = field(default_factory=list)
    std_err: List[str] = field(default_factory=list)
    data: Optional[FileNode] = None

    @classmethod
    def of(
        cls,
        std_out: Union[None, str, List[str]] = None,
        std_err: Union[None, str, List[str]] = None,
        data: Optional[FileNode] = None
    ) -> 'CommandResult':
        """Build a result from a line, a list of lines or nothing."""
        return cls(std_out=_as_lines(std_out), std_err=_as_lines(std_err), data=data)

    @classmethod
    def from_error(cls, error: ShellException) -> 'CommandResult':
        return cls(std_err=[error.stderr])

    def combine(self, other: 'CommandResult') -> 'CommandResult':
        """Append other's output to this result, in order. Returns self."""
        self.std_out.extend(other.std_out)
        self.std_err.extend(other.std_err)
        if other.data is not None:
            self.data = other.data
        return self

    def render(self) -> List[str]:
        """Lines shown on the display: stdout followed by stderr."""
        return self.std_out + self.std_err
