"""
Display Module

The surface the shell writes to. The shell only ever writes: whole lines,
inline candidate lists, and clear requests.
"""

from abc import ABC, abstractmethod
import sys
from typing import List, TextIO, Optional


class Display(ABC):
    """Output surface for a shell session."""

    @abstractmethod
    def print(self, line: str) -> None:
        """Write one line."""

    @abstractmethod
    def print_inline(self, items: List[str]) -> None:
        """Write several short items on one line."""

    @abstractmethod
    def clear(self) -> None:
        """Remove everything written so far."""


class ConsoleDisplay(Display):
    """Writes to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout

    def print(self, line: str) -> None:
        self._stream.write(line + '\n')
        self._stream.flush()

    def print_inline(self, items: List[str]) -> None:
        self.print('  '.join(items))

    def clear(self) -> None:
        if self._stream.isatty():
            self._stream.write('\033[2J\033[H')
            self._stream.flush()


class BufferDisplay(Display):
    """Keeps everything in memory. Used by tests and embedding code."""

    def __init__(self):
        self.lines: List[str] = []
        self.clear_count = 0

    def print(self, line: str) -> None:
        self.lines.append(line)

    def print_inline(self, items: List[str]) -> None:
        self.lines.append('  '.join(items))

    def clear(self) -> None:
        self.lines.clear()
        self.clear_count += 1
