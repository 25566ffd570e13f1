"""
Text Editor Module

The ``vi`` child process. While it runs, the session forwards every
keystroke to it; it hands control back through
SessionState.kill_child_process().

Insert mode edits the last line of the buffer. Escape switches to command
mode, where ``:w``, ``:q``, ``:q!``, ``:wq`` and ``:x`` are typed and run
with Enter, and ``i`` returns to insert mode.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from vshell.exceptions import ShellException
from vshell.filesystem import Directory, FileType, PathResolver, TextFile
from vshell.logger import get_logger
from .keys import KeyCode, KeyEvent

if TYPE_CHECKING:
    from .session import SessionState


class ChildProcess(ABC):
    """A program that takes over keystroke handling from the shell."""

    @abstractmethod
    def parse_keystroke(self, event: KeyEvent) -> None:
        """Handle one keystroke."""


class EditorMode(Enum):
    INSERT = 'insert'
    COMMAND = 'command'


class TextEditor(ChildProcess):
    """
    Minimal modal text editor.

    Args:
        session: Session that started the editor
        segments: Path of the file being edited, as typed
        text_file: The file, or None if it is created on first save
    """

    def __init__(self, session: SessionState, segments: List[str], text_file: Optional[TextFile]):
        self._logger = get_logger('editor')
        self._session = session
        self._segments = segments
        self._directory: Directory = session.current_dir
        self.file = text_file
        self.lines: List[str] = list(text_file.contents) if text_file and text_file.contents else ['']
        self.mode = EditorMode.INSERT
        self.command = ''
        self.status = ''
        self.modified = False

    @property
    def path(self) -> str:
        return PathResolver.join(self._segments)

    def parse_keystroke(self, event: KeyEvent) -> None:
        if self.mode == EditorMode.INSERT:
            self._insert_keystroke(event)
        else:
            self._command_keystroke(event)

    def _insert_keystroke(self, event: KeyEvent) -> None:
        if event.code == KeyCode.ESCAPE:
            self.mode = EditorMode.COMMAND
            self.command = ''
        elif event.code == KeyCode.ENTER:
            self.lines.append('')
            self.modified = True
        elif event.code == KeyCode.BACKSPACE:
            if self.lines[-1]:
                self.lines[-1] = self.lines[-1][:-1]
                self.modified = True
            elif len(self.lines) > 1:
                self.lines.pop()
                self.modified = True
        elif event.character:
            self.lines[-1] += event.character
            self.modified = True

    def _command_keystroke(self, event: KeyEvent) -> None:
        if event.code == KeyCode.ESCAPE:
            self.command = ''
        elif event.code == KeyCode.ENTER:
            command, self.command = self.command, ''
            self.run_command(command)
        elif event.code == KeyCode.BACKSPACE:
            self.command = self.command[:-1]
        elif event.character == 'i' and not self.command:
            self.mode = EditorMode.INSERT
        elif event.character:
            self.command += event.character

    def run_command(self, command: str) -> None:
        """Run an ex command such as ':wq'."""
        name = command[1:] if command.startswith(':') else command

        if name == 'w':
            self.save()
        elif name in ('wq', 'x'):
            if self.save():
                self.quit()
        elif name == 'q':
            if self.modified:
                self.status = "E37: No write since last change (add ! to override)"
            else:
                self.quit()
        elif name == 'q!':
            self.quit()
        else:
            self.status = f"E492: Not an editor command: {name}"

    def save(self) -> bool:
        """Write the buffer to the file, creating it if needed."""
        if self.file is None:
            try:
                node = self._session.fs.create(self._directory, self._segments, FileType.TEXT)
            except ShellException as e:
                self.status = e.stderr
                return False
            self.file = node

        self.file.write(self.lines)
        self.modified = False
        self.status = f'"{self.path}" {len(self.lines)}L written'
        self._logger.debug("Saved", context={'path': self.file.path})
        return True

    def quit(self) -> None:
        self._session.kill_child_process()
