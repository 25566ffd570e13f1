"""
VShell Shell Module

Provides the command-line shell:
- Command parsing and redirection
- Built-in commands and their registry
- Tab completion
- Session state and keystroke handling
"""

from .parser import CommandParser, ParsedCommand, Redirection, RedirectMode
from .result import CommandResult
from .builtins import CommandRegistry, CommandSpec, BUILTIN_COMMANDS
from .interpreter import CommandInterpreter
from .autocomplete import AutocompleteEngine, Completion
from .display import Display, ConsoleDisplay, BufferDisplay
from .editor import ChildProcess, TextEditor, EditorMode
from .keys import KeyCode, KeyEvent, events_for
from .session import SessionState, create_session

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'Redirection',
    'RedirectMode',
    'CommandResult',
    'CommandRegistry',
    'CommandSpec',
    'BUILTIN_COMMANDS',
    'CommandInterpreter',
    'AutocompleteEngine',
    'Completion',
    'Display',
    'ConsoleDisplay',
    'BufferDisplay',
    'ChildProcess',
    'TextEditor',
    'EditorMode',
    'KeyCode',
    'KeyEvent',
    'events_for',
    'SessionState',
    'create_session',
]
