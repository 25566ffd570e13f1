"""
Shell Built-in Commands

Implements the shell's commands and the registry that maps command names to
them. Every handler takes the session and the parsed command and returns a
CommandResult; errors are reported as stderr lines, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Optional, Tuple

from vshell.exceptions import (
    IsDirectoryError,
    NoSuchFileError,
    ShellException,
)
from vshell.filesystem import Directory, FileType, PathResolver, TextFile
from .parser import ParsedCommand
from .result import CommandResult

if TYPE_CHECKING:
    from .session import SessionState


Handler = Callable[['SessionState', ParsedCommand], CommandResult]


@dataclass(frozen=True)
class CommandSpec:
    """
    A registered command.

    ``file_types`` lists the node types autocomplete offers for the
    command's arguments; None means any type, an empty tuple none.
    """
    name: str
    handler: Handler
    file_types: Optional[Tuple[FileType, ...]] = None
    description: str = ''


class CommandRegistry:
    """
    Fixed mapping from command name to CommandSpec.

    Iteration follows registration order.
    """

    def __init__(self, commands: Optional[Iterable[CommandSpec]] = None):
        self._commands: dict[str, CommandSpec] = {}
        for spec in (BUILTIN_COMMANDS if commands is None else commands):
            self.register(spec)

    def register(self, spec: CommandSpec) -> None:
        self._commands[spec.name] = spec

    def get(self, name: str) -> Optional[CommandSpec]:
        return self._commands.get(name)

    def names(self) -> List[str]:
        return list(self._commands)

    def accepted_types(self, name: str) -> Optional[List[FileType]]:
        """Argument types for autocomplete. Unknown commands accept any type."""
        spec = self._commands.get(name)
        if spec is None or spec.file_types is None:
            return None
        return list(spec.file_types)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


# Command implementations

def cmd_clear(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Clear the display."""
    session.display.clear()
    return CommandResult()


def cmd_pwd(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Print working directory."""
    return CommandResult.of(session.current_dir.path)


def cmd_whoami(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Display current user."""
    return CommandResult.of(session.user)


def cmd_cd(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Change directory; no argument goes to the root."""
    if not cmd.args:
        session.change_directory(session.fs.root)
        return CommandResult()

    target = cmd.args[0]
    directory = session.fs.resolve_path(session.current_dir, target, FileType.DIRECTORY)
    if not isinstance(directory, Directory):
        return CommandResult.of(std_err=f"{target}: directory not found")

    session.change_directory(directory)
    return CommandResult()


def _list_directory(directory: Directory) -> str:
    names = []
    for child in directory.children:
        names.append(f"{child.name}/" if child.is_directory else child.name)
    return '  '.join(names)


def cmd_ls(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """List directory contents."""
    res = CommandResult()
    if not cmd.args:
        res.std_out.append(_list_directory(session.current_dir))
        return res

    for arg in cmd.args:
        directory = session.fs.resolve_path(session.current_dir, arg, FileType.DIRECTORY)
        if not isinstance(directory, Directory):
            res.std_err.append(f"ls: cannot access {arg}: no such file or directory")
        elif len(cmd.args) > 1:
            res.std_out.append(f"{arg}: {_list_directory(directory)}")
        else:
            res.std_out.append(_list_directory(directory))
    return res


def cmd_cat(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Print the content of text files."""
    res = CommandResult()
    for arg in cmd.args:
        node = session.fs.resolve_path(session.current_dir, arg)
        if node is None:
            res.std_err.append(NoSuchFileError(arg, command='cat').stderr)
        elif isinstance(node, Directory):
            res.std_err.append(IsDirectoryError(node.name or node.path, command='cat').stderr)
        elif isinstance(node, TextFile):
            res.std_out.extend(node.contents)
    return res


def cmd_touch(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Create empty text files or update their timestamp."""
    res = CommandResult()
    for arg in cmd.args:
        segments = PathResolver.split(arg)
        node = session.fs.resolve(session.current_dir, segments, FileType.TEXT)
        if isinstance(node, TextFile):
            node.touch()
            res.data = node
        elif node is None:
            try:
                res.data = session.fs.create(session.current_dir, segments, FileType.TEXT)
            except ShellException as e:
                res.combine(CommandResult.from_error(e))
    return res


def cmd_mkdir(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Create directories that do not exist yet."""
    res = CommandResult()
    for arg in cmd.args:
        segments = PathResolver.split(arg)
        if session.fs.resolve(session.current_dir, segments, FileType.DIRECTORY) is not None:
            continue
        try:
            res.data = session.fs.create(session.current_dir, segments, FileType.DIRECTORY)
        except ShellException as e:
            res.combine(CommandResult.from_error(e))
    return res


def cmd_echo(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Print the arguments."""
    return CommandResult.of(' '.join(cmd.args))


def cmd_vi(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """
    Open the text editor on a file.

    The file does not have to exist; the editor creates it on save.
    Returns straight away, the editor takes over the keystrokes.
    """
    if not cmd.args:
        return CommandResult.of(std_err="vi: missing file operand")

    segments = PathResolver.split(cmd.args[0])
    node = session.fs.resolve(session.current_dir, segments, FileType.TEXT)
    text_file = node if isinstance(node, TextFile) else None
    session.open_editor(segments, text_file)
    return CommandResult(data=text_file)


def cmd_help(session: SessionState, cmd: ParsedCommand) -> CommandResult:
    """Display help information."""
    lines = ["Available commands:"]
    for spec in session.registry:
        lines.append(f"  {spec.name:<8}{spec.description}")
    return CommandResult.of(lines)


_DIR = (FileType.DIRECTORY,)
_TXT = (FileType.TEXT,)

BUILTIN_COMMANDS: List[CommandSpec] = [
    CommandSpec('clear', cmd_clear, (), "clear the screen"),
    CommandSpec('pwd', cmd_pwd, (), "print the working directory"),
    CommandSpec('whoami', cmd_whoami, (), "print the current user"),
    CommandSpec('cd', cmd_cd, _DIR, "change directory"),
    CommandSpec('ls', cmd_ls, _DIR, "list directory contents"),
    CommandSpec('cat', cmd_cat, _TXT, "print file contents"),
    CommandSpec('touch', cmd_touch, _TXT, "create a file or update its timestamp"),
    CommandSpec('mkdir', cmd_mkdir, _DIR, "create a directory"),
    CommandSpec('echo', cmd_echo, None, "print arguments"),
    CommandSpec('vi', cmd_vi, _TXT, "edit a text file"),
    CommandSpec('help', cmd_help, (), "show this help"),
]
