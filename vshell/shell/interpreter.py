"""
Command Interpreter Module

Parses a line, dispatches it to the registered handler and applies output
redirection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from vshell.exceptions import (
    CommandNotFoundError,
    IsDirectoryError,
    NoSuchFileError,
    ShellException,
)
from vshell.filesystem import Directory, FileType, PathResolver
from vshell.logger import get_logger
from .builtins import CommandRegistry
from .parser import CommandParser, ParsedCommand, RedirectMode
from .result import CommandResult

if TYPE_CHECKING:
    from .session import SessionState


class CommandInterpreter:
    """
    Runs command lines against a session.

    The session is passed to every call; the interpreter itself holds no
    session state, so one interpreter can serve several sessions.

    Example:
        >>> interpreter = CommandInterpreter()
        >>> interpreter.execute(session, "echo hi > greeting.txt").std_out
        []
    """

    def __init__(
        self,
        registry: Optional[CommandRegistry] = None,
        parser: Optional[CommandParser] = None
    ):
        self._logger = get_logger('interpreter')
        self._registry = registry if registry is not None else CommandRegistry()
        self._parser = parser if parser is not None else CommandParser()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def parser(self) -> CommandParser:
        return self._parser

    def execute(self, session: SessionState, line: str) -> CommandResult:
        """
        Execute a command line.

        Args:
            session: Session the command runs in
            line: Raw input line

        Returns:
            CommandResult; failures are reported in std_err
        """
        try:
            cmd = self._parser.parse(line)
        except ShellException as e:
            return CommandResult.from_error(e)

        if cmd.redirect is not None:
            return self._redirect(session, cmd)

        return self.dispatch(session, cmd)

    def dispatch(self, session: SessionState, cmd: ParsedCommand) -> CommandResult:
        """Run a parsed command without a redirect."""
        if cmd.is_empty:
            return CommandResult()

        spec = self._registry.get(cmd.name)
        if spec is None:
            self._logger.info("Unknown command", context={'command': cmd.name})
            return CommandResult.from_error(CommandNotFoundError(cmd.name))

        self._logger.debug("Dispatching", context={'command': cmd.name, 'args': cmd.args})

        try:
            return spec.handler(session, cmd)
        except ShellException as e:
            return CommandResult.from_error(e)
        except Exception as e:
            self._logger.exception(
                f"Command {cmd.name} raised {type(e).__name__}",
                exc=e,
                context={'line': cmd.body}
            )
            return CommandResult.of(std_err=f"{cmd.name}: {e}")

    def _redirect(self, session: SessionState, cmd: ParsedCommand) -> CommandResult:
        """
        Run the command body and write its stdout to the redirect target.

        The target is created if it does not exist. Only stderr of the
        inner command reaches the caller.
        """
        redirect = cmd.redirect
        inner = self.execute(session, cmd.body)

        segments = PathResolver.split(redirect.target)
        node = session.fs.resolve(session.current_dir, segments, FileType.TEXT)

        if node is None:
            directory = session.fs.resolve(session.current_dir, segments, FileType.DIRECTORY)
            if isinstance(directory, Directory):
                return CommandResult.from_error(IsDirectoryError(redirect.target, command='bash'))

        if isinstance(node, Directory):
            return CommandResult.from_error(IsDirectoryError(redirect.target, command='bash'))

        if node is None:
            try:
                node = session.fs.create(session.current_dir, segments, FileType.TEXT)
            except ShellException:
                self._logger.info("Redirect target not created", context={'target': redirect.target})
                return CommandResult.from_error(NoSuchFileError(redirect.target))

        if redirect.mode == RedirectMode.TRUNCATE:
            node.write(inner.std_out)
        else:
            node.append(inner.std_out)

        return CommandResult(std_err=list(inner.std_err), data=node)
