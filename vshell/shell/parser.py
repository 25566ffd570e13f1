"""
Command Parser Module

Parses a raw input line into a command name, arguments and an optional
output redirection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple

from vshell.exceptions import RedirectSyntaxError
from vshell.logger import get_logger


class RedirectMode(Enum):
    """How a redirect writes to its target file."""
    TRUNCATE = '>'
    APPEND = '>>'


@dataclass(frozen=True)
class Redirection:
    """An output redirection."""
    mode: RedirectMode
    target: str


@dataclass(frozen=True)
class ParsedCommand:
    """
    A parsed command line.

    ``body`` is the line with the redirect clause removed (tokens following
    the redirect target are appended back to it).
    """
    name: str = ''
    args: Tuple[str, ...] = ()
    redirect: Optional[Redirection] = None
    body: str = ''

    @property
    def is_empty(self) -> bool:
        return not self.name


class CommandParser:
    """
    Parses shell command lines.

    The line is split on the first ``>>`` if there is one, otherwise on the
    first ``>``. The first token after the operator is the redirect target;
    everything else is split on spaces into a command name and arguments.

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("echo hello >> notes.txt")
        >>> cmd.name, cmd.args, cmd.redirect.target
        ('echo', ('hello',), 'notes.txt')
    """

    OPERATORS = (RedirectMode.APPEND, RedirectMode.TRUNCATE)

    def __init__(self):
        self._logger = get_logger('parser')

    @staticmethod
    def tokenize(text: str) -> List[str]:
        """Split on spaces, dropping empty tokens."""
        return [token for token in text.split(' ') if token]

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a command line.

        Args:
            line: Raw input line

        Returns:
            ParsedCommand; a blank line gives an empty ParsedCommand

        Raises:
            RedirectSyntaxError: If a redirect operator has no target
        """
        redirect = None
        body = line

        for mode in self.OPERATORS:
            index = line.find(mode.value)
            if index == -1:
                continue

            after = self.tokenize(line[index + len(mode.value):].strip())
            if not after:
                self._logger.debug("Redirect without target", context={'line': line})
                raise RedirectSyntaxError(mode.value)

            redirect = Redirection(mode=mode, target=after[0])
            body = ' '.join([line[:index]] + after[1:])
            break

        tokens = self.tokenize(body)
        if not tokens:
            return ParsedCommand(redirect=redirect, body=body)

        return ParsedCommand(
            name=tokens[0],
            args=tuple(tokens[1:]),
            redirect=redirect,
            body=body,
        )
