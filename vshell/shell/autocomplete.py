"""
Autocomplete Module

Tab completion for command names and path arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from vshell.filesystem import Directory, FileType, PathResolver
from vshell.filesystem.path_resolver import SEPARATOR
from vshell.logger import get_logger
from .builtins import CommandRegistry
from .parser import CommandParser

if TYPE_CHECKING:
    from .session import SessionState


@dataclass
class Completion:
    """
    What one tab press found.

    Attributes:
        partial: Token being completed
        candidates: Matching names (directories end with '/')
        inserted: Text appended to the line buffer
        displayed: Whether the candidates were printed
    """
    partial: str
    candidates: List[str] = field(default_factory=list)
    inserted: str = ''
    displayed: bool = False


def filter_options(partial: str, options: List[str]) -> List[str]:
    """Options that start with partial, in their original order."""
    return [option for option in options if option.startswith(partial)]


class AutocompleteEngine:
    """
    Completes the token under the cursor.

    With no command typed yet, or a single command token without a trailing
    space, command names are completed. Otherwise the last argument is
    completed as a path, offering the node types the command accepts and
    falling back to directories.

    One candidate is completed at once. Several candidates are printed on
    the second consecutive tab press.
    """

    def __init__(self, registry: CommandRegistry):
        self._logger = get_logger('autocomplete')
        self._registry = registry

    def candidates(self, session: SessionState, line: str) -> Completion:
        """Work out the partial token and its candidates, without side effects."""
        tokens = CommandParser.tokenize(line)
        space_at_end = line.endswith(' ')

        if not tokens:
            return Completion(partial='', candidates=self._registry.names())

        if not space_at_end and len(tokens) == 1:
            partial = tokens[0]
            return Completion(partial=partial, candidates=filter_options(partial, self._registry.names()))

        partial = '' if space_at_end else tokens[-1]
        options = self.file_options(session, partial, self._registry.accepted_types(tokens[0]))
        if not options:
            options = self.file_options(session, partial, [FileType.DIRECTORY])
        return Completion(partial=partial, candidates=options)

    def file_options(
        self,
        session: SessionState,
        partial: str,
        file_types: Optional[List[FileType]]
    ) -> List[str]:
        """
        Names in the directory part of partial that complete its last segment.

        Args:
            partial: Path being typed, e.g. 'projects/sh'
            file_types: Node types to offer; None for all
        """
        parsed = PathResolver.parse(partial)
        directory = session.fs.resolve(session.current_dir, parsed.directory, FileType.DIRECTORY)
        if not isinstance(directory, Directory):
            return []

        options = []
        for node in session.fs.list_by_types(directory, file_types):
            options.append(node.name + SEPARATOR if node.is_directory else node.name)
        return filter_options(parsed.name, options)

    def complete(self, session: SessionState) -> Completion:
        """
        Handle a tab press on the session's line buffer.

        Returns:
            The Completion that was applied
        """
        completion = self.candidates(session, session.buffer)
        options = completion.candidates

        if len(options) == 1:
            word = PathResolver.parse(completion.partial).name
            completion.inserted = options[0][len(word):]
            session.buffer += completion.inserted
            session.tab_pending = False
            self._logger.debug("Completed", context={'partial': completion.partial, 'inserted': completion.inserted})
        elif len(options) > 1:
            if session.tab_pending:
                session.display.print(session.prompt + session.buffer)
                session.display.print_inline(options)
                session.tab_pending = False
                completion.displayed = True
            else:
                session.tab_pending = True

        return completion
