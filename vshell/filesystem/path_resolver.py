"""
Path Resolver Module

Converts between path strings typed at the prompt and the segment lists the
virtual filesystem resolves.
"""

from dataclasses import dataclass
from typing import List, Tuple

SEPARATOR = '/'
CURRENT = '.'
PARENT = '..'
HOME = '~'


@dataclass
class ParsedPath:
    """A path split into the directory part and the final segment."""
    directory: List[str]
    name: str

    def __str__(self) -> str:
        return SEPARATOR.join(self.directory + [self.name])


class PathResolver:
    """
    Splits and joins filesystem paths.

    Segments are kept verbatim: ``'a//b/'`` becomes ``['a', '', 'b', '']``.
    An empty final segment means "the directory itself" when a directory
    is being looked up.
    """

    @staticmethod
    def split(path: str) -> List[str]:
        """
        Split a path string into segments.

        Example:
            >>> PathResolver.split('projects/shell.txt')
            ['projects', 'shell.txt']
        """
        return path.split(SEPARATOR)

    @staticmethod
    def join(segments: List[str]) -> str:
        """Join segments back into a path string."""
        return SEPARATOR.join(segments)

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """Split a path into its directory segments and final name."""
        segments = PathResolver.split(path)
        return ParsedPath(directory=segments[:-1], name=segments[-1])

    @staticmethod
    def split_last(segments: List[str]) -> Tuple[List[str], str]:
        """Return (all but the last segment, last segment)."""
        if not segments:
            return [], ''
        return segments[:-1], segments[-1]
