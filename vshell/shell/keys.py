"""
Key Event Module

Normalized keystrokes delivered to the shell by whatever captures input.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List


class KeyCode(IntEnum):
    """Codes of the keys the shell treats specially (browser key codes)."""
    CHARACTER = 0
    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    ESCAPE = 27
    UP = 38
    DOWN = 40


@dataclass(frozen=True)
class KeyEvent:
    """A keystroke: a key code and the character it produced, if any."""
    code: int
    character: str = ''

    @classmethod
    def char(cls, character: str) -> 'KeyEvent':
        return cls(KeyCode.CHARACTER, character)

    @classmethod
    def key(cls, code: KeyCode) -> 'KeyEvent':
        return cls(code)


def events_for(text: str) -> List[KeyEvent]:
    """
    Key events for typing text.

    Tab, newline and escape characters become TAB, ENTER and ESCAPE
    events.
    """
    special = {'\t': KeyCode.TAB, '\n': KeyCode.ENTER, '\x1b': KeyCode.ESCAPE}
    events = []
    for character in text:
        if character in special:
            events.append(KeyEvent.key(special[character]))
        else:
            events.append(KeyEvent.char(character))
    return events
