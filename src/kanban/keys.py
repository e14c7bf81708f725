"""Abstract key events delivered to the controller.

The host translates whatever its terminal library produces into ``Key``
values; the core never sees escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


@dataclass(frozen=True)
class Key:
    """A single key press. ``char`` is set only for ``KeyKind.CHAR``."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def char_key(cls, char: str) -> Key:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        return cls(KeyKind.CHAR, char)

    def is_char(self, char: str) -> bool:
        return self.kind is KeyKind.CHAR and self.char == char

    def __str__(self) -> str:
        if self.kind is KeyKind.CHAR:
            return repr(self.char)
        return self.kind.value


BACKSPACE = Key(KeyKind.BACKSPACE)
ENTER = Key(KeyKind.ENTER)
ESCAPE = Key(KeyKind.ESCAPE)
UP = Key(KeyKind.UP)
DOWN = Key(KeyKind.DOWN)
LEFT = Key(KeyKind.LEFT)
RIGHT = Key(KeyKind.RIGHT)
OTHER = Key(KeyKind.OTHER)
