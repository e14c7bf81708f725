"""Translate Textual key events into board keys."""

from __future__ import annotations

from kanban.keys import BACKSPACE, DOWN, ENTER, ESCAPE, LEFT, OTHER, RIGHT, UP, Key

# Textual key names with a dedicated meaning on the board
NAMED_KEYS: dict[str, Key] = {
    "enter": ENTER,
    "backspace": BACKSPACE,
    "escape": ESCAPE,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def translate_key(event) -> Key:
    """Map a ``textual.events.Key`` to a ``Key``.

    Named keys win over characters (Enter reports ``"\\r"`` as its character).
    Anything else that is printable becomes a character key; the rest
    (function keys, ctrl combinations, tab) is ``OTHER``.
    """
    named = NAMED_KEYS.get(event.key)
    if named is not None:
        return named
    character = event.character
    if event.is_printable and character is not None and len(character) == 1:
        return Key.char_key(character)
    return OTHER
