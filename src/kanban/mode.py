"""Input modes and the key transition table.

Three modes, vi-style:

    Normal      i -> Editing, m -> Navigating, q -> quit
    Editing     type a ticket title, Enter commits, Esc leaves
    Navigating  Up/Down move within a board, Right switches board, Esc leaves

``transition`` is pure: it returns the next mode and the board action the
controller must apply. Only ``EditingMode`` carries a draft, so a draft can
never outlive the editing session that typed it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kanban.keys import Key, KeyKind


@dataclass(frozen=True)
class NormalMode:
    name = "normal"


@dataclass(frozen=True)
class EditingMode:
    draft: str = ""
    name = "editing"


@dataclass(frozen=True)
class NavigatingMode:
    name = "navigating"


InputState = NormalMode | EditingMode | NavigatingMode


class Action(Enum):
    """Side effect requested by a transition."""

    NONE = "none"
    QUIT = "quit"
    COMMIT = "commit"  # create a ticket from the draft on the current board
    NEXT = "next"
    PREVIOUS = "previous"
    NEXT_BOARD = "next_board"


@dataclass(frozen=True)
class Transition:
    state: InputState
    action: Action = Action.NONE
    draft: str = ""  # title to commit, set only for Action.COMMIT


def transition(state: InputState, key: Key, quit_on_unknown_key: bool = True) -> Transition:
    """Interpret ``key`` in ``state``.

    Args:
        state: The current mode.
        key: The key that was pressed.
        quit_on_unknown_key: In Editing mode, an unrecognized key (anything
            that is not a character, Backspace, Enter or Esc) ends the session.
            This mirrors long-standing behavior that is most likely an
            accident; pass False to ignore such keys instead.
    """
    if isinstance(state, EditingMode):
        return editing_transition(state, key, quit_on_unknown_key)
    if isinstance(state, NavigatingMode):
        return navigating_transition(state, key)
    return normal_transition(state, key)


def normal_transition(state: NormalMode, key: Key) -> Transition:
    if key.is_char("i"):
        return Transition(EditingMode())
    if key.is_char("m"):
        return Transition(NavigatingMode())
    if key.is_char("q"):
        return Transition(state, Action.QUIT)
    return Transition(state)


def editing_transition(state: EditingMode, key: Key, quit_on_unknown_key: bool) -> Transition:
    # Enter is checked before printable characters: some terminals deliver it as "\n".
    if key.kind is KeyKind.ENTER or key.is_char("\n"):
        return Transition(EditingMode(), Action.COMMIT, draft=state.draft)
    if key.kind is KeyKind.CHAR:
        return Transition(EditingMode(state.draft + key.char))
    if key.kind is KeyKind.BACKSPACE:
        return Transition(EditingMode(state.draft[:-1]))
    if key.kind is KeyKind.ESCAPE:
        return Transition(NormalMode())
    if quit_on_unknown_key:
        return Transition(state, Action.QUIT)
    return Transition(state)


NAVIGATION_ACTIONS: dict[KeyKind, Action] = {
    KeyKind.DOWN: Action.NEXT,
    KeyKind.UP: Action.PREVIOUS,
    KeyKind.RIGHT: Action.NEXT_BOARD,
    # Left is reserved for switching to the previous board.
    KeyKind.LEFT: Action.NONE,
}


def navigating_transition(state: NavigatingMode, key: Key) -> Transition:
    if key.kind is KeyKind.ESCAPE:
        return Transition(NormalMode())
    return Transition(state, NAVIGATION_ACTIONS.get(key.kind, Action.NONE))
