"""AppController: owns the boards, the input mode and the current board cursor.

The host feeds it one key at a time through ``handle_key`` and redraws from
``render_snapshot`` after every call. Nothing here touches the terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from kanban.board import BOARD_NAMES, Board, BoardSet, next_board_index
from kanban.keys import Key
from kanban.mode import Action, EditingMode, InputState, NormalMode, transition
from kanban.ticket import Ticket

logger = logging.getLogger(__name__)


class ControlSignal(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of one board."""

    name: str
    titles: tuple[str, ...]
    selected: int | None
    selected_ticket: Ticket | None = None


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything the renderer needs for one frame.

    Attributes:
        mode: Mode name (``normal``, ``editing`` or ``navigating``).
        draft: Title being typed; empty outside Editing mode.
        cursor_x: Cursor offset inside the input box (length of the draft).
        current_board: Index of the board that receives new tickets.
        boards: One snapshot per board, in pipeline order.
    """

    mode: str
    draft: str
    cursor_x: int
    current_board: int
    boards: tuple[BoardSnapshot, ...]

    @property
    def editing(self) -> bool:
        return self.mode == EditingMode.name

    @property
    def selected_ticket(self) -> Ticket | None:
        """The highlighted ticket on the current board, if any."""
        return self.boards[self.current_board].selected_ticket


class AppController:
    """Maps key events to mode transitions and board mutations."""

    def __init__(self, quit_on_unknown_key: bool = True) -> None:
        self.boards = BoardSet()
        self.mode: InputState = NormalMode()
        self.current_board: int = 0
        self.quit_on_unknown_key = quit_on_unknown_key

    @property
    def current(self) -> Board:
        return self.boards[self.current_board]

    @property
    def draft(self) -> str:
        if isinstance(self.mode, EditingMode):
            return self.mode.draft
        return ""

    def handle_key(self, key: Key) -> ControlSignal:
        """Apply one key press. Never raises."""
        result = transition(self.mode, key, self.quit_on_unknown_key)
        if type(result.state) is not type(self.mode):
            logger.debug("Mode %s -> %s on %s", self.mode.name, result.state.name, key)
        self.mode = result.state

        action = result.action
        if action is Action.QUIT:
            logger.debug("Quit requested in %s mode on %s", self.mode.name, key)
            return ControlSignal.QUIT
        if action is Action.COMMIT:
            self.commit_ticket(result.draft)
        elif action is Action.NEXT:
            self.current.next()
        elif action is Action.PREVIOUS:
            self.current.previous()
        elif action is Action.NEXT_BOARD:
            self.switch_to_next_board()
        return ControlSignal.CONTINUE

    def commit_ticket(self, title: str) -> None:
        """Append a ticket to the current board and highlight the board's first item."""
        self.current.push(Ticket(title))
        self.current.select_first_if_present()
        logger.debug("Created ticket %r on %s", title, BOARD_NAMES[self.current_board])

    def switch_to_next_board(self) -> None:
        self.current.unselect()
        self.current_board = next_board_index(self.current_board)
        self.current.select_first_if_present()
        logger.debug("Switched to board %s", BOARD_NAMES[self.current_board])

    def render_snapshot(self) -> RenderSnapshot:
        draft = self.draft
        boards = tuple(
            BoardSnapshot(
                name=name,
                titles=tuple(t.title for t in board),
                selected=board.selected,
                selected_ticket=board.selected_item,
            )
            for name, board in zip(BOARD_NAMES, self.boards, strict=True)
        )
        return RenderSnapshot(
            mode=self.mode.name,
            draft=draft,
            cursor_x=len(draft),
            current_board=self.current_board,
            boards=boards,
        )
