"""The three fixed pipeline columns of the board.

Columns are addressed by index 0..2 and named ``todo``, ``in-progress`` and
``done``. All cyclic index arithmetic goes through ``next_board_index``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from kanban.selectable import SelectableList
from kanban.ticket import Ticket

BOARD_NAMES: tuple[str, ...] = ("todo", "in-progress", "done")
BOARD_COUNT = len(BOARD_NAMES)

Board = SelectableList[Ticket]


def next_board_index(index: int) -> int:
    """Return the board after ``index``, wrapping from done back to todo."""
    return (index + 1) % BOARD_COUNT


def make_boards() -> list[Board]:
    return [SelectableList() for _ in range(BOARD_COUNT)]


@dataclass
class BoardSet:
    """Exactly three boards. The set never grows or shrinks."""

    boards: list[Board] = field(default_factory=make_boards)

    def __post_init__(self) -> None:
        if len(self.boards) != BOARD_COUNT:
            raise ValueError(f"A board set holds exactly {BOARD_COUNT} boards, got {len(self.boards)}")

    def __getitem__(self, index: int) -> Board:
        return self.boards[index]

    def __iter__(self) -> Iterator[Board]:
        return iter(self.boards)

    def __len__(self) -> int:
        return BOARD_COUNT
