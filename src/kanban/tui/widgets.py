"""Board widgets for the TUI.

HelpBar: mode-dependent key hints.
DraftInput: the ticket title being typed.
BoardColumn: one board, with the selected ticket highlighted.
TicketDetail: title, points and body of the selected ticket.

Each widget redraws from a ``RenderSnapshot``; none of them holds state of
its own.
"""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from kanban.controller import BoardSnapshot, RenderSnapshot
from kanban.mode import EditingMode, NavigatingMode, NormalMode
from kanban.ticket import Ticket

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

# Selected row background per board, in pipeline order.
HIGHLIGHT_COLORS: tuple[str, ...] = ("bright_blue", "bright_green", "bright_green")

BOLD = Style(bold=True)

CURSOR = "▍"


def help_text(mode: str) -> Text:
    """Build the help line for ``mode`` with key names in bold."""
    if mode == EditingMode.name:
        parts = [
            ("Press ", None),
            ("Esc", BOLD),
            (" to discard the title and stop editing, ", None),
            ("Enter", BOLD),
            (" to record the ticket.", None),
        ]
    elif mode == NavigatingMode.name:
        parts = [
            ("Press ", None),
            ("up / down / right", BOLD),
            (" to move around, ", None),
            ("Esc", BOLD),
            (" to stop.", None),
        ]
    else:
        parts = [
            ("Press ", None),
            ("q", BOLD),
            (" to exit, ", None),
            ("i", BOLD),
            (" to start editing, ", None),
            ("m", BOLD),
            (" to move around.", None),
        ]
    text = Text()
    for part, style in parts:
        text.append(part, style=style)
    return text


def render_draft(snapshot: RenderSnapshot) -> str:
    """Draft text, followed by a cursor while editing."""
    if snapshot.editing:
        return snapshot.draft + CURSOR
    return snapshot.draft


def render_board(board: BoardSnapshot, highlight: str) -> Text:
    """One line per ticket title; the selected line gets a background color."""
    text = Text()
    for i, title in enumerate(board.titles):
        if i:
            text.append("\n")
        if i == board.selected:
            text.append(title, style=Style(bgcolor=highlight, bold=True))
        else:
            text.append(title)
    return text


def render_ticket(ticket: Ticket | None) -> Text:
    if ticket is None:
        return Text("No ticket selected", style="dim")
    text = Text()
    text.append(ticket.title, style=BOLD)
    text.append(f"\nPoints: {ticket.points}")
    if ticket.body:
        text.append(f"\n\n{ticket.body}")
    return text


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------


class HelpBar(Static):
    """Key hints for the current mode."""

    DEFAULT_CSS = """
    HelpBar {
        height: 1;
        padding: 0 1;
    }
    HelpBar.normal {
        text-style: italic;
    }
    """

    def show_snapshot(self, snapshot: RenderSnapshot) -> None:
        self.set_class(snapshot.mode == NormalMode.name, "normal")
        self.update(help_text(snapshot.mode))


class DraftInput(Static):
    """Bordered box showing the title being composed."""

    DEFAULT_CSS = """
    DraftInput {
        height: 3;
        border: round $secondary;
        padding: 0 1;
    }
    DraftInput.editing {
        border: round $accent;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Input"

    def show_snapshot(self, snapshot: RenderSnapshot) -> None:
        self.set_class(snapshot.editing, "editing")
        self.update(Text(render_draft(snapshot)))


class BoardColumn(Static):
    """A single board rendered as a titled list."""

    DEFAULT_CSS = """
    BoardColumn {
        width: 1fr;
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }
    BoardColumn.current {
        border: round $accent;
    }
    """

    def __init__(self, index: int, title: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.board_index = index
        self.column_title = title

    def on_mount(self) -> None:
        self.border_title = self.column_title

    def show_snapshot(self, snapshot: RenderSnapshot) -> None:
        board = snapshot.boards[self.board_index]
        self.set_class(snapshot.current_board == self.board_index, "current")
        self.border_subtitle = str(len(board.titles))
        self.update(render_board(board, HIGHLIGHT_COLORS[self.board_index]))


class TicketDetail(Static):
    """Details of the highlighted ticket on the current board."""

    DEFAULT_CSS = """
    TicketDetail {
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Ticket"

    def show_snapshot(self, snapshot: RenderSnapshot) -> None:
        self.update(render_ticket(snapshot.selected_ticket))
