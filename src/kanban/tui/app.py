"""KanbanApp: Textual host for the board controller."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal

from kanban.config import KanbanConfig, default_config
from kanban.controller import AppController, ControlSignal

from .keys import translate_key
from .widgets import BoardColumn, DraftInput, HelpBar, TicketDetail

logger = logging.getLogger(__name__)


class KanbanApp(App, inherit_bindings=False):
    """Single-screen kanban board.

    Every key press goes to the controller; all widgets are then redrawn
    from a fresh snapshot. A ``QUIT`` signal exits the app. App-level
    bindings such as ``ctrl+q`` are not inherited, so ``q`` in Normal mode
    is the only quit key outside Editing mode.
    """

    TITLE = "kb"

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }
    #boards {
        height: 2fr;
    }
    #ticket-detail {
        height: 1fr;
    }
    """

    def __init__(self, config: KanbanConfig | None = None) -> None:
        super().__init__()
        self.config = config or default_config()
        self.controller = AppController(quit_on_unknown_key=self.config.editing.quit_on_unknown_key)

    def compose(self) -> ComposeResult:
        yield HelpBar(id="help-bar")
        yield DraftInput(id="draft-input")
        with Horizontal(id="boards"):
            for i, title in enumerate(self.config.board.names):
                yield BoardColumn(i, title, id=f"board-{i}")
        yield TicketDetail(id="ticket-detail")

    def on_mount(self) -> None:
        self.refresh_board()
        self.set_interval(self.config.tui.tick_rate_ms / 1000, self.refresh_board)

    def on_key(self, event: events.Key) -> None:
        """Route every key through the controller."""
        event.stop()
        event.prevent_default()
        key = translate_key(event)
        signal = self.controller.handle_key(key)
        if signal is ControlSignal.QUIT:
            logger.info("Exiting on %s", key)
            self.exit()
            return
        self.refresh_board()

    def refresh_board(self) -> None:
        """Redraw every widget from the controller's current snapshot."""
        snapshot = self.controller.render_snapshot()
        self.query_one("#help-bar", HelpBar).show_snapshot(snapshot)
        self.query_one("#draft-input", DraftInput).show_snapshot(snapshot)
        for column in self.query(BoardColumn):
            column.show_snapshot(snapshot)
        self.query_one("#ticket-detail", TicketDetail).show_snapshot(snapshot)
