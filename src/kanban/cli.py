"""Command-line interface for the kanban board.

Usage example:
    kb --help
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from kanban.config import KanbanConfig, config_path, config_to_dict, default_config, load_config
from kanban.keys import BACKSPACE, DOWN, ENTER, ESCAPE, LEFT, OTHER, RIGHT, UP, Key, KeyKind
from kanban.mode import Action, EditingMode, InputState, NavigatingMode, NormalMode, transition

error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print a consistently styled error message to stderr."""
    error_console.print(f"[bold red]Error:[/bold red] {message}")


app = typer.Typer(
    name="kb",
    help="Terminal kanban board.",
    add_completion=False,
    no_args_is_help=True,
)


def load_config_or_exit(base: Path) -> KanbanConfig:
    try:
        return load_config(base)
    except ValueError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from None


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Send log records to ``log_file``; the TUI owns the terminal, so nothing goes to stdout."""
    if log_file is None:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        filename=str(log_file),
    )


@app.command(help="Open the board.")
def board(
    log_file: Annotated[
        Path | None, typer.Option("--log-file", help="Write logs to this file.", dir_okay=False)
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every key transition.")] = False,
) -> None:
    """Launch the interactive board TUI."""
    configure_logging(log_file, verbose)
    cfg = load_config_or_exit(Path.cwd())

    from kanban.tui.app import KanbanApp

    KanbanApp(config=cfg).run()


@app.command(help="Create .kb/config.json with the default settings.")
def init(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config.")] = False,
) -> None:
    path = config_path(Path.cwd())
    if path.exists() and not force:
        typer.echo(f"Config already exists: {path}")
        raise typer.Exit(code=1)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config_to_dict(default_config()), indent=2) + "\n", encoding="utf-8")
    typer.echo(f"Wrote {path}")


@app.command("config", help="Show the effective configuration.")
def show_config() -> None:
    cfg = load_config_or_exit(Path.cwd())
    Console().print_json(json.dumps(config_to_dict(cfg)))


# ---------------------------------------------------------------------------
# Key bindings
# ---------------------------------------------------------------------------

SAMPLE_KEYS: list[tuple[str, Key]] = [
    ("i", Key.char_key("i")),
    ("m", Key.char_key("m")),
    ("q", Key.char_key("q")),
    ("other character", Key.char_key("x")),
    ("Backspace", BACKSPACE),
    ("Enter", ENTER),
    ("Esc", ESCAPE),
    ("Up", UP),
    ("Down", DOWN),
    ("Left", LEFT),
    ("Right", RIGHT),
    ("any other key", OTHER),
]

ACTION_LABELS: dict[Action, str] = {
    Action.NONE: "",
    Action.QUIT: "quit",
    Action.COMMIT: "create ticket on current board",
    Action.NEXT: "select next ticket",
    Action.PREVIOUS: "select previous ticket",
    Action.NEXT_BOARD: "switch to next board",
}


def describe_bindings(quit_on_unknown_key: bool = True) -> list[tuple[str, str, str, str]]:
    """Rows of (mode, key, effect, next mode) for every key that does something."""
    rows: list[tuple[str, str, str, str]] = []
    modes: list[InputState] = [NormalMode(), EditingMode(draft="ab"), NavigatingMode()]
    for state in modes:
        for label, key in SAMPLE_KEYS:
            result = transition(state, key, quit_on_unknown_key)
            effect = ACTION_LABELS[result.action]
            if isinstance(state, EditingMode) and isinstance(result.state, EditingMode):
                if key.kind is KeyKind.CHAR:
                    effect = "append to title"
                elif key == BACKSPACE:
                    effect = "delete last character"
            elif isinstance(state, EditingMode) and key == ESCAPE:
                effect = "discard title"
            if not effect and result.state == state:
                continue
            rows.append((state.name, label, effect, result.state.name))
    return rows


@app.command(help="List key bindings for each mode.")
def keys() -> None:
    cfg = load_config_or_exit(Path.cwd())
    table = Table(show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("Mode", style="cyan", no_wrap=True)
    table.add_column("Key", no_wrap=True)
    table.add_column("Effect")
    table.add_column("Next mode", no_wrap=True)
    for row in describe_bindings(cfg.editing.quit_on_unknown_key):
        table.add_row(*row)
    Console().print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
