"""Configuration for the kanban board.

Loads column titles, editing behavior and TUI settings from
``.kb/config.json``. All fields are optional; defaults are provided for
zero-config operation.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from kanban.board import BOARD_COUNT, BOARD_NAMES

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass
class BoardConfig:
    """Display titles for the three columns, in pipeline order."""

    names: list[str] = field(default_factory=lambda: list(BOARD_NAMES))


@dataclass
class EditingConfig:
    """Editing mode behavior."""

    quit_on_unknown_key: bool = True


@dataclass
class TuiConfig:
    """Terminal UI settings."""

    tick_rate_ms: int = 250


@dataclass
class KanbanConfig:
    """Top-level configuration, loaded from .kb/config.json."""

    board: BoardConfig = field(default_factory=BoardConfig)
    editing: EditingConfig = field(default_factory=EditingConfig)
    tui: TuiConfig = field(default_factory=TuiConfig)


def default_config() -> KanbanConfig:
    """Return the built-in default configuration."""
    return KanbanConfig()


def state_root(base: Path) -> Path:
    return base / ".kb"


def config_path(base: Path) -> Path:
    return state_root(base) / "config.json"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

VALID_BOARD_KEYS = {"names"}
VALID_EDITING_KEYS = {"quit_on_unknown_key"}
VALID_TUI_KEYS = {"tick_rate_ms"}
VALID_TOP_KEYS = {"board", "editing", "tui"}


def check_unknown_keys(data: dict, valid: set[str], context: str) -> None:
    """Raise ValueError if data contains keys not in valid set."""
    unknown = set(data) - valid
    if unknown:
        raise ValueError(f"Unknown keys in {context}: {', '.join(sorted(unknown))}")


def validate_board(data: dict) -> BoardConfig:
    """Validate and construct a BoardConfig from a raw dict."""
    check_unknown_keys(data, VALID_BOARD_KEYS, "board")

    names = data.get("names", list(BOARD_NAMES))
    if not isinstance(names, list):
        raise ValueError(f"board.names must be a list, got {type(names).__name__}")
    if len(names) != BOARD_COUNT:
        raise ValueError(f"board.names must have exactly {BOARD_COUNT} entries, got {len(names)}")
    for i, name in enumerate(names):
        if not isinstance(name, str):
            raise ValueError(f"board.names[{i}] must be a string, got {type(name).__name__}")
        if not name.strip():
            raise ValueError(f"board.names[{i}] must not be empty")

    return BoardConfig(names=names)


def validate_editing(data: dict) -> EditingConfig:
    """Validate and construct an EditingConfig from a raw dict."""
    check_unknown_keys(data, VALID_EDITING_KEYS, "editing")

    quit_on_unknown_key = data.get("quit_on_unknown_key", True)
    if not isinstance(quit_on_unknown_key, bool):
        raise ValueError(
            f"editing.quit_on_unknown_key must be a boolean, got {type(quit_on_unknown_key).__name__}"
        )

    return EditingConfig(quit_on_unknown_key=quit_on_unknown_key)


def validate_tui(data: dict) -> TuiConfig:
    """Validate and construct a TuiConfig from a raw dict."""
    check_unknown_keys(data, VALID_TUI_KEYS, "tui")

    tick_rate_ms = data.get("tick_rate_ms", 250)
    # bool is an int subclass; reject it explicitly
    if not isinstance(tick_rate_ms, int) or isinstance(tick_rate_ms, bool):
        raise ValueError(f"tui.tick_rate_ms must be an integer, got {type(tick_rate_ms).__name__}")
    if tick_rate_ms <= 0:
        raise ValueError(f"tui.tick_rate_ms must be positive, got {tick_rate_ms}")

    return TuiConfig(tick_rate_ms=tick_rate_ms)


def validate_config(data: dict) -> KanbanConfig:
    """Validate a raw dict and construct a KanbanConfig.

    Raises:
        ValueError: On unknown keys, type errors or out-of-range values.
    """
    check_unknown_keys(data, VALID_TOP_KEYS, "config")

    sections = {}
    for key in ("board", "editing", "tui"):
        section = data.get(key, {})
        if not isinstance(section, dict):
            raise ValueError(f"{key} must be an object, got {type(section).__name__}")
        sections[key] = section

    return KanbanConfig(
        board=validate_board(sections["board"]),
        editing=validate_editing(sections["editing"]),
        tui=validate_tui(sections["tui"]),
    )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_config(base: Path) -> KanbanConfig:
    """Load configuration from .kb/config.json, falling back to defaults.

    Returns default_config() if the file doesn't exist or is empty.

    Raises:
        ValueError: If the file exists but contains invalid JSON or fails
            validation.
    """
    path = config_path(base)
    if not path.exists():
        return default_config()

    text = path.read_text(encoding="utf-8").strip()
    if not text or text == "{}":
        return default_config()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")

    return validate_config(data)


def config_to_dict(cfg: KanbanConfig) -> dict:
    """Serialize a config back to the JSON shape accepted by validate_config."""
    return {
        "board": {"names": list(cfg.board.names)},
        "editing": {"quit_on_unknown_key": cfg.editing.quit_on_unknown_key},
        "tui": {"tick_rate_ms": cfg.tui.tick_rate_ms},
    }
