"""Tests for configuration system."""

import json
from pathlib import Path

import pytest

from kanban.config import (
    config_to_dict,
    default_config,
    load_config,
    validate_config,
)


def write_config(base: Path, content: str) -> None:
    kb = base / ".kb"
    kb.mkdir(parents=True, exist_ok=True)
    (kb / "config.json").write_text(content, encoding="utf-8")


class TestDefaultConfig:
    def test_board_names(self) -> None:
        cfg = default_config()
        assert cfg.board.names == ["todo", "in-progress", "done"]

    def test_editing_defaults(self) -> None:
        assert default_config().editing.quit_on_unknown_key is True

    def test_tui_defaults(self) -> None:
        assert default_config().tui.tick_rate_ms == 250

    def test_defaults_do_not_share_lists(self) -> None:
        a = default_config()
        b = default_config()
        a.board.names[0] = "backlog"
        assert b.board.names[0] == "todo"


class TestValidateConfig:
    def test_empty_dict_returns_defaults(self) -> None:
        assert validate_config({}) == default_config()

    def test_custom_names(self) -> None:
        cfg = validate_config({"board": {"names": ["Next", "Doing", "Shipped"]}})
        assert cfg.board.names == ["Next", "Doing", "Shipped"]

    def test_disable_quit_on_unknown_key(self) -> None:
        cfg = validate_config({"editing": {"quit_on_unknown_key": False}})
        assert cfg.editing.quit_on_unknown_key is False

    def test_tick_rate(self) -> None:
        assert validate_config({"tui": {"tick_rate_ms": 100}}).tui.tick_rate_ms == 100

    def test_unknown_top_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown keys in config: colors"):
            validate_config({"colors": {}})

    def test_unknown_section_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown keys in board: columns"):
            validate_config({"board": {"columns": 4}})

    def test_section_must_be_object(self) -> None:
        with pytest.raises(ValueError, match="editing must be an object"):
            validate_config({"editing": True})

    def test_names_must_be_list(self) -> None:
        with pytest.raises(ValueError, match="board.names must be a list"):
            validate_config({"board": {"names": "todo"}})

    @pytest.mark.parametrize("names", [["a", "b"], ["a", "b", "c", "d"], []])
    def test_names_need_three_entries(self, names: list[str]) -> None:
        with pytest.raises(ValueError, match="exactly 3 entries"):
            validate_config({"board": {"names": names}})

    def test_name_must_be_string(self) -> None:
        with pytest.raises(ValueError, match=r"board.names\[1\] must be a string"):
            validate_config({"board": {"names": ["a", 2, "c"]}})

    def test_name_must_not_be_blank(self) -> None:
        with pytest.raises(ValueError, match=r"board.names\[2\] must not be empty"):
            validate_config({"board": {"names": ["a", "b", "  "]}})

    def test_quit_flag_must_be_bool(self) -> None:
        with pytest.raises(ValueError, match="quit_on_unknown_key must be a boolean"):
            validate_config({"editing": {"quit_on_unknown_key": "yes"}})

    @pytest.mark.parametrize("value", ["fast", 1.5, True])
    def test_tick_rate_must_be_int(self, value: object) -> None:
        with pytest.raises(ValueError, match="tick_rate_ms must be an integer"):
            validate_config({"tui": {"tick_rate_ms": value}})

    @pytest.mark.parametrize("value", [0, -10])
    def test_tick_rate_must_be_positive(self, value: int) -> None:
        with pytest.raises(ValueError, match="tick_rate_ms must be positive"):
            validate_config({"tui": {"tick_rate_ms": value}})


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == default_config()

    @pytest.mark.parametrize("content", ["", "   \n", "{}"])
    def test_empty_file(self, tmp_path: Path, content: str) -> None:
        write_config(tmp_path, content)
        assert load_config(tmp_path) == default_config()

    def test_reads_file(self, tmp_path: Path) -> None:
        write_config(tmp_path, json.dumps({"tui": {"tick_rate_ms": 50}}))
        assert load_config(tmp_path).tui.tick_rate_ms == 50

    def test_invalid_json(self, tmp_path: Path) -> None:
        write_config(tmp_path, "{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(tmp_path)

    def test_non_object(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[1, 2]")
        with pytest.raises(ValueError, match="Config must be a JSON object, got list"):
            load_config(tmp_path)

    def test_to_dict_is_accepted_by_validate(self) -> None:
        cfg = validate_config({"board": {"names": ["x", "y", "z"]}, "editing": {"quit_on_unknown_key": False}})
        assert validate_config(config_to_dict(cfg)) == cfg
