"""Tests for frame rendering."""

import pytest

from term_snake.engine import GameEngine
from term_snake.render import (
    ASCII,
    BOX,
    CONTROLS_HINT,
    EMOJI,
    GAME_OVER_HINT,
    get_style,
    render_board,
    render_frame,
    required_size,
)
from term_snake.snake import Position


def _engine(width: int = 6, height: int = 4) -> GameEngine:
    engine = GameEngine(width=width, height=height, seed=0)
    engine.food.position = Position(0, 0)
    return engine


class TestStyles:
    def test_lookup(self):
        assert get_style("box") is BOX
        assert get_style("ascii") is ASCII
        assert get_style("emoji") is EMOJI

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown style"):
            get_style("neon")


class TestRenderBoard:
    def test_box_board(self):
        lines = render_board(_engine(), BOX)
        assert lines == [
            "┏━━━━━━┓",
            "┃*     ┃",
            "┃      ┃",
            "┃ ooO  ┃",
            "┃      ┃",
            "┗━━━━━━┛",
        ]

    def test_ascii_board(self):
        lines = render_board(_engine(), ASCII)
        assert lines[0] == "+------+"
        assert lines[3] == "| oo@  |"
        assert lines[-1] == "+------+"

    def test_emoji_cells_are_double_width(self):
        lines = render_board(_engine(), EMOJI)
        assert lines[0] == "┏" + "━" * 12 + "┓"
        assert lines[1] == "┃🍎" + "▒▒" * 5 + "┃"
        assert lines[3] == "┃▒▒🔵🔵🐍▒▒▒▒┃"


class TestRenderFrame:
    def test_running_frame(self):
        engine = _engine()
        engine.high_score = 30
        frame = render_frame(engine, BOX).split("\n")
        assert frame[0] == "SNAKE  Score: 0  High Score: 30"
        assert frame[-1] == CONTROLS_HINT
        assert len(frame) == engine.grid.height + 4

    def test_game_over_frame(self):
        engine = _engine()
        engine.score = 20
        engine.high_score = 50
        for _ in range(10):
            engine.step()
        assert engine.game_over
        frame = render_frame(engine, BOX)
        assert "G A M E   O V E R" in frame
        assert "Final Score: 20" in frame
        assert "High Score:  50" in frame
        assert GAME_OVER_HINT in frame
        assert "┏" not in frame


class TestRequiredSize:
    def test_fits_running_frame(self):
        engine = _engine(width=30, height=12)
        columns, lines = required_size(30, 12, BOX)
        frame = render_frame(engine, BOX).split("\n")
        assert lines == len(frame)
        assert columns >= max(len(line) for line in frame)

    def test_emoji_needs_double_columns(self):
        assert required_size(30, 10, EMOJI)[0] == 62
        assert required_size(30, 10, BOX)[0] == 40
