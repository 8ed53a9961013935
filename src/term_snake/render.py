"""Text frame rendering for the game board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from term_snake.grid import CellType

if TYPE_CHECKING:
    from term_snake.engine import GameEngine

TITLE = "SNAKE"
CONTROLS_HINT = "Arrows/WASD move  Q quit"
GAME_OVER_HINT = "R - Restart  Q - Quit"
# Room for the header with five-digit scores.
MIN_COLUMNS = 40


@dataclass(frozen=True)
class GlyphStyle:
    """Characters used to draw one board cell type or border piece.

    Every cell glyph must occupy exactly ``cell_width`` terminal columns.
    """

    name: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    head: str
    body: str
    food: str
    empty: str
    cell_width: int = 1

    def glyph(self, cell: int) -> str:
        return {
            CellType.EMPTY: self.empty,
            CellType.BODY: self.body,
            CellType.HEAD: self.head,
            CellType.FOOD: self.food,
        }[CellType(cell)]


BOX = GlyphStyle(
    name="box",
    top_left="┏", top_right="┓", bottom_left="┗", bottom_right="┛",
    horizontal="━", vertical="┃",
    head="O", body="o", food="*", empty=" ",
)

ASCII = GlyphStyle(
    name="ascii",
    top_left="+", top_right="+", bottom_left="+", bottom_right="+",
    horizontal="-", vertical="|",
    head="@", body="o", food="*", empty=" ",
)

EMOJI = GlyphStyle(
    name="emoji",
    top_left="┏", top_right="┓", bottom_left="┗", bottom_right="┛",
    horizontal="━", vertical="┃",
    head="🐍", body="🔵", food="🍎", empty="▒▒",
    cell_width=2,
)

STYLES: dict[str, GlyphStyle] = {s.name: s for s in (BOX, ASCII, EMOJI)}


def get_style(name: str) -> GlyphStyle:
    try:
        return STYLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown style {name!r}; choose from {', '.join(STYLES)}."
        ) from None


def required_size(width: int, height: int, style: GlyphStyle) -> tuple[int, int]:
    """Return the ``(columns, lines)`` a terminal needs to show a full frame."""
    columns = max(
        width * style.cell_width + 2,
        MIN_COLUMNS,
    )
    # Header line, two border lines, the board, and the hint line.
    lines = height + 4
    return columns, lines


def render_board(engine: GameEngine, style: GlyphStyle) -> list[str]:
    """Draw the bordered board as a list of lines."""
    cells = engine.grid.to_array(engine.snake, engine.food.position)
    border = style.horizontal * (engine.grid.width * style.cell_width)
    lines = [style.top_left + border + style.top_right]
    for row in cells:
        inner = "".join(style.glyph(cell) for cell in row)
        lines.append(style.vertical + inner + style.vertical)
    lines.append(style.bottom_left + border + style.bottom_right)
    return lines


def render_game_over(engine: GameEngine) -> list[str]:
    """Draw the end-of-game summary."""
    return [
        "G A M E   O V E R",
        "",
        f"Final Score: {engine.score}",
        f"High Score:  {engine.high_score}",
        "",
        GAME_OVER_HINT,
    ]


def render_frame(engine: GameEngine, style: GlyphStyle = BOX) -> str:
    """Build a complete frame for the current engine state."""
    if engine.game_over:
        return "\n".join(render_game_over(engine))

    header = f"{TITLE}  Score: {engine.score}  High Score: {engine.high_score}"
    lines = [header, *render_board(engine, style), CONTROLS_HINT]
    return "\n".join(lines)
