"""Plain-text rendering of the board and game status."""

from __future__ import annotations

from snakes_ladders.board import DEFAULT_LAYOUT, BoardLayout, iter_grid
from snakes_ladders.game import GameSnapshot, GameStatus

CELL_WIDTH = 7


def _cell(square: int, snapshot: GameSnapshot | None, layout: BoardLayout) -> str:
    mark = "L" if layout.is_ladder(square) else "S" if layout.is_snake(square) else ""
    pieces = ""
    if snapshot is not None:
        for idx, p in enumerate(snapshot.players):
            if p.position == square:
                pieces += f"{idx + 1}*" if snapshot.winner_index == idx else str(idx + 1)
    return f"{square}{mark}{pieces}".center(CELL_WIDTH)


def render_board(snapshot: GameSnapshot | None = None, layout: BoardLayout = DEFAULT_LAYOUT) -> str:
    """Draw the grid top row first, one text row per board row.

    Cells show the square number, ``L``/``S`` for a ladder base or snake
    head, and the 1-based number of any player standing there (``*`` marks
    the winner).
    """
    border = "+" + "+".join("-" * CELL_WIDTH for _ in range(layout.size)) + "+"
    lines = [border]
    row_cells: list[str] = []
    for row, col, square in iter_grid(layout.size):
        row_cells.append(_cell(square, snapshot, layout))
        if col == layout.size - 1:
            lines.append("|" + "|".join(row_cells) + "|")
            lines.append(border)
            row_cells = []
    return "\n".join(lines)


def roll_label(snapshot: GameSnapshot) -> str:
    if snapshot.status is not GameStatus.PLAYING:
        return "Game Ended"
    if snapshot.last_dice_value is None:
        return "Roll"
    return f"Roll ({snapshot.last_dice_value})"


def render_status(snapshot: GameSnapshot) -> str:
    lines = [snapshot.message]
    playing = snapshot.status is GameStatus.PLAYING
    for idx, p in enumerate(snapshot.players):
        line = f"{p.name} ({p.position})"
        if snapshot.winner_index == idx:
            line += " [winner]"
        elif playing and snapshot.turn_index == idx:
            line += " <- Your Turn"
        lines.append(line)
    lines.append(f"[{roll_label(snapshot)}]")
    return "\n".join(lines)


def render_specials(layout: BoardLayout = DEFAULT_LAYOUT) -> str:
    ladders = ", ".join(f"{a} → {b}" for a, b in sorted(layout.ladders.items()))
    snakes = ", ".join(f"{a} → {b}" for a, b in sorted(layout.snakes.items()))
    return f"Ladders: {ladders}\nSnakes:  {snakes}"
