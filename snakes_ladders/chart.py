"""Render the board and pieces to a PNG with matplotlib."""

from __future__ import annotations

import logging

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from snakes_ladders.board import DEFAULT_LAYOUT, BoardLayout, iter_grid
from snakes_ladders.game import GameSnapshot

logger = logging.getLogger("snakes_ladders.chart")

START_COLOR = "#e2e9f3"
FINISH_COLOR = "#ffeab9"
DARK_CELLS = ("#28223a", "#322744")
LADDER_COLOR = "#1fa259"
SNAKE_COLOR = "#c92a2a"
WINNER_EDGE = "#FFD700"


def _center(layout: BoardLayout, square: int) -> tuple[float, float]:
    """Cell centre in axes units, y growing upward."""
    row, col = layout.square_to_coordinates(square)
    return col + 0.5, layout.size - row - 0.5


def make_board_image(
    snapshot: GameSnapshot | None = None,
    layout: BoardLayout = DEFAULT_LAYOUT,
    output_path: str = "board.png",
    title: str = "Snakes and Ladders Adventure",
) -> str:
    """Draw the board, ladders, snakes and player pieces.

    Returns the path to the saved PNG.
    """
    size = layout.size
    fig, ax = plt.subplots(figsize=(8, 8))

    for row, col, square in iter_grid(size):
        if square == 1:
            color = START_COLOR
        elif square == layout.square_count:
            color = FINISH_COLOR
        else:
            color = DARK_CELLS[(row % 2) != (col % 2)]
        y = size - row - 1
        ax.add_patch(Rectangle((col, y), 1, 1, facecolor=color, edgecolor="#aaaaaa"))
        text_color = "#222222" if square in (1, layout.square_count) else "#eeeeee"
        ax.text(col + 0.06, y + 0.94, str(square), ha="left", va="top",
                fontsize=8, fontweight="bold", color=text_color)

    for specials, color in ((layout.ladders, LADDER_COLOR), (layout.snakes, SNAKE_COLOR)):
        for start, dest in specials.items():
            (x0, y0), (x1, y1) = _center(layout, start), _center(layout, dest)
            ax.annotate(
                "", xy=(x1, y1), xytext=(x0, y0),
                arrowprops=dict(arrowstyle="-|>", color=color, lw=2.5, alpha=0.8),
            )

    if snapshot is not None:
        # Offset pieces sharing a square so both stay visible
        offsets = (-0.18, 0.18)
        for idx, p in enumerate(snapshot.players):
            x, y = _center(layout, p.position)
            x += offsets[idx % len(offsets)]
            winner = snapshot.winner_index == idx
            ax.add_patch(Circle(
                (x, y - 0.12), 0.16, facecolor=p.color,
                edgecolor=WINNER_EDGE if winner else "white", lw=2.5 if winner else 1.5,
                zorder=3,
            ))
            ax.text(x, y - 0.12, str(idx + 1), ha="center", va="center",
                    fontsize=8, fontweight="bold", color="white", zorder=4)
        ax.set_xlabel(snapshot.message)

    ax.set_xlim(0, size)
    ax.set_ylim(0, size)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title, fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=120)
    plt.close(fig)
    logger.info("Board image saved to %s", output_path)
    return output_path
