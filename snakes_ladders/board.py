"""Board layout and square <-> grid geometry for Snakes & Ladders."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

logger = logging.getLogger("snakes_ladders.board")

BOARD_SIZE = 10

# fmt: off
LADDERS: dict[int, int] = {
     4: 14,   9: 31,  20: 38,  28: 84,
    40: 59,  51: 67,  63: 81,  71: 91,
}

SNAKES: dict[int, int] = {
    17:  7,  54: 34,  62: 19,  64: 60,
    87: 36,  93: 73,  95: 75,  99: 78,
}
# fmt: on


class BoardLayoutError(ValueError):
    """The static ladder/snake data breaks a board invariant."""


# ── Geometry ─────────────────────────────────────────────────────────

def square_to_coordinates(square: int, size: int = BOARD_SIZE) -> tuple[int, int]:
    """Map *square* (1-based) to its ``(row, col)`` grid cell.

    Row 0 is the top of the grid. Square 1 sits bottom-left and the path
    zig-zags: left to right on even rows counted from the bottom, right to
    left on odd ones.
    """
    n = square - 1
    row = size - 1 - n // size
    col = n % size
    if (size - 1 - row) % 2 == 1:
        col = size - 1 - col
    return row, col


def coordinates_to_square(row: int, col: int, size: int = BOARD_SIZE) -> int:
    """Inverse of :func:`square_to_coordinates`."""
    base = (size - 1 - row) * size
    if (size - 1 - row) % 2 == 1:
        col = size - 1 - col
    return base + col + 1


def iter_grid(size: int = BOARD_SIZE) -> Iterator[tuple[int, int, int]]:
    """Yield ``(row, col, square)`` for every cell, top row first."""
    for row in range(size):
        for col in range(size):
            yield row, col, coordinates_to_square(row, col, size)


# ── Layout ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BoardLayout:
    """Immutable board description: grid size plus ladder and snake maps.

    Validated on construction; a bad layout raises :class:`BoardLayoutError`.
    """

    size: int = BOARD_SIZE
    ladders: Mapping[int, int] = field(default_factory=lambda: dict(LADDERS))
    snakes: Mapping[int, int] = field(default_factory=lambda: dict(SNAKES))

    def __post_init__(self) -> None:
        object.__setattr__(self, "ladders", MappingProxyType(dict(self.ladders)))
        object.__setattr__(self, "snakes", MappingProxyType(dict(self.snakes)))
        self._validate()
        logger.debug(
            "Board layout %dx%d: %d ladders, %d snakes",
            self.size, self.size, len(self.ladders), len(self.snakes),
        )

    def _validate(self) -> None:
        if self.size < 1:
            raise BoardLayoutError(f"Board size must be positive, got {self.size}.")

        last = self.square_count
        for kind, mapping in (("Ladder", self.ladders), ("Snake", self.snakes)):
            for start, dest in mapping.items():
                for sq in (start, dest):
                    if not 1 <= sq <= last:
                        raise BoardLayoutError(
                            f"{kind} {start} → {dest}: square {sq} is off the board (1–{last})."
                        )

        for base, top in self.ladders.items():
            if top <= base:
                raise BoardLayoutError(f"Ladder {base} → {top} must go up.")
        for head, tail in self.snakes.items():
            if tail >= head:
                raise BoardLayoutError(f"Snake {head} → {tail} must go down.")

        both = sorted(set(self.ladders) & set(self.snakes))
        if both:
            raise BoardLayoutError(
                f"Squares {both} are both a ladder base and a snake head."
            )

    @property
    def square_count(self) -> int:
        return self.size * self.size

    def is_ladder(self, square: int) -> bool:
        return square in self.ladders

    def is_snake(self, square: int) -> bool:
        return square in self.snakes

    def special_dest(self, square: int) -> int | None:
        """Where a ladder or snake on *square* leads, or ``None``."""
        dest = self.ladders.get(square)
        if dest is None:
            dest = self.snakes.get(square)
        return dest

    def square_to_coordinates(self, square: int) -> tuple[int, int]:
        return square_to_coordinates(square, self.size)

    def coordinates_to_square(self, row: int, col: int) -> int:
        return coordinates_to_square(row, col, self.size)


DEFAULT_LAYOUT = BoardLayout()
