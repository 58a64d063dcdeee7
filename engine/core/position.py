"""Immutable 3x3 position with terminal-state queries and move generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from engine.core.errors import IllegalMoveError

BOARD_SIZE = 9

# Rows, columns, diagonals
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

_EMPTY_SYMBOLS = {"-", "_", ".", " "}


class Cell(Enum):
    """Content of a single square."""
    EMPTY = " "
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Cell":
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        """Printable symbol, '-' for an empty square."""
        return "-" if self is Cell.EMPTY else self.value

    @classmethod
    def from_symbol(cls, ch: str) -> "Cell":
        if ch in _EMPTY_SYMBOLS:
            return cls.EMPTY
        upper = ch.upper()
        if upper == "X":
            return cls.X
        if upper == "O":
            return cls.O
        raise ValueError(f"Invalid cell symbol {ch!r}, use X, O or -")


def _empty_cells() -> Tuple[Cell, ...]:
    return (Cell.EMPTY,) * BOARD_SIZE


@dataclass(frozen=True)
class Position:
    """
    A snapshot of the grid, indices 0-8 in row-major order.

    Positions are values: ``apply_move`` returns a new Position and
    leaves the receiver untouched.
    """
    cells: Tuple[Cell, ...] = field(default_factory=_empty_cells)

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != BOARD_SIZE:
            raise ValueError(f"Position needs {BOARD_SIZE} cells, got {len(cells)}")
        for c in cells:
            if not isinstance(c, Cell):
                raise ValueError(f"Invalid cell value {c!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Position":
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Position":
        """
        Parse a board string such as ``"XO-/-X-/--O"`` or ``"XO--X---O"``.

        Row separators ('/') and line breaks are ignored; a space counts
        as an empty square only in the compact 9-character form.
        """
        compact = text.replace("/", "").replace("\n", "")
        if len(compact) != BOARD_SIZE:
            compact = compact.replace(" ", "")
        if len(compact) != BOARD_SIZE:
            raise ValueError(
                f"Board string must hold exactly {BOARD_SIZE} cells, got {len(compact)}"
            )
        return cls(tuple(Cell.from_symbol(ch) for ch in compact))

    def to_string(self) -> str:
        return "".join(c.symbol for c in self.cells)

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def check_winner(self) -> Cell:
        """Mark owning the first complete win pattern, or EMPTY."""
        cells = self.cells
        for a, b, c in WIN_PATTERNS:
            if cells[a] is not Cell.EMPTY and cells[a] is cells[b] is cells[c]:
                return cells[a]
        return Cell.EMPTY

    def is_game_over(self) -> bool:
        return self.check_winner() is not Cell.EMPTY or self.is_full()

    def available_moves(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c is Cell.EMPTY]

    def apply_move(self, index: int, mark: Cell) -> "Position":
        """Return a new Position with ``mark`` placed at ``index``."""
        if not isinstance(mark, Cell) or mark is Cell.EMPTY:
            raise IllegalMoveError(f"Cannot place {mark!r}")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
            raise IllegalMoveError(f"Square {index!r} is off the board")
        if self.cells[index] is not Cell.EMPTY:
            raise IllegalMoveError(f"Square {index} is already taken by {self.cells[index].value}")
        return self._place(index, mark)

    def _place(self, index: int, mark: Cell) -> "Position":
        """Unchecked ``apply_move`` for callers that took ``index`` from available_moves()."""
        cells = self.cells[:index] + (mark,) + self.cells[index + 1:]
        child = object.__new__(Position)
        object.__setattr__(child, "cells", cells)
        return child

    def count(self, mark: Cell) -> int:
        return self.cells.count(mark)

    def side_to_move(self, first: Cell = Cell.X) -> Cell:
        """Player to move, assuming ``first`` opened and turns alternate."""
        return first if self.count(first) == self.count(first.opponent) else first.opponent

    def render(self) -> str:
        rows = []
        for r in range(3):
            rows.append(" ".join(c.symbol for c in self.cells[r * 3:r * 3 + 3]))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()
