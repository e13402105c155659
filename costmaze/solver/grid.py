"""Read-only cost grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from costmaze.solver.contracts import Cell
from costmaze.solver.errors import MalformedInputError, OutOfBoundsError

DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Grid:
    """Rectangular matrix of entry costs. Zero marks a wall."""

    cells: tuple[tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if not rows or not rows[0]:
            raise MalformedInputError("Grid must have at least one row and column.")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise MalformedInputError(
                    f"Grid row {index} has {len(row)} columns, expected {width}."
                )
            if any(value < 0 for value in row):
                raise MalformedInputError(f"Grid row {index} has a negative cost.")
        return cls(cells=tuple(tuple(row) for row in rows))

    def bounds(self) -> tuple[int, int]:
        return len(self.cells), len(self.cells[0])

    def in_bounds(self, cell: Cell) -> bool:
        rows, columns = self.bounds()
        row, column = cell
        return 0 <= row < rows and 0 <= column < columns

    def cost_at(self, cell: Cell) -> int:
        if not self.in_bounds(cell):
            raise OutOfBoundsError(f"Cell {cell} is outside the grid.")
        row, column = cell
        return self.cells[row][column]

    def is_passable(self, cell: Cell) -> bool:
        return self.cost_at(cell) != 0

    def neighbors(self, cell: Cell) -> list[Cell]:
        row, column = cell
        candidates = [(row + dr, column + dc) for dr, dc in DIRECTIONS]
        return [
            pos for pos in candidates if self.in_bounds(pos) and self.is_passable(pos)
        ]
