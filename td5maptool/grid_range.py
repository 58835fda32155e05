"""Rectangular cell ranges and column-major grids."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass
class GridRange:
    """An inclusive block of cells, from top-left to bottom-right."""

    top_row: int = 0
    left_col: int = 0
    bottom_row: int = 0
    right_col: int = 0

    def contains(self, col: int, row: int) -> bool:
        """Tell whether the cell at ``col``, ``row`` lies inside the block."""
        return (
            self.left_col <= col <= self.right_col
            and self.top_row <= row <= self.bottom_row
        )

    def rows(self) -> int:
        """Number of rows covered."""
        return self.bottom_row - self.top_row + 1

    def cols(self) -> int:
        """Number of columns covered."""
        return self.right_col - self.left_col + 1


def make_grid(cols: int, rows: int, fill: T) -> list[list[T]]:
    """Build a grid indexed as ``grid[col][row]``, each cell a copy of ``fill``."""
    if cols < 0 or rows < 0:
        raise ValueError("grid dimensions must not be negative")
    return [[copy.copy(fill) for _ in range(rows)] for _ in range(cols)]