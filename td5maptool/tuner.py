"""Bulk edits of a block of cells in a map table."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .grid_range import GridRange, make_grid
from .table import MapTable


@dataclass
class TuneData:
    """Corner values and a constant offset for a tuning operation."""

    constant: int = 0
    left_top: int = 0
    right_top: int = 0
    left_bottom: int = 0
    right_bottom: int = 0


class Tuner:
    """Applies tuning operations to one table."""

    def __init__(self, table: MapTable) -> None:
        self.table = table
        self.cols = table.cols
        self.rows = table.rows

    def _cells(self, grid_range: GridRange) -> Iterator[tuple[int, int]]:
        if grid_range.left_col < 0 or grid_range.top_row < 0:
            raise ValueError("tuning range must not start before the first cell")
        for col in range(grid_range.left_col, min(grid_range.right_col, self.cols - 1) + 1):
            for row in range(grid_range.top_row, min(grid_range.bottom_row, self.rows - 1) + 1):
                yield col, row

    def create_tune_table(self, grid_range: GridRange, data: TuneData) -> list[list[float]]:
        """Build the offsets for ``grid_range``, indexed as ``[col][row]``.

        The offsets are interpolated linearly between the four corner values
        of ``data`` and the constant is added to each of them.
        """
        if grid_range.left_col < 0 or grid_range.top_row < 0:
            raise ValueError("tuning range must not start before the first cell")
        tune = make_grid(self.cols, self.rows, 0.0)
        left, right = grid_range.left_col, grid_range.right_col
        top, bottom = grid_range.top_row, grid_range.bottom_row
        columns = range(left, min(right, self.cols - 1) + 1)

        if right - left > 0:
            factor_top = (data.right_top - data.left_top) / (right - left)
            factor_bottom = (data.right_bottom - data.left_bottom) / (right - left)
            for col in columns:
                tune[col][top] = factor_top * (col - left) + data.left_top
                if bottom - top > 0:
                    tune[col][bottom] = factor_bottom * (col - left) + data.left_bottom
        else:
            tune[left][top] = float(data.left_top)
            if bottom - top > 0:
                tune[left][bottom] = float(data.left_bottom)

        if bottom - top > 0:
            for col in columns:
                first = tune[col][top]
                factor = (tune[col][bottom] - first) / (bottom - top)
                for row in range(top, min(bottom, self.rows - 1) + 1):
                    tune[col][row] = factor * (row - top) + first

        for col, row in self._cells(grid_range):
            tune[col][row] += data.constant
        return tune

    def plane_tuning(self, grid_range: GridRange, data: TuneData) -> None:
        """Add the interpolated offsets to the cells of ``grid_range``."""
        tune = self.create_tune_table(grid_range, data)
        for col, row in self._cells(grid_range):
            self.table.sum_current_value(int(tune[col][row]), col, row)

    def percent_tuning(self, grid_range: GridRange, data: TuneData) -> None:
        """Raise the cells of ``grid_range`` by the interpolated percentages."""
        tune = self.create_tune_table(grid_range, data)
        for col, row in self._cells(grid_range):
            self.table.sum_percent_current_value(tune[col][row], col, row)

    def table_tuning(self, grid_range: GridRange, tune_table) -> None:
        """Add the offsets of ``tune_table`` (``[col][row]``) to ``grid_range``."""
        for col, row in self._cells(grid_range):
            self.table.sum_current_value(int(tune_table[col][row]), col, row)