"""A single calibration table read from, and written back to, a map image."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field

from .grid_range import make_grid
from .table_info import TableInfoCatalog, TableInfoItem

FUEL_MAP_BEGIN_ADDRESS = 102416
"""Byte offset in the map image where table addresses start counting."""

MAX_DIMENSION = 32
"""Largest number of columns or rows a table may have."""


class TableFormatError(ValueError):
    """Raised when a table cannot be read from or written to a map image."""


@dataclass
class Cell:
    """One value of a table: its base value and its edited value."""

    base: int = 0
    current: int = 0
    external: int = 0


def _to_short(value: int) -> int:
    """Reinterpret ``value`` as a signed 16-bit integer."""
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def _read_word(image, word_index: int) -> int:
    offset = word_index * 2
    if offset < 0 or offset + 2 > len(image):
        raise TableFormatError(
            f"map image too short: word {word_index} lies beyond {len(image)} bytes"
        )
    return int.from_bytes(bytes(image[offset:offset + 2]), "big")


def _write_word(image, word_index: int, value: int) -> None:
    offset = word_index * 2
    if offset < 0 or offset + 2 > len(image):
        raise TableFormatError(
            f"map image too short: word {word_index} lies beyond {len(image)} bytes"
        )
    image[offset:offset + 2] = (value & 0xFFFF).to_bytes(2, "big")


def _axis_limits(values: Iterator[int], map3d: bool) -> tuple[int, int]:
    """Round the extent of ``values`` out to tidy axis limits."""
    high = 0
    low = 0
    for value in values:
        high = max(high, value)
        low = min(low, value)

    if high == 0:
        high = 1
    elif high < 10:
        high = 10
    else:
        for bound in (100, 1000, 10000, 100000):
            if high < bound:
                step = bound // 10
                high = (high // step + 1) * step
                break

    if low != 0:
        if abs(low) < 10:
            low = -10
        else:
            for bound in (100, 1000, 10000, 100000):
                if abs(low) < bound:
                    step = bound // 10
                    low = (_trunc_div(low, step) - 1) * step
                    break

    if abs(low) > abs(high):
        high = abs(low)
    if abs(low) < abs(high) and map3d:
        low = -high
    return low, high


@dataclass
class MapTable:
    """A table of a map: column and row headers plus a grid of values.

    The grid is indexed as ``table_data[col][row]``.  ``address`` is the
    table's byte offset from :data:`FUEL_MAP_BEGIN_ADDRESS`; ``map_name`` is
    the stock map the image belongs to, used to recognise the table.
    """

    address: int = 0
    map_name: str | None = None
    single_value: bool = False
    index: int = 0
    cols: int = 0
    rows: int = 0
    map3d: bool = False
    recognized: bool = False
    kind: int = 0
    name: str = ""
    comment: str = ""
    table_info: TableInfoItem = field(default_factory=TableInfoItem)
    header_col: list[Cell] = field(default_factory=list)
    header_row: list[Cell] = field(default_factory=list)
    table_data: list[list[Cell]] = field(default_factory=list)

    def _start_word(self) -> int:
        return (FUEL_MAP_BEGIN_ADDRESS + self.address) // 2

    def read(self, data, index: int, base=None) -> None:
        """Load the table from the map image ``data``.

        ``base`` is the unmodified image the table is compared with; when
        omitted every base value is zero.  ``index`` is the table's number
        in the map and is used to look up its description.
        """
        start = self._start_word()
        if self.single_value:
            cols = rows = 1
            position = start
        else:
            cols = _read_word(data, start)
            rows = _read_word(data, start + 1)
            position = start + 1

        self.cols = cols
        self.rows = rows
        if rows > 1:
            self.map3d = True
        if not (1 <= cols <= MAX_DIMENSION and 1 <= rows <= MAX_DIMENSION):
            raise TableFormatError(
                f"bad table dimensions {cols}x{rows} at address {self.address}"
            )

        self.header_col = [Cell() for _ in range(cols)]
        self.header_row = [Cell() for _ in range(rows)]
        self.table_data = make_grid(cols, rows, Cell())

        positions = itertools.count(position + 1)

        def next_cell(cell: Cell) -> None:
            word = next(positions)
            cell.current = _read_word(data, word)
            cell.base = _read_word(base, word) if base is not None else 0

        if cols > 1:
            for cell in self.header_col:
                next_cell(cell)
        if rows > 1:
            for cell in self.header_row:
                next_cell(cell)
        if cols > 1 or rows > 1:
            for row in range(rows):
                for column in self.table_data:
                    next_cell(column[row])
        else:
            self.header_col[0].current = 0
            self.header_row[0].current = 0
            cell = self.table_data[0][0]
            cell.current = _read_word(data, position)
            cell.base = _read_word(base, position) if base is not None else 0

        self.index = index
        found = TableInfoCatalog(self.map_name).lookup(index)
        self.recognized = found is not None
        if found is not None:
            self.table_info = found
        self.kind = self.table_info.kind
        self.name = self.table_info.name
        self.comment = self.table_info.comment

    def write(self, data) -> None:
        """Store the current headers and values into the writable image ``data``."""
        start = self._start_word()
        position = start if self.single_value else start + 1
        positions = itertools.count(position + 1)

        if self.cols > 1:
            for cell in self.header_col:
                _write_word(data, next(positions), cell.current)
        if self.rows > 1:
            for cell in self.header_row:
                _write_word(data, next(positions), cell.current)
        if self.cols > 1 or self.rows > 1:
            for row in range(self.rows):
                for column in self.table_data[: self.cols]:
                    _write_word(data, next(positions), column[row].current)
        if self.cols == 1 and self.rows == 1:
            _write_word(data, position, self.table_data[0][0].current)

    def _cells(self) -> Iterator[Cell]:
        for column in self.table_data[: self.cols]:
            yield from column[: self.rows]

    def eval_range(self) -> tuple[int, int]:
        """Return ``(minimum, maximum)`` axis limits for the current values."""
        return _axis_limits(
            (_to_short(cell.current) for cell in self._cells()), self.map3d
        )

    def eval_diff_range(self) -> tuple[int, int]:
        """Return ``(minimum, maximum)`` axis limits for current minus base."""
        return _axis_limits(
            (_to_short(cell.current - cell.base) for cell in self._cells()), self.map3d
        )

    def current_value(self, col: int, row: int) -> int:
        return self.table_data[col][row].current

    def base_value(self, col: int, row: int) -> int:
        return self.table_data[col][row].base

    def diff_value(self, col: int, row: int) -> int:
        cell = self.table_data[col][row]
        return cell.current - cell.base

    def set_current_value(self, value: int, col: int, row: int) -> None:
        self.table_data[col][row].current = value

    def _store_short(self, result: int, col: int, row: int) -> None:
        # The sum is taken as a signed 16-bit value; the two extremes leave
        # the cell as it was.
        if -32768 < result < 32767:
            self.table_data[col][row].current = result

    def sum_current_value(self, amount: int, col: int, row: int) -> None:
        """Add ``amount`` to the current value of a cell."""
        current = self.table_data[col][row].current
        self._store_short(_to_short(current + int(amount)), col, row)

    def sum_percent_current_value(self, percent: float, col: int, row: int) -> None:
        """Raise the current value of a cell by ``percent`` per cent."""
        current = self.table_data[col][row].current
        result = current + int(current * percent) / 100.0
        self._store_short(_to_short(int(result)), col, row)

    def is_different_from_original(self) -> bool:
        """Tell whether any header or value differs from the base image."""
        if self.cols > 1 or self.rows > 1:
            if self.cols > 1 and any(c.current != c.base for c in self.header_col):
                return True
            if self.rows > 1 and any(c.current != c.base for c in self.header_row):
                return True
            return any(cell.current != cell.base for cell in self._cells())
        if self.cols == 1 and self.rows == 1:
            cell = self.table_data[0][0]
            return cell.current != cell.base
        return False

    def is_tridimensional(self) -> bool:
        return self.map3d

    def is_bidimensional(self) -> bool:
        return not self.map3d