import pytest

from td5maptool.grid_range import GridRange, make_grid
from td5maptool.table import FUEL_MAP_BEGIN_ADDRESS, MapTable
from td5maptool.tuner import TuneData, Tuner

IMAGE_SIZE = 118798


def make_table(cols, rows, values):
    words = [cols, rows] + list(range(1, cols + 1)) + list(range(1, rows + 1)) + values
    image = bytearray(IMAGE_SIZE)
    offset = FUEL_MAP_BEGIN_ADDRESS
    for i, word in enumerate(words):
        image[offset + 2 * i:offset + 2 * i + 2] = (word & 0xFFFF).to_bytes(2, "big")
    table = MapTable()
    table.read(image, 0)
    return table


def zero_table(cols=3, rows=3):
    return make_table(cols, rows, [0] * (cols * rows))


def test_tune_table_corners_match_data():
    tuner = Tuner(zero_table())
    data = TuneData(constant=0, left_top=0, right_top=10, left_bottom=20, right_bottom=30)
    tune = tuner.create_tune_table(GridRange(0, 0, 2, 2), data)
    assert tune[0][0] == data.left_top
    assert tune[2][0] == data.right_top
    assert tune[0][2] == data.left_bottom
    assert tune[2][2] == data.right_bottom


def test_tune_table_is_linear():
    tuner = Tuner(zero_table())
    data = TuneData(constant=0, left_top=0, right_top=10, left_bottom=20, right_bottom=30)
    tune = tuner.create_tune_table(GridRange(0, 0, 2, 2), data)
    assert tune[1][0] == (tune[0][0] + tune[2][0]) / 2
    assert tune[0][1] == (tune[0][0] + tune[0][2]) / 2
    assert tune[1][1] == (tune[1][0] + tune[1][2]) / 2


def test_tune_table_adds_constant_inside_range_only():
    tuner = Tuner(zero_table())
    tune = tuner.create_tune_table(GridRange(0, 0, 1, 1), TuneData(constant=4))
    assert tune[0][0] == 4
    assert tune[1][1] == 4
    assert tune[2][2] == 0
    assert tune[2][0] == 0


def test_single_cell_tune_table():
    tuner = Tuner(zero_table())
    tune = tuner.create_tune_table(GridRange(1, 1, 1, 1), TuneData(constant=3, left_top=6))
    assert tune[1][1] == 3 + 6
    assert sum(sum(column) for column in tune) == 3 + 6


def test_plane_tuning_with_constant():
    table = zero_table(2, 2)
    Tuner(table).plane_tuning(GridRange(0, 0, 1, 1), TuneData(constant=7))
    assert all(table.current_value(c, r) == 7 for c in range(2) for r in range(2))


def test_plane_tuning_leaves_other_cells():
    table = zero_table()
    Tuner(table).plane_tuning(GridRange(0, 0, 2, 0), TuneData(constant=5))
    assert [table.current_value(0, r) for r in range(3)] == [5, 5, 5]
    assert table.current_value(1, 0) == 0
    assert table.current_value(2, 2) == 0


def test_range_beyond_table_is_clipped():
    table = zero_table()
    Tuner(table).plane_tuning(GridRange(0, 0, 0, 10), TuneData(constant=5))
    assert [table.current_value(c, 0) for c in range(3)] == [5, 5, 5]


def test_plane_tuning_is_undone_by_negative_data():
    table = make_table(2, 2, [10, 20, 30, 40])
    before = [[table.current_value(c, r) for r in range(2)] for c in range(2)]
    tuner = Tuner(table)
    whole = GridRange(0, 0, 1, 1)
    tuner.plane_tuning(whole, TuneData(2, 4, 6, 8, 10))
    tuner.plane_tuning(whole, TuneData(-2, -4, -6, -8, -10))
    after = [[table.current_value(c, r) for r in range(2)] for c in range(2)]
    assert after == before


def test_percent_tuning():
    table = make_table(2, 2, [200, 0, 0, 0])
    Tuner(table).percent_tuning(GridRange(0, 0, 0, 0), TuneData(constant=10))
    assert table.current_value(0, 0) == 220
    assert table.current_value(1, 0) == 0


def test_table_tuning_truncates_offsets():
    table = zero_table(2, 2)
    offsets = make_grid(2, 2, 0.0)
    offsets[1][1] = 2.9
    Tuner(table).table_tuning(GridRange(0, 0, 1, 1), offsets)
    assert table.current_value(1, 1) == 2
    assert table.current_value(0, 0) == 0


def test_negative_range_start_raises():
    tuner = Tuner(zero_table())
    with pytest.raises(ValueError):
        tuner.plane_tuning(GridRange(-1, 0, 1, 1), TuneData(constant=1))