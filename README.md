# td5maptool

A small library for the calibration tables stored in Td5 engine control map
images. It reads a table out of a raw map image, tells what the table is for a
given map variant, tunes blocks of cells, writes the table back, and computes
the pixel coordinates needed to plot a table as an oblique 3D surface.

## Installation

```
pip install td5maptool
```

To run the tests:

```
pip install "td5maptool[test]"
pytest
```

## Modules

- `td5maptool.words`
  - `lohi_to_hilo(word)` and `hilo_to_lohi(word)` swap the two bytes of a
    16-bit word; anything outside `0..0xFFFF` raises `ValueError`.
  - `checksum(data)` sums every byte of a map image except the last two and
    returns the low 16 bits. `MAP_FILE_LENGTH` (118798) is the size of a full
    image; a shorter one raises `ValueError`.
  - `extract_file_name(path)` returns the part of a path after the last `/`.
- `td5maptool.grid_range`
  - `GridRange(top_row, left_col, bottom_row, right_col)`: an inclusive block of
    cells with `contains(col, row)`, `rows()` and `cols()`.
  - `make_grid(cols, rows, fill)`: a list of lists indexed `grid[col][row]`,
    each cell a copy of `fill`.
- `td5maptool.variants`
  - `Variant(resource, map_name, description)` and `VariantCatalog`, the ordered
    list of known map variants. The catalog supports `len()`, iteration and
    indexing, plus `map_name(index)`, `description(index)` and
    `find(map_name)` (returns `None` when the name is unknown).
- `td5maptool.table_info`
  - `TableKind`, an `IntEnum` of the table kinds.
  - `TableInfoItem`: kind, index, axis units, name and comment of a table.
  - `TableInfoCatalog(map_name)`: the table descriptions for one variant, with
    `lookup(index)` returning the `TableInfoItem` for a table index or `None`.
    Unrecognised map names give a layout in which almost no table is known;
    absent tables carry `UNUSED_INDEX` (255).
- `td5maptool.table`
  - `MapTable(address=..., map_name=..., single_value=...)`: one table of a
    map. `address` is the byte offset from `FUEL_MAP_BEGIN_ADDRESS` (102416).
  - `read(data, index, base=None)` loads headers and values from a bytes-like
    image (big-endian 16-bit words), optionally with an unmodified `base` image
    to compare against, and looks up the table's name and comment.
  - `write(data)` stores the current headers and values into a writable image
    such as a `bytearray`.
  - `eval_range()` and `eval_diff_range()` return `(minimum, maximum)` axis
    limits, rounded out, for the current values or for current minus base.
  - `current_value`, `base_value`, `diff_value`, `set_current_value`,
    `sum_current_value`, `sum_percent_current_value`,
    `is_different_from_original`, `is_tridimensional`, `is_bidimensional`.
  - `Cell` holds the `base` and `current` value of one header or grid entry.
  - `TableFormatError` (a `ValueError`) is raised for dimensions outside
    `1..32` or for words that lie beyond the end of the image.
- `td5maptool.tuner`
  - `TuneData(constant, left_top, right_top, left_bottom, right_bottom)`.
  - `Tuner(table)` with `create_tune_table(grid_range, data)`, which
    interpolates the four corner values linearly over the block and adds the
    constant, and `plane_tuning`, `percent_tuning` and
    `table_tuning(grid_range, tune_table)`, which apply offsets or percentages
    to the cells of the block.
- `td5maptool.projection`
  - `Point3D`, `Rect` (with `left` and `bottom()`), and `Projector`: call
    `set_rect(rect)`, then `set_range(min_x, max_x, min_y, max_y, min_z,
    max_z, org_x, org_y)`, then `to_2d(x, y, z)`, `project(point)`,
    `line(begin, end)` or `polygon(points)` to get pixel coordinates.
  - `GraphCursor` with `move(x, y, z=None)`, which returns the previous
    position, and `position()`.

## Example

```python
from td5maptool.grid_range import GridRange
from td5maptool.table import FUEL_MAP_BEGIN_ADDRESS, MapTable
from td5maptool.tuner import TuneData, Tuner
from td5maptool.words import MAP_FILE_LENGTH, checksum

# A blank image holding one 2x2 table at address 0.
image = bytearray(MAP_FILE_LENGTH)
words = [2, 2, 1000, 2000, 10, 20, 100, 110, 120, 130]
start = FUEL_MAP_BEGIN_ADDRESS
image[start:start + 2 * len(words)] = b"".join(w.to_bytes(2, "big") for w in words)

table = MapTable(address=0, map_name="svdxe008svtnp006")
table.read(image, 98, base=bytes(image))
print(table.name)                 # FUEL MAP (0 deg. advance)
print(table.eval_range())         # (-200, 200)

tuner = Tuner(table)
tuner.plane_tuning(GridRange(0, 0, 1, 1), TuneData(constant=5))
print(table.current_value(1, 1))  # 135
print(table.is_different_from_original())  # True

table.write(image)
print(checksum(image))
```

## What it does not do

This is a library only. It has no command-line tool and no graphical editor:
the projection module computes pixel coordinates but draws nothing. It ships no
stock map images; the variant catalogue knows their names and descriptions
only. It does not locate tables inside an image by itself: the caller supplies
each table's address. `checksum` computes the value but nothing writes it into
the image.