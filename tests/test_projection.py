import pytest

from td5maptool.projection import (
    CURSOR_DEFAULT_SIZE,
    GraphCursor,
    Point3D,
    Projector,
    Rect,
)


def make_projector(rect=None, org_x=0.0, org_y=0.0):
    projector = Projector()
    projector.set_rect(rect or Rect(0, 0, 100, 100))
    projector.set_range(0, 100, 0, 100, 0, 10, org_x, org_y)
    return projector


def test_rect_bottom_is_last_row():
    rect = Rect(0, 0, 100, 50)
    assert rect.bottom() == 49
    assert Rect(10, 20, 5, 5).bottom() == 24


def test_origin_maps_to_bottom_left():
    rect = Rect(0, 0, 100, 100)
    projector = make_projector(rect)
    assert projector.to_2d(0, 0, 0) == (rect.left, rect.bottom())


def test_project_matches_to_2d():
    projector = make_projector()
    point = Point3D(12.0, 30.0, 3.0)
    assert projector.project(point) == projector.to_2d(12.0, 30.0, 3.0)


def test_y_moves_up_on_screen():
    projector = make_projector()
    low = projector.to_2d(0, 10, 0)
    high = projector.to_2d(0, 50, 0)
    assert low[0] == high[0]
    assert high[1] < low[1]


def test_x_moves_right_and_down():
    projector = make_projector()
    origin = projector.to_2d(0, 0, 0)
    moved = projector.to_2d(10, 0, 0)
    assert moved[0] > origin[0]
    assert moved[1] > origin[1]


def test_z_moves_left_and_down():
    projector = make_projector()
    origin = projector.to_2d(0, 0, 0)
    moved = projector.to_2d(0, 0, 1)
    assert moved[0] < origin[0]
    assert moved[1] > origin[1]


def test_rect_offset_translates_result():
    base = make_projector(Rect(0, 0, 100, 100))
    shifted = make_projector(Rect(10, 20, 100, 100))
    bx, by = base.to_2d(20, 40, 2)
    sx, sy = shifted.to_2d(20, 40, 2)
    assert sx - bx == 10
    assert sy - by == 20


def test_origin_offset_shifts_pixels():
    base = make_projector()
    shifted = make_projector(org_x=5.0, org_y=7.0)
    bx, by = base.to_2d(0, 0, 0)
    sx, sy = shifted.to_2d(0, 0, 0)
    assert sx - bx == 5
    assert by - sy == 7


def test_line_returns_both_end_points():
    projector = make_projector()
    begin, end = Point3D(0, 0, 0), Point3D(10, 20, 3)
    assert projector.line(begin, end) == (
        projector.project(begin),
        projector.project(end),
    )


def test_polygon_projects_every_vertex_in_order():
    projector = make_projector()
    points = [Point3D(0, 0, 0), Point3D(1, 5, 0), Point3D(1, 5, 1), Point3D(0, 0, 1)]
    result = projector.polygon(points)
    assert result == [projector.project(p) for p in points]
    assert len(result) == len(points)


def test_projecting_before_range_raises():
    projector = Projector()
    projector.set_rect(Rect(0, 0, 100, 100))
    with pytest.raises(RuntimeError):
        projector.to_2d(0, 0, 0)


def test_degenerate_z_range_raises():
    projector = Projector()
    projector.set_rect(Rect(0, 0, 100, 100))
    with pytest.raises(ValueError):
        projector.set_range(0, 100, 0, 100, 5, 5)


def test_empty_rect_raises():
    projector = Projector()
    projector.set_rect(Rect(0, 0, 0, 100))
    with pytest.raises(ValueError):
        projector.set_range(0, 100, 0, 100, 0, 10)


def test_changing_rect_requires_new_range():
    projector = make_projector()
    projector.set_rect(Rect(0, 0, 200, 200))
    with pytest.raises(RuntimeError):
        projector.to_2d(0, 0, 0)


def test_cursor_defaults():
    cursor = GraphCursor()
    assert cursor.size == CURSOR_DEFAULT_SIZE
    assert cursor.visible is False
    assert cursor.position() == Point3D(0.0, 0.0, 0.0)


def test_cursor_move_returns_previous_position():
    cursor = GraphCursor()
    first = cursor.move(1, 2, 3)
    assert first == Point3D(0.0, 0.0, 0.0)
    second = cursor.move(4, 5, 6)
    assert second == Point3D(1.0, 2.0, 3.0)
    assert cursor.position() == Point3D(4.0, 5.0, 6.0)


def test_cursor_move_without_z_keeps_depth():
    cursor = GraphCursor()
    cursor.move(1, 2, 3)
    cursor.move(7, 8)
    assert cursor.position() == Point3D(7.0, 8.0, 3.0)