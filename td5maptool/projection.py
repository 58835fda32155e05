"""Oblique projection of table points onto a pixel canvas, and a graph cursor."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_THETA0 = -25.0
"""Angle in degrees of the projected X axis."""

DEFAULT_THETA1 = 25.0
"""Angle in degrees of the projected Z axis."""

CURSOR_DEFAULT_SIZE = (5, 5)
"""Width and height in pixels of a cursor when none is given."""


@dataclass(frozen=True)
class Point3D:
    """A point in table space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Rect:
    """A pixel rectangle; ``bottom`` is the last row inside it."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    def bottom(self) -> int:
        """The y coordinate of the last pixel row of the rectangle."""
        return self.y + self.height - 1


class Projector:
    """Maps 3-D table coordinates onto pixels inside a rectangle.

    Call :meth:`set_rect` first, then :meth:`set_range`; the range step
    derives the scale from the rectangle size.
    """

    def __init__(
        self,
        theta0: float = DEFAULT_THETA0,
        theta1: float = DEFAULT_THETA1,
    ) -> None:
        self.theta0 = theta0
        self.theta1 = theta1
        self.rect = Rect()
        self.res_xz = 0.0
        self.res_x = 0.0
        self.res_y = 0.0
        self.org_x = 0.0
        self.org_y = 0.0
        self.range_x = (0.0, 0.0)
        self.range_y = (0.0, 0.0)
        self.range_z = (0.0, 0.0)
        self._ready = False

    def set_rect(self, rect: Rect) -> None:
        """Set the pixel rectangle the projection draws into."""
        self.rect = rect
        self._ready = False

    def set_range(
        self,
        min_x: float,
        max_x: float,
        min_y: float,
        max_y: float,
        min_z: float,
        max_z: float,
        org_x: float = 0.0,
        org_y: float = 0.0,
    ) -> None:
        """Set the value ranges shown on each axis and the origin offset."""
        if self.rect.width <= 0 or self.rect.height <= 0:
            raise ValueError("the drawing rectangle must have a positive size")
        if max_x == min_x or max_y == min_y or max_z == min_z:
            raise ValueError("every axis range must have a non-zero extent")

        cos0 = math.cos(math.radians(self.theta0))
        cos1 = math.cos(math.radians(self.theta1))

        self.range_x = (float(min_x), float(max_x))
        self.range_y = (float(min_y), float(max_y))
        self.range_z = (float(min_z), float(max_z))
        self.org_x = float(org_x)
        self.org_y = float(org_y)
        self.res_xz = abs(((max_x - min_x) * cos0) / ((max_z - min_z) * cos1))
        self.res_y = (max_y - min_y) / float(self.rect.height)
        self.res_x = (max_x - min_x) / float(self.rect.width)
        self._ready = True

    def to_2d(self, x: float, y: float, z: float) -> tuple[int, int]:
        """Project a point given by its coordinates to a pixel ``(x, y)``."""
        if not self._ready:
            raise RuntimeError("set_range must be called before projecting")

        angle0 = math.radians(self.theta0)
        angle1 = math.radians(self.theta1)

        dx = (-z * self.res_xz * math.cos(angle1)) + (x * math.cos(angle0))
        dy = (self.res_y / self.res_x) * (
            (self.res_xz * -z * math.sin(angle1)) + (x * math.sin(angle0))
        ) + y

        dx += self.org_x
        dy += self.org_y

        x_pixel = int((dx - self.range_x[0]) / self.res_x)
        y_pixel = int((dy - self.range_y[0]) / self.res_y)
        return x_pixel + self.rect.left, self.rect.bottom() - y_pixel

    def project(self, point: Point3D) -> tuple[int, int]:
        """Project a :class:`Point3D` to a pixel ``(x, y)``."""
        return self.to_2d(point.x, point.y, point.z)

    def line(
        self, begin: Point3D, end: Point3D
    ) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return the pixel end points of the segment from ``begin`` to ``end``."""
        return self.project(begin), self.project(end)

    def polygon(self, points: Iterable[Point3D]) -> list[tuple[int, int]]:
        """Return the pixel vertices of a polygon given in table space."""
        return [self.project(point) for point in points]


class GraphCursor:
    """The marker showing the selected point of a graph."""

    def __init__(
        self,
        size: tuple[int, int] = CURSOR_DEFAULT_SIZE,
        visible: bool = False,
    ) -> None:
        self.size = size
        self.visible = visible
        self._position = Point3D()

    def move(self, x: float, y: float, z: float | None = None) -> Point3D:
        """Move the cursor and return where it was.

        When ``z`` is omitted the cursor keeps its current depth.
        """
        old = self._position
        self._position = Point3D(
            float(x), float(y), old.z if z is None else float(z)
        )
        return old

    def position(self) -> Point3D:
        """The cursor's current position."""
        return self._position