"""Circles and circle segments."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterator

from bezkit.affine import Point, Rect, Vec2, _as_point
from bezkit.arc import Arc
from bezkit.bezpath import BezPath
from bezkit.elements import ClosePath, CurveTo, LineTo, MoveTo, PathEl

_FOUR_CURVE_LIMIT = 1.0 / 1.9608e-4
_FOUR_CURVE_ARM = 0.551915024494


def _point_on_circle(center: Point, radius: float, angle: float) -> Point:
    return center + Vec2(math.cos(angle) * radius, math.sin(angle) * radius)


@dataclass(frozen=True)
class Circle:
    """A circle given by its center and radius."""

    center: Point = Point()
    radius: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _as_point(self.center))

    def segment(
        self, inner_radius: float, start_angle: float, sweep_angle: float
    ) -> "CircleSegment":
        """A segment cut from this circle, hollow inside ``inner_radius``."""
        return CircleSegment(self.center, self.radius, inner_radius, start_angle, sweep_angle)

    def is_finite(self) -> bool:
        return self.center.is_finite() and math.isfinite(self.radius)

    def is_nan(self) -> bool:
        return self.center.is_nan() or math.isnan(self.radius)

    def __add__(self, v: Vec2) -> "Circle":
        if not isinstance(v, Vec2):
            return NotImplemented
        return replace(self, center=self.center + v)

    def __sub__(self, v: Vec2) -> "Circle":
        if not isinstance(v, Vec2):
            return NotImplemented
        return replace(self, center=self.center - v)

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        """A closed path of cubic Béziers approximating the circle."""
        scaled_err = abs(self.radius) / tolerance
        if scaled_err < _FOUR_CURVE_LIMIT:
            n, arm_len = 4, _FOUR_CURVE_ARM
        else:
            n = math.ceil((1.1163 * scaled_err) ** (1.0 / 6.0))
            arm_len = (4.0 / 3.0) * math.tan((math.pi / 2) / n)
        return self._elements(n, arm_len)

    def _elements(self, n: int, a: float) -> Iterator[PathEl]:
        r = self.radius
        x, y = self.center.x, self.center.y
        delta_th = 2.0 * math.pi / n
        yield MoveTo(Point(x + r, y))
        for ix in range(1, n + 1):
            th1 = delta_th * ix
            th0 = th1 - delta_th
            s0, c0 = math.sin(th0), math.cos(th0)
            s1, c1 = (0.0, 1.0) if ix == n else (math.sin(th1), math.cos(th1))
            yield CurveTo(
                Point(x + r * (c0 - a * s0), y + r * (s0 + a * c0)),
                Point(x + r * (c1 + a * s1), y + r * (s1 - a * c1)),
                Point(x + r * c1, y + r * s1),
            )
        yield ClosePath()

    def to_path(self, tolerance: float) -> BezPath:
        return BezPath(self.path_elements(tolerance))

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def perimeter(self, accuracy: float) -> float:
        return abs(2.0 * math.pi * self.radius)

    def winding(self, pt) -> int:
        pt = _as_point(pt)
        return 1 if (pt - self.center).hypot2() < self.radius ** 2 else 0

    def contains(self, pt) -> bool:
        return self.winding(pt) != 0

    def bounding_box(self) -> Rect:
        r = abs(self.radius)
        x, y = self.center.x, self.center.y
        return Rect(x - r, y - r, x + r, y + r)


@dataclass(frozen=True)
class CircleSegment:
    """A segment of a circle; a ring segment when ``inner_radius > 0``.

    Angles are in radians.
    """

    center: Point
    outer_radius: float
    inner_radius: float
    start_angle: float
    sweep_angle: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _as_point(self.center))

    def is_finite(self) -> bool:
        return self.center.is_finite() and all(
            math.isfinite(v)
            for v in (self.outer_radius, self.inner_radius, self.start_angle, self.sweep_angle)
        )

    def is_nan(self) -> bool:
        return self.center.is_nan() or any(
            math.isnan(v)
            for v in (self.outer_radius, self.inner_radius, self.start_angle, self.sweep_angle)
        )

    def __add__(self, v: Vec2) -> "CircleSegment":
        if not isinstance(v, Vec2):
            return NotImplemented
        return replace(self, center=self.center + v)

    def __sub__(self, v: Vec2) -> "CircleSegment":
        if not isinstance(v, Vec2):
            return NotImplemented
        return replace(self, center=self.center - v)

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        """Inner start, outer arc, inner arc back; the path is left open."""
        end_angle = self.start_angle + self.sweep_angle
        outer = Arc(
            self.center,
            Vec2(self.outer_radius, self.outer_radius),
            self.start_angle,
            self.sweep_angle,
            0.0,
        ).append_iter(tolerance)
        inner = Arc(
            self.center,
            Vec2(self.inner_radius, self.inner_radius),
            end_angle,
            -self.sweep_angle,
            0.0,
        ).append_iter(tolerance)
        yield MoveTo(_point_on_circle(self.center, self.inner_radius, self.start_angle))
        yield LineTo(_point_on_circle(self.center, self.outer_radius, self.start_angle))
        yield from outer
        yield LineTo(_point_on_circle(self.center, self.inner_radius, end_angle))
        yield from inner

    def to_path(self, tolerance: float) -> BezPath:
        return BezPath(self.path_elements(tolerance))

    def area(self) -> float:
        return 0.5 * abs(self.outer_radius ** 2 - self.inner_radius ** 2) * self.sweep_angle

    def perimeter(self, accuracy: float) -> float:
        return 2.0 * abs(self.outer_radius - self.inner_radius) + self.sweep_angle * (
            self.inner_radius + self.outer_radius
        )

    def winding(self, pt) -> int:
        pt = _as_point(pt)
        d = pt - self.center
        angle = d.atan2()
        if angle < self.start_angle or angle > self.start_angle + self.sweep_angle:
            return 0
        dist2 = d.hypot2()
        outer2 = self.outer_radius ** 2
        inner2 = self.inner_radius ** 2
        if inner2 < dist2 < outer2 or outer2 < dist2 < inner2:
            return 1
        return 0

    def contains(self, pt) -> bool:
        return self.winding(pt) != 0

    def bounding_box(self) -> Rect:
        """A box enclosing the whole circle; not tight around the segment."""
        r = max(self.inner_radius, self.outer_radius)
        x, y = self.center.x, self.center.y
        return Rect(x - r, y - r, x + r, y + r)