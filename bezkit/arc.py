"""Elliptical arcs and their approximation by cubic Béziers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from bezkit.affine import Affine, Point, Vec2, _as_point, _as_vec2
from bezkit.elements import CurveTo, MoveTo, PathEl

_MIN_SUBDIVISIONS_PER_TURN = 3.999_999


def _sample_ellipse(radii: Vec2, x_rotation: float, angle: float) -> Vec2:
    """A point on the origin-centred ellipse at ``angle``, rotated by ``x_rotation``."""
    u = radii.x * math.cos(angle)
    v = radii.y * math.sin(angle)
    return _rotate_vec(Vec2(u, v), x_rotation)


def _rotate_vec(v: Vec2, angle: float) -> Vec2:
    s, c = math.sin(angle), math.cos(angle)
    return Vec2(v.x * c - v.y * s, v.x * s + v.y * c)


def _signum(x: float) -> float:
    if math.isnan(x):
        return math.nan
    return math.copysign(1.0, x)


@dataclass(frozen=True)
class Arc:
    """A single arc of an ellipse.

    ``radii.x`` is the radius along the positive x direction after the
    ellipse has been rotated by ``x_rotation``. Angles are in radians.
    """

    center: Point
    radii: Vec2
    start_angle: float
    sweep_angle: float
    x_rotation: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _as_point(self.center))
        object.__setattr__(self, "radii", _as_vec2(self.radii))

    def append_iter(self, tolerance: float) -> Iterator[PathEl]:
        """``CurveTo`` elements approximating the arc, to append to a path."""
        sign = _signum(self.sweep_angle)
        scaled_err = max(self.radii.x, self.radii.y) / tolerance
        base = 1.1163 * scaled_err
        n_err = base ** (1.0 / 6.0) if base >= 0.0 else math.nan
        if math.isnan(n_err) or n_err < _MIN_SUBDIVISIONS_PER_TURN:
            n_err = _MIN_SUBDIVISIONS_PER_TURN
        n_float = math.ceil(n_err * abs(self.sweep_angle) * (1.0 / (2.0 * math.pi))) \
            if math.isfinite(self.sweep_angle) else math.nan
        n = 0 if math.isnan(n_float) else int(n_float)
        if n == 0:
            return iter(())
        angle_step = self.sweep_angle / n
        arm_len = (4.0 / 3.0) * math.tan(abs(0.25 * angle_step)) * sign
        return self._curves(n, angle_step, arm_len)

    def _curves(self, n: int, angle_step: float, arm_len: float) -> Iterator[PathEl]:
        radii, rot, center = self.radii, self.x_rotation, self.center
        angle0 = self.start_angle
        p0 = _sample_ellipse(radii, rot, angle0)
        for _ in range(n):
            angle1 = angle0 + angle_step
            p1 = p0 + arm_len * _sample_ellipse(radii, rot, angle0 + math.pi / 2)
            p3 = _sample_ellipse(radii, rot, angle1)
            p2 = p3 - arm_len * _sample_ellipse(radii, rot, angle1 + math.pi / 2)
            yield CurveTo(center + p1, center + p2, center + p3)
            angle0 = angle1
            p0 = p3

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        """A ``MoveTo`` to the arc's start followed by its cubic approximation."""
        p0 = _sample_ellipse(self.radii, self.x_rotation, self.start_angle)
        curves = self.append_iter(tolerance)
        yield MoveTo(self.center + p0)
        yield from curves

    def to_cubic_beziers(self, tolerance: float) -> Iterator[Tuple[Point, Point, Point]]:
        """The control and end points ``(p1, p2, p3)`` of each cubic segment."""
        for el in self.append_iter(tolerance):
            yield el.p1, el.p2, el.p3

    def area(self) -> float:
        """Area of the full ellipse; the arc itself is not closed."""
        return math.pi * self.radii.x * self.radii.y

    def transformed(self, affine: Affine) -> "Arc":
        """The arc mapped through ``affine``, keeping its angles."""
        ellipse = (
            affine
            * Affine.translate(self.center.to_vec2())
            * Affine.rotate(self.x_rotation)
            * Affine.scale_non_uniform(self.radii.x, self.radii.y)
        )
        radii, rotation = ellipse.svd()
        return Arc(
            ellipse.translation().to_point(),
            radii,
            self.start_angle,
            self.sweep_angle,
            rotation,
        )