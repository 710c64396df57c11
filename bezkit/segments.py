"""Path segments: lines, quadratic and cubic Béziers as independent curves."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Iterable, Iterator, List, Optional, Tuple

from bezkit.affine import Affine, Point, Vec2, _as_point
from bezkit.elements import ClosePath, CurveTo, LineTo, MoveTo, PathEl, QuadTo

_INTERSECT_EPSILON = 1e-9
_TANGENT_EPSILON = 1e-12


def _recip(x: float) -> float:
    """1/x with IEEE semantics: a zero gives a signed infinity."""
    if x == 0.0:
        return math.copysign(math.inf, x)
    return 1.0 / x


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0.0 else math.nan


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _solve_quadratic(c0: float, c1: float, c2: float) -> List[float]:
    """Real roots of c0 + c1*x + c2*x^2, in ascending order."""
    inv = _recip(c2)
    sc0 = c0 * inv
    sc1 = c1 * inv
    if not math.isfinite(sc0) or not math.isfinite(sc1):
        root = -c0 * _recip(c1)
        if math.isfinite(root):
            return [root]
        if c0 == 0.0 and c1 == 0.0:
            return [0.0]
        return []
    arg = sc1 * sc1 - 4.0 * sc0
    if not math.isfinite(arg):
        root1 = -sc1
    elif arg < 0.0:
        return []
    elif arg == 0.0:
        return [-0.5 * sc1]
    else:
        root1 = -0.5 * (sc1 + math.copysign(math.sqrt(arg), sc1))
    root2 = sc0 * _recip(root1) if root1 == 0.0 else sc0 / root1
    if math.isfinite(root2):
        return [root1, root2] if root2 > root1 else [root2, root1]
    return [root1]


def _solve_cubic(c0: float, c1: float, c2: float, c3: float) -> List[float]:
    """Real roots of c0 + c1*x + c2*x^2 + c3*x^3."""
    c3_recip = _recip(c3)
    one_third = 1.0 / 3.0
    s2 = c2 * (one_third * c3_recip)
    s1 = c1 * (one_third * c3_recip)
    s0 = c0 * c3_recip
    if not (math.isfinite(s0) and math.isfinite(s1) and math.isfinite(s2)):
        return _solve_quadratic(c0, c1, c2)
    d0 = -s2 * s2 + s1
    d1 = -s1 * s2 + s0
    d2 = s2 * s0 - s1 * s1
    d = 4.0 * d0 * d2 - d1 * d1
    de = -2.0 * s2 * d0 + d1
    if d < 0.0:
        sq = math.sqrt(-0.25 * d)
        r = -0.5 * de
        t1 = _cbrt(r + sq) + _cbrt(r - sq)
        return [t1 - s2]
    if d == 0.0:
        t1 = math.copysign(_sqrt(-d0), de)
        return [t1 - s2, -2.0 * t1 - s2]
    th = math.atan2(math.sqrt(d), -de) * one_third
    th_sin, th_cos = math.sin(th), math.cos(th)
    ss3 = th_sin * math.sqrt(3.0)
    r0 = th_cos
    r1 = 0.5 * (-th_cos + ss3)
    r2 = 0.5 * (-th_cos - ss3)
    t = 2.0 * _sqrt(-d0)
    return [t * r0 - s2, t * r1 - s2, t * r2 - s2]


@dataclass(frozen=True)
class LineIntersection:
    """An intersection of a probe line with a path segment.

    ``line_t`` lies in 0..1; ``segment_t`` may slightly exceed that range
    at the segment's ends.
    """

    line_t: float
    segment_t: float

    def is_finite(self) -> bool:
        return math.isfinite(self.line_t) and math.isfinite(self.segment_t)

    def is_nan(self) -> bool:
        return math.isnan(self.line_t) or math.isnan(self.segment_t)


class PathSeg(ABC):
    """Base class of a single segment of a Bézier path."""

    __slots__ = ()

    def _coerce_points(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _as_point(getattr(self, f.name)))

    def _points(self) -> Tuple[Point, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    @abstractmethod
    def eval(self, t: float) -> Point:
        """The point at parameter ``t`` in 0..1."""

    @abstractmethod
    def as_path_el(self) -> PathEl:
        """The path element equivalent to this segment without its start point."""

    @abstractmethod
    def to_cubic(self) -> "CubicBez":
        """This segment as a cubic Bézier."""

    @abstractmethod
    def tangents(self) -> Tuple[Vec2, Vec2]:
        """Start and end tangent vectors, robust to degenerate control points."""

    @staticmethod
    @abstractmethod
    def _poly_coeffs(xs: Tuple[float, ...]) -> Tuple[float, ...]:
        """Power-basis polynomial coefficients for one coordinate."""

    def start(self) -> Point:
        return self._points()[0]

    def end(self) -> Point:
        return self._points()[-1]

    def reverse(self) -> "PathSeg":
        """The same curve traversed in the opposite direction."""
        return type(self)(*reversed(self._points()))

    def is_finite(self) -> bool:
        return all(p.is_finite() for p in self._points())

    def is_nan(self) -> bool:
        return any(p.is_nan() for p in self._points())

    def transformed(self, affine: Affine) -> "PathSeg":
        """The segment with every control point mapped through ``affine``."""
        return type(self)(*(affine * p for p in self._points()))

    def path_elements(self) -> Iterator[PathEl]:
        """The segment as a ``MoveTo`` followed by one drawing element."""
        yield MoveTo(self.start())
        yield self.as_path_el()

    def intersect_line(self, line: "Line") -> List[LineIntersection]:
        """Intersections with ``line``, inclusive of points near the segment ends."""
        p0 = line.p0
        dx = line.p1.x - p0.x
        dy = line.p1.y - p0.y
        points = self._points()
        px = self._poly_coeffs(tuple(p.x for p in points))
        py = self._poly_coeffs(tuple(p.y for p in points))
        coeffs = [dy * a - dx * b for a, b in zip(px, py)]
        coeffs[0] = dy * (px[0] - p0.x) - dx * (py[0] - p0.y)
        if len(coeffs) == 3:
            roots = _solve_quadratic(*coeffs)
        else:
            roots = _solve_cubic(*coeffs)
        invlen2 = _recip(dx * dx + dy * dy)
        result = []
        for t in roots:
            if not -_INTERSECT_EPSILON <= t <= 1.0 + _INTERSECT_EPSILON:
                continue
            x = _eval_poly(px, t)
            y = _eval_poly(py, t)
            u = ((x - p0.x) * dx + (y - p0.y) * dy) * invlen2
            if 0.0 <= u <= 1.0:
                result.append(LineIntersection(u, t))
        return result


def _eval_poly(coeffs: Tuple[float, ...], t: float) -> float:
    total = 0.0
    power = 1.0
    for c in coeffs:
        total += c * power
        power *= t
    return total


@dataclass(frozen=True)
class Line(PathSeg):
    """A straight line segment."""

    p0: Point
    p1: Point

    def __post_init__(self) -> None:
        self._coerce_points()

    def eval(self, t: float) -> Point:
        return self.p0 + (self.p1 - self.p0) * t

    def as_path_el(self) -> PathEl:
        return LineTo(self.p1)

    def to_cubic(self) -> "CubicBez":
        return CubicBez(self.p0, self.p0, self.p1, self.p1)

    def tangents(self) -> Tuple[Vec2, Vec2]:
        d = self.p1 - self.p0
        return d, d

    @staticmethod
    def _poly_coeffs(xs: Tuple[float, ...]) -> Tuple[float, ...]:
        x0, x1 = xs
        return x0, x1 - x0

    def intersect_line(self, line: "Line") -> List[LineIntersection]:
        p0 = line.p0
        dx = line.p1.x - p0.x
        dy = line.p1.y - p0.y
        sx = self.p1.x - self.p0.x
        sy = self.p1.y - self.p0.y
        det = dx * sy - dy * sx
        if abs(det) < _INTERSECT_EPSILON:
            return []
        t = (dx * (p0.y - self.p0.y) - dy * (p0.x - self.p0.x)) / det
        if not -_INTERSECT_EPSILON <= t <= 1.0 + _INTERSECT_EPSILON:
            return []
        u = ((self.p0.x - p0.x) * sy - (self.p0.y - p0.y) * sx) / det
        if 0.0 <= u <= 1.0:
            return [LineIntersection(u, t)]
        return []


@dataclass(frozen=True)
class QuadBez(PathSeg):
    """A quadratic Bézier segment."""

    p0: Point
    p1: Point
    p2: Point

    def __post_init__(self) -> None:
        self._coerce_points()

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        v = self.p0.to_vec2() * (mt * mt) + (
            self.p1.to_vec2() * (mt * 2.0) + self.p2.to_vec2() * t
        ) * t
        return v.to_point()

    def as_path_el(self) -> PathEl:
        return QuadTo(self.p1, self.p2)

    def raise_degree(self) -> "CubicBez":
        """The exactly equivalent cubic Bézier."""
        return CubicBez(
            self.p0,
            self.p0 + (self.p1 - self.p0) * (2.0 / 3.0),
            self.p2 + (self.p1 - self.p2) * (2.0 / 3.0),
            self.p2,
        )

    def to_cubic(self) -> "CubicBez":
        return self.raise_degree()

    def tangents(self) -> Tuple[Vec2, Vec2]:
        d01 = self.p1 - self.p0
        d0 = d01 if d01.hypot2() > _TANGENT_EPSILON else self.p2 - self.p0
        d12 = self.p2 - self.p1
        d1 = d12 if d12.hypot2() > _TANGENT_EPSILON else self.p2 - self.p0
        return d0, d1

    @staticmethod
    def _poly_coeffs(xs: Tuple[float, ...]) -> Tuple[float, ...]:
        x0, x1, x2 = xs
        return x0, 2.0 * x1 - 2.0 * x0, x2 - 2.0 * x1 + x0


@dataclass(frozen=True)
class CubicBez(PathSeg):
    """A cubic Bézier segment."""

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def __post_init__(self) -> None:
        self._coerce_points()

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        v = self.p0.to_vec2() * (mt * mt * mt) + (
            self.p1.to_vec2() * (mt * mt * 3.0)
            + (self.p2.to_vec2() * (mt * 3.0) + self.p3.to_vec2() * t) * t
        ) * t
        return v.to_point()

    def as_path_el(self) -> PathEl:
        return CurveTo(self.p1, self.p2, self.p3)

    def to_cubic(self) -> "CubicBez":
        return self

    def tangents(self) -> Tuple[Vec2, Vec2]:
        d01 = self.p1 - self.p0
        if d01.hypot2() > _TANGENT_EPSILON:
            d0 = d01
        else:
            d02 = self.p2 - self.p0
            d0 = d02 if d02.hypot2() > _TANGENT_EPSILON else self.p3 - self.p0
        d23 = self.p3 - self.p2
        if d23.hypot2() > _TANGENT_EPSILON:
            d1 = d23
        else:
            d13 = self.p3 - self.p1
            d1 = d13 if d13.hypot2() > _TANGENT_EPSILON else self.p3 - self.p0
        return d0, d1

    @staticmethod
    def _poly_coeffs(xs: Tuple[float, ...]) -> Tuple[float, ...]:
        x0, x1, x2, x3 = xs
        return (
            x0,
            3.0 * x1 - 3.0 * x0,
            3.0 * x2 - 6.0 * x1 + 3.0 * x0,
            x3 - 3.0 * x2 + 3.0 * x1 - x0,
        )


def segments(elements: Iterable[PathEl]) -> Iterator[PathSeg]:
    """Turn path elements into path segments.

    A ``ClosePath`` yields a closing line only when the current point differs
    from the subpath start. Raises ValueError if the first element is a
    ``ClosePath``.
    """
    start: Optional[Point] = None
    last: Optional[Point] = None
    for el in elements:
        if last is None:
            if isinstance(el, ClosePath):
                raise ValueError("cannot start a segment on a ClosePath")
            start = last = el.end_point()
        if isinstance(el, MoveTo):
            start = last = el.p
        elif isinstance(el, LineTo):
            yield Line(last, el.p)
            last = el.p
        elif isinstance(el, QuadTo):
            yield QuadBez(last, el.p1, el.p2)
            last = el.p2
        elif isinstance(el, CurveTo):
            yield CubicBez(last, el.p1, el.p2, el.p3)
            last = el.p3
        elif isinstance(el, ClosePath):
            if last != start:
                yield Line(last, start)
                last = start
        else:
            raise TypeError(f"not a path element: {el!r}")