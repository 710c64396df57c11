"""2D vectors, points, rectangles and affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Union

VecLike = Union["Vec2", tuple]
PointLike = Union["Point", tuple]


def _as_vec2(v: VecLike) -> "Vec2":
    if isinstance(v, Vec2):
        return v
    x, y = v
    return Vec2(float(x), float(y))


def _as_point(p: PointLike) -> "Point":
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


@dataclass(frozen=True)
class Vec2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def hypot(self) -> float:
        """Magnitude of the vector."""
        return math.hypot(self.x, self.y)

    def hypot2(self) -> float:
        """Squared magnitude of the vector."""
        return self.x * self.x + self.y * self.y

    def dot(self, other: VecLike) -> float:
        other = _as_vec2(other)
        return self.x * other.x + self.y * other.y

    def cross(self, other: VecLike) -> float:
        other = _as_vec2(other)
        return self.x * other.y - self.y * other.x

    def normalize(self) -> "Vec2":
        """Unit vector in the same direction; NaN components for a zero vector."""
        h = self.hypot()
        if h == 0.0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / h, self.y / h)

    def atan2(self) -> float:
        """Angle of the vector, in radians."""
        return math.atan2(self.y, self.x)

    def to_point(self) -> "Point":
        return Point(self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: float) -> "Vec2":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other: float) -> "Vec2":
        return self.__mul__(other)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Point:
    """A 2D point."""

    x: float = 0.0
    y: float = 0.0

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def midpoint(self, other: PointLike) -> "Point":
        other = _as_point(other)
        return Point(0.5 * (self.x + other.x), 0.5 * (self.y + other.y))

    def distance(self, other: PointLike) -> float:
        other = _as_point(other)
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def __add__(self, other: Vec2) -> "Point":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        """Point minus point gives a vector; point minus vector gives a point."""
        if isinstance(other, Point):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec2):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented


Point.ZERO = Point(0.0, 0.0)
Vec2.ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by two corners."""

    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0

    @classmethod
    def from_points(cls, p0: PointLike, p1: PointLike) -> "Rect":
        """The rectangle spanned by two points, with non-negative size."""
        p0 = _as_point(p0)
        p1 = _as_point(p1)
        return cls(min(p0.x, p1.x), min(p0.y, p1.y), max(p0.x, p1.x), max(p0.y, p1.y))

    def width(self) -> float:
        return self.x1 - self.x0

    def height(self) -> float:
        return self.y1 - self.y0

    def area(self) -> float:
        return self.width() * self.height()

    def union(self, other: "Rect") -> "Rect":
        """The smallest rectangle enclosing both rectangles."""
        return Rect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def union_pt(self, pt: PointLike) -> "Rect":
        """The smallest rectangle enclosing this one and a point."""
        pt = _as_point(pt)
        return Rect(
            min(self.x0, pt.x),
            min(self.y0, pt.y),
            max(self.x1, pt.x),
            max(self.y1, pt.y),
        )


@dataclass(frozen=True)
class Affine:
    """A 2D affine transform with coefficients (a, b, c, d, e, f).

    The transform maps (x, y) to (a*x + c*y + e, b*x + d*y + f), so that
    ``(A * B) * p == A * (B * p)``.
    """

    coeffs: tuple = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        values = tuple(float(c) for c in self.coeffs)
        if len(values) != 6:
            raise ValueError(f"an affine transform needs 6 coefficients, got {len(values)}")
        object.__setattr__(self, "coeffs", values)

    @classmethod
    def scale(cls, s: float) -> "Affine":
        return cls((s, 0.0, 0.0, s, 0.0, 0.0))

    @classmethod
    def scale_non_uniform(cls, s_x: float, s_y: float) -> "Affine":
        return cls((s_x, 0.0, 0.0, s_y, 0.0, 0.0))

    @classmethod
    def rotate(cls, th: float) -> "Affine":
        """Rotation by ``th`` radians, taking positive X towards positive Y."""
        s, c = math.sin(th), math.cos(th)
        return cls((c, s, -s, c, 0.0, 0.0))

    @classmethod
    def rotate_about(cls, th: float, center: PointLike) -> "Affine":
        center_v = _as_point(center).to_vec2()
        return cls.translate(-center_v).then_rotate(th).then_translate(center_v)

    @classmethod
    def translate(cls, v: VecLike) -> "Affine":
        v = _as_vec2(v)
        return cls((1.0, 0.0, 0.0, 1.0, v.x, v.y))

    @classmethod
    def skew(cls, skew_x: float, skew_y: float) -> "Affine":
        return cls((1.0, skew_y, skew_x, 1.0, 0.0, 0.0))

    @classmethod
    def reflect(cls, point: PointLike, direction: VecLike) -> "Affine":
        """Reflection about the line through ``point`` along ``direction``."""
        point = _as_point(point)
        direction = _as_vec2(direction)
        n = Vec2(direction.y, -direction.x).normalize()
        x2 = n.x * n.x
        xy = n.x * n.y
        y2 = n.y * n.y
        aff = cls((1.0 - 2.0 * x2, -2.0 * xy, -2.0 * xy, 1.0 - 2.0 * y2, point.x, point.y))
        return aff.pre_translate(-point.to_vec2())

    @classmethod
    def map_unit_square(cls, rect: Rect) -> "Affine":
        """The transform taking the unit square to ``rect``."""
        return cls((rect.width(), 0.0, 0.0, rect.height(), rect.x0, rect.y0))

    def pre_rotate(self, th: float) -> "Affine":
        return self * Affine.rotate(th)

    def pre_rotate_about(self, th: float, center: PointLike) -> "Affine":
        return Affine.rotate_about(th, center) * self

    def pre_scale(self, scale: float) -> "Affine":
        return self * Affine.scale(scale)

    def pre_scale_non_uniform(self, scale_x: float, scale_y: float) -> "Affine":
        return self * Affine.scale_non_uniform(scale_x, scale_y)

    def pre_translate(self, trans: VecLike) -> "Affine":
        return self * Affine.translate(trans)

    def then_rotate(self, th: float) -> "Affine":
        return Affine.rotate(th) * self

    def then_rotate_about(self, th: float, center: PointLike) -> "Affine":
        return Affine.rotate_about(th, center) * self

    def then_scale(self, scale: float) -> "Affine":
        return Affine.scale(scale) * self

    def then_scale_non_uniform(self, scale_x: float, scale_y: float) -> "Affine":
        return Affine.scale_non_uniform(scale_x, scale_y) * self

    def then_translate(self, trans: VecLike) -> "Affine":
        trans = _as_vec2(trans)
        a, b, c, d, e, f = self.coeffs
        return Affine((a, b, c, d, e + trans.x, f + trans.y))

    def as_coeffs(self) -> tuple:
        return self.coeffs

    def determinant(self) -> float:
        a, b, c, d, _, _ = self.coeffs
        return a * d - b * c

    def inverse(self) -> "Affine":
        """The inverse transform; NaN coefficients when the determinant is zero."""
        a, b, c, d, e, f = self.coeffs
        det = self.determinant()
        inv_det = 1.0 / det if det != 0.0 else math.copysign(math.inf, det)
        return Affine(
            (
                inv_det * d,
                -inv_det * b,
                -inv_det * c,
                inv_det * a,
                inv_det * (c * f - d * e),
                inv_det * (b * e - a * f),
            )
        )

    def transform_rect_bbox(self, rect: Rect) -> Rect:
        """Bounding box of a rectangle after transformation."""
        p00 = self * Point(rect.x0, rect.y0)
        p01 = self * Point(rect.x0, rect.y1)
        p10 = self * Point(rect.x1, rect.y0)
        p11 = self * Point(rect.x1, rect.y1)
        return Rect.from_points(p00, p01).union(Rect.from_points(p10, p11))

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self.coeffs)

    def is_nan(self) -> bool:
        return any(math.isnan(c) for c in self.coeffs)

    def svd(self) -> tuple:
        """Singular values (as a Vec2) and rotation angle of the linear part."""
        a, b, c, d, _, _ = self.coeffs
        a2, b2, c2, d2 = a * a, b * b, c * c, d * d
        ab = a * b
        cd = c * d
        angle = 0.5 * math.atan2(2.0 * (ab + cd), a2 - b2 + c2 - d2)
        s1 = a2 + b2 + c2 + d2
        s2 = math.sqrt((a2 - b2 + c2 - d2) ** 2 + 4.0 * (ab + cd) ** 2)
        return Vec2(_sqrt_or_nan(0.5 * (s1 + s2)), _sqrt_or_nan(0.5 * (s1 - s2))), angle

    def translation(self) -> Vec2:
        return Vec2(self.coeffs[4], self.coeffs[5])

    def with_translation(self, trans: VecLike) -> "Affine":
        trans = _as_vec2(trans)
        a, b, c, d, _, _ = self.coeffs
        return Affine((a, b, c, d, trans.x, trans.y))

    def __mul__(self, other):
        """Compose with another transform, or apply to a point or shape."""
        a, b, c, d, e, f = self.coeffs
        if isinstance(other, Point):
            return Point(a * other.x + c * other.y + e, b * other.x + d * other.y + f)
        if isinstance(other, Affine):
            oa, ob, oc, od, oe, of = other.coeffs
            return Affine(
                (
                    a * oa + c * ob,
                    b * oa + d * ob,
                    a * oc + c * od,
                    b * oc + d * od,
                    a * oe + c * of + e,
                    b * oe + d * of + f,
                )
            )
        transformed = getattr(other, "transformed", None)
        if callable(transformed):
            return transformed(self)
        return NotImplemented

    def __rmul__(self, other: float) -> "Affine":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Affine(tuple(other * c for c in self.coeffs))


def _sqrt_or_nan(x: float) -> float:
    return math.sqrt(x) if x >= 0.0 else math.nan


Affine.IDENTITY = Affine.scale(1.0)
Affine.FLIP_Y = Affine((1.0, 0.0, 0.0, -1.0, 0.0, 0.0))
Affine.FLIP_X = Affine((-1.0, 0.0, 0.0, 1.0, 0.0, 0.0))


def _coeffs(values: Iterable[float]) -> tuple:
    return tuple(float(v) for v in values)