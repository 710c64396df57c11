"""Path elements: the drawing instructions that make up a Bézier path."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

from bezkit.affine import Affine, Point, _as_point


class PathEl:
    """Base class of the elements of a Bézier path.

    A valid path begins each subpath with a ``MoveTo``.
    """

    __slots__ = ()

    def _coerce_points(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _as_point(getattr(self, f.name)))

    def _points(self) -> tuple:
        return tuple(getattr(self, f.name) for f in fields(self))

    def end_point(self) -> Optional[Point]:
        """The point the element ends at, or None for ``ClosePath``."""
        points = self._points()
        return points[-1] if points else None

    def is_finite(self) -> bool:
        return all(p.is_finite() for p in self._points())

    def is_nan(self) -> bool:
        return any(p.is_nan() for p in self._points())

    def transformed(self, affine: Affine) -> "PathEl":
        """The element with every point mapped through ``affine``."""
        return type(self)(*(affine * p for p in self._points()))


@dataclass(frozen=True)
class MoveTo(PathEl):
    """Move to a point without drawing, starting a new subpath."""

    p: Point

    def __post_init__(self) -> None:
        self._coerce_points()


@dataclass(frozen=True)
class LineTo(PathEl):
    """Draw a line from the current location to a point."""

    p: Point

    def __post_init__(self) -> None:
        self._coerce_points()


@dataclass(frozen=True)
class QuadTo(PathEl):
    """Draw a quadratic Bézier through a control point to an end point."""

    p1: Point
    p2: Point

    def __post_init__(self) -> None:
        self._coerce_points()


@dataclass(frozen=True)
class CurveTo(PathEl):
    """Draw a cubic Bézier through two control points to an end point."""

    p1: Point
    p2: Point
    p3: Point

    def __post_init__(self) -> None:
        self._coerce_points()


@dataclass(frozen=True)
class ClosePath(PathEl):
    """Close off the current subpath."""