"""Bézier paths made of lines, quadratic and cubic curves."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from bezkit.affine import Affine, Point, PointLike, Rect
from bezkit.elements import ClosePath, CurveTo, LineTo, MoveTo, PathEl, QuadTo
from bezkit.reverse import reverse_subpaths as _reverse_subpaths
from bezkit.segments import CubicBez, Line, PathSeg, QuadBez, segments as _segments

_MISSING_MOVE = "uninitialized subpath (missing MoveTo)"
_MUST_BEGIN = "BezPath must begin with MoveTo"


class BezPath:
    """A sequence of path elements, possibly holding several subpaths.

    Each subpath begins with a ``MoveTo``, continues with line and curve
    elements and may end with a ``ClosePath``.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Optional[Iterable[PathEl]] = None) -> None:
        self._elements: List[PathEl] = list(elements) if elements is not None else []
        if self._elements and not isinstance(self._elements[0], MoveTo):
            raise ValueError(_MUST_BEGIN)

    def __repr__(self) -> str:
        return f"BezPath({self._elements!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BezPath):
            return NotImplemented
        return self._elements == other._elements

    def __iter__(self) -> Iterator[PathEl]:
        return iter(tuple(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def pop(self) -> Optional[PathEl]:
        """Remove and return the last element, or None if the path is empty."""
        return self._elements.pop() if self._elements else None

    def push(self, el: PathEl) -> None:
        """Append an element; the path must begin with a ``MoveTo``."""
        if not self._elements and not isinstance(el, MoveTo):
            raise ValueError(_MUST_BEGIN)
        self._elements.append(el)

    def _require_started(self) -> None:
        if not self._elements:
            raise ValueError(_MISSING_MOVE)

    def move_to(self, p: PointLike) -> None:
        self.push(MoveTo(p))

    def line_to(self, p: PointLike) -> None:
        self._require_started()
        self.push(LineTo(p))

    def quad_to(self, p1: PointLike, p2: PointLike) -> None:
        self._require_started()
        self.push(QuadTo(p1, p2))

    def curve_to(self, p1: PointLike, p2: PointLike, p3: PointLike) -> None:
        self._require_started()
        self.push(CurveTo(p1, p2, p3))

    def close_path(self) -> None:
        self._require_started()
        self.push(ClosePath())

    def elements(self) -> Tuple[PathEl, ...]:
        """The path elements."""
        return tuple(self._elements)

    def extend(self, elements: Iterable[PathEl]) -> None:
        """Append elements without further checks."""
        self._elements.extend(elements)

    def segments(self) -> Iterator[PathSeg]:
        """Iterate over the path's segments."""
        return _segments(tuple(self._elements))

    def truncate(self, length: int) -> None:
        """Keep only the first ``length`` elements."""
        del self._elements[length:]

    def get_seg(self, ix: int) -> Optional[PathSeg]:
        """The segment ending at element ``ix``, or None.

        Element 0 is presumed to be a ``MoveTo``, so ``get_seg(0)`` is None.
        """
        els = self._elements
        if ix <= 0 or ix >= len(els):
            return None
        last = els[ix - 1].end_point()
        if last is None:
            return None
        el = els[ix]
        if isinstance(el, LineTo):
            return Line(last, el.p)
        if isinstance(el, QuadTo):
            return QuadBez(last, el.p1, el.p2)
        if isinstance(el, CurveTo):
            return CubicBez(last, el.p1, el.p2, el.p3)
        if isinstance(el, ClosePath):
            for prev in reversed(els[:ix]):
                if isinstance(prev, MoveTo) and prev.p != last:
                    return Line(last, prev.p)
            return None
        return None

    def is_empty(self) -> bool:
        """True if the path holds no segments."""
        return all(isinstance(el, (MoveTo, ClosePath)) for el in self._elements)

    def apply_affine(self, affine: Affine) -> None:
        """Transform the path in place."""
        self._elements = [el.transformed(affine) for el in self._elements]

    def transformed(self, affine: Affine) -> "BezPath":
        """A transformed copy of the path."""
        path = BezPath()
        path._elements = [el.transformed(affine) for el in self._elements]
        return path

    def is_finite(self) -> bool:
        return all(el.is_finite() for el in self._elements)

    def is_nan(self) -> bool:
        return any(el.is_nan() for el in self._elements)

    def control_box(self) -> Rect:
        """A rectangle enclosing every point and control point of the path."""
        points: List[Point] = [p for el in self._elements for p in el._points()]
        if not points:
            return Rect()
        box = Rect.from_points(points[0], points[0])
        for p in points[1:]:
            box = box.union_pt(p)
        return box

    def reverse_subpaths(self) -> "BezPath":
        """A new path with the winding direction of every subpath reversed."""
        path = BezPath()
        path._elements = _reverse_subpaths(self._elements)
        return path