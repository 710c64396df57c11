"""Reversal of the winding direction of Bézier path subpaths."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from bezkit.affine import Point
from bezkit.elements import ClosePath, CurveTo, LineTo, MoveTo, PathEl, QuadTo


def _reverse_subpath(start_pt: Point, els: Sequence[PathEl]) -> List[PathEl]:
    """Reverse the drawing elements of one subpath that begins at ``start_pt``.

    ``els`` must hold no ``MoveTo`` or ``ClosePath`` elements.
    """
    end_pt = els[-1].end_point() if els else start_pt
    out: List[PathEl] = [MoveTo(end_pt)]
    starts = [start_pt, *(el.end_point() for el in els[:-1])]
    for el, seg_start in zip(reversed(els), reversed(starts)):
        if isinstance(el, LineTo):
            out.append(LineTo(seg_start))
        elif isinstance(el, QuadTo):
            out.append(QuadTo(el.p1, seg_start))
        elif isinstance(el, CurveTo):
            out.append(CurveTo(el.p2, el.p1, seg_start))
        else:
            raise ValueError(f"a subpath to reverse may not contain {el!r}")
    return out


def reverse_subpaths(elements: Iterable[PathEl]) -> List[PathEl]:
    """Return the elements with the winding direction of every subpath reversed.

    Degenerate subpaths made of a lone ``MoveTo`` are kept in the output, and
    closing lines are never made implicit.
    """
    out: List[PathEl] = []
    current: List[PathEl] = []
    start_pt = Point()
    pending_move = False
    for ix, el in enumerate(elements):
        if isinstance(el, MoveTo):
            if pending_move:
                out.append(MoveTo(start_pt))
            if current:
                out.extend(_reverse_subpath(start_pt, current))
            pending_move = True
            start_pt = el.p
            current = []
        elif isinstance(el, ClosePath):
            if ix > 0:
                out.extend(_reverse_subpath(start_pt, current))
            out.append(ClosePath())
            current = []
            pending_move = False
        else:
            # A drawing element before any MoveTo has no start and is dropped.
            if ix > 0:
                current.append(el)
            pending_move = False
    if current:
        out.extend(_reverse_subpath(start_pt, current))
    elif pending_move:
        out.append(MoveTo(start_pt))
    return out