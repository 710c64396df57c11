import math

import pytest

from bezkit.affine import Affine, Point, Rect
from bezkit.bezpath import BezPath
from bezkit.elements import ClosePath, CurveTo, LineTo, MoveTo, QuadTo
from bezkit.segments import CubicBez, Line, QuadBez


def _mixed_path():
    path = BezPath()
    path.move_to((0.0, 0.0))
    path.line_to((10.0, 0.0))
    path.quad_to((15.0, 5.0), (10.0, 10.0))
    path.curve_to((8.0, 12.0), (2.0, 12.0), (0.0, 10.0))
    path.close_path()
    return path


def test_close_path_on_empty_raises():
    path = BezPath()
    with pytest.raises(ValueError, match="uninitialized subpath"):
        path.close_path()


def test_must_not_start_on_quad():
    path = BezPath()
    with pytest.raises(ValueError, match="uninitialized subpath"):
        path.quad_to((5.0, 5.0), (10.0, 10.0))


def test_push_must_begin_with_move():
    path = BezPath()
    with pytest.raises(ValueError, match="MoveTo"):
        path.push(LineTo((1.0, 1.0)))


def test_init_must_begin_with_move():
    with pytest.raises(ValueError):
        BezPath([LineTo((1.0, 1.0))])


def test_closepath_refers_to_last_moveto():
    path = BezPath()
    path.move_to((5.0, 5.0))
    path.line_to((15.0, 15.0))
    path.move_to((10.0, 10.0))
    path.line_to((15.0, 15.0))
    path.close_path()
    segs = list(path.segments())
    assert segs[-1] == Line((15.0, 15.0), (10.0, 10.0))


def test_get_seg_matches_segments():
    path = _mixed_path()
    segs = list(path.segments())
    get_segs = []
    ix = 1
    while (seg := path.get_seg(ix)) is not None:
        get_segs.append(seg)
        ix += 1
    assert get_segs == segs
    assert path.get_seg(0) is None
    assert isinstance(path.get_seg(2), QuadBez)
    assert isinstance(path.get_seg(3), CubicBez)


def test_control_box():
    path = BezPath()
    path.move_to((200.0, 300.0))
    path.curve_to((50.0, 50.0), (350.0, 50.0), (200.0, 300.0))
    assert path.control_box() == Rect(50.0, 50.0, 350.0, 300.0)


def test_control_box_empty():
    assert BezPath().control_box() == Rect(0.0, 0.0, 0.0, 0.0)


def test_reverse_closed_triangle():
    path = BezPath()
    path.move_to((100.0, 100.0))
    path.line_to((150.0, 200.0))
    path.line_to((50.0, 200.0))
    path.close_path()
    assert path.reverse_subpaths().elements() == (
        MoveTo((50.0, 200.0)),
        LineTo((150.0, 200.0)),
        LineTo((100.0, 100.0)),
        ClosePath(),
    )


def test_reverse_unclosed():
    path = BezPath()
    path.move_to((10.0, 10.0))
    path.quad_to((40.0, 40.0), (60.0, 10.0))
    path.line_to((100.0, 10.0))
    path.curve_to((125.0, 10.0), (150.0, 50.0), (125.0, 60.0))
    assert path.reverse_subpaths().elements() == (
        MoveTo((125.0, 60.0)),
        CurveTo((150.0, 50.0), (125.0, 10.0), (100.0, 10.0)),
        LineTo((60.0, 10.0)),
        QuadTo((40.0, 40.0), (10.0, 10.0)),
    )


def test_reverse_multiple_moves():
    els = [MoveTo((2.0, 2.0)), MoveTo((3.0, 3.0)), ClosePath(), MoveTo((4.0, 4.0))]
    assert BezPath(els).reverse_subpaths() == BezPath(els)


def test_reverse_empty():
    assert len(BezPath().reverse_subpaths()) == 0


def test_is_empty():
    path = BezPath()
    assert path.is_empty()
    path.move_to((1.0, 1.0))
    path.close_path()
    assert path.is_empty()
    path.move_to((2.0, 2.0))
    path.line_to((3.0, 3.0))
    assert not path.is_empty()


def test_pop_and_truncate():
    path = _mixed_path()
    assert len(path) == 5
    assert path.pop() == ClosePath()
    assert len(path) == 4
    path.truncate(2)
    assert path.elements() == (MoveTo((0.0, 0.0)), LineTo((10.0, 0.0)))
    assert BezPath().pop() is None


def test_extend_and_iter():
    path = BezPath()
    path.move_to((0.0, 0.0))
    path.extend([LineTo((1.0, 0.0)), LineTo((1.0, 1.0))])
    assert list(path) == [MoveTo((0.0, 0.0)), LineTo((1.0, 0.0)), LineTo((1.0, 1.0))]


def test_apply_affine_in_place():
    path = BezPath()
    path.move_to((1.0, 2.0))
    path.line_to((3.0, 4.0))
    path.apply_affine(Affine.translate((10.0, 20.0)))
    assert path.elements() == (MoveTo((11.0, 22.0)), LineTo((13.0, 24.0)))


def test_transformed_leaves_original():
    path = BezPath()
    path.move_to((1.0, 2.0))
    path.quad_to((3.0, 4.0), (5.0, 6.0))
    scaled = Affine.scale(2.0) * path
    assert scaled.elements() == (MoveTo((2.0, 4.0)), QuadTo((6.0, 8.0), (10.0, 12.0)))
    assert path.elements() == (MoveTo((1.0, 2.0)), QuadTo((3.0, 4.0), (5.0, 6.0)))


def test_finite_and_nan():
    path = _mixed_path()
    assert path.is_finite()
    assert not path.is_nan()
    path.line_to((math.nan, 0.0))
    assert path.is_nan()
    assert not path.is_finite()
    inf_path = BezPath([MoveTo((math.inf, 0.0))])
    assert not inf_path.is_finite()
    assert not inf_path.is_nan()


def test_segments_of_closed_path():
    path = _mixed_path()
    segs = list(path.segments())
    assert segs[0] == Line((0.0, 0.0), (10.0, 0.0))
    assert segs[-1] == Line(Point(0.0, 10.0), Point(0.0, 0.0))
    assert len(segs) == 4