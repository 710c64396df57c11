import pytest

from bezkit.affine import Point
from bezkit.elements import ClosePath, CurveTo, LineTo, MoveTo, QuadTo
from bezkit.reverse import reverse_subpaths

M, L, Q, C, Z = MoveTo, LineTo, QuadTo, CurveTo, ClosePath


def _unclosed():
    return [M((10, 10)), Q((40, 40), (60, 10)), L((100, 10)), C((125, 10), (150, 50), (125, 60))]


def _unclosed_reversed():
    return [M((125, 60)), C((150, 50), (125, 10), (100, 10)), L((60, 10)), Q((40, 40), (10, 10))]


def _triangle():
    return [M((100, 100)), L((150, 200)), L((50, 200)), Z()]


def _triangle_reversed():
    return [M((50, 200)), L((150, 200)), L((100, 100)), Z()]


def _shape():
    return [
        M((125, 100)),
        Q((200, 150), (175, 300)),
        C((150, 150), (50, 150), (25, 300)),
        Q((0, 150), (75, 100)),
        L((100, 50)),
        Z(),
    ]


def _shape_reversed():
    return [
        M((100, 50)),
        L((75, 100)),
        Q((0, 150), (25, 300)),
        C((50, 150), (150, 150), (175, 300)),
        Q((200, 150), (125, 100)),
        Z(),
    ]


CASES = [
    ("unclosed", _unclosed(), _unclosed_reversed()),
    ("closed_triangle", _triangle(), _triangle_reversed()),
    ("closed_shape", _shape(), _shape_reversed()),
    (
        "multiple_subpaths",
        _unclosed() + _triangle() + _shape(),
        _unclosed_reversed() + _triangle_reversed() + _shape_reversed(),
    ),
    (
        "lines",
        [M((0, 0)), L((1, 1)), L((2, 2)), L((3, 3)), Z()],
        [M((3, 3)), L((2, 2)), L((1, 1)), L((0, 0)), Z()],
    ),
    (
        "multiple_moves",
        [M((2, 2)), M((3, 3)), Z(), M((4, 4))],
        [M((2, 2)), M((3, 3)), Z(), M((4, 4))],
    ),
    (
        "closed_last_line_overlaps_move",
        [M((0, 0)), L((1, 1)), L((2, 2)), L((0, 0)), Z()],
        [M((0, 0)), L((2, 2)), L((1, 1)), L((0, 0)), Z()],
    ),
    (
        "closed_duplicate_line_following_move",
        [M((0, 0)), L((0, 0)), L((1, 1)), L((2, 2)), Z()],
        [M((2, 2)), L((1, 1)), L((0, 0)), L((0, 0)), Z()],
    ),
    (
        "closed_two_lines",
        [M((0, 0)), L((1, 1)), Z()],
        [M((1, 1)), L((0, 0)), Z()],
    ),
    (
        "closed_last_curve_overlaps_move",
        [M((0, 0)), C((1, 1), (2, 2), (3, 3)), C((4, 4), (5, 5), (0, 0)), Z()],
        [M((0, 0)), C((5, 5), (4, 4), (3, 3)), C((2, 2), (1, 1), (0, 0)), Z()],
    ),
    (
        "closed_last_curve_not_on_move",
        [M((0, 0)), C((1, 1), (2, 2), (3, 3)), C((4, 4), (5, 5), (6, 6)), Z()],
        [M((6, 6)), C((5, 5), (4, 4), (3, 3)), C((2, 2), (1, 1), (0, 0)), Z()],
    ),
    (
        "closed_line_curve_line",
        [M((0, 0)), L((1, 1)), C((2, 2), (3, 3), (4, 4)), C((5, 5), (6, 6), (7, 7)), Z()],
        [M((7, 7)), C((6, 6), (5, 5), (4, 4)), C((3, 3), (2, 2), (1, 1)), L((0, 0)), Z()],
    ),
    (
        "closed_last_quad_overlaps_move",
        [M((0, 0)), Q((1, 1), (2, 2)), Q((3, 3), (0, 0)), Z()],
        [M((0, 0)), Q((3, 3), (2, 2)), Q((1, 1), (0, 0)), Z()],
    ),
    (
        "closed_last_quad_not_on_move",
        [M((0, 0)), Q((1, 1), (2, 2)), Q((3, 3), (4, 4)), Z()],
        [M((4, 4)), Q((3, 3), (2, 2)), Q((1, 1), (0, 0)), Z()],
    ),
    (
        "closed_line_quad_line",
        [M((0, 0)), L((1, 1)), Q((2, 2), (3, 3)), Z()],
        [M((3, 3)), Q((2, 2), (1, 1)), L((0, 0)), Z()],
    ),
    ("empty", [], []),
    ("single_point", [M((0, 0))], [M((0, 0))]),
    ("single_point_closed", [M((0, 0)), Z()], [M((0, 0)), Z()]),
    ("single_line_open", [M((0, 0)), L((1, 1))], [M((1, 1)), L((0, 0))]),
    (
        "single_curve_open",
        [M((0, 0)), C((1, 1), (2, 2), (3, 3))],
        [M((3, 3)), C((2, 2), (1, 1), (0, 0))],
    ),
    (
        "curve_line_open",
        [M((0, 0)), C((1, 1), (2, 2), (3, 3)), L((4, 4))],
        [M((4, 4)), L((3, 3)), C((2, 2), (1, 1), (0, 0))],
    ),
    (
        "line_curve_open",
        [M((0, 0)), L((1, 1)), C((2, 2), (3, 3), (4, 4))],
        [M((4, 4)), C((3, 3), (2, 2), (1, 1)), L((0, 0))],
    ),
    (
        "duplicate_point_after_move",
        [
            M((848, 348)),
            L((848, 348)),
            Q((848, 526), (449, 704)),
            Q((848, 171), (848, 348)),
            Z(),
        ],
        [
            M((848, 348)),
            Q((848, 171), (449, 704)),
            Q((848, 526), (848, 348)),
            L((848, 348)),
            Z(),
        ],
    ),
    (
        "duplicate_point_at_end",
        [M((0, 651)), L((0, 101)), L((0, 101)), L((0, 651)), L((0, 651)), Z()],
        [M((0, 651)), L((0, 651)), L((0, 101)), L((0, 101)), L((0, 651)), Z()],
    ),
]


@pytest.mark.parametrize("contour, expected", [c[1:] for c in CASES], ids=[c[0] for c in CASES])
def test_reverse_cases(contour, expected):
    assert reverse_subpaths(contour) == expected


def test_accepts_generator():
    result = reverse_subpaths(el for el in [M((0, 0)), L((1, 1))])
    assert result == [M(Point(1.0, 1.0)), L(Point(0.0, 0.0))]


def test_input_not_modified():
    contour = _triangle()
    reverse_subpaths(contour)
    assert contour == _triangle()


def test_double_reverse_of_open_path_is_identity():
    assert reverse_subpaths(reverse_subpaths(_unclosed())) == _unclosed()


def test_double_reverse_of_closed_path_is_identity():
    assert reverse_subpaths(reverse_subpaths(_shape())) == _shape()


def test_reversed_subpath_count_preserved():
    path = _unclosed() + _triangle() + _shape()
    result = reverse_subpaths(path)
    assert sum(isinstance(el, MoveTo) for el in result) == 3
    assert sum(isinstance(el, ClosePath) for el in result) == 2
    assert len(result) == len(path)