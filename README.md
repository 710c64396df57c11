# bezkit

bezkit is plain-Python 2D geometry for vector graphics. It provides:

- points, vectors, rectangles and affine transforms
- Bézier path elements and paths
- segments: lines, quadratic and cubic Béziers
- elliptical arcs approximated by cubic Béziers
- circles and circle segments

It depends only on the standard library.

## Install

```
pip install bezkit
```

For development, with the test suite:

```
pip install -e ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `bezkit.affine` | `Vec2`, `Point`, `Rect`, `Affine` |
| `bezkit.elements` | `PathEl` and its kinds `MoveTo`, `LineTo`, `QuadTo`, `CurveTo`, `ClosePath` |
| `bezkit.segments` | `PathSeg` and its kinds `Line`, `QuadBez`, `CubicBez`; `LineIntersection`; `segments()` |
| `bezkit.reverse` | `reverse_subpaths()` over a sequence of elements |
| `bezkit.bezpath` | `BezPath` |
| `bezkit.arc` | `Arc` |
| `bezkit.circle` | `Circle`, `CircleSegment` |

All geometry objects are frozen dataclasses. Wherever a point is taken as an argument, an `(x, y)` tuple is accepted as well.

## Points, vectors and transforms

```python
import math
from bezkit.affine import Affine, Point, Rect, Vec2

p = Point(3.0, 4.0)
Affine.rotate(math.pi / 2) * p          # Point(-4.0, 3.0), approximately
Affine.translate(Vec2(5.0, 6.0)) * p    # Point(8.0, 10.0)
Affine.skew(2.0, 4.0) * p               # Point(11.0, 16.0)

a = Affine.scale(2.0).then_translate(Vec2(1.0, 0.0))
a.inverse() * (a * p)                   # back to p

mirror = Affine.reflect(Point(1.0, 0.0), Vec2(1.0, 1.0))
mirror * Point(2.0, 2.0)                # Point(3.0, 1.0), approximately

Affine.rotate(0.5).transform_rect_bbox(Rect(0.0, 0.0, 2.0, 1.0))
```

Transforms compose with `*`, so `(A * B) * p == A * (B * p)`. The `pre_*` methods apply a transform before `self`, and the `then_*` methods apply it after `self`.

`Affine` also supports the following:

- `determinant()` and `svd()`
- `translation()` and `with_translation()`
- `is_finite()` and `is_nan()`
- scaling by a number: `2.0 * a`

`inverse()` gives non-finite coefficients when the determinant is zero. `Affine.IDENTITY`, `Affine.FLIP_X` and `Affine.FLIP_Y` are provided as constants.

An affine transform can also be applied with `*` to anything that has a `transformed(affine)` method. That includes path elements, segments, `BezPath` and `Arc`.

## Building paths

```python
from bezkit.bezpath import BezPath

path = BezPath()
path.move_to((0.0, 0.0))
path.line_to((1.0, 1.0))
path.line_to((2.0, 0.0))
path.close_path()

for seg in path.segments():
    print(seg.start(), seg.end())

path.get_seg(1)                         # Line from (0, 0) to (1, 1)
path.control_box()                      # Rect enclosing all points and control points
reversed_path = path.reverse_subpaths() # same outline, opposite winding
```

A path must begin with a `MoveTo`. The following raise `ValueError`:

- pushing another element first
- calling `line_to`, `quad_to`, `curve_to` or `close_path` on an empty path
- constructing a `BezPath` whose first element is not a `MoveTo`

`segments()` raises `ValueError` if the elements start with a `ClosePath`. A `ClosePath` yields a closing line only when the current point differs from the subpath's start.

`BezPath` provides these further methods:

- `pop()`, `extend()` and `truncate()`
- `is_empty()`, which is true when the path has no segments
- `apply_affine()`, which transforms in place, and `transformed()`, which returns a copy
- `is_finite()` and `is_nan()`

`BezPath` can also be iterated and has a `len()`.

## Segments and intersections

```python
from bezkit.affine import Point
from bezkit.segments import Line, QuadBez

q = QuadBez(Point(0.0, -10.0), Point(10.0, 20.0), Point(20.0, -10.0))
hits = q.intersect_line(Line(Point(10.0, -10.0), Point(10.0, 10.0)))
hits[0].segment_t, hits[0].line_t       # 0.5, 0.75
```

Each segment (`Line`, `QuadBez`, `CubicBez`) provides the following:

- `eval(t)`, `start()` and `end()`
- `reverse()` and `to_cubic()`
- `as_path_el()` and `path_elements()`
- `tangents()`
- `intersect_line()`

`QuadBez.raise_degree()` gives the equivalent cubic.

Line intersections are inclusive near the segment's ends. Because of this, `segment_t` may exceed 0..1 slightly, while `line_t` is always in 0..1.

## Circles and arcs

```python
import math
from bezkit.affine import Point, Vec2
from bezkit.arc import Arc
from bezkit.circle import Circle

c = Circle(Point(5.0, 5.0), 5.0)
c.area()                                # 25π
c.contains(Point(5.0, 5.0))             # True
outline = c.to_path(1e-9)               # closed path of cubic Béziers
ring = c.segment(2.0, 0.0, math.pi)     # half a doughnut
ring.to_path(0.1)

arc = Arc(Point(0.0, 0.0), Vec2(2.0, 1.0), 0.0, math.pi / 2, 0.0)
list(arc.path_elements(0.01))           # MoveTo, then CurveTo elements
list(arc.to_cubic_beziers(0.01))        # (p1, p2, p3) per cubic piece
```

The number of cubic pieces grows as the tolerance shrinks. `Circle` and `CircleSegment` both provide the following:

- `area()` and `perimeter()`
- `winding()` and `contains()`
- `bounding_box()`
- `+` and `-` with a `Vec2`

The bounding box of a `CircleSegment` encloses the whole circle, not just the segment. `Arc.area()` is the area of the full ellipse, because the arc itself is not closed.

## What it does not do

bezkit covers construction, transformation, reversal and segment/line intersection. It does not do the following:

- read or write SVG path data
- flatten curves into polylines
- compute arc lengths
- find nearest points or distances between curves
- compute the area, winding number or tight bounding box of a general `BezPath`
- provide an ellipse shape of its own

There is no command-line tool. The package is a library only.