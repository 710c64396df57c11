"""2D Bézier path elements and segments, affine transforms, arcs and circles."""

__version__ = "0.1.0"