"""
Geometry primitives for plotpath.

Points and polylines are immutable values. Every stage of the optimization
pipeline reads only polyline endpoints and lengths, so both are cheap here.
"""

import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np


class Point(NamedTuple):
    """A 2D point."""
    x: float
    y: float


def distance(a, b):
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def is_finite_point(point):
    """Check that both coordinates are finite numbers."""
    return math.isfinite(point[0]) and math.isfinite(point[1])


class Polyline:
    """
    A single continuous pen-down stroke.

    Holds at least one point. A single-point polyline is a dot: its first
    and last points coincide and its length is zero.
    """

    __slots__ = ("_points", "_length")

    def __init__(self, points: Iterable[Sequence[float]]):
        pts = tuple(Point(float(p[0]), float(p[1])) for p in points)
        if not pts:
            raise ValueError("Polyline requires at least one point")
        self._points = pts
        self._length = None

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    def first(self) -> Point:
        return self._points[0]

    def last(self) -> Point:
        return self._points[-1]

    def is_dot(self):
        return len(self._points) == 1

    def length(self) -> float:
        """Total traversed length, cached after the first call."""
        if self._length is None:
            self._length = polyline_length(self._points)
        return self._length

    def reversed(self) -> "Polyline":
        """Return a new polyline with the point order flipped."""
        if len(self._points) == 1:
            return self
        flipped = Polyline.__new__(Polyline)
        flipped._points = self._points[::-1]
        flipped._length = self._length
        return flipped

    def to_list(self) -> List[List[float]]:
        return [[p.x, p.y] for p in self._points]

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __eq__(self, other):
        if not isinstance(other, Polyline):
            return NotImplemented
        return self._points == other._points

    def __hash__(self):
        return hash(self._points)

    def __repr__(self):
        if len(self._points) <= 4:
            inner = ", ".join(f"({p.x:g}, {p.y:g})" for p in self._points)
        else:
            inner = f"({self._points[0].x:g}, {self._points[0].y:g}), ... {len(self._points) - 2} more ..., ({self._points[-1].x:g}, {self._points[-1].y:g})"
        return f"Polyline([{inner}])"


def polyline_length(points):
    """
    Sum of consecutive point-to-point distances.

    Returns 0.0 for a single point.
    """
    if len(points) < 2:
        return 0.0

    arr = np.asarray(points, dtype=float)
    segment_lengths = np.hypot(*np.diff(arr, axis=0).T)
    return float(segment_lengths.sum())


def make_pathset(polylines):
    """
    Build a PathSet (list of Polyline) from nested point sequences.

    Existing Polyline objects are passed through unchanged.
    """
    return [p if isinstance(p, Polyline) else Polyline(p) for p in polylines]


def pathset_to_lists(paths):
    """Convert a PathSet to plain nested lists, e.g. for JSON output."""
    return [p.to_list() for p in paths]


def endpoint_arrays(paths):
    """
    Return (starts, ends) as (n, 2) float arrays of first/last points.
    """
    n = len(paths)
    starts = np.empty((n, 2), dtype=float)
    ends = np.empty((n, 2), dtype=float)
    for i, path in enumerate(paths):
        starts[i] = path.first()
        ends[i] = path.last()
    return starts, ends


def compute_bbox(paths):
    """
    Bounding box of all points in a PathSet as [min_x, min_y, max_x, max_y].
    """
    if not paths:
        return [0.0, 0.0, 0.0, 0.0]

    xs = [p.x for path in paths for p in path]
    ys = [p.y for path in paths for p in path]
    return [min(xs), min(ys), max(xs), max(ys)]
