"""
Travel-minimizing path reordering.

Greedy nearest-neighbour tour over polyline endpoints. Each step scans every
unplaced polyline once, so a run costs O(n^2) in the number of polylines.
That stays interactive up to roughly ten thousand paths.

Selection is deterministic: equidistant candidates resolve to the lowest
input index, and a polyline is only reversed when its last point is
strictly closer than its first.
"""

import numpy as np

from plotpath.geometry import Point, endpoint_arrays
from plotpath.tracer import get_tracer, trace

# Distances closer than this are treated as equal.
TIE_EPSILON = 1e-9

ORIGIN = Point(0.0, 0.0)


@trace(label="reorder")
def reorder(paths, start=ORIGIN, start_index=None):
    """
    Reorder (and where useful reverse) polylines to shorten pen-up travel.

    Args:
        paths: list of Polyline
        start: tool position before the first path is drawn
        start_index: if given, this polyline is drawn first, unreversed,
            and the search continues from its last point

    Returns:
        new list holding every input polyline exactly once, possibly reversed
    """
    tracer = get_tracer()

    n = len(paths)
    if n == 0:
        return []

    if start_index is not None and not 0 <= start_index < n:
        raise ValueError(f"start_index {start_index} out of range for {n} paths")

    starts, ends = endpoint_arrays(paths)
    remaining = np.ones(n, dtype=bool)

    ordered = []
    cursor = Point(float(start[0]), float(start[1]))

    if start_index is not None:
        first = paths[start_index]
        ordered.append(first)
        remaining[start_index] = False
        cursor = first.last()

    reversals = 0
    while len(ordered) < n:
        idx, reverse = nearest_candidate(starts, ends, remaining, cursor)
        path = paths[idx]
        if reverse:
            path = path.reversed()
            reversals += 1

        ordered.append(path)
        remaining[idx] = False
        cursor = path.last()

    tracer.event(f"Reordered {n} paths, {reversals} reversed")

    return ordered


def nearest_candidate(starts, ends, remaining, cursor):
    """
    Find the unplaced polyline with the endpoint closest to cursor.

    Args:
        starts: (n, 2) array of first points
        ends: (n, 2) array of last points
        remaining: boolean mask of unplaced polylines
        cursor: current tool position

    Returns:
        (index, reverse) where reverse is True when the polyline should be
        drawn from its last point
    """
    cx, cy = cursor
    d_start = np.hypot(starts[:, 0] - cx, starts[:, 1] - cy)
    d_end = np.hypot(ends[:, 0] - cx, ends[:, 1] - cy)

    nearest = np.minimum(d_start, d_end)
    nearest[~remaining] = np.inf

    best = nearest.min()
    if not np.isfinite(best):
        raise ValueError("No remaining candidates with finite endpoints")

    # first index within tolerance of the minimum is the lowest input index
    idx = int(np.flatnonzero(nearest <= best + TIE_EPSILON)[0])
    reverse = bool(d_end[idx] + TIE_EPSILON < d_start[idx])

    return idx, reverse
