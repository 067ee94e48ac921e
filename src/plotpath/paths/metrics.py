"""
Plot cost measurements for PathSets.
"""

from plotpath.geometry import compute_bbox, distance
from plotpath.models import PathSetStats
from plotpath.paths.reorder import ORIGIN


def travel_distance(paths, start=ORIGIN):
    """
    Total pen-up distance to draw paths in order, starting from start.

    Includes the move from start to the first path; excludes the return.
    """
    total = 0.0
    cursor = start
    for path in paths:
        total += distance(cursor, path.first())
        cursor = path.last()
    return total


def drawing_length(paths):
    """Total pen-down distance."""
    return sum(p.length() for p in paths)


def point_count(paths):
    return sum(len(p) for p in paths)


def summarize_pathset(paths, start=ORIGIN):
    """Collect PathSetStats for a PathSet."""
    return PathSetStats(
        path_count=len(paths),
        point_count=point_count(paths),
        dot_count=sum(1 for p in paths if p.is_dot()),
        drawing_length=drawing_length(paths),
        travel_distance=travel_distance(paths, start),
        bbox=compute_bbox(paths),
    )
