"""
Endpoint merging for sequence-adjacent polylines.

Best run after reordering, which tends to place the start of one path right
at the end of the previous one.
"""

from plotpath.geometry import Polyline, distance
from plotpath.tracer import get_tracer, trace


@trace(label="merge")
def merge(paths, epsilon):
    """
    Fuse neighbouring polylines whose endpoints lie within epsilon.

    Single left-to-right pass. When the running polyline ends within epsilon
    of the next polyline's first point, the next polyline's remaining points
    are appended and the running polyline keeps its own tail as the joint.
    A fused result can keep absorbing the following polylines.

    Args:
        paths: list of Polyline
        epsilon: maximum endpoint gap to fuse; negative disables merging

    Returns:
        new list of polylines
    """
    tracer = get_tracer()

    if epsilon < 0:
        tracer.event(f"Negative merge tolerance {epsilon}, skipping", level="WARN")
        return list(paths)

    if not paths:
        return []

    merged = []
    current = paths[0]
    pending = None  # accumulated points while current is being extended
    fusions = 0

    for path in paths[1:]:
        tail = pending[-1] if pending else current.last()
        if distance(tail, path.first()) <= epsilon:
            if pending is None:
                pending = list(current.points)
            pending.extend(path.points[1:])
            fusions += 1
            continue

        merged.append(Polyline(pending) if pending else current)
        current = path
        pending = None

    merged.append(Polyline(pending) if pending else current)

    tracer.event(f"Merged: {len(paths)} -> {len(merged)} paths ({fusions} fusions)")

    return merged
