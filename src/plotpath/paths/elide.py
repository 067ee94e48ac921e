"""
Short-path elision.

Drops polylines too short to matter on paper. Plots that use dots as marks
should run with a zero threshold.
"""

from plotpath.tracer import get_tracer, trace


@trace(label="elide_shorter_than")
def elide_shorter_than(paths, min_length):
    """
    Remove polylines whose total length is below min_length.

    Args:
        paths: list of Polyline
        min_length: length threshold; polylines with length >= min_length survive

    Returns:
        new list of the surviving polylines, in input order

    A threshold of zero or less keeps everything, dots included.
    """
    tracer = get_tracer()

    if min_length < 0:
        tracer.event(f"Negative elision threshold {min_length}, skipping", level="WARN")
        return list(paths)

    if min_length == 0:
        return list(paths)

    survivors = [p for p in paths if p.length() >= min_length]

    tracer.event(f"Elided: {len(paths)} -> {len(survivors)} paths (min_length={min_length})")

    return survivors
