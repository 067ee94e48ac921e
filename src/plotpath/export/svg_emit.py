"""
SVG emission for plotpath.

Renders a PathSet as plain SVG polylines, optionally with the pen-up travel
moves drawn on a separate dashed layer for inspection.
"""

import svgwrite

from plotpath.geometry import compute_bbox
from plotpath.paths.reorder import ORIGIN
from plotpath.tracer import get_tracer, trace


@trace(label="emit_pathset_svg")
def emit_pathset_svg(paths, stroke_width=0.5, stroke_color="black", margin=10.0,
                     show_travel=False, travel_color="red", start=ORIGIN):
    """
    Create an SVG document containing every polyline in drawing order.

    Args:
        paths: list of Polyline
        stroke_width: line width in user units
        stroke_color: stroke color for pen-down paths
        margin: padding around the bounding box
        show_travel: also draw pen-up moves, starting from start
        travel_color: stroke color for the travel layer
        start: tool position before the first path

    Returns:
        svgwrite.Drawing object
    """
    tracer = get_tracer()

    min_x, min_y, max_x, max_y = compute_bbox(paths)
    if show_travel and paths:
        min_x, min_y = min(min_x, start[0]), min(min_y, start[1])
        max_x, max_y = max(max_x, start[0]), max(max_y, start[1])

    width = (max_x - min_x) + 2 * margin
    height = (max_y - min_y) + 2 * margin

    dwg = svgwrite.Drawing(size=(f"{width:.3f}", f"{height:.3f}"))
    dwg.viewbox(min_x - margin, min_y - margin, width, height)

    path_group = dwg.g(id="paths", fill="none", stroke=stroke_color,
                       stroke_width=stroke_width, stroke_linecap="round",
                       stroke_linejoin="round")

    for i, path in enumerate(paths):
        if path.is_dot():
            p = path.first()
            # zero-length line with round caps renders as a dot
            path_group.add(dwg.line(start=(p.x, p.y), end=(p.x, p.y), id=f"path_{i}"))
        else:
            path_group.add(dwg.polyline(points=[(p.x, p.y) for p in path], id=f"path_{i}"))

    dwg.add(path_group)

    if show_travel:
        dwg.add(_travel_layer(dwg, paths, start, stroke_width, travel_color))

    tracer.event(f"SVG emitted with {len(paths)} paths")

    return dwg


def _travel_layer(dwg, paths, start, stroke_width, travel_color):
    """Group of dashed lines for each pen-up move."""
    dash = stroke_width * 2
    group = dwg.g(id="travel", fill="none", stroke=travel_color,
                  stroke_width=stroke_width / 2,
                  stroke_dasharray=f"{dash:.3f},{dash:.3f}")

    cursor = start
    for path in paths:
        target = path.first()
        if (cursor[0], cursor[1]) != (target.x, target.y):
            group.add(dwg.line(start=(cursor[0], cursor[1]), end=(target.x, target.y)))
        cursor = path.last()

    return group
