"""
Main pipeline orchestrator for plotpath.

Validates the input, then runs elide -> reorder -> merge (with an optional
merge pass before reordering) and records stats after every stage.
"""

import os

from plotpath.config import PipelineConfig, load_config
from plotpath.export.svg_emit import emit_pathset_svg
from plotpath.geometry import Point, make_pathset
from plotpath.io.pathset_io import load_pathset, save_pathset
from plotpath.io.save_artifacts import DebugArtifactWriter, ensure_dir, save_svg
from plotpath.models import OptimizationReport, Severity, StageResult
from plotpath.paths.elide import elide_shorter_than
from plotpath.paths.merge import merge
from plotpath.paths.metrics import summarize_pathset
from plotpath.paths.reorder import reorder
from plotpath.tracer import get_tracer, trace
from plotpath.validate.report import generate_report
from plotpath.validate.rules import run_validation


@trace(label="optimize_paths")
def optimize_paths(paths, config=None, debug_writer=None):
    """
    Optimize a PathSet for plotting.

    Args:
        paths: sequence of polylines (Polyline objects or [[x, y], ...] lists)
        config: PipelineConfig (defaults if omitted)
        debug_writer: optional DebugArtifactWriter for per-stage artifacts

    Returns:
        (optimized list of Polyline, OptimizationReport)

    Raises ValueError if the input fails validation. Nothing is optimized
    in that case.
    """
    tracer = get_tracer()

    if config is None:
        config = PipelineConfig()

    raw = list(paths)

    validation = run_validation(raw, config)
    if validation.has_errors:
        messages = [c.message for c in validation.failed(Severity.ERROR)]
        for message in messages:
            tracer.event(message, level="ERROR")
        raise ValueError(f"Input validation failed: {messages}")

    polylines = make_pathset(raw)
    start = Point(float(config.reorder.start[0]), float(config.reorder.start[1]))

    report = OptimizationReport(
        input_stats=summarize_pathset(polylines, start),
        validation=validation,
    )

    anchor = None
    if config.reorder.enabled and config.reorder.start_index is not None and polylines:
        anchor = polylines[config.reorder.start_index]

    current = polylines

    with tracer.span("premerge", module="pipeline"):
        run = config.merge.enabled and config.merge.premerge
        if run:
            current = merge(current, config.merge.epsilon)
        _record_stage(report, "premerge", current, start, not run,
                      {"epsilon": config.merge.epsilon}, debug_writer)

    with tracer.span("elide", module="pipeline"):
        run = config.elide.enabled
        if run:
            current = elide_shorter_than(current, config.elide.min_length)
        _record_stage(report, "elide", current, start, not run,
                      {"min_length": config.elide.min_length}, debug_writer)

    with tracer.span("reorder", module="pipeline"):
        run = config.reorder.enabled
        start_index = _locate_anchor(current, anchor)
        if run:
            current = reorder(current, start=start, start_index=start_index)
        _record_stage(report, "reorder", current, start, not run,
                      {"start": list(start), "start_index": start_index}, debug_writer)

    with tracer.span("merge", module="pipeline"):
        run = config.merge.enabled
        if run:
            current = merge(current, config.merge.epsilon)
        _record_stage(report, "merge", current, start, not run,
                      {"epsilon": config.merge.epsilon}, debug_writer)

    report.output_stats = summarize_pathset(current, start)

    tracer.event(
        f"Optimized: {report.input_stats.path_count} -> {report.output_stats.path_count} paths, "
        f"travel {report.input_stats.travel_distance:.2f} -> {report.output_stats.travel_distance:.2f}"
    )

    if debug_writer:
        overlay = emit_pathset_svg(
            current,
            stroke_width=config.export.stroke_width,
            stroke_color=config.export.stroke_color,
            margin=config.export.margin,
            show_travel=True,
            travel_color=config.export.travel_color,
            start=start,
        )
        debug_writer.save_svg(overlay, "merge", "travel_overlay.svg")

    return current, report


def _locate_anchor(paths, anchor):
    """
    Position of the configured first path after earlier stages.

    Returns None when there is no anchor or it did not survive unchanged.
    """
    if anchor is None:
        return None

    for i, path in enumerate(paths):
        if path is anchor:
            return i

    get_tracer().event("Configured start path was elided or merged; starting from start point", level="WARN")
    return None


def _record_stage(report, stage, paths, start, skipped, params, debug_writer):
    result = StageResult(
        stage=stage,
        skipped=skipped,
        params=params,
        stats=summarize_pathset(paths, start),
    )
    report.stages.append(result)

    if debug_writer and not skipped:
        debug_writer.save_json(result, stage, f"{stage}_metrics.json")


@trace(label="run_pipeline")
def run_pipeline(input_path, out_dir, config=None, config_path=None, debug=False):
    """
    Run the full pipeline on a PathSet JSON file.

    Args:
        input_path: JSON file with polylines
        out_dir: output directory
        config: PipelineConfig object (optional)
        config_path: path to YAML config file (optional)
        debug: enable debug artifact generation

    Returns:
        (optimized list of Polyline, OptimizationReport)

    Writes optimized.json, optimized.svg, report.json and report_summary.txt.
    """
    tracer = get_tracer()

    if config is None:
        config = load_config(config_path)

    if debug:
        config.debug.enabled = True

    raw = load_pathset(input_path)

    ensure_dir(out_dir)

    debug_writer = DebugArtifactWriter(out_dir, enabled=True) if config.debug.enabled else None

    optimized, report = optimize_paths(raw, config, debug_writer)
    report.source_path = os.path.abspath(input_path)

    with tracer.span("export", module="pipeline"):
        save_pathset(optimized, os.path.join(out_dir, "optimized.json"), source=report.source_path)

        dwg = emit_pathset_svg(
            optimized,
            stroke_width=config.export.stroke_width,
            stroke_color=config.export.stroke_color,
            margin=config.export.margin,
        )
        save_svg(dwg, os.path.join(out_dir, "optimized.svg"))

        generate_report(report, out_dir, debug_writer)

    tracer.event(f"Pipeline complete, outputs saved to {out_dir}")

    return optimized, report
