"""
Optimization report generation for plotpath.

Writes the JSON report and a human-readable summary next to the outputs.
"""

import os

from plotpath.io.save_artifacts import ensure_dir, save_json
from plotpath.tracer import get_tracer, trace


@trace(label="generate_report")
def generate_report(report, out_dir, debug_writer=None):
    """
    Generate report files.

    Creates:
    - report.json: full OptimizationReport
    - report_summary.txt: human-readable summary
    """
    tracer = get_tracer()

    report_path = os.path.join(out_dir, "report.json")
    save_json(report, report_path)

    summary_text = "\n".join(format_summary(report))

    summary_path = os.path.join(out_dir, "report_summary.txt")
    ensure_dir(os.path.dirname(summary_path))
    with open(summary_path, "w", encoding="utf-8") as f:
        f.write(summary_text + "\n")

    tracer.event(f"Report saved: travel {report.input_stats.travel_distance:.2f} -> {report.output_stats.travel_distance:.2f}")

    if debug_writer:
        debug_writer.save_json(report.validation, "validate", "validation_report.json")

    return report_path, summary_path


def format_summary(report):
    """Summary lines for an OptimizationReport."""
    lines = ["plotpath Optimization Report", "=" * 40, ""]

    lines.append(f"Paths: {report.input_stats.path_count} -> {report.output_stats.path_count}")
    lines.append(f"Points: {report.input_stats.point_count} -> {report.output_stats.point_count}")
    lines.append(f"Drawing length: {report.output_stats.drawing_length:.2f}")
    lines.append(f"Travel: {report.input_stats.travel_distance:.2f} -> {report.output_stats.travel_distance:.2f}")
    lines.append(f"Travel saved: {report.travel_saved:.2f}")
    lines.append("")

    lines.append("STAGES:")
    lines.append("-" * 40)
    for stage in report.stages:
        if stage.skipped:
            lines.append(f"[SKIP] {stage.stage}")
        else:
            lines.append(f"[RUN]  {stage.stage}: {stage.stats.path_count} paths, travel {stage.stats.travel_distance:.2f}")
    lines.append("")

    failed = [c for c in report.validation.checks if not c.passed]
    if failed:
        lines.append("WARNINGS:")
        lines.append("-" * 40)
        for check in failed:
            lines.append(format_check_result(check))

    return lines


def format_check_result(check):
    """Format a single check result for display."""
    status = "PASS" if check.passed else "FAIL"
    severity = check.severity.value.upper()
    return f"[{status}][{severity}] {check.rule_id}: {check.message}"
