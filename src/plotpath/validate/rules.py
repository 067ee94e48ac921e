"""
Input validation rules for plotpath.

Runs at the pipeline boundary, before any stage touches the data. A NaN or
infinite coordinate would silently corrupt every distance comparison
downstream, so those are errors; lenient configuration choices are warnings.
"""

import math
import numbers

from plotpath.geometry import is_finite_point
from plotpath.models import CheckResult, Severity, ValidationReport
from plotpath.tracer import get_tracer, trace

# Cap on offending locations kept as evidence.
MAX_EVIDENCE = 20


@trace(label="run_validation")
def run_validation(paths, config):
    """
    Run all validation checks on raw input paths.

    Args:
        paths: sequence of polylines (Polyline objects or point sequences)
        config: PipelineConfig

    Returns ValidationReport with all check results.
    """
    tracer = get_tracer()

    checks = [
        check_non_empty_paths(paths),
        check_point_shape(paths),
        check_finite_coordinates(paths),
        check_finite_thresholds(config),
        check_elide_threshold(config),
        check_merge_tolerance(config),
        check_start_point(config),
        check_start_index(paths, config),
    ]

    report = ValidationReport(checks=checks)

    tracer.event(f"Validation complete: {report.error_count} errors, {report.warning_count} warnings")

    return report


def check_non_empty_paths(paths):
    """Every polyline needs at least one point."""
    empty = [i for i, path in enumerate(paths) if len(path) == 0]

    if empty:
        return CheckResult(
            rule_id="non_empty_paths",
            severity=Severity.ERROR,
            passed=False,
            message=f"{len(empty)} polylines have no points",
            evidence={"path_indices": empty[:MAX_EVIDENCE]},
        )

    return CheckResult(
        rule_id="non_empty_paths",
        severity=Severity.ERROR,
        passed=True,
        message="All polylines have at least one point",
    )


def check_point_shape(paths):
    """Every point must be an (x, y) pair of numbers."""
    bad = []
    for i, path in enumerate(paths):
        for j, point in enumerate(path):
            if not _is_xy_pair(point):
                bad.append([i, j])
                break

    if bad:
        return CheckResult(
            rule_id="point_shape",
            severity=Severity.ERROR,
            passed=False,
            message=f"{len(bad)} polylines contain points that are not (x, y) number pairs",
            evidence={"locations": bad[:MAX_EVIDENCE]},
        )

    return CheckResult(
        rule_id="point_shape",
        severity=Severity.ERROR,
        passed=True,
        message="All points are (x, y) pairs",
    )


def check_finite_coordinates(paths):
    """Reject NaN and infinite coordinates."""
    bad = []
    for i, path in enumerate(paths):
        for j, point in enumerate(path):
            if not _is_xy_pair(point):
                continue
            if not is_finite_point(point):
                bad.append([i, j])

    if bad:
        return CheckResult(
            rule_id="finite_coordinates",
            severity=Severity.ERROR,
            passed=False,
            message=f"{len(bad)} points have non-finite coordinates",
            evidence={"locations": bad[:MAX_EVIDENCE]},
        )

    return CheckResult(
        rule_id="finite_coordinates",
        severity=Severity.ERROR,
        passed=True,
        message="All coordinates are finite",
    )


def check_finite_thresholds(config):
    """
    Thresholds of enabled stages must be finite numbers.

    A NaN threshold fails every comparison, which would elide every path
    or merge none without any visible error.
    """
    bad = {}
    if config.elide.enabled and not _is_finite_number(config.elide.min_length):
        bad["elide.min_length"] = str(config.elide.min_length)
    if config.merge.enabled and not _is_finite_number(config.merge.epsilon):
        bad["merge.epsilon"] = str(config.merge.epsilon)

    if bad:
        return CheckResult(
            rule_id="finite_thresholds",
            severity=Severity.ERROR,
            passed=False,
            message=f"Thresholds must be finite numbers: {', '.join(bad)}",
            evidence=bad,
        )

    return CheckResult(
        rule_id="finite_thresholds",
        severity=Severity.ERROR,
        passed=True,
        message="Thresholds are finite",
    )


def check_start_point(config):
    """
    The tool start position must be a finite (x, y) pair.

    Checked even with reordering off, since travel stats are measured from it.
    """
    start = config.reorder.start

    if not (_is_xy_pair(start) and is_finite_point(start)):
        return CheckResult(
            rule_id="start_point",
            severity=Severity.ERROR,
            passed=False,
            message=f"Reorder start {start!r} is not a finite (x, y) pair",
            evidence={"start": str(start)},
        )

    return CheckResult(
        rule_id="start_point",
        severity=Severity.ERROR,
        passed=True,
        message="Start point is a finite (x, y) pair",
    )


def check_elide_threshold(config):
    """A negative elision threshold disables elision."""
    min_length = config.elide.min_length

    if config.elide.enabled and _is_finite_number(min_length) and min_length < 0:
        return CheckResult(
            rule_id="elide_threshold",
            severity=Severity.WARN,
            passed=False,
            message=f"Negative elision threshold {min_length}; elision will be skipped",
            evidence={"min_length": min_length},
        )

    return CheckResult(
        rule_id="elide_threshold",
        severity=Severity.WARN,
        passed=True,
        message="Elision threshold is non-negative",
    )


def check_merge_tolerance(config):
    """A negative merge tolerance disables merging."""
    epsilon = config.merge.epsilon

    if config.merge.enabled and _is_finite_number(epsilon) and epsilon < 0:
        return CheckResult(
            rule_id="merge_tolerance",
            severity=Severity.WARN,
            passed=False,
            message=f"Negative merge tolerance {epsilon}; merging will be skipped",
            evidence={"epsilon": epsilon},
        )

    return CheckResult(
        rule_id="merge_tolerance",
        severity=Severity.WARN,
        passed=True,
        message="Merge tolerance is non-negative",
    )


def check_start_index(paths, config):
    """
    The configured first path must exist in the input.

    The index refers to the input order. An empty input has nothing to
    start from, so any index is accepted there.
    """
    start_index = config.reorder.start_index

    if config.reorder.enabled and start_index is not None and paths and not 0 <= start_index < len(paths):
        return CheckResult(
            rule_id="start_index",
            severity=Severity.ERROR,
            passed=False,
            message=f"Reorder start_index {start_index} is out of range for {len(paths)} paths",
            evidence={"start_index": start_index, "path_count": len(paths)},
        )

    return CheckResult(
        rule_id="start_index",
        severity=Severity.ERROR,
        passed=True,
        message="Reorder start index is valid",
    )


def _is_xy_pair(point):
    try:
        return len(point) == 2 and all(isinstance(v, numbers.Real) for v in point)
    except TypeError:
        return False


def _is_finite_number(value):
    return isinstance(value, numbers.Real) and math.isfinite(value)
