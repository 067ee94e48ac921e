"""Tests for input validation rules and reports."""

import math
import os

from plotpath.geometry import make_pathset
from plotpath.models import Severity


class TestRules:
    """Tests for individual validation rules."""

    def test_clean_input_passes(self, scrambled_paths, default_config):
        from plotpath.validate.rules import run_validation

        report = run_validation(scrambled_paths, default_config)

        assert not report.has_errors
        assert report.warning_count == 0
        assert all(c.passed for c in report.checks)

    def test_non_finite_evidence(self):
        from plotpath.validate.rules import check_finite_coordinates

        result = check_finite_coordinates([[(0, 0)], [(1, 1), (math.nan, 2), (3, math.inf)]])

        assert not result.passed
        assert result.severity == Severity.ERROR
        assert result.evidence["locations"] == [[1, 1], [1, 2]]

    def test_empty_paths_evidence(self):
        from plotpath.validate.rules import check_non_empty_paths

        result = check_non_empty_paths([[], [(0, 0)], []])

        assert result.evidence["path_indices"] == [0, 2]

    def test_point_shape(self):
        from plotpath.validate.rules import check_point_shape

        assert check_point_shape([[(0, 0)], [(1, 2)]]).passed
        assert not check_point_shape([[(0, "a")]]).passed
        assert not check_point_shape([[5]]).passed

    def test_numpy_points_accepted(self):
        import numpy as np
        from plotpath.validate.rules import check_finite_coordinates, check_point_shape

        raw = [np.array([[0.0, 0.0], [1.0, 1.0]])]

        assert check_point_shape(raw).passed
        assert check_finite_coordinates(raw).passed

    def test_negative_thresholds_are_warnings(self, default_config):
        from plotpath.validate.rules import run_validation

        default_config.elide.min_length = -0.1
        default_config.merge.epsilon = -0.1

        report = run_validation(make_pathset([[(0, 0)]]), default_config)

        assert not report.has_errors
        assert {c.rule_id for c in report.failed(Severity.WARN)} == {"elide_threshold", "merge_tolerance"}

    def test_start_point(self, default_config):
        from plotpath.validate.rules import check_start_point

        assert check_start_point(default_config).passed

        default_config.reorder.start = [0.0, math.inf]
        result = check_start_point(default_config)

        assert not result.passed
        assert result.severity == Severity.ERROR

    def test_finite_thresholds_evidence(self, default_config):
        from plotpath.validate.rules import check_finite_thresholds

        default_config.elide.min_length = math.nan
        default_config.merge.epsilon = "wide"

        result = check_finite_thresholds(default_config)

        assert not result.passed
        assert set(result.evidence) == {"elide.min_length", "merge.epsilon"}

    def test_disabled_stage_threshold_ignored(self, default_config):
        from plotpath.validate.rules import check_elide_threshold

        default_config.elide.enabled = False
        default_config.elide.min_length = -1

        assert check_elide_threshold(default_config).passed


class TestReport:
    """Tests for report files."""

    def test_report_files(self, scrambled_paths, default_config, temp_dir):
        from plotpath.pipeline import optimize_paths
        from plotpath.validate.report import generate_report

        _, report = optimize_paths(scrambled_paths, default_config)

        report_path, summary_path = generate_report(report, temp_dir)

        assert os.path.exists(report_path)
        with open(summary_path, "r", encoding="utf-8") as f:
            summary = f.read()
        assert "Travel saved: 12.00" in summary
        assert "[SKIP] premerge" in summary
