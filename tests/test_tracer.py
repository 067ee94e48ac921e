"""Tests for the tracer module."""

import json

import numpy as np
import pytest


class TestSummarize:
    """Tests for object summarization."""

    def test_polyline_summary(self):
        from plotpath.geometry import Polyline
        from plotpath.tracer import summarize

        summary = summarize(Polyline([(0, 0), (1, 2), (3, 4)]))

        assert "Polyline" in summary
        assert "n=3" in summary

    def test_pathset_summary(self):
        from plotpath.geometry import make_pathset
        from plotpath.tracer import summarize

        paths = make_pathset([[(0, 0), (1, 0)], [(5, 5)]])
        summary = summarize(paths)

        assert "PathSet" in summary
        assert "paths=2" in summary
        assert "points=3" in summary

    def test_numpy_array_summary(self):
        from plotpath.tracer import summarize

        arr = np.zeros((100, 2), dtype=np.float64)
        summary = summarize(arr)

        assert "ndarray" in summary
        assert "100x2" in summary
        assert "float64" in summary

    def test_summary_capped_length(self):
        from plotpath.tracer import summarize

        large_dict = {f"key_{i}": f"value_{i}" for i in range(100)}
        summary = summarize(large_dict, max_len=20)

        assert len(summary) <= 20

    def test_list_summary(self):
        from plotpath.tracer import summarize

        summary = summarize([1, 2, 3, 4, 5])

        assert "list" in summary
        assert "len=5" in summary

    def test_string_summary(self):
        from plotpath.tracer import summarize

        summary = summarize("a" * 1000)

        assert "len=1000" in summary
        assert len(summary) <= 200

    def test_none_summary(self):
        from plotpath.tracer import summarize

        assert summarize(None) == "None"

    def test_pydantic_model_summary(self):
        from plotpath.models import PathSetStats
        from plotpath.tracer import summarize

        assert "PathSetStats" in summarize(PathSetStats())


class TestTracerSpan:
    """Tests for tracer span functionality."""

    def test_span_nesting(self, capsys):
        from plotpath.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        tracer = get_tracer()

        with tracer.span("outer", module="test"):
            with tracer.span("inner", module="test"):
                tracer.event("inside")

        lines = capsys.readouterr().err.strip().split("\n")

        assert len(lines) == 5
        assert "test:inner" in lines[2]
        assert lines[2].index("test:inner") > lines[0].index("test:outer")

    def test_tracer_disabled_no_output(self, capsys):
        from plotpath.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=False)
        tracer = get_tracer()

        with tracer.span("test", module="test"):
            tracer.event("should not appear")

        assert capsys.readouterr().err == ""

    def test_level_filtering(self, capsys):
        from plotpath.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="WARN")
        tracer = get_tracer()

        tracer.event("quiet", level="INFO")
        tracer.event("loud", level="WARN")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_span_error_logged_and_raised(self, capsys):
        from plotpath.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True)
        tracer = get_tracer()

        with pytest.raises(RuntimeError):
            with tracer.span("boom", module="test"):
                raise RuntimeError("bad")

        err = capsys.readouterr().err
        assert "ERROR" in err
        assert "RuntimeError" in err

        assert tracer._depth == 0
        assert tracer._span_stack == []

    def test_json_output(self, capsys):
        from plotpath.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, json_output=True)
        get_tracer().event("hello", count=3)

        lines = capsys.readouterr().err.strip().split("\n")
        record = json.loads(lines[-1])

        assert record["message"] == "hello count=3"
        assert record["meta"] == {"count": "3"}

    def test_file_output(self, temp_dir):
        import os
        from plotpath.tracer import configure_tracer, get_tracer

        path = os.path.join(temp_dir, "trace.log")
        configure_tracer(enabled=True, file_path=path)
        get_tracer().event("to file")
        configure_tracer(enabled=False)

        with open(path, "r", encoding="utf-8") as f:
            assert "to file" in f.read()

    def test_stage_events_emitted(self, capsys):
        """Test that a traced stage reports its work."""
        from plotpath.geometry import make_pathset
        from plotpath.paths.merge import merge
        from plotpath.tracer import configure_tracer

        configure_tracer(enabled=True)
        merge(make_pathset([[(0, 0), (1, 0)], [(1, 0), (2, 0)]]), 0)

        err = capsys.readouterr().err
        assert "merge:merge" in err
        assert "1 fusions" in err


class TestTraceDecorator:
    """Tests for the @trace decorator."""

    def test_decorator_runs_function(self):
        from plotpath.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="test_func")
        def my_func(x):
            return x * 2

        assert my_func(5) == 10

    def test_decorator_with_exception(self):
        from plotpath.tracer import configure_tracer, trace

        configure_tracer(enabled=True)

        @trace(label="failing_func")
        def failing_func():
            raise ValueError("test error")

        with pytest.raises(ValueError):
            failing_func()
