"""Pytest fixtures for plotpath tests."""

import json
import os
import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture(autouse=True)
def reset_tracer():
    """Leave the global tracer disabled after every test."""
    yield
    from plotpath.tracer import configure_tracer
    configure_tracer(enabled=False)


@pytest.fixture
def default_config():
    """Create default pipeline configuration."""
    from plotpath.config import PipelineConfig
    return PipelineConfig()


@pytest.fixture
def scrambled_paths():
    """Three collinear segments given far from drawing order."""
    from plotpath.geometry import make_pathset
    return make_pathset([
        [(10, 0), (11, 0)],
        [(3, 0), (2, 0)],
        [(0, 0), (1, 0)],
    ])


@pytest.fixture
def random_paths():
    """Forty short random segments with a fixed seed."""
    import numpy as np
    from plotpath.geometry import make_pathset

    rng = np.random.default_rng(0)
    raw = []
    for _ in range(40):
        n = int(rng.integers(1, 5))
        raw.append(rng.uniform(0, 100, size=(n, 2)).tolist())
    return make_pathset(raw)


@pytest.fixture
def pathset_file(temp_dir):
    """Write a small PathSet JSON file and return its path."""
    path = os.path.join(temp_dir, "paths.json")
    data = {
        "polylines": [
            [[10, 0], [11, 0]],
            [[5, 5]],
            [[3, 0], [2, 0]],
            [[0, 0], [1, 0]],
            [[11, 0], [11, 1]],
        ]
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)
    return path
