"""
PathSet file loading and saving.

Files are JSON: either a bare list of polylines or an object with a
"polylines" key. Each polyline is a list of [x, y] pairs.
"""

import json
import os

from pydantic import ValidationError

from plotpath.geometry import pathset_to_lists
from plotpath.io.save_artifacts import save_json
from plotpath.models import PathSetFile
from plotpath.tracer import get_tracer, trace


@trace(label="load_pathset")
def load_pathset(path):
    """
    Load raw polylines from a JSON file.

    Returns a list of polylines as nested [[x, y], ...] lists. Points are not
    turned into Polyline objects here so the pipeline can validate the raw
    data first.

    Raises FileNotFoundError if path does not exist.
    Raises ValueError if the file does not describe a PathSet.
    """
    tracer = get_tracer()

    if not os.path.exists(path):
        raise FileNotFoundError(f"PathSet file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, list):
        data = {"polylines": data}

    try:
        parsed = PathSetFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Not a PathSet file: {path}: {e.error_count()} validation errors") from e

    total_points = sum(len(p) for p in parsed.polylines)
    tracer.event(f"Loaded PathSet: {len(parsed.polylines)} polylines, {total_points} points")

    return parsed.polylines


def save_pathset(paths, path, source=""):
    """Write a PathSet as {"polylines": [...]} JSON."""
    document = PathSetFile(polylines=pathset_to_lists(paths), source=source)
    save_json(document, path)
