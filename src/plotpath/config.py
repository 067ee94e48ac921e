"""
Configuration management for plotpath.

Loads YAML configuration with sensible defaults for all pipeline stages.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml


@dataclass
class ElideConfig:
    """Configuration for short-path elision."""
    enabled: bool = True
    min_length: float = 0.5


@dataclass
class ReorderConfig:
    """Configuration for travel-minimizing reordering."""
    enabled: bool = True
    start: List[float] = field(default_factory=lambda: [0.0, 0.0])
    start_index: Optional[int] = None


@dataclass
class MergeConfig:
    """Configuration for endpoint merging."""
    enabled: bool = True
    epsilon: float = 0.5
    premerge: bool = False  # extra merge pass before reordering


@dataclass
class ExportConfig:
    """Configuration for SVG export."""
    stroke_width: float = 0.5
    stroke_color: str = "black"
    travel_color: str = "red"
    margin: float = 10.0


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class DebugConfig:
    """Configuration for debug artifact generation."""
    enabled: bool = False


@dataclass
class PipelineConfig:
    """Complete pipeline configuration."""
    elide: ElideConfig = field(default_factory=ElideConfig)
    reorder: ReorderConfig = field(default_factory=ReorderConfig)
    merge: MergeConfig = field(default_factory=MergeConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


_SECTIONS = ("elide", "reorder", "merge", "export", "tracing", "debug")


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values. Unknown keys are ignored.
    """
    config = PipelineConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass."""
    for section in _SECTIONS:
        values = yaml_data.get(section)
        if not values:
            continue
        target = getattr(config, section)
        for key, value in values.items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def config_to_dict(config):
    """Plain-dict view of a PipelineConfig, in section order."""
    return {
        "elide": {
            "enabled": config.elide.enabled,
            "min_length": config.elide.min_length,
        },
        "reorder": {
            "enabled": config.reorder.enabled,
            "start": list(config.reorder.start),
            "start_index": config.reorder.start_index,
        },
        "merge": {
            "enabled": config.merge.enabled,
            "epsilon": config.merge.epsilon,
            "premerge": config.merge.premerge,
        },
        "export": {
            "stroke_width": config.export.stroke_width,
            "stroke_color": config.export.stroke_color,
            "travel_color": config.export.travel_color,
            "margin": config.export.margin,
        },
        "tracing": {
            "enabled": config.tracing.enabled,
            "level": config.tracing.level,
            "file_path": config.tracing.file_path,
            "json_output": config.tracing.json_output,
        },
        "debug": {
            "enabled": config.debug.enabled,
        },
    }


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    yaml_data = config_to_dict(PipelineConfig())

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
