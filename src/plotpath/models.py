"""
Pydantic data models for plotpath files and reports.

The optimization stages work on plain Polyline lists; these models cover
what crosses the pipeline boundary: input files, validation results and
the optimization report.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity levels for validation checks."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"


class PathSetFile(BaseModel):
    """On-disk representation of a PathSet."""
    polylines: List[List[List[float]]] = Field(default_factory=list)
    source: str = ""

    model_config = ConfigDict(extra="ignore")


class CheckResult(BaseModel):
    """Result of a single validation check."""
    rule_id: str
    severity: Severity
    passed: bool
    message: str
    evidence: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class ValidationReport(BaseModel):
    """Collection of validation check results."""
    checks: List[CheckResult] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def has_errors(self):
        """Check if any errors exist."""
        return any(c.severity == Severity.ERROR and not c.passed for c in self.checks)

    @property
    def error_count(self):
        """Count of failed error-level checks."""
        return sum(1 for c in self.checks if c.severity == Severity.ERROR and not c.passed)

    @property
    def warning_count(self):
        """Count of failed warning-level checks."""
        return sum(1 for c in self.checks if c.severity == Severity.WARN and not c.passed)

    def failed(self, severity=None):
        return [
            c for c in self.checks
            if not c.passed and (severity is None or c.severity == severity)
        ]


class PathSetStats(BaseModel):
    """Summary measurements of a PathSet."""
    path_count: int = 0
    point_count: int = 0
    dot_count: int = 0
    drawing_length: float = 0.0
    travel_distance: float = 0.0
    bbox: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])

    model_config = ConfigDict(extra="forbid")


class StageResult(BaseModel):
    """Stats recorded after one pipeline stage."""
    stage: str
    skipped: bool = False
    params: Dict[str, Any] = Field(default_factory=dict)
    stats: PathSetStats = Field(default_factory=PathSetStats)

    model_config = ConfigDict(extra="forbid")


class OptimizationReport(BaseModel):
    """Outcome of a pipeline run."""
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    source_path: Optional[str] = None
    input_stats: PathSetStats = Field(default_factory=PathSetStats)
    stages: List[StageResult] = Field(default_factory=list)
    output_stats: PathSetStats = Field(default_factory=PathSetStats)
    validation: ValidationReport = Field(default_factory=ValidationReport)

    model_config = ConfigDict(extra="forbid")

    @property
    def travel_saved(self):
        """Pen-up travel removed by the run."""
        return self.input_stats.travel_distance - self.output_stats.travel_distance

    def stage(self, name):
        for result in self.stages:
            if result.stage == name:
                return result
        return None
