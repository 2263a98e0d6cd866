"""Structured result types returned by the analysis engines."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from statcore.stats.distributions import Alternative


@dataclass(frozen=True)
class DataInfo:
    """Row accounting attached to every result.

    Attributes:
        total_rows: Rows in the table
        used_rows: Rows that contributed to the computation
        excluded_rows: total_rows - used_rows
        file_path: Source file, when the table was read from disk
    """

    total_rows: int
    used_rows: int
    excluded_rows: int
    file_path: Optional[str] = None


@dataclass(frozen=True)
class ColumnStats:
    """Descriptive statistics for one column within one row subset."""

    column: str
    count: int
    mean: float
    std: float
    min: float
    q1: float
    median: float
    q3: float
    max: float
    missing_count: int
    skewness: float
    kurtosis: float


@dataclass(frozen=True)
class GroupSummary:
    name: str
    n: int
    mean: float
    std: float


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float


@dataclass(frozen=True)
class LeveneResult:
    f_statistic: float
    p_value: float


@dataclass(frozen=True)
class DescriptiveResult:
    """Output of :func:`statcore.stats.descriptive.describe`.

    Attributes:
        data_info: Row accounting
        columns: Whole-table statistics, one entry per analyzed column
        group_by: Grouping column, if any
        groups: Per-group statistics keyed by group label in first-encountered order
        diagnostics: Advisory strings (small samples, group sizes)
        warnings: Warnings propagated from reading and normalization
    """

    data_info: DataInfo
    columns: List[ColumnStats]
    group_by: Optional[str] = None
    groups: Optional[Dict[str, List[ColumnStats]]] = None
    diagnostics: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    method = "Descriptive Statistics"

    @property
    def details(self) -> Dict[str, Any]:
        return {
            "columns": [asdict(s) for s in self.columns],
            "group_by": self.group_by,
            "groups": (
                {name: [asdict(s) for s in stats] for name, stats in self.groups.items()}
                if self.groups is not None
                else None
            ),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "data_info": asdict(self.data_info),
            "details": self.details,
            "diagnostics": list(self.diagnostics),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class TwoSampleTestResult:
    """Output of :func:`statcore.stats.two_sample.t_test`.

    ``mean_difference`` is ``group1.mean - group2.mean``; its sign follows the
    group order. The confidence interval is always two-sided, whatever the
    ``alternative``. ``levene_test`` is only computed for independent samples.
    """

    test_type: str
    t_statistic: float
    p_value: float
    degrees_of_freedom: float
    mean_difference: float
    confidence_interval: ConfidenceInterval
    cohens_d: float
    group1: GroupSummary
    group2: GroupSummary
    alternative: Alternative
    data_info: DataInfo
    levene_test: Optional[LeveneResult] = None
    diagnostics: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    method = "T-Test"

    @property
    def details(self) -> Dict[str, Any]:
        return {
            "test_type": self.test_type,
            "t_statistic": self.t_statistic,
            "p_value": self.p_value,
            "degrees_of_freedom": self.degrees_of_freedom,
            "mean_difference": self.mean_difference,
            "confidence_interval": asdict(self.confidence_interval),
            "cohens_d": self.cohens_d,
            "group1": asdict(self.group1),
            "group2": asdict(self.group2),
            "levene_test": asdict(self.levene_test) if self.levene_test is not None else None,
            "alternative": self.alternative.value,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "data_info": asdict(self.data_info),
            "details": self.details,
            "diagnostics": list(self.diagnostics),
            "warnings": list(self.warnings),
        }
