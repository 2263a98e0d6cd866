"""Deterministic statistics over normalized tables.

This module computes exact, reproducible numbers directly from the data:

- Descriptive statistics (count, mean, std, quartiles, skewness, kurtosis),
  optionally broken down by a grouping column
- Independent (Welch) and paired two-sample t-tests with Cohen's d,
  a 95% confidence interval and Levene's test (Brown-Forsythe)
- Student's t and F distribution functions

Public API:
-----------
from statcore.stats import run_descriptive_stats, run_t_test

# Summary statistics per group
result = run_descriptive_stats("data.csv", columns=["score"], group_by="arm")

# Welch's t-test between the two arms
result = run_t_test("data.csv", variable="score", group_by_column="arm")
print(result.p_value, result.confidence_interval)
"""

from statcore.stats.api import (
    AnalysisAction,
    execute_analysis,
    run_descriptive_stats,
    run_t_test,
)
from statcore.stats.descriptive import compute_column_stats, describe
from statcore.stats.distributions import (
    Alternative,
    f_cdf,
    f_p_value,
    t_cdf,
    t_critical_value,
    t_p_value,
)
from statcore.stats.results import (
    ColumnStats,
    ConfidenceInterval,
    DataInfo,
    DescriptiveResult,
    GroupSummary,
    LeveneResult,
    TwoSampleTestResult,
)
from statcore.stats.two_sample import t_test

__all__ = [
    "AnalysisAction",
    "Alternative",
    "execute_analysis",
    "run_descriptive_stats",
    "run_t_test",
    "describe",
    "compute_column_stats",
    "t_test",
    "t_cdf",
    "t_critical_value",
    "f_cdf",
    "f_p_value",
    "t_p_value",
    "ColumnStats",
    "ConfidenceInterval",
    "DataInfo",
    "DescriptiveResult",
    "GroupSummary",
    "LeveneResult",
    "TwoSampleTestResult",
]
