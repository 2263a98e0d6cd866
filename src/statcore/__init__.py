"""
statcore: Deterministic statistical analysis for tabular data.

This package provides:
- Normalization of CSV/TSV/Excel input into typed tables
- Descriptive statistics with optional grouping
- Welch and paired two-sample t-tests with effect size, CI and Levene's test
- A CLI that prints structured results as JSON
"""

__version__ = "0.1.0"

from statcore.config import AnalysisConfig
from statcore.data import Table, normalize, read_data_file
from statcore.stats import describe, run_descriptive_stats, run_t_test, t_test

__all__ = [
    "__version__",
    "AnalysisConfig",
    "Table",
    "normalize",
    "read_data_file",
    "describe",
    "t_test",
    "run_descriptive_stats",
    "run_t_test",
]
