"""Public API for file-level statistical analysis."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union

from statcore.config import AnalysisConfig
from statcore.data.loaders import read_data_file
from statcore.stats.descriptive import describe
from statcore.stats.distributions import Alternative
from statcore.stats.results import DescriptiveResult, TwoSampleTestResult
from statcore.stats.two_sample import t_test, validate_t_test_params

logger = logging.getLogger(__name__)


class AnalysisAction(str, Enum):
    """Analyses the engine can run."""

    DESCRIPTIVE_STATS = "descriptive_stats"
    T_TEST = "t_test"


def _with_file_path(result, data_path: Path):
    return replace(result, data_info=replace(result.data_info, file_path=str(data_path)))


def run_descriptive_stats(
    data_path: Union[Path, str],
    columns: Optional[List[str]] = None,
    group_by: Optional[str] = None,
    sheet_name: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> DescriptiveResult:
    """Read a data file and compute descriptive statistics.

    Args:
        data_path: Path to a .csv, .tsv, .xlsx or .xls file
        columns: Columns to analyze (default: all numeric columns)
        group_by: Optional grouping column
        sheet_name: Excel sheet to read (default: first sheet)
        config: Policy constants

    Returns:
        DescriptiveResult with ``data_info.file_path`` set

    Example:
        >>> from statcore.stats import run_descriptive_stats
        >>> result = run_descriptive_stats("scores.csv", columns=["value"], group_by="group")
        >>> [s.mean for s in result.groups["A"]]
        [20.0]
    """
    data_path = Path(data_path)
    table = read_data_file(data_path, sheet_name=sheet_name, config=config)
    result = describe(table, columns=columns, group_by=group_by, config=config)
    return _with_file_path(result, data_path)


def run_t_test(
    data_path: Union[Path, str],
    variable: str,
    group_by_column: Optional[str] = None,
    paired: bool = False,
    alternative: Union[Alternative, str] = Alternative.TWO_SIDED,
    sheet_name: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> TwoSampleTestResult:
    """Read a data file and run a two-sample t-test.

    Parameters that do not depend on the data are checked before the file is
    read.

    Args:
        data_path: Path to a .csv, .tsv, .xlsx or .xls file
        variable: Numeric column to compare
        group_by_column: Column with exactly two groups (required unless paired)
        paired: Paired test (default: False)
        alternative: "two-sided", "less" or "greater"
        sheet_name: Excel sheet to read (default: first sheet)
        config: Policy constants

    Returns:
        TwoSampleTestResult with ``data_info.file_path`` set
    """
    validate_t_test_params(variable, group_by_column, paired)
    alternative = Alternative(alternative)

    data_path = Path(data_path)
    table = read_data_file(data_path, sheet_name=sheet_name, config=config)
    result = t_test(
        table,
        variable,
        group_by_column=group_by_column,
        paired=paired,
        alternative=alternative,
        config=config,
    )
    return _with_file_path(result, data_path)


def execute_analysis(
    action: Union[AnalysisAction, str], data_path: Union[Path, str], **params: Any
) -> Union[DescriptiveResult, TwoSampleTestResult]:
    """Route an analysis request to the matching method.

    Args:
        action: "descriptive_stats" or "t_test"
        data_path: Path to the data file
        **params: Keyword arguments of :func:`run_descriptive_stats` or :func:`run_t_test`

    Returns:
        The structured result of the analysis

    Raises:
        ValueError: If ``action`` is unknown
    """
    try:
        action = AnalysisAction(action)
    except ValueError:
        valid = [a.value for a in AnalysisAction]
        raise ValueError(f"Unknown action: {action!r}. Expected one of {valid}") from None

    logger.info(f"Statistical analysis started: {action.value} on {data_path}")

    if action is AnalysisAction.DESCRIPTIVE_STATS:
        result = run_descriptive_stats(data_path, **params)
    else:
        result = run_t_test(data_path, **params)

    logger.info(f"Statistical analysis completed: {action.value}")
    return result
