"""Descriptive statistics with optional group-by breakdown."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from statcore.config import AnalysisConfig, DEFAULT_CONFIG
from statcore.data.table import Table, numeric_values, partition_rows
from statcore.data.validation import validate_columns
from statcore.exceptions import NoNumericColumnsError
from statcore.stats.results import ColumnStats, DataInfo, DescriptiveResult

logger = logging.getLogger(__name__)


def sample_std(values: np.ndarray) -> float:
    """Sample standard deviation (ddof=1); 0 when n <= 1."""
    if len(values) <= 1:
        return 0.0
    return float(np.std(values, ddof=1))


def percentile(sorted_values: np.ndarray, p: float) -> float:
    """Percentile by linear interpolation between closest ranks.

    Args:
        sorted_values: Values in ascending order
        p: Percentile in [0, 100]

    Returns:
        Value at index ``(p/100) * (n-1)``, interpolated; NaN for empty input

    Notes:
        Matches ``numpy.percentile(..., method="linear")``.
    """
    n = len(sorted_values)
    if n == 0:
        return np.nan
    if n == 1:
        return float(sorted_values[0])

    index = (p / 100.0) * (n - 1)
    lower = int(np.floor(index))
    upper = int(np.ceil(index))
    if lower == upper:
        return float(sorted_values[lower])

    fraction = index - lower
    return float(sorted_values[lower] * (1.0 - fraction) + sorted_values[upper] * fraction)


def skewness(values: np.ndarray, mean: float, std: float) -> float:
    """Bias-corrected (adjusted Fisher-Pearson) sample skewness.

    Returns 0 when n < 3 or std == 0.
    """
    n = len(values)
    if n < 3 or std == 0:
        return 0.0

    m3 = float(np.mean(((values - mean) / std) ** 3))
    return m3 * n * n / ((n - 1) * (n - 2))


def kurtosis(values: np.ndarray, mean: float, std: float) -> float:
    """Bias-corrected excess kurtosis.

    Returns 0 when n < 4 or std == 0.
    """
    n = len(values)
    if n < 4 or std == 0:
        return 0.0

    m4 = float(np.mean(((values - mean) / std) ** 4))
    raw = m4 * n * (n + 1) / ((n - 1) * (n - 2) * (n - 3))
    correction = 3.0 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return raw - correction


def compute_column_stats(column: str, values: np.ndarray, subset_size: int) -> ColumnStats:
    """Compute statistics for the usable values of one column.

    Args:
        column: Column name
        values: Numeric, non-missing values of the column in the subset
        subset_size: Rows in the subset (whole table or one group)

    Returns:
        ColumnStats; every numeric field is NaN when ``values`` is empty
    """
    values = np.asarray(values, dtype=float)
    n = len(values)

    if n == 0:
        return ColumnStats(
            column=column,
            count=0,
            mean=np.nan,
            std=np.nan,
            min=np.nan,
            q1=np.nan,
            median=np.nan,
            q3=np.nan,
            max=np.nan,
            missing_count=subset_size,
            skewness=np.nan,
            kurtosis=np.nan,
        )

    sorted_values = np.sort(values)
    mean_val = float(np.sum(values) / n)
    std_val = sample_std(values)

    return ColumnStats(
        column=column,
        count=n,
        mean=mean_val,
        std=std_val,
        min=float(sorted_values[0]),
        q1=percentile(sorted_values, 25),
        median=percentile(sorted_values, 50),
        q3=percentile(sorted_values, 75),
        max=float(sorted_values[-1]),
        missing_count=subset_size - n,
        skewness=skewness(values, mean_val, std_val),
        kurtosis=kurtosis(values, mean_val, std_val),
    )


def describe(
    table: Table,
    columns: Optional[Sequence[str]] = None,
    group_by: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> DescriptiveResult:
    """Compute descriptive statistics for a table.

    Args:
        table: Normalized table
        columns: Columns to analyze; defaults to every numeric column
        group_by: Optional column whose distinct non-missing values split the rows
        config: Policy constants (small-sample threshold)

    Returns:
        DescriptiveResult with whole-table and, when grouped, per-group statistics

    Raises:
        UnknownColumnError: If a requested column or ``group_by`` is not in the table
        NoNumericColumnsError: If ``columns`` is omitted and no column is numeric

    Example:
        >>> result = describe(table, columns=["value"], group_by="group")
        >>> result.groups["A"][0].mean
        20.0
    """
    config = config or DEFAULT_CONFIG

    if columns:
        validate_columns(table.headers, columns)
        target_columns = list(columns)
    else:
        target_columns = table.numeric_columns
        if not target_columns:
            raise NoNumericColumnsError(table.headers)

    if group_by:
        validate_columns(table.headers, [group_by])

    diagnostics: List[str] = []
    total_rows = table.n_rows

    column_stats = [
        compute_column_stats(col, table.numeric_values(col), total_rows) for col in target_columns
    ]

    groups: Optional[Dict[str, List[ColumnStats]]] = None
    if group_by:
        groups = {}
        group_sizes: Dict[str, int] = {}
        for name, rows in partition_rows(table, group_by).items():
            groups[name] = [
                compute_column_stats(col, numeric_values(rows, col), len(rows))
                for col in target_columns
            ]
            # Group size is the usable count of the first analyzed column.
            group_sizes[name] = groups[name][0].count

        diagnostics.append(
            f"Groups ({group_by}): "
            + ", ".join(f"{name} (n={n})" for name, n in group_sizes.items())
        )

        small = [(name, n) for name, n in group_sizes.items() if n < config.small_sample_threshold]
        if small:
            diagnostics.append(
                "Small sample size in groups: "
                + ", ".join(f"{name} (n={n})" for name, n in small)
                + ". Results may be unreliable."
            )

    if total_rows < config.small_sample_threshold:
        diagnostics.append(
            f"Small sample size (n={total_rows}). "
            "Summary statistics may not be representative."
        )

    logger.info(
        f"Described {len(target_columns)} columns over {total_rows} rows"
        + (f", {len(groups)} groups by '{group_by}'" if groups is not None else "")
    )

    return DescriptiveResult(
        data_info=DataInfo(total_rows=total_rows, used_rows=total_rows, excluded_rows=0),
        columns=column_stats,
        group_by=group_by,
        groups=groups,
        diagnostics=diagnostics,
        warnings=list(table.warnings),
    )
