"""Two-sample t-test engine (independent Welch or paired)."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

import numpy as np

from statcore.config import AnalysisConfig, DEFAULT_CONFIG
from statcore.data.table import Table, numeric_values, partition_rows
from statcore.data.validation import validate_columns
from statcore.exceptions import (
    GroupCountError,
    InsufficientSampleError,
    MissingGroupColumnError,
    MissingVariableError,
    OddSampleSizeError,
    UnequalPairedSizeError,
)
from statcore.stats.descriptive import sample_std
from statcore.stats.distributions import Alternative, t_critical_value, t_p_value
from statcore.stats.effects import cohen_d, paired_cohen_d
from statcore.stats.results import (
    ConfidenceInterval,
    DataInfo,
    GroupSummary,
    LeveneResult,
    TwoSampleTestResult,
)
from statcore.stats.tests import levene_median, paired_ttest, welch_ttest

logger = logging.getLogger(__name__)

FIRST_HALF = "First half"
SECOND_HALF = "Second half"


def validate_t_test_params(
    variable: Optional[str], group_by_column: Optional[str], paired: bool
) -> None:
    """Check the parameters that do not depend on the data.

    Raises:
        MissingVariableError: If ``variable`` is empty
        MissingGroupColumnError: If an independent test has no group column
    """
    if not variable:
        raise MissingVariableError()
    if not paired and not group_by_column:
        raise MissingGroupColumnError()


def split_groups(
    table: Table, variable: str, group_by_column: Optional[str]
) -> Tuple[str, np.ndarray, str, np.ndarray]:
    """Build the two samples to compare.

    With a group column, rows are split by its two distinct non-missing values
    in first-encountered order. Without one, the numeric values of
    ``variable`` are split into first and second half by position.

    Returns:
        Tuple of (group1_name, group1_values, group2_name, group2_values)

    Raises:
        GroupCountError: If the group column does not have exactly 2 groups
        OddSampleSizeError: If halves are requested from an odd number of values
    """
    if group_by_column:
        partitions = partition_rows(table, group_by_column)
        if len(partitions) != 2:
            raise GroupCountError(group_by_column, list(partitions))

        (name1, rows1), (name2, rows2) = partitions.items()
        return name1, numeric_values(rows1, variable), name2, numeric_values(rows2, variable)

    values = table.numeric_values(variable)
    if len(values) % 2 != 0:
        raise OddSampleSizeError(len(values))

    half = len(values) // 2
    return FIRST_HALF, values[:half], SECOND_HALF, values[half:]


def t_test(
    table: Table,
    variable: str,
    group_by_column: Optional[str] = None,
    paired: bool = False,
    alternative: Union[Alternative, str] = Alternative.TWO_SIDED,
    config: Optional[AnalysisConfig] = None,
) -> TwoSampleTestResult:
    """Run an independent (Welch) or paired two-sample t-test.

    Args:
        table: Normalized table
        variable: Numeric column to compare
        group_by_column: Column with exactly two groups; optional when paired
        paired: Paired test on per-pair differences (default: False)
        alternative: "two-sided", "less" or "greater" (default: "two-sided")
        config: Policy constants (CI level, Levene threshold, small-sample threshold)

    Returns:
        TwoSampleTestResult with statistic, p-value, 95% CI, Cohen's d and,
        for independent samples, Levene's test

    Raises:
        MissingVariableError, MissingGroupColumnError, UnknownColumnError,
        GroupCountError, OddSampleSizeError, InsufficientSampleError,
        UnequalPairedSizeError: On invalid input, before any computation

    Example:
        >>> result = t_test(table, "score", group_by_column="arm")
        >>> result.group1.name, result.mean_difference
        ('X', -30.0)
    """
    config = config or DEFAULT_CONFIG

    validate_t_test_params(variable, group_by_column, paired)
    alternative = Alternative(alternative)

    required = [variable] + ([group_by_column] if group_by_column else [])
    validate_columns(table.headers, required)

    name1, x, name2, y = split_groups(table, variable, group_by_column)
    n1, n2 = len(x), len(y)

    if n1 < 2 or n2 < 2:
        raise InsufficientSampleError(name1, n1, name2, n2)

    if paired and n1 != n2:
        raise UnequalPairedSizeError(name1, n1, name2, n2)

    diagnostics: List[str] = []

    if paired:
        result = paired_ttest(x, y)
        d = paired_cohen_d(x, y)
    else:
        result = welch_ttest(x, y)
        d = cohen_d(x, y)

    t_stat, df, se = result["statistic"], result["df"], result["se"]
    mean_diff = result["mean_difference"]
    p_value = t_p_value(t_stat, df, alternative)

    mean1, mean2 = float(np.mean(x)), float(np.mean(y))
    t_crit = t_critical_value(config.ci_alpha, df)
    ci = ConfidenceInterval(lower=mean_diff - t_crit * se, upper=mean_diff + t_crit * se)

    levene = None
    if not paired:
        lev = levene_median(x, y)
        levene = LeveneResult(f_statistic=lev["statistic"], p_value=lev["p_value"])
        if levene.p_value < config.levene_alpha:
            diagnostics.append(
                f"Levene's test is significant (p={levene.p_value:.4f}), suggesting unequal "
                "variances. Welch's t-test is appropriate."
            )

    if n1 < config.small_sample_threshold or n2 < config.small_sample_threshold:
        diagnostics.append(
            f'Small sample size: "{name1}" (n={n1}), "{name2}" (n={n2}). '
            "Consider non-parametric alternatives if normality is violated."
        )

    used = n1 + n2
    logger.info(
        f"{'Paired' if paired else 'Welch'} t-test on '{variable}': "
        f"t={t_stat:.4f}, df={df:.2f}, p={p_value:.4g}"
    )

    return TwoSampleTestResult(
        test_type="paired" if paired else "independent",
        t_statistic=t_stat,
        p_value=p_value,
        degrees_of_freedom=df,
        mean_difference=mean_diff,
        confidence_interval=ci,
        cohens_d=d,
        group1=GroupSummary(name=name1, n=n1, mean=mean1, std=sample_std(x)),
        group2=GroupSummary(name=name2, n=n2, mean=mean2, std=sample_std(y)),
        alternative=alternative,
        data_info=DataInfo(
            total_rows=table.n_rows, used_rows=used, excluded_rows=table.n_rows - used
        ),
        levene_test=levene,
        diagnostics=diagnostics,
        warnings=list(table.warnings),
    )
