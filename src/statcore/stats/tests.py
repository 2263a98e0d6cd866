"""Two-sample test statistics (Welch, paired, Brown-Forsythe Levene)."""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from statcore.stats.distributions import f_p_value


def _variance(x: np.ndarray) -> float:
    return float(np.var(x, ddof=1)) if len(x) > 1 else 0.0


def welch_ttest(x: np.ndarray, y: np.ndarray) -> Dict[str, Any]:
    """Welch's t statistic (unequal variances).

    Args:
        x: First group values
        y: Second group values

    Returns:
        Dictionary with keys: statistic, df, se, mean_difference

    Notes:
        - statistic is 0 when the standard error is 0
        - df uses the Welch-Satterthwaite approximation and falls back to
          n1 + n2 - 2 when both variances are 0
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    n1, n2 = len(x), len(y)
    v1, v2 = _variance(x), _variance(y)

    a, b = v1 / n1, v2 / n2
    se = float(np.sqrt(a + b))
    mean_diff = float(np.mean(x) - np.mean(y))
    t_stat = 0.0 if se == 0 else mean_diff / se

    denom = a**2 / (n1 - 1) + b**2 / (n2 - 1)
    df = float(n1 + n2 - 2) if denom == 0 else (a + b) ** 2 / denom

    return {"statistic": t_stat, "df": df, "se": se, "mean_difference": mean_diff}


def paired_ttest(x: np.ndarray, y: np.ndarray) -> Dict[str, Any]:
    """Paired t statistic on per-pair differences ``x - y``.

    Args:
        x: First measurement of each pair
        y: Second measurement of each pair, same length as ``x``

    Returns:
        Dictionary with keys: statistic, df, se, mean_difference
    """
    diffs = np.asarray(x, dtype=float) - np.asarray(y, dtype=float)
    n = len(diffs)
    se = float(np.sqrt(_variance(diffs)) / np.sqrt(n))
    mean_diff = float(np.mean(diffs))
    t_stat = 0.0 if se == 0 else mean_diff / se

    return {"statistic": t_stat, "df": float(n - 1), "se": se, "mean_difference": mean_diff}


def levene_median(x: np.ndarray, y: np.ndarray) -> Dict[str, Any]:
    """Levene's test for equal variances, Brown-Forsythe (median) variant.

    Runs a one-way ANOVA on absolute deviations from each group's median.

    Args:
        x: First group values
        y: Second group values

    Returns:
        Dictionary with keys: statistic, p_value, df1, df2

    Notes:
        Returns F = 0, p = 1 when the within-group sum of squares is 0.
    """
    dev1 = np.abs(np.asarray(x, dtype=float) - np.median(x))
    dev2 = np.abs(np.asarray(y, dtype=float) - np.median(y))

    n1, n2 = len(dev1), len(dev2)
    N = n1 + n2
    mean1, mean2 = float(np.mean(dev1)), float(np.mean(dev2))
    grand_mean = (n1 * mean1 + n2 * mean2) / N

    ss_between = n1 * (mean1 - grand_mean) ** 2 + n2 * (mean2 - grand_mean) ** 2
    ss_within = float(np.sum((dev1 - mean1) ** 2) + np.sum((dev2 - mean2) ** 2))

    df1, df2 = 1, N - 2

    if ss_within == 0:
        return {"statistic": 0.0, "p_value": 1.0, "df1": df1, "df2": df2}

    F_stat = (ss_between / df1) / (ss_within / df2)
    return {"statistic": F_stat, "p_value": f_p_value(F_stat, df1, df2), "df1": df1, "df2": df2}
