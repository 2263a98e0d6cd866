"""Student's t and F distribution functions.

Thin wrappers around ``scipy.stats`` that turn test statistics into
p-values and critical values. Both distributions are evaluated through the
regularized incomplete beta function, which stays accurate from df=1 up to
tens of thousands.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from scipy import stats


class Alternative(str, Enum):
    """Direction of the alternative hypothesis."""

    TWO_SIDED = "two-sided"
    LESS = "less"
    GREATER = "greater"


def t_cdf(t: float, df: float) -> float:
    """Cumulative distribution function of Student's t.

    Args:
        t: Test statistic (any real)
        df: Degrees of freedom (> 0, need not be an integer)

    Returns:
        P(T <= t)
    """
    return float(stats.t.cdf(t, df))


def t_critical_value(alpha: float, df: float) -> float:
    """Two-sided critical value of Student's t.

    Args:
        alpha: Significance level (e.g. 0.05 for a 95% interval)
        df: Degrees of freedom

    Returns:
        The quantile at cumulative probability ``1 - alpha/2``
    """
    return float(stats.t.ppf(1.0 - alpha / 2.0, df))


def f_cdf(f: float, df1: float, df2: float) -> float:
    """Cumulative distribution function of the F distribution.

    Args:
        f: F statistic (>= 0)
        df1: Numerator degrees of freedom
        df2: Denominator degrees of freedom

    Returns:
        P(F <= f)
    """
    return float(stats.f.cdf(f, df1, df2))


def f_p_value(f: float, df1: float, df2: float) -> float:
    """Right-tail p-value of an F statistic, ``1 - f_cdf(f, df1, df2)``."""
    return float(stats.f.sf(f, df1, df2))


def t_p_value(
    t: float, df: float, alternative: Union[Alternative, str] = Alternative.TWO_SIDED
) -> float:
    """Compute a p-value from a t statistic.

    Args:
        t: Test statistic
        df: Degrees of freedom
        alternative: "two-sided", "less" or "greater"

    Returns:
        p-value in [0, 1]

    Notes:
        - less: P(T <= t)
        - greater: P(T >= t)
        - two-sided: 2 * min of the two tails
    """
    alternative = Alternative(alternative)
    lower = t_cdf(t, df)
    upper = float(stats.t.sf(t, df))

    if alternative is Alternative.LESS:
        return lower
    if alternative is Alternative.GREATER:
        return upper
    return min(1.0, 2.0 * min(lower, upper))
