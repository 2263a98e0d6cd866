"""Effect size calculations for two-sample comparisons."""

from __future__ import annotations

import numpy as np


def cohen_d(x: np.ndarray, y: np.ndarray) -> float:
    """Calculate Cohen's d for independent samples.

    Args:
        x: First group values
        y: Second group values

    Returns:
        (mean(x) - mean(y)) / pooled standard deviation

    Notes:
        Returns 0 when the pooled standard deviation is 0.
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    nx, ny = len(x), len(y)

    # Sample variances
    sx = np.var(x, ddof=1) if nx > 1 else 0.0
    sy = np.var(y, ddof=1) if ny > 1 else 0.0

    if nx + ny - 2 <= 0:
        return 0.0

    # Pooled variance
    sp2 = ((nx - 1) * sx + (ny - 1) * sy) / (nx + ny - 2)
    pooled_std = float(np.sqrt(sp2))

    if pooled_std == 0:
        return 0.0

    return float((np.mean(x) - np.mean(y)) / pooled_std)


def paired_cohen_d(x: np.ndarray, y: np.ndarray) -> float:
    """Calculate Cohen's d for paired samples (d_z).

    Args:
        x: First measurement of each pair
        y: Second measurement of each pair, same length as ``x``

    Returns:
        mean(x - y) / std(x - y); 0 when the differences do not vary
    """
    diffs = np.asarray(x, dtype=float) - np.asarray(y, dtype=float)
    diff_std = float(np.std(diffs, ddof=1)) if len(diffs) > 1 else 0.0

    if diff_std == 0:
        return 0.0

    return float(np.mean(diffs) / diff_std)
