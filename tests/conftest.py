"""Pytest configuration and fixtures."""

import pytest
import numpy as np
import pandas as pd
from pathlib import Path

from statcore.data import normalize


def make_table(columns):
    """Build a normalized table from a dict of column -> list of raw cells."""
    headers = list(columns)
    n_rows = len(next(iter(columns.values())))
    rows = [{h: columns[h][i] for h in headers} for i in range(n_rows)]
    return normalize(rows, headers)


@pytest.fixture
def table_factory():
    """Factory building a normalized table from column -> raw cells."""
    return make_table


@pytest.fixture
def grouped_table():
    """Two groups, A=[10,20,30] and B=[40,50,60]."""
    return make_table(
        {
            "group": ["A", "A", "A", "B", "B", "B"],
            "value": ["10", "20", "30", "40", "50", "60"],
        }
    )


@pytest.fixture
def two_arm_table():
    """Two well-separated normal samples of 40 observations each."""
    rng = np.random.default_rng(42)
    control = rng.normal(50.0, 5.0, size=40)
    treatment = rng.normal(60.0, 5.0, size=40)

    return make_table(
        {
            "arm": ["control"] * 40 + ["treatment"] * 40,
            "score": [f"{v:.6f}" for v in np.concatenate([control, treatment])],
        }
    )


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""

    def _write(content: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scores_df():
    """Small mixed-type frame used for file round trips."""
    return pd.DataFrame(
        {
            "name": ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank"],
            "group": ["A", "A", "A", "B", "B", "B"],
            "score": [10, 20, 30, 40, 50, 60],
        }
    )
