"""Tests for descriptive statistics."""

import dataclasses
import math

import numpy as np
import pytest
from scipy import stats

from statcore.config import AnalysisConfig
from statcore.exceptions import NoNumericColumnsError, UnknownColumnError
from statcore.stats.descriptive import (
    compute_column_stats,
    describe,
    kurtosis,
    percentile,
    sample_std,
    skewness,
)


# ============================================================================
# Column statistics
# ============================================================================


class TestColumnStatistics:
    """Tests for the per-column helpers."""

    def test_known_values(self):
        values = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        col = compute_column_stats("x", values, subset_size=8)

        assert col.count == 8
        assert col.mean == pytest.approx(5.0)
        assert col.std == pytest.approx(2.138090, abs=1e-6)
        assert col.min == 2.0
        assert col.max == 9.0
        assert col.q1 == pytest.approx(4.0)
        assert col.median == pytest.approx(4.5)
        assert col.q3 == pytest.approx(5.5)
        assert col.missing_count == 0

    def test_interpolated_quartiles(self):
        col = compute_column_stats("x", np.arange(1.0, 11.0), subset_size=10)

        assert col.q1 == pytest.approx(3.25)
        assert col.median == pytest.approx(5.5)
        assert col.q3 == pytest.approx(7.75)
        assert col.std == pytest.approx(3.027650, abs=1e-6)

    def test_order_does_not_matter(self):
        a = compute_column_stats("x", np.array([9.0, 2.0, 5.0, 4.0]), subset_size=4)
        b = compute_column_stats("x", np.array([2.0, 4.0, 5.0, 9.0]), subset_size=4)

        assert dataclasses.astuple(a)[1:] == pytest.approx(dataclasses.astuple(b)[1:])

    def test_percentile_matches_numpy(self):
        values = np.sort(np.random.default_rng(3).normal(size=37))
        for p in (0, 10, 25, 50, 75, 90, 100):
            assert percentile(values, p) == pytest.approx(np.percentile(values, p))

    def test_single_value(self):
        col = compute_column_stats("x", np.array([4.0]), subset_size=1)

        assert col.std == 0.0
        assert col.q1 == col.median == col.q3 == 4.0
        assert col.skewness == 0.0
        assert col.kurtosis == 0.0

    def test_no_usable_values(self):
        col = compute_column_stats("x", np.array([]), subset_size=5)

        assert col.count == 0
        assert col.missing_count == 5
        for name in ("mean", "std", "min", "q1", "median", "q3", "max", "skewness", "kurtosis"):
            assert math.isnan(getattr(col, name))

    def test_sample_std(self):
        assert sample_std(np.array([1.0])) == 0.0
        assert sample_std(np.array([5.0, 5.0, 5.0])) == 0.0
        assert sample_std(np.array([1.0, 3.0])) == pytest.approx(np.sqrt(2.0))

    def test_skewness_matches_unbiased_estimator(self):
        values = np.random.default_rng(11).exponential(size=50)
        mean, std = float(np.mean(values)), sample_std(values)

        assert skewness(values, mean, std) == pytest.approx(stats.skew(values, bias=False))

    def test_skewness_of_symmetric_data(self):
        values = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        assert skewness(values, 3.0, sample_std(values)) == pytest.approx(0.0, abs=1e-12)

    def test_kurtosis_known_value(self):
        values = np.array([1.0, 2.0, 3.0, 4.0])
        # mean(z^4) = 0.9225, raw = 0.9225 * 20 / 6, correction = 13.5
        assert kurtosis(values, 2.5, sample_std(values)) == pytest.approx(-10.425)

    def test_shape_statistics_below_minimum_size(self):
        two = np.array([1.0, 2.0])
        three = np.array([1.0, 2.0, 4.0])

        assert skewness(two, 1.5, sample_std(two)) == 0.0
        assert kurtosis(three, float(np.mean(three)), sample_std(three)) == 0.0

    def test_constant_column(self):
        col = compute_column_stats("x", np.full(6, 3.0), subset_size=6)

        assert col.std == 0.0
        assert col.skewness == 0.0
        assert col.kurtosis == 0.0


# ============================================================================
# describe
# ============================================================================


class TestDescribe:
    """Tests for the describe engine."""

    def test_defaults_to_numeric_columns(self, grouped_table):
        result = describe(grouped_table)

        assert [c.column for c in result.columns] == ["value"]
        assert result.columns[0].mean == pytest.approx(35.0)
        assert result.groups is None
        assert result.group_by is None

    def test_grouped(self, grouped_table):
        result = describe(grouped_table, columns=["value"], group_by="group")

        assert list(result.groups) == ["A", "B"]
        assert result.groups["A"][0].mean == pytest.approx(20.0)
        assert result.groups["B"][0].mean == pytest.approx(50.0)
        assert result.groups["A"][0].std == pytest.approx(10.0)
        assert result.group_by == "group"

    def test_group_diagnostics(self, grouped_table):
        result = describe(grouped_table, group_by="group")

        assert result.diagnostics == [
            "Groups (group): A (n=3), B (n=3)",
            "Small sample size in groups: A (n=3), B (n=3). Results may be unreliable.",
            "Small sample size (n=6). Summary statistics may not be representative.",
        ]

    def test_group_size_counts_usable_values(self, table_factory):
        """Group sizes follow the usable values of the first analyzed column."""
        table = table_factory(
            {
                "g": ["A", "A", "A", "B", "B", "B"],
                "x": ["1", "NA", "NA", "4", "5", "6"],
                "y": ["1", "2", "3", "4", "NA", "6"],
            }
        )
        result = describe(table, columns=["x", "y"], group_by="g")

        assert result.diagnostics[:2] == [
            "Groups (g): A (n=1), B (n=3)",
            "Small sample size in groups: A (n=1), B (n=3). Results may be unreliable.",
        ]

    def test_group_size_for_non_numeric_column(self, grouped_table):
        result = describe(grouped_table, columns=["group"], group_by="group")

        assert result.diagnostics[0] == "Groups (group): A (n=0), B (n=0)"

    def test_no_diagnostics_for_large_samples(self, grouped_table):
        result = describe(grouped_table, config=AnalysisConfig(small_sample_threshold=2))

        assert result.diagnostics == []

    def test_data_info(self, grouped_table):
        result = describe(grouped_table)

        assert result.data_info.total_rows == 6
        assert result.data_info.used_rows == 6
        assert result.data_info.excluded_rows == 0
        assert result.data_info.file_path is None

    def test_missing_count_includes_text_cells(self, table_factory):
        table = table_factory({"x": ["1", "2", "n.d.", "NA", "5"]})
        col = describe(table, columns=["x"]).columns[0]

        assert col.count == 3
        assert col.missing_count == 2

    def test_group_with_no_usable_values(self, table_factory):
        table = table_factory({"g": ["A", "A", "B", "B"], "x": ["1", "2", "NA", "NA"]})
        result = describe(table, columns=["x"], group_by="g")

        empty = result.groups["B"][0]
        assert empty.count == 0
        assert empty.missing_count == 2
        assert math.isnan(empty.mean)

    def test_rows_missing_group_are_excluded(self, table_factory):
        table = table_factory({"g": ["A", "", "A", "B"], "x": ["1", "100", "3", "4"]})
        result = describe(table, columns=["x"], group_by="g")

        assert result.groups["A"][0].mean == pytest.approx(2.0)
        assert result.columns[0].count == 4

    def test_numeric_group_keys(self, table_factory):
        table = table_factory({"dose": ["10", "10.0", "20", "20"], "x": ["1", "3", "5", "7"]})
        result = describe(table, columns=["x"], group_by="dose")

        assert list(result.groups) == ["10", "20"]
        assert result.groups["10"][0].mean == pytest.approx(2.0)

    def test_warnings_are_propagated(self, table_factory):
        table = table_factory({"x": ["1", "NA", "NA", "4"]})
        result = describe(table)

        assert result.warnings == list(table.warnings)
        assert len(result.warnings) == 1

    def test_unknown_columns(self, grouped_table):
        with pytest.raises(UnknownColumnError) as exc_info:
            describe(grouped_table, columns=["value", "score", "dose"])

        assert exc_info.value.missing == ["score", "dose"]

    def test_unknown_group_by(self, grouped_table):
        with pytest.raises(UnknownColumnError):
            describe(grouped_table, group_by="arm")

    def test_no_numeric_columns(self, table_factory):
        table = table_factory({"name": ["a", "b"], "city": ["x", "y"]})

        with pytest.raises(NoNumericColumnsError) as exc_info:
            describe(table)

        assert exc_info.value.available == ["name", "city"]

    def test_categorical_column_requested_explicitly(self, grouped_table):
        col = describe(grouped_table, columns=["group"]).columns[0]

        assert col.count == 0
        assert col.missing_count == 6

    def test_deterministic(self, two_arm_table):
        first = describe(two_arm_table, group_by="arm")
        second = describe(two_arm_table, group_by="arm")

        assert first == second

    def test_to_dict(self, grouped_table):
        data = describe(grouped_table, group_by="group").to_dict()

        assert data["method"] == "Descriptive Statistics"
        assert set(data) == {"method", "data_info", "details", "diagnostics", "warnings"}
        assert data["details"]["group_by"] == "group"
        assert data["details"]["columns"][0]["missing_count"] == 0
        assert list(data["details"]["groups"]) == ["A", "B"]
