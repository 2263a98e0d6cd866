"""CLI commands for statistical analysis."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, List, Optional

import typer

from statcore.exceptions import StatisticalAnalysisError

logger = logging.getLogger(__name__)

stats_app = typer.Typer(
    name="stats",
    help="Descriptive statistics and two-sample t-tests.",
    add_completion=False,
)


def _jsonable(value: Any) -> Any:
    """Replace NaN/inf floats with None so the output is strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _echo_result(result) -> None:
    typer.echo(json.dumps(_jsonable(result.to_dict()), indent=2, allow_nan=False))


def _fail(e: Exception) -> None:
    kind = getattr(e, "kind", type(e).__name__)
    typer.secho(f"Error [{kind}]: {e}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@stats_app.command("describe")
def describe_cmd(
    data: Path = typer.Option(..., "--data", help="Path to data file (.csv, .tsv, .xlsx, .xls)"),
    columns: Optional[List[str]] = typer.Option(
        None, "--columns", help="Columns to analyze (repeatable; default: all numeric)"
    ),
    group_by: Optional[str] = typer.Option(None, "--group-by", help="Grouping column"),
    sheet_name: Optional[str] = typer.Option(None, "--sheet-name", help="Excel sheet name"),
):
    """
    Compute descriptive statistics.

    Prints count, mean, std, quartiles, skewness and kurtosis per column as
    JSON, optionally broken down by a grouping column.

    Examples:
        statcore stats describe --data data.csv

        statcore stats describe --data data.xlsx --sheet-name Trial2 \\
            --columns score --group-by arm
    """
    from statcore.stats import run_descriptive_stats

    try:
        result = run_descriptive_stats(
            data, columns=columns or None, group_by=group_by, sheet_name=sheet_name
        )
    except (StatisticalAnalysisError, FileNotFoundError, ValueError) as e:
        logger.error(f"Statistical analysis error: descriptive_stats on {data}: {e}")
        _fail(e)

    _echo_result(result)


@stats_app.command("ttest")
def ttest_cmd(
    data: Path = typer.Option(..., "--data", help="Path to data file (.csv, .tsv, .xlsx, .xls)"),
    variable: str = typer.Option(..., "--variable", help="Numeric column to compare"),
    group_by_column: Optional[str] = typer.Option(
        None, "--group-by-column", help="Column with exactly two groups"
    ),
    paired: bool = typer.Option(False, "--paired", help="Run a paired t-test"),
    alternative: str = typer.Option(
        "two-sided", "--alternative", help="two-sided, less or greater"
    ),
    sheet_name: Optional[str] = typer.Option(None, "--sheet-name", help="Excel sheet name"),
):
    """
    Run an independent (Welch) or paired two-sample t-test.

    Prints the t statistic, p-value, degrees of freedom, 95% confidence
    interval, Cohen's d and (independent samples) Levene's test as JSON.

    Examples:
        statcore stats ttest --data data.csv --variable score --group-by-column arm

        # Paired: first half of the rows against the second half
        statcore stats ttest --data data.csv --variable score --paired
    """
    from statcore.stats import run_t_test

    try:
        result = run_t_test(
            data,
            variable,
            group_by_column=group_by_column,
            paired=paired,
            alternative=alternative,
            sheet_name=sheet_name,
        )
    except (StatisticalAnalysisError, FileNotFoundError, ValueError) as e:
        logger.error(f"Statistical analysis error: t_test on {data}: {e}")
        _fail(e)

    _echo_result(result)
