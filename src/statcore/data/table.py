"""Typed table produced from raw tabular rows.

Cells are resolved once, here, into one of three values:

- ``float``: a finite number
- ``str``: any other non-missing text
- ``None``: a missing value

Nothing downstream re-interprets a cell.
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from statcore.config import AnalysisConfig, DEFAULT_CONFIG
from statcore.exceptions import DuplicateColumnError, EmptyDataError

logger = logging.getLogger(__name__)

CellValue = Union[float, str, None]
Row = Mapping[str, CellValue]

MISSING_VALUES = frozenset(["", "NA", "NaN", "nan", "null", "NULL", "N/A", "n/a", ".", "-"])

# Whole-string decimal literal; rejects "1.5kg", "0x10", "1_000" and "inf".
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ColumnType(str, Enum):
    """Column-wide type classification."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


def parse_cell(value: Any) -> CellValue:
    """
    Resolve a raw cell into a number, a string, or missing.

    Parameters
    ----------
    value : Any
        Raw cell. Text comes from CSV/TSV readers; Excel readers may also
        hand over numbers, ``None`` or NaN.

    Returns
    -------
    float, str or None
        ``None`` for missing values, ``float`` for finite numbers,
        otherwise the trimmed text.
    """
    if value is None:
        return None

    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(
        value, (bool, np.bool_)
    ):
        number = float(value)
        return number if math.isfinite(number) else None

    text = str(value).strip()
    if text in MISSING_VALUES:
        return None

    if _NUMBER_RE.fullmatch(text):
        number = float(text)
        if math.isfinite(number):
            return number

    return text


def classify_column(values: Sequence[CellValue]) -> ColumnType:
    """
    Classify a column as numeric or categorical.

    A column is numeric when more than half of its non-missing values are
    numbers. A column with no non-missing values is categorical.
    """
    present = [v for v in values if v is not None]
    if not present:
        return ColumnType.CATEGORICAL

    n_numeric = sum(1 for v in present if isinstance(v, float))
    return ColumnType.NUMERIC if n_numeric / len(present) > 0.5 else ColumnType.CATEGORICAL


def format_group_key(value: CellValue) -> str:
    """Stringify a non-missing cell for use as a group label.

    Integral numbers drop their fractional part so ``10.0`` groups as ``"10"``.
    """
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


@dataclass(frozen=True)
class Table:
    """
    Immutable typed table.

    Parameters
    ----------
    headers : Tuple[str, ...]
        Unique column names in file order
    rows : Tuple[Mapping[str, CellValue], ...]
        Read-only row records; every row has an entry for every header
    column_types : Mapping[str, ColumnType]
        Column-wide type classification
    missing_counts : Mapping[str, int]
        Number of missing cells per column
    warnings : Tuple[str, ...]
        Non-fatal warnings collected while reading and normalizing

    Examples
    --------
    >>> table = normalize([{"x": "1"}, {"x": "NA"}], ["x"])
    >>> table.numeric_values("x")
    array([1.])
    """

    headers: Tuple[str, ...]
    rows: Tuple[Row, ...]
    column_types: Mapping[str, ColumnType]
    missing_counts: Mapping[str, int]
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def numeric_columns(self) -> List[str]:
        return [h for h in self.headers if self.column_types[h] is ColumnType.NUMERIC]

    @property
    def categorical_columns(self) -> List[str]:
        return [h for h in self.headers if self.column_types[h] is ColumnType.CATEGORICAL]

    def column_values(self, column: str) -> List[CellValue]:
        return [row[column] for row in self.rows]

    def numeric_values(self, column: str) -> np.ndarray:
        """Numbers of ``column`` in row order, skipping missing and text cells."""
        return numeric_values(self.rows, column)

    def with_warnings(self, warnings: Sequence[str]) -> "Table":
        """Return a copy with ``warnings`` placed before the existing ones."""
        return Table(
            headers=self.headers,
            rows=self.rows,
            column_types=self.column_types,
            missing_counts=self.missing_counts,
            warnings=tuple(warnings) + self.warnings,
        )

    def to_frame(self) -> pd.DataFrame:
        """Build a new object-dtype DataFrame holding the typed cells."""
        return pd.DataFrame(
            [[row[h] for h in self.headers] for row in self.rows],
            columns=list(self.headers),
            dtype=object,
        )


def numeric_values(rows: Sequence[Row], column: str) -> np.ndarray:
    """Extract the numeric cells of ``column`` from ``rows`` as a float array."""
    return np.asarray([v for v in (row[column] for row in rows) if isinstance(v, float)], dtype=float)


def discover_groups(table: Table, column: str) -> List[str]:
    """
    List the distinct non-missing values of ``column`` in first-encountered order.

    The order is part of the contract: it decides which group is compared
    first in a two-sample test.
    """
    keys = [format_group_key(v) for v in table.column_values(column) if v is not None]
    return [str(k) for k in pd.unique(pd.Series(keys, dtype=object))]


def partition_rows(table: Table, column: str) -> Dict[str, List[Row]]:
    """
    Split rows by the stringified value of ``column``.

    Rows whose value is missing are left out. Partitions follow
    :func:`discover_groups` order.
    """
    partitions: Dict[str, List[Row]] = {key: [] for key in discover_groups(table, column)}
    for row in table.rows:
        value = row[column]
        if value is not None:
            partitions[format_group_key(value)].append(row)
    return partitions


def normalize(
    raw_rows: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    max_rows: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> Table:
    """
    Convert raw records into a typed :class:`Table`.

    Parameters
    ----------
    raw_rows : Sequence[Mapping[str, Any]]
        Records keyed by header; absent keys are treated as empty cells
    headers : Sequence[str]
        Column names; surrounding whitespace is stripped
    max_rows : int, optional
        Row limit; defaults to ``config.max_rows``
    config : AnalysisConfig, optional
        Policy constants

    Returns
    -------
    Table
        Typed table with column classification, missing counts and warnings

    Raises
    ------
    ValueError
        If ``max_rows`` is below 1
    EmptyDataError
        If ``raw_rows`` is empty
    DuplicateColumnError
        If a header name appears more than once
    """
    config = config or DEFAULT_CONFIG
    limit = config.max_rows if max_rows is None else max_rows
    if limit < 1:
        raise ValueError(f"max_rows must be >= 1, got {limit}")
    warnings: List[str] = []

    if len(raw_rows) == 0:
        raise EmptyDataError()

    raw_headers = list(headers)
    clean_headers = tuple(str(h).strip() for h in raw_headers)
    duplicates = [h for h, n in Counter(clean_headers).items() if n > 1]
    if duplicates:
        raise DuplicateColumnError(duplicates)

    if len(raw_rows) > limit:
        warnings.append(
            f"Row count ({len(raw_rows)}) exceeds limit of {limit}. "
            f"Only first {limit} rows will be used."
        )
        logger.warning(f"Truncating {len(raw_rows)} rows to {limit}")
        raw_rows = raw_rows[:limit]

    rows = tuple(
        MappingProxyType(
            {clean: parse_cell(record.get(raw, "")) for raw, clean in zip(raw_headers, clean_headers)}
        )
        for record in raw_rows
    )

    column_types: Dict[str, ColumnType] = {}
    missing_counts: Dict[str, int] = {}
    for header in clean_headers:
        values = [row[header] for row in rows]
        missing_counts[header] = sum(1 for v in values if v is None)
        column_types[header] = classify_column(values)

    n_rows = len(rows)
    for header in clean_headers:
        missing_rate = missing_counts[header] / n_rows
        if missing_rate > config.missing_rate_threshold:
            warnings.append(
                f'Column "{header}" has {missing_rate * 100:.1f}% missing values '
                f"({missing_counts[header]}/{n_rows})"
            )

    logger.debug(
        f"Normalized {n_rows} rows: "
        f"{sum(t is ColumnType.NUMERIC for t in column_types.values())} numeric, "
        f"{sum(t is ColumnType.CATEGORICAL for t in column_types.values())} categorical columns"
    )

    return Table(
        headers=clean_headers,
        rows=rows,
        column_types=MappingProxyType(column_types),
        missing_counts=MappingProxyType(missing_counts),
        warnings=tuple(warnings),
    )
