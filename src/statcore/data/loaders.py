"""File reading for the analysis engine.

This module turns CSV, TSV and Excel files into raw records and hands them
to :func:`statcore.data.table.normalize`. It owns the file-level checks
(existence, format, size, sheet selection); cell typing happens in the
normalizer.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import pandas as pd

from statcore.config import AnalysisConfig, DEFAULT_CONFIG
from statcore.data.spec import DataFormat
from statcore.data.table import Table, normalize
from statcore.exceptions import EmptyDataError, FileTooLargeError, SheetNotFoundError

logger = logging.getLogger(__name__)

RawRecords = List[Dict[str, Any]]


def infer_format(path: Path) -> DataFormat:
    """
    Infer data format from file path.

    Parameters
    ----------
    path : Path
        Path to data file

    Returns
    -------
    DataFormat
        Inferred format

    Raises
    ------
    UnsupportedFormatError
        If format cannot be inferred
    """
    return DataFormat.from_path(path)


def read_data_file(
    path: Union[Path, str],
    sheet_name: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> Table:
    """
    Read a CSV, TSV or Excel file into a typed :class:`Table`.

    Parameters
    ----------
    path : Path or str
        Path to a .csv, .tsv, .xlsx or .xls file
    sheet_name : str, optional
        Sheet to read from Excel files; defaults to the first sheet
    config : AnalysisConfig, optional
        Policy constants (file size and row limits)

    Returns
    -------
    Table
        Typed table; reader warnings come before normalizer warnings

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    UnsupportedFormatError
        If the suffix is not supported
    FileTooLargeError
        If the file exceeds ``config.max_file_size_bytes``
    SheetNotFoundError
        If ``sheet_name`` is not in the workbook
    EmptyDataError
        If the file has no data rows

    Examples
    --------
    >>> table = read_data_file("measurements.csv")
    >>> table = read_data_file("measurements.xlsx", sheet_name="Trial 2")
    """
    config = config or DEFAULT_CONFIG
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    fmt = infer_format(path)

    size = path.stat().st_size
    if size > config.max_file_size_bytes:
        raise FileTooLargeError(size, config.max_file_size_bytes)

    logger.info(f"Reading table from {path} (format: {fmt.value})")

    if fmt.is_excel:
        headers, records, warnings = _read_excel(path, sheet_name)
    else:
        headers, records, warnings = _read_delimited(path, fmt.delimiter)

    table = normalize(records, headers, config=config)

    logger.info(
        f"Loaded {table.n_rows} rows, {len(table.headers)} columns "
        f"({len(table.numeric_columns)} numeric)"
    )

    return table.with_warnings(warnings)


def _read_delimited(path: Path, delimiter: str) -> Tuple[List[str], RawRecords, List[str]]:
    """Read a CSV/TSV file with every cell kept as text."""
    warnings: List[str] = []

    with open(path, "rb") as handle:
        if handle.read(len(codecs.BOM_UTF8)) == codecs.BOM_UTF8:
            warnings.append("BOM character detected and removed")

    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            header=None,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as e:
        raise EmptyDataError(f"File is empty (no data rows found): {path}") from e

    if len(df) < 2:
        raise EmptyDataError(f"File is empty (no data rows found): {path}")

    headers, records = _frame_to_records(df)
    return headers, records, warnings


def _read_excel(path: Path, sheet_name: Optional[str]) -> Tuple[List[str], RawRecords, List[str]]:
    """Read one sheet of an Excel workbook, keeping numeric cells as numbers."""
    warnings: List[str] = []

    with pd.ExcelFile(path) as workbook:
        sheet_names = [str(s) for s in workbook.sheet_names]

        if sheet_name is not None:
            if sheet_name not in sheet_names:
                raise SheetNotFoundError(sheet_name, sheet_names)
            target = sheet_name
        else:
            if not sheet_names:
                raise EmptyDataError(f"Excel file contains no sheets: {path}")
            target = sheet_names[0]
            if len(sheet_names) > 1:
                listed = ", ".join(f'"{s}"' for s in sheet_names)
                warnings.append(
                    f'Multiple sheets found: {listed}. Using first sheet: "{target}". '
                    "Specify sheet_name to select a different sheet."
                )

        df = workbook.parse(sheet_name=target, header=None, dtype=object)

    if len(df) < 2:
        raise EmptyDataError(f'Excel sheet "{target}" is empty (no data rows found)')

    headers, records = _frame_to_records(df)
    return headers, records, warnings


def _header_name(value: Any, position: int) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)) or str(value).strip() == "":
        return f"Unnamed: {position}"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _frame_to_records(df: pd.DataFrame) -> Tuple[List[str], RawRecords]:
    """Split a headerless frame into its first row, as headers, and records.

    Header names are kept as written, duplicates included.
    """
    headers = [_header_name(v, i) for i, v in enumerate(df.iloc[0])]
    records = [dict(zip(headers, row)) for row in df.iloc[1:].itertuples(index=False, name=None)]
    return headers, records
