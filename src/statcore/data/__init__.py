"""
Tabular input layer for statcore.

This module turns heterogeneous tabular input into a typed ``Table``:
- CSV files (*.csv) and tab-separated files (*.tsv)
- Excel workbooks (*.xlsx, *.xls), one sheet at a time
- Pre-parsed rows from any other reader, via ``normalize``

Example usage:
    from statcore.data import normalize, read_data_file

    # From a file
    table = read_data_file("data.csv")

    # From rows parsed elsewhere
    table = normalize([{"dose": "1.5", "arm": "A"}], headers=["dose", "arm"])
    table.column_types["dose"]  # ColumnType.NUMERIC
"""

from statcore.data.spec import DataFormat
from statcore.data.table import (
    MISSING_VALUES,
    CellValue,
    ColumnType,
    Table,
    classify_column,
    discover_groups,
    format_group_key,
    normalize,
    numeric_values,
    parse_cell,
    partition_rows,
)
from statcore.data.loaders import infer_format, read_data_file
from statcore.data.validation import validate_columns

__all__ = [
    # Core types
    "CellValue",
    "ColumnType",
    "DataFormat",
    "Table",
    "MISSING_VALUES",
    # Normalization
    "normalize",
    "parse_cell",
    "classify_column",
    "format_group_key",
    "numeric_values",
    "discover_groups",
    "partition_rows",
    # Loaders
    "read_data_file",
    "infer_format",
    # Validation
    "validate_columns",
]
