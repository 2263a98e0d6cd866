"""Typed errors raised by the analysis engine.

Every error carries a stable ``kind`` string so callers can branch on the
failure type without parsing the message. All of them are input validation
failures and subclass ``ValueError``.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence


def _quoted(names: Iterable[str]) -> str:
    return ", ".join(f'"{name}"' for name in names)


class StatisticalAnalysisError(ValueError):
    """Base class for all analysis input errors."""

    kind: str = "statistical_analysis"


class EmptyDataError(StatisticalAnalysisError):
    """Raised when the input has no data rows."""

    kind = "empty_data"

    def __init__(self, message: str = "Data is empty (no data rows found)"):
        super().__init__(message)


class DuplicateColumnError(StatisticalAnalysisError):
    """Raised when the header row contains the same name twice."""

    kind = "duplicate_column"

    def __init__(self, duplicates: Sequence[str]):
        self.duplicates: List[str] = list(duplicates)
        super().__init__(f"Duplicate column names: {_quoted(self.duplicates)}")


class NoNumericColumnsError(StatisticalAnalysisError):
    """Raised when no column qualifies as numeric."""

    kind = "no_numeric_columns"

    def __init__(self, available: Sequence[str] = ()):
        self.available: List[str] = list(available)
        super().__init__(
            f"No numeric columns found in the data. Available columns: {_quoted(self.available)}"
        )


class UnknownColumnError(StatisticalAnalysisError):
    """Raised when requested columns are not in the table headers."""

    kind = "unknown_column"

    def __init__(self, missing: Sequence[str], available: Sequence[str]):
        self.missing: List[str] = list(missing)
        self.available: List[str] = list(available)
        super().__init__(
            f"Column(s) not found: {_quoted(self.missing)}. "
            f"Available columns: {_quoted(self.available)}"
        )


class MissingVariableError(StatisticalAnalysisError):
    kind = "missing_variable"

    def __init__(self):
        super().__init__('Parameter "variable" is required for t_test')


class MissingGroupColumnError(StatisticalAnalysisError):
    kind = "missing_group_column"

    def __init__(self):
        super().__init__(
            'Parameter "group_by_column" is required for independent t_test. '
            "Set paired=True for a paired test."
        )


class GroupCountError(StatisticalAnalysisError):
    """Raised when a grouping column does not have exactly two groups."""

    kind = "group_count"

    def __init__(self, column: str, groups: Sequence[str]):
        self.column = column
        self.groups: List[str] = list(groups)
        self.count = len(self.groups)
        super().__init__(
            f'Group column "{column}" must have exactly 2 unique non-missing values, '
            f"but found {self.count}: {', '.join(self.groups)}"
        )


class OddSampleSizeError(StatisticalAnalysisError):
    kind = "odd_sample_size"

    def __init__(self, n: int):
        self.n = n
        super().__init__(
            "For paired t-test without group_by_column, the number of observations "
            f"must be even. Got {n}."
        )


class InsufficientSampleError(StatisticalAnalysisError):
    """Raised when either group has fewer than two usable observations."""

    kind = "insufficient_sample"

    def __init__(self, group1: str, n1: int, group2: str, n2: int):
        self.group1, self.n1 = group1, n1
        self.group2, self.n2 = group2, n2
        super().__init__(
            "Each group must have at least 2 observations. "
            f'Group "{group1}": {n1}, Group "{group2}": {n2}'
        )


class UnequalPairedSizeError(StatisticalAnalysisError):
    kind = "unequal_paired_size"

    def __init__(self, group1: str, n1: int, group2: str, n2: int):
        self.group1, self.n1 = group1, n1
        self.group2, self.n2 = group2, n2
        super().__init__(
            "For paired t-test, groups must have equal sizes. "
            f'Group "{group1}": {n1}, Group "{group2}": {n2}'
        )


class UnsupportedFormatError(StatisticalAnalysisError):
    kind = "unsupported_format"

    def __init__(self, suffix: str, supported: Sequence[str]):
        self.suffix = suffix
        self.supported: List[str] = list(supported)
        super().__init__(
            f'Unsupported file format: "{suffix}". '
            f"Supported formats: {', '.join(self.supported)}"
        )


class FileTooLargeError(StatisticalAnalysisError):
    kind = "file_too_large"

    def __init__(self, size_bytes: int, limit_bytes: int):
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        super().__init__(
            f"File size ({size_bytes / 1024 / 1024:.1f}MB) exceeds limit of "
            f"{limit_bytes / 1024 / 1024:.0f}MB"
        )


class SheetNotFoundError(StatisticalAnalysisError):
    kind = "sheet_not_found"

    def __init__(self, sheet_name: str, available: Sequence[str]):
        self.sheet_name = sheet_name
        self.available: List[str] = list(available)
        super().__init__(
            f'Sheet "{sheet_name}" not found. Available sheets: {_quoted(self.available)}'
        )
