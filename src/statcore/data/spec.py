"""Data format types for file reading."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from statcore.exceptions import UnsupportedFormatError


class DataFormat(str, Enum):
    """Supported data formats."""

    CSV = "csv"
    TSV = "tsv"
    XLSX = "xlsx"
    XLS = "xls"

    @property
    def is_excel(self) -> bool:
        return self in (DataFormat.XLSX, DataFormat.XLS)

    @property
    def delimiter(self) -> str:
        return "\t" if self is DataFormat.TSV else ","

    @classmethod
    def supported_suffixes(cls) -> list:
        return [f".{fmt.value}" for fmt in cls]

    @classmethod
    def from_path(cls, path: Path) -> DataFormat:
        """
        Infer format from path.

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
            If the suffix is not .csv, .tsv, .xlsx or .xls
        """
        suffix = Path(path).suffix.lower()
        for fmt in cls:
            if suffix == f".{fmt.value}":
                return fmt

        raise UnsupportedFormatError(suffix, cls.supported_suffixes())
