"""Column validation utilities."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from statcore.exceptions import UnknownColumnError


def validate_columns(headers: Sequence[str], requested: Iterable[str]) -> None:
    """
    Validate that requested columns exist in the table headers.

    Parameters
    ----------
    headers : Sequence[str]
        Available column names
    requested : Iterable[str]
        Column names asked for by the caller

    Raises
    ------
    UnknownColumnError
        Listing every unmatched name and the available headers
    """
    available = set(headers)
    missing: List[str] = []
    for col in requested:
        if col not in available and col not in missing:
            missing.append(col)

    if missing:
        raise UnknownColumnError(missing, list(headers))
