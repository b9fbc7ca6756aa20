# ==============================================
# CSV Columns
# ==============================================
#
# PURPOSE:
#   Split CSV data into columns so that each column can be profiled
#   on its own (first names, last names, dates, ...).
#
# EXAMPLE:
#   "firstname","lastname"
#   "Aaron","Aaberg"
#   "Abbey","Aadland"
#     → [["Aaron", "Abbey"], ["Aaberg", "Aadland"]]
#
# FUNCTIONS:
# ----------
# - read_as_columns(data, delimiter=",", has_headers=True, quotechar='"')
#     -> (headers, columns)
# - read_column(path, column, ...) -> list[str]
# - read_lines(path) -> list[str]
#
# ==============================================

import csv
import io
from pathlib import Path
from typing import List, Optional, TextIO, Tuple, Union


def read_as_columns(
    data: Union[str, TextIO],
    delimiter: str = ",",
    has_headers: bool = True,
    quotechar: str = '"'
) -> Tuple[List[str], List[List[str]]]:
    """
    Parse CSV rows and split the fields into per-column lists.

    Rows longer than the ones before them add new columns; shorter
    rows simply contribute nothing to the missing columns.

    Args:
        data: CSV text or an open text stream
        delimiter: Field delimiter
        has_headers: Treat the first row as column names
        quotechar: Quote character (doubled quotes are unescaped)

    Returns:
        (headers, columns); headers is empty when has_headers is False
    """
    stream = io.StringIO(data) if isinstance(data, str) else data
    reader = csv.reader(stream, delimiter=delimiter, quotechar=quotechar, doublequote=True)

    headers: List[str] = []
    columns: List[List[str]] = []

    for row_number, row in enumerate(reader):
        if has_headers and row_number == 0:
            headers = list(row)
            columns = [[] for _ in headers]
            continue

        if len(columns) < len(row):
            columns.extend([] for _ in range(len(row) - len(columns)))

        for index, value in enumerate(row):
            columns[index].append(value)

    return headers, columns


def read_column(
    path: Union[str, Path],
    column: Union[str, int],
    delimiter: str = ",",
    has_headers: bool = True,
    skip_empty: bool = True
) -> List[str]:
    """
    Read one column of a CSV file.

    Args:
        path: CSV file path
        column: Header name, or 0-based index
        delimiter: Field delimiter
        has_headers: Whether the first row holds column names
        skip_empty: Drop empty cells (they cannot be profiled)

    Returns:
        The values of the column, in row order

    Raises:
        KeyError: If the column does not exist
    """
    # utf-8-sig drops a leading BOM so the first header name still matches
    with open(path, newline="", encoding="utf-8-sig") as f:
        headers, columns = read_as_columns(f, delimiter=delimiter, has_headers=has_headers)

    index = _resolve_column(column, headers, len(columns))
    values = columns[index]
    if skip_empty:
        values = [value for value in values if value != ""]
    return values


def read_lines(path: Union[str, Path], skip_empty: bool = True) -> List[str]:
    """Read one sample per line from a plain text file."""
    with open(path, encoding="utf-8-sig") as f:
        lines = [line.rstrip("\r\n") for line in f]
    if skip_empty:
        lines = [line for line in lines if line != ""]
    return lines


def _resolve_column(column: Union[str, int], headers: List[str], width: int) -> int:
    index: Optional[int] = None

    if isinstance(column, int):
        index = column
    elif column in headers:
        index = headers.index(column)
    elif column.isdigit():
        index = int(column)

    if index is None or not 0 <= index < width:
        raise KeyError(f"Column {column!r} not found (headers: {headers})")
    return index
