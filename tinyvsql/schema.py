"""Lookups of columns in a table's column list."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from tinyvsql.sql_struct import Column


def find_column_index(col_name: str, columns: Sequence[Column]) -> Optional[int]:
    """Position of the first column named *col_name*, or None."""
    return next(
        (index for index, column in enumerate(columns) if column.col_name == col_name),
        None,
    )


def check_column(table_columns: Sequence[Column], column: Column) -> bool:
    """Return True if *column* exists in the table, copying the table's type onto it."""
    index = find_column_index(column.col_name, table_columns)
    if index is None:
        return False
    column.value_type = table_columns[index].value_type
    return True


def check_columns_exist(table_columns: Sequence[Column], columns: Iterable[Column]) -> bool:
    """Return True if every column exists in the table; types are filled in along the way."""
    return all(check_column(table_columns, column) for column in columns)