"""Result rows, their text rendering, and column bookkeeping for selects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from tinyvsql.sql_struct import Column, CompareCondition

RAW_TYPE = "RAW"


@dataclass
class Row:
    """A result row: the record tag it came from and its column values."""

    tag: int
    values: list[Any] = field(default_factory=list)

    def render(self, amount: Optional[int] = None, with_tag: bool = False) -> str:
        """Render the first *amount* values (all if None) in the table format."""
        shown = self.values if amount is None else self.values[:amount]
        body = "| " + "".join(f"{value} | " for value in shown)
        return f"{self.tag} {body}" if with_tag else body

    def __str__(self) -> str:
        return self.render()


def serialize_rows_header(column_names: Iterable[str]) -> str:
    """Build the header line: names separated by pipes."""
    return "| " + "".join(f"{name} | " for name in column_names)


def serialize_rows(
    rows: Iterable[Row], amount: Optional[int] = None, with_tag: bool = False
) -> str:
    """Render each row on its own line."""
    return "".join(row.render(amount, with_tag) + "\n" for row in rows)


def column_value_type(columns: Sequence[Column], col_name: str) -> str:
    """Type of the last table column named *col_name*, or the raw type if none."""
    for column in reversed(columns):
        if column.col_name == col_name:
            return column.value_type if column.value_type is not None else RAW_TYPE
    return RAW_TYPE


def set_condition_types(
    columns: Sequence[Column], conditions: Iterable[CompareCondition]
) -> None:
    """Give each condition's column the type of the matching table column."""
    for condition in conditions:
        condition.col.value_type = column_value_type(columns, condition.col.col_name)


def merge_used_columns(
    columns: Sequence[Column], conditions: Iterable[CompareCondition]
) -> tuple[list[Column], int]:
    """Append condition columns that are not selected.

    Returns the combined column list and the number of originally selected
    columns, which are the ones shown in the result.
    """
    selected = {column.col_name for column in columns}
    merged = list(columns)
    merged.extend(c.col for c in conditions if c.col.col_name not in selected)
    return merged, len(columns)


def condition_on_column(
    conditions: Iterable[CompareCondition], col_name: str
) -> Optional[CompareCondition]:
    """First condition that applies to *col_name*, or None."""
    return next((c for c in conditions if c.col.col_name == col_name), None)