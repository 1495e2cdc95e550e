"""Inner joins of filtered columns into result rows, matched by record tag."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from tinyvsql.rows import Row

TaggedValue = tuple[int, Any]


def values_to_rows(column: Iterable[TaggedValue]) -> list[Row]:
    """Turn each tagged value of a single column into a one-value row."""
    return [Row(tag, [value]) for tag, value in column]


def different_col_and(
    left: Iterable[TaggedValue], right: Iterable[TaggedValue]
) -> list[Row]:
    """Rows for tags present in both columns, in *right*'s order.

    Each row holds the left value followed by the right value.
    """
    by_tag = {tag: value for tag, value in left}
    return [
        Row(tag, [by_tag[tag], value]) for tag, value in right if tag in by_tag
    ]


def extend_rows_and(rows: Iterable[Row], right: Iterable[TaggedValue]) -> list[Row]:
    """Extend rows whose tag appears in *right* with that value.

    Rows without a match are dropped; the result follows *right*'s order.
    The kept rows are extended in place.
    """
    by_tag = {row.tag: row for row in rows}
    result: list[Row] = []
    for tag, value in right:
        row = by_tag.get(tag)
        if row is not None:
            row.values.append(value)
            result.append(row)
    return result


def inner_join_columns(cols: Sequence[Iterable[TaggedValue]]) -> list[Row]:
    """Join any number of tagged columns on their tags, keeping common tags only."""
    if not cols:
        raise ValueError("at least one column is needed to build rows")
    if len(cols) == 1:
        return values_to_rows(cols[0])
    rows = different_col_and(cols[0], cols[1])
    for column in cols[2:]:
        rows = extend_rows_and(rows, column)
    return rows