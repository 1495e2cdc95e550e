"""Outer (OR) joins of filtered columns, filling gaps with a placeholder value."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from tinyvsql.rows import Row

TaggedValue = tuple[int, Any]

NONE_VALUE = "None"


def _by_tag(rows: Iterable[Row]) -> list[Row]:
    return sorted(rows, key=lambda row: row.tag)


def different_col_or(
    left: Iterable[TaggedValue], right: Iterable[TaggedValue]
) -> list[Row]:
    """Rows for tags present in either column, sorted by tag.

    A side that has no value for a tag is filled with ``"None"``.
    """
    pending = dict(left)
    result: list[Row] = []
    for tag, value in right:
        if tag in pending:
            result.append(Row(tag, [pending.pop(tag), value]))
        else:
            result.append(Row(tag, [NONE_VALUE, value]))
    result.extend(
        Row(tag, [value, NONE_VALUE]) for tag, value in sorted(pending.items())
    )
    return _by_tag(result)


def extend_rows_or(rows: Sequence[Row], right: Iterable[TaggedValue]) -> list[Row]:
    """Extend rows with a further column, keeping tags present on either side.

    Matching rows get the right value appended; rows with no match get
    ``"None"``; right values with no row start a new row padded with
    ``"None"``. The result is sorted by tag; existing rows are extended in place.
    """
    if not rows or not rows[0].values:
        raise ValueError("rows to extend must be non-empty and carry values")
    width = len(rows[0].values)
    pending = {row.tag: row for row in rows}
    result: list[Row] = []
    for tag, value in right:
        row = pending.pop(tag, None)
        if row is not None:
            row.values.append(value)
            result.append(row)
        else:
            result.append(Row(tag, [NONE_VALUE] * width + [value]))
    for tag in sorted(pending):
        row = pending[tag]
        row.values.append(NONE_VALUE)
        result.append(row)
    return _by_tag(result)