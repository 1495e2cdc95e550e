"""Tagging of column values and filtering them against a comparison."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from tinyvsql.sql_struct import Comparator

TaggedValue = tuple[int, Any]


def _satisfies(comparator: Comparator, value: Any, compare_value: Any) -> bool:
    if comparator is Comparator.BIGGER:
        return value > compare_value
    if comparator is Comparator.LESS:
        return value < compare_value
    if comparator is Comparator.EQUAL:
        return value == compare_value
    if comparator is Comparator.NOT_EQUAL:
        return value != compare_value
    raise ValueError(f"unsupported comparator: {comparator!r}")


def tag_values(values: Iterable[Any], start: int = 0) -> list[TaggedValue]:
    """Pair each value with its record tag, counting up from *start*."""
    return list(enumerate(values, start))


def filter_values(
    values: Iterable[Any],
    comparator: Optional[Comparator],
    compare_value: Any,
) -> list[TaggedValue]:
    """Tag the values of a column and keep those that pass the comparison.

    Each kept value is compared as ``value <comparator> compare_value``.
    With no comparator every value is kept.
    """
    tagged = tag_values(values)
    if comparator is None:
        return tagged
    return [
        (tag, value)
        for tag, value in tagged
        if _satisfies(comparator, value, compare_value)
    ]


def filter_equal(values: Iterable[Any], value: Any) -> list[TaggedValue]:
    """Tagged values of a column equal to *value*."""
    return [(tag, item) for tag, item in tag_values(values) if value == item]