"""AND / OR combination of two filter results taken from the same column."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

TaggedValue = tuple[int, Any]


def same_col_and(
    left: Iterable[TaggedValue], right: Iterable[TaggedValue]
) -> list[TaggedValue]:
    """Entries of *right* whose tag also appears in *left*, in *right*'s order."""
    left_tags = {tag for tag, _ in left}
    return [item for item in right if item[0] in left_tags]


def same_col_or(
    left: Sequence[TaggedValue], right: Iterable[TaggedValue]
) -> list[TaggedValue]:
    """All of *left*, then the entries of *right* whose tag is not in *left*."""
    result = list(left)
    left_tags = {tag for tag, _ in result}
    result.extend(item for item in right if item[0] not in left_tags)
    return result