import pytest

from tinyvsql.joins import (
    different_col_and,
    extend_rows_and,
    inner_join_columns,
    values_to_rows,
)
from tinyvsql.rows import Row


def test_values_to_rows_keeps_tags_and_values():
    rows = values_to_rows([(0, "a"), (3, "b")])
    assert [(r.tag, r.values) for r in rows] == [(0, ["a"]), (3, ["b"])]


def test_values_to_rows_empty():
    assert values_to_rows([]) == []


def test_different_col_and_keeps_common_tags_in_right_order():
    left = [(0, "x0"), (1, "x1"), (2, "x2")]
    right = [(2, 20), (0, 0), (5, 50)]
    rows = different_col_and(left, right)
    assert [(r.tag, r.values) for r in rows] == [(2, ["x2", 20]), (0, ["x0", 0])]


def test_different_col_and_no_overlap():
    assert different_col_and([(0, 1)], [(1, 2)]) == []


def test_extend_rows_and_drops_unmatched_rows():
    rows = [Row(0, ["a", 1]), Row(1, ["b", 2]), Row(2, ["c", 3])]
    result = extend_rows_and(rows, [(2, "z"), (1, "y")])
    assert [r.tag for r in result] == [2, 1]
    assert result[0].values == ["c", 3, "z"]
    assert result[1].values == ["b", 2, "y"]


def test_extend_rows_and_mutates_matched_rows():
    row = Row(4, ["a"])
    extend_rows_and([row], [(4, "b")])
    assert row.values == ["a", "b"]


def test_inner_join_single_column():
    rows = inner_join_columns([[(1, "a"), (2, "b")]])
    assert [(r.tag, r.values) for r in rows] == [(1, ["a"]), (2, ["b"])]


def test_inner_join_three_columns():
    cols = [
        [(0, "n0"), (1, "n1"), (2, "n2")],
        [(0, 10), (2, 12)],
        [(2, 2.5), (0, 0.5), (1, 1.5)],
    ]
    rows = inner_join_columns(cols)
    assert [(r.tag, r.values) for r in rows] == [
        (2, ["n2", 12, 2.5]),
        (0, ["n0", 10, 0.5]),
    ]


def test_inner_join_rows_have_one_value_per_column():
    cols = [[(t, t) for t in range(5)] for _ in range(4)]
    rows = inner_join_columns(cols)
    assert len(rows) == 5
    assert all(len(r.values) == 4 for r in rows)


def test_inner_join_without_columns_raises():
    with pytest.raises(ValueError):
        inner_join_columns([])