import pytest

from tinyvsql.sql_struct import Column, Comparator, NodeType, OperatorKind
from tinyvsql.statements import (
    CreateDatabaseSql,
    CreateTableSql,
    DeleteFromTableSql,
    InsertIntoTableSql,
    SelectFromOneTableSql,
    SqlStatement,
)
from tinyvsql.tokens import tokenize


def test_create_database():
    sql = CreateDatabaseSql.from_tokens(tokenize("CREATE DATABASE shop;"))
    assert sql.db_name == "shop"
    assert str(SqlStatement(NodeType.CREATE_DATABASE, sql)) == "CREATE DATABASE shop;"


def test_create_database_too_short():
    with pytest.raises(ValueError):
        CreateDatabaseSql.from_tokens(tokenize("CREATE DATABASE"))


def test_create_table_columns():
    sql = CreateTableSql.from_tokens(tokenize("CREATE TABLE items (id INT, name VCHAR);"))
    assert sql.table_name == "items"
    assert sql.columns == [Column("id", "INT"), Column("name", "VCHAR")]
    text = str(SqlStatement(NodeType.CREATE_TABLE, sql))
    assert text == "CREATE TABLE items (id INT, name VCHAR, );"


def test_insert_values_stay_raw():
    sql = InsertIntoTableSql.from_tokens(
        tokenize("INSERT INTO items (id, name) VALUES (1, 'pen');")
    )
    assert sql.table_name == "items"
    assert [c.col_name for c in sql.columns] == ["id", "name"]
    assert sql.values == ["1", "'pen'"]
    text = str(SqlStatement(NodeType.INSERT_INTO_TABLE, sql))
    assert text == "INSERT INTO items (id, name, ) VALUES (1, 'pen', );"


def test_select_star():
    sql = SelectFromOneTableSql.from_tokens(tokenize("SELECT * FROM t;"))
    assert sql.columns == [Column("*")]
    assert sql.table_name == "t"
    assert sql.conditions == []
    assert sql.operations == []


def test_select_where_and():
    sql = SelectFromOneTableSql.from_tokens(
        tokenize("SELECT a, b FROM t WHERE c > 0 AND d = 1;")
    )
    assert [c.col_name for c in sql.columns] == ["a", "b"]
    assert [(c.col.col_name, c.condition, c.compare_value) for c in sql.conditions] == [
        ("c", Comparator.BIGGER, "0"),
        ("d", Comparator.EQUAL, "1"),
    ]
    assert len(sql.operations) == 1
    op = sql.operations[0]
    assert op.operator is OperatorKind.AND
    assert op.left_leaf is sql.conditions[0]
    assert op.right_leaf is sql.conditions[1]
    assert op.left_op is None


def test_select_chained_operations():
    sql = SelectFromOneTableSql.from_tokens(
        tokenize("SELECT a FROM t WHERE c = 'x' OR d > 2 AND e < 3;")
    )
    assert len(sql.conditions) == 3
    first, second = sql.operations
    assert first.operator is OperatorKind.OR
    assert second.operator is OperatorKind.AND
    assert second.left_op is first
    assert second.left_leaf is None
    assert second.right_leaf.condition is Comparator.LESS


def test_select_not_equal_after_and():
    sql = SelectFromOneTableSql.from_tokens(
        tokenize("SELECT a FROM t WHERE c > 0 AND d != 1;")
    )
    last = sql.conditions[-1]
    assert last.condition is Comparator.NOT_EQUAL
    assert last.compare_value == "1"


def test_select_not_equal_after_where_is_rejected():
    with pytest.raises(ValueError):
        SelectFromOneTableSql.from_tokens(tokenize("SELECT a FROM t WHERE c != 1;"))


def test_select_asterisk_with_other_columns_is_rejected():
    with pytest.raises(ValueError, match=r"\*"):
        SelectFromOneTableSql.from_tokens(tokenize("SELECT *, a FROM t;"))


def test_select_and_without_condition_is_rejected():
    with pytest.raises(ValueError, match="no pre condition"):
        SelectFromOneTableSql.from_tokens(tokenize("SELECT a FROM t AND b = 1;"))


def test_select_missing_semicolon_is_rejected():
    with pytest.raises(ValueError):
        SelectFromOneTableSql.from_tokens(tokenize("SELECT a FROM t"))


def test_select_str():
    sql = SelectFromOneTableSql.from_tokens(
        tokenize("SELECT a, b FROM t WHERE c > 0 AND d = 1;")
    )
    text = str(SqlStatement(NodeType.SELECT_FROM_ONE_TABLE, sql))
    assert text == "SELECT a, b,  FROM t WHERE c > 0 d = 1 "


def test_delete_table_name():
    sql = DeleteFromTableSql.from_tokens(tokenize("DELETE FROM orders;"))
    assert sql.table_name == "orders"


def test_statement_rejects_mismatched_body():
    with pytest.raises(ValueError, match="can not init AST"):
        SqlStatement(NodeType.CREATE_TABLE, CreateDatabaseSql("x"))


def test_statement_rejects_delete():
    with pytest.raises(ValueError):
        SqlStatement(NodeType.DELETE_FROM_TABLE, DeleteFromTableSql("t"))