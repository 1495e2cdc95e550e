"""Statement objects built from the tokens of a recognised SQL statement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from tinyvsql.sql_struct import (
    Column,
    CompareCondition,
    NodeType,
    Operation,
    parse_comparator,
    parse_operator,
)
from tinyvsql.tokens import Token, TokenType

_VALUE_TYPES = (TokenType.NUMBER, TokenType.STRING)


def _token_at(tokens: Sequence[Token], index: int) -> Token:
    if 0 <= index < len(tokens):
        return tokens[index]
    raise ValueError("Sql wrong, statement ends too early")


def _type_at(tokens: Sequence[Token], index: int) -> Optional[TokenType]:
    return tokens[index].type if 0 <= index < len(tokens) else None


def _is_op(token: Token, symbol: str) -> bool:
    return token.type is TokenType.OPERATOR and token.value == symbol


def _read_list(tokens: Sequence[Token], start: int) -> tuple[list[str], int]:
    """Read comma separated items up to a closing bracket.

    Returns the item texts and the position of the bracket (or the end).
    """
    items: list[str] = []
    for index, token in enumerate(tokens[start:], start):
        if _is_op(token, ")"):
            return items, index
        if _is_op(token, ","):
            continue
        items.append(token.value)
    return items, max(start, len(tokens))


@dataclass
class CreateDatabaseSql:
    """``CREATE DATABASE db_name ;``"""

    db_name: str

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "CreateDatabaseSql":
        return cls(_token_at(tokens, 2).value)


@dataclass
class CreateTableSql:
    """``CREATE TABLE name (col type, ...) ;``"""

    table_name: str
    columns: list[Column] = field(default_factory=list)

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "CreateTableSql":
        table_name = _token_at(tokens, 2).value
        columns: list[Column] = []
        pending: Optional[str] = None
        for token in tokens[4:]:
            if _is_op(token, ")"):
                break
            if _is_op(token, ","):
                continue
            if pending is None:
                pending = token.value
            else:
                columns.append(Column(pending, token.value))
                pending = None
        return cls(table_name, columns)


@dataclass
class InsertIntoTableSql:
    """``INSERT INTO name (cols...) VALUES (values...) ;``; values stay raw text."""

    table_name: str
    columns: list[Column] = field(default_factory=list)
    values: list[str] = field(default_factory=list)

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "InsertIntoTableSql":
        table_name = _token_at(tokens, 2).value
        names, stop = _read_list(tokens, 4)
        # skip ") VALUES ("
        values, _ = _read_list(tokens, stop + 3)
        return cls(table_name, [Column(name) for name in names], values)


@dataclass
class SelectFromOneTableSql:
    """``SELECT cols FROM table [WHERE cond [AND|OR cond]...] ;``"""

    table_name: str
    columns: list[Column] = field(default_factory=list)
    conditions: list[CompareCondition] = field(default_factory=list)
    operations: list[Operation] = field(default_factory=list)

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "SelectFromOneTableSql":
        columns: list[Column] = []
        pos = 1
        saw_asterisk = False
        while pos < len(tokens):
            token = tokens[pos]
            if token.type is TokenType.KEYWORD and token.value == "FROM":
                break
            if saw_asterisk:
                raise ValueError("Sql wrong, * can not be used with other column name")
            pos += 1
            if _is_op(token, ","):
                continue
            columns.append(Column(token.value))
            saw_asterisk = token.value == "*"

        pos += 1  # FROM
        table_name = _token_at(tokens, pos).value
        pos += 1

        conditions: list[CompareCondition] = []
        operations: list[Operation] = []
        pending: Optional[CompareCondition] = None
        previous_op: Optional[Operation] = None

        while pos < len(tokens):
            token = tokens[pos]
            if _is_op(token, ";"):
                break

            if token.type is TokenType.KEYWORD and token.value in ("AND", "OR"):
                if pending is None and previous_op is None:
                    raise ValueError("Sql wrong, use AND/OR but has no pre condition")
                condition, width = cls._read_joined_condition(tokens, pos)
                conditions.append(condition)
                operation = Operation(
                    operator=parse_operator(token.value),
                    right_leaf=condition,
                    left_leaf=pending,
                    left_op=previous_op if pending is None else None,
                )
                pending = None
                previous_op = operation
                operations.append(operation)
                pos += width
                continue

            if (
                token.value == "WHERE"
                and _type_at(tokens, pos + 1) is TokenType.IDENTIFIER
                and _type_at(tokens, pos + 2) is TokenType.OPERATOR
                and _type_at(tokens, pos + 3) in _VALUE_TYPES
            ):
                condition = CompareCondition(
                    Column(tokens[pos + 1].value),
                    parse_comparator(tokens[pos + 2].value),
                    tokens[pos + 3].value,
                )
                conditions.append(condition)
                pending = condition
                pos += 4
                continue

            break

        if not (pos == len(tokens) - 1 and _is_op(tokens[pos], ";")):
            raise ValueError("Sql wrong, not end with ; or can not be parsed")

        return cls(table_name, columns, conditions, operations)

    @staticmethod
    def _read_joined_condition(
        tokens: Sequence[Token], pos: int
    ) -> tuple[CompareCondition, int]:
        """Read ``col op value`` after AND/OR; the comparator may span two tokens."""
        if (
            _type_at(tokens, pos + 1) is TokenType.IDENTIFIER
            and _type_at(tokens, pos + 2) is TokenType.OPERATOR
            and _type_at(tokens, pos + 3) in _VALUE_TYPES
        ):
            return (
                CompareCondition(
                    Column(tokens[pos + 1].value),
                    parse_comparator(tokens[pos + 2].value),
                    tokens[pos + 3].value,
                ),
                4,
            )
        if (
            _type_at(tokens, pos + 1) is TokenType.IDENTIFIER
            and _type_at(tokens, pos + 2) is TokenType.OPERATOR
            and _type_at(tokens, pos + 3) is TokenType.OPERATOR
            and _type_at(tokens, pos + 4) in _VALUE_TYPES
        ):
            return (
                CompareCondition(
                    Column(tokens[pos + 1].value),
                    parse_comparator(tokens[pos + 2].value + tokens[pos + 3].value),
                    tokens[pos + 4].value,
                ),
                5,
            )
        raise ValueError("Sql wrong, condition can not be parse")


@dataclass
class DeleteFromTableSql:
    """``DELETE FROM table ...``; only the table name is extracted."""

    table_name: str = ""

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "DeleteFromTableSql":
        return cls(_token_at(tokens, 2).value)


StatementBody = Union[
    CreateDatabaseSql, CreateTableSql, InsertIntoTableSql, SelectFromOneTableSql
]

_STATEMENT_TYPES: dict[NodeType, type] = {
    NodeType.CREATE_DATABASE: CreateDatabaseSql,
    NodeType.CREATE_TABLE: CreateTableSql,
    NodeType.INSERT_INTO_TABLE: InsertIntoTableSql,
    NodeType.SELECT_FROM_ONE_TABLE: SelectFromOneTableSql,
}


@dataclass
class SqlStatement:
    """A syntax tree node: the kind of statement and its parsed body."""

    node_type: NodeType
    statement: StatementBody

    def __post_init__(self) -> None:
        expected = _STATEMENT_TYPES.get(self.node_type)
        if expected is None or not isinstance(self.statement, expected):
            raise ValueError("can not init AST!")

    def __str__(self) -> str:
        body = self.statement
        if isinstance(body, CreateDatabaseSql):
            return f"CREATE DATABASE {body.db_name};"
        if isinstance(body, CreateTableSql):
            cols = "".join(f"{c.col_name} {c.value_type}, " for c in body.columns)
            return f"CREATE TABLE {body.table_name} ({cols});"
        if isinstance(body, InsertIntoTableSql):
            cols = "".join(f"{c.col_name}, " for c in body.columns)
            values = "".join(f"{v}, " for v in body.values)
            return f"INSERT INTO {body.table_name} ({cols}) VALUES ({values});"
        if isinstance(body, SelectFromOneTableSql):
            text = "SELECT " + "".join(f"{c.col_name}, " for c in body.columns)
            text += f" FROM {body.table_name}"
            if body.conditions:
                text += " WHERE " + "".join(
                    f"{c.col.col_name} {c.condition.value} {c.compare_value} "
                    for c in body.conditions
                )
            return text
        return "Unknown node type"