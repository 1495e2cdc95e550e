"""Turn SQL text into a syntax tree node."""

from __future__ import annotations

from typing import Optional, Sequence

from tinyvsql.patterns import detect_node_type
from tinyvsql.sql_struct import NodeType
from tinyvsql.statements import (
    CreateDatabaseSql,
    CreateTableSql,
    DeleteFromTableSql,
    InsertIntoTableSql,
    SelectFromOneTableSql,
    SqlStatement,
)
from tinyvsql.tokens import Token, tokenize

_BUILDERS = {
    NodeType.CREATE_DATABASE: CreateDatabaseSql,
    NodeType.CREATE_TABLE: CreateTableSql,
    NodeType.INSERT_INTO_TABLE: InsertIntoTableSql,
    NodeType.SELECT_FROM_ONE_TABLE: SelectFromOneTableSql,
    NodeType.DELETE_FROM_TABLE: DeleteFromTableSql,
}


def build_node(tokens: Sequence[Token], node_type: NodeType) -> Optional[SqlStatement]:
    """Build the statement for *node_type*; None for unsupported kinds.

    Raises ValueError when the tokens cannot form the statement, or when the
    kind has no syntax tree support yet.
    """
    builder = _BUILDERS.get(node_type)
    if builder is None:
        return None
    return SqlStatement(node_type, builder.from_tokens(tokens))


class Parser:
    """Recognises statement kinds and builds syntax tree nodes."""

    def parse_sql(self, tokens: Sequence[Token]) -> NodeType:
        """Kind of statement the tokens follow."""
        return detect_node_type(tokens)

    def build_ast(self, sql: str) -> Optional[SqlStatement]:
        """Tokenize and parse *sql*; None if the statement is not supported."""
        tokens = tokenize(sql)
        return build_node(tokens, self.parse_sql(tokens))