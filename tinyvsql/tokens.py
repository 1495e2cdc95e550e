"""Lexical analysis of SQL text into typed tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class TokenType(Enum):
    """Kind of a lexical token."""

    KEYWORD = 0
    IDENTIFIER = 1
    OPERATOR = 2
    NUMBER = 3
    STRING = 4
    UNKNOWN = 5
    ERROR = 6


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the exact text it was built from."""

    type: TokenType
    value: str


KEY_WORDS: tuple[str, ...] = (
    "SELECT", "FROM", "WHERE", "INSERT", "INTO", "VALUES", "CREATE", "TABLE", "DROP",
    "UPDATE", "SET", "DELETE", "ALTER", "ADD", "COLUMN",
    "AND", "OR", "NOT",
    "IN", "LIKE", "JOIN", "ON", "ORDER", "BY", "GROUP", "HAVING",
    "INT", "FLOAT", "VCHAR", "VECTOR",
    "DATABASE",
)

_KEY_WORD_SET = frozenset(KEY_WORDS)

# Quotes are deliberately absent from the operator class: an unterminated
# string literal must fail to match so that the whole input is rejected.
_TOKEN_RE = re.compile(
    r"""
    (?P<space>[ \t\n\r\v\f]+)
    | (?P<word>[A-Za-z_][A-Za-z0-9_*]*)
    | (?P<number>[0-9][0-9.]*)
    | (?P<string>'[^']*'|"[^"]*")
    | (?P<operator>[!\#-&(-/:-@\[-`{-~])
    """,
    re.VERBOSE | re.ASCII,
)

_TYPE_LABELS = {
    TokenType.KEYWORD: "KEYWORD",
    TokenType.IDENTIFIER: "IDENTIFIER",
    TokenType.OPERATOR: "OPERATOR",
    TokenType.NUMBER: "NUMBER_T",
    TokenType.STRING: "STRING_T",
    TokenType.ERROR: "ERROR",
}


def is_keyword(word: str) -> bool:
    """Return True if *word* is one of the reserved SQL keywords (case sensitive)."""
    return word in _KEY_WORD_SET


def tokenize(sql: str) -> list[Token]:
    """Split *sql* into tokens.

    An unterminated string literal or a character that belongs to no token
    class makes the whole input invalid, and an empty list is returned.
    """
    tokens: list[Token] = []
    position = 0
    while position < len(sql):
        match = _TOKEN_RE.match(sql, position)
        if match is None:
            return []
        position = match.end()
        kind = match.lastgroup
        text = match.group()
        if kind == "space":
            continue
        if kind == "word":
            token_type = TokenType.KEYWORD if is_keyword(text) else TokenType.IDENTIFIER
        elif kind == "number":
            token_type = TokenType.NUMBER
        elif kind == "string":
            token_type = TokenType.STRING
        else:
            token_type = TokenType.OPERATOR
        tokens.append(Token(token_type, text))
    return tokens


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as ``LABEL: value`` entries, each followed by two spaces."""
    return "".join(
        f"{_TYPE_LABELS.get(token.type, 'UNKNOWN')}: {token.value}  " for token in tokens
    )