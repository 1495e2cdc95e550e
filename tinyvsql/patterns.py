"""Token patterns that recognise which kind of statement a token list holds."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from tinyvsql.sql_struct import NodeType
from tinyvsql.tokens import Token, TokenType

_VALUE_TYPES = (TokenType.NUMBER, TokenType.STRING)


def _fits_exactly(expected: Token, actual: Token) -> bool:
    """Strict check of one input token against one template token."""
    if expected.type in (TokenType.KEYWORD, TokenType.OPERATOR):
        return actual.type is expected.type and actual.value == expected.value
    if expected.type is TokenType.IDENTIFIER:
        return actual.type is TokenType.IDENTIFIER
    if expected.type in _VALUE_TYPES:
        return actual.type in _VALUE_TYPES
    return False


def _fits_loosely(expected: Token, actual: Token) -> bool:
    """Check used by alternative patterns; a keyword template accepts any keyword."""
    if expected.type is TokenType.KEYWORD:
        return actual.type is TokenType.KEYWORD or actual.value == expected.value
    return _fits_exactly(expected, actual)


class TokenPattern:
    """A run of template tokens, optionally followed by nested patterns.

    A sequence pattern must match every template token in order and then every
    nested pattern in turn. An alternative pattern (``any_of=True``) matches a
    single token against any of its templates, or else any one of its nested
    patterns.
    """

    def __init__(
        self,
        template: Iterable[Token] = (),
        any_of: bool = False,
        next_patterns: Iterable["TokenPattern"] = (),
    ) -> None:
        self.template: tuple[Token, ...] = tuple(template)
        self.any_of = any_of
        self.next_patterns: tuple[TokenPattern, ...] = tuple(next_patterns)
        self._last_length = 0

    def match(self, tokens: Sequence[Token], offset: int = 0) -> bool:
        """Try to match at *offset*; remember how many tokens were consumed."""
        length = self._measure(tokens, offset)
        self._last_length = 0 if length is None else length
        return length is not None

    def matched_length(self) -> int:
        """Number of tokens consumed by the last call to :meth:`match`."""
        return self._last_length

    def _measure(self, tokens: Sequence[Token], offset: int) -> Optional[int]:
        if self.any_of:
            return self._measure_alternatives(tokens, offset)
        window = tokens[offset:offset + len(self.template)]
        if len(window) < len(self.template):
            return None
        if not all(_fits_exactly(e, a) for e, a in zip(self.template, window)):
            return None
        total = len(self.template)
        for pattern in self.next_patterns:
            length = pattern._measure(tokens, offset + total)
            if length is None:
                return None
            total += length
        return total

    def _measure_alternatives(self, tokens: Sequence[Token], offset: int) -> Optional[int]:
        if 0 <= offset < len(tokens):
            current = tokens[offset]
            if any(_fits_loosely(expected, current) for expected in self.template):
                return 1
        for pattern in self.next_patterns:
            length = pattern._measure(tokens, offset)
            if length is not None:
                return length
        return None

    def __repr__(self) -> str:
        return (
            f"TokenPattern(template={self.template!r}, any_of={self.any_of!r}, "
            f"next_patterns={self.next_patterns!r})"
        )


class SqlPatternMatcher:
    """A statement shape: patterns in order, each required or repeatable (0..n)."""

    def __init__(self, patterns: Sequence[TokenPattern], necessary: Sequence[bool]) -> None:
        if len(patterns) != len(necessary):
            raise ValueError("construct a fault sql pattern")
        self.steps: tuple[tuple[TokenPattern, bool], ...] = tuple(zip(patterns, necessary))

    def match(self, tokens: Sequence[Token]) -> bool:
        """Return True if the leading tokens follow this statement shape."""
        offset = 0
        for pattern, required in self.steps:
            if required:
                length = pattern._measure(tokens, offset)
                if length is None:
                    return False
                offset += length
            else:
                while (length := pattern._measure(tokens, offset)) is not None:
                    if length == 0:
                        break
                    offset += length
        return True


def _kw(word: str) -> Token:
    return Token(TokenType.KEYWORD, word)


def _op(symbol: str) -> Token:
    return Token(TokenType.OPERATOR, symbol)


_IDENT = Token(TokenType.IDENTIFIER, "")
_VALUE = Token(TokenType.STRING, "")

ID = TokenPattern([_IDENT])
NEXT_ID = TokenPattern([_op(","), _IDENT])
VALUE = TokenPattern([_VALUE])
NEXT_VALUE = TokenPattern([_op(","), _VALUE])

INSERT = TokenPattern([_kw("INSERT")])
INTO = TokenPattern([_kw("INTO")])
CREATE = TokenPattern([_kw("CREATE")])
DATABASE = TokenPattern([_kw("DATABASE")])
TABLE = TokenPattern([_kw("TABLE")])
VALUES = TokenPattern([_kw("VALUES")])
LEFT_BRACKET = TokenPattern([_op("(")])
VALUE_TYPE = TokenPattern(
    [_kw("INT"), _kw("FLOAT"), _kw("VCHAR"), _kw("VECTOR")], any_of=True
)
NEXT_COLUMN = TokenPattern([_op(","), _IDENT], next_patterns=[VALUE_TYPE])
RIGHT_BRACKET = TokenPattern([_op(")")])
SEMICOLON = TokenPattern([_op(";")])

SELECT = TokenPattern([_kw("SELECT")])
FIRST_COL = TokenPattern([_op("*")], any_of=True, next_patterns=[ID])
FROM = TokenPattern([_kw("FROM")])
WHERE = TokenPattern([_kw("WHERE")])

NOT_EQUAL_SIGN = TokenPattern([_op("!"), _op("=")])
COMPARER = TokenPattern(
    [_op(">"), _op("<"), _op("=")], any_of=True, next_patterns=[NOT_EQUAL_SIGN]
)
OPERATOR = TokenPattern([_kw("AND"), _kw("OR")], any_of=True)

CONDITION = TokenPattern(next_patterns=[WHERE, ID, COMPARER, VALUE])
NEXT_CONDITION = TokenPattern(next_patterns=[OPERATOR, ID, COMPARER, VALUE])

DELETE = TokenPattern([_kw("DELETE")])

CREATE_DATABASE = SqlPatternMatcher(
    [CREATE, DATABASE, ID, SEMICOLON],
    [True, True, True, True],
)
CREATE_TABLE = SqlPatternMatcher(
    [CREATE, TABLE, ID, LEFT_BRACKET, ID, VALUE_TYPE, NEXT_COLUMN, RIGHT_BRACKET, SEMICOLON],
    [True, True, True, True, True, True, False, True, True],
)
INSERT_INTO_TABLE = SqlPatternMatcher(
    [
        INSERT, INTO, ID, LEFT_BRACKET, ID, NEXT_ID, RIGHT_BRACKET,
        VALUES, LEFT_BRACKET, VALUE, NEXT_VALUE, RIGHT_BRACKET, SEMICOLON,
    ],
    [True, True, True, True, True, False, True, True, True, True, False, True, True],
)
SELECT_FROM_ONE_TABLE = SqlPatternMatcher(
    [SELECT, FIRST_COL, NEXT_ID, FROM, ID, CONDITION, NEXT_CONDITION, SEMICOLON],
    [True, True, False, True, True, False, False, True],
)
DELETE_FROM_TABLE = SqlPatternMatcher(
    [DELETE, FROM, ID, CONDITION, NEXT_CONDITION, SEMICOLON],
    [True, True, True, False, False, False],
)

ALL_PATTERNS: tuple[tuple[SqlPatternMatcher, NodeType], ...] = (
    (CREATE_DATABASE, NodeType.CREATE_DATABASE),
    (CREATE_TABLE, NodeType.CREATE_TABLE),
    (INSERT_INTO_TABLE, NodeType.INSERT_INTO_TABLE),
    (SELECT_FROM_ONE_TABLE, NodeType.SELECT_FROM_ONE_TABLE),
    (DELETE_FROM_TABLE, NodeType.DELETE_FROM_TABLE),
)


def detect_node_type(tokens: Sequence[Token]) -> NodeType:
    """Kind of the first statement shape the tokens follow, or UNSUPPORTED."""
    for matcher, node_type in ALL_PATTERNS:
        if matcher.match(tokens):
            return node_type
    return NodeType.UNSUPPORTED