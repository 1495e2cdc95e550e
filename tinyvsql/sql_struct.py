"""Core data structures shared by the SQL parser and executor."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class SqlState(IntEnum):
    """Outcome of a submitted SQL statement."""

    UNSUBMIT = 0
    PARSE_ERROR = 1
    SUCCESS = 2
    FAILURE = 3


_HEADER = struct.Struct("<ii")


@dataclass
class SqlResponse:
    """Result of executing a statement, with a binary wire form."""

    sql_state: SqlState = SqlState.UNSUBMIT
    information: str = ""

    def __len__(self) -> int:
        return _HEADER.size + len(self.information.encode("utf-8"))

    def to_bytes(self) -> bytes:
        """Encode as state (int32), information length (int32), information bytes."""
        info = self.information.encode("utf-8")
        return _HEADER.pack(int(self.sql_state), len(info)) + info

    @classmethod
    def from_bytes(cls, data: bytes) -> "SqlResponse":
        """Decode a response produced by :meth:`to_bytes`."""
        if len(data) < _HEADER.size:
            raise ValueError("response buffer is too short for its header")
        state_value, length = _HEADER.unpack_from(data)
        state = SqlState(state_value)
        if length <= 0:
            return cls(state, "")
        body = data[_HEADER.size:_HEADER.size + length]
        if len(body) < length:
            raise ValueError("response buffer is shorter than its declared information length")
        body = body.split(b"\x00", 1)[0]
        return cls(state, body.decode("utf-8"))


class NodeType(Enum):
    """Kind of statement held by a syntax tree node."""

    CREATE_DATABASE = 0
    CREATE_TABLE = 1
    INSERT_INTO_TABLE = 2
    SELECT_FROM_ONE_TABLE = 3
    DROP_DATABASE = 4
    DROP_TABLE = 5
    DELETE_FROM_TABLE = 6
    UNSUPPORTED = 7


class IndexType(Enum):
    """Kind of index on a column."""

    NONE = 0
    B_PLUS_TREE = 1
    UNIQUE = 2
    VECTOR = 3


@dataclass
class DataBase:
    db_name: str


@dataclass
class Column:
    """A column reference; ``value_type`` is a type name such as ``"INT"``."""

    col_name: str
    value_type: Optional[str] = None
    col_length: int = 0


@dataclass
class Index:
    index_name: str
    col_name: str
    index_type: IndexType = IndexType.NONE


class Comparator(Enum):
    BIGGER = ">"
    LESS = "<"
    EQUAL = "="
    NOT_EQUAL = "!="


@dataclass
class CompareCondition:
    """A condition such as ``a = b``, ``a != b``, ``a > b`` or ``a < b``."""

    col: Column
    condition: Comparator
    compare_value: str


class OperatorKind(Enum):
    AND = "AND"
    OR = "OR"


@dataclass
class Operation:
    """A boolean combination of a left side (leaf or nested operation) and a right leaf."""

    operator: OperatorKind
    right_leaf: CompareCondition
    left_leaf: Optional[CompareCondition] = None
    left_op: Optional["Operation"] = None


def parse_comparator(value: str) -> Comparator:
    """Map ``>``, ``<``, ``=`` or ``!=`` to a :class:`Comparator`."""
    try:
        return Comparator(value)
    except ValueError:
        raise ValueError(f"value: {value} can not be parsed to Comparator") from None


def parse_operator(value: str) -> OperatorKind:
    """Map ``AND`` or ``OR`` to an :class:`OperatorKind`."""
    try:
        return OperatorKind(value)
    except ValueError:
        raise ValueError(f"value: {value} can not be parsed to Operator") from None