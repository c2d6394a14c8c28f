"""Values, column references, conditions and set clauses used by queries."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from .defs import ColType
from .errors import InternalError, StringOverflowError

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


@dataclass(frozen=True, order=True)
class TabCol:
    """A column qualified by its table name; ordered by (table, column)."""

    tab_name: str
    col_name: str


@dataclass
class Value:
    """A typed literal, with its fixed-width on-disk form once built."""

    type: ColType
    value: int | float | str
    raw: bytes | None = None

    @classmethod
    def of_int(cls, value: int) -> Value:
        return cls(ColType.TYPE_INT, int(value))

    @classmethod
    def of_float(cls, value: float) -> Value:
        return cls(ColType.TYPE_FLOAT, float(value))

    @classmethod
    def of_str(cls, value: str) -> Value:
        return cls(ColType.TYPE_STRING, str(value))

    def to_raw(self, length: int) -> bytes:
        """Build the on-disk bytes of the value for a column of the given length."""
        if self.raw is not None:
            raise InternalError("raw value is already initialised")
        if self.type == ColType.TYPE_INT:
            if length != _INT.size:
                raise ValueError(f"INT column must be {_INT.size} bytes, got {length}")
            raw = _INT.pack(self.value)
        elif self.type == ColType.TYPE_FLOAT:
            if length != _FLOAT.size:
                raise ValueError(f"FLOAT column must be {_FLOAT.size} bytes, got {length}")
            raw = _FLOAT.pack(self.value)
        else:
            encoded = str(self.value).encode("utf-8")
            if length < len(encoded):
                raise StringOverflowError()
            raw = encoded.ljust(length, b"\x00")
        self.raw = raw
        return raw


class CompOp(enum.IntEnum):
    OP_EQ = 0
    OP_NE = 1
    OP_LT = 2
    OP_GT = 3
    OP_LE = 4
    OP_GE = 5


@dataclass
class Condition:
    """A comparison of a column with either another column or a value."""

    lhs_col: TabCol
    op: CompOp
    is_rhs_val: bool
    rhs_col: TabCol | None = None
    rhs_val: Value | None = None


@dataclass
class SetClause:
    """Assignment of a value to a column in an UPDATE."""

    lhs: TabCol
    rhs: Value