"""Transaction state, write records, lock identifiers and abort signalling."""

from __future__ import annotations

import enum
import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any

from .defs import INVALID_LSN, INVALID_TIMESTAMP, Rid

_INT64_SPAN = 1 << 64
_INT64_MAX = (1 << 63) - 1


class TransactionState(enum.Enum):
    DEFAULT = 0
    GROWING = 1
    SHRINKING = 2
    COMMITTED = 3
    ABORTED = 4


class IsolationLevel(enum.Enum):
    READ_UNCOMMITTED = 0
    REPEATABLE_READ = 1
    READ_COMMITTED = 2
    SERIALIZABLE = 3


class WType(enum.IntEnum):
    """Kind of write performed by a transaction."""

    INSERT_TUPLE = 0
    DELETE_TUPLE = 1
    UPDATE_TUPLE = 2


@dataclass
class WriteRecord:
    """A write made by a transaction, kept so that it can be rolled back.

    Inserts carry no record image; deletes and updates carry the old record.
    """

    wtype: WType
    tab_name: str
    rid: Rid
    record: bytes | None = None


class LockDataType(enum.IntEnum):
    """Granularity of a lock: a whole table or a single record."""

    TABLE = 0
    RECORD = 1


_NO_RID = Rid(-1, -1)


@dataclass(frozen=True)
class LockDataId:
    """Identifies the object a lock is taken on."""

    fd: int
    rid: Rid
    type: LockDataType

    def __post_init__(self) -> None:
        if not isinstance(self.type, LockDataType):
            raise TypeError(f"not a lock data type: {self.type!r}")

    @classmethod
    def table(cls, fd: int) -> LockDataId:
        """Lock id of a whole table."""
        return cls(fd, _NO_RID, LockDataType.TABLE)

    @classmethod
    def record(cls, fd: int, rid: Rid) -> LockDataId:
        """Lock id of one record of a table."""
        return cls(fd, rid, LockDataType.RECORD)

    def key(self) -> int:
        """Pack the id into a signed 64-bit integer."""
        if self.type == LockDataType.TABLE:
            return self.fd
        value = (
            (int(self.type) << 63)
            | (self.fd << 31)
            | (self.rid.page_no << 16)
            | self.rid.slot_no
        ) % _INT64_SPAN
        return value - _INT64_SPAN if value > _INT64_MAX else value


class AbortReason(enum.Enum):
    LOCK_ON_SHIRINKING = 0
    UPGRADE_CONFLICT = 1
    DEADLOCK_PREVENTION = 2


class TransactionAbortException(Exception):
    """Raised when a transaction has to be rolled back."""

    def __init__(self, txn_id: int, abort_reason: AbortReason) -> None:
        self.txn_id = txn_id
        self.abort_reason = abort_reason
        super().__init__(self.info())

    def info(self) -> str:
        """Human-readable explanation of the abort."""
        if self.abort_reason == AbortReason.LOCK_ON_SHIRINKING:
            return (
                f"Transaction {self.txn_id} aborted because it cannot request locks "
                "on SHRINKING phase\n"
            )
        if self.abort_reason == AbortReason.UPGRADE_CONFLICT:
            return (
                f"Transaction {self.txn_id} aborted because another transaction is "
                "waiting for upgrading\n"
            )
        if self.abort_reason == AbortReason.DEADLOCK_PREVENTION:
            return f"Transaction {self.txn_id} aborted for deadlock prevention\n"
        return "Transaction aborted\n"

    def __str__(self) -> str:
        return self.info()


@dataclass
class Transaction:
    """State of one transaction: its writes, locks and latched index pages."""

    txn_id: int
    isolation_level: IsolationLevel = IsolationLevel.SERIALIZABLE
    state: TransactionState = TransactionState.DEFAULT
    # True for an explicit transaction, False for a single-statement one.
    txn_mode: bool = False
    start_ts: int = INVALID_TIMESTAMP
    prev_lsn: int = INVALID_LSN
    thread_id: int = field(default_factory=threading.get_ident)
    write_set: deque[WriteRecord] = field(default_factory=deque)
    lock_set: set[LockDataId] = field(default_factory=set)
    index_latch_page_set: deque[Any] = field(default_factory=deque)
    index_deleted_page_set: deque[Any] = field(default_factory=deque)

    def append_write_record(self, write_record: WriteRecord) -> None:
        self.write_set.append(write_record)

    def append_index_deleted_page(self, page: Any) -> None:
        self.index_deleted_page_set.append(page)

    def append_index_latch_page(self, page: Any) -> None:
        self.index_latch_page_set.append(page)