"""Core identifiers, column types and engine-wide constants."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

BUFFER_LENGTH = 8192

INVALID_FILE_ID = -1
INVALID_FRAME_ID = -1
INVALID_PAGE_ID = -1
INVALID_TXN_ID = -1
INVALID_TIMESTAMP = -1
INVALID_LSN = -1
HEADER_PAGE_ID = 0
PAGE_SIZE = 4096
BUFFER_POOL_SIZE = 65536
LOG_BUFFER_SIZE = 1024 * PAGE_SIZE
BUCKET_SIZE = 50

LOG_FILE_NAME = "db.log"
REPLACER_TYPE = "LRU"
DB_META_NAME = "db.meta"


@dataclass(frozen=True)
class Rid:
    """Record identifier: page number and slot within the page."""

    page_no: int
    slot_no: int


class ColType(enum.IntEnum):
    TYPE_INT = 0
    TYPE_FLOAT = 1
    TYPE_STRING = 2


_COLTYPE_NAMES = {
    ColType.TYPE_INT: "INT",
    ColType.TYPE_FLOAT: "FLOAT",
    ColType.TYPE_STRING: "STRING",
}


def coltype2str(col_type: ColType | int) -> str:
    """Return the display name of a column type; ValueError if unknown."""
    return _COLTYPE_NAMES[ColType(col_type)]


class RecScan(ABC):
    """Cursor over record ids."""

    @abstractmethod
    def next(self) -> None:
        """Advance to the next record."""

    @abstractmethod
    def is_end(self) -> bool:
        """True once the cursor is past the last record."""

    @abstractmethod
    def rid(self) -> Rid:
        """Id of the current record."""

    def __iter__(self) -> Iterator[Rid]:
        while not self.is_end():
            yield self.rid()
            self.next()