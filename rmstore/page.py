"""Page identifiers and the in-memory page frame."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .defs import INVALID_FILE_ID, INVALID_PAGE_ID, PAGE_SIZE

_LSN = struct.Struct("<i")


@dataclass(frozen=True, order=True)
class PageId:
    """Identifies a page by the descriptor of its open file and its page number."""

    fd: int
    page_no: int = INVALID_PAGE_ID

    def key(self) -> int:
        """Pack the id into a single integer."""
        return (self.fd << 16) | self.page_no

    def __str__(self) -> str:
        return f"{{fd: {self.fd} page_no: {self.page_no}}}"


class Page:
    """A buffer-pool frame holding one page of a file."""

    OFFSET_PAGE_START = 0
    OFFSET_LSN = 0
    OFFSET_PAGE_HDR = 4

    __slots__ = ("id", "data", "is_dirty", "pin_count")

    def __init__(self) -> None:
        self.id = PageId(INVALID_FILE_ID, INVALID_PAGE_ID)
        self.data = bytearray(PAGE_SIZE)
        self.is_dirty = False
        self.pin_count = 0

    def reset(self) -> None:
        """Zero the page contents."""
        self.data[:] = bytes(PAGE_SIZE)

    def page_lsn(self) -> int:
        """Log sequence number stored at the start of the page."""
        return _LSN.unpack_from(self.data, self.OFFSET_LSN)[0]

    def set_page_lsn(self, lsn: int) -> None:
        """Store a log sequence number at the start of the page."""
        _LSN.pack_into(self.data, self.OFFSET_LSN, lsn)

    def __repr__(self) -> str:
        return f"Page(id={self.id}, is_dirty={self.is_dirty}, pin_count={self.pin_count})"