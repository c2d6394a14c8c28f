"""Per-statement execution context and its bounded result buffer."""

from __future__ import annotations

from typing import Any

from .defs import BUFFER_LENGTH

# Room kept free at the end of the buffer for the record-count footer.
RECORD_COUNT_LENGTH = 40


class Context:
    """Carries the managers and transaction of a statement and collects its output."""

    def __init__(
        self,
        lock_mgr: Any = None,
        log_mgr: Any = None,
        txn: Any = None,
        capacity: int = BUFFER_LENGTH,
    ) -> None:
        self.lock_mgr = lock_mgr
        self.log_mgr = log_mgr
        self.txn = txn
        self.capacity = capacity
        self.ellipsis = False
        self._buffer = bytearray()

    @property
    def offset(self) -> int:
        """Number of bytes written so far."""
        return len(self._buffer)

    def fits(self, text: str) -> bool:
        """True if text can be appended while leaving room for the footer."""
        return self.offset + RECORD_COUNT_LENGTH + len(text.encode("utf-8")) < self.capacity

    def try_write(self, text: str) -> bool:
        """Append text if it fits and output was not already cut; otherwise mark it cut."""
        if not self.ellipsis and self.fits(text):
            self._buffer += text.encode("utf-8")
            return True
        self.ellipsis = True
        return False

    def write(self, text: str) -> None:
        """Append text unconditionally."""
        self._buffer += text.encode("utf-8")

    def output(self) -> str:
        """Everything written so far."""
        return self._buffer.decode("utf-8", errors="replace")