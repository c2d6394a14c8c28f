"""Page replacement policies for the buffer pool."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import OrderedDict


class Replacer(ABC):
    """Tracks which frames may be evicted."""

    @abstractmethod
    def victim(self) -> int | None:
        """Remove and return a frame to evict, or None if there is none."""

    @abstractmethod
    def pin(self, frame_id: int) -> None:
        """Make a frame ineligible for eviction."""

    @abstractmethod
    def unpin(self, frame_id: int) -> None:
        """Make a frame eligible for eviction."""

    @abstractmethod
    def size(self) -> int:
        """Number of frames that can currently be evicted."""

    def __len__(self) -> int:
        return self.size()


class LRUReplacer(Replacer):
    """Evicts the least recently unpinned frame."""

    def __init__(self, num_pages: int) -> None:
        self._max_size = num_pages
        # Oldest entry first; newest unpinned frames are appended at the end.
        self._frames: OrderedDict[int, None] = OrderedDict()
        self._latch = threading.Lock()

    def victim(self) -> int | None:
        with self._latch:
            if not self._frames:
                return None
            frame_id, _ = self._frames.popitem(last=False)
            return frame_id

    def pin(self, frame_id: int) -> None:
        with self._latch:
            self._frames.pop(frame_id, None)

    def unpin(self, frame_id: int) -> None:
        with self._latch:
            if frame_id in self._frames:
                return
            if self._max_size > 0 and len(self._frames) >= self._max_size:
                return
            self._frames[frame_id] = None

    def size(self) -> int:
        with self._latch:
            return len(self._frames)