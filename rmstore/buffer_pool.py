"""Buffer pool caching file pages in memory frames."""

from __future__ import annotations

import threading
from collections import deque

from .defs import INVALID_FILE_ID, INVALID_PAGE_ID, PAGE_SIZE
from .disk_manager import DiskManager
from .page import Page, PageId
from .replacer import LRUReplacer, Replacer


class BufferPoolManager:
    """Keeps up to pool_size pages in memory, evicting with an LRU policy."""

    def __init__(self, pool_size: int, disk_manager: DiskManager) -> None:
        self.pool_size = pool_size
        self._disk = disk_manager
        self._pages = [Page() for _ in range(pool_size)]
        self._page_table: dict[PageId, int] = {}
        self._free_list: deque[int] = deque(range(pool_size))
        self._replacer: Replacer = LRUReplacer(pool_size)
        self._latch = threading.Lock()

    @staticmethod
    def mark_dirty(page: Page) -> None:
        page.is_dirty = True

    def _find_victim_page(self) -> int | None:
        if self._free_list:
            return self._free_list.popleft()
        return self._replacer.victim()

    def _update_page(self, page: Page, new_page_id: PageId, frame_id: int) -> None:
        if page.is_dirty:
            self._disk.write_page(page.id.fd, page.id.page_no, page.data)
            page.is_dirty = False
        self._page_table.pop(page.id, None)
        page.id = new_page_id
        self._page_table[new_page_id] = frame_id
        page.reset()

    def _release_frame(self, page: Page, frame_id: int) -> None:
        self._page_table.pop(page.id, None)
        page.id = PageId(INVALID_FILE_ID, INVALID_PAGE_ID)
        page.pin_count = 0
        page.is_dirty = False
        page.reset()
        self._free_list.append(frame_id)

    def fetch_page(self, page_id: PageId) -> Page | None:
        """Pin and return the page, reading it from disk if needed; None if the pool is full."""
        with self._latch:
            frame_id = self._page_table.get(page_id)
            if frame_id is not None:
                page = self._pages[frame_id]
                self._replacer.pin(frame_id)
                page.pin_count += 1
                return page

            frame_id = self._find_victim_page()
            if frame_id is None:
                return None
            page = self._pages[frame_id]
            self._update_page(page, page_id, frame_id)
            try:
                page.data[:] = self._disk.read_page(page_id.fd, page_id.page_no, PAGE_SIZE)
            except Exception:
                self._release_frame(page, frame_id)
                raise
            page.pin_count = 1
            self._replacer.pin(frame_id)
            return page

    def unpin_page(self, page_id: PageId, is_dirty: bool) -> bool:
        """Drop one pin of the page; False if it is not cached or not pinned."""
        with self._latch:
            frame_id = self._page_table.get(page_id)
            if frame_id is None:
                return False
            page = self._pages[frame_id]
            if page.pin_count == 0:
                return False
            page.pin_count -= 1
            if page.pin_count == 0:
                self._replacer.unpin(frame_id)
            if is_dirty:
                self.mark_dirty(page)
            return True

    def flush_page(self, page_id: PageId) -> bool:
        """Write the page to disk whether dirty or not; False if it is not cached."""
        with self._latch:
            frame_id = self._page_table.get(page_id)
            if frame_id is None:
                return False
            page = self._pages[frame_id]
            self._disk.write_page(page.id.fd, page.id.page_no, page.data)
            page.is_dirty = False
            return True

    def new_page(self, fd: int) -> Page | None:
        """Allocate a new page of the file, pinned; None if no frame is free."""
        with self._latch:
            frame_id = self._find_victim_page()
            if frame_id is None:
                return None
            page = self._pages[frame_id]
            page_no = self._disk.allocate_page(fd)
            self._update_page(page, PageId(fd, page_no), frame_id)
            page.pin_count = 1
            self._replacer.pin(frame_id)
            return page

    def delete_page(self, page_id: PageId) -> bool:
        """Drop the page from the pool; False if it is still pinned."""
        with self._latch:
            frame_id = self._page_table.get(page_id)
            if frame_id is None:
                return True
            page = self._pages[frame_id]
            if page.pin_count != 0:
                return False
            if page.is_dirty:
                self._disk.write_page(page.id.fd, page.id.page_no, page.data)
            self._replacer.pin(frame_id)
            self._release_frame(page, frame_id)
            return True

    def flush_all_pages(self, fd: int) -> None:
        """Write every dirty page in the pool back to disk.

        The whole pool is flushed, not only the pages of fd.
        """
        with self._latch:
            for page_id, frame_id in self._page_table.items():
                page = self._pages[frame_id]
                if page.is_dirty:
                    self._disk.write_page(page_id.fd, page_id.page_no, page.data)
                    page.is_dirty = False