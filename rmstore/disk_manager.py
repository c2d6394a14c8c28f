"""File and page level access to the database files on disk."""

from __future__ import annotations

import os
import shutil
import threading
from collections import defaultdict

from .defs import LOG_FILE_NAME, PAGE_SIZE
from .errors import (
    FileNotOpenError,
    FileOpenError,
    InternalError,
    RMDBFileExistsError,
    RMDBFileNotFoundError,
    UnixError,
)

_OPEN_FLAGS = os.O_RDWR | getattr(os, "O_BINARY", 0)
_CREATE_FLAGS = os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)


class DiskManager:
    """Reads and writes pages of open files and manages files and directories."""

    MAX_FD = 8192

    def __init__(self) -> None:
        self._path2fd: dict[str, int] = {}
        self._fd2path: dict[int, str] = {}
        self._fd2pageno: defaultdict[int, int] = defaultdict(int)
        self._alloc_latch = threading.Lock()
        self.log_fd = -1

    # Pages

    def write_page(self, fd: int, page_no: int, data: bytes | bytearray) -> None:
        """Write data at the start of page page_no of the file."""
        try:
            os.lseek(fd, page_no * PAGE_SIZE, os.SEEK_SET)
            written = os.write(fd, data)
        except OSError as exc:
            raise UnixError(exc) from exc
        if written != len(data):
            raise InternalError(
                f"DiskManager::write_page Error: write failed, expected {len(data)} bytes, "
                f"but wrote {written} bytes."
            )

    def read_page(self, fd: int, page_no: int, num_bytes: int) -> bytes:
        """Read num_bytes from the start of page page_no of the file."""
        try:
            os.lseek(fd, page_no * PAGE_SIZE, os.SEEK_SET)
            data = os.read(fd, num_bytes)
        except OSError as exc:
            raise UnixError(exc) from exc
        if len(data) != num_bytes:
            raise InternalError(
                f"DiskManager::read_page Error: read failed, expected {num_bytes} bytes, "
                f"but read {len(data)} bytes."
            )
        return data

    def allocate_page(self, fd: int) -> int:
        """Hand out the next page number of the file."""
        if not 0 <= fd < self.MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        with self._alloc_latch:
            page_no = self._fd2pageno[fd]
            self._fd2pageno[fd] = page_no + 1
            return page_no

    def deallocate_page(self, page_id: int) -> None:
        """Release a page; numbers are never reused, so nothing is reclaimed."""

    def set_fd2pageno(self, fd: int, start_page_no: int) -> None:
        """Set how many pages of the file have been allocated."""
        with self._alloc_latch:
            self._fd2pageno[fd] = start_page_no

    def get_fd2pageno(self, fd: int) -> int:
        """Number of pages of the file allocated so far."""
        with self._alloc_latch:
            return self._fd2pageno.get(fd, 0)

    # Directories

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def create_dir(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as exc:
            raise UnixError(exc) from exc

    def destroy_dir(self, path: str) -> None:
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise UnixError(exc) from exc

    # Files

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def create_file(self, path: str) -> None:
        """Create an empty file; it must not exist yet."""
        if os.path.exists(path):
            raise RMDBFileExistsError(path)
        try:
            fd = os.open(path, _CREATE_FLAGS, 0o600)
        except FileExistsError as exc:
            raise RMDBFileExistsError(path) from exc
        except OSError as exc:
            raise UnixError(exc) from exc
        try:
            os.close(fd)
        except OSError as exc:
            raise UnixError(exc) from exc

    def destroy_file(self, path: str) -> None:
        """Delete a file that is not open."""
        if path in self._path2fd:
            raise FileOpenError(path)
        try:
            os.unlink(path)
        except FileNotFoundError as exc:
            raise RMDBFileNotFoundError(path) from exc
        except OSError as exc:
            raise UnixError(exc) from exc

    def open_file(self, path: str) -> int:
        """Open a file for reading and writing and return its descriptor."""
        if path in self._path2fd:
            raise FileOpenError(path)
        try:
            fd = os.open(path, _OPEN_FLAGS)
        except FileNotFoundError as exc:
            raise RMDBFileNotFoundError(path) from exc
        except OSError as exc:
            raise UnixError(exc) from exc
        self._path2fd[path] = fd
        self._fd2path[fd] = path
        return fd

    def close_file(self, fd: int) -> None:
        """Close a file opened with open_file."""
        path = self._fd2path.get(fd)
        if path is None:
            raise RMDBFileNotFoundError("File descriptor not found")
        try:
            os.close(fd)
        except OSError as exc:
            raise UnixError(exc) from exc
        del self._fd2path[fd]
        del self._path2fd[path]

    def get_file_size(self, file_name: str) -> int:
        """Size of the file in bytes, or -1 if it cannot be examined."""
        try:
            return os.stat(file_name).st_size
        except OSError:
            return -1

    def get_file_name(self, fd: int) -> str:
        try:
            return self._fd2path[fd]
        except KeyError:
            raise FileNotOpenError(fd) from None

    def get_file_fd(self, file_name: str) -> int:
        """Descriptor of the file, opening it if necessary."""
        fd = self._path2fd.get(file_name)
        if fd is None:
            return self.open_file(file_name)
        return fd

    # Log

    def _ensure_log_open(self) -> None:
        if self.log_fd == -1:
            self.log_fd = self.open_file(LOG_FILE_NAME)

    def read_log(self, size: int, offset: int) -> bytes | None:
        """Read up to size bytes of the log from offset; None if offset is past the end."""
        self._ensure_log_open()
        file_size = self.get_file_size(LOG_FILE_NAME)
        if offset > file_size:
            return None
        size = min(size, file_size - offset)
        if size == 0:
            return b""
        try:
            os.lseek(self.log_fd, offset, os.SEEK_SET)
            data = os.read(self.log_fd, size)
        except OSError as exc:
            raise UnixError(exc) from exc
        if len(data) != size:
            raise InternalError(f"DiskManager::read_log Error: expected {size} bytes, read {len(data)}")
        return data

    def write_log(self, data: bytes | bytearray) -> None:
        """Append data to the log file."""
        self._ensure_log_open()
        try:
            os.lseek(self.log_fd, 0, os.SEEK_END)
            written = os.write(self.log_fd, data)
        except OSError as exc:
            raise UnixError(exc) from exc
        if written != len(data):
            raise UnixError()