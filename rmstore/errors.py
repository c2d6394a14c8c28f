"""Exception hierarchy used throughout the storage engine."""

from __future__ import annotations

import os
from collections.abc import Iterable


class RMDBError(Exception):
    """Base class for every error raised by the engine."""

    def __init__(self, msg: str = "") -> None:
        self.msg = "Error: " + msg
        super().__init__(self.msg)

    def __str__(self) -> str:
        return self.msg


class InternalError(RMDBError):
    """An invariant of the engine was violated."""


class UnixError(RMDBError):
    """An operating-system call failed."""

    def __init__(self, errnum: int | OSError | None = None) -> None:
        if isinstance(errnum, OSError):
            text = errnum.strerror or str(errnum)
        elif errnum is None:
            text = os.strerror(0)
        else:
            text = os.strerror(errnum)
        self.errno = errnum.errno if isinstance(errnum, OSError) else errnum
        super().__init__(text)


class FileOpenError(RMDBError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File is open: {path}")


class FileNotOpenError(RMDBError):
    def __init__(self, fd: int) -> None:
        super().__init__(f"Invalid file descriptor: {fd}")


class FileNotClosedError(RMDBError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File is opened: {filename}")


class RMDBFileExistsError(RMDBError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File already exists: {filename}")


class RMDBFileNotFoundError(RMDBError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File not found: {filename}")


class RecordNotFoundError(RMDBError):
    def __init__(self, page_no: int, slot_no: int) -> None:
        super().__init__(f"Record not found: ({page_no},{slot_no})")


class InvalidRecordSizeError(RMDBError):
    def __init__(self, record_size: int) -> None:
        super().__init__(f"Invalid record size: {record_size}")


class InvalidMetaDataError(RMDBError):
    def __init__(self, db_name: str) -> None:
        super().__init__(f"Invalid meta data from database {db_name}")


class InvalidColLengthError(RMDBError):
    def __init__(self, col_len: int) -> None:
        super().__init__(f"Invalid column length: {col_len}")


class IndexEntryNotFoundError(RMDBError):
    def __init__(self) -> None:
        super().__init__("Index entry not found")


class DatabaseNotFoundError(RMDBError):
    def __init__(self, db_name: str) -> None:
        super().__init__(f"Database not found: {db_name}")


class DatabaseExistsError(RMDBError):
    def __init__(self, db_name: str) -> None:
        super().__init__(f"Database already exists: {db_name}")


class TableNotFoundError(RMDBError):
    def __init__(self, tab_name: str) -> None:
        super().__init__(f"Table not found: {tab_name}")


class TableExistsError(RMDBError):
    def __init__(self, tab_name: str) -> None:
        super().__init__(f"Table already exists: {tab_name}")


class ColumnNotFoundError(RMDBError):
    def __init__(self, col_name: str) -> None:
        super().__init__(f"Column not found: {col_name}")


class IndexNotFoundError(RMDBError):
    def __init__(self, tab_name: str, col_names: Iterable[str]) -> None:
        super().__init__(f"Index not found: {tab_name}.({', '.join(col_names)})")


class IndexExistsError(RMDBError):
    def __init__(self, tab_name: str, col_names: Iterable[str]) -> None:
        super().__init__(f"Index already exists: {tab_name}.({', '.join(col_names)})")


class InvalidValueCountError(RMDBError):
    def __init__(self) -> None:
        super().__init__("Invalid value count")


class StringOverflowError(RMDBError):
    def __init__(self) -> None:
        super().__init__("String is too long")


class IncompatibleTypeError(RMDBError):
    def __init__(self, lhs: str, rhs: str) -> None:
        super().__init__(f"Incompatible type error: lhs {lhs}, rhs {rhs}")


class AmbiguousColumnError(RMDBError):
    def __init__(self, col_name: str) -> None:
        super().__init__(f"Ambiguous column: {col_name}")


class PageNotExistError(RMDBError):
    def __init__(self, table_name: str, page_no: int) -> None:
        super().__init__(f"Page {page_no} in table {table_name}not exits")


class NullptrError(RMDBError):
    def __init__(self, table_name: str | None = None, page_no: int | None = None) -> None:
        if table_name is None:
            super().__init__("ptr is null!")
        else:
            super().__init__(f"table {table_name}: ptr is null!")


class IndexAlreadyExistsError(RMDBError):
    def __init__(self, index_name: str) -> None:
        super().__init__(f"index {index_name} is already exists.")


class OpenDatabaseError(RMDBError):
    def __init__(self, db_name: str, reason: str) -> None:
        super().__init__(f"open database {db_name}error: {reason}")


class DropTableError(RMDBError):
    def __init__(self, table: str, reason: str) -> None:
        super().__init__(f"Drop table {table}error: {reason}")


class DropIndexError(RMDBError):
    def __init__(self, index_name: str, reason: str) -> None:
        super().__init__(f"Drop index {index_name}error: {reason}")


class InvalidAggError(RMDBError):
    def __init__(self, col: str, reason: str) -> None:
        super().__init__(f"Can not use {col} with {reason}")


class IndexEntryAlreadyExistError(RMDBError):
    def __init__(self) -> None:
        super().__init__("Index entry already exists")