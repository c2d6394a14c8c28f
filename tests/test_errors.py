import errno
import os

import pytest

from rmstore import errors


def test_base_message_has_prefix():
    err = errors.RMDBError("boom")
    assert str(err) == "Error: boom"
    assert err.msg == "Error: boom"


def test_base_default_message():
    assert str(errors.RMDBError()) == "Error: "


def test_file_exists_message():
    err = errors.RMDBFileExistsError("a.txt")
    assert str(err) == "Error: File already exists: a.txt"


def test_file_not_found_message():
    assert str(errors.RMDBFileNotFoundError("db.meta")) == "Error: File not found: db.meta"


def test_record_not_found_message():
    assert str(errors.RecordNotFoundError(3, 7)) == "Error: Record not found: (3,7)"


def test_index_not_found_joins_columns():
    err = errors.IndexNotFoundError("t", ["a", "b"])
    assert str(err) == "Error: Index not found: t.(a, b)"


def test_index_exists_single_column():
    err = errors.IndexExistsError("t", ["a"])
    assert str(err) == "Error: Index already exists: t.(a)"


def test_nullptr_error_variants():
    assert str(errors.NullptrError()) == "Error: ptr is null!"
    assert str(errors.NullptrError("t", 1)) == "Error: table t: ptr is null!"


def test_unix_error_uses_strerror():
    err = errors.UnixError(errno.ENOENT)
    assert str(err) == "Error: " + os.strerror(errno.ENOENT)
    assert err.errno == errno.ENOENT


def test_unix_error_from_oserror():
    exc = OSError(errno.EACCES, "denied")
    err = errors.UnixError(exc)
    assert str(err) == "Error: denied"
    assert err.errno == errno.EACCES


@pytest.mark.parametrize(
    "cls, args, message",
    [
        (errors.TableNotFoundError, ("x",), "Error: Table not found: x"),
        (errors.StringOverflowError, (), "Error: String is too long"),
        (errors.InternalError, ("x",), "Error: x"),
        (errors.IndexEntryAlreadyExistError, (), "Error: Index entry already exists"),
    ],
)
def test_all_catchable_as_base(cls, args, message):
    err = cls(*args)
    assert isinstance(err, errors.RMDBError)
    assert str(err) == message


def test_table_not_found_message():
    err = errors.TableNotFoundError("orders")
    assert isinstance(err, errors.RMDBError)
    assert str(err) == "Error: Table not found: orders"