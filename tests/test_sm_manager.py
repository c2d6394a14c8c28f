import pytest

from rmstore.context import Context
from rmstore.defs import DB_META_NAME, LOG_FILE_NAME, ColType
from rmstore.disk_manager import DiskManager
from rmstore.errors import DatabaseExistsError, DatabaseNotFoundError, TableNotFoundError
from rmstore.meta import ColMeta, DbMeta, TabMeta
from rmstore.sm_manager import ColDef, SmManager


@pytest.fixture
def sm(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return SmManager(DiskManager())


def _table(name, *cols):
    tab = TabMeta(name=name)
    offset = 0
    for col_name, col_type, length, indexed in cols:
        tab.cols.append(ColMeta(name, col_name, col_type, length, offset, indexed))
        offset += length
    return tab


def test_create_db_writes_catalog_and_log(sm, tmp_path):
    sm.create_db("shop")
    assert sm.is_dir("shop")
    meta = DbMeta.loads((tmp_path / "shop" / DB_META_NAME).read_text())
    assert meta.name == "shop"
    assert meta.tabs == {}
    assert (tmp_path / "shop" / LOG_FILE_NAME).is_file()


def test_create_db_twice_fails(sm):
    sm.create_db("shop")
    with pytest.raises(DatabaseExistsError):
        sm.create_db("shop")


def test_drop_db(sm):
    sm.create_db("shop")
    sm.drop_db("shop")
    assert not sm.is_dir("shop")
    with pytest.raises(DatabaseNotFoundError):
        sm.drop_db("shop")


def test_flush_meta_round_trip(sm, tmp_path):
    sm.db = DbMeta(name="shop")
    sm.db.set_tab_meta("items", _table("items", ("id", ColType.TYPE_INT, 4, False)))
    sm.flush_meta()
    loaded = DbMeta.loads((tmp_path / DB_META_NAME).read_text())
    assert loaded == sm.db


def test_show_tables_renders_and_appends_output(sm, tmp_path):
    sm.db.set_tab_meta("beta", _table("beta", ("x", ColType.TYPE_INT, 4, False)))
    sm.db.set_tab_meta("alpha", _table("alpha", ("y", ColType.TYPE_INT, 4, False)))
    ctx = Context()
    sm.show_tables(ctx)
    lines = ctx.output().splitlines()
    separator = "+" + "-" * 18 + "+"
    assert lines[0] == separator and lines[2] == separator and lines[-1] == separator
    assert len(lines) == 6
    assert lines[1].strip("| ") == "Tables"
    assert [line.strip("| ") for line in lines[3:5]] == ["alpha", "beta"]
    assert (tmp_path / "output.txt").read_text() == "| Tables |\n| alpha |\n| beta |\n"

    sm.show_tables(Context())
    assert (tmp_path / "output.txt").read_text().count("| Tables |\n") == 2


def test_desc_missing_table(sm):
    with pytest.raises(TableNotFoundError):
        sm.desc_table("nothing", Context())


def test_col_def_fields():
    col = ColDef("id", ColType.TYPE_INT, 4)
    assert (col.name, col.type, col.len) == ("id", ColType.TYPE_INT, 4)