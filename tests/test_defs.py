import pytest

from rmstore.defs import ColType, RecScan, Rid, coltype2str


def test_rid_equality_and_hash():
    assert Rid(1, 2) == Rid(1, 2)
    assert Rid(1, 2) != Rid(2, 1)
    assert len({Rid(1, 2), Rid(1, 2), Rid(1, 3)}) == 2


@pytest.mark.parametrize(
    "col_type, name",
    [(ColType.TYPE_INT, "INT"), (ColType.TYPE_FLOAT, "FLOAT"), (ColType.TYPE_STRING, "STRING")],
)
def test_coltype2str(col_type, name):
    assert coltype2str(col_type) == name


def test_coltype2str_accepts_int_values():
    assert coltype2str(int(ColType.TYPE_STRING)) == coltype2str(ColType.TYPE_STRING)


def test_coltype2str_unknown():
    with pytest.raises(ValueError):
        coltype2str(99)


def test_recscan_is_abstract():
    with pytest.raises(TypeError):
        RecScan()


class _ListScan(RecScan):
    def __init__(self, rids):
        self._rids = list(rids)
        self._pos = 0

    def next(self):
        self._pos += 1

    def is_end(self):
        return self._pos >= len(self._rids)

    def rid(self):
        return self._rids[self._pos]


@pytest.mark.parametrize(
    "pairs",
    [[], [(1, 0), (1, 1), (2, 0)]],
)
def test_recscan_iteration_yields_all_rids(pairs):
    rids = [Rid(page_no, slot_no) for page_no, slot_no in pairs]
    scan = _ListScan(rids)
    assert list(scan) == rids
    assert scan.is_end() is True