from rmstore.defs import INVALID_PAGE_ID, PAGE_SIZE
from rmstore.page import Page, PageId


def test_page_id_defaults_to_invalid_page():
    assert PageId(3).page_no == INVALID_PAGE_ID


def test_page_id_str_format():
    assert str(PageId(3, 7)) == "{fd: 3 page_no: 7}"


def test_page_id_equality_and_hash():
    table = {PageId(1, 2): "a"}
    assert table[PageId(1, 2)] == "a"
    assert PageId(1, 2) == PageId(1, 2)
    assert PageId(1, 2) != PageId(2, 1)


def test_page_id_key_distinguishes_ids():
    assert PageId(1, 2).key() == PageId(1, 2).key()
    assert PageId(1, 2).key() != PageId(2, 1).key()
    assert PageId(0, 5).key() == 5


def test_new_page_is_zeroed_and_clean():
    page = Page()
    assert len(page.data) == PAGE_SIZE
    assert page.data == bytes(PAGE_SIZE)
    assert page.is_dirty is False
    assert page.pin_count == 0


def test_reset_zeroes_data():
    page = Page()
    page.data[:5] = b"Hello"
    page.reset()
    assert page.data == bytes(PAGE_SIZE)


def test_page_lsn_round_trip():
    page = Page()
    page.set_page_lsn(42)
    assert page.page_lsn() == 42
    page.set_page_lsn(-1)
    assert page.page_lsn() == -1


def test_page_lsn_occupies_header_bytes_only():
    page = Page()
    page.set_page_lsn(123456)
    assert page.data[Page.OFFSET_PAGE_HDR:] == bytes(PAGE_SIZE - Page.OFFSET_PAGE_HDR)
    assert page.page_lsn() == 123456