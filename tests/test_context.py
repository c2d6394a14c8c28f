from rmstore.context import RECORD_COUNT_LENGTH, Context
from rmstore.defs import BUFFER_LENGTH


def test_default_capacity_is_buffer_length():
    assert Context().capacity == BUFFER_LENGTH


def test_try_write_appends_when_room():
    ctx = Context(capacity=50)
    assert ctx.try_write("abc") is True
    assert ctx.output() == "abc"
    assert ctx.offset == 3
    assert ctx.ellipsis is False


def test_try_write_refuses_and_marks_ellipsis():
    ctx = Context(capacity=50)
    ctx.try_write("abc")
    assert ctx.try_write("x" * 10) is False
    assert ctx.ellipsis is True
    assert ctx.output() == "abc"


def test_after_ellipsis_even_small_text_refused():
    ctx = Context(capacity=50)
    ctx.try_write("x" * 20)
    assert ctx.try_write("a") is False
    assert ctx.output() == ""


def test_footer_room_is_reserved():
    ctx = Context(capacity=RECORD_COUNT_LENGTH + 5)
    assert ctx.try_write("abcd") is True
    assert ctx.try_write("e") is False


def test_write_is_unconditional():
    ctx = Context(capacity=RECORD_COUNT_LENGTH + 1)
    ctx.ellipsis = True
    ctx.write("hello")
    assert ctx.output() == "hello"
    assert ctx.offset == 5


def test_context_keeps_managers():
    ctx = Context("locks", "log", "txn")
    assert (ctx.lock_mgr, ctx.log_mgr, ctx.txn) == ("locks", "log", "txn")