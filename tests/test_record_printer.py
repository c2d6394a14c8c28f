import pytest

from rmstore.context import Context
from rmstore.defs import BUFFER_LENGTH
from rmstore.record_printer import RecordPrinter


def test_zero_columns_rejected():
    with pytest.raises(ValueError):
        RecordPrinter(0)


def test_separator_one_column():
    ctx = Context()
    RecordPrinter(1).print_separator(ctx)
    assert ctx.output() == "+------------------+\n"


def test_record_right_aligned():
    ctx = Context()
    RecordPrinter(1).print_record(["Tables"], ctx)
    assert ctx.output() == "|           Tables |\n"


def test_long_value_truncated():
    ctx = Context()
    RecordPrinter(1).print_record(["abcdefghijklmnopqrstu"], ctx)
    assert ctx.output() == "| abcdefghijklm... |\n"


def test_wrong_column_count_rejected():
    with pytest.raises(ValueError):
        RecordPrinter(2).print_record(["a"], Context())


def test_separator_and_record_line_widths_agree():
    ctx_sep, ctx_rec = Context(), Context()
    printer = RecordPrinter(3)
    printer.print_separator(ctx_sep)
    printer.print_record(["a", "b", "c"], ctx_rec)
    assert len(ctx_sep.output()) == len(ctx_rec.output())
    assert ctx_rec.output().count("|") == 4


def test_record_count_without_ellipsis():
    ctx = Context()
    RecordPrinter.print_record_count(3, ctx)
    assert ctx.output() == "Total record(s): 3\n"


def test_overflow_cuts_output_and_adds_ellipsis():
    ctx = Context()
    printer = RecordPrinter(1)
    for i in range(500):
        printer.print_record([str(i)], ctx)
    RecordPrinter.print_record_count(500, ctx)
    out = ctx.output()
    assert ctx.ellipsis is True
    assert out.endswith("... ...\nTotal record(s): 500\n")
    assert len(out.encode()) < BUFFER_LENGTH