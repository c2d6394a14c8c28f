"""Tabular rendering of result rows into a context's output buffer."""

from __future__ import annotations

from collections.abc import Sequence

from .context import Context


class RecordPrinter:
    """Prints rows of a fixed number of columns as an ASCII table."""

    COL_WIDTH = 16

    def __init__(self, num_cols: int) -> None:
        if num_cols <= 0:
            raise ValueError("a table needs at least one column")
        self.num_cols = num_cols

    def print_separator(self, context: Context) -> None:
        for _ in range(self.num_cols):
            context.try_write("+" + "-" * (self.COL_WIDTH + 2))
        context.try_write("+\n")

    def print_record(self, rec_str: Sequence[str], context: Context) -> None:
        if len(rec_str) != self.num_cols:
            raise ValueError(f"expected {self.num_cols} columns, got {len(rec_str)}")
        for col in rec_str:
            if len(col) > self.COL_WIDTH:
                col = col[: self.COL_WIDTH - 3] + "..."
            context.try_write(f"| {col:>{self.COL_WIDTH}} ")
        # The row terminator is dropped silently when it does not fit.
        if not context.ellipsis and context.fits("|\n"):
            context.write("|\n")

    @staticmethod
    def print_record_count(num_rec: int, context: Context) -> None:
        text = "... ...\n" if context.ellipsis else ""
        text += f"Total record(s): {num_rec}\n"
        context.write(text)