"""Catalog metadata for columns, indexes, tables and the database."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .defs import ColType
from .errors import (
    ColumnNotFoundError,
    IndexNotFoundError,
    InvalidMetaDataError,
    TableNotFoundError,
)


@dataclass
class ColMeta:
    """Description of one column of a table."""

    tab_name: str
    name: str
    type: ColType
    len: int
    offset: int
    index: bool = False


@dataclass
class IndexMeta:
    """Description of an index over one or more columns."""

    tab_name: str
    col_tot_len: int
    col_num: int
    cols: list[ColMeta] = field(default_factory=list)

    def col_names(self) -> list[str]:
        return [col.name for col in self.cols]


@dataclass
class TabMeta:
    """Description of a table: its columns and indexes."""

    name: str = ""
    cols: list[ColMeta] = field(default_factory=list)
    indexes: list[IndexMeta] = field(default_factory=list)

    def is_col(self, col_name: str) -> bool:
        return any(col.name == col_name for col in self.cols)

    def is_index(self, col_names: Sequence[str]) -> bool:
        return any(index.col_names() == list(col_names) for index in self.indexes)

    def get_index_meta(self, col_names: Sequence[str]) -> IndexMeta:
        for index in self.indexes:
            if index.col_names() == list(col_names):
                return index
        raise IndexNotFoundError(self.name, col_names)

    def get_col(self, col_name: str) -> ColMeta:
        for col in self.cols:
            if col.name == col_name:
                return col
        raise ColumnNotFoundError(col_name)


@dataclass
class DbMeta:
    """The catalog of a database: its name and tables."""

    name: str = ""
    tabs: dict[str, TabMeta] = field(default_factory=dict)

    def is_table(self, tab_name: str) -> bool:
        return tab_name in self.tabs

    def set_tab_meta(self, tab_name: str, meta: TabMeta) -> None:
        self.tabs[tab_name] = meta

    def get_table(self, tab_name: str) -> TabMeta:
        try:
            return self.tabs[tab_name]
        except KeyError:
            raise TableNotFoundError(tab_name) from None

    def dumps(self) -> str:
        """Serialise the catalog to its text form, tables in name order."""
        parts = [f"{self.name}\n{len(self.tabs)}\n"]
        for _, tab in sorted(self.tabs.items()):
            parts.append(_dump_tab(tab) + "\n")
        return "".join(parts)

    @classmethod
    def loads(cls, text: str) -> DbMeta:
        """Parse a catalog from its text form."""
        tokens = iter(text.split())
        db = cls()
        try:
            db.name = next(tokens)
            for _ in range(int(next(tokens))):
                tab = _read_tab(tokens)
                db.tabs[tab.name] = tab
        except (StopIteration, ValueError) as exc:
            raise InvalidMetaDataError(db.name) from exc
        return db


def _dump_col(col: ColMeta) -> str:
    return f"{col.tab_name} {col.name} {int(col.type)} {col.len} {col.offset} {int(col.index)}"


def _dump_index(index: IndexMeta) -> str:
    head = f"{index.tab_name} {index.col_tot_len} {index.col_num}"
    return head + "".join("\n" + _dump_col(col) for col in index.cols)


def _dump_tab(tab: TabMeta) -> str:
    lines = [tab.name, str(len(tab.cols))]
    lines.extend(_dump_col(col) for col in tab.cols)
    lines.append(str(len(tab.indexes)))
    lines.extend(_dump_index(index) for index in tab.indexes)
    return "\n".join(lines) + "\n"


def _read_bool(token: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(f"not a boolean: {token!r}")
    return token == "1"


def _read_col(tokens: Iterator[str]) -> ColMeta:
    return ColMeta(
        tab_name=next(tokens),
        name=next(tokens),
        type=ColType(int(next(tokens))),
        len=int(next(tokens)),
        offset=int(next(tokens)),
        index=_read_bool(next(tokens)),
    )


def _read_index(tokens: Iterator[str]) -> IndexMeta:
    index = IndexMeta(next(tokens), int(next(tokens)), int(next(tokens)))
    index.cols = [_read_col(tokens) for _ in range(index.col_num)]
    return index


def _read_tab(tokens: Iterator[str]) -> TabMeta:
    tab = TabMeta(name=next(tokens))
    tab.cols = [_read_col(tokens) for _ in range(int(next(tokens)))]
    tab.indexes = [_read_index(tokens) for _ in range(int(next(tokens)))]
    return tab