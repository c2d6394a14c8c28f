"""System manager: database directories, catalog and schema display."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from typing import Any

from .buffer_pool import BufferPoolManager
from .context import Context
from .defs import DB_META_NAME, LOG_FILE_NAME, ColType, coltype2str
from .disk_manager import DiskManager
from .errors import DatabaseExistsError, DatabaseNotFoundError, UnixError
from .meta import DbMeta
from .record_printer import RecordPrinter


@dataclass
class ColDef:
    """Definition of a column in a CREATE TABLE statement."""

    name: str
    type: ColType
    len: int


@dataclass
class SmManager:
    """Manages databases on disk and the catalog of the open database."""

    disk_manager: DiskManager
    buffer_pool_manager: BufferPoolManager | None = None
    rm_manager: Any = None
    ix_manager: Any = None
    db: DbMeta = field(default_factory=DbMeta)
    fhs: dict[str, Any] = field(default_factory=dict)
    ihs: dict[str, Any] = field(default_factory=dict)
    db_dir: str = "."
    output_path: str = "output.txt"

    def is_dir(self, db_name: str) -> bool:
        return os.path.isdir(db_name)

    def create_db(self, db_name: str) -> None:
        """Create the database directory with an empty catalog and a log file."""
        if self.is_dir(db_name):
            raise DatabaseExistsError(db_name)
        try:
            os.mkdir(db_name)
            with open(os.path.join(db_name, DB_META_NAME), "w", encoding="utf-8") as fh:
                fh.write(DbMeta(name=db_name).dumps())
        except OSError as exc:
            raise UnixError(exc) from exc
        self.disk_manager.create_file(os.path.join(db_name, LOG_FILE_NAME))

    def drop_db(self, db_name: str) -> None:
        """Remove the database directory and everything in it."""
        if not self.is_dir(db_name):
            raise DatabaseNotFoundError(db_name)
        try:
            shutil.rmtree(db_name)
        except OSError as exc:
            raise UnixError(exc) from exc

    def flush_meta(self) -> None:
        """Write the catalog of the open database to its metadata file."""
        try:
            with open(os.path.join(self.db_dir, DB_META_NAME), "w", encoding="utf-8") as fh:
                fh.write(self.db.dumps())
        except OSError as exc:
            raise UnixError(exc) from exc

    def show_tables(self, context: Context) -> None:
        """List the tables into the context and append them to the output file."""
        printer = RecordPrinter(1)
        printer.print_separator(context)
        printer.print_record(["Tables"], context)
        printer.print_separator(context)
        lines = ["| Tables |\n"]
        for name in sorted(self.db.tabs):
            tab = self.db.tabs[name]
            printer.print_record([tab.name], context)
            lines.append(f"| {tab.name} |\n")
        printer.print_separator(context)
        with open(self.output_path, "a", encoding="utf-8") as fh:
            fh.writelines(lines)

    def desc_table(self, tab_name: str, context: Context) -> None:
        """Describe the columns of a table into the context."""
        tab = self.db.get_table(tab_name)
        captions = ["Field", "Type", "Index"]
        printer = RecordPrinter(len(captions))
        printer.print_separator(context)
        printer.print_record(captions, context)
        printer.print_separator(context)
        for col in tab.cols:
            printer.print_record(
                [col.name, coltype2str(col.type), "YES" if col.index else "NO"], context
            )
        printer.print_separator(context)