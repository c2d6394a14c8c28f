# rmstore

The storage layer of a small relational database engine. It is written in plain Python and has no runtime dependencies.

## What it provides

- **Pages and disk I/O.** `rmstore.page.PageId` identifies a page by file descriptor and page number. `rmstore.page.Page` is a 4 KB frame with `data`, `is_dirty` and `pin_count`, and it reads and writes the page LSN kept in the first four bytes. `rmstore.disk_manager.DiskManager` handles several jobs:
  - reads and writes pages of open files;
  - creates, destroys, opens and closes files;
  - creates and removes directories;
  - hands out page numbers for each file (`allocate_page`, `set_fd2pageno`, `get_fd2pageno`);
  - appends to and reads from the log file `db.log` (`write_log`, `read_log`). `read_log` returns `None` when the offset is past the end of the log.
- **Buffer pool.** `rmstore.buffer_pool.BufferPoolManager` keeps a fixed number of frames in memory and provides `fetch_page`, `new_page`, `unpin_page`, `flush_page`, `delete_page` and `flush_all_pages`. When no frame is free, it evicts an unpinned frame chosen by `rmstore.replacer.LRUReplacer`. `fetch_page` and `new_page` return `None` when every frame is pinned. `flush_all_pages` writes back every dirty page in the pool, not only the pages of the file it is given.
- **Catalog metadata.** `rmstore.meta` provides `ColMeta`, `IndexMeta`, `TabMeta` and `DbMeta`. `DbMeta.dumps()` and `DbMeta.loads()` write and read the plain-text `db.meta` format. `loads` raises `InvalidMetaDataError` on malformed input.
- **System manager.** `rmstore.sm_manager.SmManager` provides:
  - `create_db`, which makes a database directory with an empty `db.meta` and a `db.log`;
  - `drop_db`, which removes a database directory;
  - `flush_meta`, which writes the in-memory catalog (`SmManager.db`) to `db.meta` in `db_dir`;
  - `show_tables` and `desc_table`, which render tables into a `rmstore.context.Context` through `rmstore.record_printer.RecordPrinter`. `show_tables` also appends the table list to `output_path` (`output.txt` by default).
- **Output context.** `rmstore.context.Context` collects the output text in a buffer of fixed capacity (8192 bytes by default). Once the buffer fills, further rows are dropped and `ellipsis` is set. `RecordPrinter.print_record_count` then adds a `... ...` line before the total.
- **Query values.** `rmstore.common` provides `TabCol`, `Value`, `CompOp`, `Condition` and `SetClause`. `Value.to_raw(length)` builds the fixed-width on-disk bytes of a value. It raises `StringOverflowError` for strings that are too long.
- **Transactions.** `rmstore.transaction` provides `Transaction`, `WriteRecord`, `LockDataId` (for table and record locks), the state and isolation-level enums, and `TransactionAbortException`.

## Errors

Engine errors are subclasses of `rmstore.errors.RMDBError`, and their messages start with `Error: `. Failed operating-system calls raise `UnixError`. Files that are missing or already present raise `RMDBFileNotFoundError` or `RMDBFileExistsError`. Invalid arguments raise `ValueError`. Examples are a descriptor out of range in `allocate_page`, a row with the wrong number of columns in `RecordPrinter`, or a wrong column width for an INT or FLOAT in `Value.to_raw`.

## Installation

```
pip install .
```

## Example

```python
from rmstore.disk_manager import DiskManager
from rmstore.buffer_pool import BufferPoolManager

disk = DiskManager()
disk.create_file("table.dat")
fd = disk.open_file("table.dat")

pool = BufferPoolManager(10, disk)
page = pool.new_page(fd)
page.data[:5] = b"Hello"
pool.unpin_page(page.id, True)
pool.flush_all_pages(fd)

disk.close_file(fd)
```

The LRU replacer can also be used by itself:

```python
from rmstore.replacer import LRUReplacer

lru = LRUReplacer(7)
for frame in (1, 2, 3):
    lru.unpin(frame)
lru.victim()   # 1, the least recently unpinned frame
lru.size()     # 2
```

Rendering a table description:

```python
from rmstore.context import Context
from rmstore.defs import ColType
from rmstore.disk_manager import DiskManager
from rmstore.meta import ColMeta, TabMeta
from rmstore.sm_manager import SmManager

sm = SmManager(DiskManager())
sm.db.set_tab_meta("t", TabMeta("t", [ColMeta("t", "id", ColType.TYPE_INT, 4, 0)]))
ctx = Context()
sm.desc_table("t", ctx)
print(ctx.output())
```

## What it does not do

This package is a storage layer only. It does not include:

- an SQL parser, planner or executor;
- a network server or command-line client;
- a record file manager or indexes;
- a lock manager, transaction manager, or log recovery.

`SmManager` does not open a database or create and drop tables or indexes. Its `db`, `fhs` and `ihs` attributes are populated by the caller. `Transaction` and `LockDataId` only record state; nothing in the package acquires locks or rolls back writes.

## Running the tests

```
pip install .[test]
pytest
```