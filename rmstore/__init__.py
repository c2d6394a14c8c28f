"""Storage core of a small relational database: disk pages, an LRU buffer pool, catalog metadata, result printing and transaction records."""

__version__ = "0.1.0"