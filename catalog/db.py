from __future__ import annotations

# catalog/db.py
import sqlite3
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def get_conn(db_path: str) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection to one catalog database.
    Rows come back as sqlite3.Row; the connection is autocommit and is closed on exit.
    """
    conn = sqlite3.connect(
        db_path,
        check_same_thread=False,
        isolation_level=None,
    )
    try:
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()
