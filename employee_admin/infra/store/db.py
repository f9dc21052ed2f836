from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

SCHEMA_VERSION = 1


def openEmployeeDb(dbPath: str) -> sqlite3.Connection:
    """
    Открывает/создаёт SQLite БД сотрудников с нужными PRAGMA/timeout.
    """
    if dbPath != ":memory:":
        Path(dbPath).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(dbPath, timeout=5.0)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    if dbPath != ":memory:":
        conn.execute("PRAGMA journal_mode = WAL")
    conn.execute("PRAGMA synchronous = NORMAL")
    conn.execute("PRAGMA busy_timeout = 5000")
    return conn


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[None]:
    """
    Назначение:
        Явная транзакция: commit при успехе, rollback при любой ошибке.
    """
    if not conn.in_transaction:
        conn.execute("BEGIN")
    try:
        yield
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def ensure_schema(conn: sqlite3.Connection) -> int:
    """
    Назначение:
        Создать таблицы meta и employees, если их нет.

    Выходные данные:
        int: текущая версия схемы.
    """
    with transaction(conn):
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS meta (
                key TEXT PRIMARY KEY,
                value TEXT
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS employees (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                code TEXT NOT NULL UNIQUE,
                name TEXT NOT NULL,
                password TEXT NOT NULL,
                admin_flag TEXT NULL,
                created_at TEXT NULL,
                updated_at TEXT NULL,
                delete_flag TEXT NULL
            )
            """
        )
        row = conn.execute("SELECT value FROM meta WHERE key='schema_version'").fetchone()
        if row is None:
            conn.execute(
                "INSERT INTO meta(key, value) VALUES ('schema_version', ?)",
                (str(SCHEMA_VERSION),),
            )
            return SCHEMA_VERSION
        return int(row[0])
