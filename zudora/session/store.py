from __future__ import annotations

import os
import sqlite3
import threading
from datetime import datetime
from typing import Protocol

from .models import HistoryEntry


class HistoryStore(Protocol):
    def add(self, entry: HistoryEntry) -> None: ...

    def entries(self) -> list[HistoryEntry]:
        """Return saved entries, newest first."""

    def clear(self) -> None: ...


class InMemoryHistoryStore:
    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()

    def add(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.insert(0, entry)

    def entries(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class SqliteHistoryStore:
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._conn_lock = threading.Lock()

    def _get_connection(self) -> sqlite3.Connection:
        with self._conn_lock:
            if self._conn is not None:
                return self._conn

            directory = os.path.dirname(self._db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            self._conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            self._conn.execute("PRAGMA journal_mode=WAL;")
            self._conn.execute("PRAGMA synchronous=NORMAL;")
            self._conn.execute("PRAGMA busy_timeout=5000;")
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS chat_history (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    entry_id TEXT NOT NULL UNIQUE,
                    title TEXT NOT NULL,
                    created_at TEXT NOT NULL
                );
                """
            )
            return self._conn

    def add(self, entry: HistoryEntry) -> None:
        conn = self._get_connection()
        with self._conn_lock:
            conn.execute(
                "INSERT INTO chat_history (entry_id, title, created_at) VALUES (?, ?, ?)",
                (entry.id, entry.title, entry.timestamp.isoformat()),
            )

    def entries(self) -> list[HistoryEntry]:
        conn = self._get_connection()
        with self._conn_lock:
            cur = conn.execute(
                "SELECT entry_id, title, created_at FROM chat_history ORDER BY seq DESC"
            )
            rows = cur.fetchall()
        return [
            HistoryEntry(id=row[0], title=row[1], timestamp=datetime.fromisoformat(row[2]))
            for row in rows
        ]

    def clear(self) -> None:
        conn = self._get_connection()
        with self._conn_lock:
            conn.execute("DELETE FROM chat_history")

    def close(self) -> None:
        with self._conn_lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
