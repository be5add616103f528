# tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from ..errors import StorageReadError, StorageUnavailable, StorageWriteError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    One table, created on first use:
        tasks(id INTEGER PRIMARY KEY, name TEXT NOT NULL, status INTEGER NOT NULL DEFAULT 0)

    Connection model:
    - a single connection is opened in __init__ and held until close()
    - every public method is one statement, committed immediately

    Name-based operations affect every row with an exactly matching name
    (there is no uniqueness constraint on name). Use the *_by_id variants
    to target a single row.
    """

    def __init__(self, db_path: str | Path = "data/tasks.db") -> None:
        self._db_path = Path(db_path)
        conn: sqlite3.Connection | None = None
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path))
            conn.row_factory = sqlite3.Row
            self._conn = conn
            self._ensure_schema()
        except (OSError, sqlite3.Error) as exc:
            if conn is not None:
                conn.close()
            logger.error("TaskStore unavailable db=%s: %s", self._db_path, exc)
            raise StorageUnavailable(
                f"cannot open task database at {self._db_path}: {exc}",
                db_path=str(self._db_path),
            ) from exc

        try:
            total = self.count_tasks()
        except StorageReadError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        self._conn.close()
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    def _ensure_schema(self) -> None:
        cur = self._conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                status INTEGER NOT NULL DEFAULT 0
            )
            """
        )
        self._conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            name=str(row["name"]),
            status=bool(row["status"]),
        )

    def _write(self, op: str, sql: str, params: tuple) -> sqlite3.Cursor:
        try:
            cur = self._conn.cursor()
            cur.execute(sql, params)
            self._conn.commit()
            return cur
        except (sqlite3.Error, UnicodeError) as exc:
            logger.error("TaskStore %s failed db=%s: %s", op, self._db_path, exc)
            raise StorageWriteError(f"{op} failed: {exc}", op=op) from exc

    # ---- public API ----

    def count_tasks(self) -> int:
        try:
            cur = self._conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        except sqlite3.Error as exc:
            raise StorageReadError(f"count failed: {exc}", op="count") from exc

    def add_task(self, task: Task) -> int:
        cur = self._write(
            "add",
            "INSERT INTO tasks (name, status) VALUES (?, ?)",
            (task.name, int(task.status)),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise StorageWriteError("SQLite did not return lastrowid for tasks insert", op="add")
        task_id = int(rowid)
        logger.debug("Task added id=%s name=%r status=%s", task_id, task.name, task.status)
        return task_id

    def list_tasks(self) -> list[Task]:
        try:
            cur = self._conn.cursor()
            cur.execute("SELECT id, name, status FROM tasks ORDER BY id")
            return [self._row_to_task(r) for r in cur.fetchall()]
        except (sqlite3.Error, UnicodeError) as exc:
            logger.error("TaskStore list failed db=%s: %s", self._db_path, exc)
            raise StorageReadError(f"list failed: {exc}", op="list") from exc

    def remove_task(self, name: str) -> int:
        """Delete every task named exactly `name`. Returns the number of rows removed."""
        cur = self._write("remove", "DELETE FROM tasks WHERE name = ?", (name,))
        logger.debug("Task removed name=%r rows=%s", name, cur.rowcount)
        return cur.rowcount

    def mark_complete(self, name: str) -> int:
        """Mark every task named exactly `name` complete. Returns the number of matched rows."""
        cur = self._write("mark_complete", "UPDATE tasks SET status = 1 WHERE name = ?", (name,))
        logger.debug("Task completed name=%r rows=%s", name, cur.rowcount)
        return cur.rowcount

    def remove_task_by_id(self, task_id: int) -> bool:
        cur = self._write("remove", "DELETE FROM tasks WHERE id = ?", (int(task_id),))
        logger.debug("Task removed id=%s rows=%s", task_id, cur.rowcount)
        return cur.rowcount == 1

    def mark_complete_by_id(self, task_id: int) -> bool:
        cur = self._write(
            "mark_complete", "UPDATE tasks SET status = 1 WHERE id = ?", (int(task_id),)
        )
        logger.debug("Task completed id=%s rows=%s", task_id, cur.rowcount)
        return cur.rowcount == 1
