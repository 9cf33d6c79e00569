from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from adapters.base import AdapterConnectionError, DatabaseAdapter, NotInitializedError, QueryError


INSIGHTS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS mcp_insights (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    insight TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""


def _to_value(raw: Any) -> Any:
    # sqlite3 yields str/int/float/bytes/None; memoryview shows up for some blob paths.
    if isinstance(raw, memoryview):
        return raw.tobytes()
    return raw


class SQLiteAdapter(DatabaseAdapter):
    engine = "sqlite"

    def __init__(self, connection_info: Any):
        super().__init__(connection_info)
        raw = str(connection_info)
        # mkdir and connect must see the same resolved path.
        self._db_path = raw if raw == ":memory:" else str(Path(raw).expanduser())
        self._conn: Optional[sqlite3.Connection] = None

    def open(self) -> None:
        logger.info("Opening SQLite database at: {}", self._db_path)
        if self._db_path != ":memory:":
            parent = Path(self._db_path).parent
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise AdapterConnectionError(f"Cannot create directory for SQLite database: {exc}") from exc
        try:
            # Autocommit; the service layer does no transaction management.
            conn = sqlite3.connect(self._db_path, isolation_level=None, check_same_thread=False)
        except sqlite3.Error as exc:
            raise AdapterConnectionError(str(exc)) from exc

        self._conn = conn
        try:
            self.execute(INSIGHTS_TABLE_SQL)
        except QueryError as exc:
            self.close()
            raise AdapterConnectionError(str(exc)) from exc

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed SQLite database at: {}", self._db_path)

    def _require_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise NotInitializedError("Database connection is not open. Call open() first.")
        return self._conn

    def query(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        conn = self._require_connection()
        logger.debug("sqlite query: {}", sql)
        try:
            cur = conn.execute(sql, params or {})
            try:
                if cur.description is None:
                    return []
                columns = [desc[0] for desc in cur.description]
                rows: List[Dict[str, Any]] = []
                for raw_row in cur:
                    rows.append({columns[i]: _to_value(raw_row[i]) for i in range(len(columns))})
                return rows
            finally:
                cur.close()
        except sqlite3.Error as exc:
            raise QueryError(str(exc)) from exc

    def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        conn = self._require_connection()
        logger.debug("sqlite execute: {}", sql)
        try:
            cur = conn.execute(sql, params or {})
            try:
                return max(cur.rowcount, 0)
            finally:
                cur.close()
        except sqlite3.Error as exc:
            raise QueryError(str(exc)) from exc
