"""Active-database context shared by every SQL tool.

A ``DatabaseService`` holds at most one open adapter at a time. Hosts create
one instance, call ``initialize`` once at startup and ``close`` at shutdown,
and pass the instance to each tool call.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from loguru import logger

from adapters.base import DatabaseAdapter, NotInitializedError
from adapters.factory import AdapterRegistry, default_registry, normalize_engine
from adapters.sql_renderer import display_name, get_sql_dialect


class DatabaseService:
    def __init__(self, registry: Optional[AdapterRegistry] = None):
        self._registry = registry or default_registry
        self._adapter: Optional[DatabaseAdapter] = None
        self._db_type = ""
        self._connection_info: Any = None
        # Serializes handle swaps against in-flight calls; a single sqlite3
        # connection is also not safe for concurrent use across threads.
        self._lock = threading.RLock()

    @property
    def is_initialized(self) -> bool:
        return self._adapter is not None

    def initialize(self, connection_info: Any, db_type: str = "sqlite") -> None:
        engine = normalize_engine(db_type)
        adapter = self._registry.create(engine, connection_info)
        with self._lock:
            adapter.open()
            previous = self._adapter
            self._adapter = adapter
            self._db_type = engine
            self._connection_info = connection_info
            if previous is not None:
                logger.info("Replacing active {} database", previous.engine)
                previous.close()
        logger.info("Database initialized: type={} connection={}", engine, connection_info)

    def close(self) -> None:
        with self._lock:
            if self._adapter is None:
                return
            self._adapter.close()
            self._adapter = None
            self._db_type = ""
            self._connection_info = None

    def _require_adapter(self) -> DatabaseAdapter:
        if self._adapter is None:
            raise NotInitializedError("Database is not initialized. Call initialize() first.")
        return self._adapter

    def query(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        with self._lock:
            return self._require_adapter().query(sql, params)

    def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        with self._lock:
            return self._require_adapter().execute(sql, params)

    def get_metadata(self) -> Dict[str, Any]:
        with self._lock:
            if self._adapter is None:
                return {"type": "none", "name": "No database initialized"}
            return {
                "type": self._db_type,
                "name": display_name(self._db_type),
                "connectionInfo": self._connection_info,
            }

    def get_list_tables_query(self) -> str:
        with self._lock:
            self._require_adapter()
            return get_sql_dialect(self._db_type).list_tables_sql()

    def get_describe_table_query(self, table_name: str) -> str:
        with self._lock:
            self._require_adapter()
            return get_sql_dialect(self._db_type).describe_table_sql(table_name)
