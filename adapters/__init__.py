"""Database adapter layer: backend contract, registry and dialect SQL."""

from adapters.base import (
    AdapterConnectionError,
    AdapterError,
    DatabaseAdapter,
    NotInitializedError,
    QueryError,
    UnsupportedEngineError,
)
from adapters.factory import AdapterRegistry, create_adapter, register_adapter
from adapters.sql_renderer import SQLDialect, get_sql_dialect

__all__ = [
    "AdapterConnectionError",
    "AdapterError",
    "AdapterRegistry",
    "DatabaseAdapter",
    "NotInitializedError",
    "QueryError",
    "SQLDialect",
    "UnsupportedEngineError",
    "create_adapter",
    "get_sql_dialect",
    "register_adapter",
]
